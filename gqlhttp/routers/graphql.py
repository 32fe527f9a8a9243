from __future__ import annotations
from io import BytesIO
from logging import getLogger
from fastapi import Request, APIRouter
from fastapi.responses import Response, StreamingResponse
from graphql import print_schema
from gqlhttp.adapters.engine import execute
from gqlhttp.config.general import general
from gqlhttp.extractors.arguments import get_args_from_body, get_args_from_url
from gqlhttp.interfaces.errors import RequestArgsError
from gqlhttp.interfaces.schemas import Options


logger = getLogger(__name__)

ALLOWED_METHODS = "GET,POST"


async def process_graphql_from_url(request: Request, options: Options) -> Response:
    args = await get_args_from_url(request)
    return await execute({**options, **args.model_dump(exclude_unset=True)})


async def process_graphql_from_body(request: Request, options: Options) -> Response:
    args = await get_args_from_body(request)
    return await execute({**options, **args.model_dump(exclude_unset=True)})


async def process_graphql(request: Request, options: Options) -> Response:
    method = request.method.upper()
    rid = getattr(request.state, "request_id", "-")

    try:
        if method == "GET":
            logger.debug("rid=%s graphql from url", rid)
            return await process_graphql_from_url(request, options)

        if method == "POST":
            logger.debug("rid=%s graphql from body", rid)
            return await process_graphql_from_body(request, options)
    except RequestArgsError as err:
        logger.warning("rid=%s rejected graphql request: %s", rid, err)
        return Response(status_code=400)

    return Response(status_code=405, headers={"Allow": ALLOWED_METHODS})


def build_router(options: Options, prefix: str = general.GRAPHQL_PATH) -> APIRouter:
    router = APIRouter(prefix=prefix)

    async def graphql_request(request: Request):
        return await process_graphql(request, options)

    # no method list, so every method reaches process_graphql; add_route ignores the prefix
    router.add_route(prefix, graphql_request, include_in_schema=False)

    if general.SCHEMA_DOWNLOAD and "schema" in options:

        @router.get("/schema")
        async def graphql_schema():
            headers = {"Content-Disposition": 'attachment; filename="schema.gql"'}
            return StreamingResponse(
                BytesIO(print_schema(options["schema"]).encode()),
                media_type="text/plain",
                headers=headers,
            )

    return router
