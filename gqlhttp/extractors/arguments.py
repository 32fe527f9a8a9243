from __future__ import annotations
from typing import Any
from json import loads, JSONDecodeError
from pydantic import ValidationError
from starlette.datastructures import QueryParams
from starlette.requests import Request
from gqlhttp.interfaces.errors import RequestArgsError
from gqlhttp.interfaces.schemas import RequestArgs
from gqlhttp.extractors.media import ContentType, MediaType, classify, parse_media_type


def build_args(**fields: Any) -> RequestArgs:
    try:
        return RequestArgs(**fields)
    except ValidationError as err:
        raise RequestArgsError(f"invalid graphql arguments: {err}") from err


def parse_json(text: str | bytes) -> Any:
    try:
        return loads(text)
    except JSONDecodeError as err:
        raise RequestArgsError(f"malformed json: {err}") from err
    except RecursionError as err:
        raise RequestArgsError("json nested too deeply") from err


async def read_text(request: Request, media: MediaType) -> str:
    body = await request.body()
    try:
        return body.decode(media.charset, errors="replace")
    except LookupError as err:
        raise RequestArgsError(f"unknown charset {media.charset}") from err


def get_args_from_params(params: QueryParams) -> RequestArgs:
    """Read query, operationName and variables from URL style parameters."""
    variables = params.get("variables")
    return build_args(
        source=params.get("query") or "",
        operation_name=params.get("operationName"),
        variable_values=parse_json(variables) if variables else None,
    )


async def get_args_from_url(request: Request) -> RequestArgs:
    return get_args_from_params(request.query_params)


async def get_args_from_body(request: Request) -> RequestArgs:
    """
    Read the GraphQL arguments from the request body.

    Missing or unrecognized content types produce an empty source so the engine
    reports the problem; a malformed Content-Type header or malformed JSON raises
    RequestArgsError.
    """
    header = request.headers.get("content-type")
    if header is None:
        return build_args(source="")

    media = parse_media_type(header)
    content_type = classify(media)

    if content_type is ContentType.GRAPHQL:
        return build_args(source=await read_text(request, media))

    if content_type is ContentType.JSON:
        body = parse_json(await read_text(request, media))
        if body is None:
            raise RequestArgsError("json body is null")
        if not isinstance(body, dict):
            body = {}
        query = body.get("query")
        operation_name = body.get("operationName")
        return build_args(
            source=query if isinstance(query, str) else "",
            operation_name=operation_name if isinstance(operation_name, str) else None,
            variable_values=body.get("variables"),
        )

    if content_type is ContentType.FORM:
        return get_args_from_params(QueryParams(await read_text(request, media)))

    return build_args(source="")
