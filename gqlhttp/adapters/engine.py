from __future__ import annotations
from typing import Any
from json import dumps
from logging import getLogger
from graphql import graphql
from starlette.responses import Response


logger = getLogger(__name__)


def encode_result(formatted: dict[str, Any]) -> bytes:
    return dumps(formatted, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


# -------------------------------------------------------------------------------------------
# GRAPHQL ENGINE ADAPTER
# -------------------------------------------------------------------------------------------
async def execute(arguments: dict[str, Any]) -> Response:
    # Query level failures come back inside result.errors, never as exceptions
    result = await graphql(**arguments)
    if result.errors:
        logger.debug(
            "graphql execution finished with %s error(s) operation=%s",
            len(result.errors),
            arguments.get("operation_name"),
        )
    body = encode_result(result.formatted)
    return Response(
        content=body,
        headers={
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        },
    )
