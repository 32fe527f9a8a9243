from typing import Any
import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)
from starlette.requests import Request


SIMPLE_QUERY = "{ hello }"
ARGS_QUERY = "query ($arg: String!) { echo(arg: $arg) }"


def build_schema() -> GraphQLSchema:
    return GraphQLSchema(
        query=GraphQLObjectType(
            "Query",
            {
                "hello": GraphQLField(
                    GraphQLString, resolve=lambda _obj, _info: "Hello world!"
                ),
                "echo": GraphQLField(
                    GraphQLNonNull(GraphQLString),
                    args={"arg": GraphQLArgument(GraphQLNonNull(GraphQLString))},
                    resolve=lambda _obj, _info, arg: arg,
                ),
            },
        )
    )


def make_request(
    method: str = "GET",
    query_string: str = "",
    headers: dict[str, str] | None = None,
    body: str | bytes = b"",
) -> Request:
    payload = body.encode("utf-8") if isinstance(body, str) else body
    scope: dict[str, Any] = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("example.com", 80),
        "root_path": "",
        "path": "/",
        "query_string": query_string.encode("latin-1"),
        "headers": [
            (key.lower().encode("latin-1"), value.encode("latin-1"))
            for key, value in (headers or {}).items()
        ],
    }
    sent = False

    async def receive():
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": payload, "more_body": False}

    return Request(scope, receive)


@pytest.fixture(scope="session")
def schema() -> GraphQLSchema:
    return build_schema()
