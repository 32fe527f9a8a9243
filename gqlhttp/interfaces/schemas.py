from typing import Any, Callable, TypedDict
from pydantic import BaseModel
from pydantic.types import JsonValue
from graphql import GraphQLSchema


class RequestArgs(BaseModel):
    """GraphQL arguments carried by an HTTP request."""

    source: str = ""
    operation_name: str | None = None
    variable_values: dict[str, JsonValue] | None = None


class Options(TypedDict, total=False):
    """Engine options supplied by the caller, merged under the request args."""

    schema: GraphQLSchema
    root_value: Any
    context_value: Any
    field_resolver: Callable[..., Any]
    type_resolver: Callable[..., Any]
    middleware: Any
    execution_context_class: type
    is_awaitable: Callable[[Any], bool]
