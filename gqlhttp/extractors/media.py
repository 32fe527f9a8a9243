from __future__ import annotations
from re import compile as re_compile
from enum import Enum
from typing import NamedTuple
from gqlhttp.interfaces.errors import MediaTypeError


# RFC 7231 token and quoted-string grammar
TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
TYPE_PATTERN = re_compile(rf"{TOKEN}/{TOKEN}")
PARAM_PATTERN = re_compile(
    rf'; *({TOKEN}) *= *("(?:[\x0b\x20\x21\x23-\x5b\x5d-\x7e\x80-\xff]|\\[\x0b\x20-\xff])*"|{TOKEN}) *'
)
QUOTED_ESCAPE_PATTERN = re_compile(r"\\([\x0b\x20-\xff])")


class ContentType(str, Enum):
    GRAPHQL = "application/graphql"
    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"


class MediaType(NamedTuple):
    type: str
    parameters: dict[str, str]

    @property
    def charset(self) -> str:
        return self.parameters.get("charset", "utf-8")


def parse_media_type(header: str) -> MediaType:
    """Parse a Content-Type header value, raising MediaTypeError when malformed."""
    index = header.find(";")
    media = (header if index == -1 else header[:index]).strip()
    if TYPE_PATTERN.fullmatch(media) is None:
        raise MediaTypeError(f"invalid media type {header!r}")

    parameters: dict[str, str] = {}
    if index != -1:
        position = index
        for match in PARAM_PATTERN.finditer(header, index):
            if match.start() != position:
                break
            position = match.end()
            value = match.group(2)
            if value.startswith('"'):
                value = QUOTED_ESCAPE_PATTERN.sub(r"\1", value[1:-1])
            parameters[match.group(1).lower()] = value
        if position != len(header):
            raise MediaTypeError(f"invalid parameter format in {header!r}")

    return MediaType(media.lower(), parameters)


def classify(media: MediaType) -> ContentType | None:
    try:
        return ContentType(media.type)
    except ValueError:
        return None
