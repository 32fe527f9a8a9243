class RequestArgsError(ValueError):
    """The GraphQL arguments could not be read from the HTTP request."""


class MediaTypeError(RequestArgsError):
    """The Content-Type header is not a valid media type."""
