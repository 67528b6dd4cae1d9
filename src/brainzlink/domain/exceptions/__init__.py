"""Domain exceptions.

Every execute() call either returns the typed value or raises one of these.
Callers that only care about "did it work" can catch BrainzLinkError.
"""

from typing import Any

NOT_FOUND_MESSAGE = "Not Found"


class BrainzLinkError(Exception):
    """Base exception for all brainzlink errors."""

    # Hey future me, we keep message as an attribute so handlers can read it without
    # parsing str(exception). Don't raise this directly, always use a subclass.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class TransportError(BrainzLinkError):
    """Connection failure, timeout or malformed HTTP exchange.

    Never retried. The original httpx exception is kept as __cause__.
    """

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class RateLimitProtocolError(TransportError):
    """The service answered 503 without a usable ``retry-after`` header."""


class MaxRetriesExceededError(BrainzLinkError):
    """The service kept answering 503 until the retry cap was reached."""

    def __init__(self, url: str, retries: int) -> None:
        super().__init__(f"Max retries ({retries}) exceeded for {url}")
        self.url = url
        self.retries = retries


class NotFoundError(BrainzLinkError):
    """The service reported that the requested resource does not exist."""

    def __init__(self, request: str) -> None:
        super().__init__(f'Musicbrainz returned "Not found" for query "{request}"')
        self.request = request


class ServiceError(BrainzLinkError):
    """The service returned its own ``{error, help}`` envelope.

    Attributes:
        error: Service error message, verbatim
        help: Service help text, verbatim
    """

    def __init__(self, error: str, help: str, request: str | None = None) -> None:
        super().__init__(f"Musicbrainz returned an error: {error}")
        self.error = error
        self.help = help
        self.request = request


class DecodingError(BrainzLinkError):
    """The response body matched neither the success nor the error shape."""

    def __init__(self, request: str, detail: str, body: str | None = None) -> None:
        super().__init__(f"Could not decode response for {request}: {detail}")
        self.request = request
        self.detail = detail
        self.body = body


class QueryConfigurationError(BrainzLinkError):
    """A query or client was configured in a way the library cannot send.

    Raised locally, before any network call: missing id or linking key,
    include token outside the entity's table, pagination out of range,
    unsupported query kind for an entity, invalid User-Agent.
    """


__all__ = [
    "NOT_FOUND_MESSAGE",
    "BrainzLinkError",
    "DecodingError",
    "MaxRetriesExceededError",
    "NotFoundError",
    "QueryConfigurationError",
    "RateLimitProtocolError",
    "ServiceError",
    "TransportError",
]
