"""Envelope decoding for MusicBrainz responses.

Hey future me - every WS/2 JSON response is one of two shapes:

    success:  whatever the entity/collection looks like
    error:    {"error": "Not Found", "help": "For usage, please see: ..."}

Non-2xx statuses still carry one of these bodies, so we decide by SHAPE, not by
status code. The success shape is tried FIRST and the error shape only when the
success parse fails. That ordering is safe because every success parser needs a
key the error envelope never has (entities need "id", browse needs
"{x}-count", search needs "created", cover art needs "images").

Body that is not JSON, or JSON matching neither shape -> DecodingError. We never
turn an unreadable body into NotFound.
"""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from brainzlink.domain.exceptions import (
    NOT_FOUND_MESSAGE,
    BrainzLinkError,
    DecodingError,
    NotFoundError,
    ServiceError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Raised by the success parsers when the payload has the wrong shape
# (pydantic's ValidationError is a ValueError).
SHAPE_ERRORS = (ValueError, KeyError, TypeError)


class ServiceErrorRecord(BaseModel):
    """The service's own error body."""

    model_config = ConfigDict(extra="ignore")

    error: str
    help: str

    @property
    def is_not_found(self) -> bool:
        """Exact match on the service's "Not Found" message."""
        return self.error == NOT_FOUND_MESSAGE

    def into_error(self, request: str) -> BrainzLinkError:
        """Classify into NotFoundError or the generic ServiceError."""
        if self.is_not_found:
            return NotFoundError(request)
        return ServiceError(self.error, self.help, request=request)


def decode_payload(payload: Any, parse: Callable[[Any], T], request: str) -> T:
    """Interpret an already parsed JSON payload.

    Args:
        payload: Parsed JSON
        parse: Success parser, raises ValueError/KeyError/TypeError on mismatch
        request: Request description (the URL) attached to errors

    Returns:
        The parsed success value

    Raises:
        NotFoundError: Error envelope with the "Not Found" message
        ServiceError: Any other error envelope
        DecodingError: Neither shape matched
    """
    try:
        return parse(payload)
    except SHAPE_ERRORS as success_error:
        try:
            record = ServiceErrorRecord.model_validate(payload)
        except ValidationError:
            raise DecodingError(request, f"unexpected response shape ({success_error})") from (
                success_error
            )

    logger.debug("MusicBrainz error envelope for %s: %s", request, record.error)
    raise record.into_error(request)


def decode_envelope(body: bytes | str, parse: Callable[[Any], T], request: str) -> T:
    """Decode a raw response body into the success value or a typed error.

    Raises:
        NotFoundError: Error envelope with the "Not Found" message
        ServiceError: Any other error envelope
        DecodingError: Body is not JSON or matches neither shape
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        raise DecodingError(request, f"body is not valid JSON ({e})", body=text[:500]) from e

    return decode_payload(payload, parse, request)


__all__ = ["SHAPE_ERRORS", "ServiceErrorRecord", "decode_envelope", "decode_payload"]
