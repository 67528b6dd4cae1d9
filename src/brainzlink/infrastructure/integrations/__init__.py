"""HTTP integrations with the MusicBrainz web service and the Cover Art Archive."""

from brainzlink.infrastructure.integrations.envelope import decode_envelope, decode_payload
from brainzlink.infrastructure.integrations.musicbrainz_client import (
    HTTP_RATELIMIT_CODE,
    MusicBrainzClient,
    get_default_client,
    set_default_client,
)

__all__ = [
    "HTTP_RATELIMIT_CODE",
    "MusicBrainzClient",
    "decode_envelope",
    "decode_payload",
    "get_default_client",
    "set_default_client",
]
