"""MusicBrainz identifier helpers."""

import re

_UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

MBID_PATTERN = re.compile(rf"^{_UUID}$")

# Entity pages on musicbrainz.org / listenbrainz.org ("album" is ListenBrainz' name
# for release groups).
MBID_URL_PATTERN = re.compile(
    r"(area|artist|event|instrument|label|place|recording|release|release-group"
    rf"|album|series|work|url)/({_UUID})"
)


def is_mbid(value: str) -> bool:
    """Check whether a string is a bare MusicBrainz identifier (UUID)."""
    return MBID_PATTERN.match(value) is not None


def mbid_from_url(value: str) -> str | None:
    """Extract the mbid from a known MusicBrainz/ListenBrainz entity URL.

    The entity type is not returned, only the identifier.
    """
    match = MBID_URL_PATTERN.search(value)
    if match is None:
        return None
    return match.group(2)


def parse_mbid(value: str) -> str | None:
    """Return the mbid held by a bare identifier or an entity URL."""
    if is_mbid(value):
        return value
    return mbid_from_url(value)


__all__ = ["MBID_PATTERN", "MBID_URL_PATTERN", "is_mbid", "mbid_from_url", "parse_mbid"]
