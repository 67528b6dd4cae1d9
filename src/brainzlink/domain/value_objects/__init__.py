"""Value objects: include tokens, cover art targets, identifiers."""

from .coverart import CoverartResolution, CoverartSide, CoverartTarget
from .includes import (
    ENTITY_RELATIONSHIPS,
    BrowseBy,
    Include,
    IncludeKind,
    Relationship,
    Subquery,
)
from .mbid import is_mbid, mbid_from_url, parse_mbid

__all__ = [
    "ENTITY_RELATIONSHIPS",
    "BrowseBy",
    "CoverartResolution",
    "CoverartSide",
    "CoverartTarget",
    "Include",
    "IncludeKind",
    "Relationship",
    "Subquery",
    "is_mbid",
    "mbid_from_url",
    "parse_mbid",
]
