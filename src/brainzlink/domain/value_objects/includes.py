"""Include tokens and browse linking keys.

Hey future me - an "include" asks MusicBrainz to embed extra data in the response
(aliases, tags, relationships, ...). They go on the wire as ``inc=a+b+c``.

Three flavours exist:
1. SUBQUERY: embed a related collection ("releases", "tags", ...)
2. RELATIONSHIP: embed relationship edges of one category ("artist-rels", ...)
3. OTHER: raw passthrough for browse-only tokens ("user-tags", "user-genres", ...)

Which token is valid for which entity lives in domain/catalogue.py, NOT here.
These are just the vocabulary.
"""

from dataclasses import dataclass
from enum import Enum


class IncludeKind(str, Enum):
    """Flavour of an include token."""

    SUBQUERY = "subquery"
    RELATIONSHIP = "relationship"
    OTHER = "other"


class Subquery(str, Enum):
    """Related collections that can be embedded in a response.

    Values are the service's wire names (note "ratings" and "annotation").
    """

    URLS = "urls"
    AREAS = "areas"
    ARTIST_CREDITS = "artist-credits"
    LABELS = "labels"
    EVENTS = "events"
    PLACES = "places"
    DISCIDS = "discids"
    RELEASES = "releases"
    RELEASES_WITH_DISCIDS = "releases+discids"
    RELEASE_GROUPS = "release-groups"
    RECORDINGS = "recordings"
    ALIASES = "aliases"
    WORKS = "works"
    TAGS = "tags"
    RATINGS = "ratings"
    GENRES = "genres"
    ANNOTATION = "annotation"
    ARTISTS = "artists"
    SERIES = "series"
    INSTRUMENTS = "instruments"
    ISRCS = "isrcs"
    MEDIA = "media"

    def __str__(self) -> str:
        return self.value


class Relationship(str, Enum):
    """Relationship categories that can be embedded in a response."""

    AREA = "area-rels"
    ARTIST = "artist-rels"
    EVENT = "event-rels"
    GENRE = "genre-rels"
    INSTRUMENT = "instrument-rels"
    LABEL = "label-rels"
    PLACE = "place-rels"
    RECORDING = "recording-rels"
    RELEASE = "release-rels"
    RELEASE_GROUP = "release-group-rels"
    SERIES = "series-rels"
    URL = "url-rels"
    WORK = "work-rels"

    # Level relations pull relationships of nested entities
    RECORDING_LEVEL = "recording-level-rels"
    RELEASE_GROUP_LEVEL = "release-group-level-rels"
    WORK_LEVEL = "work-level-rels"

    def __str__(self) -> str:
        return self.value


# The thirteen "main" relationship categories every relatable entity accepts.
ENTITY_RELATIONSHIPS: tuple[Relationship, ...] = (
    Relationship.AREA,
    Relationship.ARTIST,
    Relationship.EVENT,
    Relationship.GENRE,
    Relationship.INSTRUMENT,
    Relationship.LABEL,
    Relationship.PLACE,
    Relationship.RECORDING,
    Relationship.RELEASE,
    Relationship.RELEASE_GROUP,
    Relationship.SERIES,
    Relationship.URL,
    Relationship.WORK,
)


@dataclass(frozen=True)
class Include:
    """One include token, immutable.

    Attributes:
        kind: Flavour of the token
        value: Wire string, e.g. "aliases" or "artist-rels"
    """

    kind: IncludeKind
    value: str

    @classmethod
    def subquery(cls, subquery: Subquery) -> "Include":
        """Token embedding a related collection."""
        return cls(IncludeKind.SUBQUERY, subquery.value)

    @classmethod
    def relationship(cls, relationship: Relationship) -> "Include":
        """Token embedding relationship edges of one category."""
        return cls(IncludeKind.RELATIONSHIP, relationship.value)

    @classmethod
    def other(cls, value: str) -> "Include":
        """Raw passthrough token."""
        return cls(IncludeKind.OTHER, value)

    def as_str(self) -> str:
        """Wire representation."""
        return self.value

    def __str__(self) -> str:
        return self.value


class BrowseBy(str, Enum):
    """Linking keys a browse request can be anchored on."""

    AREA = "area"
    ARTIST = "artist"
    COLLECTION = "collection"
    LABEL = "label"
    PLACE = "place"
    RECORDING = "recording"
    RELEASE = "release"
    RELEASE_GROUP = "release-group"
    TRACK = "track"
    TRACK_ARTIST = "track_artist"
    WORK = "work"

    def __str__(self) -> str:
        return self.value


__all__ = [
    "ENTITY_RELATIONSHIPS",
    "BrowseBy",
    "Include",
    "IncludeKind",
    "Relationship",
    "Subquery",
]
