"""Entity catalogue - which entity supports which query, and how.

Hey future me - this is THE table the query builders consult. One row per entity
type with:
- the URL path segment ("release-group", not "releasegroup")
- include tokens allowed for fetch, browse and search
- linking keys a browse can be anchored on
- JSON key names of browse/search responses
- whether the Cover Art Archive knows the entity

Adding an entity = adding a row here, not writing a new builder. The tables
mirror what MusicBrainz documents; they are NOT checked against the live
service, so a wrong combination only shows up as a service error envelope.
"""

from dataclasses import dataclass
from enum import Enum

from brainzlink.domain.dtos import BrowseFields, SearchFields
from brainzlink.domain.entities import (
    Annotation,
    Area,
    Artist,
    CDStub,
    Discid,
    Entity,
    Event,
    Instrument,
    Label,
    Place,
    Recording,
    Release,
    ReleaseGroup,
    Series,
    Tag,
    Url,
    Work,
)
from brainzlink.domain.exceptions import QueryConfigurationError
from brainzlink.domain.value_objects.includes import (
    ENTITY_RELATIONSHIPS,
    BrowseBy,
    Include,
    IncludeKind,
    Relationship,
    Subquery,
)

IncludeLike = Include | Subquery | Relationship | str


class QueryKind(str, Enum):
    """Kinds of request a builder can issue."""

    FETCH = "fetch"
    BROWSE = "browse"
    SEARCH = "search"
    COVERART = "coverart"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EntitySpec:
    """Catalogue row for one entity type."""

    path: str
    fetch_includes: tuple[Include, ...] | None = None
    browse_includes: tuple[Include, ...] = ()
    browse_by: tuple[BrowseBy, ...] = ()
    browse_fields: BrowseFields | None = None
    search_fields: SearchFields | None = None
    coverart: bool = False

    def supports(self, kind: QueryKind) -> bool:
        """Whether the entity can be queried this way."""
        if kind is QueryKind.FETCH:
            return self.fetch_includes is not None
        if kind is QueryKind.BROWSE:
            return self.browse_fields is not None
        if kind is QueryKind.SEARCH:
            return self.search_fields is not None
        return self.coverart

    def includes_for(self, kind: QueryKind) -> tuple[Include, ...]:
        """Include tokens allowed for a query kind.

        Search accepts the same tokens as fetch.
        """
        if kind is QueryKind.BROWSE:
            return self.browse_includes
        if kind in (QueryKind.FETCH, QueryKind.SEARCH):
            return self.fetch_includes or ()
        return ()

    def resolve_include(self, kind: QueryKind, token: IncludeLike) -> Include:
        """Map a caller supplied token onto the table entry.

        An explicit Include.other(...) is a raw passthrough: it is sent as-is and
        left for the service to accept or reject.

        Raises:
            QueryConfigurationError: If the token is not allowed for this entity
                and query kind
        """
        if isinstance(token, Include) and token.kind is IncludeKind.OTHER:
            if not token.value:
                raise QueryConfigurationError("Include token must not be empty")
            return token
        wire = token.value if isinstance(token, (Include, Subquery, Relationship)) else token
        for include in self.includes_for(kind):
            if include.value == wire:
                return include
        raise QueryConfigurationError(
            f"Include {wire!r} is not available when {kind} querying {self.path!r}"
        )

    def resolve_browse_by(self, key: BrowseBy | str) -> BrowseBy:
        """Validate a browse linking key.

        Raises:
            QueryConfigurationError: If the entity can't be browsed by that key
        """
        try:
            browse_by = BrowseBy(key)
        except ValueError:
            raise QueryConfigurationError(f"Unknown browse key {key!r}") from None
        if browse_by not in self.browse_by:
            raise QueryConfigurationError(f"{self.path!r} can't be browsed by {browse_by}")
        return browse_by


def _subqueries(*items: Subquery) -> tuple[Include, ...]:
    return tuple(Include.subquery(item) for item in items)


def _relations(*items: Relationship) -> tuple[Include, ...]:
    return tuple(Include.relationship(item) for item in items)


def _others(*items: str) -> tuple[Include, ...]:
    return tuple(Include.other(item) for item in items)


_RELATIONS = _relations(*ENTITY_RELATIONSHIPS)

# Common browse includes, sent as raw strings by the browse endpoints
_BROWSE_COMMON = _others("annotation", "tags", "user-tags", "genres", "user-genres", "aliases")

_BASIC = _subqueries(Subquery.TAGS, Subquery.ALIASES, Subquery.GENRES, Subquery.ANNOTATION)
_RATED = _BASIC + _subqueries(Subquery.RATINGS)


CATALOGUE: dict[type[Entity], EntitySpec] = {
    Annotation: EntitySpec(
        path="annotation",
        search_fields=SearchFields(entities="annotations"),
    ),
    Area: EntitySpec(
        path="area",
        fetch_includes=_BASIC + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _RELATIONS,
        browse_by=(BrowseBy.COLLECTION,),
        browse_fields=BrowseFields.for_path("area", "areas"),
        search_fields=SearchFields(entities="areas"),
    ),
    Artist: EntitySpec(
        path="artist",
        fetch_includes=_subqueries(
            Subquery.RECORDINGS,
            Subquery.RELEASES,
            Subquery.RELEASE_GROUPS,
            Subquery.WORKS,
            Subquery.MEDIA,
        )
        + _RATED
        + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _others("ratings", "user-ratings") + _RELATIONS,
        browse_by=(
            BrowseBy.AREA,
            BrowseBy.COLLECTION,
            BrowseBy.RECORDING,
            BrowseBy.RELEASE,
            BrowseBy.RELEASE_GROUP,
            BrowseBy.WORK,
        ),
        browse_fields=BrowseFields.for_path("artist", "artists"),
        search_fields=SearchFields(entities="artists"),
    ),
    CDStub: EntitySpec(
        path="cdstub",
        search_fields=SearchFields(entities="cdstubs"),
    ),
    Discid: EntitySpec(
        path="discid",
        fetch_includes=_subqueries(Subquery.ARTISTS, Subquery.LABELS)
        + _relations(Relationship.ARTIST, Relationship.WORK, Relationship.URL)
        + _relations(Relationship.WORK_LEVEL, Relationship.RECORDING_LEVEL)
        + _subqueries(Subquery.RECORDINGS, Subquery.RELEASE_GROUPS)
        + _RATED
        + _subqueries(Subquery.ARTIST_CREDITS),
    ),
    Event: EntitySpec(
        path="event",
        fetch_includes=_RATED + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _others("ratings", "user-ratings") + _RELATIONS,
        browse_by=(BrowseBy.AREA, BrowseBy.ARTIST, BrowseBy.COLLECTION, BrowseBy.PLACE),
        browse_fields=BrowseFields.for_path("event", "events"),
        search_fields=SearchFields(entities="events"),
    ),
    Instrument: EntitySpec(
        path="instrument",
        fetch_includes=_BASIC + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _RELATIONS,
        browse_by=(BrowseBy.COLLECTION,),
        browse_fields=BrowseFields.for_path("instrument", "instruments"),
        search_fields=SearchFields(entities="instruments"),
    ),
    Label: EntitySpec(
        path="label",
        fetch_includes=_subqueries(Subquery.RELEASES, Subquery.MEDIA) + _RATED + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _RELATIONS,
        browse_by=(BrowseBy.AREA, BrowseBy.RELEASE, BrowseBy.COLLECTION),
        browse_fields=BrowseFields.for_path("label", "labels"),
        search_fields=SearchFields(entities="labels"),
    ),
    Place: EntitySpec(
        path="place",
        fetch_includes=_BASIC + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _RELATIONS,
        browse_by=(BrowseBy.AREA, BrowseBy.COLLECTION),
        browse_fields=BrowseFields.for_path("place", "places"),
        search_fields=SearchFields(entities="places"),
    ),
    Recording: EntitySpec(
        path="recording",
        fetch_includes=_subqueries(
            Subquery.ARTISTS,
            Subquery.RELEASES,
            Subquery.ISRCS,
            Subquery.ARTIST_CREDITS,
            Subquery.MEDIA,
        )
        + _RATED
        + _relations(Relationship.WORK_LEVEL)
        + _RELATIONS,
        browse_includes=_BROWSE_COMMON
        + _others("ratings", "user-ratings", "artist-credits", "isrcs")
        + _RELATIONS,
        browse_by=(BrowseBy.ARTIST, BrowseBy.COLLECTION, BrowseBy.RELEASE, BrowseBy.WORK),
        browse_fields=BrowseFields.for_path("recording", "recordings"),
        search_fields=SearchFields(entities="recordings"),
    ),
    Release: EntitySpec(
        path="release",
        fetch_includes=_subqueries(Subquery.ARTISTS, Subquery.LABELS)
        + _relations(
            Relationship.WORK_LEVEL,
            Relationship.RELEASE_GROUP_LEVEL,
            Relationship.RECORDING_LEVEL,
        )
        + _subqueries(Subquery.RECORDINGS, Subquery.RELEASE_GROUPS)
        + _RATED
        + _subqueries(Subquery.ARTIST_CREDITS, Subquery.MEDIA, Subquery.DISCIDS, Subquery.ISRCS)
        + _RELATIONS,
        browse_includes=_BROWSE_COMMON
        + _others(
            "artist-credits",
            "labels",
            "recordings",
            "release-groups",
            "media",
            "discids",
            "isrcs",
        )
        + _RELATIONS,
        browse_by=(
            BrowseBy.AREA,
            BrowseBy.ARTIST,
            BrowseBy.LABEL,
            BrowseBy.TRACK,
            BrowseBy.TRACK_ARTIST,
            BrowseBy.RECORDING,
            BrowseBy.RELEASE_GROUP,
            BrowseBy.COLLECTION,
        ),
        browse_fields=BrowseFields.for_path("release", "releases"),
        search_fields=SearchFields(entities="releases"),
        coverart=True,
    ),
    ReleaseGroup: EntitySpec(
        path="release-group",
        fetch_includes=_subqueries(Subquery.ARTISTS, Subquery.RELEASES, Subquery.ARTIST_CREDITS)
        + _RATED
        + _RELATIONS,
        browse_includes=_BROWSE_COMMON
        + _others("ratings", "user-ratings", "artist-credits")
        + _RELATIONS,
        browse_by=(BrowseBy.ARTIST, BrowseBy.COLLECTION, BrowseBy.RELEASE),
        browse_fields=BrowseFields.for_path("release-group", "release-groups"),
        search_fields=SearchFields(entities="release-groups"),
        coverart=True,
    ),
    Series: EntitySpec(
        path="series",
        fetch_includes=_BASIC + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _RELATIONS,
        browse_by=(BrowseBy.COLLECTION,),
        browse_fields=BrowseFields.for_path("series", "series"),
        search_fields=SearchFields(entities="series"),
    ),
    Tag: EntitySpec(
        path="tag",
        search_fields=SearchFields(entities="tags"),
    ),
    Url: EntitySpec(
        path="url",
        fetch_includes=_RELATIONS,
        search_fields=SearchFields(entities="urls"),
    ),
    Work: EntitySpec(
        path="work",
        fetch_includes=_RATED + _RELATIONS,
        browse_includes=_BROWSE_COMMON + _others("ratings", "user-ratings") + _RELATIONS,
        browse_by=(BrowseBy.ARTIST, BrowseBy.COLLECTION),
        browse_fields=BrowseFields.for_path("work", "works"),
        search_fields=SearchFields(entities="works"),
    ),
}


def get_spec(entity_type: type[Entity], kind: QueryKind | None = None) -> EntitySpec:
    """Look up the catalogue row of an entity type.

    Args:
        entity_type: Entity class, e.g. Artist
        kind: When given, also check the entity supports that query kind

    Returns:
        The entity's catalogue row

    Raises:
        QueryConfigurationError: If the entity is unknown or doesn't support kind
    """
    spec = CATALOGUE.get(entity_type)
    if spec is None:
        raise QueryConfigurationError(f"{entity_type.__name__} is not a queryable entity")
    if kind is not None and not spec.supports(kind):
        raise QueryConfigurationError(f"{entity_type.__name__} does not support {kind} queries")
    return spec


__all__ = ["CATALOGUE", "EntitySpec", "IncludeLike", "QueryKind", "get_spec"]
