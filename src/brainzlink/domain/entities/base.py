"""Base records shared by every MusicBrainz entity.

Hey future me - the service speaks kebab-case JSON ("sort-name", "life-span"),
we speak snake_case. The alias generator bridges the two, and populate_by_name
lets tests build records with python names. Unknown keys are KEPT (extra="allow")
so nothing the service sends gets lost just because we didn't model it.

`id` is required on every entity. That's what stops an ``{error, help}`` envelope
from ever validating as a success payload - see infrastructure/integrations/envelope.py.
"""

from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from brainzlink.application.queries import (
        BrowseQuery,
        FetchCoverartQuery,
        FetchQuery,
        LuceneQuery,
        SearchQuery,
    )


def to_kebab(name: str) -> str:
    """snake_case field name -> kebab-case JSON key."""
    return name.replace("_", "-")


class Record(BaseModel):
    """Base model for every JSON record returned by the service."""

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the service's JSON shape."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class LifeSpan(Record):
    """Begin/end dates of an entity (partial dates kept as strings)."""

    begin: str | None = None
    end: str | None = None
    ended: bool | None = None


class Alias(Record):
    """Alternate name or misspelling."""

    name: str
    sort_name: str | None = None
    locale: str | None = None
    primary: bool | None = None
    alias_type: str | None = Field(default=None, alias="type")
    begin: str | None = None
    end: str | None = None
    ended: bool | None = None


class Rating(Record):
    """Community rating."""

    value: float | None = None
    votes_count: int = 0


class TagCount(Record):
    """Folksonomy tag with its vote count."""

    name: str
    count: int = 0


class GenreCount(Record):
    """Genre with its vote count."""

    name: str
    count: int = 0
    id: str | None = None
    disambiguation: str | None = None


class Entity(Record):
    """A MusicBrainz resource that can be queried.

    The query entry points look the class up in the entity catalogue, so they
    only work for entity types that support the requested query kind.
    """

    id: str

    @classmethod
    def fetch(cls) -> "FetchQuery[Self]":
        """Start a lookup by mbid."""
        from brainzlink.application.queries import FetchQuery

        return FetchQuery(cls)

    @classmethod
    def browse(cls) -> "BrowseQuery[Self]":
        """Start a browse of the entities linked to another entity."""
        from brainzlink.application.queries import BrowseQuery

        return BrowseQuery(cls)

    @classmethod
    def search(cls, query: "str | LuceneQuery") -> "SearchQuery[Self]":
        """Start a free text search."""
        from brainzlink.application.queries import SearchQuery

        return SearchQuery(cls, query)

    @classmethod
    def fetch_coverart(cls) -> "FetchCoverartQuery":
        """Start a Cover Art Archive lookup."""
        from brainzlink.application.queries import FetchCoverartQuery

        return FetchCoverartQuery(cls)

    def get_coverart(self) -> "FetchCoverartQuery":
        """Cover Art Archive lookup already pointed at this entity's mbid."""
        return self.fetch_coverart().id(self.id)


__all__ = [
    "Alias",
    "Entity",
    "GenreCount",
    "LifeSpan",
    "Rating",
    "Record",
    "TagCount",
    "to_kebab",
]
