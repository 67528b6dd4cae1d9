"""Lookup of a single entity by mbid."""

from typing import Any, Self

from brainzlink.application.queries.base import E, Query
from brainzlink.application.queries.url import assemble_url
from brainzlink.domain.catalogue import QueryKind
from brainzlink.domain.exceptions import QueryConfigurationError


class FetchQuery(Query[E, E]):
    """Fetch one entity: GET {path}/{id}?fmt=json[&inc=...].

    Usage:
        nirvana = (
            Artist.fetch()
            .id("5b11f4ce-a62d-471e-81fc-a69a8278c7da")
            .include(Subquery.ALIASES, Relationship.URL)
            .execute()
        )
    """

    kind = QueryKind.FETCH

    def __init__(self, entity_type: type[E]) -> None:
        super().__init__(entity_type)
        self._id: str | None = None

    def id(self, mbid: str) -> Self:
        """Identifier of the entity to fetch (a second call replaces the first)."""
        self._id = mbid
        return self

    def _build_url(self, base: str) -> str:
        if not self._id:
            raise QueryConfigurationError(f"Fetching {self.spec.path!r} requires an id")
        return assemble_url(base, f"{self.spec.path}/{self._id}", self._includes)

    def _parse(self, payload: Any) -> E:
        return self.entity_type.model_validate(payload)


__all__ = ["FetchQuery"]
