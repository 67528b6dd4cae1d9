"""Browse: list the entities linked to another entity."""

from typing import Any, Self

from brainzlink.application.queries.base import E, PaginatedQuery
from brainzlink.application.queries.url import assemble_url
from brainzlink.domain.catalogue import QueryKind
from brainzlink.domain.dtos import BrowseFields, BrowseResult
from brainzlink.domain.exceptions import QueryConfigurationError
from brainzlink.domain.value_objects.includes import BrowseBy


class BrowseQuery(PaginatedQuery[E, BrowseResult[E]]):
    """Browse one page: GET {path}?fmt=json[&inc=...]&{key}={id}[&limit=N][&offset=N].

    Usage:
        page = Release.browse().by(BrowseBy.LABEL, label_mbid).limit(25).execute()
        page.count, page.offset, page.entities
    """

    kind = QueryKind.BROWSE

    def __init__(self, entity_type: type[E]) -> None:
        super().__init__(entity_type)
        self._by: tuple[BrowseBy, str] | None = None

    def by(self, key: BrowseBy | str, mbid: str) -> Self:
        """Anchor the browse on a linked entity (a second call replaces the first).

        Raises:
            QueryConfigurationError: If the entity can't be browsed by key
        """
        self._by = (self.spec.resolve_browse_by(key), mbid)
        return self

    @property
    def fields(self) -> BrowseFields:
        """JSON key names of this entity's browse response."""
        if self.spec.browse_fields is None:
            raise QueryConfigurationError(f"{self.spec.path!r} has no browse response mapping")
        return self.spec.browse_fields

    def _build_url(self, base: str) -> str:
        if self._by is None or not self._by[1]:
            raise QueryConfigurationError(f"Browsing {self.spec.path!r} requires a linking key")
        key, mbid = self._by
        return assemble_url(
            base,
            self.spec.path,
            self._includes,
            extra=f"{key.value}={mbid}",
            limit=self._limit,
            offset=self._offset,
        )

    def _parse(self, payload: Any) -> BrowseResult[E]:
        return BrowseResult.from_payload(payload, self.fields, self.entity_type)


__all__ = ["BrowseQuery"]
