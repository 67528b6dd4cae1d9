"""Free text search."""

from typing import Any, Self

from brainzlink.application.queries.base import E, PaginatedQuery
from brainzlink.application.queries.lucene import LuceneQuery
from brainzlink.application.queries.url import assemble_url
from brainzlink.domain.catalogue import QueryKind
from brainzlink.domain.dtos import SearchFields, SearchResult
from brainzlink.domain.exceptions import QueryConfigurationError


class SearchQuery(PaginatedQuery[E, SearchResult[E]]):
    """Search one page: GET {path}?fmt=json[&inc=...]&{query}[&limit=N][&offset=N].

    A string query is appended VERBATIM, e.g. "query=artist:nirvana". Pass a
    LuceneQuery to get escaping and URL encoding for free.

    Usage:
        query = LuceneQuery().field("artist", "Miles Davis").and_().field("country", "US")
        result = Artist.search(query).limit(10).execute()
    """

    kind = QueryKind.SEARCH

    def __init__(self, entity_type: type[E], query: str | LuceneQuery) -> None:
        super().__init__(entity_type)
        self.query = query

    def copy(self) -> Self:
        """Independent copy, including its own LuceneQuery."""
        clone = super().copy()
        if isinstance(self.query, LuceneQuery):
            clone.query = self.query.copy()
        return clone

    @property
    def fields(self) -> SearchFields:
        """JSON key names of this entity's search response."""
        if self.spec.search_fields is None:
            raise QueryConfigurationError(f"{self.spec.path!r} has no search response mapping")
        return self.spec.search_fields

    def _build_url(self, base: str) -> str:
        expression = self.query.build() if isinstance(self.query, LuceneQuery) else self.query
        if not expression:
            raise QueryConfigurationError(f"Searching {self.spec.path!r} requires a query")
        return assemble_url(
            base,
            self.spec.path,
            self._includes,
            extra=expression,
            limit=self._limit,
            offset=self._offset,
        )

    def _parse(self, payload: Any) -> SearchResult[E]:
        return SearchResult.from_payload(payload, self.fields, self.entity_type)


__all__ = ["SearchQuery"]
