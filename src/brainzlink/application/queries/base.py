"""Shared query builder machinery.

Hey future me - a query is a request-in-progress: entity type + catalogue row +
ordered include tokens + whatever the concrete kind needs (id, linking key,
search expression, pagination). Subclasses only know how to build their URL and
how to parse their payload. Sending, waiting and retrying belong to the client
(IMusicBrainzClient), which is why execute() and execute_async() are the SAME
two lines here for every query kind.

Builders are mutable and chainable. Executing doesn't consume anything, so
running the same builder twice sends the same request twice. Use copy() to
branch a template (e.g. page 1 and page 2 of the same search).
"""

import copy
from typing import Any, ClassVar, Generic, Self, TypeVar

from brainzlink.domain.catalogue import EntitySpec, IncludeLike, QueryKind, get_spec
from brainzlink.domain.entities import Entity
from brainzlink.domain.exceptions import QueryConfigurationError
from brainzlink.domain.ports import IMusicBrainzClient
from brainzlink.domain.value_objects.includes import Include, IncludeKind

E = TypeVar("E", bound=Entity)
R = TypeVar("R")

# The service caps browse/search pages at 100 entities
MAX_PAGE_SIZE = 100


def resolve_client(client: IMusicBrainzClient | None) -> IMusicBrainzClient:
    """Explicit client, else the application's default one."""
    if client is not None:
        return client
    from brainzlink.infrastructure.integrations.musicbrainz_client import get_default_client

    return get_default_client()


class Query(Generic[E, R]):
    """Base class for metadata queries (fetch, browse, search).

    Type parameters: E is the entity class, R what execute() returns.
    """

    kind: ClassVar[QueryKind]

    def __init__(self, entity_type: type[E]) -> None:
        self.entity_type = entity_type
        self.spec: EntitySpec = get_spec(entity_type, self.kind)
        self._includes: list[Include] = []

    @property
    def includes(self) -> tuple[Include, ...]:
        """Include tokens in the order they were added."""
        return tuple(self._includes)

    def include(self, *tokens: IncludeLike) -> Self:
        """Ask the service to embed extra data in the response.

        Accepts Subquery / Relationship members, Include values or wire strings
        ("aliases", "artist-rels"). Adding a token twice is a no-op.

        Raises:
            QueryConfigurationError: If a token isn't available for this entity
                and query kind
        """
        for token in tokens:
            include = self.spec.resolve_include(self.kind, token)
            if include not in self._includes:
                self._includes.append(include)
        return self

    def with_relations(self) -> Self:
        """Include every relationship category the entity supports here."""
        for include in self.spec.includes_for(self.kind):
            if include.kind is IncludeKind.RELATIONSHIP and include not in self._includes:
                self._includes.append(include)
        return self

    def copy(self) -> Self:
        """Independent copy of the builder (includes and settings included)."""
        clone = copy.copy(self)
        clone._includes = list(self._includes)
        return clone

    def url(self, client: IMusicBrainzClient | None = None) -> str:
        """Final request URL as it would be sent through client.

        Raises:
            QueryConfigurationError: If the query is incomplete
        """
        return self._build_url(resolve_client(client).musicbrainz_url)

    def _build_url(self, base: str) -> str:
        raise NotImplementedError

    def _parse(self, payload: Any) -> R:
        raise NotImplementedError

    def execute(self, client: IMusicBrainzClient | None = None) -> R:
        """Send the request and block until the typed result is available.

        Args:
            client: Client to send through (default client when omitted)

        Raises:
            QueryConfigurationError: Incomplete query, nothing is sent
            BrainzLinkError: Any transport, retry, service or decoding failure
        """
        client = resolve_client(client)
        return client.get(self._build_url(client.musicbrainz_url), self._parse)

    async def execute_async(self, client: IMusicBrainzClient | None = None) -> R:
        """Async variant of execute()."""
        client = resolve_client(client)
        return await client.get_async(self._build_url(client.musicbrainz_url), self._parse)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entity_type.__name__})"


class PaginatedQuery(Query[E, R]):
    """Query with optional limit/offset (browse and search)."""

    def __init__(self, entity_type: type[E]) -> None:
        super().__init__(entity_type)
        self._limit: int | None = None
        self._offset: int | None = None

    def limit(self, limit: int) -> Self:
        """Maximum number of entities in the page (1..100)."""
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise QueryConfigurationError(
                f"limit must be between 1 and {MAX_PAGE_SIZE}, got {limit}"
            )
        self._limit = limit
        return self

    def offset(self, offset: int) -> Self:
        """Index of the first entity in the page."""
        if offset < 0:
            raise QueryConfigurationError(f"offset must not be negative, got {offset}")
        self._offset = offset
        return self


__all__ = ["MAX_PAGE_SIZE", "PaginatedQuery", "Query", "resolve_client"]
