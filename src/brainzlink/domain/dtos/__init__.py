"""Result wrappers for browse, search and cover art queries.

Hey future me - browse and search responses use entity-specific key names:

    browse release:  {"release-count": 12, "release-offset": 0, "releases": [...]}
    search release:  {"created": "...", "count": 12, "offset": 0, "releases": [...]}

So we can't just point pydantic at one generic model. Each entity type carries
its key names in the catalogue (BrowseFields / SearchFields) and the wrappers
here read and write payloads through those names.

from_payload() raises ValueError (pydantic's ValidationError included) when the
payload doesn't have the expected shape - the envelope decoder relies on that
to fall back to the error shape.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from brainzlink.domain.entities import Coverart, Entity

T = TypeVar("T", bound=Entity)

_DATETIME = TypeAdapter(datetime)
_INT = TypeAdapter(int)


@dataclass(frozen=True)
class BrowseFields:
    """JSON keys of a browse response for one entity type."""

    count: str
    offset: str
    entities: str

    @classmethod
    def for_path(cls, path: str, entities: str) -> "BrowseFields":
        """Standard "{path}-count" / "{path}-offset" naming."""
        return cls(count=f"{path}-count", offset=f"{path}-offset", entities=entities)


@dataclass(frozen=True)
class SearchFields:
    """JSON keys of a search response for one entity type."""

    entities: str
    created: str = "created"
    count: str = "count"
    offset: str = "offset"


def _require(payload: Any, key: str) -> Any:
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    if key not in payload:
        raise ValueError(f"missing key {key!r}")
    return payload[key]


def _entities(payload: Any, key: str, entity_type: type[T]) -> list[T]:
    raw = _require(payload, key)
    if not isinstance(raw, list):
        raise ValueError(f"{key!r} is not a list")
    return [entity_type.model_validate(item) for item in raw]


@dataclass
class BrowseResult(Generic[T]):
    """One page of a browse request."""

    count: int
    offset: int
    entities: list[T] = field(default_factory=list)

    @classmethod
    def from_payload(
        cls, payload: Any, fields: BrowseFields, entity_type: type[T]
    ) -> "BrowseResult[T]":
        """Build from the service's JSON using the entity's key names."""
        return cls(
            count=_INT.validate_python(_require(payload, fields.count)),
            offset=_INT.validate_python(_require(payload, fields.offset)),
            entities=_entities(payload, fields.entities, entity_type),
        )

    def to_payload(self, fields: BrowseFields) -> dict[str, Any]:
        """Serialize back to the service's JSON shape."""
        return {
            fields.count: self.count,
            fields.offset: self.offset,
            fields.entities: [entity.to_payload() for entity in self.entities],
        }


@dataclass
class SearchResult(Generic[T]):
    """One page of a search request, ranked by the service."""

    created: datetime
    count: int
    offset: int
    entities: list[T] = field(default_factory=list)

    @classmethod
    def from_payload(
        cls, payload: Any, fields: SearchFields, entity_type: type[T]
    ) -> "SearchResult[T]":
        """Build from the service's JSON using the entity's key names."""
        return cls(
            created=_DATETIME.validate_python(_require(payload, fields.created)),
            count=_INT.validate_python(_require(payload, fields.count)),
            offset=_INT.validate_python(_require(payload, fields.offset)),
            entities=_entities(payload, fields.entities, entity_type),
        )

    def to_payload(self, fields: SearchFields) -> dict[str, Any]:
        """Serialize back to the service's JSON shape."""
        return {
            fields.created: self.created.isoformat().replace("+00:00", "Z"),
            fields.count: self.count,
            fields.offset: self.offset,
            fields.entities: [entity.to_payload() for entity in self.entities],
        }


@dataclass(frozen=True)
class CoverartResponse:
    """Cover art lookup result: either the JSON listing or a resolved image URL."""

    json: Coverart | None = None
    url: str | None = None

    @property
    def is_url(self) -> bool:
        """True when the archive redirected to an image."""
        return self.url is not None


__all__ = [
    "BrowseFields",
    "BrowseResult",
    "CoverartResponse",
    "SearchFields",
    "SearchResult",
]
