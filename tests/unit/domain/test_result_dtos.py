"""Tests for browse and search result wrappers."""

from datetime import UTC, datetime

import pytest

from brainzlink.domain.catalogue import get_spec
from brainzlink.domain.dtos import BrowseFields, BrowseResult, SearchResult
from brainzlink.domain.entities import Artist, Label, Series


class TestBrowseFields:
    """Test the key naming helper."""

    def test_for_path(self) -> None:
        """Test the standard naming scheme."""
        fields = BrowseFields.for_path("release-group", "release-groups")

        assert fields.count == "release-group-count"
        assert fields.offset == "release-group-offset"
        assert fields.entities == "release-groups"

    def test_series_uses_singular_list_key(self) -> None:
        """Test that the catalogue carries irregular key names."""
        fields = get_spec(Series).browse_fields

        assert fields is not None
        assert fields.entities == "series"


class TestBrowseResult:
    """Test browse payload parsing."""

    def test_from_payload(self) -> None:
        """Test reading through entity specific keys."""
        payload = {
            "label-count": 1,
            "label-offset": 0,
            "labels": [{"id": "l1", "name": "DGC", "label-code": 7242}],
        }

        result = BrowseResult.from_payload(
            payload, BrowseFields.for_path("label", "labels"), Label
        )

        assert result.count == 1
        assert result.entities[0].label_code == 7242

    def test_payload_round_trip(self) -> None:
        """Test that serializing back yields the original payload."""
        fields = BrowseFields.for_path("label", "labels")
        payload = {
            "label-count": 1,
            "label-offset": 0,
            "labels": [{"id": "l1", "name": "DGC", "country": "US"}],
        }

        result = BrowseResult.from_payload(payload, fields, Label)

        assert result.to_payload(fields) == payload

    def test_wrong_keys_raise_value_error(self) -> None:
        """Test that a foreign shape is rejected."""
        with pytest.raises(ValueError):
            BrowseResult.from_payload(
                {"artist-count": 1, "artist-offset": 0, "artists": []},
                BrowseFields.for_path("label", "labels"),
                Label,
            )

    def test_error_envelope_is_not_a_browse_result(self) -> None:
        """Test that {error, help} never parses as a page."""
        with pytest.raises(ValueError):
            BrowseResult.from_payload(
                {"error": "Not Found", "help": "see docs"},
                BrowseFields.for_path("label", "labels"),
                Label,
            )


class TestSearchResult:
    """Test search payload parsing."""

    def test_from_payload(self) -> None:
        """Test reading the timestamp and entities."""
        fields = get_spec(Artist).search_fields
        assert fields is not None
        payload = {
            "created": "2024-03-01T12:00:00.000Z",
            "count": 2,
            "offset": 0,
            "artists": [
                {"id": "a1", "name": "Miles Davis", "score": 100},
                {"id": "a2", "name": "Miles Davis Quintet", "score": 90},
            ],
        }

        result = SearchResult.from_payload(payload, fields, Artist)

        assert result.created == datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
        assert [artist.name for artist in result.entities] == [
            "Miles Davis",
            "Miles Davis Quintet",
        ]

    def test_non_object_payload(self) -> None:
        """Test that arrays are rejected."""
        fields = get_spec(Artist).search_fields
        assert fields is not None

        with pytest.raises(ValueError):
            SearchResult.from_payload([], fields, Artist)
