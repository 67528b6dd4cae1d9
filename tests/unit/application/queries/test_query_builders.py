"""Tests for the fetch, browse and search query builders."""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from brainzlink.application.queries import BrowseQuery, FetchQuery, LuceneQuery, SearchQuery
from brainzlink.domain.dtos import BrowseResult, CoverartResponse, SearchResult
from brainzlink.domain.entities import Area, Artist, Discid, Label, Release, Tag, Url
from brainzlink.domain.exceptions import QueryConfigurationError
from brainzlink.domain.ports import IMusicBrainzClient
from brainzlink.domain.value_objects import (
    ENTITY_RELATIONSHIPS,
    BrowseBy,
    Include,
    Relationship,
    Subquery,
)

BASE = "https://mb.test/ws/2"
NIRVANA = "5b11f4ce-a62d-471e-81fc-a69a8278c7da"


class FakeClient(IMusicBrainzClient):
    """Client double that answers every request with a canned payload."""

    def __init__(self, payload: Any = None) -> None:
        self.musicbrainz_url = BASE
        self.coverart_archive_url = "https://caa.test"
        self.payload = payload
        self.urls: list[str] = []

    def get(self, url: str, parse: Callable[[Any], Any]) -> Any:
        self.urls.append(url)
        return parse(self.payload)

    async def get_async(self, url: str, parse: Callable[[Any], Any]) -> Any:
        self.urls.append(url)
        return parse(self.payload)

    def get_coverart(self, url: str, wants_image: bool) -> CoverartResponse:
        raise NotImplementedError

    async def get_coverart_async(self, url: str, wants_image: bool) -> CoverartResponse:
        raise NotImplementedError


@pytest.fixture
def client() -> FakeClient:
    """Create a fake client without payload."""
    return FakeClient()


class TestEntryPoints:
    """Test the entity classmethods."""

    def test_entry_points_return_builders(self) -> None:
        """Test that each entry point creates the matching builder."""
        assert isinstance(Artist.fetch(), FetchQuery)
        assert isinstance(Artist.browse(), BrowseQuery)
        assert isinstance(Artist.search("query=nirvana"), SearchQuery)

    def test_unsupported_kind_is_rejected(self) -> None:
        """Test that entities only offer the query kinds the service has."""
        with pytest.raises(QueryConfigurationError):
            Tag.fetch()
        with pytest.raises(QueryConfigurationError):
            Discid.browse()
        with pytest.raises(QueryConfigurationError):
            Url.browse()


class TestFetchQuery:
    """Test single entity lookups."""

    def test_fetch_url(self, client: FakeClient) -> None:
        """Test the fetch URL with includes in call order."""
        query = Artist.fetch().id(NIRVANA).include(Subquery.ALIASES, Relationship.URL)

        assert query.url(client) == f"{BASE}/artist/{NIRVANA}?fmt=json&inc=aliases+url-rels"

    def test_include_accepts_wire_strings(self, client: FakeClient) -> None:
        """Test that plain strings are matched against the entity's table."""
        query = Release.fetch().id("r1").include("artist-credits", "recording-level-rels")

        assert query.url(client).endswith("?fmt=json&inc=artist-credits+recording-level-rels")

    def test_include_outside_table_is_rejected(self) -> None:
        """Test that tokens not available for the entity raise."""
        with pytest.raises(QueryConfigurationError, match="user-tags"):
            Artist.fetch().include("user-tags")
        with pytest.raises(QueryConfigurationError):
            Artist.fetch().include(Subquery.DISCIDS)

    def test_raw_include_is_sent_unchecked(self, client: FakeClient) -> None:
        """Test that an explicit passthrough token reaches the wire as-is."""
        query = Artist.fetch().id(NIRVANA).include(Subquery.TAGS, Include.other("user-tags"))

        assert query.url(client) == f"{BASE}/artist/{NIRVANA}?fmt=json&inc=tags+user-tags"

    def test_duplicate_include_is_sent_once(self, client: FakeClient) -> None:
        """Test that adding the same token twice doesn't repeat it."""
        query = Label.fetch().id("l1").include(Subquery.TAGS).include("tags")

        assert query.url(client).endswith("&inc=tags")

    def test_second_id_replaces_first(self, client: FakeClient) -> None:
        """Test that the last id wins."""
        query = Artist.fetch().id("first").id("second")

        assert query.url(client) == f"{BASE}/artist/second?fmt=json"

    def test_missing_id_raises_before_sending(self, client: FakeClient) -> None:
        """Test that an incomplete query never reaches the client."""
        with pytest.raises(QueryConfigurationError):
            Artist.fetch().execute(client)

        assert client.urls == []

    def test_with_relations_adds_every_category(self, client: FakeClient) -> None:
        """Test the all-relations shortcut."""
        query = Url.fetch().id("u1").with_relations()

        expected = "+".join(relationship.value for relationship in ENTITY_RELATIONSHIPS)
        assert query.url(client).endswith(f"&inc={expected}")

    def test_execute_parses_entity(self) -> None:
        """Test that the payload is parsed into the entity type."""
        client = FakeClient({"id": NIRVANA, "name": "Nirvana", "type": "Group"})

        artist = Artist.fetch().id(NIRVANA).execute(client)

        assert isinstance(artist, Artist)
        assert artist.name == "Nirvana"
        assert artist.artist_type == "Group"

    async def test_execute_async_sends_same_url(self) -> None:
        """Test that both execution modes build the identical request."""
        client = FakeClient({"id": NIRVANA, "name": "Nirvana"})
        query = Artist.fetch().id(NIRVANA).include(Subquery.TAGS)

        query.execute(client)
        await query.execute_async(client)

        assert client.urls[0] == client.urls[1]


class TestBrowseQuery:
    """Test linked entity browsing."""

    def test_browse_url(self, client: FakeClient) -> None:
        """Test the browse URL shape."""
        query = Release.browse().by(BrowseBy.LABEL, "47e718e1").include("labels")

        assert query.url(client) == f"{BASE}/release?fmt=json&inc=labels&label=47e718e1"

    def test_offset_then_limit_renders_limit_first(self, client: FakeClient) -> None:
        """Test that pagination order is fixed regardless of call order."""
        query = Release.browse().by("label", "47e718e1").offset(10).limit(5)

        assert query.url(client).endswith("&label=47e718e1&limit=5&offset=10")

    def test_invalid_browse_key_is_rejected(self) -> None:
        """Test that only documented linking keys are accepted."""
        with pytest.raises(QueryConfigurationError):
            Area.browse().by(BrowseBy.ARTIST, "a1")
        with pytest.raises(QueryConfigurationError):
            Area.browse().by("nonsense", "a1")

    def test_missing_linking_key_raises(self, client: FakeClient) -> None:
        """Test that a browse without anchor can't be sent."""
        with pytest.raises(QueryConfigurationError):
            Release.browse().url(client)

    @pytest.mark.parametrize("limit", [0, 101, -1])
    def test_limit_out_of_range(self, limit: int) -> None:
        """Test that the page size is bounded."""
        with pytest.raises(QueryConfigurationError):
            Release.browse().limit(limit)

    def test_negative_offset(self) -> None:
        """Test that offsets can't be negative."""
        with pytest.raises(QueryConfigurationError):
            Release.browse().offset(-1)

    def test_execute_uses_entity_specific_keys(self) -> None:
        """Test that browse results are read through the per-entity key names."""
        client = FakeClient(
            {
                "label-count": 2,
                "label-offset": 0,
                "labels": [{"id": "l1", "name": "DGC"}, {"id": "l2", "name": "Sub Pop"}],
            }
        )

        result = Label.browse().by(BrowseBy.RELEASE, "r1").execute(client)

        assert isinstance(result, BrowseResult)
        assert result.count == 2
        assert result.offset == 0
        assert [label.name for label in result.entities] == ["DGC", "Sub Pop"]


class TestSearchQuery:
    """Test free text searches."""

    def test_string_query_appended_verbatim(self, client: FakeClient) -> None:
        """Test that a plain string goes on the wire as-is."""
        query = Artist.search("query=artist:nirvana AND country:US").limit(2)

        assert query.url(client) == (
            f"{BASE}/artist?fmt=json&query=artist:nirvana AND country:US&limit=2"
        )

    def test_lucene_query_is_encoded(self, client: FakeClient) -> None:
        """Test that a LuceneQuery contributes its encoded fragment."""
        lucene = LuceneQuery().field("artist", "Nirvana").and_().field("country", "US")

        url = Artist.search(lucene).url(client)

        assert url == f"{BASE}/artist?fmt=json&{lucene.build()}"
        assert " " not in url

    def test_empty_query_is_rejected(self, client: FakeClient) -> None:
        """Test that an empty search can't be sent."""
        with pytest.raises(QueryConfigurationError):
            Artist.search("").url(client)

    def test_copy_is_independent(self, client: FakeClient) -> None:
        """Test paginating a template without touching it."""
        template = Artist.search("query=nirvana").limit(10)

        second_page = template.copy().offset(10).include(Subquery.TAGS)

        assert template.url(client) == f"{BASE}/artist?fmt=json&query=nirvana&limit=10"
        assert second_page.url(client) == (
            f"{BASE}/artist?fmt=json&inc=tags&query=nirvana&limit=10&offset=10"
        )

    def test_copy_owns_its_lucene_expression(self, client: FakeClient) -> None:
        """Test that extending the template expression leaves earlier copies alone."""
        lucene = LuceneQuery().field("artist", "nirvana")
        template = Artist.search(lucene).limit(10)

        second_page = template.copy().offset(10)
        lucene.and_().field("country", "US")

        assert second_page.url(client) == (
            f"{BASE}/artist?fmt=json&query=artist%3Anirvana&limit=10&offset=10"
        )
        assert "country" in template.url(client)

    def test_execute_reads_created_timestamp(self) -> None:
        """Test that search results carry the server timestamp."""
        client = FakeClient(
            {
                "created": "2024-03-01T12:00:00.000Z",
                "count": 1,
                "offset": 0,
                "artists": [{"id": NIRVANA, "name": "Nirvana", "score": 100}],
            }
        )

        result = Artist.search("query=nirvana").execute(client)

        assert isinstance(result, SearchResult)
        assert result.created == datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
        assert result.count == 1
        assert result.entities[0].score == 100

    def test_reexecution_repeats_request(self) -> None:
        """Test that executing twice sends two identical requests."""
        client = FakeClient(
            {"created": "2024-03-01T12:00:00Z", "count": 0, "offset": 0, "artists": []}
        )
        query = Artist.search("query=nirvana")

        query.execute(client)
        query.execute(client)

        assert len(client.urls) == 2
        assert client.urls[0] == client.urls[1]
