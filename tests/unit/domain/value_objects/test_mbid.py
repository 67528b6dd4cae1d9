"""Tests for MusicBrainz identifier helpers."""

import pytest

from brainzlink.domain.value_objects import is_mbid, mbid_from_url, parse_mbid

NIRVANA = "5b11f4ce-a62d-471e-81fc-a69a8278c7da"


class TestIsMbid:
    """Test bare identifier detection."""

    def test_valid(self) -> None:
        """Test a canonical UUID."""
        assert is_mbid(NIRVANA)

    def test_uppercase_is_accepted(self) -> None:
        """Test that hex case doesn't matter."""
        assert is_mbid(NIRVANA.upper())

    @pytest.mark.parametrize(
        "value",
        ["", "nirvana", NIRVANA[:-1], f"{NIRVANA}x", f"https://musicbrainz.org/artist/{NIRVANA}"],
    )
    def test_invalid(self, value: str) -> None:
        """Test strings that are not bare identifiers."""
        assert not is_mbid(value)


class TestMbidFromUrl:
    """Test identifier extraction from entity URLs."""

    @pytest.mark.parametrize(
        "url",
        [
            f"https://musicbrainz.org/artist/{NIRVANA}",
            f"https://musicbrainz.org/release-group/{NIRVANA}/edits",
            f"https://listenbrainz.org/album/{NIRVANA}",
        ],
    )
    def test_known_entity_urls(self, url: str) -> None:
        """Test the supported URL shapes."""
        assert mbid_from_url(url) == NIRVANA

    def test_unknown_path(self) -> None:
        """Test that unrelated URLs yield nothing."""
        assert mbid_from_url(f"https://musicbrainz.org/user/{NIRVANA}") is None


class TestParseMbid:
    """Test the combined helper."""

    def test_bare_identifier(self) -> None:
        """Test that bare ids are returned as-is."""
        assert parse_mbid(NIRVANA) == NIRVANA

    def test_url(self) -> None:
        """Test that URLs are unwrapped."""
        assert parse_mbid(f"https://musicbrainz.org/recording/{NIRVANA}") == NIRVANA

    def test_garbage(self) -> None:
        """Test that anything else yields None."""
        assert parse_mbid("Smells Like Teen Spirit") is None
