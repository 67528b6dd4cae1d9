"""Tests for brainzlink settings."""

import pytest

from brainzlink import __version__
from brainzlink.config import LoggingSettings, MusicBrainzSettings, Settings, get_settings


class TestMusicBrainzSettings:
    """Test MusicBrainz settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the documented defaults."""
        monkeypatch.delenv("MUSICBRAINZ_MAX_RETRIES", raising=False)

        settings = MusicBrainzSettings()

        assert settings.base_url == "https://musicbrainz.org/ws/2"
        assert settings.coverart_url == "https://coverartarchive.org"
        assert settings.max_retries == 10
        assert settings.rate_limit_enabled is True
        assert settings.rate_limit_burst == 5
        assert settings.rate_limit_per_second == 1.0

    def test_user_agent_with_contact(self) -> None:
        """Test the service's recommended User-Agent format."""
        settings = MusicBrainzSettings(
            app_name="MyTagger", app_version="1.2.0", contact="me@example.org"
        )

        assert settings.effective_user_agent == "MyTagger/1.2.0 ( me@example.org )"

    def test_user_agent_without_contact(self) -> None:
        """Test that a blank contact is left out."""
        settings = MusicBrainzSettings(app_name="MyTagger", app_version="1.2.0", contact=" ")

        assert settings.effective_user_agent == "MyTagger/1.2.0"

    def test_user_agent_default_mentions_library(self) -> None:
        """Test the fallback identity."""
        settings = MusicBrainzSettings(contact="")

        assert settings.effective_user_agent.startswith(f"brainzlink/{__version__}")

    def test_explicit_user_agent_wins(self) -> None:
        """Test the override."""
        settings = MusicBrainzSettings(app_name="Ignored", user_agent="Custom/1.0 ( x )")

        assert settings.effective_user_agent == "Custom/1.0 ( x )"

    def test_trailing_slash_stripped(self) -> None:
        """Test that base URLs never end with a slash."""
        settings = MusicBrainzSettings(base_url="http://localhost:5000/ws/2/")

        assert settings.base_url == "http://localhost:5000/ws/2"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading MUSICBRAINZ_* variables."""
        monkeypatch.setenv("MUSICBRAINZ_MAX_RETRIES", "3")
        monkeypatch.setenv("MUSICBRAINZ_RATE_LIMIT_ENABLED", "false")

        settings = MusicBrainzSettings()

        assert settings.max_retries == 3
        assert settings.rate_limit_enabled is False

    def test_invalid_values(self) -> None:
        """Test validation of numeric settings."""
        with pytest.raises(ValueError):
            MusicBrainzSettings(max_retries=-1)
        with pytest.raises(ValueError):
            MusicBrainzSettings(rate_limit_per_second=0)


class TestSettings:
    """Test the aggregate."""

    def test_sections(self) -> None:
        """Test that both sections are present."""
        settings = Settings()

        assert isinstance(settings.musicbrainz, MusicBrainzSettings)
        assert isinstance(settings.logging, LoggingSettings)

    def test_get_settings_is_cached(self) -> None:
        """Test that settings are read once."""
        assert get_settings() is get_settings()
