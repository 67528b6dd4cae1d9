"""Runtime configuration for brainzlink.

Hey future me - everything a caller can tune lives here: base URLs, the
identifying User-Agent, the retry cap and the rate limiter budget. Values
come from keyword arguments first, then MUSICBRAINZ_* environment variables,
then an optional .env file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from brainzlink import __version__

DEFAULT_BASE_URL = "https://musicbrainz.org/ws/2"
DEFAULT_COVERART_URL = "https://coverartarchive.org"


class MusicBrainzSettings(BaseSettings):
    """MusicBrainz web service settings.

    Attributes:
        base_url: Root of the metadata API (no trailing slash)
        coverart_url: Root of the Cover Art Archive
        app_name: Application name used to build the User-Agent
        app_version: Application version used to build the User-Agent
        contact: Contact URL or e-mail for the service maintainers
        user_agent: Explicit User-Agent, overrides app_name/app_version/contact
        max_retries: Attempts allowed while the service answers 503
        rate_limit_enabled: Whether requests go through the token bucket
        rate_limit_burst: Bucket capacity (requests allowed in a burst)
        rate_limit_per_second: Bucket refill rate
        timeout: Transport timeout in seconds
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSICBRAINZ_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    coverart_url: str = DEFAULT_COVERART_URL
    app_name: str = "brainzlink"
    app_version: str = __version__
    contact: str = ""
    user_agent: str | None = None
    max_retries: int = Field(default=10, ge=0)
    rate_limit_enabled: bool = True
    rate_limit_burst: int = Field(default=5, ge=1)
    rate_limit_per_second: float = Field(default=1.0, gt=0)
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("base_url", "coverart_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    # MusicBrainz wants "AppName/Version ( contact )" with those exact spaces. Without
    # a contact we still send name/version, never an empty header.
    @property
    def effective_user_agent(self) -> str:
        """User-Agent value sent with every request."""
        if self.user_agent and self.user_agent.strip():
            return self.user_agent.strip()

        contact = self.contact.strip()
        if contact:
            return f"{self.app_name}/{self.app_version} ( {contact} )"
        return f"{self.app_name}/{self.app_version}"


class LoggingSettings(BaseSettings):
    """Logging settings used by configure_logging()."""

    model_config = SettingsConfigDict(
        env_prefix="BRAINZLINK_LOG_",
        env_file=".env",
        extra="ignore",
    )

    level: str = "INFO"
    json_format: bool = False


class Settings(BaseSettings):
    """All brainzlink settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    musicbrainz: MusicBrainzSettings = Field(default_factory=MusicBrainzSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Return the process settings (read once, then cached)."""
    return Settings()
