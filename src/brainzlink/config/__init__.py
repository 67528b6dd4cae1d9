"""Configuration module."""

from .settings import LoggingSettings, MusicBrainzSettings, Settings, get_settings

__all__ = ["LoggingSettings", "MusicBrainzSettings", "Settings", "get_settings"]
