"""Observability infrastructure for structured logging."""

from brainzlink.infrastructure.observability.logging import (
    CompactExceptionFormatter,
    CustomJsonFormatter,
    configure_logging,
    configure_logging_from_settings,
)

__all__ = [
    "CompactExceptionFormatter",
    "CustomJsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
]
