"""Logging setup for applications using brainzlink.

The library itself only calls logging.getLogger(__name__) and never installs
handlers. configure_logging() is an opt-in helper for scripts and services.
"""

import logging
import sys
import traceback
from pathlib import Path
from typing import IO, Any

from pythonjsonlogger import jsonlogger

from brainzlink.config.settings import LoggingSettings

PACKAGE_NAME = "brainzlink"


class CompactExceptionFormatter(logging.Formatter):
    """Formatter that shows exception chains without traceback boilerplate.

    Hey future me - a failed lookup is usually TransportError <- httpx.ConnectError
    <- httpcore.ConnectError. The default traceback prints three walls of frames
    joined by "The above exception was the direct cause...". This prints one line
    per exception in the chain (root cause first) and only the frames from our
    own package below each one.

    Example output:
    ERROR   │ brainzlink.infrastructure.integrations.musicbrainz_client:240 │ ...
    ╰─► ConnectError: All connection attempts failed
    ╰─► TransportError: Request to MusicBrainz failed: All connection attempts failed
        File "musicbrainz_client.py", line 218, in send_with_retries
          raise TransportError(f"Request to MusicBrainz failed: {e}", url) from e
    """

    def formatException(self, ei: Any) -> str:
        """Format exception chain in a compact, readable way.

        Args:
            ei: Exception info tuple (type, value, traceback)

        Returns:
            Formatted exception string with compact chain representation
        """
        _, exc_value, _ = ei
        if exc_value is None:
            return ""

        # Walk the chain via __cause__ (explicit) or __context__ (implicit)
        exceptions: list[BaseException] = []
        current: BaseException | None = exc_value
        while current is not None and current not in exceptions:
            exceptions.append(current)
            current = current.__cause__ or current.__context__
        exceptions.reverse()

        lines: list[str] = []
        for exc in exceptions:
            lines.append(f"╰─► {exc.__class__.__name__}: {exc}")
            if exc.__traceback__ is None:
                continue
            for frame in traceback.extract_tb(exc.__traceback__):
                if PACKAGE_NAME not in frame.filename:
                    continue
                lines.append(
                    f'    File "{Path(frame.filename).name}", line {frame.lineno}, in {frame.name}'
                )
                if frame.line:
                    lines.append(f"      {frame.line.strip()}")

        return "\n".join(lines)


class CustomJsonFormatter(jsonlogger.JsonFormatter):  # type: ignore[name-defined,misc]
    """JSON formatter with a fixed set of extra fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: Dictionary to be logged as JSON
            record: Python logging record
            message_dict: Message dictionary from format string
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName
        log_record["line"] = record.lineno

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)


# Listen future me, call this ONCE at startup, it configures the ROOT logger and
# drops whatever handlers were there (important for tests/reloads). json_format=True
# for log aggregation, False for humans. httpx/httpcore log every request at INFO,
# which doubles our own DEBUG "GET <url>" lines, so they're pinned to WARNING.
def configure_logging(
    log_level: str = "INFO",
    json_format: bool = False,
    app_name: str = PACKAGE_NAME,
    stream: IO[str] | None = None,
) -> None:
    """Configure logging for an application using brainzlink.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON format for logs
        app_name: Application name included in the startup record
        stream: Output stream (stdout when omitted)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)

    if json_format:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = CompactExceptionFormatter(
            fmt="%(asctime)s │ %(levelname)-7s │ %(name)s:%(lineno)d │ %(message)s",
            datefmt="%H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={
            "app_name": app_name,
            "log_level": log_level,
            "json_format": json_format,
        },
    )


def configure_logging_from_settings(settings: LoggingSettings | None = None) -> None:
    """configure_logging() driven by BRAINZLINK_LOG_* settings."""
    settings = settings or LoggingSettings()
    configure_logging(log_level=settings.level, json_format=settings.json_format)


__all__ = [
    "CompactExceptionFormatter",
    "CustomJsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
]
