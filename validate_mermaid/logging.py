"""Logging configuration for the validator.

This module provides:
- Root logger setup with a stderr console handler
- Optional structured JSON log records
- Helper for getting module loggers
- Error message sanitization for log records

Log records are diagnostics only. The per-block error lines and the final
verdict are written by the console reporter, not through logging.
"""

import logging
import re
import sys
from datetime import UTC, datetime
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from validate_mermaid.settings import Settings, get_settings

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_WHITESPACE_PATTERN = re.compile(r"\s+")

_console_handler: logging.Handler | None = None


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with ISO timestamp and component fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the JSON log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["component"] = record.name


def setup_logging(settings: Settings | None = None) -> None:
    """Configure the root logger for a validation run.

    The console handler installed by a previous call is replaced; handlers
    added by anything else are left alone.
    """
    global _console_handler

    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    if settings.log_json:
        console_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    else:
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)
    _console_handler = console_handler

    root_logger.debug(
        f"Logging configured: level={settings.log_level}, json={settings.log_json}"
    )


def sanitize_error(error: Exception | str, max_length: int = 500) -> str:
    """Collapse whitespace and truncate an error message for a log record.

    Args:
        error: The exception or raw message to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        Single-line message safe for logging
    """
    msg = _WHITESPACE_PATTERN.sub(" ", str(error)).strip()
    if len(msg) > max_length:
        msg = msg[:max_length] + "...[truncated]"
    return msg


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
