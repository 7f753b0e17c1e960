"""
Logging for the exposure engine.

All engine loggers hang off the ``photo_assistant`` logger. Output goes to
stdout as plain text or JSON lines, optionally mirrored to a JSON file, as
chosen by ``log_level``, ``log_json`` and ``log_file`` in the settings.

Usage:
    from photo_assistant.core.logging import LogContext, get_logger

    logger = get_logger(__name__)
    with LogContext(film_id="hp5_plus"):
        logger.debug("Applying reciprocity", extra={"metered_seconds": 8.0})
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "photo_assistant"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

# Exposure fields callers pass through ``extra``
EXTRA_FIELDS = ("operation", "film_id", "metered_seconds", "corrected_seconds")

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

_logging_configured = False


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with the active LogContext attached."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "line": record.lineno,
        }

        context = _log_context.get()
        if context:
            payload["context"] = context

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool | None = None,
) -> None:
    """Attach handlers to the package logger.

    Calling again replaces the previous handlers. Arguments left as None are
    taken from the settings.

    Args:
        level: Log level name, e.g. "DEBUG".
        log_file: File that receives JSON lines in addition to stdout.
        json_format: Write JSON lines to stdout instead of text.
    """
    global _logging_configured

    # Deferred: config imports core, which imports this module
    from photo_assistant.config import get_settings

    settings = get_settings()
    level = level or settings.log_level
    log_file = log_file if log_file is not None else settings.log_file
    json_format = settings.log_json if json_format is None else json_format

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper())
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(JSONFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    package_logger.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger under the package namespace, configuring logging on first use."""
    if not _logging_configured:
        setup_logging()

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


class LogContext:
    """Add key/value pairs to every JSON record logged inside the block.

    Contexts nest; inner values win and are dropped again on exit.
    """

    def __init__(self, **context: Any):
        self.context = context
        self._token = None

    def __enter__(self) -> "LogContext":
        self._token = _log_context.set({**_log_context.get(), **self.context})
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def current_log_context() -> dict[str, Any]:
    """Copy of the context active in the current scope."""
    return dict(_log_context.get())
