"""Structured logging infrastructure for wsdclient.

This module provides JSON-formatted structured logging. Credentials must be
passed through ``redact_secret`` by the caller before they reach a log entry.
"""

import hashlib
import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

__all__ = ["StructuredLogger", "configure_logging", "get_logger", "redact_secret"]

LOG_LEVEL_ENV = "WSDCLIENT_LOG_LEVEL"

_EXCLUDED_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)

_configured: set[str] = set()


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs JSON-structured log entries."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_entry = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update({key: value for key, value in record.__dict__.items() if key not in _EXCLUDED_FIELDS})
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class StructuredLogger:
    """Wrapper around standard logger with structured logging support."""

    def __init__(self, logger: logging.Logger) -> None:
        """Initialize structured logger.

        Args:
            logger: The underlying Python logger instance.
        """
        self._logger = logger

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs: Any) -> None:
        """Internal log method with extra fields support.

        Args:
            level: Log level.
            msg: Log message.
            exc_info: Attach the current exception to the entry.
            **kwargs: Additional fields to include in the log entry.
        """
        self._logger.log(level, msg, exc_info=exc_info, extra=dict(kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log error message with the active exception's traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        """Log critical message."""
        self._log(logging.CRITICAL, msg, **kwargs)


def _level_from_env() -> int:
    log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    return getattr(logging, log_level, logging.INFO)


def _install_handler(logger: logging.Logger, level: int, stream: TextIO) -> None:
    logger.handlers.clear()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(level)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured StructuredLogger instance.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        _install_handler(logger, _level_from_env(), sys.stdout)
        _configured.add(name)

    return StructuredLogger(logger)


def configure_logging(level: int | None = None, stream: TextIO | None = None) -> None:
    """Reconfigure every logger handed out by ``get_logger``.

    Args:
        level: Log level; defaults to the level from the environment.
        stream: Output stream; defaults to stdout.
    """
    for name in _configured:
        _install_handler(
            logging.getLogger(name),
            level if level is not None else _level_from_env(),
            stream if stream is not None else sys.stdout,
        )


def redact_secret(value: str | None) -> str | None:
    """Replace a credential with a short stable tag safe to log.

    Args:
        value: Secret value, e.g. an API key.

    Returns:
        ``[REDACTED_<hash>]`` or None when no value is given.
    """
    if value is None:
        return None
    hash_value = hashlib.sha256(value.encode()).hexdigest()[:8]
    return f"[REDACTED_{hash_value}]"
