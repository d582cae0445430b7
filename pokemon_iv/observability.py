"""Logging tooling for pokemon_iv."""
from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Any, Dict

from .errors import sanitize_context

__all__ = [
    "LOG_LEVEL_ENV",
    "StructuredLogFormatter",
    "configure_logging",
    "get_logger",
]


LOG_LEVEL_ENV = "POKEMON_IV_LOG_LEVEL"

_STANDARD_ATTRS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys())
_LOGGER_NAME = "pokemon_iv"
_DEFAULT_LEVEL = logging.WARNING
_CONFIGURED = False
_LOCK = threading.Lock()


class StructuredLogFormatter(logging.Formatter):
    """Format log records as structured JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        event = getattr(record, "event", None) or "log"
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": event,
            "message": message,
        }

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and key not in {"message", "asctime", "event"}
        }
        if extras:
            payload["context"] = sanitize_context(extras)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True)


def _level_from_name(name: str) -> int | None:
    resolved = logging.getLevelName(name.strip().upper())
    return resolved if isinstance(resolved, int) else None


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = _level_from_name(level)
    if resolved is None:
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Configure structured logging once and return the package logger.

    When *level* is omitted the ``POKEMON_IV_LOG_LEVEL`` environment variable
    is consulted; failing that the logger stays at ``WARNING`` so library use
    is quiet by default. An unrecognised environment value is ignored with a
    warning, while an unrecognised explicit *level* raises ``ValueError``.
    """

    global _CONFIGURED
    ignored_env_level: str | None = None
    with _LOCK:
        logger = logging.getLogger(_LOGGER_NAME)
        first_call = not _CONFIGURED
        if first_call:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredLogFormatter())
            logger.addHandler(handler)
            logger.propagate = False
            _CONFIGURED = True
        resolved: int | None = None
        if level is not None:
            resolved = _resolve_level(level)
        else:
            env_level = os.environ.get(LOG_LEVEL_ENV, "").strip()
            if env_level:
                resolved = _level_from_name(env_level)
                if resolved is None and first_call:
                    ignored_env_level = env_level
        if resolved is not None:
            logger.setLevel(resolved)
        elif logger.level == logging.NOTSET:
            logger.setLevel(_DEFAULT_LEVEL)
    if ignored_env_level is not None:
        logger.warning(
            "Ignoring unknown log level from environment",
            extra={
                "event": "log_level_ignored",
                "variable": LOG_LEVEL_ENV,
                "value": ignored_env_level,
            },
        )
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger with structured configuration."""

    configure_logging()
    if name:
        if name.startswith(f"{_LOGGER_NAME}."):
            name = name[len(_LOGGER_NAME) + 1 :]
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)
