"""Structured logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, MutableMapping

from config.settings import ListsSettings


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs JSON-structured log records."""

    def format(self, record: logging.LogRecord) -> str:
        log_dict: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_dict.update(record.extra_fields)

        if record.exc_info:
            log_dict["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_dict, default=str)


class StructuredLogger(logging.LoggerAdapter[logging.Logger]):
    """Logger adapter that supports structured fields."""

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        if self.extra:
            for key, value in self.extra.items():
                extra.setdefault(key, value)
        kwargs["extra"] = {"extra_fields": extra}
        return msg, kwargs


_configured = False


def configure_logging(
    level: int | str | None = None,
    structured: bool | None = None,
) -> None:
    """Configure logging for the engine.

    Unset arguments fall back to ``LISTS_LOG_LEVEL`` / ``LISTS_STRUCTURED_LOGGING``.
    Only the first call has any effect.
    """
    global _configured
    if _configured:
        return

    if level is None or structured is None:
        settings = ListsSettings()
        level = settings.log_level if level is None else level
        structured = settings.structured_logging if structured is None else structured

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    if structured:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)
    _configured = True


def get_logger(name: str, **extra: Any) -> StructuredLogger:
    """Get a structured logger with optional default extra fields.

    Handlers are installed later by ``configure_logging``; fetching a logger
    never reads settings.
    """
    base_logger = logging.getLogger(name)
    return StructuredLogger(base_logger, extra)
