"""Centralized logging configuration for applications embedding enumium.

The library itself only emits records on ``enumium.*`` loggers; nothing here
runs on import.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict

from enumium.config.models import EnumiumSettings

# LogRecord attributes that are not user supplied ``extra`` fields.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Serialize LogRecord fields as JSON for ingestion-friendly logs."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS:
                continue
            if key in payload:
                continue
            try:
                json.dumps({key: value})
            except TypeError:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    level: str = "INFO",
    log_dir: Path | None = None,
    logger_name: str = "enumium",
) -> Logger:
    """Configure the ``enumium`` logger with JSON stream (and optional file) output."""

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(JsonFormatter())
    logger.addHandler(stream_handler)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "enumium_current.jsonl"
        handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    logger.propagate = False
    logger.debug("JSON logging configured", extra={"log_file": str(log_file) if log_file else None})
    return logger


def configure_logging_from_settings(settings: EnumiumSettings, *, log_dir: Path | None = None) -> Logger:
    """Configure the ``enumium`` logger at ``settings.log_level``."""

    return configure_logging(level=settings.log_level, log_dir=log_dir)


__all__ = ["configure_logging", "configure_logging_from_settings", "JsonFormatter"]
