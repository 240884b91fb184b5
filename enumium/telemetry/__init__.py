"""Telemetry and logging subsystem package."""
from .events import EnumStats, WatcherFailure
from .logging_setup import JsonFormatter, configure_logging, configure_logging_from_settings

__all__ = [
    "EnumStats",
    "JsonFormatter",
    "WatcherFailure",
    "configure_logging",
    "configure_logging_from_settings",
]
