"""Structured telemetry records (usage counters, dropped watcher failures)."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict

from enumium.core.identity import now_utc


@dataclass(slots=True)
class EnumStats:
    """Usage counters kept per enum set and exposed by the performance facade."""

    lookups: int = 0
    creations: int = 0
    modifications: int = 0
    serializations: int = 0

    def reset(self) -> None:
        self.lookups = 0
        self.creations = 0
        self.modifications = 0
        self.serializations = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(slots=True)
class WatcherFailure:
    """Describes an exception raised by a watcher and discarded by ``trigger``.

    Instances are handed to the optional diagnostic hook of the observable that
    dispatched the event, so embedding applications can see dropped failures
    without ``trigger`` ever raising.
    """

    source: str
    event: str
    callback: str
    error: BaseException
    data: Any = field(default_factory=dict)
    timestamp: datetime = field(default_factory=now_utc)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "event": self.event,
            "callback": self.callback,
            "error_type": type(self.error).__name__,
            "error": str(self.error),
            "timestamp": self.timestamp.isoformat(),
        }


__all__ = ["EnumStats", "WatcherFailure"]
