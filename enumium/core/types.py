"""Shared type aliases for readability and contract enforcement."""
from __future__ import annotations

from typing import Any, Callable, NewType, TypeAlias

InstanceId = NewType("InstanceId", str)

Payload: TypeAlias = Any
WatcherCallback: TypeAlias = Callable[[str, Any], Any]
