"""Enumerations shared across enumium subsystems.

They live in the core package so that the model, plugin and runtime packages
can import them without introducing circular dependencies.
"""
from __future__ import annotations

from enum import Enum


class AccessLevel(str, Enum):
    """Access hierarchy used by the security facade (public < protected < private)."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @property
    def rank(self) -> int:
        return _ACCESS_RANKS[self]


_ACCESS_RANKS = {
    AccessLevel.PUBLIC: 1,
    AccessLevel.PROTECTED: 2,
    AccessLevel.PRIVATE: 3,
}


class EnumEvent(str, Enum):
    """Names of the notifications delivered to watchers."""

    VALUE_ADDED = "value_added"
    VALUE_REMOVED = "value_removed"
    METADATA_CHANGED = "metadata_changed"
    PLUGIN_REGISTERED = "plugin_registered"
    VERSION_CHANGED = "version_changed"
    MIGRATED = "migrated"
    FROZEN = "frozen"
    THAWED = "thawed"  # emitted by unfreeze()
    OPTIMIZED = "optimized"
