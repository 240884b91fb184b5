"""Performance, cache and security views over an enum set.

Each facade is a thin object bound to one :class:`EnumSet`; it holds no state
of its own and reads/writes the set's live counters, cache and access level.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from enumium.core.enums import AccessLevel, EnumEvent

if TYPE_CHECKING:
    from .enum_set import EnumSet

ENCRYPTED_PREFIX = "encrypted_"
_MISSING = object()


class PerformanceFacade:
    """Usage counters (lookups, creations, modifications, serializations)."""

    def __init__(self, enum_set: "EnumSet") -> None:
        self._enum_set = enum_set

    def get_stats(self) -> Dict[str, int]:
        return self._enum_set._stats.to_dict()

    def reset_stats(self) -> None:
        self._enum_set._stats.reset()

    def optimize(self) -> None:
        """Extension point; currently only notifies watchers with ``optimized``."""

        self._enum_set.trigger(EnumEvent.OPTIMIZED, {})


class CacheFacade:
    """Caller-managed key/value scratch space scoped to the set (no eviction, no expiry)."""

    def __init__(self, enum_set: "EnumSet") -> None:
        self._enum_set = enum_set

    def get(self, key: str, default: Any = None) -> Any:
        return self._enum_set._cache.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._enum_set._cache[key] = value

    def has(self, key: str) -> bool:
        return key in self._enum_set._cache

    def delete(self, key: str) -> bool:
        return self._enum_set._cache.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._enum_set._cache.clear()


class SecurityFacade:
    """Access level bookkeeping plus tagging stubs.

    ``encrypt``/``decrypt`` only add and check a string prefix; they provide no
    confidentiality.
    """

    def __init__(self, enum_set: "EnumSet") -> None:
        self._enum_set = enum_set

    def set_access_level(self, level: AccessLevel | str) -> None:
        self._enum_set._access_level = AccessLevel(level)

    def get_access_level(self) -> AccessLevel:
        return self._enum_set._access_level

    def require_access(self, level: AccessLevel | str) -> bool:
        """True when the set's level ranks at or above ``level``."""

        return self._enum_set._access_level.rank >= AccessLevel(level).rank

    def encrypt(self, key: str | None = None) -> str:
        return f"{ENCRYPTED_PREFIX}{self._enum_set.name}"

    def decrypt(self, encrypted: str, key: str | None = None) -> "EnumSet | None":
        if isinstance(encrypted, str) and encrypted.startswith(ENCRYPTED_PREFIX):
            return self._enum_set
        return None


__all__ = ["CacheFacade", "PerformanceFacade", "SecurityFacade", "ENCRYPTED_PREFIX"]
