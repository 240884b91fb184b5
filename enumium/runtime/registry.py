"""Registries indexing enum sets and global plugins by name.

``EnumRegistry`` is an explicit object so applications and tests can hold
isolated registries. Sets that are constructed without one land in the
process default returned by :func:`default_registry`; the module-level helpers
below delegate to that default.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List

from enumium.config.models import EnumiumSettings
from enumium.core.errors import InvalidPluginError
from enumium.plugins.base import has_plugin_shape
from enumium.plugins.builtin import BUILTIN_PLUGINS

if TYPE_CHECKING:
    from enumium.model.enum_set import EnumSet

logger = logging.getLogger("enumium.runtime")


class EnumRegistry:
    """Name-indexed, non-owning store of enum sets plus a global plugin table.

    Registering a second set under an existing name replaces the entry
    (last registration wins).
    """

    def __init__(self, settings: EnumiumSettings | None = None) -> None:
        self.settings = settings or EnumiumSettings()
        self._enum_sets: Dict[str, "EnumSet"] = {}
        self._global_plugins: Dict[str, Any] = {}
        if self.settings.register_builtin_plugins:
            for name, plugin_cls in BUILTIN_PLUGINS.items():
                self.register_global_plugin(name, plugin_cls())

    # Enum sets ---------------------------------------------------------
    def register(self, enum_set: "EnumSet") -> None:
        previous = self._enum_sets.get(enum_set.name)
        if previous is not None and previous is not enum_set:
            logger.debug("Replacing registered enum set", extra={"enum_name": enum_set.name})
        self._enum_sets[enum_set.name] = enum_set

    def get_enum_set(self, name: str) -> "EnumSet | None":
        return self._enum_sets.get(name)

    def get_all_enum_sets(self) -> List["EnumSet"]:
        return list(self._enum_sets.values())

    def clear(self) -> None:
        self._enum_sets.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._enum_sets

    def __len__(self) -> int:
        return len(self._enum_sets)

    # Global plugins ----------------------------------------------------
    def register_global_plugin(self, name: str, plugin: Any) -> None:
        if not has_plugin_shape(plugin):
            raise InvalidPluginError(f"Global plugin {name!r} must be a mapping, callable or expose execute")
        self._global_plugins[name] = plugin

    def get_global_plugin(self, name: str) -> Any | None:
        return self._global_plugins.get(name)

    def global_plugin_names(self) -> List[str]:
        return list(self._global_plugins)


_default_registry: EnumRegistry | None = None


def default_registry() -> EnumRegistry:
    """Return the process-wide registry, creating it on first use."""

    global _default_registry
    if _default_registry is None:
        _default_registry = EnumRegistry()
    return _default_registry


def set_default_registry(registry: EnumRegistry) -> EnumRegistry:
    """Replace the process-wide registry and return the previous one."""

    global _default_registry
    previous = default_registry()
    _default_registry = registry
    return previous


def get_enum_set(name: str) -> "EnumSet | None":
    return default_registry().get_enum_set(name)


def get_all_enum_sets() -> List["EnumSet"]:
    return default_registry().get_all_enum_sets()


def register_global_plugin(name: str, plugin: Any) -> None:
    default_registry().register_global_plugin(name, plugin)


def get_global_plugin(name: str) -> Any | None:
    return default_registry().get_global_plugin(name)


__all__ = [
    "EnumRegistry",
    "default_registry",
    "get_all_enum_sets",
    "get_enum_set",
    "get_global_plugin",
    "register_global_plugin",
    "set_default_registry",
]
