"""Build enum sets from declarative definitions (see ``config.loader``)."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable

from enumium.config.loader import load_enum_definitions
from enumium.config.models import EnumDefinition
from enumium.core.errors import PluginNotFoundError
from enumium.model.enum_set import EnumSet

from .registry import EnumRegistry, default_registry

logger = logging.getLogger("enumium.runtime")


def build_enum_set(definition: EnumDefinition, registry: EnumRegistry) -> EnumSet:
    """Create one set, adding members in definition order via ``add_value``."""

    enum_set = EnumSet(definition.name, metadata=definition.metadata, registry=registry)
    if definition.version is not None:
        enum_set.set_version(definition.version)
    if definition.access_level is not None:
        enum_set.security().set_access_level(definition.access_level)
    for entry in definition.values:
        enum_set.add_value(entry.name, entry.value, entry.metadata)
    for plugin_name in definition.plugins:
        plugin = registry.get_global_plugin(plugin_name)
        if plugin is None:
            raise PluginNotFoundError(
                f"Global plugin {plugin_name!r} requested by enum {definition.name!r} is not registered"
            )
        enum_set.register_plugin(plugin_name, plugin)
    return enum_set


def build_enum_sets(
    definitions: Iterable[EnumDefinition],
    registry: EnumRegistry | None = None,
) -> Dict[str, EnumSet]:
    """Build every definition into ``registry`` and return the sets by name."""

    target = registry if registry is not None else default_registry()
    built: Dict[str, EnumSet] = {}
    for definition in definitions:
        built[definition.name] = build_enum_set(definition, target)

    logger.info(
        "Built enum sets",
        extra={"n_enum_sets": len(built), "enum_names": list(built)},
    )
    return built


def load_enum_sets(path: Path | str, registry: EnumRegistry | None = None) -> Dict[str, EnumSet]:
    """Load ``enums: [...]`` from YAML and build them."""

    return build_enum_sets(load_enum_definitions(path), registry)


__all__ = ["build_enum_set", "build_enum_sets", "load_enum_sets"]
