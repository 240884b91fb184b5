"""Ordered, named collection of :class:`EnumValue` members.

``EnumSet`` owns its members: ``_values`` indexes them by name and
``_ordered`` keeps insertion order for iteration, rendering and the wire
format. Both structures always hold the same members.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterator, List, Mapping

from enumium.core.enums import EnumEvent
from enumium.core.errors import (
    DuplicateNameError,
    FrozenStateError,
    InvalidOperandError,
    InvalidPluginError,
    PluginNotFoundError,
)
from enumium.core.identity import generate_id
from enumium.core.naming import validate_name
from enumium.core.types import InstanceId, Payload
from enumium.plugins.base import has_plugin_shape, resolve_plugin
from enumium.runtime.registry import EnumRegistry, default_registry
from enumium.telemetry.events import EnumStats

from .facades import CacheFacade, PerformanceFacade, SecurityFacade
from .proxy import EnumProxy
from .value import EnumValue
from .watchers import Observable

logger = logging.getLogger("enumium.model")


class EnumSet(Observable):
    """Named enum with metadata, watchers, plugins, cache and access level.

    The set registers itself into ``registry`` (or the process default) under
    its name on construction, replacing any earlier set with that name.
    """

    def __init__(
        self,
        name: str,
        values: Mapping[str, Payload] | None = None,
        metadata: Mapping[str, Any] | None = None,
        *,
        registry: EnumRegistry | None = None,
    ) -> None:
        self.name = validate_name(name)
        self._registry = registry if registry is not None else default_registry()
        self._values: Dict[str, EnumValue] = {}
        self._ordered: List[EnumValue] = []
        self.metadata: Dict[str, Any] = dict(metadata) if metadata is not None else {}
        self.plugins: Dict[str, Any] = {}
        self._id: InstanceId = generate_id()
        self._frozen = False
        self._version = self._registry.settings.default_version
        self._access_level = self._registry.settings.default_access_level
        self._cache: Dict[str, Any] = {}
        self._stats = EnumStats()
        self._init_watchers()

        if values:
            for member_name, payload in values.items():
                self.add_value(member_name, payload)

        self._registry.register(self)

    @property
    def id(self) -> InstanceId:
        return self._id

    @property
    def registry(self) -> EnumRegistry:
        return self._registry

    @property
    def version(self) -> str:
        return self._version

    def _observable_label(self) -> str:
        return self.name

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise FrozenStateError(f"Cannot modify frozen enum {self.name!r}")

    def is_valid(self) -> bool:
        return self.name is not None and self._values is not None

    # Queries -----------------------------------------------------------
    def get_value(self, name: str) -> EnumValue | None:
        self._stats.lookups += 1
        return self._values.get(name)

    def get_value_by_payload(self, value: Payload) -> EnumValue | None:
        """Return the first member whose payload equals ``value``."""

        self._stats.lookups += 1
        for member in self._values.values():
            if member.value == value:
                return member
        return None

    def has_value(self, name: str) -> bool:
        return name in self._values

    def has_value_by_payload(self, value: Payload) -> bool:
        return self.get_value_by_payload(value) is not None

    def get_all_values(self) -> List[EnumValue]:
        return list(self._ordered)

    def get_all_names(self) -> List[str]:
        return list(self._values)

    def get_all_values_as_mapping(self) -> Dict[str, Payload]:
        return {name: member.value for name, member in self._values.items()}

    def validate(self, value: Payload) -> bool:
        return any(member.value == value for member in self._values.values())

    # Mutation ----------------------------------------------------------
    def add_value(
        self,
        name: str,
        value: Payload,
        metadata: Mapping[str, Any] | None = None,
    ) -> EnumValue:
        self._ensure_mutable()
        validate_name(name)
        if name in self._values:
            raise DuplicateNameError(f"Value {name!r} already exists in enum {self.name!r}")

        member = EnumValue(name, value, self.name, metadata, self)
        self._values[name] = member
        self._ordered.append(member)
        self._stats.creations += 1
        logger.debug("Added enum value", extra={"enum_name": self.name, "value_name": name})
        self.trigger(EnumEvent.VALUE_ADDED, {"name": name, "value": member})
        return member

    def remove_value(self, name: str) -> bool:
        self._ensure_mutable()
        member = self._values.pop(name, None)
        if member is None:
            return False
        self._ordered = [existing for existing in self._ordered if existing is not member]
        self._stats.modifications += 1
        logger.debug("Removed enum value", extra={"enum_name": self.name, "value_name": name})
        self.trigger(EnumEvent.VALUE_REMOVED, {"name": name, "value": member})
        return True

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def set_metadata(self, key: str, value: Any) -> None:
        self._ensure_mutable()
        self.metadata[key] = value
        self.trigger(EnumEvent.METADATA_CHANGED, {"key": key, "value": value})

    # Rendering / comparison --------------------------------------------
    def to_string(self) -> str:
        lines = [f"Enum {self.name} {{"]
        lines.extend(f"  {member.describe()}" for member in self._ordered)
        lines.append("}")
        return "\n".join(lines)

    def equals(self, other: Any) -> bool:
        if not isinstance(other, EnumSet):
            return False
        if self.name != other.name or len(self._ordered) != len(other._ordered):
            return False
        for member in self._ordered:
            counterpart = other._values.get(member.name)
            if counterpart is None or not member.equals(counterpart):
                return False
        return True

    # Copies and derived sets -------------------------------------------
    def clone(self) -> "EnumSet":
        """Return ``<name>_Clone`` with deep-copied payloads and metadata.

        Members are re-added through :meth:`add_value`, so the clone fires its
        own ``value_added`` events and counts its own creations.
        """

        cloned = EnumSet(
            f"{self.name}_Clone",
            metadata=copy.deepcopy(self.metadata),
            registry=self._registry,
        )
        cloned._version = self._version
        cloned._access_level = self._access_level
        for member in self._ordered:
            cloned.add_value(member.name, copy.deepcopy(member.value), copy.deepcopy(member.metadata))
        return cloned

    def compose(self, other: "EnumSet") -> "EnumSet":
        """Union of both sets; on a name collision this set's member wins."""

        if not isinstance(other, EnumSet):
            raise InvalidOperandError("Cannot compose with non-enum")
        composed = EnumSet(f"{self.name}_{other.name}_Composed", registry=self._registry)
        for member in self._ordered:
            composed.add_value(member.name, member.value, member.metadata)
        for member in other._ordered:
            if not composed.has_value(member.name):
                composed.add_value(member.name, member.value, member.metadata)
        return composed

    def inherit(self, parent: "EnumSet", *, override: bool = False) -> "EnumSet":
        """Build ``<name>_Inherited`` from ``parent``'s members followed by this set's.

        By default a child member named like a parent member raises
        :class:`DuplicateNameError`. With ``override=True`` the child payload and
        metadata replace the parent's in the parent's position instead.
        """

        if not isinstance(parent, EnumSet):
            raise InvalidOperandError("Cannot inherit from non-enum")
        inherited = EnumSet(f"{self.name}_Inherited", registry=self._registry)
        for member in parent._ordered:
            source = self._values.get(member.name) if override else None
            if source is None:
                source = member
            inherited.add_value(source.name, source.value, source.metadata)
        for member in self._ordered:
            if override and inherited.has_value(member.name):
                continue
            inherited.add_value(member.name, member.value, member.metadata)
        return inherited

    # Versioning --------------------------------------------------------
    def get_version(self) -> str:
        return self._version

    def set_version(self, version: str) -> None:
        self._version = version
        self.trigger(EnumEvent.VERSION_CHANGED, {"version": version})

    def migrate(self, from_version: str, to_version: str) -> "EnumSet":
        """Return a clone stamped with ``to_version``; payloads are not transformed."""

        migrated = self.clone()
        migrated.set_version(to_version)
        self.trigger(EnumEvent.MIGRATED, {"fromVersion": from_version, "toVersion": to_version})
        return migrated

    # Freezing ----------------------------------------------------------
    def freeze(self) -> None:
        self._frozen = True
        for member in self._ordered:
            member.freeze()
        self.trigger(EnumEvent.FROZEN, {})

    def unfreeze(self) -> None:
        self._frozen = False
        for member in self._ordered:
            member.unfreeze()
        self.trigger(EnumEvent.THAWED, {})

    def is_frozen(self) -> bool:
        return self._frozen

    # Wire format -------------------------------------------------------
    def serialize(self) -> Dict[str, Any]:
        self._stats.serializations += 1
        return {
            "name": self.name,
            "version": self._version,
            "metadata": copy.deepcopy(self.metadata),
            "values": [member.serialize() for member in self._ordered],
            "id": self._id,
        }

    @classmethod
    def deserialize(cls, data: Mapping[str, Any], *, registry: EnumRegistry | None = None) -> "EnumSet":
        """Rebuild a set from :meth:`serialize` output.

        Members are inserted directly, bypassing :meth:`add_value`: no name,
        duplicate or frozen checks run and no ``value_added`` events fire.
        """

        instance = cls(data["name"], metadata=copy.deepcopy(data.get("metadata") or {}), registry=registry)
        instance._version = data.get("version") or instance._registry.settings.default_version
        if data.get("id") is not None:
            instance._id = InstanceId(str(data["id"]))
        for entry in data.get("values") or []:
            member = EnumValue.deserialize(entry, parent=instance)
            instance._values[member.name] = member
            instance._ordered.append(member)
        return instance

    # Plugins -----------------------------------------------------------
    def register_plugin(self, name: str, plugin: Any) -> None:
        if not has_plugin_shape(plugin):
            raise InvalidPluginError(f"Plugin {name!r} must be a mapping, callable or expose execute")
        self.plugins[name] = plugin
        self.trigger(EnumEvent.PLUGIN_REGISTERED, {"name": name, "plugin": plugin})

    def get_plugin(self, name: str) -> Any | None:
        return self.plugins.get(name)

    def execute_plugin(self, name: str, *args: Any, **kwargs: Any) -> Any:
        if name not in self.plugins:
            raise PluginNotFoundError(f"Plugin {name!r} not found in enum {self.name!r}")
        plugin = resolve_plugin(self.plugins[name], name=name)
        return plugin.execute(self, *args, **kwargs)

    # Facades -----------------------------------------------------------
    def performance(self) -> PerformanceFacade:
        return PerformanceFacade(self)

    def cache(self) -> CacheFacade:
        return CacheFacade(self)

    def security(self) -> SecurityFacade:
        return SecurityFacade(self)

    def create_proxy(self) -> EnumProxy:
        return EnumProxy(self)

    # Python protocol ---------------------------------------------------
    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[EnumValue]:
        return iter(list(self._ordered))

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"EnumSet(name={self.name!r}, values={self.get_all_names()!r})"


__all__ = ["EnumSet"]
