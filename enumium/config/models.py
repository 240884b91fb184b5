"""Typed configuration models for enumium.

The config subsystem relies on pydantic to validate YAML files and to
provide strongly-typed objects to the registry and bootstrap helpers.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from enumium.core.enums import AccessLevel
from enumium.core.naming import NAME_PATTERN


class EnumiumSettings(BaseModel):
    """Defaults applied by :class:`~enumium.runtime.registry.EnumRegistry`."""

    default_version: str = Field("1.0.0", min_length=1)
    default_access_level: AccessLevel = AccessLevel.PUBLIC
    register_builtin_plugins: bool = True
    log_level: str = Field("INFO")

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


class EnumValueDefinition(BaseModel):
    """One member entry of an enum definition file."""

    name: str = Field(..., pattern=NAME_PATTERN.pattern)
    value: Any
    metadata: Dict[str, Any] = Field(default_factory=dict)


class EnumDefinition(BaseModel):
    """Declarative description of an enum set.

    ``values`` keeps file order, which becomes member order. ``plugins`` lists
    global plugin names attached to the set under the same name.
    """

    name: str = Field(..., pattern=NAME_PATTERN.pattern)
    version: Optional[str] = None
    access_level: Optional[AccessLevel] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    values: List[EnumValueDefinition] = Field(default_factory=list)
    plugins: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _reject_duplicate_members(self) -> "EnumDefinition":
        seen: set[str] = set()
        for entry in self.values:
            if entry.name in seen:
                raise ValueError(f"Duplicate member {entry.name!r} in enum {self.name!r}")
            seen.add(entry.name)
        return self
