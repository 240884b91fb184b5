"""YAML loaders for the config subsystem.

Each helper here consumes one YAML file, validates it via models.py and
returns typed objects to the caller.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Sequence

import yaml
from pydantic import ValidationError

from enumium.core.errors import ConfigurationError

from .models import EnumDefinition, EnumiumSettings

logger = logging.getLogger("enumium.config")


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to read {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_settings(path: Path | str) -> EnumiumSettings:
    """Load library settings, optionally nested under an ``enumium:`` key."""

    path = Path(path)
    data = _read_yaml(path)
    section = data.get("enumium", data)
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"`enumium` section must be a mapping in {path}")
    try:
        settings = EnumiumSettings.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc
    logger.debug("Loaded settings", extra={"config_path": str(path)})
    return settings


def load_enum_definitions(path: Path | str) -> List[EnumDefinition]:
    """Load ``enums: [...]`` definitions in file order."""

    path = Path(path)
    data = _read_yaml(path)
    raw_enums = data.get("enums")
    if raw_enums is None:
        raise ConfigurationError(f"{path} must contain `enums: [...]`")
    if not isinstance(raw_enums, Sequence) or isinstance(raw_enums, str):
        raise ConfigurationError("`enums` must be a list")
    definitions: List[EnumDefinition] = []
    for entry in raw_enums:
        try:
            definitions.append(EnumDefinition.model_validate(entry))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid enum definition in {path}: {exc}") from exc
    logger.debug(
        "Loaded enum definitions",
        extra={"config_path": str(path), "n_definitions": len(definitions)},
    )
    return definitions
