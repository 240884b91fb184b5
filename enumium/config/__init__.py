"""Configuration loading and validation package."""

from .loader import load_enum_definitions, load_settings
from .models import EnumDefinition, EnumiumSettings, EnumValueDefinition

__all__ = [
    "EnumDefinition",
    "EnumValueDefinition",
    "EnumiumSettings",
    "load_enum_definitions",
    "load_settings",
]
