"""In-memory enumerations with metadata, change notification and plugins.

An :class:`EnumSet` is a named, ordered collection of :class:`EnumValue`
members. Sets index themselves in an :class:`EnumRegistry` (the process
default unless one is passed explicitly), which also holds global plugins
such as the built-in ``Validation``, ``Math``, ``Search`` and ``Export``.
"""

from .core.enums import AccessLevel, EnumEvent
from .core.errors import (
    ConfigurationError,
    DuplicateNameError,
    EnumiumError,
    FrozenStateError,
    InvalidNameError,
    InvalidOperandError,
    InvalidPluginError,
    PluginNotFoundError,
)
from .model import EnumProxy, EnumSet, EnumValue
from .plugins import FunctionPlugin, Plugin
from .runtime import (
    EnumRegistry,
    default_registry,
    get_all_enum_sets,
    get_enum_set,
    get_global_plugin,
    register_global_plugin,
    set_default_registry,
)

__all__ = [
    "AccessLevel",
    "ConfigurationError",
    "DuplicateNameError",
    "EnumEvent",
    "EnumProxy",
    "EnumRegistry",
    "EnumSet",
    "EnumValue",
    "EnumiumError",
    "FrozenStateError",
    "FunctionPlugin",
    "InvalidNameError",
    "InvalidOperandError",
    "InvalidPluginError",
    "Plugin",
    "PluginNotFoundError",
    "default_registry",
    "get_all_enum_sets",
    "get_enum_set",
    "get_global_plugin",
    "register_global_plugin",
    "set_default_registry",
]
