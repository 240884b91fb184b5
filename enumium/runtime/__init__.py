"""Process-level registries and bootstrap helpers.

``bootstrap`` is not imported here because it depends on the model package,
which itself imports :mod:`enumium.runtime.registry`.
"""

from .registry import (
    EnumRegistry,
    default_registry,
    get_all_enum_sets,
    get_enum_set,
    get_global_plugin,
    register_global_plugin,
    set_default_registry,
)

__all__ = [
    "EnumRegistry",
    "default_registry",
    "get_all_enum_sets",
    "get_enum_set",
    "get_global_plugin",
    "register_global_plugin",
    "set_default_registry",
]
