"""Plugin interface and the built-in plugin set."""

from .base import FunctionPlugin, Plugin, has_plugin_shape, resolve_plugin
from .builtin import BUILTIN_PLUGINS, ExportPlugin, MathPlugin, SearchPlugin, ValidationPlugin

__all__ = [
    "BUILTIN_PLUGINS",
    "ExportPlugin",
    "FunctionPlugin",
    "MathPlugin",
    "Plugin",
    "SearchPlugin",
    "ValidationPlugin",
    "has_plugin_shape",
    "resolve_plugin",
]
