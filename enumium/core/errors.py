"""Error hierarchy shared by the enumium subsystems.

Every failure raised by the library derives from :class:`EnumiumError` so that
embedding applications can catch library signals with a single ``except``.
Submodules should raise the most specific error available.
"""
from __future__ import annotations


class EnumiumError(Exception):
    """Base class for all custom exceptions in the library."""


class InvalidNameError(EnumiumError):
    """Raised when a name is absent, empty or not a valid identifier."""


class DuplicateNameError(EnumiumError):
    """Raised when adding a member whose name already exists in the set."""


class FrozenStateError(EnumiumError):
    """Raised when mutating a frozen enum value or enum set."""


class InvalidPluginError(EnumiumError):
    """Raised when a plugin has no usable ``execute`` capability."""


class PluginNotFoundError(EnumiumError):
    """Raised when executing a plugin name that is not registered."""


class InvalidOperandError(EnumiumError):
    """Raised when composing or inheriting with something that is not an enum set."""


class ConfigurationError(EnumiumError):
    """Raised when configuration files are missing or invalid."""
