"""Core primitives shared across all subsystems.

This module aggregates enums, common types, naming rules, identifier helpers
and error classes. Higher level packages import from here to avoid circular
dependencies.
"""

from . import enums, errors, identity, naming, types

__all__ = ["enums", "errors", "identity", "naming", "types"]
