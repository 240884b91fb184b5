"""Identifier rules for enum set and member names."""
from __future__ import annotations

import re
from typing import Any

from .errors import InvalidNameError

NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_valid_name(name: Any) -> bool:
    """Return True when ``name`` is a non-empty identifier-like string."""

    return isinstance(name, str) and NAME_PATTERN.match(name) is not None


def validate_name(name: Any) -> str:
    """Return ``name`` unchanged or raise :class:`InvalidNameError`."""

    if not isinstance(name, str) or name == "":
        raise InvalidNameError("Enum name must be a non-empty string")
    if NAME_PATTERN.match(name) is None:
        raise InvalidNameError(
            f"Invalid name {name!r}: must start with a letter or underscore and "
            "contain only letters, numbers, and underscores"
        )
    return name
