"""Helpers for timestamps and per-instance identifiers.

Every enum value and enum set carries an opaque identifier built from the
creation timestamp and a random suffix. Uniqueness is best-effort only.
"""
from __future__ import annotations

import random
from datetime import datetime, timezone

from .types import InstanceId

_SUFFIX_MIN = 1_000_000
_SUFFIX_MAX = 9_999_999


def now_utc() -> datetime:
    """Return the current UTC datetime with tzinfo."""

    return datetime.now(timezone.utc)


def generate_id() -> InstanceId:
    """Return ``"<unix timestamp>_<random 7 digit suffix>"``."""

    suffix = random.randint(_SUFFIX_MIN, _SUFFIX_MAX)
    return InstanceId(f"{now_utc().timestamp()}_{suffix}")
