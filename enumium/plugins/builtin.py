"""Built-in plugins pre-registered on every :class:`EnumRegistry`.

They are ordinary plugins: attach one to a set with ``register_plugin`` and
call it through ``execute_plugin``.
"""
from __future__ import annotations

import json
import logging
from numbers import Real
from typing import TYPE_CHECKING, Any, Dict, List

from .base import Plugin

if TYPE_CHECKING:
    from enumium.model.enum_set import EnumSet
    from enumium.model.value import EnumValue

logger = logging.getLogger("enumium.plugins")


def _numeric_payloads(enum_set: "EnumSet") -> List[int | float]:
    """Return payloads that are real numbers, in member order.

    ``bool`` is excluded, and so is ``decimal.Decimal``, which is not registered
    as :class:`numbers.Real` and cannot be summed together with floats.
    """

    return [
        member.value
        for member in enum_set.get_all_values()
        if isinstance(member.value, Real) and not isinstance(member.value, bool)
    ]


class ValidationPlugin(Plugin):
    """Membership check; strict compares payloads, loose compares their ``str`` forms."""

    name = "Validation"

    def execute(self, enum_set: "EnumSet", value: Any = None, strict: bool = False) -> bool:
        if strict:
            return enum_set.validate(value)
        target = str(value)
        return any(str(member.value) == target for member in enum_set.get_all_values())


class MathPlugin(Plugin):
    """Aggregates over numeric payloads: ``sum`` and ``average``."""

    name = "Math"

    def execute(self, enum_set: "EnumSet", operation: str = "sum", *args: Any) -> int | float | None:
        numbers = _numeric_payloads(enum_set)
        if operation == "sum":
            return sum(numbers)
        if operation == "average":
            return sum(numbers) / len(numbers) if numbers else 0
        logger.warning(
            "Unknown Math operation",
            extra={"enum_name": enum_set.name, "operation": operation},
        )
        return None


class SearchPlugin(Plugin):
    """Case-insensitive substring search over member names or stringified payloads."""

    name = "Search"

    def execute(self, enum_set: "EnumSet", query: str = "", field: str = "name") -> List["EnumValue"]:
        needle = str(query).lower()
        results: List["EnumValue"] = []
        for member in enum_set.get_all_values():
            haystack = member.name if field == "name" else str(member.value)
            if needle in haystack.lower():
                results.append(member)
        return results


class ExportPlugin(Plugin):
    """Render a set as a compact JSON object (``"json"``) or its text form (``"text"``)."""

    name = "Export"

    def execute(self, enum_set: "EnumSet", format: str = "json") -> str | None:
        if format == "json":
            mapping: Dict[str, Any] = {member.name: member.value for member in enum_set.get_all_values()}
            return json.dumps(mapping, separators=(",", ":"), default=str, ensure_ascii=False)
        if format == "text":
            return enum_set.to_string()
        logger.warning(
            "Unknown Export format",
            extra={"enum_name": enum_set.name, "export_format": format},
        )
        return None


BUILTIN_PLUGINS: Dict[str, type[Plugin]] = {
    ValidationPlugin.name: ValidationPlugin,
    MathPlugin.name: MathPlugin,
    SearchPlugin.name: SearchPlugin,
    ExportPlugin.name: ExportPlugin,
}


__all__ = [
    "BUILTIN_PLUGINS",
    "ExportPlugin",
    "MathPlugin",
    "SearchPlugin",
    "ValidationPlugin",
]
