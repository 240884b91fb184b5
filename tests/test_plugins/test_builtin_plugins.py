from __future__ import annotations

import json
from decimal import Decimal

import pytest

from enumium.model.enum_set import EnumSet
from enumium.runtime.registry import EnumRegistry


@pytest.fixture
def color_with_builtins(color_enum: EnumSet, registry: EnumRegistry) -> EnumSet:
    for name in ("Validation", "Math", "Search", "Export"):
        color_enum.register_plugin(name, registry.get_global_plugin(name))
    return color_enum


def test_math_plugin_should_sum_numeric_members(color_enum: EnumSet, registry: EnumRegistry) -> None:
    color_enum.register_plugin("Sum", registry.get_global_plugin("Math"))
    assert color_enum.execute_plugin("Sum", "sum") == 6


def test_math_plugin_should_skip_non_numeric_payloads(color_with_builtins: EnumSet) -> None:
    color_with_builtins.add_value("Label", "text")
    color_with_builtins.add_value("Flag", True)
    assert color_with_builtins.execute_plugin("Math", "sum") == 6
    assert color_with_builtins.execute_plugin("Math", "average") == 2
    assert color_with_builtins.execute_plugin("Math", "median") is None


def test_math_plugin_average_should_be_zero_without_numbers(registry: EnumRegistry) -> None:
    words = EnumSet("Words", {"A": "a"}, registry=registry)
    words.register_plugin("Math", registry.get_global_plugin("Math"))
    assert words.execute_plugin("Math", "average") == 0


def test_validation_plugin_should_support_strict_and_loose(color_with_builtins: EnumSet) -> None:
    assert color_with_builtins.execute_plugin("Validation", 2, True) is True
    assert color_with_builtins.execute_plugin("Validation", "2", True) is False
    assert color_with_builtins.execute_plugin("Validation", "2") is True
    assert color_with_builtins.execute_plugin("Validation", "9") is False


def test_search_plugin_should_match_case_insensitively(color_with_builtins: EnumSet) -> None:
    by_name = color_with_builtins.execute_plugin("Search", "RE")
    assert [member.name for member in by_name] == ["Red", "Green"]

    by_value = color_with_builtins.execute_plugin("Search", "3", "value")
    assert [member.name for member in by_value] == ["Blue"]
    assert color_with_builtins.execute_plugin("Search", "zzz") == []


def test_export_plugin_should_render_json_and_text(color_with_builtins: EnumSet) -> None:
    exported = color_with_builtins.execute_plugin("Export", "json")
    assert json.loads(exported) == {"Red": 1, "Green": 2, "Blue": 3}
    assert color_with_builtins.execute_plugin("Export", "text") == color_with_builtins.to_string()
    assert color_with_builtins.execute_plugin("Export", "xml") is None


def test_math_plugin_should_skip_decimal_payloads_and_keep_int_sums(color_with_builtins: EnumSet) -> None:
    color_with_builtins.add_value("Price", Decimal("9.99"))

    total = color_with_builtins.execute_plugin("Math", "sum")

    assert total == 6
    assert isinstance(total, int)
    assert color_with_builtins.execute_plugin("Math", "average") == 2
