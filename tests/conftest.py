from __future__ import annotations

from typing import Any, Mapping

import pytest

from enumium.config.models import EnumiumSettings
from enumium.model.enum_set import EnumSet
from enumium.runtime.registry import EnumRegistry, set_default_registry


@pytest.fixture
def registry() -> EnumRegistry:
    return EnumRegistry()


@pytest.fixture(autouse=True)
def isolated_default_registry():
    """Give every test a fresh process-wide registry."""

    previous = set_default_registry(EnumRegistry())
    yield
    set_default_registry(previous)


@pytest.fixture
def color_enum(registry: EnumRegistry) -> EnumSet:
    color = EnumSet("Color", registry=registry)
    color.add_value("Red", 1)
    color.add_value("Green", 2)
    color.add_value("Blue", 3)
    return color


class EventRecorder:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, event: str, data: Mapping[str, Any]) -> None:
        self.events.append((event, dict(data)))

    @property
    def names(self) -> list[str]:
        return [event for event, _ in self.events]


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def bare_settings() -> EnumiumSettings:
    return EnumiumSettings(register_builtin_plugins=False, default_version="0.1.0")
