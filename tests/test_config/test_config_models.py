from __future__ import annotations

import pytest
from pydantic import ValidationError

from enumium.config.models import EnumDefinition, EnumiumSettings, EnumValueDefinition


def test_settings_should_apply_defaults() -> None:
    settings = EnumiumSettings()
    assert settings.default_version == "1.0.0"
    assert settings.default_access_level.value == "public"
    assert settings.log_level == "INFO"


def test_settings_should_be_frozen() -> None:
    settings = EnumiumSettings()
    with pytest.raises(ValidationError):
        settings.default_version = "2.0.0"  # type: ignore[misc]


def test_value_definition_should_validate_names() -> None:
    with pytest.raises(ValidationError):
        EnumValueDefinition(name="has space", value=1)
    assert EnumValueDefinition(name="ok_name", value=None).value is None


def test_enum_definition_should_reject_duplicate_members() -> None:
    with pytest.raises(ValidationError):
        EnumDefinition(
            name="Twice",
            values=[EnumValueDefinition(name="A", value=1), EnumValueDefinition(name="A", value=2)],
        )
