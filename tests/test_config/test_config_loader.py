from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from enumium.config.loader import load_enum_definitions, load_settings
from enumium.core.enums import AccessLevel
from enumium.core.errors import ConfigurationError


def _write_yaml(path: Path, content: str) -> Path:
    path.write_text(dedent(content), encoding="utf-8")
    return path


def test_load_settings_should_parse_nested_section(tmp_path: Path) -> None:
    path = _write_yaml(
        tmp_path / "enumium.yml",
        """
        enumium:
          default_version: 2.1.0
          default_access_level: protected
          register_builtin_plugins: false
          log_level: debug
        """,
    )
    settings = load_settings(path)
    assert settings.default_version == "2.1.0"
    assert settings.default_access_level is AccessLevel.PROTECTED
    assert settings.register_builtin_plugins is False
    assert settings.log_level == "DEBUG"


def test_load_settings_should_accept_blank_file(tmp_path: Path) -> None:
    settings = load_settings(_write_yaml(tmp_path / "blank.yml", ""))
    assert settings.default_version == "1.0.0"
    assert settings.register_builtin_plugins is True


def test_load_settings_should_wrap_validation_errors(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "bad.yml", "default_access_level: secret\n")
    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_load_settings_should_fail_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "missing.yml")


def test_load_enum_definitions_should_keep_file_order(tmp_path: Path) -> None:
    path = _write_yaml(
        tmp_path / "enums.yml",
        """
        enums:
          - name: Weekday
            version: 1.2.0
            metadata:
              locale: en
            values:
              - name: Monday
                value: 1
              - name: Tuesday
                value: 2
                metadata:
                  short: Tue
          - name: Empty
        """,
    )
    definitions = load_enum_definitions(path)
    assert [definition.name for definition in definitions] == ["Weekday", "Empty"]
    weekday = definitions[0]
    assert weekday.version == "1.2.0"
    assert [entry.name for entry in weekday.values] == ["Monday", "Tuesday"]
    assert weekday.values[1].metadata == {"short": "Tue"}
    assert definitions[1].values == []


def test_load_enum_definitions_should_require_enums_key(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_enum_definitions(_write_yaml(tmp_path / "enums.yml", "{}"))


@pytest.mark.parametrize(
    "content",
    [
        "enums:\n  - name: 1Bad\n",
        "enums:\n  - name: Dup\n    values:\n      - {name: A, value: 1}\n      - {name: A, value: 2}\n",
        "enums: not-a-list\n",
        "- just\n- a list\n",
    ],
)
def test_load_enum_definitions_should_reject_invalid_content(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigurationError):
        load_enum_definitions(_write_yaml(tmp_path / "enums.yml", content))
