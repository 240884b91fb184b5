from __future__ import annotations

import pytest

from enumium.core.errors import EnumiumError, InvalidNameError
from enumium.core.naming import is_valid_name, validate_name


@pytest.mark.parametrize("name", ["Red", "_private", "snake_case_2", "A"])
def test_validate_name_should_accept_identifiers(name: str) -> None:
    assert validate_name(name) == name
    assert is_valid_name(name) is True


@pytest.mark.parametrize("name", ["", "2fast", "has space", "dash-name", "dot.name", None, 42])
def test_validate_name_should_reject_invalid_names(name: object) -> None:
    with pytest.raises(InvalidNameError):
        validate_name(name)
    assert is_valid_name(name) is False


def test_invalid_name_error_should_be_library_error() -> None:
    assert issubclass(InvalidNameError, EnumiumError)
