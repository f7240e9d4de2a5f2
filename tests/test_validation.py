import pytest

from esportsseason.utils.validation import (
    validate_experience,
    validate_integer,
    validate_non_empty,
    validate_non_negative_integer,
    validate_phone,
)


def test_validate_non_empty():
    assert validate_non_empty("  x ").sanitized_value == "x"
    result = validate_non_empty("   ", "Nickname")
    assert not result
    assert result.error_message == "Nickname cannot be empty"
    assert not validate_non_empty(None)


@pytest.mark.parametrize(
    "value, expected", [("12", 12), (" 7 ", 7), (0, 0), ("-3", -3)]
)
def test_validate_integer_parses(value, expected):
    result = validate_integer(value)
    assert result
    assert result.sanitized_value == expected


@pytest.mark.parametrize("value", [None, "", "1.5", "abc", True])
def test_validate_integer_rejects(value):
    assert not validate_integer(value)


def test_validate_non_negative_integer():
    assert validate_non_negative_integer("0")
    result = validate_non_negative_integer("-1", "Game id")
    assert not result
    assert "Game id" in result.error_message


def test_validate_experience_clamps():
    assert validate_experience("-4").sanitized_value == 0
    assert validate_experience("12").sanitized_value == 12
    assert not validate_experience("many")


def test_validate_phone_never_fails():
    assert validate_phone(None).sanitized_value == ""
    assert validate_phone(" 555-0101 ").sanitized_value == "555-0101"
    assert repr(validate_phone("1")) == "ValidationResult(VALID, '1')"
