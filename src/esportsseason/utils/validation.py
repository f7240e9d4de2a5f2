"""Field validation helpers for roster and title data.

Each validator returns a :class:`ValidationResult` so callers can decide
whether to skip a record or raise.
"""

# Esports Season
# Copyright (C) 2025  Esports Season developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Any, Optional


class ValidationResult:
    """Outcome of validating a single field.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Text Validation ==========


def validate_non_empty(
    value: Optional[str], field_name: str = "Field"
) -> ValidationResult:
    """Validate that a text field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with the trimmed text as sanitized value
    """
    if value is None or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


def validate_phone(phone: Optional[str]) -> ValidationResult:
    """Normalize a phone number.

    Phone numbers are free text and may be blank, so this never fails;
    None becomes an empty string and surrounding whitespace is dropped.
    """
    if phone is None:
        return ValidationResult(is_valid=True, sanitized_value="")
    return ValidationResult(is_valid=True, sanitized_value=str(phone).strip())


# ========== Numeric Validation ==========


def validate_integer(value: Any, field_name: str = "Value") -> ValidationResult:
    """Validate that a value is (or parses as) an integer.

    Booleans are rejected even though they are ints in Python.

    Args:
        value: Value to validate, typically a CSV cell
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with the int as sanitized value
    """
    if value is None or isinstance(value, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number",
        )

    if isinstance(value, int):
        return ValidationResult(is_valid=True, sanitized_value=value)

    try:
        int_value = int(str(value).strip())
    except ValueError:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number: {value!r}",
        )
    return ValidationResult(is_valid=True, sanitized_value=int_value)


def validate_non_negative_integer(
    value: Any, field_name: str = "Value"
) -> ValidationResult:
    """Validate that a value is an integer >= 0."""
    result = validate_integer(value, field_name)
    if not result:
        return result

    if result.sanitized_value < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must not be negative: {result.sanitized_value}",
        )
    return result


def validate_experience(value: Any) -> ValidationResult:
    """Validate experience years, clamping negative values to 0."""
    result = validate_integer(value, "Experience years")
    if not result:
        return result
    return ValidationResult(is_valid=True, sanitized_value=max(result.sanitized_value, 0))
