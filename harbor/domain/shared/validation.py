"""
Field validators shared by the domain entities and the request decoders.

Each validator returns a ValidationError describing the problem, or None when
the value is acceptable. Callers collect the results so every broken field is
reported at once.
"""

from typing import Any

from .exceptions import ValidationError

MAX_NAME_LENGTH = 100


def validate_required_text(
    value: Any, field_name: str, max_length: int = MAX_NAME_LENGTH
) -> ValidationError | None:
    """A required text field must be a non-blank string within max_length."""
    if value is None or not isinstance(value, str) or not value.strip():
        return ValidationError(field_name, value, "is required", "REQUIRED")
    if len(value) > max_length:
        return ValidationError(
            field_name,
            value,
            f"must be at most {max_length} characters",
            "TOO_LONG",
        )
    return None


def validate_optional_text(
    value: Any, field_name: str, max_length: int = MAX_NAME_LENGTH
) -> ValidationError | None:
    if value is None:
        return None
    return validate_required_text(value, field_name, max_length)


def validate_capacity(value: Any, field_name: str = "capacity") -> ValidationError | None:
    """Capacities are positive integers; booleans are rejected."""
    if value is None:
        return ValidationError(field_name, value, "is required", "REQUIRED")
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationError(
            field_name, value, "must be an integer", "INVALID_TYPE"
        )
    if value < 1:
        return ValidationError(
            field_name, value, "must be a positive integer", "OUT_OF_RANGE"
        )
    return None


def validate_identifier(value: Any, field_name: str) -> ValidationError | None:
    """Identifiers, when present, are positive integers."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return ValidationError(
            field_name, value, "must be a positive integer id", "INVALID_ID"
        )
    return None


def collect_errors(*results: ValidationError | None) -> list[ValidationError]:
    return [error for error in results if error is not None]
