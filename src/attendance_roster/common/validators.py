from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def roll_key(roll_number: str) -> str:
    """Comparison key for roll numbers (case-insensitive)."""
    return roll_number.strip().lower()


def require_int(value, message: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(message)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(message)


def optional_int(value, message: str):
    if value is None or value == "":
        return None
    return require_int(value, message)
