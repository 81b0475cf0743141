from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def date_key(value: date | str) -> str:
    """Normalize a date, datetime or YYYY-MM-DD string into a history key."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip()).isoformat()
        except ValueError:
            raise ValidationError("Date must be in YYYY-MM-DD format")
    return value.isoformat()


def today_key() -> str:
    return date.today().isoformat()


def now_millis() -> int:
    """Current wall clock in milliseconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return int(datetime.now().timestamp() * 1000)
