"""Formatting utilities for dates and instants.

All output is English regardless of the process locale.
"""

from __future__ import annotations

from datetime import date, datetime
from email.utils import format_datetime
from typing import Final

from period import clock

_MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def to_date_string(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``.

    Examples:
        >>> to_date_string(date(2026, 2, 22))
        "2026-02-22"
    """
    return _as_date(value).isoformat()


def to_long_date(value: date) -> str:
    """Format a date as ``Month Day, Year``.

    The day is padded to two characters with a space, like the C ``%e``
    directive.

    Examples:
        >>> to_long_date(date(2026, 2, 22))
        "February 22, 2026"
        >>> to_long_date(date(2026, 2, 5))
        "February  5, 2026"
    """
    day = _as_date(value)
    return f"{_MONTH_NAMES[day.month - 1]} {day.day:>2}, {day.year}"


def to_iso8601(value: datetime) -> str:
    """Format an instant as ``YYYY-MM-DDTHH:MM:SS±HH:MM``."""
    return clock.localize(value).replace(microsecond=0).isoformat()


def to_rfc2822(value: datetime) -> str:
    """Format an instant as ``Day, DD Mon YYYY HH:MM:SS ±HHMM``."""
    return format_datetime(clock.localize(value))


__all__ = ["to_date_string", "to_iso8601", "to_long_date", "to_rfc2822"]
