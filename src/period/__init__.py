"""Relative dates, calendar formatting and human-readable time phrases."""

from __future__ import annotations

from .clock import default_timezone, localize, now, today
from .errors import NegativeValueError, PeriodError
from .formatting import to_date_string, to_iso8601, to_long_date, to_rfc2822
from .humanize import humanize, humanize_between, humanize_seconds
from .relative import (
    days_ago,
    days_ago_datetime,
    days_from_now,
    days_from_now_datetime,
    hours_ago,
    hours_from_now,
    minutes_ago,
    minutes_from_now,
    months_ago,
    months_ago_datetime,
    months_from_now,
    months_from_now_datetime,
    seconds_ago,
    seconds_from_now,
    tomorrow,
    weeks_ago,
    weeks_ago_datetime,
    weeks_from_now,
    weeks_from_now_datetime,
    years_ago,
    years_ago_datetime,
    years_from_now,
    years_from_now_datetime,
    yesterday,
)

__version__ = "0.3.0"

__all__ = [
    "NegativeValueError",
    "PeriodError",
    "days_ago",
    "days_ago_datetime",
    "days_from_now",
    "days_from_now_datetime",
    "default_timezone",
    "hours_ago",
    "hours_from_now",
    "humanize",
    "humanize_between",
    "humanize_seconds",
    "localize",
    "minutes_ago",
    "minutes_from_now",
    "months_ago",
    "months_ago_datetime",
    "months_from_now",
    "months_from_now_datetime",
    "now",
    "seconds_ago",
    "seconds_from_now",
    "to_date_string",
    "to_iso8601",
    "to_long_date",
    "to_rfc2822",
    "today",
    "tomorrow",
    "weeks_ago",
    "weeks_ago_datetime",
    "weeks_from_now",
    "weeks_from_now_datetime",
    "years_ago",
    "years_ago_datetime",
    "years_from_now",
    "years_from_now_datetime",
    "yesterday",
]
