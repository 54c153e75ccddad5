"""Relative-date arithmetic: "3 days ago", "2 months from now".

Every helper takes an optional ``reference`` instant; when omitted the
current time from :func:`period.clock.now` is used. Day and week helpers
return :class:`~datetime.date` values, the ``*_datetime`` variants and the
sub-day helpers return timezone-aware datetimes.

Month and year steps follow :class:`dateutil.relativedelta.relativedelta`,
so the day of month is clamped to the target month's length
(March 31 minus one month is February 28 or 29).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from period import clock
from period.errors import NegativeValueError


def _count(value: int, unit: str, suggestion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{unit} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise NegativeValueError(unit=unit, suggestion=suggestion, value=-value)
    return value


def _reference(reference: datetime | None) -> datetime:
    if reference is None:
        return clock.now()
    return clock.localize(reference)


def _back(reference: datetime | None, step: timedelta | relativedelta) -> datetime:
    return _reference(reference) - step


def _forward(reference: datetime | None, step: timedelta | relativedelta) -> datetime:
    return _reference(reference) + step


# Sub-day offsets ---------------------------------------------------------


def seconds_ago(seconds: int, *, reference: datetime | None = None) -> datetime:
    seconds = _count(seconds, "seconds", "seconds_from_now")
    return _back(reference, timedelta(seconds=seconds))


def seconds_from_now(seconds: int, *, reference: datetime | None = None) -> datetime:
    seconds = _count(seconds, "seconds", "seconds_ago")
    return _forward(reference, timedelta(seconds=seconds))


def minutes_ago(minutes: int, *, reference: datetime | None = None) -> datetime:
    minutes = _count(minutes, "minutes", "minutes_from_now")
    return _back(reference, timedelta(minutes=minutes))


def minutes_from_now(minutes: int, *, reference: datetime | None = None) -> datetime:
    minutes = _count(minutes, "minutes", "minutes_ago")
    return _forward(reference, timedelta(minutes=minutes))


def hours_ago(hours: int, *, reference: datetime | None = None) -> datetime:
    hours = _count(hours, "hours", "hours_from_now")
    return _back(reference, timedelta(hours=hours))


def hours_from_now(hours: int, *, reference: datetime | None = None) -> datetime:
    hours = _count(hours, "hours", "hours_ago")
    return _forward(reference, timedelta(hours=hours))


# Calendar offsets as datetimes ---------------------------------------------


def days_ago_datetime(days: int, *, reference: datetime | None = None) -> datetime:
    days = _count(days, "days", "days_from_now_datetime")
    return _back(reference, timedelta(days=days))


def days_from_now_datetime(days: int, *, reference: datetime | None = None) -> datetime:
    days = _count(days, "days", "days_ago_datetime")
    return _forward(reference, timedelta(days=days))


def weeks_ago_datetime(weeks: int, *, reference: datetime | None = None) -> datetime:
    weeks = _count(weeks, "weeks", "weeks_from_now_datetime")
    return _back(reference, timedelta(weeks=weeks))


def weeks_from_now_datetime(
    weeks: int, *, reference: datetime | None = None
) -> datetime:
    weeks = _count(weeks, "weeks", "weeks_ago_datetime")
    return _forward(reference, timedelta(weeks=weeks))


def months_ago_datetime(months: int, *, reference: datetime | None = None) -> datetime:
    months = _count(months, "months", "months_from_now_datetime")
    return _back(reference, relativedelta(months=months))


def months_from_now_datetime(
    months: int, *, reference: datetime | None = None
) -> datetime:
    months = _count(months, "months", "months_ago_datetime")
    return _forward(reference, relativedelta(months=months))


def years_ago_datetime(years: int, *, reference: datetime | None = None) -> datetime:
    years = _count(years, "years", "years_from_now_datetime")
    return _back(reference, relativedelta(years=years))


def years_from_now_datetime(
    years: int, *, reference: datetime | None = None
) -> datetime:
    years = _count(years, "years", "years_ago_datetime")
    return _forward(reference, relativedelta(years=years))


# Calendar offsets as dates -------------------------------------------------


def days_ago(days: int, *, reference: datetime | None = None) -> date:
    days = _count(days, "days", "days_from_now")
    return _back(reference, timedelta(days=days)).date()


def days_from_now(days: int, *, reference: datetime | None = None) -> date:
    days = _count(days, "days", "days_ago")
    return _forward(reference, timedelta(days=days)).date()


def weeks_ago(weeks: int, *, reference: datetime | None = None) -> date:
    weeks = _count(weeks, "weeks", "weeks_from_now")
    return _back(reference, timedelta(weeks=weeks)).date()


def weeks_from_now(weeks: int, *, reference: datetime | None = None) -> date:
    weeks = _count(weeks, "weeks", "weeks_ago")
    return _forward(reference, timedelta(weeks=weeks)).date()


def months_ago(months: int, *, reference: datetime | None = None) -> date:
    months = _count(months, "months", "months_from_now")
    return _back(reference, relativedelta(months=months)).date()


def months_from_now(months: int, *, reference: datetime | None = None) -> date:
    months = _count(months, "months", "months_ago")
    return _forward(reference, relativedelta(months=months)).date()


def years_ago(years: int, *, reference: datetime | None = None) -> date:
    years = _count(years, "years", "years_from_now")
    return _back(reference, relativedelta(years=years)).date()


def years_from_now(years: int, *, reference: datetime | None = None) -> date:
    years = _count(years, "years", "years_ago")
    return _forward(reference, relativedelta(years=years)).date()


def yesterday(*, reference: datetime | None = None) -> date:
    return days_ago(1, reference=reference)


def tomorrow(*, reference: datetime | None = None) -> date:
    return days_from_now(1, reference=reference)


__all__ = [
    "days_ago",
    "days_ago_datetime",
    "days_from_now",
    "days_from_now_datetime",
    "hours_ago",
    "hours_from_now",
    "minutes_ago",
    "minutes_from_now",
    "months_ago",
    "months_ago_datetime",
    "months_from_now",
    "months_from_now_datetime",
    "seconds_ago",
    "seconds_from_now",
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
