from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import pytest

from period.errors import NegativeValueError, PeriodError
from period.relative import (
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


def test_sub_day_offsets(reference) -> None:
    assert seconds_ago(90, reference=reference) == reference - timedelta(seconds=90)
    assert seconds_from_now(90, reference=reference) == datetime(
        2026, 2, 22, 14, 31, 30, tzinfo=UTC
    )
    assert minutes_ago(45, reference=reference) == datetime(
        2026, 2, 22, 13, 45, tzinfo=UTC
    )
    assert minutes_from_now(45, reference=reference) == datetime(
        2026, 2, 22, 15, 15, tzinfo=UTC
    )
    assert hours_ago(5, reference=reference) == datetime(2026, 2, 22, 9, 30, tzinfo=UTC)
    assert hours_from_now(10, reference=reference) == datetime(
        2026, 2, 23, 0, 30, tzinfo=UTC
    )


def test_day_and_week_dates(reference) -> None:
    assert days_ago(3, reference=reference) == date(2026, 2, 19)
    assert days_from_now(3, reference=reference) == date(2026, 2, 25)
    assert weeks_ago(2, reference=reference) == date(2026, 2, 8)
    assert weeks_from_now(2, reference=reference) == date(2026, 3, 8)


def test_yesterday_and_tomorrow(reference) -> None:
    assert yesterday(reference=reference) == date(2026, 2, 21)
    assert tomorrow(reference=reference) == date(2026, 2, 23)


def test_zero_count_is_reference(reference) -> None:
    assert days_ago(0, reference=reference) == reference.date()
    assert hours_from_now(0, reference=reference) == reference


def test_datetime_variants_keep_time_of_day(reference) -> None:
    assert days_ago_datetime(3, reference=reference) == datetime(
        2026, 2, 19, 14, 30, tzinfo=UTC
    )
    assert days_from_now_datetime(1, reference=reference) == datetime(
        2026, 2, 23, 14, 30, tzinfo=UTC
    )
    assert weeks_ago_datetime(1, reference=reference) == datetime(
        2026, 2, 15, 14, 30, tzinfo=UTC
    )
    assert weeks_from_now_datetime(1, reference=reference) == datetime(
        2026, 3, 1, 14, 30, tzinfo=UTC
    )
    assert months_ago_datetime(2, reference=reference) == datetime(
        2025, 12, 22, 14, 30, tzinfo=UTC
    )
    assert months_from_now_datetime(2, reference=reference) == datetime(
        2026, 4, 22, 14, 30, tzinfo=UTC
    )
    assert years_ago_datetime(1, reference=reference) == datetime(
        2025, 2, 22, 14, 30, tzinfo=UTC
    )
    assert years_from_now_datetime(1, reference=reference) == datetime(
        2027, 2, 22, 14, 30, tzinfo=UTC
    )


def test_months_clamp_to_month_end() -> None:
    end_of_march = datetime(2026, 3, 31, 10, 0, tzinfo=UTC)
    assert months_ago(1, reference=end_of_march) == date(2026, 2, 28)
    assert months_from_now(1, reference=end_of_march) == date(2026, 4, 30)
    assert months_ago(2, reference=end_of_march) == date(2026, 1, 31)


def test_years_clamp_leap_day() -> None:
    leap_day = datetime(2024, 2, 29, 8, 0, tzinfo=UTC)
    assert years_from_now(1, reference=leap_day) == date(2025, 2, 28)
    assert years_ago(4, reference=leap_day) == date(2020, 2, 29)


def test_defaults_to_clock(frozen_now) -> None:
    assert days_ago(3) == date(2026, 2, 19)
    assert hours_from_now(1) == frozen_now + timedelta(hours=1)
    assert yesterday() == date(2026, 2, 21)


def test_naive_reference_is_localized(monkeypatch) -> None:
    monkeypatch.setenv("PERIOD_TIMEZONE", "UTC")
    shifted = hours_ago(2, reference=datetime(2026, 2, 22, 14, 30))
    assert shifted.utcoffset() == timedelta(0)
    assert shifted.hour == 12


@pytest.mark.parametrize(
    ("helper", "message"),
    [
        (days_ago, "days must be positive. Did you mean days_from_now(3)?"),
        (days_from_now, "days must be positive. Did you mean days_ago(3)?"),
        (weeks_ago, "weeks must be positive. Did you mean weeks_from_now(3)?"),
        (months_from_now, "months must be positive. Did you mean months_ago(3)?"),
        (years_ago, "years must be positive. Did you mean years_from_now(3)?"),
        (hours_ago, "hours must be positive. Did you mean hours_from_now(3)?"),
        (
            days_ago_datetime,
            "days must be positive. Did you mean days_from_now_datetime(3)?",
        ),
    ],
)
def test_negative_count_suggests_mirror(reference, helper, message) -> None:
    with pytest.raises(NegativeValueError) as excinfo:
        helper(-3, reference=reference)
    assert str(excinfo.value) == message
    assert excinfo.value.value == 3
    assert isinstance(excinfo.value, PeriodError)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("count", [1.5, "3", True])
def test_non_integer_count_is_rejected(reference, count) -> None:
    with pytest.raises(TypeError):
        days_ago(count, reference=reference)
