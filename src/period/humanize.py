"""Relative-time phrasing ("3 days ago", "in a month").

A delta between two instants is classified against :data:`BUCKETS`, an
ordered table of upper bounds in seconds. The first bucket whose bound
exceeds the absolute delta wins, so a delta exactly on a bound belongs to
the next bucket.

| Absolute delta | Past              | Future           |
|----------------|-------------------|------------------|
| < 30 s         | "just now"        | "just now"       |
| < 90 s         | "a minute ago"    | "in a minute"    |
| < 45 min       | "N minutes ago"   | "in N minutes"   |
| < 90 min       | "an hour ago"     | "in an hour"     |
| < 22 h         | "N hours ago"     | "in N hours"     |
| < 36 h         | "yesterday"       | "tomorrow"       |
| < 25 days      | "N days ago"      | "in N days"      |
| < 45 days      | "a month ago"     | "in a month"     |
| < 10 months    | "N months ago"    | "in N months"    |
| < 18 months    | "a year ago"      | "in a year"      |
| >= 18 months   | "N years ago"     | "in N years"     |

Months count as 30 days and years as 365 days. "yesterday" and "tomorrow"
come from elapsed seconds, not calendar-day boundaries.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from datetime import UTC, date
from typing import Final, Sequence

from period import clock
from period.utils.logging import get_logger

logger = get_logger(__name__)

MINUTE: Final[int] = 60
HOUR: Final[int] = 60 * MINUTE
DAY: Final[int] = 24 * HOUR
MONTH: Final[int] = 30 * DAY
YEAR: Final[int] = 365 * DAY

# Largest magnitude a signed 64-bit second count can hold.
MAX_DELTA_SECONDS: Final[int] = 2**63 - 1

_PAST = "{n} {unit} ago"
_FUTURE = "in {n} {unit}"


@dataclass(frozen=True, slots=True)
class Bucket:
    """One row of the phrasing table.

    ``upper_bound`` is exclusive; ``None`` marks the final, unbounded row.
    Rows with a ``unit_seconds`` render a count, the others are fixed idioms.
    """

    upper_bound: int | None
    past: str
    future: str
    unit_seconds: int | None = None
    noun: str | None = None

    @property
    def uses_magnitude(self) -> bool:
        return self.unit_seconds is not None

    def phrase(self, magnitude: int, is_past: bool) -> str:
        template = self.past if is_past else self.future
        if self.unit_seconds is None or self.noun is None:
            return template
        count = magnitude // self.unit_seconds
        return template.format(n=count, unit=pluralize(self.noun, count))


BUCKETS: Final[tuple[Bucket, ...]] = (
    Bucket(30, "just now", "just now"),
    Bucket(90, "a minute ago", "in a minute"),
    Bucket(45 * MINUTE, _PAST, _FUTURE, MINUTE, "minute"),
    Bucket(90 * MINUTE, "an hour ago", "in an hour"),
    Bucket(22 * HOUR, _PAST, _FUTURE, HOUR, "hour"),
    Bucket(36 * HOUR, "yesterday", "tomorrow"),
    Bucket(25 * DAY, _PAST, _FUTURE, DAY, "day"),
    Bucket(45 * DAY, "a month ago", "in a month"),
    Bucket(10 * MONTH, _PAST, _FUTURE, MONTH, "month"),
    Bucket(18 * MONTH, "a year ago", "in a year"),
    Bucket(None, _PAST, _FUTURE, YEAR, "year"),
)


def validate_table(buckets: Sequence[Bucket]) -> tuple[int, ...]:
    """Check table ordering and return the finite bounds for searching.

    Raises:
        ValueError: when bounds are not strictly increasing, the last row is
            bounded, or a counting row has no noun.
    """
    if not buckets:
        raise ValueError("bucket table is empty")
    if buckets[-1].upper_bound is not None:
        raise ValueError("last bucket must be unbounded")

    bounds: list[int] = []
    for bucket in buckets[:-1]:
        if bucket.upper_bound is None:
            raise ValueError("only the last bucket may be unbounded")
        if bounds and bucket.upper_bound <= bounds[-1]:
            raise ValueError(
                f"bucket bounds must increase: {bucket.upper_bound} after {bounds[-1]}"
            )
        bounds.append(bucket.upper_bound)

    for bucket in buckets:
        if bucket.uses_magnitude and not bucket.noun:
            raise ValueError(f"counting bucket {bucket.past!r} needs a unit noun")
    return tuple(bounds)


_BOUNDS: Final[tuple[int, ...]] = validate_table(BUCKETS)


def pluralize(noun: str, count: int) -> str:
    """Return ``noun`` for a count of exactly one, its plural otherwise."""
    return noun if count == 1 else f"{noun}s"


def select_bucket(magnitude: int) -> Bucket:
    """Return the bucket covering a non-negative second count."""
    if magnitude < 0:
        raise ValueError("magnitude must be non-negative")
    return BUCKETS[bisect_right(_BOUNDS, magnitude)]


def delta_seconds(target: date, reference: date) -> int:
    """Whole seconds from ``target`` to ``reference``, truncated toward zero.

    Positive when ``target`` lies before ``reference``.
    """
    # Subtraction within one tzinfo ignores offset changes such as DST.
    reference_utc = clock.localize(reference).astimezone(UTC)
    target_utc = clock.localize(target).astimezone(UTC)
    delta = reference_utc - target_utc
    micros = (delta.days * DAY + delta.seconds) * 1_000_000 + delta.microseconds
    whole = abs(micros) // 1_000_000
    return whole if micros >= 0 else -whole


def humanize_seconds(seconds: int) -> str:
    """Phrase a signed delta; positive deltas lie in the past."""
    is_past = seconds >= 0
    magnitude = abs(seconds)
    if magnitude > MAX_DELTA_SECONDS:
        logger.debug("Saturating relative delta", seconds=seconds)
        magnitude = MAX_DELTA_SECONDS
    return select_bucket(magnitude).phrase(magnitude, is_past)


def humanize_between(target: date, reference: date) -> str:
    return humanize_seconds(delta_seconds(target, reference))


def humanize(target: date, now: date | None = None) -> str:
    """Return a relative-time phrase for ``target``.

    Args:
        target: Instant to describe. Naive values use the default timezone
            and plain dates count from midnight.
        now: Reference instant, defaults to the current time.

    Examples:
        >>> humanize(hours_ago(5))
        "5 hours ago"
        >>> humanize(days_from_now_datetime(3, reference=ref), now=ref)
        "in 3 days"
    """
    reference = now if now is not None else clock.now()
    return humanize_between(target, reference)


__all__ = [
    "BUCKETS",
    "Bucket",
    "DAY",
    "HOUR",
    "MAX_DELTA_SECONDS",
    "MINUTE",
    "MONTH",
    "YEAR",
    "delta_seconds",
    "humanize",
    "humanize_between",
    "humanize_seconds",
    "pluralize",
    "select_bucket",
    "validate_table",
]
