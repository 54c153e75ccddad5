"""Clock access for the relative-date helpers and the humanizer.

"Now" is read in the zone named by ``PERIOD_TIMEZONE`` when it is set and
known to the tz database, otherwise in the system local zone.
"""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo

from dateutil.tz import gettz, tzlocal

from period.config.settings import get_settings
from period.utils.logging import get_logger

logger = get_logger(__name__)


def default_timezone() -> tzinfo:
    """Return the configured timezone, or the system zone when unset."""
    code = get_settings().timezone
    if code:
        zone = gettz(code)
        if zone is not None:
            return zone
        logger.warning("Unknown timezone, using system local time", timezone=code)
    return tzlocal()


def now(tz: tzinfo | None = None) -> datetime:
    """Return the current, timezone-aware time.

    Args:
        tz: Timezone, defaults to :func:`default_timezone`
    """
    return datetime.now(tz or default_timezone())


def today(tz: tzinfo | None = None) -> date:
    return now(tz).date()


def localize(value: date) -> datetime:
    """Attach the default timezone to a naive datetime.

    Aware values are returned unchanged. A plain date becomes midnight at
    the start of that day in the default timezone.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=default_timezone())
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=default_timezone())
    return value


__all__ = ["default_timezone", "localize", "now", "today"]
