"""
Date utilities for covid-calendar.

Records carry timezone-aware datetimes at local midnight. The zone is resolved
once and passed around explicitly instead of being installed process-wide.
"""

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

TIME_ZONE_TOKYO = "Asia/Tokyo"
TOKYO_UTC_OFFSET_HOURS = 9
TOKYO_ZONE_ABBREVIATION = "JST"

RENDERED_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z %Z"

TOKYO_FIXED_ZONE = timezone(
    timedelta(hours=TOKYO_UTC_OFFSET_HOURS), TOKYO_ZONE_ABBREVIATION
)


def resolve_timezone(name: str = TIME_ZONE_TOKYO) -> tzinfo:
    """
    Load an IANA time zone, falling back to a fixed UTC+9 zone.

    The fallback is used when the zone database is not installed.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug("Time zone %r unavailable, using fixed UTC+9", name)
        return TOKYO_FIXED_ZONE


def local_midnight(year: int, month: int, day: int, tz: tzinfo) -> datetime:
    """
    Build the datetime for 00:00:00 of the given day in ``tz``.

    Out-of-range months and days roll over into neighbouring months and
    years: 2020-02-30 is 2020-03-01, 2020-03-00 is 2020-02-29 and month 13
    is January of the next year.

    Raises:
        ValueError: If the resulting year is outside 1..9999
        OverflowError: If the day offset is too large to represent
    """
    first_of_month = datetime(
        year + (month - 1) // 12, (month - 1) % 12 + 1, 1, tzinfo=tz
    )
    return first_of_month + timedelta(days=day - 1)


def format_date(value: datetime) -> str:
    """Render a record date, e.g. ``2020-03-15 00:00:00 +0900 JST``."""
    return value.strftime(RENDERED_DATE_FORMAT)
