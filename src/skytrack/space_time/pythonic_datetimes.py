import calendar
from datetime import datetime, timedelta, timezone, tzinfo

import pytz


class NaiveDateTimeError(Exception):
    """Raised when a datetime object has no timezone info."""

    pass


def ensure_aware(dt: datetime) -> datetime:
    """Return the datetime unchanged if it carries timezone info.

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    return ensure_aware(dt).astimezone(timezone.utc)


def _in_zone(wall_clock: datetime, tz: tzinfo) -> datetime:
    """Attach ``tz`` to a naive wall-clock time.

    pytz zones need ``localize`` to pick the offset in effect on that date.
    """
    if hasattr(tz, "localize"):
        return tz.localize(wall_clock)
    return wall_clock.replace(tzinfo=tz)


def start_of_local_day(dt: datetime) -> datetime:
    """Midnight of the calendar day of ``dt``, in ``dt``'s own time zone."""
    ensure_aware(dt)
    midnight = dt.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)
    return _in_zone(midnight, dt.tzinfo)


def at_local_hour(dt: datetime, days_before: int = 0) -> datetime:
    """Same wall-clock hour as ``dt``, ``days_before`` calendar days earlier.

    Minutes, seconds and microseconds are zeroed.
    """
    ensure_aware(dt)
    earlier = dt.replace(tzinfo=None) - timedelta(days=days_before)
    return _in_zone(earlier.replace(minute=0, second=0, microsecond=0), dt.tzinfo)


def start_of_local_month(dt: datetime) -> datetime:
    """First day of ``dt``'s month at ``dt``'s wall-clock hour."""
    ensure_aware(dt)
    first = dt.replace(day=1, minute=0, second=0, microsecond=0, tzinfo=None)
    return _in_zone(first, dt.tzinfo)


def days_in_month(dt: datetime) -> int:
    """Number of calendar days in the month containing ``dt``."""
    return calendar.monthrange(dt.year, dt.month)[1]


def get_utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a UTC datetime object.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        datetime: UTC datetime object
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=pytz.UTC,
    )
