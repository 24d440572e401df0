from datetime import datetime
from typing import Union

from ..constants import DAYS_PER_JULIAN_CENTURY, J2000
from .pythonic_datetimes import ensure_utc
from .rounding import create_and_round_to_millisecond
from .julian_calc import datetime_to_julian, julian_to_datetime as _julian_to_datetime


def julian_from_datetime(dt: datetime) -> float:
    """Convert datetime to Julian date.

    Args:
        dt: Timezone-aware datetime to convert

    Returns:
        float: Julian date
    """
    dt = ensure_utc(dt)
    return datetime_to_julian(dt)


def julian_to_datetime(jd: float) -> datetime:
    """Convert Julian date to a UTC datetime rounded to the millisecond.

    Args:
        jd: Julian date to convert

    Returns:
        datetime: Datetime
    """
    dt = _julian_to_datetime(jd)
    return create_and_round_to_millisecond(
        dt.microsecond, dt.second, dt.minute, dt.hour, dt.day, dt.month, dt.year
    )


def get_julian_date(time: Union[float, datetime]) -> float:
    """Accept either a datetime or a Julian date and return the Julian date.

    Args:
        time: Either a timezone-aware datetime or a float Julian date.

    Returns:
        float: Julian date
    """
    if isinstance(time, datetime):
        return julian_from_datetime(time)
    return float(time)


def days_since_j2000(jd: float) -> float:
    """Days elapsed since the J2000.0 epoch (negative before it)."""
    return jd - J2000


def julian_centuries_since_j2000(jd: float) -> float:
    """Julian centuries elapsed since the J2000.0 epoch."""
    return days_since_j2000(jd) / DAYS_PER_JULIAN_CENTURY
