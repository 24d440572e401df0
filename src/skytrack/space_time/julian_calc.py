"""Julian date calculation module.

This module provides functions for converting between datetime objects and Julian dates
using the Meeus algorithm from "Astronomical Algorithms" (2nd ed.).
Dates are proleptic Gregorian, matching Python's datetime, for every year it supports.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Union

from .pythonic_datetimes import get_utc_datetime

# Precision for Julian dates (microsecond precision = 12 decimal places)
JD_PRECISION = 12


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to Julian Day Number using Meeus algorithm.

    Dates before October 1582 are taken in the proleptic Gregorian calendar,
    the same calendar Python's datetime uses.

    Args:
        year: Year in Gregorian calendar
        month: Month in Gregorian calendar (1-12)
        day: Day in Gregorian calendar

    Returns:
        Julian Day Number
    """
    # Jan & Feb are months 13 & 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + (a // 4)

    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524


def _day_fraction(hour: int, minute: int, second: int, microsecond: int) -> float:
    """Fraction of a day (0.0 to 0.99999...) from time components."""
    total_seconds = hour * 3600 + minute * 60 + second + microsecond / 1_000_000
    return total_seconds / 86400


def jdn_to_julian_date(
    jdn: int, hour: int = 0, minute: int = 0, second: int = 0, microsecond: int = 0
) -> float:
    """Convert a Julian Day Number plus a time of day to a Julian Date.

    Args:
        jdn: Julian Day Number
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        Julian Date (JD)
    """
    # Julian days start at noon
    jd = jdn - 0.5 + _day_fraction(hour, minute, second, microsecond)
    return round(jd, JD_PRECISION)


def datetime_to_julian(dt: datetime) -> float:
    """Convert a timezone-aware datetime to a Julian Date.

    Raises:
        ValueError: If the datetime is naive
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")

    dt = dt.astimezone(timezone.utc)
    jdn = gregorian_to_jdn(dt.year, dt.month, dt.day)
    return jdn_to_julian_date(jdn, dt.hour, dt.minute, dt.second, dt.microsecond)


def julian_to_datetime(jd: Union[float, datetime]) -> datetime:
    """Convert a Julian Date to a UTC datetime using the Meeus algorithm.

    Args:
        jd: Julian Date or datetime object

    Returns:
        datetime object with UTC timezone
    """
    if isinstance(jd, datetime):
        return jd

    jd = round(jd, JD_PRECISION)

    jd_plus_half = jd + 0.5
    Z = int(jd_plus_half)
    F = jd_plus_half - Z

    # Proleptic Gregorian throughout; alpha goes negative before 400 AD, hence floor
    alpha = math.floor((Z - 1867216.25) / 36524.25)
    A = Z + 1 + alpha - math.floor(alpha / 4)

    B = A + 1524
    C = int((B - 122.1) / 365.25)
    D = int(365.25 * C)
    E = int((B - D) / 30.6001)

    day_with_fraction = B - D - int(30.6001 * E) + F
    day = int(day_with_fraction)

    month = E - 1
    if month > 12:
        month -= 12

    year = C - 4716
    if month < 3:
        year += 1

    hours_fraction = (day_with_fraction - day) * 24
    hour = int(hours_fraction)
    minutes_fraction = (hours_fraction - hour) * 60
    minute = int(minutes_fraction)
    seconds_fraction = (minutes_fraction - minute) * 60
    second = int(seconds_fraction)
    microsecond = round((seconds_fraction - second) * 1_000_000)

    # Rounding can carry a full second; let timedelta arithmetic normalize it
    extra_seconds = 0
    if microsecond >= 1_000_000:
        microsecond -= 1_000_000
        extra_seconds = 1

    dt = get_utc_datetime(year, month, day, hour, minute, second, microsecond)
    if extra_seconds:
        dt += timedelta(seconds=extra_seconds)
    return dt
