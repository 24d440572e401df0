"""Time basis for the ephemeris: Julian dates, sidereal time and local calendar helpers."""

from .julian import (
    days_since_j2000,
    get_julian_date,
    julian_centuries_since_j2000,
    julian_from_datetime,
    julian_to_datetime,
)
from .pythonic_datetimes import NaiveDateTimeError, ensure_utc
from .sidereal import sidereal_time_from_datetime, sidereal_time_from_julian

__all__ = [
    "days_since_j2000",
    "get_julian_date",
    "julian_centuries_since_j2000",
    "julian_from_datetime",
    "julian_to_datetime",
    "NaiveDateTimeError",
    "ensure_utc",
    "sidereal_time_from_datetime",
    "sidereal_time_from_julian",
]
