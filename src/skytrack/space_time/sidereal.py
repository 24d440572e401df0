from datetime import datetime

from ..constants import DEGREES_PER_HOUR, HOURS_PER_DAY
from .julian import days_since_j2000, julian_from_datetime

# GMST at J2000.0 in hours and its rate in sidereal hours per solar day
GMST_AT_J2000_HOURS = 18.697374558
SIDEREAL_HOURS_PER_DAY = 24.06570982441908


def greenwich_sidereal_time(julian_date: float) -> float:
    """
    Greenwich Mean Sidereal Time as a linear function of days since J2000.0.

    Parameters:
    julian_date (float): The Julian Date in UTC.

    Returns:
    float: GMST in decimal hours (0 <= GMST < 24).
    """
    d = days_since_j2000(julian_date)
    return (GMST_AT_J2000_HOURS + SIDEREAL_HOURS_PER_DAY * d) % HOURS_PER_DAY


def sidereal_time_from_julian(julian_date: float, longitude: float) -> float:
    """
    Calculate Local Mean Sidereal Time (LMST) for a given Julian Date and longitude.

    Parameters:
    julian_date (float): The Julian Date in UTC.
    longitude (float): Observer's longitude in degrees.
                       Positive for East of Prime Meridian,
                       Negative for West.

    Returns:
    float: LMST in decimal hours (0 <= LMST < 24).
    """
    gmst_hours = greenwich_sidereal_time(julian_date)
    return (gmst_hours + longitude / DEGREES_PER_HOUR) % HOURS_PER_DAY


def sidereal_time_from_datetime(dt: datetime, longitude: float) -> float:
    return sidereal_time_from_julian(julian_from_datetime(dt), longitude)
