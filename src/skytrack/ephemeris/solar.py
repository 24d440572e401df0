"""Low-precision solar position."""

import math

from ..constants import DEG_TO_RAD
from ..space_time.julian import days_since_j2000
from .coordinates import ecliptic_to_equatorial, equatorial_to_horizontal
from .models import SkyPosition

# Mean longitude and mean anomaly at J2000.0 (degrees) and daily motion (degrees/day)
MEAN_LONGITUDE_AT_EPOCH = 280.460
MEAN_LONGITUDE_RATE = 0.9856474
MEAN_ANOMALY_AT_EPOCH = 357.528
MEAN_ANOMALY_RATE = 0.9856003

# Equation of center coefficients (degrees)
CENTER_FIRST_HARMONIC = 1.915
CENTER_SECOND_HARMONIC = 0.020


def solar_ecliptic_longitude(julian_date: float) -> float:
    """Apparent ecliptic longitude of the Sun in degrees.

    Mean longitude corrected by the two-term equation of center.
    """
    n = days_since_j2000(julian_date)
    mean_longitude = (MEAN_LONGITUDE_AT_EPOCH + MEAN_LONGITUDE_RATE * n) % 360
    mean_anomaly = ((MEAN_ANOMALY_AT_EPOCH + MEAN_ANOMALY_RATE * n) % 360) * DEG_TO_RAD
    return (
        mean_longitude
        + CENTER_FIRST_HARMONIC * math.sin(mean_anomaly)
        + CENTER_SECOND_HARMONIC * math.sin(2 * mean_anomaly)
    )


def sun_position(julian_date: float, latitude: float, longitude: float) -> SkyPosition:
    ra, dec = ecliptic_to_equatorial(solar_ecliptic_longitude(julian_date))
    return equatorial_to_horizontal(ra, dec, julian_date, latitude, longitude)
