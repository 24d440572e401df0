"""Low-precision lunar position.

Linear mean elements with a single periodic term each for longitude and
latitude. Good to a few degrees, which is enough to point a camera.
"""

import math
from typing import Tuple

from ..constants import DEG_TO_RAD
from ..space_time.julian import julian_centuries_since_j2000
from .coordinates import ecliptic_to_equatorial, equatorial_to_horizontal
from .models import SkyPosition

# Mean elements at J2000.0 (degrees) and their rates (degrees per Julian century)
MEAN_LONGITUDE_AT_EPOCH = 218.3164477
MEAN_LONGITUDE_RATE = 481267.88123421
MEAN_ANOMALY_AT_EPOCH = 134.9633964
MEAN_ANOMALY_RATE = 477198.8675055
LATITUDE_ARGUMENT_AT_EPOCH = 93.2720950
LATITUDE_ARGUMENT_RATE = 483202.0175233

LONGITUDE_AMPLITUDE = 6.289
LATITUDE_AMPLITUDE = 5.128


def lunar_ecliptic_coordinates(julian_date: float) -> Tuple[float, float]:
    """Ecliptic longitude and latitude of the Moon in degrees.

    Args:
        julian_date: Julian date (UTC)

    Returns:
        Tuple[float, float]: (longitude, latitude); longitude is not reduced to [0, 360)
    """
    t = julian_centuries_since_j2000(julian_date)

    mean_longitude = (MEAN_LONGITUDE_AT_EPOCH + MEAN_LONGITUDE_RATE * t) % 360
    mean_anomaly = (MEAN_ANOMALY_AT_EPOCH + MEAN_ANOMALY_RATE * t) % 360
    latitude_argument = (LATITUDE_ARGUMENT_AT_EPOCH + LATITUDE_ARGUMENT_RATE * t) % 360

    longitude = mean_longitude + LONGITUDE_AMPLITUDE * math.sin(
        mean_anomaly * DEG_TO_RAD
    )
    latitude = LATITUDE_AMPLITUDE * math.sin(latitude_argument * DEG_TO_RAD)
    return longitude, latitude


def moon_position(julian_date: float, latitude: float, longitude: float) -> SkyPosition:
    ecl_lon, ecl_lat = lunar_ecliptic_coordinates(julian_date)
    ra, dec = ecliptic_to_equatorial(ecl_lon, ecl_lat)
    return equatorial_to_horizontal(ra, dec, julian_date, latitude, longitude)
