"""Ecliptic, equatorial and horizontal coordinate conversions.

All public functions take and return degrees; radians stay internal.
"""

import math
from typing import Tuple

from ..constants import DEG_TO_RAD, DEGREES_PER_HOUR, OBLIQUITY_DEGREES, RAD_TO_DEG
from ..space_time.sidereal import sidereal_time_from_julian
from .models import SkyPosition

# Raw atan2 azimuths are reported rotated by half a turn
AZIMUTH_ROTATION_DEGREES = 180.0


def normalize_angle(angle: float) -> float:
    """Normalize an angle to the range [0, 360)."""
    normalized = angle % 360.0
    # A tiny negative input rounds up to exactly 360.0
    if normalized >= 360.0:
        return 0.0
    return normalized


def ecliptic_to_equatorial(
    longitude: float, latitude: float = 0.0
) -> Tuple[float, float]:
    """Convert ecliptic coordinates to equatorial ones using a fixed obliquity.

    Args:
        longitude: Ecliptic longitude in degrees
        latitude: Ecliptic latitude in degrees (0 for the Sun)

    Returns:
        Tuple[float, float]: Right ascension in [0, 360) and declination, degrees
    """
    lam = longitude * DEG_TO_RAD
    beta = latitude * DEG_TO_RAD
    eps = OBLIQUITY_DEGREES * DEG_TO_RAD

    alpha = math.atan2(
        math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps),
        math.cos(lam),
    )
    delta = math.asin(
        _clamp_unit(
            math.sin(beta) * math.cos(eps)
            + math.cos(beta) * math.sin(eps) * math.sin(lam)
        )
    )
    return normalize_angle(alpha * RAD_TO_DEG), delta * RAD_TO_DEG


def equatorial_to_horizontal(
    right_ascension: float,
    declination: float,
    julian_date: float,
    latitude: float,
    longitude: float,
) -> SkyPosition:
    """Convert equatorial coordinates to azimuth/altitude for an observer.

    Args:
        right_ascension: Degrees
        declination: Degrees
        julian_date: Julian date (UTC) of the observation
        latitude: Observer latitude in degrees, positive north
        longitude: Observer longitude in degrees, positive east

    Returns:
        SkyPosition: Azimuth in [0, 360) and altitude in degrees
    """
    lst_hours = sidereal_time_from_julian(julian_date, longitude)
    hour_angle = (lst_hours * DEGREES_PER_HOUR - right_ascension) * DEG_TO_RAD
    dec = declination * DEG_TO_RAD
    lat = latitude * DEG_TO_RAD

    altitude = math.asin(
        _clamp_unit(
            math.sin(lat) * math.sin(dec)
            + math.cos(lat) * math.cos(dec) * math.cos(hour_angle)
        )
    )
    azimuth = math.atan2(
        -math.sin(hour_angle),
        math.tan(dec) * math.cos(lat) - math.sin(lat) * math.cos(hour_angle),
    )

    return SkyPosition(
        azimuth=normalize_angle(azimuth * RAD_TO_DEG + AZIMUTH_ROTATION_DEGREES),
        altitude=altitude * RAD_TO_DEG,
    )


def _clamp_unit(value: float) -> float:
    # asin domain; rounding can push |value| a hair past 1 at the poles
    return max(-1.0, min(1.0, value))
