from .models import SkyPosition
from .ephemeris import position_of
from .planetary import PLANET_OFFSETS, PlanetOffset
from .util import format_azimuth, format_altitude, get_compass_point

__all__ = [
    "SkyPosition",
    "position_of",
    "PLANET_OFFSETS",
    "PlanetOffset",
    "format_azimuth",
    "format_altitude",
    "get_compass_point",
]
