"""skytrack: where the Sun, the Moon and the planets appear in an observer's sky."""

from .bodies import (
    BodyCategory,
    CelestialBody,
    CELESTIAL_BODIES,
    get_body,
    resolve_body,
    search_bodies,
    group_bodies,
)
from .location import Location, DEFAULT_LOCATION, InvalidLocationError, parse_location
from .ephemeris import SkyPosition, position_of, format_azimuth, format_altitude
from .waypoints import TimeRange, Waypoint, generate_waypoints, select_waypoint

__all__ = [
    "BodyCategory",
    "CelestialBody",
    "CELESTIAL_BODIES",
    "get_body",
    "resolve_body",
    "search_bodies",
    "group_bodies",
    "Location",
    "DEFAULT_LOCATION",
    "InvalidLocationError",
    "parse_location",
    "SkyPosition",
    "position_of",
    "format_azimuth",
    "format_altitude",
    "TimeRange",
    "Waypoint",
    "generate_waypoints",
    "select_waypoint",
]
