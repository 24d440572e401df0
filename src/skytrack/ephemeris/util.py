"""Utility functions for sky position formatting."""

import math

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def get_compass_point(azimuth: float) -> str:
    """Get the nearest of the eight compass points for an azimuth.

    Args:
        azimuth: Azimuth in degrees (0-360)

    Returns:
        One of N, NE, E, SE, S, SW, W, NW; values near 360 wrap to N
    """
    return COMPASS_POINTS[_round_half_up(azimuth / 45) % 8]


def format_azimuth(azimuth: float) -> str:
    """Format an azimuth with its compass point.

    Args:
        azimuth: Azimuth in degrees (0-360)

    Returns:
        String such as "135° SE"
    """
    return f"{_round_half_up(azimuth)}° {get_compass_point(azimuth)}"


def format_altitude(altitude: float) -> str:
    """Format an altitude rounded to the nearest degree, e.g. "-12°"."""
    return f"{_round_half_up(altitude)}°"
