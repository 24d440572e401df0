"""Approximate planet positions.

Planets are not computed from orbital elements. Each one is placed at a fixed
azimuth/altitude offset from the Sun's apparent position for the same instant
and observer. Ids without an entry get a zero offset, i.e. the Sun's position.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple

from .models import SkyPosition
from .solar import sun_position


class PlanetOffset(NamedTuple):
    azimuth: float
    altitude: float


ZERO_OFFSET = PlanetOffset(0.0, 0.0)

PLANET_OFFSETS: Mapping[str, PlanetOffset] = MappingProxyType(
    {
        "mercury": PlanetOffset(15.0, -5.0),
        "venus": PlanetOffset(25.0, 10.0),
        "mars": PlanetOffset(-30.0, 5.0),
        "jupiter": PlanetOffset(45.0, -10.0),
        "saturn": PlanetOffset(-60.0, -15.0),
    }
)


def planet_offset(body_id: str) -> PlanetOffset:
    return PLANET_OFFSETS.get(body_id, ZERO_OFFSET)


def apply_offset(sun: SkyPosition, offset: PlanetOffset) -> SkyPosition:
    """Shift a solar position by a planet offset, clamping altitude to [-90, 90]."""
    return SkyPosition(
        azimuth=(sun.azimuth + offset.azimuth + 360) % 360,
        altitude=max(-90.0, min(90.0, sun.altitude + offset.altitude)),
    )


def planet_position(
    body_id: str, julian_date: float, latitude: float, longitude: float
) -> SkyPosition:
    sun = sun_position(julian_date, latitude, longitude)
    return apply_offset(sun, planet_offset(body_id))
