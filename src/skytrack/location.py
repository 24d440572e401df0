import math
from dataclasses import dataclass
from typing import Optional, Union


class InvalidLocationError(ValueError):
    """Raised when manually entered coordinates cannot be used."""

    pass


@dataclass(frozen=True)
class Location:
    """An observer's position on Earth.

    Coordinates are taken as given; range checks belong to ``parse_location``.
    """

    latitude: float  # in degrees, positive north
    longitude: float  # in degrees, positive east
    name: Optional[str] = None

    def __str__(self) -> str:
        return format_coordinates(self)


DEFAULT_LOCATION = Location(latitude=40.7128, longitude=-74.0060, name="New York, NY")


def format_coordinates(location: Location) -> str:
    """Render a location as ``"40.7128°, -74.0060°"``."""
    return f"{location.latitude:.4f}°, {location.longitude:.4f}°"


def _to_degrees(value: Union[str, float], label: str) -> float:
    try:
        degrees = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidLocationError(f"{label} must be a number, got {value!r}") from e
    if math.isnan(degrees):
        raise InvalidLocationError(f"{label} must be a number, got {value!r}")
    return degrees


def parse_location(
    latitude: Union[str, float],
    longitude: Union[str, float],
    name: Optional[str] = None,
) -> Location:
    """Validate manually entered coordinates and build a Location.

    Args:
        latitude: Degrees north, as a number or numeric string
        longitude: Degrees east, as a number or numeric string
        name: Display name; defaults to the rounded coordinates

    Returns:
        Location: The validated location

    Raises:
        InvalidLocationError: If either value is not a number or out of range
    """
    lat = _to_degrees(latitude, "Latitude")
    lon = _to_degrees(longitude, "Longitude")

    if not -90 <= lat <= 90:
        raise InvalidLocationError("Latitude must be between -90 and 90 degrees")
    if not -180 <= lon <= 180:
        raise InvalidLocationError("Longitude must be between -180 and 180 degrees")

    if not name or not name.strip():
        name = f"{lat:.2f}, {lon:.2f}"
    return Location(latitude=lat, longitude=lon, name=name)
