"""Fixed catalog of the celestial bodies skytrack can locate."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple


class BodyCategory(Enum):
    SUN = "sun"
    MOON = "moon"
    PLANET = "planet"
    STAR = "star"


@dataclass(frozen=True)
class CelestialBody:
    """A catalog entry. Identified by its unique ``id``."""

    id: str
    name: str
    category: BodyCategory
    symbol: str
    color: str  # hex display color


CELESTIAL_BODIES: Tuple[CelestialBody, ...] = (
    CelestialBody("sun", "Sun", BodyCategory.SUN, "sun", "#F7B801"),
    CelestialBody("moon", "Moon", BodyCategory.MOON, "moon", "#C0C0C0"),
    CelestialBody("mercury", "Mercury", BodyCategory.PLANET, "circle", "#B5B5B5"),
    CelestialBody("venus", "Venus", BodyCategory.PLANET, "circle", "#E6C35C"),
    CelestialBody("mars", "Mars", BodyCategory.PLANET, "circle", "#E55B3C"),
    CelestialBody("jupiter", "Jupiter", BodyCategory.PLANET, "circle", "#D4A574"),
    CelestialBody("saturn", "Saturn", BodyCategory.PLANET, "circle", "#C9B896"),
)

BODIES_BY_ID: Mapping[str, CelestialBody] = MappingProxyType(
    {body.id: body for body in CELESTIAL_BODIES}
)

SECTION_TITLES: Tuple[Tuple[str, Tuple[BodyCategory, ...]], ...] = (
    ("Sun & Moon", (BodyCategory.SUN, BodyCategory.MOON)),
    ("Planets", (BodyCategory.PLANET,)),
)


def get_body(body_id: str) -> Optional[CelestialBody]:
    """Look up a catalog entry by id. Returns None for unknown ids."""
    return BODIES_BY_ID.get(body_id)


def resolve_body(body_id: Optional[str]) -> CelestialBody:
    """Look up a catalog entry, falling back to the first entry (the Sun)."""
    if body_id is None:
        return CELESTIAL_BODIES[0]
    return BODIES_BY_ID.get(body_id, CELESTIAL_BODIES[0])


def category_of(body_id: str) -> BodyCategory:
    """Category used for ephemeris dispatch.

    Ids missing from the catalog are treated as planets.
    """
    body = BODIES_BY_ID.get(body_id)
    if body is None:
        return BodyCategory.PLANET
    return body.category


def search_bodies(query: str) -> Tuple[CelestialBody, ...]:
    """Case-insensitive substring search over body names and categories.

    A blank query returns the whole catalog.
    """
    if not query.strip():
        return CELESTIAL_BODIES
    needle = query.lower()
    return tuple(
        body
        for body in CELESTIAL_BODIES
        if needle in body.name.lower() or needle in body.category.value
    )


def group_bodies(
    bodies: Iterable[CelestialBody],
) -> List[Tuple[str, Tuple[CelestialBody, ...]]]:
    """Split bodies into titled sections, dropping sections with no members."""
    bodies = tuple(bodies)
    sections = []
    for title, categories in SECTION_TITLES:
        members = tuple(body for body in bodies if body.category in categories)
        if members:
            sections.append((title, members))
    return sections
