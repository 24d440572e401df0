"""Sampling a body's path across a day, week or month."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional, Sequence, Tuple, Union

from ..bodies import get_body
from ..ephemeris.ephemeris import position_of
from ..location import Location
from ..logging import get_logger
from ..space_time.pythonic_datetimes import ensure_aware
from .time_range import TimeRange, format_label, plan_for

logger = get_logger(__name__)


@dataclass(frozen=True)
class Waypoint:
    """One sample along a body's path."""

    id: str
    time: datetime
    azimuth: float
    altitude: float
    label: str

    def to_dict(self) -> Dict[str, Union[str, float]]:
        """Return a serializable dictionary representation of the waypoint."""
        return {
            "id": self.id,
            "time": self.time.isoformat(),
            "azimuth": self.azimuth,
            "altitude": self.altitude,
            "label": self.label,
        }


def _coerce_time_range(time_range: Union[TimeRange, str]) -> Optional[TimeRange]:
    if isinstance(time_range, TimeRange):
        return time_range
    try:
        return TimeRange(str(time_range).lower())
    except ValueError:
        return None


def generate_waypoints(
    body_id: str,
    time_range: Union[TimeRange, str],
    location: Location,
    reference: Optional[datetime] = None,
) -> Tuple[Waypoint, ...]:
    """Sample a body's sky position across a time window.

    Args:
        body_id: Catalog id of the body.
        time_range: TimeRange or its value ("day", "week", "month").
        location: Observer location.
        reference: Timezone-aware instant anchoring the window; its time zone
            defines the local calendar. Defaults to the current time in UTC.

    Returns:
        Waypoints in chronological order. Empty for an unrecognized range.

    Raises:
        NaiveDateTimeError: If ``reference`` has no timezone info.
    """
    window = _coerce_time_range(time_range)
    if window is None:
        logger.warning(f"Unknown time range {time_range!r}, no waypoints generated")
        return ()

    if reference is None:
        reference = datetime.now(timezone.utc)
    ensure_aware(reference)

    if get_body(body_id) is None:
        logger.warning(
            f"Body '{body_id}' is not in the catalog; its path follows the Sun"
        )

    plan = plan_for(window, reference)
    time_points = plan.get_time_points()
    logger.debug(
        f"Sampling {body_id} over a {window.value}: {len(time_points)} points "
        f"from {plan.start.isoformat()} every {plan.step}"
    )

    waypoints = []
    for i, time in enumerate(time_points):
        position = position_of(body_id, time, location)
        waypoints.append(
            Waypoint(
                id=f"waypoint-{i}",
                time=time,
                azimuth=position.azimuth,
                altitude=position.altitude,
                label=format_label(window, time),
            )
        )
    return tuple(waypoints)


def select_waypoint(
    waypoints: Sequence[Waypoint], fraction: float
) -> Optional[Waypoint]:
    """Pick the waypoint under a timeline slider.

    Args:
        waypoints: A generated sequence.
        fraction: Slider position, 0.0 (start) to 1.0 (end); clamped.

    Returns:
        The selected waypoint, or None when the sequence is empty.
    """
    if not waypoints:
        return None
    fraction = max(0.0, min(1.0, fraction))
    index = min(math.floor(fraction * len(waypoints)), len(waypoints) - 1)
    return waypoints[index]
