from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List

from ..space_time.pythonic_datetimes import (
    at_local_hour,
    days_in_month,
    ensure_aware,
    start_of_local_day,
    start_of_local_month,
)


class TimeRange(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


# Samples per day window and their spacing
DAY_SAMPLES = 12
DAY_STEP = timedelta(hours=2)
# The week window is centered on the reference day
WEEK_SAMPLES = 7
WEEK_DAYS_BEFORE = 3
DAILY_STEP = timedelta(days=1)


@dataclass(frozen=True)
class SamplingPlan:
    """Where a window starts, how many samples it has and how far apart they are."""

    time_range: TimeRange
    start: datetime
    count: int
    step: timedelta

    def get_time_points(self) -> List[datetime]:
        """Sample instants in the start's time zone.

        Steps are taken in absolute time, so the points are strictly
        increasing even across daylight saving transitions.
        """
        tz = self.start.tzinfo
        start_utc = self.start.astimezone(timezone.utc)
        return [(start_utc + i * self.step).astimezone(tz) for i in range(self.count)]


def plan_for(time_range: TimeRange, reference: datetime) -> SamplingPlan:
    """Build the sampling plan for a window anchored at ``reference``.

    Args:
        time_range: The window kind
        reference: Timezone-aware instant; its time zone defines local calendar days

    Returns:
        SamplingPlan: day -> 12 points from local midnight every 2 hours;
        week -> 7 daily points from 3 days earlier at the reference hour;
        month -> one point per day of the month at the reference hour
    """
    ensure_aware(reference)
    if time_range is TimeRange.DAY:
        return SamplingPlan(
            time_range, start_of_local_day(reference), DAY_SAMPLES, DAY_STEP
        )
    elif time_range is TimeRange.WEEK:
        return SamplingPlan(
            time_range,
            at_local_hour(reference, days_before=WEEK_DAYS_BEFORE),
            WEEK_SAMPLES,
            DAILY_STEP,
        )
    elif time_range is TimeRange.MONTH:
        return SamplingPlan(
            time_range,
            start_of_local_month(reference),
            days_in_month(reference),
            DAILY_STEP,
        )
    raise ValueError(f"Unknown time range: {time_range}")


def format_label(time_range: TimeRange, dt: datetime) -> str:
    """Human-readable label for a sample: "14:00", "Fri 21" or "21 Jun"."""
    if time_range is TimeRange.DAY:
        return dt.strftime("%H:%M")
    elif time_range is TimeRange.WEEK:
        return f"{dt.strftime('%a')} {dt.day}"
    elif time_range is TimeRange.MONTH:
        return f"{dt.day} {dt.strftime('%b')}"
    raise ValueError(f"Unknown time range: {time_range}")
