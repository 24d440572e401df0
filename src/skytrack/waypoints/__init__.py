"""Waypoint sampling over day, week and month windows."""

from .generator import Waypoint, generate_waypoints, select_waypoint
from .time_range import TimeRange, SamplingPlan, plan_for

__all__ = [
    "Waypoint",
    "generate_waypoints",
    "select_waypoint",
    "TimeRange",
    "SamplingPlan",
    "plan_for",
]
