"""
Command-line interface utilities for skytrack.

This module provides the logging setup and the shared parsing of dates,
time zones and observer locations used by every command.
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, Dict, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import click

from ..location import DEFAULT_LOCATION, InvalidLocationError, Location, parse_location
from ..logging import set_log_level


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags ("quiet", "debug", "verbose")
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logging.getLogger("skytrack").debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Resolve an IANA time zone name such as "America/New_York".

    Raises:
        ValueError: If the zone is unknown
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {name}") from e


def parse_date_input(
    date_str: str, tz: Optional[tzinfo] = None
) -> Union[datetime, float]:
    """Parse date input in various formats.

    Args:
        date_str: Date string in various formats:
            - Julian date (e.g., "2460385.333333333")
            - ISO format with timezone (e.g., "2024-03-15T20:00:00+00:00")
            - ISO format without timezone (e.g., "2024-03-15T20:00:00"),
              read in ``tz`` or UTC
            - "now"
        tz: Zone for naive ISO input

    Returns:
        Either a datetime object (for ISO format or "now") or a float (for Julian date)

    Raises:
        ValueError: If date string is invalid
    """
    if date_str.lower() == "now":
        return datetime.now(timezone.utc)

    try:
        return float(date_str.strip("' "))
    except ValueError:
        try:
            dt = datetime.fromisoformat(date_str)
        except ValueError:
            raise ValueError(f"Invalid date format: {date_str}")
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=tz or timezone.utc)
        return dt


def resolve_location(
    latitude: Optional[str], longitude: Optional[str], name: Optional[str]
) -> Location:
    """Build the observer location from CLI options.

    Both coordinates must be given together; with neither, the default
    location is used.

    Raises:
        InvalidLocationError: If the coordinates are incomplete or invalid
    """
    if latitude is None and longitude is None:
        return DEFAULT_LOCATION
    if latitude is None or longitude is None:
        raise InvalidLocationError("--lat and --lon must be given together")
    return parse_location(latitude, longitude, name)


def location_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --lat/--lon/--name options, also read from SKYTRACK_* variables."""
    func = click.option(
        "--name",
        envvar="SKYTRACK_LOCATION_NAME",
        help="Display name for the location.",
    )(func)
    func = click.option(
        "--lon",
        "longitude",
        envvar="SKYTRACK_LONGITUDE",
        help="Observer longitude in degrees, positive east.",
    )(func)
    func = click.option(
        "--lat",
        "latitude",
        envvar="SKYTRACK_LATITUDE",
        help="Observer latitude in degrees, positive north. Defaults to New York.",
    )(func)
    return func
