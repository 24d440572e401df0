"""CLI command for sampling a body's path over a day, week or month."""

import csv
import json
from datetime import datetime
from typing import Iterable, Optional, TextIO

import click

from ..ephemeris import format_altitude, format_azimuth
from ..space_time.julian import julian_to_datetime
from ..waypoints import TimeRange, Waypoint, generate_waypoints
from .common import location_options, parse_date_input, parse_timezone, resolve_location


def _write_csv(waypoints: Iterable[Waypoint], output: TextIO) -> None:
    headers = ["id", "time", "label", "azimuth", "altitude"]
    writer = csv.DictWriter(output, fieldnames=headers)
    writer.writeheader()
    for waypoint in waypoints:
        writer.writerow(
            {
                "id": waypoint.id,
                "time": waypoint.time.isoformat(),
                "label": waypoint.label,
                "azimuth": round(waypoint.azimuth, 6),
                "altitude": round(waypoint.altitude, 6),
            }
        )
    output.flush()


def _write_text(waypoints: Iterable[Waypoint], output: TextIO) -> None:
    for waypoint in waypoints:
        output.write(
            f"{waypoint.label:>8}  {format_azimuth(waypoint.azimuth):>8}  "
            f"{format_altitude(waypoint.altitude):>5}\n"
        )
    output.flush()


@click.command()
@click.argument("body")
@click.option(
    "--range",
    "time_range",
    type=click.Choice([r.value for r in TimeRange]),
    default=TimeRange.DAY.value,
    help="Window to sample. Defaults to day.",
)
@click.option(
    "--date",
    "-d",
    default="now",
    help="Reference instant: ISO format, Julian date or 'now'. Defaults to now.",
)
@click.option(
    "--tz",
    help="IANA time zone defining local days (e.g. Europe/Paris). Defaults to UTC.",
)
@location_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "csv", "json"]),
    default="text",
    help="Output format. Defaults to text.",
)
def waypoints(
    body: str,
    time_range: str,
    date: str,
    tz: Optional[str],
    latitude: Optional[str],
    longitude: Optional[str],
    name: Optional[str],
    fmt: str,
) -> None:
    """Sample a body's path across a day, week or month.

    Examples:

       skytrack waypoints sun --range day --tz America/New_York

       skytrack waypoints moon --range month --date 2024-02-15 --format csv
    """
    try:
        zone = parse_timezone(tz)
        when = parse_date_input(date, zone)
        location = resolve_location(latitude, longitude, name)
        reference = when if isinstance(when, datetime) else julian_to_datetime(when)
    except ValueError as e:
        raise click.BadParameter(str(e))

    if zone is not None:
        reference = reference.astimezone(zone)

    path = generate_waypoints(body.lower(), time_range, location, reference)

    output = click.get_text_stream("stdout")
    if fmt == "csv":
        _write_csv(path, output)
    elif fmt == "json":
        json.dump([waypoint.to_dict() for waypoint in path], output, indent=2)
        output.write("\n")
        output.flush()
    else:
        _write_text(path, output)

    click.echo(f"Generated {len(path)} waypoint(s) for {body.lower()}", err=True)
