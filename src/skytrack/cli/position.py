"""CLI command for a body's position at one instant."""

import json
from datetime import datetime
from typing import Optional

import click

from ..bodies import get_body
from ..ephemeris import format_altitude, format_azimuth, position_of
from ..space_time.julian import julian_to_datetime
from .common import location_options, parse_date_input, parse_timezone, resolve_location


@click.command()
@click.argument("body")
@click.option(
    "--date",
    "-d",
    default="now",
    help="Instant to compute for: ISO format, Julian date or 'now'. Defaults to now.",
)
@click.option(
    "--tz",
    help="IANA time zone for naive dates and for display (e.g. America/New_York).",
)
@location_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Defaults to text.",
)
def position(
    body: str,
    date: str,
    tz: Optional[str],
    latitude: Optional[str],
    longitude: Optional[str],
    name: Optional[str],
    fmt: str,
) -> None:
    """Show where a body is in the sky.

    Examples:

       skytrack position sun --date 2024-06-21T12:00:00 --tz America/New_York

       skytrack position moon --lat 51.5 --lon -0.13 --format json
    """
    body_id = body.lower()
    try:
        zone = parse_timezone(tz)
        when = parse_date_input(date, zone)
        location = resolve_location(latitude, longitude, name)
        dt = when if isinstance(when, datetime) else julian_to_datetime(when)
    except ValueError as e:
        raise click.BadParameter(str(e))

    sky = position_of(body_id, when, location)

    if zone is not None:
        dt = dt.astimezone(zone)
    catalog_entry = get_body(body_id)
    display_name = catalog_entry.name if catalog_entry else body_id

    if fmt == "json":
        payload = {
            "body": body_id,
            "time": dt.isoformat(),
            "location": {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "name": location.name,
            },
        }
        payload.update(sky.to_dict())
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"{display_name} at {dt.isoformat()} from {location.name or location}")
    click.echo(f"Azimuth:  {format_azimuth(sky.azimuth)}")
    click.echo(f"Altitude: {format_altitude(sky.altitude)}")
    if not sky.is_above_horizon:
        click.echo("(below the horizon)")
