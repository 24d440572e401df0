"""CLI command listing the body catalog."""

import click

from ..bodies import group_bodies, search_bodies


@click.command()
@click.option("--search", "-s", default="", help="Filter by name or category.")
def bodies(search: str) -> None:
    """List the bodies skytrack can locate."""
    sections = group_bodies(search_bodies(search))
    if not sections:
        click.echo(f"No bodies match '{search}'", err=True)
        return
    for title, members in sections:
        click.echo(title)
        for body in members:
            click.echo(f"  {body.id:<8} {body.name:<8} {body.color}")
