"""CLI entrypoint for geo-distance."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from geo_distance.calculator import DistanceError, OutOfRangeError, calculate_distance
from geo_distance.config import load_settings
from geo_distance.formatting import format_coordinate, format_kilometers, format_meters
from geo_distance.parsers import ParseError, parse_coordinate

console = Console()

EXIT_INVALID_FORMAT = 1
EXIT_OUT_OF_RANGE = 2


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool):
    """Great-circle distance between two coordinates."""
    level = "DEBUG" if verbose else load_settings().log_level
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("coord1")
@click.argument("coord2")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def distance(coord1: str, coord2: str, as_json: bool):
    """Distance between COORD1 and COORD2, e.g. "26.86296° N, 81.04288° E"."""
    try:
        result = calculate_distance(coord1, coord2)
    except DistanceError as exc:
        console.print(f"[red]{exc}[/]")
        code = EXIT_OUT_OF_RANGE if isinstance(exc, OutOfRangeError) else EXIT_INVALID_FORMAT
        raise SystemExit(code)

    if as_json:
        click.echo(result.to_json())
        return

    table = Table(title="Distance", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value", justify="right")
    table.add_row("From", format_coordinate(result.point1.lat, result.point1.lng))
    table.add_row("To", format_coordinate(result.point2.lat, result.point2.lng))
    table.add_row("Meters", f"[bold]{format_meters(result.meters)}[/]")
    table.add_row("Kilometers", f"[bold]{format_kilometers(result.meters)}[/]")

    console.print(table)


@cli.command()
@click.argument("coord")
@click.option("--json", "as_json", is_flag=True, help="Print the point as JSON.")
def parse(coord: str, as_json: bool):
    """Show the signed latitude/longitude parsed from COORD."""
    try:
        point = parse_coordinate(coord)
    except ParseError as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(EXIT_INVALID_FORMAT)

    if as_json:
        click.echo(point.to_json())
        return

    console.print(f"lat=[bold]{point.lat}[/]  lng=[bold]{point.lng}[/]")


@cli.command("web")
@click.option("--port", default=None, type=int, help="Streamlit port (default from GEO_DISTANCE_WEB_PORT).")
def web(port: int | None):
    """Launch the Streamlit distance form."""
    import subprocess
    import sys
    from pathlib import Path

    if port is None:
        port = load_settings().web_port
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(Path(__file__).with_name("web.py")),
        "--server.port", str(port),
        "--server.headless", "true",
    ])
