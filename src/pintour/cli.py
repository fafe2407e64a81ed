from __future__ import annotations

import json
import logging
import math
from decimal import Decimal
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig
from .geo import haversine_km
from .persistence import LocationStore
from .regions import region_code, region_name
from .schemas import LocationRecord
from .tour import TourPlanner

app = typer.Typer(add_completion=False, help="pintour command line interface")
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command("plot")
def plot_location(
    latitude: float = typer.Argument(..., help="Latitude in degrees"),
    longitude: float = typer.Argument(..., help="Longitude in degrees"),
    description: str = typer.Option("", "--description", "-d"),
    service: str = typer.Option("Unknown", "--service"),
    user_type: str = typer.Option("user", "--user-type"),
    config_path: Optional[Path] = typer.Option(None, "--config-path", exists=True),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Append a location pin to the location history."""
    _setup_logging(verbose)
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise typer.BadParameter("coordinates must be finite numbers")
    config = AppConfig.load(config_path)

    record = LocationRecord(
        latitude=Decimal(str(latitude)),
        longitude=Decimal(str(longitude)),
        description=description,
        service=service,
        user_type=user_type,
    )
    LocationStore(config.database.path).append(record)
    console.print(f"Plotted {record.id} in {region_code(latitude, longitude)}.")


@app.command("tour")
def plan_tour(
    config_path: Optional[Path] = typer.Option(None, "--config-path", exists=True),
    output_json: Optional[Path] = typer.Option(
        None,
        "--output-json",
        "-o",
        help="Write the tour stops as JSON to this path",
    ),
    export: bool = typer.Option(
        False, "--export", help="Write the tour stops to <output_dir>/tour.json"
    ),
    recent: Optional[int] = typer.Option(
        None, "--recent", min=1, help="Only tour the most recent N stored locations"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Cluster the stored locations and print the tour stops in visiting order."""
    _setup_logging(verbose)
    config = AppConfig.load(config_path)

    store = LocationStore(config.database.path)
    locations = store.load_valid(
        config.database.bulk_load_limit,
        recent=recent or config.database.most_recent_locations,
    )
    stops = TourPlanner(config.tour).plan(locations)

    if not stops:
        console.print("No plottable locations; nothing to tour.")
        return

    table = Table(title=f"Tour ({len(stops)} stops)")
    table.add_column("#", justify="right")
    table.add_column("Description")
    table.add_column("Center")
    table.add_column("Zoom", justify="right")
    table.add_column("Viewers", justify="right")
    for idx, stop in enumerate(stops, start=1):
        table.add_row(
            str(idx),
            stop.description,
            f"{stop.latitude:.4f}, {stop.longitude:.4f}",
            str(stop.zoom),
            str(stop.location_count),
        )
    console.print(table)

    if output_json is None and export:
        output_json = config.output.output_dir / "tour.json"
    if output_json:
        output_json.parent.mkdir(parents=True, exist_ok=True)
        payload = [stop.model_dump(mode="json") for stop in stops]
        output_json.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        console.print(f"Wrote {len(stops)} tour stops to {output_json}")


@app.command("region")
def show_region(
    latitude: float = typer.Argument(...),
    longitude: float = typer.Argument(...),
) -> None:
    """Print the region code and name for a coordinate."""
    console.print(f"{region_code(latitude, longitude)}\t{region_name(latitude, longitude)}")


@app.command("distance")
def show_distance(
    lat1: float = typer.Argument(...),
    lng1: float = typer.Argument(...),
    lat2: float = typer.Argument(...),
    lng2: float = typer.Argument(...),
) -> None:
    """Print the great-circle distance between two coordinates in kilometers."""
    console.print(f"{haversine_km(lat1, lng1, lat2, lng2):.1f} km")


if __name__ == "__main__":
    app()
