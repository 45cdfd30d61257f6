"""Mini README: Entry point CLI for the Skysweep survey planner.

This script exposes a Typer CLI that plans coverage paths from GeoJSON
polygons, validates them against no-fly zones and vehicle limits, and
launches the planning API with configurable host, port, and production
flags. Settings are drawn from environment variables when available.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from skysweep.configuration import get_settings
from skysweep.interface.schemas import battery_policy_from
from skysweep.logging_utils import configure_root_logger
from skysweep.missions import assess_mission
from skysweep.route_planning import SurveyConfig, SurveyPattern, generate_flight_path
from skysweep.utils.geojson import no_fly_zones_from_geojson, polygon_from_geojson
from skysweep.validation import VehicleCapability

cli = typer.Typer(help="Plan and validate aerial survey flight paths.")


def _build_config(
    altitude: float,
    overlap: float,
    fov: Optional[float],
    pattern: str,
    speed: Optional[float],
) -> SurveyConfig:
    settings = get_settings()
    try:
        return SurveyConfig(
            altitude_m=altitude,
            overlap_percent=overlap,
            camera_fov_deg=fov or settings.default_camera_fov_deg,
            pattern=SurveyPattern.from_str(pattern),
            speed_kmh=speed or settings.default_speed_kmh,
            capture_frequency_hz=settings.default_capture_frequency_hz,
        )
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error


def _read_polygon(polygon_file: Path):
    try:
        return polygon_from_geojson(polygon_file.read_text())
    except ValueError as error:
        raise typer.BadParameter(f"{polygon_file}: {error}") from error


@cli.command()
def plan(
    polygon_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GeoJSON polygon to survey."),
    altitude: float = typer.Option(50.0, help="Flight altitude in metres (20-120)."),
    overlap: float = typer.Option(70.0, help="Image overlap percentage (30-90)."),
    fov: Optional[float] = typer.Option(None, help="Camera field of view in degrees."),
    pattern: str = typer.Option("SNAKE", help="SNAKE, CROSSHATCH, PERIMETER or SPIRAL."),
    speed: Optional[float] = typer.Option(None, help="Cruise speed in km/h."),
) -> None:
    """Generate a coverage path and print it as JSON."""

    configure_root_logger(get_settings().log_level)
    config = _build_config(altitude, overlap, fov, pattern, speed)
    try:
        result = generate_flight_path(_read_polygon(polygon_file), config)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    typer.echo(json.dumps(result.as_dict(), indent=2))


@cli.command()
def validate(
    polygon_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GeoJSON polygon to survey."),
    zones: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="GeoJSON FeatureCollection of no-fly zones."),
    altitude: float = typer.Option(50.0, help="Flight altitude in metres (20-120)."),
    overlap: float = typer.Option(70.0, help="Image overlap percentage (30-90)."),
    pattern: str = typer.Option("SNAKE", help="SNAKE, CROSSHATCH, PERIMETER or SPIRAL."),
    max_range: Optional[float] = typer.Option(None, help="Vehicle maximum range in km; omit for no vehicle."),
    battery: float = typer.Option(100.0, help="Vehicle battery percentage (0-100)."),
    vehicle_speed: float = typer.Option(40.0, help="Vehicle cruise speed in km/h."),
) -> None:
    """Plan a path, validate it, and exit non-zero when it is rejected."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    config = _build_config(altitude, overlap, None, pattern, None)
    try:
        zone_list = no_fly_zones_from_geojson(zones.read_text()) if zones else []
        vehicle = (
            VehicleCapability(max_range_km=max_range, battery=battery, speed_kmh=vehicle_speed)
            if max_range is not None
            else None
        )
        assessment = assess_mission(
            _read_polygon(polygon_file),
            config,
            vehicle,
            zone_list,
            policy=battery_policy_from(settings),
        )
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error

    typer.echo(json.dumps(assessment.as_dict(), indent=2))
    if not assessment.ready:
        raise typer.Exit(code=1)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the planning API using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the wildcard bind address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting Skysweep API on "
        f"{effective_host}:{effective_port}.\n"
        "Interactive docs at "
        f"http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "skysweep.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
    )


if __name__ == "__main__":
    cli()
