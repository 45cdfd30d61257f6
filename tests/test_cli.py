"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from main_flight_planner import cli

RUNNER = CliRunner()


def _polygon_file(tmp_path, size: float):
    ring = [[0.0, 0.0], [size, 0.0], [size, size], [0.0, size], [0.0, 0.0]]
    path = tmp_path / "area.geojson"
    path.write_text(json.dumps({"type": "Polygon", "coordinates": [ring]}))
    return path


@pytest.fixture()
def small_area(tmp_path):
    return _polygon_file(tmp_path, 0.002)


def test_plan_prints_flight_path(small_area) -> None:
    result = RUNNER.invoke(cli, ["plan", str(small_area), "--pattern", "crosshatch"])

    assert result.exit_code == 0
    assert '"numWaypoints"' in result.stdout
    assert '"executedPattern": "CROSSHATCH"' in result.stdout


def test_plan_rejects_invalid_altitude(small_area) -> None:
    result = RUNNER.invoke(cli, ["plan", str(small_area), "--altitude", "5"])
    assert result.exit_code == 2


def test_validate_without_vehicle_fails(small_area) -> None:
    result = RUNNER.invoke(cli, ["validate", str(small_area)])

    assert result.exit_code == 1
    assert "NO_DRONE" in result.stdout


def test_validate_with_capable_vehicle_succeeds(small_area) -> None:
    result = RUNNER.invoke(cli, ["validate", str(small_area), "--max-range", "100", "--battery", "100"])

    assert result.exit_code == 0
    assert '"valid": true' in result.stdout


def test_validate_reports_zone_conflict(small_area, tmp_path) -> None:
    zones = tmp_path / "zones.geojson"
    zones.write_text(
        json.dumps(
            {
                "type": "FeatureCollection",
                "features": [
                    {
                        "type": "Feature",
                        "properties": {"id": "mast", "name": "Radio Mast"},
                        "geometry": {
                            "type": "Polygon",
                            "coordinates": [[[0.0007, 0.0007], [0.0013, 0.0007], [0.0013, 0.0013], [0.0007, 0.0013], [0.0007, 0.0007]]],
                        },
                    }
                ],
            }
        )
    )

    result = RUNNER.invoke(
        cli,
        ["validate", str(small_area), "--zones", str(zones), "--max-range", "100", "--pattern", "perimeter"],
    )

    # The perimeter never enters the mast zone.
    assert result.exit_code == 0
    result = RUNNER.invoke(cli, ["validate", str(small_area), "--zones", str(zones), "--max-range", "100"])
    assert result.exit_code == 1
    assert "NFZ_INTERSECTION" in result.stdout
