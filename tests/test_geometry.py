"""Mini README: Tests for the geometry primitives.

Covers compass bearings, haversine distances, the invertible pivot
rotation, sensor footprint maths and ring normalisation.
"""

from __future__ import annotations

import pytest

from skysweep.geometry import (
    bearing,
    distance_km,
    grid_spacing_m,
    ground_coverage_m,
    metres_to_degrees,
    normalise_ring,
    path_length_km,
    polygon_area_sq_km,
    rotate,
)


@pytest.mark.parametrize(
    "target, expected",
    [((0.0, 1.0), 0.0), ((1.0, 0.0), 90.0), ((0.0, -1.0), 180.0), ((-1.0, 0.0), 270.0)],
)
def test_bearing_follows_compass_convention(target, expected) -> None:
    """Bearings are clockwise from north and stay within [0, 360)."""

    assert bearing((0.0, 0.0), target) == pytest.approx(expected, abs=1e-9)


def test_distance_uses_haversine_with_mean_radius() -> None:
    """One degree of latitude spans about 111.195 km on a 6371 km sphere."""

    assert distance_km((0.0, 0.0), (0.0, 1.0)) == pytest.approx(111.19492664, rel=1e-9)
    assert distance_km((12.5, 48.1), (12.5, 48.1)) == 0.0


def test_path_length_sums_consecutive_legs() -> None:
    points = [(0.0, 0.0), (0.0, 0.5), (0.0, 1.0)]
    assert path_length_km(points) == pytest.approx(distance_km((0.0, 0.0), (0.0, 1.0)))
    assert path_length_km(points[:1]) == 0.0


@pytest.mark.parametrize("angle", [-270.0, -33.3, 0.0, 17.0, 90.0, 145.5, 359.0])
@pytest.mark.parametrize("pivot", [(0.0, 0.0), (-122.4, 37.77), (151.2, -33.86), (10.0, 65.0)])
def test_rotate_round_trip_restores_points(angle, pivot) -> None:
    """Rotating forth and back returns the original coordinates."""

    points = [
        (pivot[0] + 0.01, pivot[1] - 0.004),
        (pivot[0] - 0.02, pivot[1] + 0.013),
        (pivot[0] + 0.0005, pivot[1] + 0.0201),
    ]
    restored = rotate(rotate(points, angle, pivot), -angle, pivot)
    for original, back in zip(points, restored):
        assert back[0] == pytest.approx(original[0], abs=1e-6)
        assert back[1] == pytest.approx(original[1], abs=1e-6)


def test_rotate_turns_clockwise() -> None:
    """A point due north of the pivot ends up due east after +90 degrees."""

    (lon, lat), = rotate([(0.0, 0.001)], 90.0, (0.0, 0.0))
    assert lon == pytest.approx(0.001, abs=1e-12)
    assert lat == pytest.approx(0.0, abs=1e-12)


def test_ground_coverage_and_spacing_match_reference_values() -> None:
    """50 m altitude with an 84 degree camera and 70 percent overlap."""

    assert ground_coverage_m(50, 84) == pytest.approx(90.04, abs=0.1)
    assert grid_spacing_m(50, 70, 84) == pytest.approx(27.0, abs=0.1)


def test_grid_spacing_rejects_full_overlap() -> None:
    with pytest.raises(ValueError):
        grid_spacing_m(50, 100)


def test_metres_to_degrees_widens_with_latitude() -> None:
    assert metres_to_degrees(111_320, 0.0) == pytest.approx(1.0)
    assert metres_to_degrees(111_320, 60.0) == pytest.approx(2.0)


def test_polygon_area_of_equatorial_square() -> None:
    """A 0.01 degree square at the equator covers roughly 1.24 km²."""

    square = [(0.0, 0.0), (0.01, 0.0), (0.01, 0.01), (0.0, 0.01)]
    assert polygon_area_sq_km(square) == pytest.approx(1.2364, rel=1e-2)
    assert polygon_area_sq_km(list(reversed(square))) == pytest.approx(polygon_area_sq_km(square))


def test_normalise_ring_strips_closing_vertex() -> None:
    ring = normalise_ring([[0, 0], [1, 0], [1, 1], [0, 0]])
    assert ring == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]


def test_normalise_ring_rejects_degenerate_polygons() -> None:
    with pytest.raises(ValueError):
        normalise_ring([(0, 0), (1, 1)])
    with pytest.raises(ValueError):
        normalise_ring([(0, 0), (1, 1), (0, 0), (1, 1)])
