"""Mini README: Geodesic and planar primitives shared by planner and validator.

Structure:
    * Coordinate / Ring - ``(longitude, latitude)`` aliases in WGS84 degrees.
    * normalise_ring - coerce caller input into an open ring of floats.
    * bearing / distance_km / path_length_km - spherical measurements.
    * rotate - invertible rotation about a pivot in the local tangent plane.
    * centroid - rotation pivot for a ring.
    * ground_coverage_m / grid_spacing_m - sensor footprint helpers.
    * polygon_area_sq_km - spherical-excess shoelace area.

Angles follow compass conventions: bearings are measured clockwise from
north and positive rotation angles turn clockwise. All functions are pure.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon

Coordinate = Tuple[float, float]
Ring = Sequence[Coordinate]

EARTH_RADIUS_KM = 6371.0
# Mean radius used for geodesic ring areas (IUGG).
EARTH_MEAN_RADIUS_M = 6_371_008.8
METRES_PER_DEGREE = 111_320.0
DEFAULT_FOV_DEG = 84.0


def normalise_ring(polygon: Iterable[Sequence[float]]) -> List[Coordinate]:
    """Return an open ring of float tuples, rejecting degenerate input.

    A closing vertex equal to the first one is stripped so callers may pass
    either open or closed rings.
    """

    ring: List[Coordinate] = []
    for vertex in polygon:
        if len(vertex) < 2:
            raise ValueError(f"Polygon vertex {vertex!r} must be a (longitude, latitude) pair")
        ring.append((float(vertex[0]), float(vertex[1])))
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    if len(set(ring)) < 3:
        raise ValueError("Polygon must have at least 3 distinct vertices")
    return ring


def bearing(a: Coordinate, b: Coordinate) -> float:
    """Forward azimuth from ``a`` to ``b`` in degrees within [0, 360)."""

    lon1, lat1 = math.radians(a[0]), math.radians(a[1])
    lon2, lat2 = math.radians(b[0]), math.radians(b[1])
    delta_lon = lon2 - lon1
    y = math.sin(delta_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)
    return math.degrees(math.atan2(y, x)) % 360.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in kilometres using the haversine formula."""

    lat1, lat2 = math.radians(a[1]), math.radians(b[1])
    delta_lat = lat2 - lat1
    delta_lon = math.radians(b[0] - a[0])
    h = math.sin(delta_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def path_length_km(points: Sequence[Coordinate]) -> float:
    """Sum of consecutive haversine legs along ``points``."""

    return sum(distance_km(points[index - 1], points[index]) for index in range(1, len(points)))


def rotate(points: Sequence[Coordinate], angle_deg: float, pivot: Coordinate) -> List[Coordinate]:
    """Rotate ``points`` clockwise by ``angle_deg`` about ``pivot``.

    Longitudes are scaled by ``cos(pivot latitude)`` so the rotation happens
    in a locally isotropic plane, which is adequate for survey-sized areas.
    The transform is a pure linear map so rotating by ``-angle_deg``
    restores the input up to floating point error.
    """

    if not points:
        return []
    scale = math.cos(math.radians(pivot[1]))
    if abs(scale) < 1e-12:
        raise ValueError("Cannot rotate about a polar pivot")

    theta = math.radians(angle_deg)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    # Row vectors: [x', y'] = [x, y] @ matrix for a clockwise turn.
    matrix = np.array([[cos_t, -sin_t], [sin_t, cos_t]])

    coords = np.asarray(points, dtype=float)
    local = np.column_stack(((coords[:, 0] - pivot[0]) * scale, coords[:, 1] - pivot[1]))
    turned = local @ matrix
    lons = turned[:, 0] / scale + pivot[0]
    lats = turned[:, 1] + pivot[1]
    return [(float(lon), float(lat)) for lon, lat in zip(lons, lats)]


def centroid(polygon: Ring) -> Coordinate:
    """Area centroid of the ring, falling back to the vertex mean."""

    shape = Polygon(polygon)
    point = shape.centroid
    if point.is_empty or not (math.isfinite(point.x) and math.isfinite(point.y)):
        coords = np.asarray(polygon, dtype=float)
        mean = coords.mean(axis=0)
        return (float(mean[0]), float(mean[1]))
    return (float(point.x), float(point.y))


def metres_to_degrees(metres: float, latitude: float) -> float:
    """Convert a ground distance to degrees at ``latitude``."""

    return metres / (METRES_PER_DEGREE * math.cos(math.radians(latitude)))


def ground_coverage_m(altitude_m: float, fov_deg: float = DEFAULT_FOV_DEG) -> float:
    """Width of terrain visible in one sensor frame."""

    return 2 * altitude_m * math.tan(math.radians(fov_deg) / 2)


def grid_spacing_m(
    altitude_m: float,
    overlap_percent: float,
    fov_deg: float = DEFAULT_FOV_DEG,
) -> float:
    """Lateral spacing between parallel scan lines.

    Raises ``ValueError`` when the configuration leaves no positive spacing,
    for example a 100 percent overlap.
    """

    spacing = ground_coverage_m(altitude_m, fov_deg) * (1 - overlap_percent / 100)
    if not spacing > 0:
        raise ValueError(
            f"Grid spacing must be positive (altitude={altitude_m}, "
            f"overlap={overlap_percent}, fov={fov_deg})"
        )
    return spacing


def polygon_area_sq_km(polygon: Ring) -> float:
    """Geodesic area of the implicitly closed ring in square kilometres."""

    total = 0.0
    count = len(polygon)
    for index in range(count):
        lon1, lat1 = polygon[index]
        lon2, lat2 = polygon[(index + 1) % count]
        total += math.radians(lon2 - lon1) * (
            2 + math.sin(math.radians(lat1)) + math.sin(math.radians(lat2))
        )
    area_sq_m = abs(total * EARTH_MEAN_RADIUS_M * EARTH_MEAN_RADIUS_M / 2)
    return area_sq_m / 1_000_000
