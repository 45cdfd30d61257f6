"""Mini README: Scan-line generation for boustrophedon coverage.

Structure:
    * principal_axis_bearing - bearing of the polygon's longest edge.
    * generate_scan_lines - clip horizontal probes against a working-frame polygon.
    * apply_snake_pattern - order scan lines so consecutive sweeps alternate.
    * snake_sweep - rotate into the working frame, sweep, rotate back.

The working frame is the polygon rotated about its centroid so the sweep
direction lines up with the frame axes. Probes are clipped against the
polygon area with shapely, which keeps concave polygons correct: every
probe may yield several disjoint scan lines, and a probe grazing vertices
yields none.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from shapely.errors import ShapelyError
from shapely.geometry import LineString, Polygon
from shapely.ops import linemerge
from shapely.validation import make_valid

from ..geometry import Coordinate, bearing, distance_km, metres_to_degrees, rotate
from ..logging_utils import get_logger
from .models import ScanLine

LOGGER = get_logger(__name__)

# Overshoot beyond the bounding box so probes cross the boundary cleanly.
PROBE_MARGIN_DEG = 0.001


def principal_axis_bearing(ring: Sequence[Coordinate]) -> float:
    """Return the bearing of the longest edge of the implicitly closed ring."""

    closed = list(ring) + [ring[0]]
    max_length = 0.0
    principal = 0.0
    for start, end in zip(closed, closed[1:]):
        length = distance_km(start, end)
        if length > max_length:
            max_length = length
            principal = bearing(start, end)
    return principal


def _clipped_parts(geometry) -> List[Tuple[Coordinate, Coordinate]]:
    """Return the ``(west, east)`` endpoints of each line inside the polygon.

    Point parts come from probes grazing a vertex and are dropped.
    """

    if geometry.is_empty:
        return []
    if geometry.geom_type == "LineString":
        if geometry.length == 0:
            return []
        coords = list(geometry.coords)
        west, east = sorted((coords[0], coords[-1]))
        return [(west, east)]
    if geometry.geom_type == "MultiLineString":
        merged = linemerge(geometry)
        if merged.geom_type == "LineString":
            return _clipped_parts(merged)
        geometry = merged
    parts: List[Tuple[Coordinate, Coordinate]] = []
    for part in getattr(geometry, "geoms", []):
        parts.extend(_clipped_parts(part))
    return parts


def generate_scan_lines(ring: Sequence[Coordinate], spacing_m: float) -> List[ScanLine]:
    """Clip evenly spaced horizontal probes against the polygon area.

    Probes start at the minimum latitude of the ring and advance northwards
    by ``spacing_m`` converted to degrees at the centre latitude. Each part
    of a probe lying inside the polygon becomes one scan line, ordered west
    to east; a probe that only touches vertices contributes nothing.
    """

    area = make_valid(Polygon(ring))
    min_x, min_y, max_x, max_y = area.bounds
    step = metres_to_degrees(spacing_m, (min_y + max_y) / 2)
    probe_count = int(math.floor((max_y - min_y) / step)) + 1

    lines: List[ScanLine] = []
    for index in range(probe_count):
        latitude = min_y + index * step
        probe = LineString([(min_x - PROBE_MARGIN_DEG, latitude), (max_x + PROBE_MARGIN_DEG, latitude)])
        try:
            parts = _clipped_parts(area.intersection(probe))
        except ShapelyError as error:
            LOGGER.debug("Probe %s at latitude %.7f failed to clip: %s", index, latitude, error)
            continue
        for west, east in sorted(parts):
            lines.append(ScanLine(start=west, end=east))

    LOGGER.debug(
        "Generated %s scan lines from %s probes at %.2f m spacing",
        len(lines),
        probe_count,
        spacing_m,
    )
    return lines


def apply_snake_pattern(lines: Sequence[ScanLine]) -> List[Coordinate]:
    """Concatenate scan lines, reversing every other one."""

    waypoints: List[Coordinate] = []
    for index, line in enumerate(lines):
        if index % 2 == 1:
            line = line.reversed()
        waypoints.append(line.start)
        waypoints.append(line.end)
    return waypoints


def snake_sweep(
    ring: Sequence[Coordinate],
    spacing_m: float,
    sweep_bearing: float,
    pivot: Coordinate,
) -> List[Coordinate]:
    """Sweep the ring in the frame aligned with ``sweep_bearing``.

    Returns an empty list when no scan line survives clipping.
    """

    working_ring = rotate(ring, -sweep_bearing, pivot)
    lines = generate_scan_lines(working_ring, spacing_m)
    if not lines:
        return []
    return rotate(apply_snake_pattern(lines), sweep_bearing, pivot)
