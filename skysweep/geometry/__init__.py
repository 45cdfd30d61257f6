"""Mini README: Geometry primitives package for Skysweep.

Bearing, distance, rotation and sensor-footprint helpers used by the
coverage planner and the constraint validator. See ``primitives`` for the
conventions (``(longitude, latitude)`` degrees, clockwise angles).
"""

from .primitives import (
    Coordinate,
    Ring,
    bearing,
    centroid,
    distance_km,
    grid_spacing_m,
    ground_coverage_m,
    metres_to_degrees,
    normalise_ring,
    path_length_km,
    polygon_area_sq_km,
    rotate,
)

__all__ = [
    "Coordinate",
    "Ring",
    "bearing",
    "centroid",
    "distance_km",
    "grid_spacing_m",
    "ground_coverage_m",
    "metres_to_degrees",
    "normalise_ring",
    "path_length_km",
    "polygon_area_sq_km",
    "rotate",
]
