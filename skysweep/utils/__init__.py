"""Mini README: Utility helper functions for Skysweep.

Currently exports the GeoJSON conversion helpers shared by the HTTP
interface and the command line entry point.
"""

from .geojson import (
    no_fly_zones_from_geojson,
    no_fly_zones_to_feature_collection,
    path_to_feature,
    polygon_from_geojson,
)

__all__ = [
    "no_fly_zones_from_geojson",
    "no_fly_zones_to_feature_collection",
    "path_to_feature",
    "polygon_from_geojson",
]
