"""Mini README: GeoJSON helper utilities for Skysweep.

This module converts between GeoJSON payloads and the plain coordinate
tuples used by the planner and validator. Keeping the logic isolated avoids
importing web framework dependencies when running unit tests or reusing the
helpers from the CLI.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..geometry import Coordinate, normalise_ring
from ..validation.models import NoFlyZone, ZoneSeverity


def _load(payload: str) -> Dict[str, Any]:
    try:
        loaded = json.loads(payload)
    except json.JSONDecodeError as error:
        raise ValueError("GeoJSON payload is invalid JSON") from error
    if not isinstance(loaded, dict):
        raise ValueError("GeoJSON payload must be an object")
    return loaded


def _polygon_ring(geometry: Dict[str, Any]) -> List[Coordinate]:
    if geometry.get("type") != "Polygon":
        raise ValueError("Only polygon GeoJSON payloads are supported")

    coordinates = geometry.get("coordinates")
    if not coordinates:
        raise ValueError("Polygon coordinates are required")
    # Holes are ignored; surveys sweep the outer boundary only.
    return normalise_ring(coordinates[0])


def polygon_from_geojson(area_geojson: str) -> List[Coordinate]:
    """Validate GeoJSON and return the outer ring as ``(lon, lat)`` tuples."""

    geojson = _load(area_geojson)
    if geojson.get("type") == "Feature":
        geometry = geojson.get("geometry") or {}
    else:
        geometry = geojson
    return _polygon_ring(geometry)


def _closed(ring: Sequence[Coordinate]) -> List[List[float]]:
    closed = [[lon, lat] for lon, lat in ring]
    if closed and closed[0] != closed[-1]:
        closed.append(list(closed[0]))
    return closed


def path_to_feature(
    waypoints: Iterable[Coordinate],
    properties: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Wrap waypoints in a GeoJSON LineString feature."""

    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[lon, lat] for lon, lat in waypoints],
        },
        "properties": dict(properties or {}),
    }


def no_fly_zones_from_geojson(collection_geojson: str) -> List[NoFlyZone]:
    """Parse a FeatureCollection of restricted areas into ``NoFlyZone`` values."""

    collection = _load(collection_geojson)
    if collection.get("type") != "FeatureCollection":
        raise ValueError("No-fly zones must be supplied as a FeatureCollection")

    zones: List[NoFlyZone] = []
    for index, feature in enumerate(collection.get("features") or []):
        properties = feature.get("properties") or {}
        zone_id = properties.get("id") or feature.get("id")
        if not zone_id:
            raise ValueError(f"No-fly zone feature {index} is missing an id")
        zones.append(
            NoFlyZone(
                zone_id=str(zone_id),
                name=str(properties.get("name", zone_id)),
                polygon=tuple(_polygon_ring(feature.get("geometry") or {})),
                severity=ZoneSeverity.from_str(str(properties.get("severity", "PROHIBITED"))),
                active=bool(properties.get("active", True)),
            )
        )
    return zones


def no_fly_zones_to_feature_collection(zones: Iterable[NoFlyZone]) -> Dict[str, Any]:
    """Export zones as a FeatureCollection suitable for map overlays."""

    features = []
    for zone in zones:
        features.append(
            {
                "type": "Feature",
                "properties": {
                    "id": zone.zone_id,
                    "name": zone.name,
                    "severity": zone.severity.value,
                    "active": zone.active,
                },
                "geometry": {"type": "Polygon", "coordinates": [_closed(zone.polygon)]},
            }
        )
    return {"type": "FeatureCollection", "features": features}