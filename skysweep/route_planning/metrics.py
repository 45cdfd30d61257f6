"""Mini README: Figures derived from a planned waypoint sequence.

Structure:
    * PathMetrics - distance, duration, photo count and area computed together.
    * compute_path_metrics - build ``PathMetrics`` from waypoints and polygon.
    * estimate_photo_count - photos captured while flying a distance.
    * estimate_battery_consumption / check_range_validity - quick vehicle
      feasibility helpers for previews.
    * pattern_display_name - human label for a pattern.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..geometry import Coordinate, path_length_km, polygon_area_sq_km
from .models import SurveyPattern


@dataclass(frozen=True, slots=True)
class PathMetrics:
    """Metrics that always change together with the waypoint sequence."""

    total_distance_km: float
    estimated_duration_min: int
    estimated_photos: int
    area_sq_km: float


def estimate_photo_count(
    distance_km: float,
    speed_kmh: float = 40.0,
    capture_frequency_hz: float = 2.0,
) -> int:
    """Photos taken while covering ``distance_km`` at a fixed capture rate."""

    duration_seconds = distance_km / speed_kmh * 3600
    return math.ceil(duration_seconds * capture_frequency_hz)


def compute_path_metrics(
    waypoints: Sequence[Coordinate],
    polygon: Sequence[Coordinate],
    speed_kmh: float,
    capture_frequency_hz: float,
) -> PathMetrics:
    """Derive distance, duration, photos and surveyed area."""

    if speed_kmh <= 0:
        raise ValueError(f"speed_kmh must be positive, got {speed_kmh}")
    total_distance_km = path_length_km(waypoints)
    return PathMetrics(
        total_distance_km=total_distance_km,
        estimated_duration_min=math.ceil(total_distance_km / speed_kmh * 60),
        estimated_photos=estimate_photo_count(total_distance_km, speed_kmh, capture_frequency_hz),
        area_sq_km=round(polygon_area_sq_km(polygon), 3),
    )


def estimate_battery_consumption(distance_km: float, consumption_per_km: float = 2.0) -> int:
    """Whole percentage points of battery needed for ``distance_km``."""

    return math.ceil(distance_km * consumption_per_km)


def check_range_validity(distance_km: float, max_range_km: float) -> bool:
    return distance_km <= max_range_km


def pattern_display_name(pattern: SurveyPattern | str) -> str:
    """Human readable label, echoing unknown values unchanged."""

    try:
        return SurveyPattern.from_str(str(getattr(pattern, "value", pattern))).display_name
    except ValueError:
        return str(pattern)
