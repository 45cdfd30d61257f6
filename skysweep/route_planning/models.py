"""Mini README: Value objects exchanged by the coverage planner.

Structure:
    * SurveyPattern - tagged scan pattern with display names.
    * SensorType - payload sensors carried on a survey configuration.
    * SurveyConfig - immutable altitude/overlap/camera/pattern settings.
    * ScanLine - clipped sweep segment in the working frame.
    * PatternOutcome - waypoints produced by one pattern strategy.
    * FlightPathResult - planned path plus derived metrics.

Every class here is a frozen value. A changed configuration produces a new
``SurveyConfig`` and therefore a freshly generated ``FlightPathResult``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from ..geometry import Coordinate
from ..utils.geojson import path_to_feature


class SurveyPattern(str, Enum):
    """Enumerate the supported sweep patterns."""

    SNAKE = "SNAKE"
    CROSSHATCH = "CROSSHATCH"
    PERIMETER = "PERIMETER"
    SPIRAL = "SPIRAL"

    @classmethod
    def from_str(cls, value: str) -> "SurveyPattern":
        """Coerce arbitrary casing into a valid pattern."""

        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported survey pattern: {value}") from error

    @property
    def display_name(self) -> str:
        return _PATTERN_NAMES[self]


_PATTERN_NAMES = {
    SurveyPattern.SNAKE: "Snake (Lawnmower)",
    SurveyPattern.CROSSHATCH: "Crosshatch (Grid)",
    SurveyPattern.PERIMETER: "Perimeter Only",
    SurveyPattern.SPIRAL: "Spiral Inward",
}


class SensorType(str, Enum):
    """Payload sensors a survey can carry."""

    RGB = "RGB"
    THERMAL = "THERMAL"
    LIDAR = "LIDAR"
    MULTISPECTRAL = "MULTISPECTRAL"


@dataclass(frozen=True, slots=True)
class SurveyConfig:
    """Altitude, overlap and pattern settings for one survey plan."""

    altitude_m: float
    overlap_percent: float
    camera_fov_deg: float = 84.0
    pattern: SurveyPattern = SurveyPattern.SNAKE
    speed_kmh: float = 30.0
    sensors: Tuple[SensorType, ...] = (SensorType.RGB,)
    capture_frequency_hz: float = 2.0
    # Carried for mission records only; paths are always planned flat.
    terrain_follow: bool = False

    def __post_init__(self) -> None:
        if not 20 <= self.altitude_m <= 120:
            raise ValueError(f"altitude_m must be within [20, 120], got {self.altitude_m}")
        if not 30 <= self.overlap_percent <= 90:
            raise ValueError(
                f"overlap_percent must be within [30, 90], got {self.overlap_percent}"
            )
        if not 0 < self.camera_fov_deg < 180:
            raise ValueError(f"camera_fov_deg must be within (0, 180), got {self.camera_fov_deg}")
        if self.speed_kmh <= 0:
            raise ValueError(f"speed_kmh must be positive, got {self.speed_kmh}")
        if self.capture_frequency_hz <= 0:
            raise ValueError(
                f"capture_frequency_hz must be positive, got {self.capture_frequency_hz}"
            )
        if not isinstance(self.pattern, SurveyPattern):
            object.__setattr__(self, "pattern", SurveyPattern.from_str(str(self.pattern)))
        object.__setattr__(self, "sensors", _coerce_sensors(self.sensors))

    def with_changes(self, **changes: Any) -> "SurveyConfig":
        """Return a new configuration with ``changes`` applied."""

        return replace(self, **changes)


def _coerce_sensors(sensors: Iterable[object]) -> Tuple[SensorType, ...]:
    coerced = []
    for sensor in sensors:
        try:
            coerced.append(sensor if isinstance(sensor, SensorType) else SensorType(str(sensor).upper()))
        except ValueError as error:
            raise ValueError(f"Unsupported sensor type: {sensor}") from error
    return tuple(coerced)


@dataclass(frozen=True, slots=True)
class ScanLine:
    """Segment of a sweep line lying inside the polygon."""

    start: Coordinate
    end: Coordinate

    def reversed(self) -> "ScanLine":
        return ScanLine(start=self.end, end=self.start)


@dataclass(frozen=True, slots=True)
class PatternOutcome:
    """Waypoints generated by a strategy and which pattern actually ran."""

    waypoints: Tuple[Coordinate, ...]
    executed_pattern: SurveyPattern
    substituted: bool = False


@dataclass(frozen=True, slots=True)
class FlightPathResult:
    """Planned waypoints together with the metrics derived from them."""

    waypoints: Tuple[Coordinate, ...]
    total_distance_km: float
    estimated_duration_min: int
    grid_spacing_m: float
    estimated_photos: int
    area_sq_km: float
    requested_pattern: SurveyPattern
    executed_pattern: SurveyPattern
    used_fallback: bool = False
    substituted: bool = False

    @property
    def num_waypoints(self) -> int:
        return len(self.waypoints)

    def as_dict(self) -> Dict[str, Any]:
        """Export the result using the external camelCase keys."""

        return {
            "waypoints": [[lon, lat] for lon, lat in self.waypoints],
            "totalDistance_km": self.total_distance_km,
            "estimatedDuration_min": self.estimated_duration_min,
            "numWaypoints": self.num_waypoints,
            "gridSpacing_m": self.grid_spacing_m,
            "estimatedPhotos": self.estimated_photos,
            "area_sq_km": self.area_sq_km,
            "requestedPattern": self.requested_pattern.value,
            "executedPattern": self.executed_pattern.value,
            "usedFallback": self.used_fallback,
            "substituted": self.substituted,
        }

    def to_geojson(self, properties: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Return the path as a GeoJSON LineString feature."""

        base = {
            "pattern": self.executed_pattern.value,
            "distance_km": self.total_distance_km,
        }
        base.update(properties or {})
        return path_to_feature(self.waypoints, properties=base)
