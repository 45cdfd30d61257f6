"""Mini README: Request models accepted by the Skysweep HTTP API.

Structure:
    * SurveyConfigPayload - survey configuration with optional defaults.
    * VehiclePayload / NoFlyZonePayload - validator inputs.
    * PlanRequest / ValidateRequest / AssessRequest - endpoint bodies.

Field constraints mirror the domain ranges so malformed requests fail with
a 422 before reaching the planner. Optional camera, speed and capture
fields fall back to the configured settings when converted.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..configuration import SkysweepSettings
from ..route_planning import SensorType, SurveyConfig, SurveyPattern
from ..validation import BatteryPolicy, NoFlyZone, VehicleCapability, ZoneSeverity

LonLat = Tuple[float, float]


class SurveyConfigPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    altitude_m: float = Field(..., ge=20, le=120)
    overlap_percent: float = Field(..., ge=30, le=90)
    camera_fov_deg: Optional[float] = Field(default=None, gt=0, lt=180)
    pattern: SurveyPattern = SurveyPattern.SNAKE
    speed_kmh: Optional[float] = Field(default=None, gt=0)
    sensors: List[SensorType] = Field(default_factory=lambda: [SensorType.RGB])
    capture_frequency_hz: Optional[float] = Field(default=None, gt=0)
    terrain_follow: bool = False

    def to_config(self, settings: SkysweepSettings) -> SurveyConfig:
        """Build the domain configuration, filling gaps from ``settings``."""

        return SurveyConfig(
            altitude_m=self.altitude_m,
            overlap_percent=self.overlap_percent,
            camera_fov_deg=self.camera_fov_deg or settings.default_camera_fov_deg,
            pattern=self.pattern,
            speed_kmh=self.speed_kmh or settings.default_speed_kmh,
            sensors=tuple(self.sensors),
            capture_frequency_hz=self.capture_frequency_hz or settings.default_capture_frequency_hz,
            terrain_follow=self.terrain_follow,
        )


class VehiclePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_range_km: float = Field(..., gt=0)
    battery: float = Field(..., ge=0, le=100)
    speed_kmh: float = Field(..., gt=0)

    def to_capability(self) -> VehicleCapability:
        return VehicleCapability(
            max_range_km=self.max_range_km,
            battery=self.battery,
            speed_kmh=self.speed_kmh,
        )


class NoFlyZonePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    polygon: List[LonLat] = Field(..., min_length=3)
    severity: ZoneSeverity = ZoneSeverity.PROHIBITED
    active: bool = True

    def to_zone(self) -> NoFlyZone:
        return NoFlyZone(
            zone_id=self.id,
            name=self.name,
            polygon=tuple(self.polygon),
            severity=self.severity,
            active=self.active,
        )


class PlanRequest(BaseModel):
    polygon: List[LonLat] = Field(..., min_length=3)
    config: SurveyConfigPayload


class ValidateRequest(BaseModel):
    waypoints: List[LonLat] = Field(..., min_length=1)
    distance_km: Optional[float] = Field(default=None, ge=0)
    vehicle: Optional[VehiclePayload] = None
    no_fly_zones: List[NoFlyZonePayload] = Field(default_factory=list)


class AssessRequest(BaseModel):
    polygon: List[LonLat] = Field(..., min_length=3)
    config: SurveyConfigPayload
    vehicle: Optional[VehiclePayload] = None
    no_fly_zones: List[NoFlyZonePayload] = Field(default_factory=list)


def battery_policy_from(settings: SkysweepSettings) -> BatteryPolicy:
    """Translate configured battery thresholds into an explicit policy."""

    return BatteryPolicy(
        consumption_per_km=settings.battery_consumption_per_km,
        error_threshold=settings.battery_error_threshold,
        warning_threshold=settings.battery_warning_threshold,
    )
