"""Mini README: Plan-then-validate pipeline for a single survey mission.

Structure:
    * MissionAssessment - planned path together with its validation report.
    * assess_mission - run the planner, then the validator on its output.

The two stages stay independent: a failed validation is reported, never
fed back into re-planning. Every input is an explicit argument so callers
own the polygon, configuration, vehicle and zone data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence

from ..logging_utils import get_logger
from ..route_planning import CoveragePlanner, FlightPathResult, SurveyConfig
from ..validation import BatteryPolicy, NoFlyZone, ValidationResult, VehicleCapability, validate_path

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class MissionAssessment:
    """Planned path and the constraint report produced for it."""

    flight_path: FlightPathResult
    validation: ValidationResult

    @property
    def ready(self) -> bool:
        return self.validation.valid

    def as_dict(self) -> Dict[str, Any]:
        return {
            "flightPath": self.flight_path.as_dict(),
            "validation": self.validation.as_dict(),
        }


def assess_mission(
    polygon: Iterable[Sequence[float]],
    config: SurveyConfig,
    vehicle: Optional[VehicleCapability],
    no_fly_zones: Iterable[NoFlyZone] = (),
    *,
    policy: BatteryPolicy = BatteryPolicy(),
    planner: Optional[CoveragePlanner] = None,
) -> MissionAssessment:
    """Plan ``polygon`` and validate the resulting path."""

    flight_path = (planner or CoveragePlanner()).generate(polygon, config)
    validation = validate_path(
        flight_path.waypoints,
        flight_path.total_distance_km,
        vehicle,
        list(no_fly_zones),
        policy,
    )
    if not validation.valid:
        LOGGER.info(
            "Mission rejected with errors: %s",
            ", ".join(issue.message for issue in validation.errors),
        )
    return MissionAssessment(flight_path=flight_path, validation=validation)
