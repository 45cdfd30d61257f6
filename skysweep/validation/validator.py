"""Mini README: Constraint checks applied to a generated flight path.

Structure:
    * check_no_fly_zones - one error per active zone the path touches.
    * check_range - error when the path exceeds the vehicle range.
    * check_battery - error or warning from the flat consumption model.
    * validate_path - runs every check and accumulates one report.

The checks are pure functions and never raise for a violation; violations
are returned as data so callers see every problem in a single pass. The
only early exit is a missing vehicle, since no numeric check is meaningful
without one.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from shapely.geometry import LineString, Point, Polygon

from ..geometry import Coordinate
from ..logging_utils import get_logger
from .models import (
    BatteryPolicy,
    ErrorCode,
    NoFlyZone,
    ValidationIssue,
    ValidationResult,
    VehicleCapability,
    WarningCode,
)

LOGGER = get_logger(__name__)


def _path_geometry(path: Sequence[Coordinate]):
    if len(path) == 1:
        return Point(path[0])
    return LineString(path)


def check_no_fly_zones(
    path: Sequence[Coordinate],
    no_fly_zones: Iterable[NoFlyZone],
) -> List[ValidationIssue]:
    """Return an ``NFZ_INTERSECTION`` error for each active zone the path touches.

    Inactive zones are skipped entirely. Every severity is treated as a hard
    blocker.
    """

    if not path:
        return []
    geometry = _path_geometry(path)
    errors: List[ValidationIssue] = []
    for zone in no_fly_zones:
        if not zone.active:
            LOGGER.debug("Skipping inactive no-fly zone %s", zone.zone_id)
            continue
        if not geometry.intersects(Polygon(zone.polygon)):
            continue
        LOGGER.debug("Path intersects %s zone %s", zone.severity.value, zone.zone_id)
        errors.append(
            ValidationIssue(
                code=ErrorCode.NFZ_INTERSECTION,
                message=f"Flight path intersects {zone.severity.value} zone: {zone.name}",
                details={
                    "zoneId": zone.zone_id,
                    "zoneName": zone.name,
                    "severity": zone.severity.value,
                },
            )
        )
    return errors


def check_range(path_distance_km: float, vehicle: VehicleCapability) -> Optional[ValidationIssue]:
    """Return a ``RANGE_EXCEEDED`` error when the path is longer than the range."""

    if path_distance_km <= vehicle.max_range_km:
        return None
    return ValidationIssue(
        code=ErrorCode.RANGE_EXCEEDED,
        message=(
            f"Path distance ({path_distance_km:.1f} km) exceeds drone max range "
            f"({vehicle.max_range_km} km)"
        ),
        details={
            "pathDistance": path_distance_km,
            "maxRange": vehicle.max_range_km,
            "deficit": path_distance_km - vehicle.max_range_km,
        },
    )


def check_battery(
    path_distance_km: float,
    vehicle: VehicleCapability,
    policy: BatteryPolicy = BatteryPolicy(),
) -> Tuple[Optional[ValidationIssue], Optional[ValidationIssue]]:
    """Return ``(error, warning)``; at most one of them is set."""

    consumption = path_distance_km * policy.consumption_per_km
    remaining_after = vehicle.battery - consumption

    if remaining_after < policy.error_threshold:
        error = ValidationIssue(
            code=ErrorCode.LOW_BATTERY,
            message=(
                f"Insufficient battery for mission. Need {consumption:.0f}%, "
                f"have {vehicle.battery}%"
            ),
            details={
                "required": consumption,
                "available": vehicle.battery,
                "remainingAfter": remaining_after,
            },
        )
        return error, None

    if remaining_after < policy.warning_threshold:
        warning = ValidationIssue(
            code=WarningCode.LOW_BATTERY_WARNING,
            message=f"Low battery after mission: ~{remaining_after:.0f}% remaining",
            details={"remainingAfter": remaining_after},
        )
        return None, warning

    return None, None


def validate_path(
    path: Sequence[Coordinate],
    path_distance_km: float,
    vehicle: Optional[VehicleCapability],
    no_fly_zones: Iterable[NoFlyZone] = (),
    policy: BatteryPolicy = BatteryPolicy(),
) -> ValidationResult:
    """Check a path against airspace, range and battery constraints."""

    if vehicle is None:
        LOGGER.info("Validation rejected path: no vehicle assigned")
        return ValidationResult(
            errors=(ValidationIssue(code=ErrorCode.NO_DRONE, message="No drone assigned to mission"),),
        )

    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    errors.extend(check_no_fly_zones(path, no_fly_zones))

    range_error = check_range(path_distance_km, vehicle)
    if range_error:
        errors.append(range_error)

    battery_error, battery_warning = check_battery(path_distance_km, vehicle, policy)
    if battery_error:
        errors.append(battery_error)
    if battery_warning:
        warnings.append(battery_warning)

    result = ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
    LOGGER.info(
        "Validated %s-point path (%.3f km): valid=%s errors=%s warnings=%s",
        len(path),
        path_distance_km,
        result.valid,
        len(errors),
        len(warnings),
    )
    return result
