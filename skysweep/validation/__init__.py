"""Mini README: Constraint validation subsystem for planned survey paths.

Re-exports the validator value objects and check functions so interfaces
and scripts can validate a path without knowing the module split between
``models`` and ``validator``.
"""

from .models import (
    BatteryPolicy,
    ErrorCode,
    NoFlyZone,
    ValidationIssue,
    ValidationResult,
    VehicleCapability,
    WarningCode,
    ZoneSeverity,
)
from .validator import check_battery, check_no_fly_zones, check_range, validate_path

__all__ = [
    "BatteryPolicy",
    "ErrorCode",
    "NoFlyZone",
    "ValidationIssue",
    "ValidationResult",
    "VehicleCapability",
    "WarningCode",
    "ZoneSeverity",
    "check_battery",
    "check_no_fly_zones",
    "check_range",
    "validate_path",
]
