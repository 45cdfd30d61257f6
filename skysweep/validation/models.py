"""Mini README: Value objects consumed and produced by the path validator.

Structure:
    * ZoneSeverity - restriction level attached to a no-fly zone.
    * NoFlyZone - externally owned restricted airspace polygon.
    * VehicleCapability - range/battery snapshot supplied at validation time.
    * ErrorCode / WarningCode - machine readable issue identifiers.
    * ValidationIssue - one error or warning with structured details.
    * ValidationResult - accumulated report for a single validation call.
    * BatteryPolicy - flat consumption model and its thresholds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple, Union

from ..geometry import Coordinate, normalise_ring


class ZoneSeverity(str, Enum):
    """Restriction level of a no-fly zone."""

    WARNING = "WARNING"
    RESTRICTED = "RESTRICTED"
    PROHIBITED = "PROHIBITED"

    @classmethod
    def from_str(cls, value: str) -> "ZoneSeverity":
        """Coerce arbitrary casing into a valid severity."""

        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported zone severity: {value}") from error


class ErrorCode(str, Enum):
    NFZ_INTERSECTION = "NFZ_INTERSECTION"
    RANGE_EXCEEDED = "RANGE_EXCEEDED"
    LOW_BATTERY = "LOW_BATTERY"
    NO_DRONE = "NO_DRONE"


class WarningCode(str, Enum):
    LOW_BATTERY_WARNING = "LOW_BATTERY_WARNING"
    # Reserved for a future weather feed; never emitted today.
    WEATHER_ADVISORY = "WEATHER_ADVISORY"


@dataclass(frozen=True, slots=True)
class NoFlyZone:
    """Restricted airspace polygon with its severity and activation flag."""

    zone_id: str
    name: str
    polygon: Tuple[Coordinate, ...]
    severity: ZoneSeverity = ZoneSeverity.PROHIBITED
    active: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygon", tuple(normalise_ring(self.polygon)))
        if not isinstance(self.severity, ZoneSeverity):
            object.__setattr__(self, "severity", ZoneSeverity.from_str(str(self.severity)))


@dataclass(frozen=True, slots=True)
class VehicleCapability:
    """Snapshot of the assigned vehicle's limits."""

    max_range_km: float
    battery: float
    speed_kmh: float

    def __post_init__(self) -> None:
        if self.max_range_km <= 0:
            raise ValueError(f"max_range_km must be positive, got {self.max_range_km}")
        if not 0 <= self.battery <= 100:
            raise ValueError(f"battery must be within [0, 100], got {self.battery}")
        if self.speed_kmh <= 0:
            raise ValueError(f"speed_kmh must be positive, got {self.speed_kmh}")


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Single validation error or warning."""

    code: Union[ErrorCode, WarningCode]
    message: str
    details: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self, *, include_details: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code.value, "message": self.message}
        if include_details and self.details:
            payload["details"] = dict(self.details)
        return payload


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Errors and warnings accumulated by one validation pass.

    ``valid`` is derived from the error list so the two can never disagree;
    warnings never affect it.
    """

    errors: Tuple[ValidationIssue, ...] = ()
    warnings: Tuple[ValidationIssue, ...] = ()

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    def error_codes(self) -> Tuple[Union[ErrorCode, WarningCode], ...]:
        return tuple(issue.code for issue in self.errors)

    def warning_codes(self) -> Tuple[Union[ErrorCode, WarningCode], ...]:
        return tuple(issue.code for issue in self.warnings)

    def as_dict(self) -> Dict[str, Any]:
        """Export the report with serialisable values."""

        return {
            "valid": self.valid,
            "errors": [issue.as_dict() for issue in self.errors],
            "warnings": [issue.as_dict(include_details=False) for issue in self.warnings],
        }


@dataclass(frozen=True, slots=True)
class BatteryPolicy:
    """Flat percentage-per-kilometre battery model."""

    consumption_per_km: float = 2.0
    error_threshold: float = 10.0
    warning_threshold: float = 25.0

    def __post_init__(self) -> None:
        if self.consumption_per_km <= 0:
            raise ValueError("consumption_per_km must be positive")
        if self.error_threshold > self.warning_threshold:
            raise ValueError("error_threshold must not exceed warning_threshold")
