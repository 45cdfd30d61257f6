"""Mini README: Route planning subsystem for survey mission design.

Exports the coverage planner, its value objects and the pattern strategy
registry. The package keeps one strategy per scan pattern so more advanced
patterns can be introduced later without breaking the API.
"""

from .metrics import (
    PathMetrics,
    check_range_validity,
    compute_path_metrics,
    estimate_battery_consumption,
    estimate_photo_count,
    pattern_display_name,
)
from .models import FlightPathResult, PatternOutcome, ScanLine, SensorType, SurveyConfig, SurveyPattern
from .patterns import REGISTRY, PatternRegistry, PatternStrategy
from .planner import CoveragePlanner, generate_flight_path

__all__ = [
    "CoveragePlanner",
    "FlightPathResult",
    "PathMetrics",
    "PatternOutcome",
    "PatternRegistry",
    "PatternStrategy",
    "REGISTRY",
    "ScanLine",
    "SensorType",
    "SurveyConfig",
    "SurveyPattern",
    "check_range_validity",
    "compute_path_metrics",
    "estimate_battery_consumption",
    "estimate_photo_count",
    "generate_flight_path",
    "pattern_display_name",
]
