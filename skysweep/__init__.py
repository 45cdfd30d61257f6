"""Mini README: Core package initializer for the Skysweep survey planner.

Skysweep turns a ground polygon and a sensor configuration into a coverage
flight path, then validates that path against no-fly zones and vehicle
limits. This module re-exports the two entry points most callers need and
the logger factory, without importing the optional web stack.
"""

from .logging_utils import get_logger
from .missions import assess_mission
from .route_planning import generate_flight_path
from .validation import validate_path

__all__ = ["assess_mission", "generate_flight_path", "get_logger", "validate_path"]
