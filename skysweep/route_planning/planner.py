"""Mini README: Coverage planning entry points.

Structure:
    * CoveragePlanner - validates input, dispatches to a pattern strategy,
      applies the perimeter fallback and derives metrics.
    * generate_flight_path - module-level convenience wrapper.

Planning is a pure transformation: identical polygons and configurations
produce identical results, and nothing is cached between calls. A plan
that yields no scan lines (polygon narrower than one spacing unit, or a
degenerate shape) falls back to the perimeter and says so on the result.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..geometry import grid_spacing_m, normalise_ring
from ..logging_utils import get_logger
from .metrics import compute_path_metrics
from .models import FlightPathResult, SurveyConfig, SurveyPattern
from .patterns import REGISTRY, PatternRegistry

LOGGER = get_logger(__name__)


class CoveragePlanner:
    """Generate survey flight paths over a ground polygon."""

    def __init__(self, registry: Optional[PatternRegistry] = None) -> None:
        self._registry = registry or REGISTRY

    def generate(self, polygon: Iterable[Sequence[float]], config: SurveyConfig) -> FlightPathResult:
        """Plan a path covering ``polygon`` with ``config.pattern``.

        Raises ``ValueError`` for polygons with fewer than three distinct
        vertices and for configurations leaving no positive line spacing.
        """

        ring = normalise_ring(polygon)
        spacing = grid_spacing_m(config.altitude_m, config.overlap_percent, config.camera_fov_deg)
        LOGGER.info(
            "Planning %s survey over %s vertices at %.1f m altitude (spacing %.2f m)",
            config.pattern.value,
            len(ring),
            config.altitude_m,
            spacing,
        )

        outcome = self._registry.create(config.pattern).plan(ring, config, spacing)
        substituted = outcome.substituted
        used_fallback = False
        if len(outcome.waypoints) < 2:
            LOGGER.warning(
                "%s pattern produced no scan lines; falling back to perimeter",
                config.pattern.value,
            )
            outcome = self._registry.create(SurveyPattern.PERIMETER).plan(ring, config, spacing)
            used_fallback = True

        metrics = compute_path_metrics(
            outcome.waypoints,
            ring,
            config.speed_kmh,
            config.capture_frequency_hz,
        )
        LOGGER.info(
            "Generated %s waypoints covering %.3f km (%s min, %s photos)",
            len(outcome.waypoints),
            metrics.total_distance_km,
            metrics.estimated_duration_min,
            metrics.estimated_photos,
        )
        return FlightPathResult(
            waypoints=outcome.waypoints,
            total_distance_km=metrics.total_distance_km,
            estimated_duration_min=metrics.estimated_duration_min,
            grid_spacing_m=spacing,
            estimated_photos=metrics.estimated_photos,
            area_sq_km=metrics.area_sq_km,
            requested_pattern=config.pattern,
            executed_pattern=outcome.executed_pattern,
            used_fallback=used_fallback,
            substituted=substituted,
        )


def generate_flight_path(polygon: Iterable[Sequence[float]], config: SurveyConfig) -> FlightPathResult:
    """Plan ``polygon`` with the default strategy registry."""

    return CoveragePlanner().generate(polygon, config)
