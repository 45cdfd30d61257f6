"""Mini README: Pattern strategies and the registry that dispatches to them.

Structure:
    * PatternStrategy - abstract interface shared by every scan pattern.
    * SnakeStrategy / CrosshatchStrategy / PerimeterStrategy / SpiralStrategy
      - one concrete strategy per ``SurveyPattern`` tag.
    * PatternRegistry - maps pattern tags to strategy classes.
    * REGISTRY - module-level registry populated with the built-in strategies.

New patterns plug in by subclassing ``PatternStrategy`` and registering the
class; existing strategies stay untouched. The registry is filled at import
time and only read afterwards.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Type

from ..geometry import Coordinate, centroid
from ..logging_utils import get_logger
from .models import PatternOutcome, SurveyConfig, SurveyPattern
from .scan_lines import principal_axis_bearing, snake_sweep

LOGGER = get_logger(__name__)


class PatternStrategy(ABC):
    """Base interface for coverage pattern strategies."""

    pattern: SurveyPattern

    @abstractmethod
    def plan(
        self,
        ring: Sequence[Coordinate],
        config: SurveyConfig,
        spacing_m: float,
    ) -> PatternOutcome:
        """Return ordered waypoints covering ``ring``.

        ``ring`` is an open, validated ring. An outcome with fewer than two
        waypoints tells the planner to fall back to the perimeter.
        """


class SnakeStrategy(PatternStrategy):
    """Boustrophedon sweep aligned with the polygon's principal axis."""

    pattern = SurveyPattern.SNAKE

    def plan(self, ring, config, spacing_m):
        pivot = centroid(ring)
        waypoints = snake_sweep(ring, spacing_m, principal_axis_bearing(ring), pivot)
        return PatternOutcome(waypoints=tuple(waypoints), executed_pattern=self.pattern)


class CrosshatchStrategy(PatternStrategy):
    """Two perpendicular snake sweeps flown back to back."""

    pattern = SurveyPattern.CROSSHATCH

    def plan(self, ring, config, spacing_m):
        pivot = centroid(ring)
        axis = principal_axis_bearing(ring)
        first_pass = snake_sweep(ring, spacing_m, axis, pivot)
        second_pass = snake_sweep(ring, spacing_m, axis + 90.0, pivot)
        LOGGER.debug(
            "Crosshatch passes produced %s and %s waypoints",
            len(first_pass),
            len(second_pass),
        )
        return PatternOutcome(
            waypoints=tuple(first_pass + second_pass),
            executed_pattern=self.pattern,
        )


class PerimeterStrategy(PatternStrategy):
    """Fly the polygon boundary once and return to the first vertex."""

    pattern = SurveyPattern.PERIMETER

    def plan(self, ring, config, spacing_m):
        waypoints = list(ring) + [ring[0]]
        return PatternOutcome(waypoints=tuple(waypoints), executed_pattern=self.pattern)


class SpiralStrategy(PatternStrategy):
    """Placeholder for an inward spiral, currently served by the snake sweep.

    The spiral geometry has not been defined yet, so the outcome is flagged
    as substituted rather than guessed.
    """

    pattern = SurveyPattern.SPIRAL

    def plan(self, ring, config, spacing_m):
        LOGGER.warning("Spiral pattern is not implemented; substituting snake sweep")
        outcome = SnakeStrategy().plan(ring, config, spacing_m)
        return PatternOutcome(
            waypoints=outcome.waypoints,
            executed_pattern=outcome.executed_pattern,
            substituted=True,
        )


class PatternRegistry:
    """Simple registry for mapping pattern tags to strategy classes."""

    def __init__(self) -> None:
        self._strategies: Dict[SurveyPattern, Type[PatternStrategy]] = {}

    def register(self, strategy: Type[PatternStrategy]) -> Type[PatternStrategy]:
        """Register a strategy class under its ``pattern`` tag."""

        LOGGER.debug("Registering pattern strategy '%s'", strategy.pattern.value)
        self._strategies[strategy.pattern] = strategy
        return strategy

    def available_patterns(self) -> List[SurveyPattern]:
        """Return registered pattern tags in declaration order."""

        return [pattern for pattern in SurveyPattern if pattern in self._strategies]

    def create(self, pattern: SurveyPattern | str) -> PatternStrategy:
        """Instantiate the strategy registered for ``pattern``."""

        if not isinstance(pattern, SurveyPattern):
            try:
                pattern = SurveyPattern.from_str(str(pattern))
            except ValueError as error:
                raise KeyError(f"Unknown survey pattern '{pattern}'") from error
        strategy_cls = self._strategies.get(pattern)
        if not strategy_cls:
            raise KeyError(f"No strategy registered for pattern '{pattern.value}'")
        return strategy_cls()


REGISTRY = PatternRegistry()
for _strategy in (SnakeStrategy, CrosshatchStrategy, PerimeterStrategy, SpiralStrategy):
    REGISTRY.register(_strategy)
