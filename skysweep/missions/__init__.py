"""Mini README: Mission workflow helpers combining planning and validation.

The ``assessment`` module exposes ``assess_mission`` for callers that want
a planned path and its constraint report in one call.
"""

from .assessment import MissionAssessment, assess_mission

__all__ = ["MissionAssessment", "assess_mission"]
