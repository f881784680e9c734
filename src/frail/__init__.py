"""Universe stability scoring for the Frail build-a-universe game."""

from .build import BuildSession, BuildState
from .constants import OptimalConfig, StarType
from .models import FailureCause, Planet, ScoreBreakdown, StabilityReport, UniverseState, UniverseStateError, Verdict
from .stability import calculate_stability, diagnose, evaluate, get_failure_reason, score_breakdown

__all__ = [
    "BuildSession",
    "BuildState",
    "FailureCause",
    "OptimalConfig",
    "Planet",
    "ScoreBreakdown",
    "StabilityReport",
    "StarType",
    "UniverseState",
    "UniverseStateError",
    "Verdict",
    "calculate_stability",
    "diagnose",
    "evaluate",
    "get_failure_reason",
    "score_breakdown",
]
