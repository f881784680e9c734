"""Physics ranges, benchmark values and shared scoring thresholds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class ParameterRange:
    """Closed slider range for a tunable universe parameter."""

    lower: float
    upper: float

    def clamp(self, value: float) -> float:
        return max(self.lower, min(self.upper, value))

    def __contains__(self, value: float) -> bool:
        return self.lower <= value <= self.upper


GRAVITY_RANGE = ParameterRange(0.1, 5.0)
LIGHT_SPEED_RANGE = ParameterRange(0.1, 5.0)
MASS_RANGE = ParameterRange(0.1, 5.0)  # Earth masses
ORBIT_RANGE = ParameterRange(0.3, 4.5)  # AU, minimum sits below the scorched cutoff

OPTIMAL_GRAVITY = 1.0
OPTIMAL_LIGHT_SPEED = 1.0
BENCHMARK_STABILITY = 94.0
PLANET_COUNT = 3

SCORE_FLOOR = 0.0
SCORE_CEILING = 100.0

# Score budget
FOUNDATION_POINTS = 30.0
ORBITAL_POINTS = 25.0
MASS_DISTRIBUTION_POINTS = 20.0
COSMIC_IMPERFECTION = 6.0

# Orbital spacing
MIN_SPACING_RATIO = 1.4
SPACING_PENALTY = 8.0
SCORCHED_ORBIT = 0.5
SCORCHED_PENALTY = 10.0

# Mass distribution
INNER_MASS_LIMIT = 2.0
INNER_MASS_PENALTY = 8.0
OUTER_SHIELD_MASS = 2.5
OUTER_SHIELD_PENALTY = 10.0

# Physical constants
CONSTANT_TOLERANCE = 0.3
CONSTANT_PENALTY_RATE = 20.0
CONSTANT_PENALTY_CAP = 25.0
DOMINANT_DEVIATION = 0.5

# Diagnostics
CEILING_MATCH_TOLERANCE = 0.1
NEAR_CEILING_MARGIN = 2.0
EMBRYO_SCORE_CEILING = 35.0
EMBRYO_GRAVITY_WINDOW = 0.05


@dataclass(frozen=True, slots=True)
class OptimalConfig:
    """Best known configuration for a star; scores its theoretical maximum."""

    gravity: float
    light_speed: float
    masses: tuple[float, ...]
    orbits: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class StarProfile:
    label: str
    habitability_score: float
    theoretical_max_score: float
    optimal_config: OptimalConfig


class StarType(str, Enum):
    """Closed set of star classifications a universe can be built around."""

    RED_DWARF = "red_dwarf"
    ORANGE_DWARF = "orange_dwarf"
    YELLOW_SUN = "yellow_sun"
    BLUE_GIANT = "blue_giant"
    WHITE_DWARF = "white_dwarf"

    @property
    def profile(self) -> StarProfile:
        return STAR_PROFILES[self]

    @property
    def label(self) -> str:
        return self.profile.label

    @property
    def habitability_score(self) -> float:
        return self.profile.habitability_score

    @property
    def theoretical_max_score(self) -> float:
        return self.profile.theoretical_max_score

    @property
    def optimal_config(self) -> OptimalConfig:
        return self.profile.optimal_config

    @property
    def is_short_lived(self) -> bool:
        """Stars that die before complexity can emerge around them."""
        return self in (StarType.BLUE_GIANT, StarType.WHITE_DWARF)


STAR_PROFILES: dict[StarType, StarProfile] = {
    StarType.YELLOW_SUN: StarProfile(
        label="Yellow Sun",
        habitability_score=25.0,
        theoretical_max_score=94.0,
        optimal_config=OptimalConfig(1.0, 1.0, (1.0, 1.0, 4.0), (0.5, 1.0, 2.5)),
    ),
    StarType.ORANGE_DWARF: StarProfile(
        label="Orange Dwarf",
        habitability_score=20.0,
        theoretical_max_score=89.0,
        optimal_config=OptimalConfig(1.0, 1.0, (1.0, 1.0, 4.0), (0.5, 1.0, 2.5)),
    ),
    StarType.RED_DWARF: StarProfile(
        label="Red Dwarf",
        habitability_score=12.0,
        theoretical_max_score=81.0,
        optimal_config=OptimalConfig(1.0, 1.0, (0.8, 1.2, 3.0), (0.5, 1.0, 2.0)),
    ),
    StarType.BLUE_GIANT: StarProfile(
        label="Blue Giant",
        habitability_score=5.0,
        theoretical_max_score=74.0,
        optimal_config=OptimalConfig(1.0, 1.0, (1.0, 1.5, 3.0), (0.5, 1.2, 3.0)),
    ),
    StarType.WHITE_DWARF: StarProfile(
        label="White Dwarf",
        habitability_score=3.0,
        theoretical_max_score=72.0,
        optimal_config=OptimalConfig(1.0, 1.0, (0.5, 1.0, 3.0), (0.5, 1.0, 2.5)),
    ),
}
