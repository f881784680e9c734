from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from .constants import StarType


class UniverseStateError(ValueError):
    """Raised when a universe is built with an unusable planet layout."""


@dataclass(frozen=True, slots=True)
class UniverseState:
    """Snapshot of a candidate universe's tunable parameters.

    ``planet_orbits[i]`` belongs to ``planet_masses[i]``. Numbers outside their
    slider ranges are accepted; the scoring terms absorb them.
    """

    gravity: float
    light_speed: float
    star_type: StarType
    planet_masses: Sequence[float]
    planet_orbits: Sequence[float]

    def __post_init__(self) -> None:
        masses = tuple(float(m) for m in self.planet_masses)
        orbits = tuple(float(r) for r in self.planet_orbits)
        if len(masses) != len(orbits):
            raise UniverseStateError(
                f"planet_masses and planet_orbits must pair up: got {len(masses)} masses and {len(orbits)} orbits"
            )
        if not masses:
            raise UniverseStateError("A universe needs at least one planet")
        object.__setattr__(self, "planet_masses", masses)
        object.__setattr__(self, "planet_orbits", orbits)
        object.__setattr__(self, "star_type", StarType(self.star_type))

    @property
    def planet_count(self) -> int:
        return len(self.planet_masses)


@dataclass(slots=True)
class Planet:
    id: int
    mass: float = 1.0
    orbital_radius: float = 1.0


class Verdict(str, Enum):
    """Coarse reading of a stability score."""

    STABLE = "stable"
    MARGINAL = "marginal"
    UNSTABLE = "unstable"
    COLLAPSE = "collapse"

    @classmethod
    def from_score(cls, score: float) -> Verdict:
        if 75.0 <= score <= 100.0:
            return cls.STABLE
        if 50.0 <= score < 75.0:
            return cls.MARGINAL
        if 25.0 <= score < 50.0:
            return cls.UNSTABLE
        return cls.COLLAPSE


class FailureCause(str, Enum):
    """Dominant explanation for a universe's score, in diagnostic priority order."""

    CEILING_MATCHED = "ceiling_matched"
    NEAR_CEILING = "near_ceiling"
    EMBRYONIC = "embryonic"
    GRAVITY_DOMINANT = "gravity_dominant"
    LIGHT_SPEED_UNSTABLE = "light_speed_unstable"
    STAR_TOO_HOT = "star_too_hot"
    STAR_DYING = "star_dying"
    ORBITS_TOO_CLOSE = "orbits_too_close"
    PLANET_SCORCHED = "planet_scorched"
    INNER_PLANETS_TOO_MASSIVE = "inner_planets_too_massive"
    NO_OUTER_PROTECTOR = "no_outer_protector"
    FRAGILE_BUT_STABLE = "fragile_but_stable"


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Individual scoring terms, in the order they are accumulated."""

    foundation: float
    star: float
    orbital: float
    mass_distribution: float
    gravity_penalty: float
    light_penalty: float
    imperfection: float
    total: float

    @property
    def raw_total(self) -> float:
        """Unclamped sum of the terms."""
        return (
            self.foundation
            + self.star
            + self.orbital
            + self.mass_distribution
            - self.gravity_penalty
            - self.light_penalty
            - self.imperfection
        )


@dataclass(frozen=True, slots=True)
class StabilityReport:
    score: float
    verdict: Verdict
    cause: FailureCause
    reason: str
    breakdown: ScoreBreakdown
    details: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "verdict": self.verdict.value,
            "cause": self.cause.value,
            "reason": self.reason,
            "breakdown": {
                "foundation": self.breakdown.foundation,
                "star": self.breakdown.star,
                "orbital": self.breakdown.orbital,
                "mass_distribution": self.breakdown.mass_distribution,
                "gravity_penalty": self.breakdown.gravity_penalty,
                "light_penalty": self.breakdown.light_penalty,
                "imperfection": self.breakdown.imperfection,
            },
            **self.details,
        }
