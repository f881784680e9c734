"""Universe stability scoring and failure diagnosis.

Scores are built from a fixed point budget:

    30 foundation
  + star habitability            (3 to 25)
  + orbital spacing              (0 to 25)
  + mass distribution            (0 to 20)
  - gravity / light-speed penalties (0 to 25 each)
  - 6 cosmic imperfection

and clamped to [0, 100]. The imperfection anchor makes the benchmark universe
(Yellow Sun, baseline constants, masses 1/1/4 at 0.5/1.0/2.5 AU) score exactly
94. Every function here is pure; callers round for display.
"""

from __future__ import annotations

import math
from typing import Sequence

from . import constants as c
from .constants import StarType
from .models import FailureCause, ScoreBreakdown, StabilityReport, UniverseState, Verdict


def star_score(star_type: StarType) -> float:
    return star_type.habitability_score


def orbital_score(orbits: Sequence[float]) -> float:
    """Spacing score: graduated penalty per crowded adjacent pair, flat penalty per scorched orbit."""
    score = c.ORBITAL_POINTS
    ordered = sorted(orbits)

    for inner, outer in zip(ordered, ordered[1:]):
        ratio = _spacing_ratio(inner, outer)
        if ratio < c.MIN_SPACING_RATIO:
            severity = (c.MIN_SPACING_RATIO - ratio) / c.MIN_SPACING_RATIO
            score -= c.SPACING_PENALTY * (0.5 + severity * 0.5)

    for orbit in orbits:
        if orbit < c.SCORCHED_ORBIT:
            score -= c.SCORCHED_PENALTY

    return max(0.0, score)


def mass_distribution_score(masses: Sequence[float], orbits: Sequence[float]) -> float:
    """Penalise heavy inner planets and a missing massive outer shield."""
    score = c.MASS_DISTRIBUTION_POINTS
    if len(orbits) < 2:
        return score

    inner, outer = _split_by_orbit(orbits)
    for index in inner:
        if masses[index] > c.INNER_MASS_LIMIT:
            score -= c.INNER_MASS_PENALTY

    if masses[outer] < c.OUTER_SHIELD_MASS:
        score -= c.OUTER_SHIELD_PENALTY

    return max(0.0, score)


def constant_penalty(value: float, baseline: float = 1.0) -> float:
    """Penalty for a physical constant drifting past the tolerance band."""
    delta = max(0.0, abs(value - baseline) - c.CONSTANT_TOLERANCE)
    return min(c.CONSTANT_PENALTY_CAP, delta * c.CONSTANT_PENALTY_RATE)


def score_breakdown(state: UniverseState) -> ScoreBreakdown:
    foundation = c.FOUNDATION_POINTS
    star = star_score(state.star_type)
    orbital = orbital_score(state.planet_orbits)
    mass = mass_distribution_score(state.planet_masses, state.planet_orbits)
    gravity_penalty = constant_penalty(state.gravity, c.OPTIMAL_GRAVITY)
    light_penalty = constant_penalty(state.light_speed, c.OPTIMAL_LIGHT_SPEED)

    total = foundation
    total += star
    total += orbital
    total += mass
    total -= gravity_penalty
    total -= light_penalty
    total -= c.COSMIC_IMPERFECTION

    return ScoreBreakdown(
        foundation=foundation,
        star=star,
        orbital=orbital,
        mass_distribution=mass,
        gravity_penalty=gravity_penalty,
        light_penalty=light_penalty,
        imperfection=c.COSMIC_IMPERFECTION,
        total=max(c.SCORE_FLOOR, min(c.SCORE_CEILING, total)),
    )


def calculate_stability(state: UniverseState) -> float:
    """Return the stability score of ``state`` in [0, 100]."""
    return score_breakdown(state).total


def diagnose(state: UniverseState, score: float) -> FailureCause:
    """Pick the single dominant explanation for ``score``; first matching rule wins."""
    star = state.star_type
    ceiling = star.theoretical_max_score

    if abs(score - ceiling) < c.CEILING_MATCH_TOLERANCE:
        return FailureCause.CEILING_MATCHED
    if score >= ceiling - c.NEAR_CEILING_MARGIN:
        return FailureCause.NEAR_CEILING

    if score < c.EMBRYO_SCORE_CEILING and abs(state.gravity - c.GRAVITY_RANGE.lower) < c.EMBRYO_GRAVITY_WINDOW:
        return FailureCause.EMBRYONIC

    gravity_delta = abs(state.gravity - c.OPTIMAL_GRAVITY)
    light_delta = abs(state.light_speed - c.OPTIMAL_LIGHT_SPEED)
    if gravity_delta > light_delta and gravity_delta > c.DOMINANT_DEVIATION:
        return FailureCause.GRAVITY_DOMINANT
    if light_delta > c.DOMINANT_DEVIATION:
        return FailureCause.LIGHT_SPEED_UNSTABLE

    if star is StarType.BLUE_GIANT:
        return FailureCause.STAR_TOO_HOT
    if star is StarType.WHITE_DWARF:
        return FailureCause.STAR_DYING

    ordered = sorted(state.planet_orbits)
    if any(_spacing_ratio(inner, outer) < c.MIN_SPACING_RATIO for inner, outer in zip(ordered, ordered[1:])):
        return FailureCause.ORBITS_TOO_CLOSE
    if ordered[0] < c.SCORCHED_ORBIT:
        return FailureCause.PLANET_SCORCHED

    if state.planet_count >= 2:
        inner, outer = _split_by_orbit(state.planet_orbits)
        if any(state.planet_masses[index] > c.INNER_MASS_LIMIT for index in inner):
            return FailureCause.INNER_PLANETS_TOO_MASSIVE
        if state.planet_masses[outer] < c.OUTER_SHIELD_MASS:
            return FailureCause.NO_OUTER_PROTECTOR

    return FailureCause.FRAGILE_BUT_STABLE


_MESSAGES: dict[FailureCause, str] = {
    FailureCause.NEAR_CEILING: (
        "This is the best I found for this star. {ceiling} points. "
        "Some universes have limits. Perhaps you see something I missed."
    ),
    FailureCause.EMBRYONIC: "This universe is an embryo. Choose its constants. Set its foundations.",
    FailureCause.GRAVITY_DOMINANT: (
        "Orbital mechanics cannot hold these planets. Gravity is too dominant or too weak."
    ),
    FailureCause.LIGHT_SPEED_UNSTABLE: (
        "Constants do not permit stable atoms. Matter itself reaches a dead end."
    ),
    FailureCause.STAR_TOO_HOT: (
        "Your star burns too hot, and too briefly. Complexity needs billions of years to emerge."
    ),
    FailureCause.STAR_DYING: (
        "Your star is dying. A white dwarf cannot sustain a habitable zone long enough for complexity."
    ),
    FailureCause.ORBITS_TOO_CLOSE: "The inner planets are too close. Tidal forces will tear them apart.",
    FailureCause.PLANET_SCORCHED: "A planet is too close to its star. Life would be scorched before it begins.",
    FailureCause.INNER_PLANETS_TOO_MASSIVE: (
        "Your inner planets are too massive. Their gravity destabilises the system from within."
    ),
    FailureCause.NO_OUTER_PROTECTOR: (
        "Your system lacks a massive outer protector. Comets and debris would devastate the inner worlds."
    ),
    FailureCause.FRAGILE_BUT_STABLE: "The universe is fragile, but you have found a stable configuration.",
}

_CEILING_MESSAGES: dict[str, str] = {
    "benchmark": (
        "This matches the best configuration I found for this star. {ceiling} points. "
        "The configuration this universe chose. I wonder if you can match it... "
        "oh, you already did. Perhaps try another star?"
    ),
    "short_lived": (
        "This matches the best configuration I found for this star. {ceiling} points. "
        "Structurally stable, but this star will be dead before life can begin. "
        "Move on to another star to see if you can find higher peaks."
    ),
    "default": (
        "This matches the best configuration I found for this star. {ceiling} points. "
        "Perhaps there is nothing left to find here... or perhaps you should try "
        "a different star to reach higher peaks."
    ),
}


def describe(cause: FailureCause, star_type: StarType) -> str:
    ceiling = int(star_type.theoretical_max_score)
    if cause is FailureCause.CEILING_MATCHED:
        if star_type is StarType.YELLOW_SUN:
            template = _CEILING_MESSAGES["benchmark"]
        elif star_type.is_short_lived:
            template = _CEILING_MESSAGES["short_lived"]
        else:
            template = _CEILING_MESSAGES["default"]
    else:
        template = _MESSAGES[cause]
    return template.format(ceiling=ceiling)


def get_failure_reason(state: UniverseState, score: float) -> str:
    """Explain ``score`` for ``state`` in one sentence or two.

    ``score`` is taken from the caller so a score already on screen is not
    recomputed; pass the value returned by :func:`calculate_stability`.
    """
    return describe(diagnose(state, score), state.star_type)


def evaluate(state: UniverseState) -> StabilityReport:
    """Score ``state`` and bundle the verdict, diagnosis and per-term breakdown."""
    breakdown = score_breakdown(state)
    cause = diagnose(state, breakdown.total)
    return StabilityReport(
        score=breakdown.total,
        verdict=Verdict.from_score(breakdown.total),
        cause=cause,
        reason=describe(cause, state.star_type),
        breakdown=breakdown,
        details={
            "star_type": state.star_type.value,
            "theoretical_max": state.star_type.theoretical_max_score,
        },
    )


def _spacing_ratio(inner: float, outer: float) -> float:
    # An orbit at the star itself never counts as crowding its neighbour.
    if inner == 0:
        return math.inf
    return outer / inner


def _split_by_orbit(orbits: Sequence[float]) -> tuple[list[int], int]:
    """Return (inner planet indexes, outermost planet index) ordered by orbit radius."""
    ordered = sorted(range(len(orbits)), key=orbits.__getitem__)
    inner_count = max(1, len(ordered) - 1)
    return ordered[:inner_count], ordered[-1]
