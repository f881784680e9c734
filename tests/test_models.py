from __future__ import annotations

import dataclasses

import pytest

from frail.constants import GRAVITY_RANGE, ORBIT_RANGE, STAR_PROFILES, StarType
from frail.models import UniverseState, UniverseStateError, Verdict


def test_universe_state_rejects_unpaired_planets() -> None:
    with pytest.raises(UniverseStateError, match="2 masses and 3 orbits"):
        UniverseState(
            gravity=1.0,
            light_speed=1.0,
            star_type=StarType.YELLOW_SUN,
            planet_masses=[1.0, 1.0],
            planet_orbits=[0.5, 1.0, 2.5],
        )


def test_universe_state_rejects_empty_system() -> None:
    with pytest.raises(ValueError):
        UniverseState(gravity=1.0, light_speed=1.0, star_type=StarType.YELLOW_SUN, planet_masses=[], planet_orbits=[])


def test_universe_state_is_immutable_and_normalised() -> None:
    masses = [1.0, 1.0, 4.0]
    state = UniverseState(
        gravity=1.0,
        light_speed=1.0,
        star_type="yellow_sun",
        planet_masses=masses,
        planet_orbits=[0.5, 1, 2.5],
    )
    masses.append(9.0)

    assert state.star_type is StarType.YELLOW_SUN
    assert state.planet_masses == (1.0, 1.0, 4.0)
    assert state.planet_orbits == (0.5, 1.0, 2.5)
    assert state.planet_count == 3
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.gravity = 2.0  # type: ignore[misc]


@pytest.mark.parametrize(
    ("score", "verdict"),
    [
        (100.0, Verdict.STABLE),
        (75.0, Verdict.STABLE),
        (74.9, Verdict.MARGINAL),
        (50.0, Verdict.MARGINAL),
        (49.99, Verdict.UNSTABLE),
        (25.0, Verdict.UNSTABLE),
        (24.9, Verdict.COLLAPSE),
        (0.0, Verdict.COLLAPSE),
    ],
)
def test_verdict_thresholds(score: float, verdict: Verdict) -> None:
    assert Verdict.from_score(score) is verdict


def test_star_table() -> None:
    assert StarType.YELLOW_SUN.habitability_score == 25.0
    assert StarType.ORANGE_DWARF.theoretical_max_score == 89.0
    assert StarType.RED_DWARF.label == "Red Dwarf"
    assert StarType.BLUE_GIANT.is_short_lived
    assert not StarType.ORANGE_DWARF.is_short_lived
    assert set(STAR_PROFILES) == set(StarType)


def test_parameter_range_clamps() -> None:
    assert GRAVITY_RANGE.clamp(9.0) == 5.0
    assert GRAVITY_RANGE.clamp(-1.0) == 0.1
    assert ORBIT_RANGE.clamp(1.0) == 1.0
    assert 0.3 in ORBIT_RANGE
    assert 0.29 not in ORBIT_RANGE
