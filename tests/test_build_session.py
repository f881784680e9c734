from __future__ import annotations

import logging

import pytest

from frail.build import BuildSession
from frail.constants import StarType
from frail.models import FailureCause, Verdict
from frail.telemetry import LoggingTelemetry


class RecordingTelemetry:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []

    def emit(self, event_name: str, payload: dict) -> None:
        self.events.append((event_name, payload))


def test_new_session_starts_from_lower_bounds() -> None:
    session = BuildSession()
    state = session.state

    assert state.star_type is StarType.YELLOW_SUN
    assert state.gravity == 0.1
    assert state.light_speed == 0.1
    assert [planet.mass for planet in state.planets] == [0.1, 0.1, 0.1]
    assert [planet.orbital_radius for planet in state.planets] == [0.3, 0.3, 0.3]
    assert state.stability_score == pytest.approx(35.0)
    assert state.verdict_shown is False


def test_sliders_are_clamped_and_rescored() -> None:
    session = BuildSession()

    session.set_gravity(10.0)
    assert session.state.gravity == 5.0
    session.set_light_speed(-3.0)
    assert session.state.light_speed == 0.1

    before = session.state.stability_score
    session.set_planet(2, mass=4.0, orbit=9.0)
    assert session.state.planets[2].mass == 4.0
    assert session.state.planets[2].orbital_radius == 4.5
    assert session.state.stability_score != before


def test_unknown_planet_index_raises() -> None:
    session = BuildSession()

    with pytest.raises(IndexError):
        session.set_planet(5, mass=1.0)


@pytest.mark.parametrize("star", list(StarType))
def test_show_optimal_reaches_star_ceiling(star: StarType) -> None:
    session = BuildSession(star_type=star)

    assert session.show_optimal() == star.theoretical_max_score
    assert session.universe().planet_orbits == star.optimal_config.orbits


def test_selecting_a_star_resets_the_sliders() -> None:
    session = BuildSession()
    session.show_optimal()

    session.select_star("red_dwarf")

    assert session.state.star_type is StarType.RED_DWARF
    assert session.state.gravity == 0.1
    assert [planet.orbital_radius for planet in session.state.planets] == [0.3, 0.3, 0.3]
    assert "embryo" in session.failure_reason


def test_simulate_reports_success_above_threshold() -> None:
    telemetry = RecordingTelemetry()
    session = BuildSession(telemetry=telemetry)
    session.show_optimal()

    report = session.simulate()

    assert report.score == 94.0
    assert report.verdict is Verdict.STABLE
    assert report.cause is FailureCause.CEILING_MATCHED
    assert session.state.verdict_shown is True
    assert telemetry.events == [
        (
            "simulation_succeeded",
            {"star_type": "yellow_sun", "score": 94.0, "verdict": "stable", "cause": "ceiling_matched"},
        )
    ]


def test_simulate_warns_at_or_below_threshold() -> None:
    telemetry = RecordingTelemetry()
    session = BuildSession(star_type=StarType.WHITE_DWARF, telemetry=telemetry)
    session.show_optimal()

    report = session.simulate()
    session.dismiss_verdict()

    assert report.score == 72.0
    assert telemetry.events[0][0] == "simulation_warning"
    assert session.state.verdict_shown is False


def test_failure_reason_tracks_current_score() -> None:
    session = BuildSession()
    session.show_optimal()

    assert "94 points" in session.failure_reason

    session.set_planet(2, mass=1.0)
    assert "outer protector" in session.failure_reason


def test_session_logs_lifecycle_events(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="frail")
    session = BuildSession(telemetry=LoggingTelemetry())
    session.show_optimal()
    session.simulate()

    messages = [record.getMessage() for record in caplog.records]
    assert "build_session_reset" in messages
    assert "optimal_applied" in messages
    assert "simulation_succeeded" in messages
    telemetry_records = [record for record in caplog.records if record.name == "frail.telemetry"]
    assert telemetry_records[0].telemetry["score"] == 94.0
