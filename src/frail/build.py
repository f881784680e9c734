"""Headless state behind the universe build screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import constants as c
from .constants import StarType
from .models import Planet, StabilityReport, UniverseState
from .stability import calculate_stability, evaluate, get_failure_reason
from .telemetry import NullTelemetry, Telemetry


@dataclass(slots=True)
class BuildState:
    star_type: StarType = StarType.YELLOW_SUN
    gravity: float = c.GRAVITY_RANGE.lower
    light_speed: float = c.LIGHT_SPEED_RANGE.lower
    planets: list[Planet] = field(default_factory=list)
    stability_score: float = 0.0
    verdict_shown: bool = False


class BuildSession:
    """Collects slider values into a universe and keeps its score current.

    Every change re-scores the universe. Picking a new star wipes the sliders
    back to their lower bounds so each star starts from a clean slate.
    """

    def __init__(
        self,
        *,
        star_type: StarType | str = StarType.YELLOW_SUN,
        planet_count: int = c.PLANET_COUNT,
        success_threshold: float = 80.0,
        telemetry: Telemetry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._success_threshold = success_threshold
        self._telemetry = telemetry or NullTelemetry()
        self._logger = logger or logging.getLogger("frail.build")
        self._state = BuildState(
            star_type=StarType(star_type),
            planets=[Planet(id=i) for i in range(planet_count)],
        )
        self._reset_sliders()
        self.update_score()

    @property
    def state(self) -> BuildState:
        return self._state

    def universe(self) -> UniverseState:
        return UniverseState(
            gravity=self._state.gravity,
            light_speed=self._state.light_speed,
            star_type=self._state.star_type,
            planet_masses=[planet.mass for planet in self._state.planets],
            planet_orbits=[planet.orbital_radius for planet in self._state.planets],
        )

    def select_star(self, star_type: StarType | str) -> float:
        self._state.star_type = StarType(star_type)
        self._logger.info("star_selected", extra={"star_type": self._state.star_type.value})
        self._reset_sliders()
        return self.update_score()

    def set_gravity(self, value: float) -> float:
        self._state.gravity = c.GRAVITY_RANGE.clamp(value)
        return self.update_score()

    def set_light_speed(self, value: float) -> float:
        self._state.light_speed = c.LIGHT_SPEED_RANGE.clamp(value)
        return self.update_score()

    def set_planet(self, index: int, *, mass: float | None = None, orbit: float | None = None) -> float:
        planet = self._state.planets[index]
        if mass is not None:
            planet.mass = c.MASS_RANGE.clamp(mass)
        if orbit is not None:
            planet.orbital_radius = c.ORBIT_RANGE.clamp(orbit)
        return self.update_score()

    def update_score(self) -> float:
        self._state.stability_score = calculate_stability(self.universe())
        self._logger.debug(
            "score_updated",
            extra={"star_type": self._state.star_type.value, "score": self._state.stability_score},
        )
        return self._state.stability_score

    def simulate(self) -> StabilityReport:
        """Score the universe for the verdict screen and report the outcome."""
        report = evaluate(self.universe())
        self._state.stability_score = report.score
        self._state.verdict_shown = True

        event = "simulation_succeeded" if report.score > self._success_threshold else "simulation_warning"
        payload = {
            "star_type": self._state.star_type.value,
            "score": report.score,
            "verdict": report.verdict.value,
            "cause": report.cause.value,
        }
        self._telemetry.emit(event, payload)
        self._logger.info(event, extra=payload)
        return report

    def show_optimal(self) -> float:
        """Move every slider to the selected star's best known configuration."""
        config = self._state.star_type.optimal_config
        self._state.gravity = config.gravity
        self._state.light_speed = config.light_speed
        for planet, mass in zip(self._state.planets, config.masses):
            planet.mass = mass
        for planet, orbit in zip(self._state.planets, config.orbits):
            planet.orbital_radius = orbit

        self._logger.info("optimal_applied", extra={"star_type": self._state.star_type.value})
        return self.update_score()

    def dismiss_verdict(self) -> None:
        self._state.verdict_shown = False

    @property
    def failure_reason(self) -> str:
        return get_failure_reason(self.universe(), self._state.stability_score)

    def _reset_sliders(self) -> None:
        self._state.gravity = c.GRAVITY_RANGE.lower
        self._state.light_speed = c.LIGHT_SPEED_RANGE.lower
        for planet in self._state.planets:
            planet.mass = c.MASS_RANGE.lower
            planet.orbital_radius = c.ORBIT_RANGE.lower
        self._state.verdict_shown = False
        self._logger.info(
            "build_session_reset",
            extra={"star_type": self._state.star_type.value, "planet_count": len(self._state.planets)},
        )
