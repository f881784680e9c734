"""CLI startup entrypoint for Frail."""

from __future__ import annotations

import logging

import typer
from rich import print

from frail.build import BuildSession
from frail.config import settings
from frail.constants import StarType
from frail.models import UniverseState, UniverseStateError
from frail.stability import evaluate
from frail.telemetry import LoggingTelemetry, NullTelemetry

app = typer.Typer(help="Frail universe stability engine")

_BENCHMARK = StarType.YELLOW_SUN.optimal_config


@app.callback()
def main(log_level: str = typer.Option(None, help="Override FRAIL_LOG_LEVEL")) -> None:
    logging.basicConfig(level=(log_level or settings.log_level).upper())


def _build_session(star: StarType) -> BuildSession:
    telemetry = LoggingTelemetry() if settings.telemetry_enabled else NullTelemetry()
    return BuildSession(
        star_type=star,
        planet_count=settings.planet_count,
        success_threshold=settings.success_threshold,
        telemetry=telemetry,
    )


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "default_star": settings.default_star,
            "planet_count": settings.planet_count,
            "success_threshold": settings.success_threshold,
            "telemetry_enabled": settings.telemetry_enabled,
        }
    )


@app.command()
def stars() -> None:
    """List star types with their habitability, ceiling and best known layout."""
    for star in StarType:
        config = star.optimal_config
        print(
            {
                "star": star.value,
                "label": star.label,
                "habitability": star.habitability_score,
                "theoretical_max": star.theoretical_max_score,
                "optimal_masses": list(config.masses),
                "optimal_orbits": list(config.orbits),
            }
        )


@app.command()
def score(
    gravity: float = typer.Option(1.0, help="Gravitational constant multiplier"),
    light_speed: float = typer.Option(1.0, help="Speed-of-light multiplier"),
    star: StarType = typer.Option(StarType.YELLOW_SUN, help="Star type"),
    mass: list[float] = typer.Option(None, "--mass", help="Planet mass in Earth masses; repeat per planet"),
    orbit: list[float] = typer.Option(None, "--orbit", help="Planet orbit in AU; repeat per planet"),
) -> None:
    """Score a universe and explain the result."""
    try:
        state = UniverseState(
            gravity=gravity,
            light_speed=light_speed,
            star_type=star,
            planet_masses=mass or _BENCHMARK.masses,
            planet_orbits=orbit or _BENCHMARK.orbits,
        )
    except UniverseStateError as exc:
        raise typer.BadParameter(str(exc)) from exc

    print(evaluate(state).as_dict())


@app.command()
def optimal(star: StarType = typer.Option(None, help="Star type; defaults to FRAIL_DEFAULT_STAR")) -> None:
    """Apply a star's best known configuration and simulate it."""
    session = _build_session(star or StarType(settings.default_star))
    session.show_optimal()
    report = session.simulate()
    config = session.state.star_type.optimal_config
    print(
        {
            "star": session.state.star_type.value,
            "gravity": config.gravity,
            "light_speed": config.light_speed,
            "masses": list(config.masses),
            "orbits": list(config.orbits),
            "report": report.as_dict(),
        }
    )


if __name__ == "__main__":
    app()
