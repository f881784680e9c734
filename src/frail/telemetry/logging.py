"""Contract for runtime telemetry and structured logging sinks."""

from __future__ import annotations

import logging
from typing import Any, Protocol


class Telemetry(Protocol):
    """Reports build-session events and simulation outcomes."""

    def emit(self, event_name: str, payload: dict) -> None:
        """Publish telemetry event to the configured sink."""


class LoggingTelemetry:
    """Forwards telemetry events to a standard logger as structured records."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger("frail.telemetry")
        self._level = level

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        self._logger.log(self._level, event_name, extra={"telemetry": payload})


class NullTelemetry:
    def emit(self, event_name: str, payload: dict) -> None:
        return None
