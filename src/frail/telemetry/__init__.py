"""Telemetry sinks for build-session events."""

from .logging import LoggingTelemetry, NullTelemetry, Telemetry

__all__ = ["LoggingTelemetry", "NullTelemetry", "Telemetry"]
