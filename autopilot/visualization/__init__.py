"""Visualization utilities for autopilot sessions."""

from .session_telemetry import plot_session_telemetry

__all__ = ["plot_session_telemetry"]
