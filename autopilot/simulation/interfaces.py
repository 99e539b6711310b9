"""Contracts for the collaborators injected into the autopilot."""

from typing import Protocol

from ..common import Angle, Axis, Direction


class TelemetrySource(Protocol):
    """Read-only, synchronous telemetry.

    Values are signed and in consistent units: degrees, degrees/second,
    meters and meters/second.
    """

    def angle_error(self, angle: Angle) -> float: ...

    def angle_rate(self, angle: Angle) -> float: ...

    def axis_displacement(self, axis: Axis) -> float: ...

    def combined_angular_rate(self) -> float: ...

    def combined_speed_magnitude(self) -> float: ...


class Actuator(Protocol):
    """Issues one fixed-magnitude nudge per call; cannot fail by contract."""

    def command(self, target: Axis | Angle, direction: Direction) -> None: ...
