"""Kinematic stand-in for the docking simulator.

The vehicle answers telemetry reads and accepts actuator nudges, so the
autopilot can be flown offline. Each nudge changes the commanded angular or
linear rate by a fixed step; errors and displacement integrate the rates.
"""

from __future__ import annotations

import logging
from collections import Counter

import numpy as np

from ..common import Angle, Axis, Direction
from ..config import VehicleConfig
from .scheduler import Scheduler, TickHandle

_logger = logging.getLogger(__name__)

_ANGLE_INDEX = {angle: i for i, angle in enumerate(Angle)}
_AXIS_INDEX = {axis: i for i, axis in enumerate(Axis)}


class SimulatedVehicle:
    """Simulated vehicle implementing both TelemetrySource and Actuator."""

    def __init__(self, config: VehicleConfig | None = None) -> None:
        self.config = config or VehicleConfig()
        self.angle_errors = np.array(self.config.angle_error, dtype=float)
        self.angle_rates = np.array(self.config.angle_rate, dtype=float)
        self.displacement = np.array(self.config.displacement, dtype=float)
        self.velocity = np.array(self.config.velocity, dtype=float)
        self.elapsed = 0.0
        self.command_counts: Counter[str] = Counter()
        self._handle: TickHandle | None = None

    def _display(self, value: float) -> float:
        q = self.config.quantization
        if q <= 0:
            return float(value)
        return float(np.round(value / q) * q)

    # Telemetry
    def angle_error(self, angle: Angle) -> float:
        return self._display(self.angle_errors[_ANGLE_INDEX[angle]])

    def angle_rate(self, angle: Angle) -> float:
        return self._display(self.angle_rates[_ANGLE_INDEX[angle]])

    def axis_displacement(self, axis: Axis) -> float:
        return self._display(self.displacement[_AXIS_INDEX[axis]])

    def combined_angular_rate(self) -> float:
        return self._display(np.linalg.norm(self.angle_rates))

    def combined_speed_magnitude(self) -> float:
        return self._display(np.linalg.norm(self.velocity))

    # Actuation
    def command(self, target: Axis | Angle, direction: Direction) -> None:
        if isinstance(target, Angle):
            self.angle_rates[_ANGLE_INDEX[target]] += (
                direction.sign * self.config.angular_step
            )
        else:
            self.velocity[_AXIS_INDEX[target]] += (
                direction.sign * self.config.linear_step
            )
        self.command_counts[target.value] += 1

    def step(self, dt: float) -> None:
        """Integrate rates over ``dt`` seconds."""
        self.angle_errors += self.angle_rates * dt
        self.displacement += self.velocity * dt
        self.elapsed += dt

    @property
    def total_commands(self) -> int:
        return sum(self.command_counts.values())

    def start(self, scheduler: Scheduler) -> TickHandle:
        """Register the physics step with ``scheduler``."""
        if self._handle is not None and not self._handle.cancelled:
            return self._handle
        dt = self.config.step_size
        self._handle = scheduler.every(dt, lambda: self.step(dt), name="vehicle")
        _logger.info("Simulated vehicle stepping every %ss", dt)
        return self._handle

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
