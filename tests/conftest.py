"""Shared pytest fixtures for test suite."""

from unittest.mock import Mock

import pytest

from autopilot.common import Angle, Axis
from autopilot.simulation import SimulatedScheduler


class FakeTelemetry:
    """Settable telemetry source for driving the controller by hand."""

    def __init__(self):
        self.errors = {angle: 0.0 for angle in Angle}
        self.angular_rates = {angle: 0.0 for angle in Angle}
        self.displacement = {axis: 0.0 for axis in Axis}
        self.angular_rate = 0.0
        self.speed = 0.0

    def angle_error(self, angle):
        return self.errors[angle]

    def angle_rate(self, angle):
        return self.angular_rates[angle]

    def axis_displacement(self, axis):
        return self.displacement[axis]

    def combined_angular_rate(self):
        return self.angular_rate

    def combined_speed_magnitude(self):
        return self.speed

    def set_errors(self, roll=0.0, pitch=0.0, yaw=0.0):
        self.errors = {Angle.ROLL: roll, Angle.PITCH: pitch, Angle.YAW: yaw}

    def set_displacement(self, x=0.0, y=0.0, z=0.0):
        self.displacement = {Axis.X: x, Axis.Y: y, Axis.Z: z}


@pytest.fixture
def telemetry():
    """Create a fake telemetry source with every reading at zero."""
    return FakeTelemetry()


@pytest.fixture
def actuator():
    """Create a mock actuator recording every command."""
    return Mock()


@pytest.fixture
def scheduler():
    """Create a scheduler on a virtual clock starting at t=0."""
    return SimulatedScheduler()
