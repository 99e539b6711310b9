"""Tests for autopilot.simulation.command module."""

import pytest
from pydantic import ValidationError

from autopilot.common import Angle, Axis, Direction
from autopilot.simulation import ControlCommand


class TestControlCommand:
    """Test ControlCommand construction from a rate shortfall."""

    def test_positive_delta_increases(self) -> None:
        """Test that a positive shortfall yields INCREASE."""
        command = ControlCommand.from_delta(Angle.ROLL, 0.01)
        assert command.direction is Direction.INCREASE
        assert command.target is Angle.ROLL

    def test_negative_delta_decreases(self) -> None:
        """Test that a negative shortfall yields DECREASE."""
        command = ControlCommand.from_delta(Axis.Z, -3.0)
        assert command.direction is Direction.DECREASE
        assert command.target is Axis.Z

    @pytest.mark.parametrize("delta", [0.0, -0.0])
    def test_zero_delta_is_dead_band(self, delta: float) -> None:
        """Test that no command is built for a zero shortfall."""
        assert ControlCommand.from_delta(Axis.X, delta) is None

    def test_commands_are_immutable(self) -> None:
        """Test that a built command cannot be altered."""
        command = ControlCommand(target=Axis.Y, direction=Direction.INCREASE)
        with pytest.raises(ValidationError):
            command.direction = Direction.DECREASE
