from pydantic import BaseModel, ConfigDict

from ..common import Angle, Axis, Direction


class ControlCommand(BaseModel):
    """A directional nudge for one axis or angle, issued within a single tick."""

    target: Axis | Angle
    direction: Direction

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_delta(cls, target: Axis | Angle, delta: float) -> "ControlCommand | None":
        """Command that moves the rate toward its goal, or None in the dead-band."""
        if delta == 0:
            return None
        direction = Direction.INCREASE if delta > 0 else Direction.DECREASE
        return cls(target=target, direction=direction)
