from enum import Enum


class Axis(str, Enum):
    """Translation degrees of freedom"""

    X = "x"
    Y = "y"
    Z = "z"


class Angle(str, Enum):
    """Orientation degrees of freedom"""

    ROLL = "roll"
    PITCH = "pitch"
    YAW = "yaw"


class Direction(int, Enum):
    """Direction of a single actuator nudge"""

    DECREASE = 0
    INCREASE = 1

    @property
    def sign(self) -> int:
        return 1 if self is Direction.INCREASE else -1


class LoopPhase(int, Enum):
    """Control loop modes"""

    ATTITUDE_ONLY = 0
    ATTITUDE_AND_TRANSLATION = 1


class SessionEventType(str, Enum):
    """Types of events recorded in a session log."""

    START = "START"
    STOP = "STOP"
    LATCH = "LATCH"
    FAULT = "FAULT"
    INFO = "INFO"
