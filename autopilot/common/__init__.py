from .enums import Angle, Axis, Direction, LoopPhase, SessionEventType
from .readings import TelemetryReadError, parse_reading, to_reading

__all__ = [
    "Angle",
    "Axis",
    "Direction",
    "LoopPhase",
    "SessionEventType",
    "TelemetryReadError",
    "parse_reading",
    "to_reading",
]
