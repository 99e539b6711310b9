from .command import ControlCommand
from .control_loop import ANGLES, ControlLoop
from .display import ButtonActuator, DisplayTelemetry
from .interfaces import Actuator, TelemetrySource
from .rate_decomposer import AXES, AxisRateSnapshot, RateDecomposer
from .scheduler import RealtimeScheduler, Scheduler, SimulatedScheduler, TickHandle
from .telemetry import AngleReading, AxisReading, LoopTick
from .vehicle import SimulatedVehicle

__all__ = [
    "ANGLES",
    "AXES",
    "Actuator",
    "AngleReading",
    "AxisRateSnapshot",
    "AxisReading",
    "ButtonActuator",
    "ControlCommand",
    "ControlLoop",
    "DisplayTelemetry",
    "LoopTick",
    "RateDecomposer",
    "RealtimeScheduler",
    "Scheduler",
    "SimulatedScheduler",
    "SimulatedVehicle",
    "TelemetrySource",
    "TickHandle",
]
