from .common import (
    Angle,
    Axis,
    Direction,
    LoopPhase,
    SessionEventType,
    TelemetryReadError,
)
from .config import (
    AutopilotConfig,
    ControlLoopConfig,
    DisplayLayout,
    RateDecomposerConfig,
    TranslationConfig,
    VehicleConfig,
)
from .session import Autopilot, SessionEvent, SessionLog, SessionTelemetry, TickRecord
from .simulation import (
    Actuator,
    ButtonActuator,
    ControlCommand,
    ControlLoop,
    DisplayTelemetry,
    LoopTick,
    RateDecomposer,
    RealtimeScheduler,
    Scheduler,
    SimulatedScheduler,
    SimulatedVehicle,
    TelemetrySource,
    TickHandle,
)

__all__ = [
    "Actuator",
    "Angle",
    "Autopilot",
    "AutopilotConfig",
    "Axis",
    "ButtonActuator",
    "ControlCommand",
    "ControlLoop",
    "ControlLoopConfig",
    "Direction",
    "DisplayLayout",
    "DisplayTelemetry",
    "LoopPhase",
    "LoopTick",
    "RateDecomposer",
    "RateDecomposerConfig",
    "RealtimeScheduler",
    "Scheduler",
    "SessionEvent",
    "SessionEventType",
    "SessionLog",
    "SessionTelemetry",
    "SimulatedScheduler",
    "SimulatedVehicle",
    "TelemetryReadError",
    "TelemetrySource",
    "TickHandle",
    "TickRecord",
    "TranslationConfig",
    "VehicleConfig",
]
