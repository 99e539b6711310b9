from .autopilot import Autopilot
from .records import SessionTelemetry, TickRecord
from .session_event import SessionEvent
from .session_log import SessionLog

__all__ = [
    "Autopilot",
    "SessionEvent",
    "SessionLog",
    "SessionTelemetry",
    "TickRecord",
]
