from pydantic import BaseModel, Field

from ..common import LoopPhase, SessionEventType


class SessionEvent(BaseModel):
    """A single timestamped event from an autopilot session."""

    time: float = Field(description="Scheduler time of the event in seconds")
    event_type: SessionEventType
    description: str
    phase: LoopPhase | None = None

    def __str__(self) -> str:
        phase = f" [{self.phase.name}]" if self.phase is not None else ""
        kind = self.event_type.value
        return f"{self.time:10.3f}s {kind:<5}{phase} {self.description}"
