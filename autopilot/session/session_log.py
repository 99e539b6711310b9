"""Milestone log for an autopilot session."""

from pydantic import BaseModel, Field

from ..common import LoopPhase, SessionEventType
from .session_event import SessionEvent


class SessionLog(BaseModel):
    """
    Ordered record of session milestones: engage, latch, faults, disengage.

    Per-tick data lives in SessionTelemetry; this log only holds the events
    an operator would want to read back after a run.

    Attributes:
        events: SessionEvents in the order they happened
    """

    events: list[SessionEvent] = Field(
        default_factory=list, description="Session milestones in time order"
    )

    def log_event(
        self,
        time: float,
        event_type: SessionEventType,
        description: str,
        phase: LoopPhase | None = None,
    ) -> None:
        """
        Append a milestone to the log.

        Parameters
        ----------
        time : float
            Scheduler clock reading when the milestone occurred, in seconds
        event_type : SessionEventType
            START, STOP, LATCH, FAULT or INFO
        description : str
            Message shown by print_log
        phase : LoopPhase | None
            Control loop phase when the milestone occurred, if known
        """
        self.events.append(
            SessionEvent(
                time=time, event_type=event_type, description=description, phase=phase
            )
        )

    def of_type(self, event_type: SessionEventType) -> list[SessionEvent]:
        return [e for e in self.events if e.event_type == event_type]

    def print_log(self) -> None:
        """Write one line per milestone to stdout."""
        for event in self.events:
            print(str(event))

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    def __getitem__(self, index: int) -> SessionEvent:
        return self.events[index]
