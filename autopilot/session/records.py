"""Per-tick telemetry recorded during an autopilot session."""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from ..common import LoopPhase
from ..simulation.telemetry import LoopTick


class TickRecord(BaseModel):
    """
    Telemetry record of a single control tick.

    Attributes:
        time: Scheduler time of the tick in seconds
        phase: Control loop phase after the gate was evaluated
        angles_ready: Whether every angular error was inside tolerance
        angle_error: Angular error per angle in degrees
        angle_rate: Angular rate per angle in deg/s
        axis_displacement: Displacement per axis in meters (translation only)
        axis_rate: Estimated rate per axis in m/s (translation only)
        commands: Nudges issued this tick, target -> +1 (increase) / -1 (decrease)
    """

    time: float
    phase: LoopPhase
    angles_ready: bool = False
    angle_error: dict[str, float] = Field(default_factory=dict)
    angle_rate: dict[str, float] = Field(default_factory=dict)
    axis_displacement: dict[str, float] = Field(default_factory=dict)
    axis_rate: dict[str, float] = Field(default_factory=dict)
    commands: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_tick(cls, tick: LoopTick) -> "TickRecord":
        return cls(
            time=tick.time,
            phase=tick.phase,
            angles_ready=tick.angles_ready,
            angle_error={r.angle.value: r.error for r in tick.angles},
            angle_rate={r.angle.value: r.rate for r in tick.angles},
            axis_displacement={r.axis.value: r.displacement for r in tick.axes},
            axis_rate={r.axis.value: r.rate for r in tick.axes},
            commands={c.target.value: c.direction.sign for c in tick.commands},
        )


class SessionTelemetry(BaseModel):
    """Ordered collection of TickRecords with field extraction helpers."""

    records: list[TickRecord] = Field(default_factory=list)

    def append(self, record: TickRecord) -> None:
        self.records.append(record)

    def extend(self, records: Iterable[TickRecord]) -> None:
        self.records.extend(records)

    def extract_field(self, field_name: str) -> list[Any]:
        """
        Extract a single field from every record.

        Raises
        ------
        AttributeError
            If field_name is not a valid TickRecord attribute
        """
        if field_name not in TickRecord.model_fields:
            raise AttributeError(f"TickRecord has no field {field_name!r}")
        return [getattr(record, field_name) for record in self.records]

    def extract_fields(self, field_names: list[str]) -> dict[str, list[Any]]:
        """Extract several fields at once, keyed by field name."""
        return {name: self.extract_field(name) for name in field_names}

    def series(self, field_name: str, key: str) -> list[float | None]:
        """Values of one angle or axis from a dict field, None where absent."""
        return [values.get(key) for values in self.extract_field(field_name)]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, index: int) -> TickRecord:
        return self.records[index]
