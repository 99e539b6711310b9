from __future__ import annotations

from dataclasses import dataclass, field

from ..common import Angle, Axis, LoopPhase
from .command import ControlCommand


@dataclass
class AngleReading:
    angle: Angle
    error: float
    rate: float
    goal: float

    @property
    def delta(self) -> float:
        return self.goal - self.rate


@dataclass
class AxisReading:
    axis: Axis
    displacement: float
    rate: float
    dampening: float
    goal: float

    @property
    def delta(self) -> float:
        return self.goal - self.rate


@dataclass
class LoopTick:
    """Everything one control tick read and decided."""

    time: float
    phase: LoopPhase
    angles_ready: bool
    angles: list[AngleReading]
    axes: list[AxisReading] = field(default_factory=list)
    commands: list[ControlCommand] = field(default_factory=list)
    latched: bool = False
