"""Per-axis velocity estimation from displacement history.

The telemetry offers an accurate but unresolved combined speed and per-axis
displacement quantized to display resolution. The decomposer finite-differences
displacement at a fixed cadence and, when asked, apportions the combined speed
across axes by each axis's share of the squared contributions, keeping the
sign of the contribution. This is a conditioning compromise rather than an
exact decomposition.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from ..common import Axis, to_reading
from ..config import RateDecomposerConfig
from .interfaces import TelemetrySource
from .scheduler import Scheduler, TickHandle

_logger = logging.getLogger(__name__)

AXES: tuple[Axis, ...] = tuple(Axis)


@dataclass(frozen=True)
class AxisRateSnapshot:
    """Displacement and contribution for every axis at one poll tick.

    Snapshots are replaced whole, so readers never see a partial update.
    """

    displacement: tuple[float, float, float]
    contribution: tuple[float, float, float]
    ticks: int = 0

    def contribution_of(self, axis: Axis) -> float:
        return self.contribution[AXES.index(axis)]


class RateDecomposer:
    """Polls axis displacement and apportions combined speed across axes."""

    def __init__(
        self,
        telemetry: TelemetrySource,
        scheduler: Scheduler,
        config: RateDecomposerConfig | None = None,
    ) -> None:
        self.telemetry = telemetry
        self.scheduler = scheduler
        self.config = config or RateDecomposerConfig()
        self._snapshot: AxisRateSnapshot | None = None
        self._handle: TickHandle | None = None
        # Called before a failed poll re-raises, so an owner can shut down
        self.on_failure: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    @property
    def snapshot(self) -> AxisRateSnapshot | None:
        """Most recently completed snapshot, or None before the first start."""
        return self._snapshot

    @property
    def contributions(self) -> dict[Axis, float]:
        if self._snapshot is None:
            return {axis: 0.0 for axis in AXES}
        return dict(zip(AXES, self._snapshot.contribution))

    def _read_displacement(self) -> np.ndarray:
        return np.array(
            [
                to_reading(
                    self.telemetry.axis_displacement(axis),
                    f"axis_displacement({axis.value})",
                )
                for axis in AXES
            ]
        )

    def start(self) -> TickHandle:
        """Capture the initial displacement and begin polling.

        Returns the polling activity's cancellation token; calling start on a
        running decomposer returns the existing token.
        """
        if self.running:
            assert self._handle is not None
            return self._handle
        initial = self._read_displacement()
        self._snapshot = AxisRateSnapshot(
            displacement=tuple(initial.tolist()),
            contribution=(0.0, 0.0, 0.0),
        )
        self._handle = self.scheduler.every(
            self.config.interval, self._poll, name="rate-decomposer"
        )
        _logger.info("Rate decomposer polling every %ss", self.config.interval)
        return self._handle

    def stop(self) -> None:
        """Stop polling; the estimate stays frozen at its last value."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        _logger.info("Rate decomposer stopped")

    def _poll(self) -> None:
        assert self._snapshot is not None
        try:
            current = self._read_displacement()
        except Exception:
            if self.on_failure is not None:
                self.on_failure()
            raise
        last = np.array(self._snapshot.displacement)
        contribution = (current - last) / self.config.interval
        self._snapshot = AxisRateSnapshot(
            displacement=tuple(current.tolist()),
            contribution=tuple(contribution.tolist()),
            ticks=self._snapshot.ticks + 1,
        )
        _logger.debug("Axis contributions: %s", self._snapshot.contribution)

    @staticmethod
    def apportion(
        speed: float, contributions: tuple[float, float, float], axis: Axis
    ) -> float:
        """Signed share of ``speed`` for ``axis``.

        magnitude = sqrt(|speed| * c_axis^2 / sum(c_i^2)), signed like c_axis
        (a zero contribution counts as positive). Zero when every contribution
        is zero, since there is no directional information.
        """
        sum_sq = sum(c * c for c in contributions)
        if sum_sq == 0:
            return 0.0
        c_axis = contributions[AXES.index(axis)]
        proportion = (c_axis * c_axis) / sum_sq
        magnitude = math.sqrt(abs(speed) * proportion)
        sign = -1.0 if c_axis < 0 else 1.0
        return sign * magnitude

    def rate_of(self, axis: Axis) -> float:
        """Signed velocity estimate for ``axis`` from a fresh speed reading."""
        speed = to_reading(
            self.telemetry.combined_speed_magnitude(), "combined_speed_magnitude"
        )
        if self._snapshot is None:
            return 0.0
        return self.apportion(speed, self._snapshot.contribution, axis)

    def rates(self) -> dict[Axis, float]:
        """Estimates for every axis from a single speed reading."""
        speed = to_reading(
            self.telemetry.combined_speed_magnitude(), "combined_speed_magnitude"
        )
        if self._snapshot is None:
            return {axis: 0.0 for axis in AXES}
        contribution = self._snapshot.contribution
        return {axis: self.apportion(speed, contribution, axis) for axis in AXES}
