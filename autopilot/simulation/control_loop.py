"""Attitude-then-translation proportional control loop."""

import logging
from collections.abc import Callable

from ..common import Angle, Axis, LoopPhase, to_reading
from ..config import ControlLoopConfig, RateDecomposerConfig
from .command import ControlCommand
from .interfaces import Actuator, TelemetrySource
from .rate_decomposer import AXES, RateDecomposer
from .scheduler import Scheduler, TickHandle
from .telemetry import AngleReading, AxisReading, LoopTick

_logger = logging.getLogger(__name__)

ANGLES: tuple[Angle, ...] = tuple(Angle)


class ControlLoop:
    """
    Fixed-rate controller that nulls attitude first and translation second.

    Every tick runs the attitude phase. Once all angular errors are inside
    tolerance the loop latches into ATTITUDE_AND_TRANSLATION and from then on
    also runs the translation phase. The latch never resets, even if attitude
    later drifts out of tolerance.

    Both phases drive each rate toward ``-error / gain`` (exponential decay of
    the error) with one nudge per tick in the direction of the shortfall, and
    no nudge when the rate already equals its goal.
    """

    def __init__(
        self,
        telemetry: TelemetrySource,
        actuator: Actuator,
        scheduler: Scheduler,
        config: ControlLoopConfig | None = None,
        rates: RateDecomposer | None = None,
        rate_config: RateDecomposerConfig | None = None,
        on_tick: Callable[[LoopTick], None] | None = None,
    ) -> None:
        self.telemetry = telemetry
        self.actuator = actuator
        self.scheduler = scheduler
        self.config = config or ControlLoopConfig()
        self.rates = rates or RateDecomposer(telemetry, scheduler, rate_config)
        self.on_tick = on_tick
        self._translation_enabled = False
        self._handle: TickHandle | None = None

    @property
    def translation_enabled(self) -> bool:
        return self._translation_enabled

    @property
    def phase(self) -> LoopPhase:
        if self._translation_enabled:
            return LoopPhase.ATTITUDE_AND_TRANSLATION
        return LoopPhase.ATTITUDE_ONLY

    @property
    def running(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    def start(self) -> TickHandle:
        """Start the owned rate decomposer and the control tick."""
        if self.running:
            assert self._handle is not None
            return self._handle
        self.rates.on_failure = self._halt
        self.rates.start()
        self._handle = self.scheduler.every(
            self.config.interval, self._scheduled_tick, name="control-loop"
        )
        _logger.info("Control loop ticking every %ss", self.config.interval)
        return self._handle

    def stop(self) -> None:
        """Cancel the control tick and the rate decomposer. Idempotent."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            _logger.info("Control loop stopped")
        self.rates.stop()

    def _halt(self) -> None:
        _logger.error("Scheduled activity failed, stopping control loop")
        self.stop()

    def _scheduled_tick(self) -> None:
        # A failed tick must not leave rate polling running on its own
        try:
            self.tick()
        except Exception:
            self._halt()
            raise

    def _issue(self, target: Axis | Angle, delta: float) -> ControlCommand | None:
        command = ControlCommand.from_delta(target, delta)
        if command is not None:
            _logger.debug(
                "%s %s (delta=%.4f)", command.direction.name, target.value, delta
            )
            self.actuator.command(command.target, command.direction)
        return command

    def _read_angles(self) -> list[AngleReading]:
        readings = []
        for angle in ANGLES:
            error = to_reading(
                self.telemetry.angle_error(angle), f"angle_error({angle.value})"
            )
            rate = to_reading(
                self.telemetry.angle_rate(angle), f"angle_rate({angle.value})"
            )
            goal = -error / self.config.angle_gain
            readings.append(
                AngleReading(angle=angle, error=error, rate=rate, goal=goal)
            )
        return readings

    def _read_axes(self) -> list[AxisReading]:
        translation = self.config.translation
        readings = []
        for axis in AXES:
            displacement = to_reading(
                self.telemetry.axis_displacement(axis),
                f"axis_displacement({axis.value})",
            )
            rate = self.rates.rate_of(axis)
            dampening = translation.dampening(axis, displacement)
            readings.append(
                AxisReading(
                    axis=axis,
                    displacement=displacement,
                    rate=rate,
                    dampening=dampening,
                    goal=-displacement / dampening,
                )
            )
        return readings

    def tick(self) -> LoopTick:
        """Run one control iteration.

        Every reading of a phase is taken before that phase issues commands, so
        a failed read aborts the tick without acting on partial data.

        Raises:
            TelemetryReadError: a telemetry value could not be read.
        """
        commands: list[ControlCommand] = []

        angles = self._read_angles()
        for reading in angles:
            command = self._issue(reading.angle, reading.delta)
            if command is not None:
                commands.append(command)

        angles_ready = all(
            abs(reading.error) < self.config.angle_tolerance for reading in angles
        )
        latched = angles_ready and not self._translation_enabled
        self._translation_enabled = self._translation_enabled or angles_ready
        if latched:
            _logger.info("Attitude within tolerance; translation control enabled")

        axes: list[AxisReading] = []
        if self._translation_enabled:
            axes = self._read_axes()
            for reading in axes:
                command = self._issue(reading.axis, reading.delta)
                if command is not None:
                    commands.append(command)

        result = LoopTick(
            time=self.scheduler.now,
            phase=self.phase,
            angles_ready=angles_ready,
            angles=angles,
            axes=axes,
            commands=commands,
            latched=latched,
        )
        if self.on_tick is not None:
            self.on_tick(result)
        return result
