import logging

from ..common import LoopPhase, SessionEventType, TelemetryReadError
from ..config import AutopilotConfig
from ..simulation import (
    Actuator,
    ControlLoop,
    LoopTick,
    RealtimeScheduler,
    Scheduler,
    SimulatedScheduler,
    SimulatedVehicle,
    TelemetrySource,
    TickHandle,
)
from .records import SessionTelemetry, TickRecord
from .session_log import SessionLog

_logger = logging.getLogger(__name__)


class Autopilot:
    """
    One control session: a control loop wired to its collaborators.

    Records every control tick into ``records`` (when ``record`` is True) and
    session milestones into ``log``. Telemetry read failures are logged as
    FAULT events, stop the session and propagate to the caller.
    """

    def __init__(
        self,
        telemetry: TelemetrySource,
        actuator: Actuator,
        scheduler: Scheduler,
        config: AutopilotConfig | None = None,
        log: SessionLog | None = None,
        record: bool = True,
    ) -> None:
        self.config = config or AutopilotConfig()
        self.telemetry = telemetry
        self.actuator = actuator
        self.scheduler = scheduler
        self.log = log if log is not None else SessionLog()
        self.record = record
        self.records = SessionTelemetry()
        self._engaged = False
        self.loop = ControlLoop(
            telemetry,
            actuator,
            scheduler,
            config=self.config.control,
            rate_config=self.config.rates,
            on_tick=self._on_tick,
        )

    @classmethod
    def simulated(
        cls, config: AutopilotConfig | None = None, record: bool = True
    ) -> "Autopilot":
        """Build a session flying a SimulatedVehicle on a virtual clock.

        The vehicle's physics step is registered before the control loop, so
        it runs first whenever their ticks coincide.
        """
        config = config or AutopilotConfig()
        scheduler = SimulatedScheduler()
        vehicle = SimulatedVehicle(config.vehicle)
        vehicle.start(scheduler)
        return cls(vehicle, vehicle, scheduler, config=config, record=record)

    @property
    def phase(self) -> LoopPhase:
        return self.loop.phase

    @property
    def translation_enabled(self) -> bool:
        return self.loop.translation_enabled

    @property
    def running(self) -> bool:
        return self.loop.running

    def _event(self, event_type: SessionEventType, description: str) -> None:
        self.log.log_event(
            time=self.scheduler.now,
            event_type=event_type,
            description=description,
            phase=self.loop.phase,
        )

    def _on_tick(self, tick: LoopTick) -> None:
        if tick.latched:
            self._event(
                SessionEventType.LATCH,
                "Attitude within tolerance, translation control enabled",
            )
        if self.record:
            self.records.append(TickRecord.from_tick(tick))

    def _fault(self, err: TelemetryReadError) -> None:
        _logger.error("Telemetry fault, stopping autopilot: %s", err)
        self._event(SessionEventType.FAULT, str(err))
        self.stop()

    def start(self) -> TickHandle:
        """Start the control loop (and its rate decomposer)."""
        if self.loop.running:
            return self.loop.start()
        try:
            handle = self.loop.start()
        except TelemetryReadError as err:
            self._fault(err)
            raise
        self._engaged = True
        self._event(SessionEventType.START, f"{self.config.name} engaged")
        _logger.info("Autopilot %r engaged", self.config.name)
        return handle

    def stop(self) -> None:
        """Stop the session. Safe to call at any time, any number of times."""
        self.loop.stop()
        # The loop may already have stopped itself after a failed tick
        if self._engaged:
            self._engaged = False
            self._event(SessionEventType.STOP, f"{self.config.name} disengaged")
            _logger.info("Autopilot %r disengaged", self.config.name)

    def run(self, duration: float) -> None:
        """Drive the scheduler for ``duration`` seconds.

        Raises:
            TelemetryReadError: a telemetry read failed; the session is stopped.
            TypeError: the scheduler cannot be driven by duration.
        """
        try:
            if isinstance(self.scheduler, SimulatedScheduler):
                self.scheduler.advance(duration)
            elif isinstance(self.scheduler, RealtimeScheduler):
                self.scheduler.run_for(duration)
            else:
                raise TypeError(
                    f"Cannot run {type(self.scheduler).__name__} for a duration"
                )
        except TelemetryReadError as err:
            self._fault(err)
            raise
