"""Cooperative tick scheduling for periodic control activities.

Periodic activities (rate polling, the control tick, vehicle physics) register
against a single-threaded scheduler and receive a TickHandle that acts as the
cancellation token. Ticks are kept in a heap ordered by due time and then by
registration order, so ticks of one activity never overlap and ticks of
different activities interleave deterministically.
"""

from __future__ import annotations

import heapq
import logging
import time
from collections.abc import Callable
from itertools import count

_logger = logging.getLogger(__name__)

# Slack when comparing accumulated float due times against a deadline
_TIME_EPS = 1e-9


class TickHandle:
    """Cancellation token for a periodic activity registered with a Scheduler."""

    def __init__(
        self,
        scheduler: Scheduler,
        interval: float,
        callback: Callable[[], object],
        start: float,
        order: int,
        name: str | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._callback = callback
        self._cancelled = False
        self.interval = interval
        self.start = start
        self.order = order
        self.name = name or getattr(callback, "__qualname__", "activity")
        self.ticks = 0

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def next_due(self) -> float:
        """Due time of the next tick; due times never accumulate drift."""
        return self.start + (self.ticks + 1) * self.interval

    def cancel(self) -> None:
        """Cancel every future tick. Safe to call more than once."""
        if self._cancelled:
            return
        self._cancelled = True
        self._scheduler._discard(self)
        _logger.debug("Cancelled %s after %d ticks", self.name, self.ticks)

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "active"
        return (
            f"TickHandle(name={self.name!r}, interval={self.interval}, "
            f"ticks={self.ticks}, {state})"
        )


class Scheduler:
    """Base single-threaded scheduler; subclasses provide the clock."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, TickHandle]] = []
        self._order = count()

    @property
    def now(self) -> float:
        raise NotImplementedError

    @property
    def pending(self) -> int:
        """Number of active periodic activities."""
        return len(self._heap)

    def every(
        self,
        interval: float,
        callback: Callable[[], object],
        name: str | None = None,
    ) -> TickHandle:
        """Register ``callback`` to run every ``interval`` seconds.

        The first tick is due one interval after registration.

        Returns:
            The TickHandle used to cancel the activity.
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        handle = TickHandle(
            self,
            interval=float(interval),
            callback=callback,
            start=self.now,
            order=next(self._order),
            name=name,
        )
        heapq.heappush(self._heap, (handle.next_due, handle.order, handle))
        _logger.debug("Registered %s every %ss", handle.name, interval)
        return handle

    def _discard(self, handle: TickHandle) -> None:
        self._heap = [entry for entry in self._heap if entry[2] is not handle]
        heapq.heapify(self._heap)

    def _next_due(self) -> float | None:
        return self._heap[0][0] if self._heap else None

    def _fire_next(self) -> None:
        """Run the earliest due tick and reschedule its activity.

        A callback that raises (including KeyboardInterrupt) cancels its own
        activity and the exception propagates to whoever is running the
        scheduler.
        """
        _, _, handle = heapq.heappop(self._heap)
        handle.ticks += 1
        try:
            handle._callback()
        except BaseException:
            _logger.error("%s failed on tick %d", handle.name, handle.ticks)
            handle._cancelled = True
            raise
        if not handle.cancelled:
            heapq.heappush(self._heap, (handle.next_due, handle.order, handle))


class SimulatedScheduler(Scheduler):
    """Scheduler on a virtual clock, advanced explicitly by the caller."""

    def __init__(self, start: float = 0.0) -> None:
        super().__init__()
        self._now = float(start)

    @property
    def now(self) -> float:
        return self._now

    def run_until(self, until: float) -> None:
        """Run every tick due at or before ``until`` and move the clock there."""
        while True:
            due = self._next_due()
            if due is None or due > until + _TIME_EPS:
                break
            self._now = max(self._now, due)
            self._fire_next()
        self._now = max(self._now, float(until))

    def advance(self, seconds: float) -> None:
        """Advance the virtual clock by ``seconds``."""
        if seconds < 0:
            raise ValueError(f"Cannot advance by a negative duration: {seconds}")
        self.run_until(self._now + seconds)


class RealtimeScheduler(Scheduler):
    """Scheduler paced against a wall clock.

    Late ticks run back to back rather than being skipped; an activity still
    never has two ticks in flight.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        super().__init__()
        self._clock = clock
        self._sleep = sleep

    @property
    def now(self) -> float:
        return self._clock()

    def run_for(self, duration: float) -> None:
        """Run due ticks for ``duration`` seconds of wall time."""
        deadline = self.now + duration
        while True:
            due = self._next_due()
            if due is None or due > deadline + _TIME_EPS:
                remaining = deadline - self.now
                if remaining > 0:
                    self._sleep(remaining)
                return
            wait = due - self.now
            if wait > 0:
                self._sleep(wait)
            self._fire_next()
