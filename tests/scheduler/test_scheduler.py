"""Tests for the cooperative tick schedulers."""

import pytest

from autopilot.simulation import RealtimeScheduler, SimulatedScheduler


class FakeClock:
    """Wall clock that only moves when slept on."""

    def __init__(self):
        self.t = 100.0
        self.sleeps = []

    def __call__(self):
        return self.t

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.t += seconds


class TestSimulatedScheduler:
    """Test SimulatedScheduler on its virtual clock."""

    def test_first_tick_is_one_interval_after_registration(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that nothing runs before one full interval has passed."""
        calls = []
        scheduler.every(0.1, lambda: calls.append(scheduler.now))
        scheduler.advance(0.05)
        assert calls == []
        scheduler.advance(0.05)
        assert calls == [pytest.approx(0.1)]

    def test_due_times_do_not_drift(self, scheduler: SimulatedScheduler) -> None:
        """Test that long runs still produce exactly one tick per interval."""
        handle = scheduler.every(0.1, lambda: None)
        scheduler.advance(1.0)
        assert handle.ticks == 10
        scheduler.run_until(100.0)
        assert handle.ticks == 1000

    def test_clock_moves_to_requested_time(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that advance lands on the requested time between ticks."""
        scheduler.every(0.3, lambda: None)
        scheduler.advance(1.0)
        assert scheduler.now == pytest.approx(1.0)

    def test_activities_interleave_by_due_time(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that activities at different rates run in due-time order."""
        order = []
        scheduler.every(0.1, lambda: order.append("slow"))
        scheduler.every(0.04, lambda: order.append("fast"))
        scheduler.advance(0.19)
        assert order == ["fast", "fast", "slow", "fast", "fast"]

    def test_ties_run_in_registration_order(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that ticks due together run in the order they registered."""
        order = []
        scheduler.every(0.02, lambda: order.append("first"))
        scheduler.every(0.02, lambda: order.append("second"))
        scheduler.advance(0.04)
        assert order == ["first", "second", "first", "second"]

    def test_cancel_removes_future_ticks(self, scheduler: SimulatedScheduler) -> None:
        """Test that a cancelled activity never ticks again."""
        calls = []
        handle = scheduler.every(0.1, lambda: calls.append(1))
        scheduler.advance(0.3)
        handle.cancel()
        scheduler.advance(1.0)
        assert len(calls) == 3
        assert handle.cancelled
        assert scheduler.pending == 0

    def test_cancel_is_idempotent(self, scheduler: SimulatedScheduler) -> None:
        """Test that cancelling twice leaves other activities untouched."""
        handle = scheduler.every(0.1, lambda: None)
        other = scheduler.every(0.1, lambda: None)
        handle.cancel()
        handle.cancel()
        assert scheduler.pending == 1
        assert not other.cancelled

    def test_callback_may_cancel_its_own_handle(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that an activity can cancel itself from inside its tick."""
        calls = []

        def once():
            calls.append(1)
            handle.cancel()

        handle = scheduler.every(0.1, once)
        scheduler.advance(1.0)
        assert calls == [1]
        assert scheduler.pending == 0

    def test_failing_callback_propagates_and_is_cancelled(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that a raising callback is cancelled and its error escapes."""

        def boom():
            raise RuntimeError("bad read")

        survivor_calls = []
        handle = scheduler.every(0.1, boom)
        scheduler.every(0.05, lambda: survivor_calls.append(1))
        with pytest.raises(RuntimeError, match="bad read"):
            scheduler.advance(1.0)
        assert handle.cancelled
        assert handle.ticks == 1
        assert scheduler.pending == 1
        # Ticks due before the failure still ran
        assert survivor_calls == [1]

    def test_interrupted_callback_is_cancelled(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that KeyboardInterrupt inside a tick leaves no live handle."""

        def interrupted():
            raise KeyboardInterrupt

        handle = scheduler.every(0.1, interrupted)
        with pytest.raises(KeyboardInterrupt):
            scheduler.advance(1.0)
        assert handle.cancelled
        assert scheduler.pending == 0

    def test_rejects_non_positive_interval(
        self, scheduler: SimulatedScheduler
    ) -> None:
        """Test that a zero interval is rejected."""
        with pytest.raises(ValueError):
            scheduler.every(0.0, lambda: None)

    def test_rejects_negative_advance(self, scheduler: SimulatedScheduler) -> None:
        """Test that the virtual clock cannot run backwards."""
        with pytest.raises(ValueError):
            scheduler.advance(-1.0)

    def test_handle_reports_name_and_next_due(self) -> None:
        """Test the handle's name, next due time and repr."""
        scheduler = SimulatedScheduler(start=10.0)
        handle = scheduler.every(0.5, lambda: None, name="poll")
        assert handle.name == "poll"
        assert handle.next_due == pytest.approx(10.5)
        assert "poll" in repr(handle)


class TestRealtimeScheduler:
    """Test RealtimeScheduler against an injected clock."""

    def test_runs_ticks_paced_by_the_clock(self) -> None:
        """Test that ticks run when the wall clock reaches their due time."""
        clock = FakeClock()
        scheduler = RealtimeScheduler(clock=clock, sleep=clock.sleep)
        stamps = []
        scheduler.every(0.25, lambda: stamps.append(clock()))
        scheduler.run_for(1.0)
        assert stamps == pytest.approx([100.25, 100.5, 100.75, 101.0])
        assert clock() == pytest.approx(101.0)

    def test_sleeps_out_the_remaining_duration(self) -> None:
        """Test that run_for always lasts the full duration."""
        clock = FakeClock()
        scheduler = RealtimeScheduler(clock=clock, sleep=clock.sleep)
        scheduler.every(0.4, lambda: None)
        scheduler.run_for(1.0)
        assert clock() == pytest.approx(101.0)
        assert sum(clock.sleeps) == pytest.approx(1.0)

    def test_late_ticks_run_back_to_back(self) -> None:
        """Test that overrunning ticks are caught up rather than skipped."""
        clock = FakeClock()
        scheduler = RealtimeScheduler(clock=clock, sleep=clock.sleep)
        calls = []

        def slow():
            calls.append(clock())
            clock.t += 0.3

        scheduler.every(0.1, slow)
        scheduler.run_for(0.5)
        # Every tick due within the window still runs, one after another
        assert len(calls) == 5
        assert calls[1] == pytest.approx(100.4)
        assert calls == sorted(calls)

    def test_cancel_before_run(self) -> None:
        """Test that an activity cancelled before running never ticks."""
        clock = FakeClock()
        scheduler = RealtimeScheduler(clock=clock, sleep=clock.sleep)
        calls = []
        scheduler.every(0.1, lambda: calls.append(1)).cancel()
        scheduler.run_for(0.5)
        assert calls == []

    def test_interrupt_during_run_leaves_no_live_handle(self) -> None:
        """Test that Ctrl-C during run_for cancels the interrupted activity."""
        clock = FakeClock()
        scheduler = RealtimeScheduler(clock=clock, sleep=clock.sleep)

        def interrupted():
            raise KeyboardInterrupt

        handle = scheduler.every(0.1, interrupted)
        with pytest.raises(KeyboardInterrupt):
            scheduler.run_for(1.0)
        assert handle.cancelled
        assert scheduler.pending == 0
