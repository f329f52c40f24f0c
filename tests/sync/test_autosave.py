"""Tests for the debounced AutoSaveScheduler."""

import threading

from pageforge.sync.autosave import DEFAULT_INTERVAL, AutoSaveScheduler, AutoSaveState


class TestScheduling:
    def test_starts_idle(self, timers):
        scheduler = AutoSaveScheduler(lambda: None, timer_factory=timers)
        assert scheduler.state == AutoSaveState.IDLE
        assert scheduler.interval == DEFAULT_INTERVAL == 10.0

    def test_mutation_starts_timer(self, timers):
        scheduler = AutoSaveScheduler(lambda: None, interval=3.0, timer_factory=timers)
        scheduler.notify_mutation()
        assert scheduler.state == AutoSaveState.PENDING
        assert len(timers.live) == 1
        assert timers.live[0].interval == 3.0
        assert timers.live[0].daemon is True

    def test_new_mutation_restarts_timer(self, timers):
        scheduler = AutoSaveScheduler(lambda: None, timer_factory=timers)
        scheduler.notify_mutation()
        scheduler.notify_mutation()
        assert timers.timers[0].cancelled
        assert len(timers.live) == 1

    def test_burst_collapses_into_one_save(self, timers):
        saves = []
        state = {"value": 0}
        scheduler = AutoSaveScheduler(lambda: saves.append(state["value"]), timer_factory=timers)
        for n in range(1, 11):
            state["value"] = n
            scheduler.notify_mutation()
        timers.fire_latest()
        assert saves == [10]
        assert scheduler.state == AutoSaveState.IDLE

    def test_stale_timer_does_not_save(self, timers):
        saves = []
        scheduler = AutoSaveScheduler(lambda: saves.append(1), timer_factory=timers)
        scheduler.notify_mutation()
        scheduler.notify_mutation()
        timers.timers[0].fire()
        assert saves == []

    def test_cancel(self, timers):
        saves = []
        scheduler = AutoSaveScheduler(lambda: saves.append(1), timer_factory=timers)
        scheduler.notify_mutation()
        scheduler.cancel()
        timers.timers[0].fire()
        assert saves == []
        assert scheduler.state == AutoSaveState.IDLE


class TestSaving:
    def test_state_is_saving_during_save(self, timers):
        seen = []
        scheduler = AutoSaveScheduler(lambda: seen.append(scheduler.state), timer_factory=timers)
        scheduler.notify_mutation()
        timers.fire_latest()
        assert seen == [AutoSaveState.SAVING]

    def test_mutation_during_save_schedules_next(self, timers):
        saves = []

        def save():
            saves.append(len(saves))
            if len(saves) == 1:
                scheduler.notify_mutation()

        scheduler = AutoSaveScheduler(save, timer_factory=timers)
        scheduler.notify_mutation()
        timers.fire_latest()
        assert scheduler.state == AutoSaveState.PENDING
        timers.fire_latest()
        assert saves == [0, 1]

    def test_failure_is_logged_not_raised(self, timers, caplog):
        def save():
            raise RuntimeError("backend down")

        scheduler = AutoSaveScheduler(save, timer_factory=timers)
        scheduler.notify_mutation()
        timers.fire_latest()
        assert scheduler.state == AutoSaveState.IDLE
        assert "Autosave failed" in caplog.text

    def test_failure_is_not_retried(self, timers):
        calls = []

        def save():
            calls.append(1)
            raise RuntimeError("backend down")

        scheduler = AutoSaveScheduler(save, timer_factory=timers)
        scheduler.notify_mutation()
        timers.fire_latest()
        assert calls == [1]
        assert len(timers.timers) == 1


class TestFlushAndClose:
    def test_flush_saves_pending(self, timers):
        saves = []
        scheduler = AutoSaveScheduler(lambda: saves.append(1), timer_factory=timers)
        scheduler.notify_mutation()
        assert scheduler.flush() is True
        assert saves == [1]
        assert timers.timers[0].cancelled

    def test_flush_without_pending(self, timers):
        saves = []
        scheduler = AutoSaveScheduler(lambda: saves.append(1), timer_factory=timers)
        assert scheduler.flush() is False
        assert saves == []

    def test_close_cancels_and_refuses(self, timers):
        saves = []
        scheduler = AutoSaveScheduler(lambda: saves.append(1), timer_factory=timers)
        scheduler.notify_mutation()
        scheduler.close()
        assert scheduler.closed
        assert timers.timers[0].cancelled
        scheduler.notify_mutation()
        assert len(timers.timers) == 1
        timers.timers[0].fire()
        assert saves == []


class TestRealTimer:
    def test_fires_after_interval(self):
        done = threading.Event()
        scheduler = AutoSaveScheduler(done.set, interval=0.01)
        scheduler.notify_mutation()
        assert done.wait(timeout=2.0)
        scheduler.close()
