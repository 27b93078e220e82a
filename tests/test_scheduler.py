"""
Tests for DeferredCallbacks.
"""

from connectfour.game.scheduler import DeferredCallbacks


class TestDeferredCallbacks:
    """Delayed, cancellable callbacks driven by an injected clock."""

    def test_runs_only_when_due(self, clock):
        calls = []
        scheduler = DeferredCallbacks(clock=clock, sleep=clock.sleep)
        scheduler.call_later(1.0, calls.append, "a")

        assert scheduler.run_pending() == 0
        clock.advance(1.0)
        assert scheduler.run_pending() == 1
        assert calls == ["a"]
        # Already delivered
        assert scheduler.run_pending() == 0

    def test_earliest_runs_first(self, clock):
        calls = []
        scheduler = DeferredCallbacks(clock=clock, sleep=clock.sleep)
        scheduler.call_later(2.0, calls.append, "late")
        scheduler.call_later(1.0, calls.append, "early")
        clock.advance(3.0)
        scheduler.run_pending()
        assert calls == ["early", "late"]

    def test_cancelled_call_never_runs(self, clock):
        calls = []
        scheduler = DeferredCallbacks(clock=clock, sleep=clock.sleep)
        handle = scheduler.call_later(1.0, calls.append, "x")
        handle.cancel()
        assert not handle.pending
        clock.advance(2.0)
        assert scheduler.run_pending() == 0
        assert calls == []

    def test_callback_can_cancel_a_later_one(self, clock):
        calls = []
        scheduler = DeferredCallbacks(clock=clock, sleep=clock.sleep)
        second = None

        def first():
            calls.append("first")
            second.cancel()

        scheduler.call_later(1.0, first)
        second = scheduler.call_later(1.5, calls.append, "second")
        clock.advance(2.0)
        assert scheduler.run_pending() == 1
        assert calls == ["first"]

    def test_wait_sleeps_until_drained(self, clock):
        calls = []
        scheduler = DeferredCallbacks(clock=clock, sleep=clock.sleep)
        scheduler.call_later(0.25, calls.append, 1)
        scheduler.call_later(0.75, calls.append, 2)
        assert scheduler.wait() == 2
        assert calls == [1, 2]
        assert clock.now == 0.75
        assert scheduler.next_due() is None

    def test_cancel_after_run_is_harmless(self, clock):
        scheduler = DeferredCallbacks(clock=clock, sleep=clock.sleep)
        handle = scheduler.call_later(0, lambda: None)
        scheduler.run_pending()
        handle.cancel()
        assert handle.done and not handle.cancelled

    def test_cancel_all(self, clock):
        calls = []
        scheduler = DeferredCallbacks(clock=clock, sleep=clock.sleep)
        scheduler.call_later(1.0, calls.append, 1)
        scheduler.call_later(2.0, calls.append, 2)
        scheduler.cancel_all()
        clock.advance(5)
        assert scheduler.run_pending() == 0
        assert scheduler.pending() == []
