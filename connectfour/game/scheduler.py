"""
scheduler.py - Cancellable delayed callbacks

The turn controller only needs ``call_later(delay, callback)`` returning a
handle with ``cancel()``. An asyncio event loop already provides exactly
that; DeferredCallbacks is a pollable stand-in for programs without an
event loop, with the clock and sleep injectable for tests.
"""

import time
from typing import Any, Callable, List, Optional, Protocol

from connectfour.debug import debug


class Cancellable(Protocol):
    def cancel(self) -> Any:
        ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Cancellable:
        ...


class ScheduledCall:
    """A callback waiting in a DeferredCallbacks queue."""

    def __init__(self, due: float, callback: Callable[..., Any], args: tuple):
        self.due = due
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        if not self.done:
            self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def run(self) -> None:
        self.done = True
        self.callback(*self.args)

    def __repr__(self):
        state = "cancelled" if self.cancelled else "done" if self.done else "pending"
        return f"ScheduledCall(due={self.due:.3f}, {state})"


class DeferredCallbacks:
    """
    Queue of callbacks run once their delay has elapsed.

    Nothing runs by itself: the owner calls run_pending() whenever it gets
    control back, or wait() to block until the queue drains.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], Any] = time.sleep):
        self._clock = clock
        self._sleep = sleep
        self._calls: List[ScheduledCall] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ScheduledCall:
        call = ScheduledCall(self._clock() + max(delay, 0.0), callback, args)
        self._calls.append(call)
        debug.trace(f"Scheduled {getattr(callback, '__name__', callback)} in {delay:.3f}s", "scheduler")
        return call

    def pending(self) -> List[ScheduledCall]:
        self._calls = [call for call in self._calls if call.pending]
        return list(self._calls)

    def next_due(self) -> Optional[float]:
        calls = self.pending()
        return min(call.due for call in calls) if calls else None

    def run_pending(self) -> int:
        """Run every callback that is due, earliest first. Returns how many ran."""
        now = self._clock()
        due = sorted((call for call in self.pending() if call.due <= now), key=lambda c: c.due)
        for call in due:
            # An earlier callback may have cancelled this one
            if call.pending:
                call.run()
        self.pending()
        return sum(1 for call in due if call.done)

    def wait(self) -> int:
        """Sleep until all pending callbacks have run. Returns how many ran."""
        ran = 0
        while True:
            due = self.next_due()
            if due is None:
                return ran
            remaining = due - self._clock()
            if remaining > 0:
                self._sleep(remaining)
            ran += self.run_pending()

    def cancel_all(self) -> None:
        for call in self.pending():
            call.cancel()
        self._calls = []
