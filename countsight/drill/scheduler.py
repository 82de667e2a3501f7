"""One-shot deferred callbacks for the drill's auto-hide timer.

The drill never sleeps or spawns threads. It asks a scheduler to run a
callback later and keeps the returned handle so the call can be cancelled.
Two schedulers are provided:

- ManualScheduler: a virtual millisecond clock advanced by the caller,
  typically once per frame from a game loop (and from tests).
- AsyncioScheduler: delegates to an asyncio event loop.
"""

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """A pending call that can be cancelled before it fires."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs callbacks after a delay on the caller's thread."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...

    def now(self) -> float:
        """Current time in milliseconds."""
        ...


@dataclass(order=True)
class ScheduledCall:
    """A callback queued on a ManualScheduler."""

    due_ms: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualScheduler:
    """
    Scheduler driven by an explicit clock.

    Calls become due when ``advance`` moves the clock past their due time
    and run in due-time order (ties in scheduling order). A callback may
    schedule further calls; those fire in the same ``advance`` if they fall
    within the window.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._queue: list[ScheduledCall] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self._now + max(0, delay_ms), next(self._counter), callback)
        heapq.heappush(self._queue, call)
        return call

    def advance(self, ms: float) -> int:
        """
        Move the clock forward and run every call that became due.

        Args:
            ms: Milliseconds to advance (negative values are treated as 0)

        Returns:
            Number of callbacks that fired
        """
        target = self._now + max(0.0, ms)
        fired = 0
        while self._queue and self._queue[0].due_ms <= target:
            call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self._now = call.due_ms
            call.fired = True
            call.callback()
            fired += 1
        self._now = target
        return fired

    @property
    def pending_count(self) -> int:
        """Number of calls still waiting to fire."""
        return sum(1 for call in self._queue if call.pending)


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0, delay_ms) / 1000.0, callback)
