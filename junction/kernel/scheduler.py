import asyncio
import heapq
import itertools
import math
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

Callback = Callable[[], None]

class TimerHandle(ABC):
    @abstractmethod
    def cancel(self):
        pass

class Scheduler(ABC):
    """Timer primitive the controller runs on. All times are milliseconds."""

    @abstractmethod
    def now_ms(self) -> float:
        pass

    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        pass

    def call_soon(self, callback: Callback) -> TimerHandle:
        """Run ``callback`` on the next scheduler tick, never synchronously."""
        return self.call_later(0, callback)

class AsyncioScheduler(Scheduler):
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        # Bound lazily so a controller can be built before the loop runs
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now_ms(self) -> float:
        return self.loop.time() * 1000

    def call_soon(self, callback: Callback) -> TimerHandle:
        return self.loop.call_soon(callback)

    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        return self.loop.call_later(delay_ms / 1000.0, callback)

class VirtualTimer(TimerHandle):
    def __init__(self, due_ms: float, callback: Callback):
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

class VirtualScheduler(Scheduler):
    """Manually advanced clock. Nothing runs until ``advance`` is called."""

    def __init__(self, start_ms: float = 0):
        self._now = float(start_ms)
        self._seq = itertools.count()
        self._timers: List[Tuple[float, int, VirtualTimer]] = []

    def now_ms(self) -> float:
        return self._now

    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        due = self._now + max(delay_ms, 0)
        if delay_ms > 0 and due <= self._now:
            # Below float resolution at this clock value
            due = math.nextafter(self._now, math.inf)
        timer = VirtualTimer(due, callback)
        heapq.heappush(self._timers, (timer.due_ms, next(self._seq), timer))
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._timers if not t.cancelled)

    def advance(self, ms: float = 0) -> int:
        """Move the clock forward by ``ms``, firing every timer that falls due.

        Timers fire in due order, ties in scheduling order, with the clock set
        to each timer's due time. Timers armed by a callback fire in the same
        call if they fall inside the window. Returns the number fired.
        """
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({ms}ms)")
        target = self._now + ms
        fired = 0
        while self._timers and self._timers[0][0] <= target:
            due, _, timer = heapq.heappop(self._timers)
            if timer.cancelled:
                continue
            self._now = due
            timer.callback()
            fired += 1
        self._now = target
        return fired
