from __future__ import annotations

import asyncio
import heapq
from typing import Callable, Protocol

DEFAULT_DEBOUNCE_MS = 180


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """Schedules callbacks on the running asyncio loop (or on ``loop`` when given)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0, delay_ms) / 1000.0, callback)


class ManualTimer:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual millisecond clock; timers fire only when the clock is advanced."""

    def __init__(self, start_ms: int = 0) -> None:
        self.now_ms = start_ms
        self._seq = 0
        self._queue: list[tuple[int, int, ManualTimer]] = []

    @property
    def pending(self) -> int:
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now_ms + max(0, int(delay_ms)), callback)
        self._seq += 1
        heapq.heappush(self._queue, (timer.due_ms, self._seq, timer))
        return timer

    def advance(self, delta_ms: int) -> None:
        self.advance_to(self.now_ms + delta_ms)

    def advance_to(self, target_ms: int) -> None:
        while self._queue and self._queue[0][0] <= target_ms:
            due_ms, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now_ms = due_ms
            timer.callback()
        self.now_ms = max(self.now_ms, target_ms)


class QueryController:
    """Raw query text plus a trailing-edge debounced copy of it.

    ``raw`` changes on every ``set_query``; ``debounced`` catches up only after ``raw``
    has been left alone for ``debounce_ms``. Each edit restarts the window, so a burst
    of keystrokes produces one update carrying the final text.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        initial_query: str = "",
        on_settle: Callable[[str], None] | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.debounce_ms = debounce_ms
        self.raw = initial_query
        self.debounced = initial_query
        self.on_settle = on_settle
        self._handle: TimerHandle | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def set_query(self, text: str) -> None:
        if self._closed:
            raise RuntimeError("query controller is closed")
        if text == self.raw:
            return
        self.raw = text
        self._cancel_timer()
        self._handle = self.scheduler.call_later(self.debounce_ms, self._settle)

    def reset(self) -> None:
        self.set_query("")

    def close(self) -> None:
        self._cancel_timer()
        self._closed = True

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _settle(self) -> None:
        self._handle = None
        if self._closed:
            return
        if self.debounced == self.raw:
            return
        self.debounced = self.raw
        if self.on_settle is not None:
            self.on_settle(self.debounced)
