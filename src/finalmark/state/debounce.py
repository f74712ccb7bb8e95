from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class ScheduledTask(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], ScheduledTask]


def thread_timer(delay: float, callback: Callable[[], None]) -> ScheduledTask:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class Debouncer:
    """
    Coalesces bursts of calls into one run of `action` after `delay` seconds of quiet.
    Each trigger cancels the pending task and schedules a fresh one.
    """

    def __init__(
        self,
        action: Callable[[], None],
        delay: float,
        timer_factory: TimerFactory = thread_timer,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self._action = action
        self._delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.RLock()
        self._pending: Optional[ScheduledTask] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def trigger(self) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
            self._generation += 1
            generation = self._generation
            task = self._timer_factory(self._delay, lambda: self._fire(generation))
            self._pending = task
        task.start()

    def cancel(self) -> None:
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
            self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            # a task that lost the race with cancel() must not run
            if generation != self._generation:
                logger.debug("Dropping superseded recalculation")
                return
            self._pending = None
            # cancel() waits for a running action, so nothing publishes after it returns
            self._action()
