"""
Cancellable repeating timers that drive the game tick.

The engine only ever calls start() and cancel(); which implementation it
gets decides whether ticks come from wall-clock time or from the caller.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Base class/interface for a repeating timer.

    start() replaces any previous arming, so at most one timer is live.
    """

    def __init__(self):
        self.interval_ms: Optional[int] = None
        # Called with the exception when a timed callback fails
        self.on_error: Optional[Callable[[Exception], None]] = None

    @property
    def active(self) -> bool:
        raise NotImplementedError

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    A timer that only fires when fire() is called.

    Used by tests and the headless runner to step the game synchronously.
    """

    def __init__(self):
        super().__init__()
        self._callback: Optional[Callable[[], None]] = None
        self.start_count = 0
        self.cancel_count = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.cancel()
        self.interval_ms = interval_ms
        self._callback = callback
        self.start_count += 1

    def cancel(self) -> None:
        if self._callback is not None:
            self.cancel_count += 1
        self._callback = None

    def fire(self) -> bool:
        """Invoke the armed callback once. Returns False when nothing is armed."""
        if self._callback is None:
            return False
        self._callback()
        return True


class ThreadedScheduler(Scheduler):
    """
    Repeating timer built from a chain of threading.Timer objects.

    Every callback runs while holding ``lock``; callers that touch the same
    state from other threads should hold it too. A generation counter makes
    a cancel() or start() issued from inside the callback stick: the old
    chain stops instead of re-arming itself.
    """

    def __init__(self, lock: Optional[threading.RLock] = None):
        super().__init__()
        self.lock = lock or threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def active(self) -> bool:
        return self._timer is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        with self.lock:
            self.cancel()
            self.interval_ms = interval_ms
            self._arm(self._generation, interval_ms, callback)

    def cancel(self) -> None:
        with self.lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _arm(self, generation: int, interval_ms: int, callback: Callable[[], None]) -> None:
        timer = threading.Timer(interval_ms / 1000.0, self._fire, args=(generation, interval_ms, callback))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, generation: int, interval_ms: int, callback: Callable[[], None]) -> None:
        with self.lock:
            if generation != self._generation:
                return
            try:
                callback()
            except Exception as e:
                logger.exception("Scheduled callback failed; stopping timer")
                self.cancel()
                if self.on_error is not None:
                    self.on_error(e)
                return
            if generation == self._generation:
                self._arm(generation, interval_ms, callback)
