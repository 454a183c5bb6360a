"""Periodic timer running its callback on a background thread."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from types import TracebackType
from typing import Callable, Optional, Type, Union

from kvik.logger import get_logger

_log = get_logger("Timer")

Interval = Union[float, int, timedelta]


def _seconds(interval: Interval) -> float:
    if isinstance(interval, timedelta):
        return interval.total_seconds()
    return float(interval)


class Timer:
    """Calls ``callback`` every ``interval`` (seconds or timedelta).

    The first call happens one interval after construction. Execution times
    are on the :func:`time.monotonic` clock and can be moved with
    :meth:`set_next_exec`, also from inside the callback.
    """

    def __init__(self, interval: Interval, callback: Callable[[], None]) -> None:
        self._interval = _seconds(interval)
        self._callback = callback
        self._cond = threading.Condition()
        self._next_exec = time.monotonic() + self._interval
        self._running = True
        self._thread = threading.Thread(target=self._run, name="kvik-timer", daemon=True)
        self._thread.start()

    @property
    def interval(self) -> float:
        """Interval between calls in seconds."""
        return self._interval

    def set_next_exec(self, when: float) -> None:
        """Schedule the next call at monotonic time ``when``."""
        with self._cond:
            self._next_exec = when
            self._cond.notify_all()

    def stop(self) -> None:
        """Stop the timer and wait for its thread, unless called from it."""
        with self._cond:
            self._running = False
            self._cond.notify_all()
        if threading.current_thread() is not self._thread:
            self._thread.join()

    def __enter__(self) -> "Timer":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.stop()

    def _run(self) -> None:
        while True:
            with self._cond:
                while self._running:
                    remaining = self._next_exec - time.monotonic()
                    if remaining <= 0:
                        break
                    self._cond.wait(remaining)
                if not self._running:
                    return
                # The callback may override this
                self._next_exec += self._interval
            try:
                self._callback()
            except Exception:
                _log.exception("Timer callback failed")