"""Token-bucket rate limiter refilled by a background thread."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Optional, Union


class RateLimiter:
    """Allow at most ``rate`` operations per ``per`` seconds.

    The bucket starts full with ``rate`` tokens and gains one token every
    ``per / rate`` seconds, never holding more than ``rate``.
    """

    def __init__(self, rate: int, per: Union[float, timedelta]) -> None:
        if isinstance(per, timedelta):
            per = per.total_seconds()
        if rate <= 0:
            raise ValueError(f"rate must be positive, not {rate}")
        if per <= 0:
            raise ValueError(f"per must be a positive duration, not {per}")
        self._capacity = rate
        self._tokens = rate
        self._interval = per / rate
        self._cond = threading.Condition()
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._refill, daemon=True)
        self._thread.start()

    def _refill(self) -> None:
        next_tick = time.monotonic() + self._interval
        while not self._stopped.wait(max(0.0, next_tick - time.monotonic())):
            with self._cond:
                if self._tokens < self._capacity:
                    self._tokens += 1
                    self._cond.notify()
            next_tick += self._interval
            now = time.monotonic()
            if next_tick < now:
                next_tick = now + self._interval

    def allow(self) -> bool:
        """Take a token if one is available, without waiting."""
        with self._cond:
            if self._tokens > 0:
                self._tokens -= 1
                return True
            return False

    def wait(self, timeout: Optional[float] = None) -> None:
        """Take a token, waiting up to ``timeout`` seconds for one.

        Raises :class:`TimeoutError` if no token arrives in time.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._tokens > 0, timeout):
                raise TimeoutError("rate limiter: timed out waiting for a token")
            self._tokens -= 1

    def stop(self) -> None:
        """Stop refilling the bucket."""
        if self._stopped.is_set():
            raise RuntimeError("rate limiter already stopped")
        self._stopped.set()
        self._thread.join()