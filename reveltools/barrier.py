"""A reusable meeting point for a group of threads."""

from __future__ import annotations

import threading


class Barrier:
    """Threads register with :meth:`lock` and meet in :meth:`unlock`.

    ``unlock`` marks the caller as arrived and blocks until every registered
    participant has arrived, at which point all of them are released.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._count = 0
        self._generation = 0

    def lock(self) -> None:
        """Register one more participant."""
        with self._cond:
            self._count += 1

    def unlock(self) -> None:
        """Arrive at the barrier and wait for all other participants."""
        with self._cond:
            if self._count <= 0:
                raise RuntimeError("barrier: unlock without a matching lock")
            self._count -= 1
            if self._count == 0:
                self._generation += 1
                self._cond.notify_all()
                return
            generation = self._generation
            self._cond.wait_for(lambda: self._generation != generation)

    @property
    def pending(self) -> int:
        """Number of participants that have not arrived yet."""
        with self._cond:
            return self._count