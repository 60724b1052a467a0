"""A fixed set of worker threads consuming jobs from a bounded queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Deque

Job = Callable[[], object]


class WorkerPool:
    """Run submitted jobs on ``workers`` threads.

    Up to ``queue_size`` jobs may wait for a worker; with ``queue_size`` of
    zero, :meth:`submit` returns only once a worker has taken the job.
    Exceptions raised by jobs are collected and returned by :meth:`wait`.
    """

    def __init__(self, workers: int, queue_size: int) -> None:
        if workers < 0:
            raise ValueError(f"workers must not be negative, not {workers}")
        if queue_size < 0:
            raise ValueError(f"queue_size must not be negative, not {queue_size}")
        self._queue_size = queue_size
        self._capacity = max(queue_size, 1)
        self._jobs: Deque[Job] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._submitted = 0
        self._taken = 0
        self._errors: list[BaseException] = []
        self._threads = [threading.Thread(target=self._work, daemon=True) for _ in range(workers)]
        for thread in self._threads:
            thread.start()

    def _next_job(self) -> Job | None:
        with self._cond:
            while not self._jobs and not self._closed:
                self._cond.wait()
            if not self._jobs:
                return None
            job = self._jobs.popleft()
            self._taken += 1
            self._cond.notify_all()
            return job

    def _work(self) -> None:
        while (job := self._next_job()) is not None:
            try:
                job()
            except Exception as exc:  # noqa: BLE001
                with self._cond:
                    self._errors.append(exc)

    def submit(self, job: Job) -> None:
        """Hand a job to the pool, waiting while the queue is full."""
        with self._cond:
            if self._closed:
                raise RuntimeError("submit to a closed worker pool")
            while len(self._jobs) >= self._capacity:
                self._cond.wait()
            if self._closed:
                raise RuntimeError("submit to a closed worker pool")
            self._jobs.append(job)
            ticket = self._submitted
            self._submitted += 1
            self._cond.notify_all()
            if self._queue_size == 0:
                self._cond.wait_for(lambda: self._taken > ticket)

    def close(self) -> None:
        """Accept no more jobs; workers finish the queued ones and exit."""
        with self._cond:
            if self._closed:
                raise RuntimeError("worker pool already closed")
            self._closed = True
            self._cond.notify_all()

    def wait(self) -> list[BaseException]:
        """Wait for every worker to exit and return the collected exceptions."""
        for thread in self._threads:
            thread.join()
        with self._cond:
            return list(self._errors)