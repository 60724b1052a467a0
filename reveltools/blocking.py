"""Thread-safe, optionally bounded wrappers around queues and stacks."""

from __future__ import annotations

import threading
from typing import Generic, Optional, Protocol, TypeVar

from reveltools.stack_queue import Queue, Stack

T = TypeVar("T")


class ClosedError(Exception):
    """Raised when taking from a container that is closed and empty."""


class EmptyError(Exception):
    """Raised by the non-blocking take operations when nothing is available."""


class _Queuer(Protocol[T]):
    def enqueue(self, item: T) -> None: ...

    def dequeue(self) -> T: ...

    def __len__(self) -> int: ...


class _Stacker(Protocol[T]):
    def push(self, item: T) -> None: ...

    def pop(self) -> T: ...

    def peek(self) -> T: ...

    def __len__(self) -> int: ...


def _check_buffer(buffer: int) -> int:
    if buffer < 0:
        raise ValueError(f"buffer must be zero (unbounded) or positive, not {buffer}")
    return buffer


class BlockingQueue(Generic[T]):
    """Queue shared between threads.

    ``enqueue`` blocks while the queue holds ``buffer`` items (a buffer of
    zero means unbounded) and ``dequeue`` blocks while it is empty. After
    :meth:`close`, new items are dropped and remaining items can still be
    taken; once they are gone ``dequeue`` raises :class:`ClosedError`.
    """

    def __init__(self, queue: Optional[_Queuer[T]] = None, buffer: int = 0) -> None:
        self._queue: _Queuer[T] = Queue() if queue is None else queue
        self._buffer = _check_buffer(buffer)
        self._lock = threading.Lock()
        self._non_empty = threading.Condition(self._lock)
        self._non_full = threading.Condition(self._lock)
        self._closed = False

    def _full(self) -> bool:
        return self._buffer != 0 and len(self._queue) >= self._buffer

    def enqueue(self, item: T) -> None:
        """Add an item, waiting for room; does nothing once closed."""
        with self._lock:
            while not self._closed and self._full():
                self._non_full.wait()
            if self._closed:
                return
            self._queue.enqueue(item)
            self._non_empty.notify()

    def dequeue(self) -> T:
        """Remove and return the next item, waiting until one is available."""
        with self._lock:
            while not self._closed and len(self._queue) == 0:
                self._non_empty.wait()
            if len(self._queue) == 0:
                raise ClosedError("dequeue from a closed, empty queue")
            item = self._queue.dequeue()
            self._non_full.notify()
            return item

    def try_dequeue(self) -> T:
        """Remove and return the next item without waiting."""
        with self._lock:
            if len(self._queue) == 0:
                raise EmptyError("queue is empty")
            item = self._queue.dequeue()
            self._non_full.notify()
            return item

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def close(self) -> None:
        """Close the queue and wake every waiting thread."""
        with self._lock:
            self._closed = True
            self._non_empty.notify_all()
            self._non_full.notify_all()


class BlockingStack(Generic[T]):
    """Stack shared between threads, with the same rules as :class:`BlockingQueue`."""

    def __init__(self, stack: Optional[_Stacker[T]] = None, buffer: int = 0) -> None:
        self._stack: _Stacker[T] = Stack() if stack is None else stack
        self._buffer = _check_buffer(buffer)
        self._lock = threading.Lock()
        self._non_empty = threading.Condition(self._lock)
        self._non_full = threading.Condition(self._lock)
        self._closed = False

    def _full(self) -> bool:
        return self._buffer != 0 and len(self._stack) >= self._buffer

    def push(self, item: T) -> None:
        """Put an item on top, waiting for room; does nothing once closed."""
        with self._lock:
            while not self._closed and self._full():
                self._non_full.wait()
            if self._closed:
                return
            self._stack.push(item)
            self._non_empty.notify()

    def pop(self) -> T:
        """Remove and return the top item, waiting until one is available."""
        with self._lock:
            while not self._closed and len(self._stack) == 0:
                self._non_empty.wait()
            if len(self._stack) == 0:
                raise ClosedError("pop from a closed, empty stack")
            item = self._stack.pop()
            self._non_full.notify()
            return item

    def try_pop(self) -> T:
        """Remove and return the top item without waiting."""
        with self._lock:
            if len(self._stack) == 0:
                raise EmptyError("stack is empty")
            item = self._stack.pop()
            self._non_full.notify()
            return item

    def peek(self) -> T:
        """Return the top item without removing it."""
        with self._lock:
            return self._stack.peek()

    def __len__(self) -> int:
        with self._lock:
            return len(self._stack)

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def close(self) -> None:
        """Close the stack and wake every waiting thread."""
        with self._lock:
            self._closed = True
            self._non_empty.notify_all()
            self._non_full.notify_all()