"""LIFO stack and FIFO queue with draining iteration."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out collection."""

    def __init__(self, *args: T) -> None:
        self._items: deque[T] = deque(args)

    def push(self, item: T) -> None:
        """Put an item on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def drain(self) -> Iterator[T]:
        """Pop and yield items until the stack is empty."""
        while self._items:
            yield self.pop()

    def drain_indexed(self) -> Iterator[tuple[int, T]]:
        """Pop and yield ``(index, item)`` pairs until the stack is empty."""
        yield from enumerate(self.drain())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._items))})"


class Queue(Generic[T]):
    """First-in, first-out collection."""

    def __init__(self, *args: T) -> None:
        self._items: deque[T] = deque(args)

    def enqueue(self, item: T) -> None:
        """Add an item at the back."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def drain(self) -> Iterator[T]:
        """Dequeue and yield items until the queue is empty."""
        while self._items:
            yield self.dequeue()

    def drain_indexed(self) -> Iterator[tuple[int, T]]:
        """Dequeue and yield ``(index, item)`` pairs until the queue is empty."""
        yield from enumerate(self.drain())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._items))})"