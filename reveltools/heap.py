"""A priority queue backed by a binary heap."""

from __future__ import annotations

import heapq
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar


class _Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=_Comparable)


class HeapType(Enum):
    """Ordering strategy of a priority queue.

    ``MIN_HEAP`` yields the greatest item first; ``MAX_HEAP`` yields the
    smallest item first.
    """

    MIN_HEAP = 0
    MAX_HEAP = 1


class _Entry(Generic[T]):
    """Heap slot that orders its item according to the heap type."""

    __slots__ = ("item", "greatest_first")

    def __init__(self, item: T, greatest_first: bool) -> None:
        self.item = item
        self.greatest_first = greatest_first

    def __lt__(self, other: _Entry[T]) -> bool:
        if self.greatest_first:
            return bool(self.item > other.item)
        return bool(self.item < other.item)


class PriorityQueue(Generic[T]):
    """Queue that hands out items in priority order rather than arrival order."""

    def __init__(self, heap_type: HeapType = HeapType.MAX_HEAP) -> None:
        if not isinstance(heap_type, HeapType):
            raise TypeError(f"heap_type must be a HeapType, not {heap_type!r}")
        self._heap_type = heap_type
        self._greatest_first = heap_type is HeapType.MIN_HEAP
        self._entries: list[_Entry[T]] = []

    @property
    def heap_type(self) -> HeapType:
        return self._heap_type

    def enqueue(self, item: T) -> None:
        """Insert an item."""
        heapq.heappush(self._entries, _Entry(item, self._greatest_first))

    def dequeue(self) -> T:
        """Remove and return the item with the highest priority."""
        if not self._entries:
            raise IndexError("dequeue from an empty priority queue")
        return heapq.heappop(self._entries).item

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._heap_type.name}, size={len(self)})"