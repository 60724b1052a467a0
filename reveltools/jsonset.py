"""An unordered set of unique values that serialises to and from JSON arrays."""

from __future__ import annotations

import json
from typing import Any, Hashable, Iterable, Iterator, Optional, Union

_ARRAY_ERROR = "Set: expected JSON array"

JSONText = Union[str, bytes, bytearray]


def _is_null(text: JSONText) -> bool:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text) == b"null"
    return text == "null"


def _decode_array(text: JSONText) -> list[Any]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(_ARRAY_ERROR)
    return data


class Set:
    """Unordered collection of unique, hashable values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._items: dict[Hashable, None] = {}
        for item in items:
            self.add(item)

    def add(self, value: Hashable) -> None:
        """Insert a value."""
        try:
            self._items[value] = None
        except TypeError:
            raise TypeError(f"Set: unhashable element {value!r}") from None

    def has(self, value: Hashable) -> bool:
        """Report whether the value is present."""
        return value in self

    def __contains__(self, value: object) -> bool:
        try:
            return value in self._items
        except TypeError:
            return False

    def discard(self, value: Hashable) -> None:
        """Remove a value if present."""
        self._items.pop(value, None)

    def union(self, other: Iterable[Hashable]) -> Set:
        """Return a new set holding the elements of both sets."""
        result = Set(self)
        for item in other:
            result.add(item)
        return result

    def intersection(self, other: Iterable[Hashable]) -> Set:
        """Return a new set holding only the elements present in both."""
        others = other if isinstance(other, (Set, set, frozenset)) else Set(other)
        return Set(item for item in self if item in others)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._items))

    def enumerate(self) -> Iterator[tuple[int, Hashable]]:
        """Yield ``(index, value)`` pairs over the set."""
        yield from enumerate(self)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Set):
            return self._items.keys() == other._items.keys()
        if isinstance(other, (set, frozenset)):
            return self._items.keys() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def to_json(self) -> str:
        """Serialise the set as a compact JSON array."""
        return json.dumps(list(self._items), separators=(",", ":"))

    def load_json(self, text: JSONText) -> None:
        """Replace the contents with the elements of a JSON array.

        ``null`` leaves the set empty.
        """
        if _is_null(text):
            self._items.clear()
            return
        values = _decode_array(text)
        fresh = Set(values)
        self._items = fresh._items

    @classmethod
    def from_json(cls, text: JSONText) -> Optional[Set]:
        """Build a set from a JSON array; ``null`` gives ``None``."""
        if _is_null(text):
            return None
        return cls(_decode_array(text))


def dumps(value: Optional[Set]) -> str:
    """Serialise a set, or ``None`` as ``null``."""
    if value is None:
        return "null"
    return value.to_json()


def loads(text: JSONText) -> Optional[Set]:
    """Parse a JSON array into a set, or ``null`` into ``None``."""
    return Set.from_json(text)