"""Iteration helpers."""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

X = TypeVar("X")
Y = TypeVar("Y")


def zip_pairs(a: Iterable[X], b: Iterable[Y]) -> Iterator[tuple[X, Y]]:
    """Yield pairs from two iterables, stopping when either runs out.

    Each step takes the next value from ``a`` before the one from ``b``.
    """
    yield from zip(a, b)