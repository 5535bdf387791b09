from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class CountingIterator:
    """Iterator that records how many elements have been pulled from it."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._it = iter(values)
        self.pulls = 0

    def __iter__(self) -> CountingIterator:
        return self

    def __next__(self) -> Any:
        value = next(self._it)
        self.pulls += 1
        return value


def add(a: int, b: int) -> int:
    return a + b


def numeric(a: int, b: int) -> int:
    return a - b
