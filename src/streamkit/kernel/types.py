"""Functional type aliases shared across the package."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

# Side-effecting operation over one value.
Consumer = Callable[[T], Any]
BiConsumer = Callable[[T, U], Any]

Func = Callable[[T], R]
BiFunc = Callable[[T, U], R]
BinaryOperator = Callable[[T, T], T]

Predicate = Callable[[T], bool]
Runnable = Callable[[], Any]

# No requirement that a new or distinct result is returned on each call.
Supplier = Callable[[], T]

# Negative, zero or positive as the first argument is less than, equal to,
# or greater than the second.
Comparator = Callable[[T, T], int]
