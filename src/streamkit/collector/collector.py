"""Collector - the four-function mutable reduction protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")
A = TypeVar("A")
R = TypeVar("R")


def identity_finisher(container: Any) -> Any:
    """Pass the accumulation container through as the result."""
    return container


@dataclass(frozen=True)
class Collector(Generic[T, A, R]):
    """
    A mutable reduction that folds elements into a result container.

    A Collector is four functions working together:
    - supplier: creates a fresh result container
    - accumulator: folds one element into a container, mutating it in place
    - combiner: merges two containers built by the same supplier
    - finisher: turns the container into the final result (identity by default)

    Collectors are immutable and reusable; each reduction calls the supplier
    exactly once. Reduction is always sequential, so the combiner is never
    invoked by this package. It is kept so a collector stays valid for a
    parallel reduction, and stock collectors supply a working one.

    Attributes:
        supplier: () -> A
        accumulator: (A, T) -> None
        combiner: (A, A) -> A
        finisher: (A) -> R
    """

    supplier: Callable[[], A]
    accumulator: Callable[[A, T], Any]
    combiner: Callable[[A, A], A]
    finisher: Callable[[A], R] = field(default=identity_finisher)

    @staticmethod
    def of(
        supplier: Callable[[], A],
        accumulator: Callable[[A, T], Any],
        combiner: Callable[[A, A], A],
        finisher: Callable[[A], R] | None = None,
    ) -> Collector[T, A, R]:
        """Build a Collector from its functions.

        No purity checks are made. When ``finisher`` is omitted the container
        itself is the result, so R is assumed to be A.

        Args:
            supplier: Creates a new result container
            accumulator: Folds an element into a container in place
            combiner: Merges two containers into one
            finisher: Final transform of the container

        Returns:
            Collector built from the given functions
        """
        return Collector(
            supplier=supplier,
            accumulator=accumulator,
            combiner=combiner,
            finisher=finisher if finisher is not None else identity_finisher,
        )
