"""Stock collectors for common reductions.

Each factory returns a new Collector with a working combiner, so results stay
correct if containers are ever merged.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from .collector import Collector

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
U = TypeVar("U")


def _identity(value: Any) -> Any:
    return value


def to_list() -> Collector[Any, list[Any], list[Any]]:
    """Collect elements into a list in encounter order."""

    def combine(left: list[Any], right: list[Any]) -> list[Any]:
        left.extend(right)
        return left

    return Collector.of(list, lambda acc, value: acc.append(value), combine)


def to_set() -> Collector[Any, set[Any], set[Any]]:
    """Collect elements into a set."""

    def combine(left: set[Any], right: set[Any]) -> set[Any]:
        left.update(right)
        return left

    return Collector.of(set, lambda acc, value: acc.add(value), combine)


def to_dict(
    key_fn: Callable[[T], K],
    value_fn: Callable[[T], U] = _identity,
) -> Collector[T, dict[K, U], dict[K, U]]:
    """Collect elements into a dict.

    Raises:
        ValueError: If two elements map to the same key
    """

    def put(acc: dict[K, U], key: K, value: U) -> None:
        if key in acc:
            raise ValueError(f"Duplicate key {key!r} (values {acc[key]!r} and {value!r})")
        acc[key] = value

    def accumulate(acc: dict[K, U], element: T) -> None:
        put(acc, key_fn(element), value_fn(element))

    def combine(left: dict[K, U], right: dict[K, U]) -> dict[K, U]:
        for key, value in right.items():
            put(left, key, value)
        return left

    return Collector.of(dict, accumulate, combine)


def joining(sep: str = "", prefix: str = "", suffix: str = "") -> Collector[Any, list[str], str]:
    """Concatenate the string form of each element."""

    def combine(left: list[str], right: list[str]) -> list[str]:
        left.extend(right)
        return left

    return Collector.of(
        list,
        lambda acc, value: acc.append(str(value)),
        combine,
        lambda acc: prefix + sep.join(acc) + suffix,
    )


def counting() -> Collector[Any, list[int], int]:
    """Count the elements."""

    def accumulate(acc: list[int], _: Any) -> None:
        acc[0] += 1

    def combine(left: list[int], right: list[int]) -> list[int]:
        left[0] += right[0]
        return left

    return Collector.of(lambda: [0], accumulate, combine, lambda acc: acc[0])


def summing(fn: Callable[[T], Any] = _identity) -> Collector[T, list[Any], Any]:
    """Sum ``fn(element)`` over all elements. 0 for an empty input."""

    def accumulate(acc: list[Any], element: T) -> None:
        acc[0] += fn(element)

    def combine(left: list[Any], right: list[Any]) -> list[Any]:
        left[0] += right[0]
        return left

    return Collector.of(lambda: [0], accumulate, combine, lambda acc: acc[0])


def averaging(fn: Callable[[T], Any] = _identity) -> Collector[T, list[Any], float]:
    """Arithmetic mean of ``fn(element)``. 0.0 for an empty input."""

    def accumulate(acc: list[Any], element: T) -> None:
        acc[0] += fn(element)
        acc[1] += 1

    def combine(left: list[Any], right: list[Any]) -> list[Any]:
        left[0] += right[0]
        left[1] += right[1]
        return left

    def finish(acc: list[Any]) -> float:
        total, count = acc
        return total / count if count else 0.0

    return Collector.of(lambda: [0, 0], accumulate, combine, finish)


def reducing(identity: T, op: Callable[[T, T], T]) -> Collector[T, list[T], T]:
    """Left fold with ``op`` starting from ``identity``."""

    def accumulate(acc: list[T], element: T) -> None:
        acc[0] = op(acc[0], element)

    def combine(left: list[T], right: list[T]) -> list[T]:
        left[0] = op(left[0], right[0])
        return left

    return Collector.of(lambda: [identity], accumulate, combine, lambda acc: acc[0])


def mapping(fn: Callable[[T], U], downstream: Collector[U, Any, Any]) -> Collector[T, Any, Any]:
    """Apply ``fn`` to each element before handing it to ``downstream``."""
    return Collector.of(
        downstream.supplier,
        lambda acc, element: downstream.accumulator(acc, fn(element)),
        downstream.combiner,
        downstream.finisher,
    )


def filtering(predicate: Callable[[T], bool], downstream: Collector[T, Any, Any]) -> Collector[T, Any, Any]:
    """Hand only elements matching ``predicate`` to ``downstream``."""

    def accumulate(acc: Any, element: T) -> None:
        if predicate(element):
            downstream.accumulator(acc, element)

    return Collector.of(downstream.supplier, accumulate, downstream.combiner, downstream.finisher)


def collecting_and_then(downstream: Collector[T, Any, U], finisher: Callable[[U], Any]) -> Collector[T, Any, Any]:
    """Apply an extra finishing transform after ``downstream`` finishes."""
    return Collector.of(
        downstream.supplier,
        downstream.accumulator,
        downstream.combiner,
        lambda acc: finisher(downstream.finisher(acc)),
    )


def grouping_by(
    key_fn: Callable[[T], K],
    downstream: Collector[T, Any, Any] | None = None,
) -> Collector[T, dict[K, Any], dict[K, Any]]:
    """Group elements by ``key_fn`` and reduce each group with ``downstream``.

    Groups appear in first-encounter order of their keys. Each group defaults
    to a list of its elements.
    """
    inner = downstream or to_list()

    def accumulate(acc: dict[K, Any], element: T) -> None:
        key = key_fn(element)
        if key not in acc:
            acc[key] = inner.supplier()
        inner.accumulator(acc[key], element)

    def combine(left: dict[K, Any], right: dict[K, Any]) -> dict[K, Any]:
        for key, container in right.items():
            left[key] = inner.combiner(left[key], container) if key in left else container
        return left

    def finish(acc: dict[K, Any]) -> dict[K, Any]:
        return {key: inner.finisher(container) for key, container in acc.items()}

    return Collector.of(dict, accumulate, combine, finish)


def partitioning_by(
    predicate: Callable[[T], bool],
    downstream: Collector[T, Any, Any] | None = None,
) -> Collector[T, dict[bool, Any], dict[bool, Any]]:
    """Split elements on ``predicate``. Both True and False keys are always present."""
    inner = downstream or to_list()

    def supply() -> dict[bool, Any]:
        return {False: inner.supplier(), True: inner.supplier()}

    def accumulate(acc: dict[bool, Any], element: T) -> None:
        inner.accumulator(acc[bool(predicate(element))], element)

    def combine(left: dict[bool, Any], right: dict[bool, Any]) -> dict[bool, Any]:
        return {
            False: inner.combiner(left[False], right[False]),
            True: inner.combiner(left[True], right[True]),
        }

    def finish(acc: dict[bool, Any]) -> dict[bool, Any]:
        return {False: inner.finisher(acc[False]), True: inner.finisher(acc[True])}

    return Collector.of(supply, accumulate, combine, finish)
