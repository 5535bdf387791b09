"""Pipeline operators over single-pass iterators.

Non-terminal operators take an upstream iterator and return a new lazy one.
They pull nothing until their own result is pulled, and then pull only as far
as needed to produce one element. Terminal operators drain an iterator, fully
or until the answer is known, and return a plain value, an Optional or a
collected container.

Iterators are single-pass: once an operator has been handed an iterator, the
caller must not pull from it anywhere else.

Operator laws:

1. Identity: map(it, lambda x: x) yields the same elements as it
2. Fusion: map(map(it, f), g) == map(it, lambda x: g(f(x)))
3. Filter conjunction: filter(filter(it, p), q) == filter(it, lambda x: p(x) and q(x))
4. Count: count(it) == len(to_list(it)) for two equal iterators
"""

from __future__ import annotations

import builtins
import functools
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from streamkit.collector import Collector
from streamkit.kernel.equality import is_equal
from streamkit.kernel.types import (
    BiConsumer,
    BiFunc,
    BinaryOperator,
    Comparator,
    Consumer,
    Func,
    Predicate,
    Supplier,
)
from streamkit.optional import Optional

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
A = TypeVar("A")

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Non-terminal operators
# ---------------------------------------------------------------------------


def map(iterator: Iterator[T], mapper: Func[T, R]) -> Iterator[R]:
    """Transform each element with ``mapper``, one to one."""
    for value in iterator:
        yield mapper(value)


def filter(iterator: Iterator[T], predicate: Predicate[T]) -> Iterator[T]:
    """Keep the elements matching ``predicate``."""
    for value in iterator:
        if predicate(value):
            yield value


def flat_map(iterator: Iterator[T], mapper: Callable[[T], Iterable[R]]) -> Iterator[R]:
    """Replace each element with the contents of ``mapper(element)``.

    Sub-sequences are drained in full, in upstream order, before the next
    upstream element is pulled. Empty sub-sequences contribute nothing.
    """
    for value in iterator:
        yield from mapper(value)


def map_multi(iterator: Iterator[T], mapper: Callable[[T, Callable[[R], None]], Any]) -> Iterator[R]:
    """Replace each element with whatever ``mapper`` emits for it.

    ``mapper(element, emit)`` may call ``emit`` any number of times. Emitted
    values are buffered per element and yielded in emission order.
    """
    for value in iterator:
        buffer: list[R] = []
        mapper(value, buffer.append)
        yield from buffer


def peek(iterator: Iterator[T], consumer: Consumer[T]) -> Iterator[T]:
    """Pass elements through unchanged, calling ``consumer`` on each first."""

    def _observe(value: T) -> T:
        consumer(value)
        return value

    return map(iterator, _observe)


def distinct(iterator: Iterator[T]) -> Iterator[T]:
    """Drop elements structurally equal to an earlier one.

    The first occurrence wins. Elements need not be hashable: every element
    is compared against all previously seen ones with is_equal, so the cost
    is quadratic in the number of distinct elements.
    """
    seen: list[T] = []
    for value in iterator:
        if not any_match(iter(seen), lambda prior: is_equal(prior, value)):
            seen.append(value)
            yield value


def drop_while(iterator: Iterator[T], predicate: Predicate[T]) -> Iterator[T]:
    """Drop the leading elements matching ``predicate``, then yield the rest unfiltered."""
    dropping = True
    for value in iterator:
        if dropping:
            dropping = predicate(value)
            if dropping:
                continue
        yield value


def take_while(iterator: Iterator[T], predicate: Predicate[T]) -> Iterator[T]:
    """Yield elements until the first one failing ``predicate``, then stop for good."""
    for value in iterator:
        if not predicate(value):
            return
        yield value


def skip(iterator: Iterator[T], n: int) -> Iterator[T]:
    """Drop the first ``n`` elements. ``n <= 0`` drops nothing."""
    seen = 0
    for value in iterator:
        seen += 1
        if seen > n:
            yield value


def limit(iterator: Iterator[T], max_size: int) -> Iterator[T]:
    """Yield at most ``max_size`` elements, then stop pulling upstream."""
    if max_size <= 0:
        return
    emitted = 0
    for value in iterator:
        yield value
        emitted += 1
        if emitted >= max_size:
            return


def sorted(iterator: Iterator[T], comparator: Comparator[T] | None = None) -> Iterator[T]:
    """Return an iterator over the elements in sorted order.

    This operator is NOT lazy: it drains the whole upstream iterator as soon
    as it is called, because the smallest element cannot be known before all
    elements are seen. Never use it on an unbounded iterator.

    The sort is stable. Without a comparator elements are ordered by ``<``.

    Args:
        iterator: Upstream elements
        comparator: Returns negative, zero or positive as its first argument
            orders before, equal to or after its second

    Returns:
        Iterator over a sorted list of the drained elements
    """
    key = functools.cmp_to_key(comparator) if comparator is not None else None
    buffered = builtins.sorted(to_list(iterator), key=key)
    logger.debug("sorted drained %d elements", len(buffered))
    return iter(buffered)


# ---------------------------------------------------------------------------
# Terminal operators
# ---------------------------------------------------------------------------


def for_each(iterator: Iterator[T], consumer: Consumer[T]) -> None:
    """Call ``consumer`` on every element, in order."""
    for value in iterator:
        consumer(value)


def collection(iterator: Iterator[T], collector: Collector[T, A, R]) -> R:
    """Run a mutable reduction described by ``collector``.

    The supplier is called once; every element is folded into its container
    with the accumulator and the finisher produces the result.
    """
    container = collector.supplier()
    for value in iterator:
        collector.accumulator(container, value)
    return collector.finisher(container)


def collect(
    iterator: Iterator[T],
    supplier: Supplier[R],
    accumulator: BiConsumer[R, T],
    combiner: BinaryOperator[R],
) -> R:
    """Run a mutable reduction whose container is also the result."""
    return collection(iterator, Collector.of(supplier, accumulator, combiner))


def to_list(iterator: Iterator[T]) -> list[T]:
    """Collect all elements into a list in traversal order."""

    def _concat(left: list[T], right: list[T]) -> list[T]:
        return [*left, *right]

    return collect(iterator, list, lambda acc, value: acc.append(value), _concat)


def reduce(iterator: Iterator[T], identity: T, accumulator: BinaryOperator[T]) -> T:
    """Left fold starting from ``identity``. Returns ``identity`` when empty."""
    result = identity
    for value in iterator:
        result = accumulator(result, value)
    return result


def map_reduce(
    iterator: Iterator[T],
    identity: U,
    accumulator: BiFunc[U, T, U],
    combiner: BinaryOperator[U],
) -> U:
    """Left fold into a result of a different type than the elements.

    ``combiner`` merges two partial results. The fold here is always
    sequential and never calls it; it is accepted so callers write code that
    also holds for a parallel reduction.
    """
    result = identity
    for value in iterator:
        result = accumulator(result, value)
    return result


def count(iterator: Iterator[Any]) -> int:
    """Number of elements."""
    return map_reduce(iterator, 0, lambda acc, _: acc + 1, lambda a, b: a + b)


def reduce_to_optional(iterator: Iterator[T], accumulator: BinaryOperator[T]) -> Optional[T]:
    """Left fold seeded with the first element.

    Returns an empty Optional for an empty iterator. Falsy first elements such
    as 0 or "" are valid seeds. A None result is reported as empty.
    """
    seeded = False
    result: Any = None
    for value in iterator:
        if seeded:
            result = accumulator(result, value)
        else:
            result = value
            seeded = True
    return Optional.of_nullable(result)


def find_first(iterator: Iterator[T]) -> Optional[T]:
    """Pull one element and wrap it. A None element reads as empty."""
    return Optional.of_nullable(next(iter(iterator), None))


def find_any(iterator: Iterator[T]) -> Optional[T]:
    """Same as find_first: sequential pipelines have no cheaper element to offer."""
    return find_first(iterator)


def all_match(iterator: Iterator[T], predicate: Predicate[T]) -> bool:
    """True unless some element fails ``predicate``. Stops at the first failure."""
    for value in iterator:
        if not predicate(value):
            return False
    return True


def any_match(iterator: Iterator[T], predicate: Predicate[T]) -> bool:
    """True once some element matches ``predicate``. Stops at the first match."""
    for value in iterator:
        if predicate(value):
            return True
    return False


def none_match(iterator: Iterator[T], predicate: Predicate[T]) -> bool:
    """True unless some element matches ``predicate``. Stops at the first match."""
    for value in iterator:
        if predicate(value):
            return False
    return True


def min(iterator: Iterator[T], comparator: Comparator[T]) -> Optional[T]:
    """Smallest element per ``comparator``; the earliest of equal minima wins."""
    return reduce_to_optional(iterator, lambda a, b: a if comparator(a, b) <= 0 else b)


def max(iterator: Iterator[T], comparator: Comparator[T]) -> Optional[T]:
    """Largest element per ``comparator``; the earliest of equal maxima wins."""
    return reduce_to_optional(iterator, lambda a, b: a if comparator(a, b) >= 0 else b)
