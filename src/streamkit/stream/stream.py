"""Fluent Stream wrapper over the pipeline operators."""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from streamkit.collector import Collector
from streamkit.config import StreamConfig
from streamkit.kernel.errors import StreamConsumedError
from streamkit.kernel.trace import Trace
from streamkit.kernel.types import BinaryOperator, Comparator, Consumer, Predicate
from streamkit.optional import Optional

from . import ops

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def natural_order(a: Any, b: Any) -> int:
    """Comparator ordering values by ``<`` and ``>``."""
    return (a > b) - (a < b)


class Stream(Generic[T]):
    """A single-use, lazily evaluated sequence of elements.

    Non-terminal methods link a new stage and return a new Stream; terminal
    methods drain the pipeline and return a result. Either way the Stream
    they were called on is spent: calling another method on it raises
    StreamConsumedError. ``iter(stream)`` hands out the underlying iterator
    and spends the Stream too.

    Config and trace are propagated to every downstream Stream. When tracing
    is on, the pipeline records one "pipeline" root event, a "stage" event per
    linked operator and a "terminal" event carrying the drain duration.
    """

    def __init__(
        self,
        source: Iterable[T],
        config: StreamConfig | None = None,
        trace: Trace | None = None,
        _root_id: int | None = None,
        _linked: bool = False,
    ) -> None:
        self._iterator: Iterator[T] = iter(source)
        self.config = config if config is not None else StreamConfig()
        if trace is None and self.config.trace:
            trace = Trace()
        self.trace = trace
        self._consumed = False
        self._root_id = _root_id
        if _linked:
            return
        logger.debug("stream '%s' created", self.config.name)
        if self.trace is not None and self._root_id is None:
            self._root_id = self.trace.pipeline(self.config.name)

    # --------- factories ----------

    @classmethod
    def of(cls, *values: T, config: StreamConfig | None = None, trace: Trace | None = None) -> Stream[T]:
        return cls(values, config=config, trace=trace)

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[T], config: StreamConfig | None = None, trace: Trace | None = None
    ) -> Stream[T]:
        return cls(iterable, config=config, trace=trace)

    @classmethod
    def empty(cls, config: StreamConfig | None = None, trace: Trace | None = None) -> Stream[Any]:
        return cls((), config=config, trace=trace)

    @classmethod
    def iterate(
        cls,
        seed: T,
        next_fn: Callable[[T], T],
        has_next: Predicate[T] | None = None,
        config: StreamConfig | None = None,
        trace: Trace | None = None,
    ) -> Stream[T]:
        """Stream of seed, next_fn(seed), next_fn(next_fn(seed)), ...

        Unbounded unless ``has_next`` is given; bound it with limit() or
        take_while() before a draining terminal.
        """

        def _generate() -> Iterator[T]:
            value = seed
            while has_next is None or has_next(value):
                yield value
                value = next_fn(value)

        return cls(_generate(), config=config, trace=trace)

    @classmethod
    def generate(
        cls, supplier: Callable[[], T], config: StreamConfig | None = None, trace: Trace | None = None
    ) -> Stream[T]:
        """Unbounded stream of values produced by calling ``supplier``."""

        def _generate() -> Iterator[T]:
            while True:
                yield supplier()

        return cls(_generate(), config=config, trace=trace)

    @classmethod
    def concat(cls, first: Stream[T], second: Stream[T]) -> Stream[T]:
        """Lazily chain two streams. Both are spent; ``first`` supplies config and trace.

        Neither stream is touched when either one is already spent.
        """
        for stream in (first, second):
            if stream.consumed:
                raise StreamConsumedError(stream.config.name)
        return cls(
            itertools.chain(iter(first), iter(second)),
            config=first.config,
            trace=first.trace,
            _root_id=first._root_id,
        )

    # --------- plumbing ----------

    def _claim(self) -> Iterator[T]:
        if self._consumed:
            raise StreamConsumedError(self.config.name)
        self._consumed = True
        return self._iterator

    def _link(self, op_name: str, op: Callable[..., Iterator[Any]], *args: Any) -> Stream[Any]:
        upstream = self._claim()
        if self.trace is not None:
            self.trace.stage(self._root_id, op_name)
        logger.debug("stream '%s' linked stage %s", self.config.name, op_name)
        return Stream(
            op(upstream, *args),
            config=self.config,
            trace=self.trace,
            _root_id=self._root_id,
            _linked=True,
        )

    def _terminal(self, op_name: str, op: Callable[..., R], *args: Any) -> R:
        upstream = self._claim()
        start_time = time.perf_counter()
        result = op(upstream, *args)
        duration_ms = (time.perf_counter() - start_time) * 1000
        if self.trace is not None:
            self.trace.terminal(self._root_id, op_name, duration_ms)
        logger.debug("stream '%s' finished %s in %.3fms", self.config.name, op_name, duration_ms)
        return result

    def __iter__(self) -> Iterator[T]:
        return self._claim()

    @property
    def consumed(self) -> bool:
        return self._consumed

    # --------- non-terminal operators (lazy) ----------

    def map(self, mapper: Callable[[T], U]) -> Stream[U]:
        return self._link("map", ops.map, mapper)

    def filter(self, predicate: Predicate[T]) -> Stream[T]:
        return self._link("filter", ops.filter, predicate)

    def flat_map(self, mapper: Callable[[T], Iterable[U]]) -> Stream[U]:
        """Concatenate the iterables (or Streams) produced by ``mapper``."""
        return self._link("flat_map", ops.flat_map, mapper)

    def map_multi(self, mapper: Callable[[T, Callable[[U], None]], Any]) -> Stream[U]:
        return self._link("map_multi", ops.map_multi, mapper)

    def peek(self, consumer: Consumer[T]) -> Stream[T]:
        return self._link("peek", ops.peek, consumer)

    def distinct(self) -> Stream[T]:
        return self._link("distinct", ops.distinct)

    def drop_while(self, predicate: Predicate[T]) -> Stream[T]:
        return self._link("drop_while", ops.drop_while, predicate)

    def take_while(self, predicate: Predicate[T]) -> Stream[T]:
        return self._link("take_while", ops.take_while, predicate)

    def skip(self, n: int) -> Stream[T]:
        return self._link("skip", ops.skip, n)

    def limit(self, max_size: int) -> Stream[T]:
        return self._link("limit", ops.limit, max_size)

    def sorted(self, comparator: Comparator[T] | None = None) -> Stream[T]:
        """Sorted view of the elements.

        Unlike every other stage this one drains its upstream immediately.
        """
        return self._link("sorted", ops.sorted, comparator)

    # --------- terminal operators ----------

    def for_each(self, consumer: Consumer[T]) -> None:
        self._terminal("for_each", ops.for_each, consumer)

    def count(self) -> int:
        return self._terminal("count", ops.count)

    def to_list(self) -> list[T]:
        return self._terminal("to_list", ops.to_list)

    def collect(
        self,
        collector: Collector[T, Any, R] | Callable[[], R],
        accumulator: Callable[[R, T], Any] | None = None,
        combiner: Callable[[R, R], R] | None = None,
    ) -> R:
        """Mutable reduction.

        Accepts either a Collector, or a supplier together with an accumulator
        and a combiner.
        """
        if isinstance(collector, Collector):
            return self._terminal("collect", ops.collection, collector)
        if accumulator is None or combiner is None:
            raise TypeError("collect() with a supplier also needs an accumulator and a combiner")
        return self._terminal("collect", ops.collect, collector, accumulator, combiner)

    def reduce(self, identity: T, accumulator: BinaryOperator[T]) -> T:
        return self._terminal("reduce", ops.reduce, identity, accumulator)

    def reduce_to_optional(self, accumulator: BinaryOperator[T]) -> Optional[T]:
        return self._terminal("reduce_to_optional", ops.reduce_to_optional, accumulator)

    def map_reduce(self, identity: U, accumulator: Callable[[U, T], U], combiner: Callable[[U, U], U]) -> U:
        return self._terminal("map_reduce", ops.map_reduce, identity, accumulator, combiner)

    def find_first(self) -> Optional[T]:
        return self._terminal("find_first", ops.find_first)

    def find_any(self) -> Optional[T]:
        return self._terminal("find_any", ops.find_any)

    def all_match(self, predicate: Predicate[T]) -> bool:
        return self._terminal("all_match", ops.all_match, predicate)

    def any_match(self, predicate: Predicate[T]) -> bool:
        return self._terminal("any_match", ops.any_match, predicate)

    def none_match(self, predicate: Predicate[T]) -> bool:
        return self._terminal("none_match", ops.none_match, predicate)

    def min(self, comparator: Comparator[T] = natural_order) -> Optional[T]:
        return self._terminal("min", ops.min, comparator)

    def max(self, comparator: Comparator[T] = natural_order) -> Optional[T]:
        return self._terminal("max", ops.max, comparator)

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return f"Stream(name={self.config.name!r}, {state})"
