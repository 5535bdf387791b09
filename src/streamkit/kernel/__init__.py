"""Kernel layer - dependency-free building blocks for streamkit."""

from streamkit.kernel.equality import is_equal
from streamkit.kernel.errors import NoSuchElementError, StreamConsumedError, StreamError
from streamkit.kernel.trace import Evidence, Trace
from streamkit.kernel.types import (
    BiConsumer,
    BiFunc,
    BinaryOperator,
    Comparator,
    Consumer,
    Func,
    Predicate,
    Runnable,
    Supplier,
)

__all__ = [
    "is_equal",
    # Errors
    "StreamError",
    "NoSuchElementError",
    "StreamConsumedError",
    # Tracing
    "Evidence",
    "Trace",
    # Function types
    "BiConsumer",
    "BiFunc",
    "BinaryOperator",
    "Comparator",
    "Consumer",
    "Func",
    "Predicate",
    "Runnable",
    "Supplier",
]
