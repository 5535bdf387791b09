"""Recursive structural equality used by ``distinct``."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping, Sequence, Set
from typing import Any

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def _kind(value: Any) -> str:
    """Classify a value as one of the structural shapes compared by is_equal."""
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, Set):
        return "set"
    if isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES):
        return "sequence"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return "record"
    if hasattr(value, "__dict__") and not isinstance(value, type) and not callable(value):
        return "record"
    return "scalar"


def _fields(value: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return vars(value)


def _match_all(a: Iterable[Any], b: Iterable[Any], matches: Callable[[Any, Any], bool]) -> bool:
    """Pair every item of ``a`` with a distinct item of ``b`` accepted by ``matches``."""
    remaining = list(b)
    for item in a:
        for index, candidate in enumerate(remaining):
            if matches(item, candidate):
                del remaining[index]
                break
        else:
            return False
    return True


def _mapping_equal(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> bool:
    # Keys match structurally, not by hash: {1: x} and {True: x} differ.
    if len(a) != len(b):
        return False
    return _match_all(
        a.items(),
        b.items(),
        lambda left, right: is_equal(left[0], right[0]) and is_equal(left[1], right[1]),
    )


def _scalar_equal(a: Any, b: Any) -> bool:
    # bool is an int subclass; True must not equal 1 here.
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if a is None or b is None:
        return False
    return bool(a == b)


def is_equal(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` are structurally equal.

    Identity short-circuits to True. Mappings compare by key set and recursive
    value equality, regardless of key order. Lists and tuples compare
    element-wise. Sets compare by size and structural membership. Dataclass
    instances and plain objects compare their fields when they share a type.
    Shapes never match across kinds, so ``[1]`` is not equal to ``{0: 1}``.

    There is no cycle detection: cyclic structures recurse without bound.
    """
    if a is b:
        return True

    kind = _kind(a)
    if kind != _kind(b):
        return False

    if kind == "mapping":
        return _mapping_equal(a, b)

    if kind == "sequence":
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))

    if kind == "set":
        if len(a) != len(b):
            return False
        return _match_all(a, b, is_equal)

    if kind == "record":
        if type(a) is not type(b):
            return False
        return _mapping_equal(_fields(a), _fields(b))

    return _scalar_equal(a, b)
