"""Lazy sequence pipelines - operator functions and the fluent Stream."""

from . import ops
from .ops import (
    all_match,
    any_match,
    collect,
    collection,
    count,
    distinct,
    drop_while,
    filter,
    find_any,
    find_first,
    flat_map,
    for_each,
    limit,
    map,
    map_multi,
    map_reduce,
    max,
    min,
    none_match,
    peek,
    reduce,
    reduce_to_optional,
    skip,
    sorted,
    take_while,
    to_list,
)
from .stream import Stream, natural_order

__all__ = [
    "ops",
    "Stream",
    "natural_order",
    # Non-terminal
    "distinct",
    "drop_while",
    "filter",
    "flat_map",
    "limit",
    "map",
    "map_multi",
    "peek",
    "skip",
    "sorted",
    "take_while",
    # Terminal
    "all_match",
    "any_match",
    "collect",
    "collection",
    "count",
    "find_any",
    "find_first",
    "for_each",
    "map_reduce",
    "max",
    "min",
    "none_match",
    "reduce",
    "reduce_to_optional",
    "to_list",
]
