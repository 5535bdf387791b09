"""Structural equality used by distinct."""

from dataclasses import dataclass

import pytest

from streamkit import is_equal


@dataclass
class Point:
    x: int
    y: int


class Box:
    def __init__(self, content):
        self.content = content


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        (None, None, True),
        (None, "None", False),
        ("None", "None", True),
        (1, 1, True),
        (1, 4, False),
        (3.123, 3.123, True),
        (3.1234567, 3.123, False),
        (True, True, True),
        (True, False, False),
        (True, 1, False),
        (0, False, False),
        ([], [], True),
        ([], [1], False),
        ([1], [1], True),
        ([1, 2, 3], [1, 3, "string"], False),
        ([1, "2", None, {"object": 1}], [1, "2", None, {"object": 1}], True),
        ([1, 2, {"object": 1}], [1, 2, {"object": "string"}], False),
        ({}, {}, True),
        ({}, {"test": 1}, False),
        ({"test": 1}, {}, False),
        ({"test": 1}, {"test": 1}, True),
        ({"test": 1}, {"test": 2}, False),
        ({"test": 1, "deep": {"test": 2}}, {"deep": {"test": 2}, "test": 1}, True),
        ({"test": 1, "deep": {"test": "string"}}, {"test": 1, "deep": {"test": 2}}, False),
        ({1: "a"}, {True: "a"}, False),
        ({True: "a"}, {1: "a"}, False),
        ({(1, 2): "a"}, {(1, 2): "a"}, True),
        ({"a": 1, "b": 2}, {"a": 1, "c": 2}, False),
        ([1], {0: 1}, False),
        ((1, 2), [1, 2], True),
        ({1, 2}, {2, 1}, True),
        ({1, 2}, {1, 3}, False),
    ],
)
def test_is_equal(first, second, expected) -> None:
    assert is_equal(first, second) is expected


def test_identity_short_circuits() -> None:
    value = {"a": [1, 2]}
    assert is_equal(value, value)


def test_dataclasses_compare_by_fields() -> None:
    assert is_equal(Point(1, 2), Point(1, 2))
    assert not is_equal(Point(1, 2), Point(2, 1))


def test_plain_objects_compare_by_attributes() -> None:
    assert is_equal(Box([1, {"a": 2}]), Box([1, {"a": 2}]))
    assert not is_equal(Box(1), Box(2))


def test_different_record_types_are_not_equal() -> None:
    assert not is_equal(Point(1, 2), Box(1))
    assert not is_equal(Point(1, 2), {"x": 1, "y": 2})


def test_is_symmetric_for_nested_values() -> None:
    a = {"list": [1, {"deep": (2, 3)}]}
    b = {"list": [1, {"deep": [2, 3]}]}
    assert is_equal(a, b)
    assert is_equal(b, a)
