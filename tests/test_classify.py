"""Tests for content classification and coercion used by Console.log()."""

from dataclasses import dataclass
from decimal import Decimal

import pytest

from scrollback.classify import (
    ContentKind,
    PLACEHOLDER_FUNCTION,
    PLACEHOLDER_OBJECT,
    PLACEHOLDER_UNDEFINED,
    PLACEHOLDER_UNKNOWN,
    classify,
    coerce,
    serialize,
)
from scrollback.live import LiveValue

from conftest import BrokenLive


@dataclass
class Point:
    x: int
    y: int


class Slotted:
    __slots__ = ("a",)

    def __init__(self):
        self.a = 1


class Plain:
    def __init__(self):
        self.name = "plain"


class TestClassify:
    @pytest.mark.parametrize("content, kind", [
        (None, ContentKind.ABSENT),
        (True, ContentKind.BOOLEAN),
        (False, ContentKind.BOOLEAN),
        (0, ContentKind.NUMBER),
        (3.5, ContentKind.NUMBER),
        (Decimal("1.5"), ContentKind.NUMBER),
        ("hi", ContentKind.STRING),
        ("", ContentKind.STRING),
        (len, ContentKind.CALLABLE),
        (LiveValue(1), ContentKind.CALLABLE),
        ({"a": 1}, ContentKind.STRUCTURED),
        ([1, 2], ContentKind.STRUCTURED),
        ((), ContentKind.STRUCTURED),
        ({1}, ContentKind.STRUCTURED),
        (Point(1, 2), ContentKind.STRUCTURED),
        (Plain(), ContentKind.STRUCTURED),
        (b"raw", ContentKind.OTHER),
        (1 + 2j, ContentKind.OTHER),
        (Slotted(), ContentKind.OTHER),
    ])
    def test_kinds(self, content, kind):
        assert classify(content) is kind

    def test_bool_is_not_number(self):
        assert classify(True) is ContentKind.BOOLEAN


class TestCoerce:
    def test_scalars_pass_through(self):
        assert coerce("text") == "text"
        assert coerce(42) == 42
        assert coerce(False) is False

    def test_none_placeholder(self):
        assert coerce(None) == PLACEHOLDER_UNDEFINED

    def test_live_value_is_read(self):
        assert coerce(LiveValue(7)) == 7

    def test_live_value_holding_structure_is_serialized(self):
        assert coerce(LiveValue({"k": 1})) == '{"k":1}'

    def test_plain_function_placeholder(self):
        assert coerce(lambda: 1) == PLACEHOLDER_FUNCTION

    def test_failing_read_placeholder(self):
        assert coerce(BrokenLive()) == PLACEHOLDER_FUNCTION

    def test_read_returning_callable_placeholder(self):
        assert coerce(LiveValue(print)) == PLACEHOLDER_FUNCTION

    def test_structured_serialized(self):
        assert coerce({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'
        assert coerce(Point(1, 2)) == '{"x":1,"y":2}'
        assert coerce(Plain()) == '{"name":"plain"}'

    @pytest.mark.parametrize("empty", [{}, [], (), set()])
    def test_empty_structure_placeholder(self, empty):
        assert coerce(empty) == PLACEHOLDER_OBJECT

    def test_unserializable_structure_placeholder(self):
        assert coerce({"bad": b"bytes"}) == PLACEHOLDER_OBJECT

    def test_unknown_placeholder(self):
        assert coerce(b"raw") == PLACEHOLDER_UNKNOWN
        assert coerce(Slotted()) == PLACEHOLDER_UNKNOWN


def test_serialize_sets_sorted():
    assert serialize({3, 1, 2}) == "[1,2,3]"


def test_deeply_nested_structure_placeholder():
    nested = []
    for _ in range(100_000):
        nested = [nested]
    assert serialize(nested) == PLACEHOLDER_OBJECT
    assert coerce(nested) == PLACEHOLDER_OBJECT
