"""Test the value classifier in ObjectViewEngine/core/classifier.py

Covers:
1. Expandable kinds (Object, Array, Map, Set)
2. Terminal kinds, including BigInt and the Undefined sentinel
3. The sys/builtins ambient singletons classifying as Object
4. Values that break introspection falling back to Other"""

import builtins
import collections
import datetime
import enum
import functools
import os
import sys
import types
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

# Add project root directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ObjectViewEngine.core.classifier import (
    MAX_SAFE_INTEGER,
    UNDEFINED,
    Kind,
    classify,
    is_expandable,
    is_function,
    is_numeric,
    is_object,
    type_of,
)


class Color(enum.Enum):
    RED = 1


class Level(enum.IntEnum):
    LOW = 1


@dataclass
class Point:
    x: int
    y: int


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self):
        self.a = 1


class Hostile:
    """Blows up on any attempt to look at its class."""

    @property
    def __class__(self):
        raise RuntimeError("no peeking")


def plain_function():
    return 1


def generator_function():
    yield 1


class TestClassifier:
    """Kind and expandable flag for every family of value"""

    def test_expandable_kinds(self):
        assert classify({"a": 1}).kind is Kind.MAP
        assert classify(collections.OrderedDict()).kind is Kind.MAP
        assert classify(types.MappingProxyType({})).kind is Kind.MAP
        assert classify([1, 2]).kind is Kind.ARRAY
        assert classify((1, 2)).kind is Kind.ARRAY
        assert classify(collections.deque()).kind is Kind.ARRAY
        assert classify(range(3)).kind is Kind.ARRAY
        assert classify({1, 2}).kind is Kind.SET
        assert classify(frozenset()).kind is Kind.SET
        assert classify(Point(1, 2)).kind is Kind.OBJECT
        assert classify(types.SimpleNamespace(a=1)).kind is Kind.OBJECT
        assert classify(Slotted()).kind is Kind.OBJECT
        for value in ({}, [], set(), Point(0, 0)):
            assert classify(value).expandable is True
            assert is_expandable(value) is True

    def test_terminal_kinds(self):
        assert classify(1).kind is Kind.NUMBER
        assert classify(1.5).kind is Kind.NUMBER
        assert classify(Decimal("2.5")).kind is Kind.NUMBER
        assert classify(MAX_SAFE_INTEGER).kind is Kind.NUMBER
        assert classify(MAX_SAFE_INTEGER + 1).kind is Kind.BIGINT
        assert classify(-(2 ** 64)).kind is Kind.BIGINT
        assert classify(True).kind is Kind.BOOLEAN
        assert classify("text").kind is Kind.STRING
        assert classify(None).kind is Kind.NULL
        assert classify(UNDEFINED).kind is Kind.UNDEFINED
        assert classify(Color.RED).kind is Kind.SYMBOL
        assert classify(Level.LOW).kind is Kind.SYMBOL
        assert classify(b"raw").kind is Kind.OTHER
        assert classify(datetime.date(2024, 1, 1)).kind is Kind.OTHER
        for value in (1, "x", None, b"raw", plain_function):
            assert classify(value).expandable is False

    def test_function_kinds(self):
        assert classify(plain_function).kind is Kind.FUNCTION
        assert classify(generator_function).kind is Kind.FUNCTION
        assert classify(lambda: None).kind is Kind.FUNCTION
        assert classify(len).kind is Kind.FUNCTION
        assert classify(Point).kind is Kind.FUNCTION
        assert classify("abc".upper).kind is Kind.FUNCTION
        assert classify(functools.partial(plain_function)).kind is Kind.FUNCTION
        assert is_function(generator_function) is True
        assert is_expandable(generator_function) is False

    def test_generator_object_is_other(self):
        assert classify(generator_function()).kind is Kind.OTHER

    def test_ambient_singletons_are_objects(self):
        assert classify(sys).kind is Kind.OBJECT
        assert classify(builtins).kind is Kind.OBJECT
        assert is_object(sys) is True
        # Any other module is just a leaf
        assert classify(os).kind is Kind.OTHER

    def test_numeric_predicate(self):
        assert is_numeric(3) is True
        assert is_numeric(2.0) is True
        assert is_numeric(2 ** 60) is True
        assert is_numeric(True) is False
        assert is_numeric("3") is False
        assert classify(2 ** 60).numeric is True

    def test_type_of_returns_kind_name(self):
        assert type_of({}) == "Map"
        assert type_of([]) == "Array"
        assert type_of(None) == "Null"
        assert str(Kind.BIGINT) == "BigInt"

    def test_hostile_value_falls_back_to_other(self):
        classification = classify(Hostile())
        assert classification.kind is Kind.OTHER
        assert classification.expandable is False

    def test_undefined_is_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED
        assert bool(UNDEFINED) is False
        assert repr(UNDEFINED) == "UNDEFINED"
