"""Value classifier: maps any Python value onto a closed set of kinds.

The renderer never inspects types itself. It asks this module which kind a value
belongs to and whether the kind is expandable (Object/Array/Map/Set), so the
branching rules live in exactly one place."""

from __future__ import annotations

import builtins
import enum
import inspect
import sys
import types
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from functools import partial
from typing import Any

# Largest integer a float represents exactly; ints past it are reported as BigInt
MAX_SAFE_INTEGER = 2 ** 53 - 1

_TEXT_LIKE = (str, bytes, bytearray, memoryview)
_PLAIN_NUMBERS = (float, complex, Decimal, Fraction)


class Kind(str, enum.Enum):
    """Semantic kind of a value."""

    OBJECT = "Object"
    ARRAY = "Array"
    MAP = "Map"
    SET = "Set"
    FUNCTION = "Function"
    NUMBER = "Number"
    BIGINT = "BigInt"
    STRING = "String"
    BOOLEAN = "Boolean"
    NULL = "Null"
    UNDEFINED = "Undefined"
    SYMBOL = "Symbol"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


EXPANDABLE_KINDS = frozenset({Kind.OBJECT, Kind.ARRAY, Kind.MAP, Kind.SET})


class _UndefinedType:
    """Singleton marking a value that was never assigned."""

    _instance: "_UndefinedType | None" = None

    def __new__(cls) -> "_UndefinedType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _UndefinedType()

# Host singletons whose attribute namespace is worth browsing even though they are modules
AMBIENT_SINGLETONS = (sys, builtins)


@dataclass(frozen=True)
class Classification:
    """Result of classifying one value."""

    kind: Kind
    expandable: bool

    @property
    def numeric(self) -> bool:
        return self.kind in (Kind.NUMBER, Kind.BIGINT)


def _is_ambient_singleton(value: Any) -> bool:
    return any(value is singleton for singleton in AMBIENT_SINGLETONS)


def _has_own_attributes(value: Any) -> bool:
    """True when the instance stores attributes of its own (``__dict__`` or ``__slots__``)."""
    if hasattr(value, "__dict__"):
        return True
    for klass in type(value).__mro__:
        if klass.__dict__.get("__slots__"):
            return True
    return False


def _detect_kind(value: Any) -> Kind:
    if value is None:
        return Kind.NULL
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if isinstance(value, enum.Enum):
        return Kind.SYMBOL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, int):
        return Kind.NUMBER if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER else Kind.BIGINT
    if isinstance(value, _PLAIN_NUMBERS):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if _is_ambient_singleton(value):
        return Kind.OBJECT
    if inspect.isclass(value) or inspect.isroutine(value) or isinstance(value, partial):
        return Kind.FUNCTION
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, Set):
        return Kind.SET
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_LIKE):
        return Kind.ARRAY
    if isinstance(value, (types.ModuleType, *_TEXT_LIKE)):
        return Kind.OTHER
    if inspect.isgenerator(value) or inspect.iscoroutine(value):
        return Kind.OTHER
    if callable(value) and not _has_own_attributes(value):
        return Kind.FUNCTION
    if _has_own_attributes(value):
        return Kind.OBJECT
    return Kind.OTHER


def classify(value: Any) -> Classification:
    """Classify ``value``; exotic objects that break introspection fall back to ``Other``."""
    try:
        kind = _detect_kind(value)
    except RecursionError:
        # stack exhaustion is the caller's concern, not a property of the value
        raise
    except Exception:
        kind = Kind.OTHER
    return Classification(kind=kind, expandable=kind in EXPANDABLE_KINDS)


def type_of(value: Any) -> str:
    """Name of the kind, e.g. ``"Map"``."""
    return classify(value).kind.value


def is_object(value: Any) -> bool:
    return classify(value).kind is Kind.OBJECT


def is_array(value: Any) -> bool:
    return classify(value).kind is Kind.ARRAY


def is_map(value: Any) -> bool:
    return classify(value).kind is Kind.MAP


def is_set(value: Any) -> bool:
    return classify(value).kind is Kind.SET


def is_function(value: Any) -> bool:
    return classify(value).kind is Kind.FUNCTION


def is_number(value: Any) -> bool:
    return classify(value).kind is Kind.NUMBER


def is_bigint(value: Any) -> bool:
    return classify(value).kind is Kind.BIGINT


def is_numeric(value: Any) -> bool:
    return classify(value).numeric


def is_string(value: Any) -> bool:
    return classify(value).kind is Kind.STRING


def is_boolean(value: Any) -> bool:
    return classify(value).kind is Kind.BOOLEAN


def is_null(value: Any) -> bool:
    return value is None


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_symbol(value: Any) -> bool:
    return classify(value).kind is Kind.SYMBOL


def is_other(value: Any) -> bool:
    return classify(value).kind is Kind.OTHER


def is_expandable(value: Any) -> bool:
    return classify(value).expandable


__all__ = [
    "AMBIENT_SINGLETONS",
    "Classification",
    "EXPANDABLE_KINDS",
    "Kind",
    "MAX_SAFE_INTEGER",
    "UNDEFINED",
    "classify",
    "type_of",
    "is_object",
    "is_array",
    "is_map",
    "is_set",
    "is_function",
    "is_number",
    "is_bigint",
    "is_numeric",
    "is_string",
    "is_boolean",
    "is_null",
    "is_undefined",
    "is_symbol",
    "is_other",
    "is_expandable",
]
