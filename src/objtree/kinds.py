"""Kind StrEnum, Symbol token and the classify() dispatcher.

Every engine in objtree branches on the closed vocabulary defined here rather
than on ad-hoc isinstance chains, so the order of checks lives in one place.
"""

from __future__ import annotations

import array
import datetime as dt
import functools
import inspect
import re
from collections.abc import MutableMapping, MutableSequence, MutableSet
from enum import StrEnum, auto
from typing import Any

import numpy as np

from objtree.pattern import PatternCursor

__all__ = [
    "Kind",
    "Symbol",
    "classify",
    "is_array",
    "is_function",
    "is_object",
    "is_string",
    "is_symbol",
    "is_undefined",
]


class Kind(StrEnum):
    """Closed classification of a Python value.

    StrEnum values are the lowercased member names:
    - STRING    -> "string"    : str
    - OBJECT    -> "object"    : a plain dict
    - ARRAY     -> "array"     : list, tuple or any other mutable sequence
    - FUNCTION  -> "function"  : routines, classes, functools.partial
    - SYMBOL    -> "symbol"    : objtree.Symbol
    - UNDEFINED -> "undefined" : None
    - DATE      -> "date"      : datetime, date, time
    - REGEXP    -> "regexp"    : re.Pattern or PatternCursor
    - MAP       -> "map"       : any other mutable mapping
    - SET       -> "set"       : any mutable set
    - NDARRAY   -> "ndarray"   : numpy.ndarray
    - OTHER     -> "other"     : everything else
    """

    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()
    FUNCTION = auto()
    SYMBOL = auto()
    UNDEFINED = auto()
    DATE = auto()
    REGEXP = auto()
    MAP = auto()
    SET = auto()
    NDARRAY = auto()
    OTHER = auto()


class Symbol:
    """A unique identity token.

    Two symbols are equal only when they are the same object, whatever their
    descriptions say.

    Example::
        a = Symbol("token")
        b = Symbol("token")
        a == b   # False
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


_DATE_TYPES = (dt.datetime, dt.date, dt.time)
_SEQUENCE_TYPES = (list, tuple, MutableSequence, bytearray, array.array)


def classify(value: Any) -> Kind:
    """Return the Kind of ``value``. Never raises.

    Only the exact ``dict`` type is OBJECT; dict subclasses such as
    OrderedDict or defaultdict carry extra behaviour and classify as MAP.
    Only ``None`` is UNDEFINED; falsy values like ``0`` or ``""`` are not.
    """
    if value is None:
        return Kind.UNDEFINED
    if isinstance(value, Symbol):
        return Kind.SYMBOL
    if isinstance(value, str):
        return Kind.STRING
    if type(value) is dict:
        return Kind.OBJECT
    if isinstance(value, _SEQUENCE_TYPES):
        return Kind.ARRAY
    if isinstance(value, _DATE_TYPES):
        return Kind.DATE
    if isinstance(value, (re.Pattern, PatternCursor)):
        return Kind.REGEXP
    if isinstance(value, MutableMapping):
        return Kind.MAP
    if isinstance(value, MutableSet):
        return Kind.SET
    if isinstance(value, np.ndarray):
        return Kind.NDARRAY
    if (
        inspect.isroutine(value)
        or inspect.isclass(value)
        or isinstance(value, functools.partial)
    ):
        return Kind.FUNCTION
    return Kind.OTHER


def is_string(value: Any) -> bool:
    return classify(value) is Kind.STRING


def is_object(value: Any) -> bool:
    return classify(value) is Kind.OBJECT


def is_array(value: Any) -> bool:
    return classify(value) is Kind.ARRAY


def is_function(value: Any) -> bool:
    return classify(value) is Kind.FUNCTION


def is_symbol(value: Any) -> bool:
    return classify(value) is Kind.SYMBOL


def is_undefined(value: Any) -> bool:
    return classify(value) is Kind.UNDEFINED
