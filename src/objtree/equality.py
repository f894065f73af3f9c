"""Structural equality with a serialization fallback.

is_equal() decides in these steps:

1. A NaN operand -> False, even against itself.
2. Identity, or equal primitive scalars of the same family.
3. Any SYMBOL operand -> False.
4. Two ARRAY operands -> equal length and pairwise is_equal(), in order.
5. Two plain mappings (OBJECT or MAP) -> equal canonical_text().
6. Any other pair of different kinds -> False.
7. Same-kind pairs: dates by ``==``, patterns by source and flags (plus the
   cursor state for PatternCursor), sets and ndarrays by canonical_text().

Step 5 compares whole mappings by their JSON text. Key order therefore
matters, and function/symbol-valued keys disappear before the comparison.
Arrays are compared element-wise without cycle detection, so is_equal() is
meant for acyclic data.
"""

from __future__ import annotations

import json
import math
import numbers
from typing import Any

import numpy as np

from objtree.kinds import Kind, classify
from objtree.pattern import PatternCursor

__all__ = ["canonical_text", "is_equal"]

_MAPPING_KINDS = frozenset({Kind.OBJECT, Kind.MAP})

# Values that serialize to nothing inside a mapping and to null inside a sequence.
_UNSERIALIZABLE = frozenset({Kind.FUNCTION, Kind.SYMBOL})


def _is_nan(value: Any) -> bool:
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def _same_primitive(a: Any, b: Any) -> bool:
    """True when ``a`` and ``b`` are equal scalars of the same family.

    bool is checked first because it subclasses int: True and 1 differ.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bytes) and isinstance(b, bytes):
        return a == b
    if isinstance(a, numbers.Number) and isinstance(b, numbers.Number):
        return bool(a == b)
    return False


def _same_pattern(a: Any, b: Any) -> bool:
    """Compare two REGEXP values by what they match and, for cursors, where."""
    a_cursor = isinstance(a, PatternCursor)
    if a_cursor != isinstance(b, PatternCursor):
        return False
    if a_cursor:
        return (a.source, a.flags, a.global_, a.sticky, a.last_index) == (
            b.source,
            b.flags,
            b.global_,
            b.sticky,
            b.last_index,
        )
    return a.pattern == b.pattern and a.flags == b.flags


def is_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` and ``b`` are observably equivalent.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True on identity or equal primitives, pairwise equality for two
        arrays, equal canonical text for two mappings, and a same-kind
        comparison for dates, patterns, sets and ndarrays; else False.
        NaN is never equal, not even to itself.
    """
    if _is_nan(a) or _is_nan(b):
        return False
    if a is b or _same_primitive(a, b):
        return True

    kind_a = classify(a)
    kind_b = classify(b)

    if kind_a is Kind.SYMBOL or kind_b is Kind.SYMBOL:
        return False

    if kind_a is Kind.ARRAY and kind_b is Kind.ARRAY:
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b, strict=True))

    if kind_a in _MAPPING_KINDS and kind_b in _MAPPING_KINDS:
        return canonical_text(a) == canonical_text(b)

    if kind_a is not kind_b:
        return False
    if kind_a is Kind.DATE:
        return bool(a == b)
    if kind_a is Kind.REGEXP:
        return _same_pattern(a, b)
    if kind_a is Kind.SET:
        return len(a) == len(b) and canonical_text(a) == canonical_text(b)
    if kind_a is Kind.NDARRAY:
        return a.shape == b.shape and canonical_text(a) == canonical_text(b)

    return False


def canonical_text(value: Any) -> str:
    """Serialize ``value`` to the JSON text used by the equality fallback.

    Mapping key order is preserved. Function and symbol values are dropped
    from mappings and become null in sequences. Dates become ISO-8601 text,
    sets become arrays sorted by member text, and patterns or any other
    value JSON cannot represent become their ``repr``.

    Raises:
        ValueError: If ``value`` contains a reference cycle.
    """
    return json.dumps(
        _to_jsonable(value, set()), ensure_ascii=False, separators=(",", ":")
    )


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _to_jsonable(value: Any, active: set[int]) -> Any:
    """Convert ``value`` into plain JSON types.

    ``active`` holds the ids of the containers on the current path; meeting
    one again is a cycle. Siblings sharing a reference are fine.
    """
    kind = classify(value)

    if kind is Kind.UNDEFINED or kind in _UNSERIALIZABLE:
        return None
    if kind is Kind.STRING:
        return str(value)
    if kind is Kind.DATE:
        return value.isoformat()
    if kind in (Kind.REGEXP, Kind.OTHER):
        if isinstance(value, np.generic):
            value = value.item()
        if isinstance(value, (bool, int, float)):
            return value
        return repr(value)

    marker = id(value)
    if marker in active:
        msg = "Circular reference detected"
        raise ValueError(msg)
    active.add(marker)
    try:
        if kind in (Kind.OBJECT, Kind.MAP):
            return {
                _key_text(key): _to_jsonable(val, active)
                for key, val in value.items()
                if classify(val) not in _UNSERIALIZABLE
            }
        if kind is Kind.ARRAY:
            return [_to_jsonable(item, active) for item in value]
        if kind is Kind.SET:
            members = [_to_jsonable(member, active) for member in value]
            return sorted(members, key=lambda m: json.dumps(m, ensure_ascii=False))
        return _to_jsonable(value.tolist(), active)  # NDARRAY
    finally:
        active.discard(marker)
