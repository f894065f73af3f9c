"""Tests for is_equal() and canonical_text().

Covers:
- Identity and primitive fast path (bool vs int, NaN, mixed numerics)
- NaN never equal, not even to the same object
- Symbols never equal unless identical
- Element-wise, order-sensitive array comparison
- Serialization fallback for plain mappings: key order matters,
  function-valued keys are dropped
- Only plain mappings cross types in the fallback; dates, patterns, sets
  and numpy arrays compare only against their own kind
- canonical_text() conversions and cycle failure
"""

from __future__ import annotations

import datetime as dt
import math
import re
from collections import OrderedDict
from typing import Any

import numpy as np
import pytest

from objtree.equality import canonical_text, is_equal
from objtree.kinds import Symbol
from objtree.pattern import PatternCursor


class TestFastPath:
    def test_same_reference(self) -> None:
        value: dict[str, Any] = {"a": 1}
        assert is_equal(value, value) is True

    def test_equal_primitives(self) -> None:
        assert is_equal(1, 1) is True
        assert is_equal("a", "a") is True
        assert is_equal(None, None) is True
        assert is_equal(1, 1.0) is True

    def test_bool_is_not_int(self) -> None:
        assert is_equal(True, 1) is False
        assert is_equal(0, False) is False
        assert is_equal(True, True) is True

    def test_nan_is_not_equal_to_itself_by_value(self) -> None:
        assert is_equal(float("nan"), float("nan")) is False

    def test_nan_is_not_equal_to_the_same_object(self) -> None:
        value = float("nan")
        assert is_equal(value, value) is False
        assert is_equal(np.float32("nan"), np.float32("nan")) is False

    def test_numpy_scalar_against_python_int(self) -> None:
        assert is_equal(np.int64(3), 3) is True

    def test_different_strings(self) -> None:
        assert is_equal("a", "b") is False

    def test_none_is_not_zero(self) -> None:
        assert is_equal(None, 0) is False


class TestSymbols:
    def test_distinct_symbols_unequal(self) -> None:
        assert is_equal(Symbol(), Symbol()) is False

    def test_same_symbol_equal(self) -> None:
        token = Symbol("t")
        assert is_equal(token, token) is True

    def test_symbol_inside_arrays_compared_by_identity(self) -> None:
        token = Symbol("t")
        assert is_equal([token], [token]) is True
        assert is_equal([Symbol("t")], [Symbol("t")]) is False


class TestArrays:
    def test_nested_arrays_equal(self) -> None:
        assert is_equal([1, [2, 3]], [1, [2, 3]]) is True

    def test_length_mismatch(self) -> None:
        assert is_equal([1, 2], [1, 2, 3]) is False

    def test_order_sensitive(self) -> None:
        assert is_equal([1, 2], [2, 1]) is False

    def test_array_of_objects(self) -> None:
        assert is_equal([{"a": 1}], [{"a": 1}]) is True
        assert is_equal([{"a": 1}], [{"a": 2}]) is False

    def test_tuple_and_list_compare_as_arrays(self) -> None:
        assert is_equal((1, 2), [1, 2]) is True

    def test_array_against_mapping(self) -> None:
        assert is_equal([], {}) is False


class TestSerializationFallback:
    def test_equal_dicts(self) -> None:
        assert is_equal({"a": 1}, {"a": 1}) is True

    def test_key_order_matters(self) -> None:
        assert is_equal({"a": 1, "b": 2}, {"b": 2, "a": 1}) is False

    def test_function_values_dropped(self) -> None:
        assert is_equal({"a": 1, "f": len}, {"a": 1}) is True

    def test_mapping_types_compare_by_content(self) -> None:
        assert is_equal(OrderedDict([("a", 1)]), {"a": 1}) is True

    def test_dates_by_instant(self) -> None:
        first = dt.datetime(2024, 1, 1, 12, 0)
        assert is_equal(first, dt.datetime(2024, 1, 1, 12, 0)) is True
        assert is_equal(first, dt.datetime(2024, 1, 1, 12, 1)) is False

    def test_sets_ignore_insertion_order(self) -> None:
        assert is_equal({3, 1, 2}, {2, 3, 1}) is True
        assert is_equal({1, 2}, {1, 3}) is False

    def test_numpy_arrays(self) -> None:
        assert is_equal(np.array([1, 2]), np.array([1, 2])) is True
        assert is_equal(np.array([1, 2]), np.array([1, 3])) is False

    def test_numpy_array_shape_matters(self) -> None:
        assert is_equal(np.zeros((0,)), np.zeros((0, 2))) is False

    def test_string_against_object(self) -> None:
        assert is_equal("{}", {}) is False

    def test_function_against_function(self) -> None:
        assert is_equal(len, max) is False


class TestKindMismatch:
    """Only plain mappings compare across types; every other kind stays apart."""

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ({1, 2}, [1, 2]),
            ([1, 2], {1, 2}),
            (np.array([1, 2]), [1, 2]),
            ([1, 2], np.array([1, 2])),
            (re.compile("a"), {}),
            ({}, re.compile("a")),
            (set(), {}),
            (np.array([]), {}),
            (dt.date(2024, 3, 1), "2024-03-01"),
            (re.compile("a"), PatternCursor("a")),
        ],
    )
    def test_different_kinds_are_unequal(self, a: Any, b: Any) -> None:
        assert is_equal(a, b) is False

    def test_mapping_subclass_against_dict(self) -> None:
        assert is_equal({"a": 1}, OrderedDict([("a", 1)])) is True


class TestPatterns:
    def test_same_source_and_flags(self) -> None:
        assert is_equal(re.compile("a+"), re.compile("a+")) is True

    def test_different_sources(self) -> None:
        assert is_equal(re.compile("a"), re.compile("b")) is False

    def test_different_flags(self) -> None:
        assert is_equal(re.compile("a"), re.compile("a", re.IGNORECASE)) is False

    def test_cursors_with_same_state(self) -> None:
        assert is_equal(PatternCursor("x"), PatternCursor("x")) is True

    def test_cursors_with_different_sources(self) -> None:
        assert is_equal(PatternCursor("x"), PatternCursor("y")) is False

    def test_cursor_position_matters(self) -> None:
        moved = PatternCursor("x")
        moved.exec("xx")
        assert is_equal(moved, PatternCursor("x")) is False

    def test_cursor_mode_matters(self) -> None:
        assert is_equal(PatternCursor("x"), PatternCursor("x", sticky=True)) is False

    def test_patterns_inside_mappings(self) -> None:
        assert is_equal({"p": re.compile("a")}, {"p": re.compile("a")}) is True
        assert is_equal({"p": re.compile("a")}, {"p": re.compile("b")}) is False


class TestCanonicalText:
    def test_compact_json(self) -> None:
        assert canonical_text({"a": [1, None]}) == '{"a":[1,null]}'

    def test_function_in_sequence_becomes_null(self) -> None:
        assert canonical_text([len, Symbol()]) == "[null,null]"

    def test_non_string_keys(self) -> None:
        assert canonical_text({2: "x", None: "y"}) == '{"2":"x","null":"y"}'

    def test_date_as_iso(self) -> None:
        assert canonical_text(dt.date(2024, 3, 1)) == '"2024-03-01"'

    def test_pattern_uses_repr(self) -> None:
        assert canonical_text({"p": re.compile("a")}) == '{"p":"re.compile(\'a\')"}'

    def test_unknown_value_uses_repr(self) -> None:
        assert canonical_text([b"x"]) == '["b\'x\'"]'

    def test_shared_reference_is_not_a_cycle(self) -> None:
        shared = [1]
        assert canonical_text({"a": shared, "b": shared}) == '{"a":[1],"b":[1]}'

    def test_cycle_raises_value_error(self) -> None:
        looped: dict[str, Any] = {}
        looped["self"] = looped
        with pytest.raises(ValueError, match="Circular reference detected"):
            canonical_text(looped)

    def test_nan_inside_mapping(self) -> None:
        text = canonical_text({"x": math.nan})
        assert text == '{"x":NaN}'
