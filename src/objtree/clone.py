"""CloneEngine: deep copies of arbitrary value graphs.

Uses recursive dispatch on ``classify()``. Each engine owns one clone cache
mapping the identity of an original value to the clone produced for it, so a
value reached twice (shared substructure or a cycle) clones to one instance
and the output graph keeps the topology of the input.

Containers (ARRAY, OBJECT, MAP, SET, object-dtype NDARRAY) are registered in
the cache BEFORE their members are cloned; that is what makes cyclic graphs
terminate. Tuples cannot be registered before they exist, so they are built
after their members and reuse whatever clone a cycle registered meanwhile.

Functions, strings, symbols, None and every OTHER value are returned as-is.
"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from objtree.kinds import Kind, classify
from objtree.pattern import PatternCursor

__all__ = ["CloneEngine"]

# Kinds returned by reference; they never enter the cache.
_PASSTHROUGH = frozenset(
    {Kind.FUNCTION, Kind.STRING, Kind.SYMBOL, Kind.UNDEFINED, Kind.OTHER}
)


def _empty_like(container: Any) -> Any:
    """Return an empty container of the same type as ``container``.

    Built-in subclasses and types with ``__copy__`` keep their construction
    state (a defaultdict's factory, a deque's maxlen, an array's typecode)
    through ``copy.copy``. Other custom containers are rebuilt with a
    no-argument constructor, since a shallow copy could share their internal
    storage.
    """
    if isinstance(container, (dict, list, set)) or hasattr(container, "__copy__"):
        empty = copy.copy(container)
        if hasattr(empty, "clear"):
            empty.clear()
        else:
            del empty[:]
        return empty
    return type(container)()


@dataclass
class CloneEngine:
    """Deep-clones values while preserving shared and cyclic references.

    One engine per top-level clone: the cache is never shared between calls.
    The cache entries also hold the originals so their ids cannot be reused
    by freshly allocated objects while the clone is in progress.

    Example::
        engine = CloneEngine()
        a = {"name": "root"}
        a["self"] = a
        b = engine.clone(a)
        b["self"] is b   # True
    """

    _cache: dict[int, tuple[Any, Any]] = field(
        default_factory=dict, init=False, repr=False
    )

    @property
    def cache_size(self) -> int:
        """Number of originals registered so far."""
        return len(self._cache)

    def clone(self, value: Any) -> Any:
        """Return a deep clone of ``value``.

        Args:
            value: Any Python value.

        Returns:
            An independent copy for container, date and pattern kinds; the
            value itself for every passthrough kind.
        """
        kind = classify(value)
        if kind in _PASSTHROUGH:
            return value

        cached = self._cache.get(id(value))
        if cached is not None:
            return cached[1]

        if kind is Kind.OBJECT:
            return self._clone_object(value)
        if kind is Kind.ARRAY:
            if isinstance(value, tuple):
                return self._clone_tuple(value)
            return self._clone_list(value)
        if kind is Kind.MAP:
            return self._clone_map(value)
        if kind is Kind.SET:
            return self._clone_set(value)
        if kind is Kind.DATE:
            return self._register(value, value.replace())
        if kind is Kind.REGEXP:
            return self._register(value, self._clone_pattern(value))
        if kind is Kind.NDARRAY:
            return self._clone_ndarray(value)

        return value  # pragma: no cover - every Kind is handled above

    def _register(self, original: Any, clone: Any) -> Any:
        self._cache[id(original)] = (original, clone)
        return clone

    def _clone_object(self, obj: dict[Any, Any]) -> dict[Any, Any]:
        out: dict[Any, Any] = self._register(obj, {})
        for key, val in obj.items():
            out[key] = self.clone(val)
        return out

    def _clone_list(self, arr: Any) -> Any:
        out = self._register(arr, [] if type(arr) is list else _empty_like(arr))
        for item in arr:
            out.append(self.clone(item))
        return out

    def _clone_tuple(self, arr: tuple[Any, ...]) -> tuple[Any, ...]:
        items = [self.clone(item) for item in arr]

        # A cycle running back through this tuple has already built it.
        cached = self._cache.get(id(arr))
        if cached is not None:
            return cached[1]

        cls = type(arr)
        if cls is tuple:
            out: tuple[Any, ...] = tuple(items)
        elif hasattr(cls, "_make"):
            out = cls._make(items)
        else:
            out = cls(items)
        return self._register(arr, out)

    def _clone_map(self, mapping: Any) -> Any:
        out = self._register(mapping, _empty_like(mapping))
        for key, val in list(mapping.items()):
            out[key] = self.clone(val)
        return out

    def _clone_set(self, members: Any) -> Any:
        out = self._register(members, _empty_like(members))
        for member in list(members):
            out.add(self.clone(member))
        return out

    def _clone_pattern(self, pattern: re.Pattern[Any] | PatternCursor) -> Any:
        if isinstance(pattern, PatternCursor):
            return PatternCursor(
                pattern.pattern,
                global_=pattern.global_,
                sticky=pattern.sticky,
                last_index=pattern.last_index,
            )
        return re.compile(pattern.pattern, pattern.flags)

    def _clone_ndarray(self, arr: np.ndarray) -> np.ndarray:
        out = self._register(arr, arr.copy())
        if arr.dtype == object:
            for idx in np.ndindex(arr.shape):
                out[idx] = self.clone(arr[idx])
        return out
