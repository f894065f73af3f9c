"""objtree - deep cloning, structural equality and list/tree conversion."""

from __future__ import annotations

from objtree.api import clone_deep, is_equal, list_to_tree, traverse_tree
from objtree.clone import CloneEngine
from objtree.equality import canonical_text
from objtree.errors import TreeCycleError
from objtree.kinds import (
    Kind,
    Symbol,
    classify,
    is_array,
    is_function,
    is_object,
    is_string,
    is_symbol,
    is_undefined,
)
from objtree.pattern import PatternCursor
from objtree.tree import ListTreeBuilder, TreeFields, TreeTraverser

__version__: str = "0.1.0"
__all__: list[str] = [
    "CloneEngine",
    "Kind",
    "ListTreeBuilder",
    "PatternCursor",
    "Symbol",
    "TreeCycleError",
    "TreeFields",
    "TreeTraverser",
    "canonical_text",
    "classify",
    "clone_deep",
    "is_array",
    "is_equal",
    "is_function",
    "is_object",
    "is_string",
    "is_symbol",
    "is_undefined",
    "list_to_tree",
    "traverse_tree",
]
