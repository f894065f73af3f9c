"""Public API functions for objtree.

This module provides the four user-facing functions: clone_deep, is_equal,
list_to_tree and traverse_tree. Each call creates a fresh engine
(CloneEngine, ListTreeBuilder or TreeTraverser) so no state, in particular
no clone cache, survives between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from objtree.clone import CloneEngine
from objtree.equality import is_equal
from objtree.tree.builder import ListTreeBuilder
from objtree.tree.config import TreeFields
from objtree.tree.traversal import TreeTraverser

__all__ = ["clone_deep", "is_equal", "list_to_tree", "traverse_tree"]

logger = logging.getLogger(__name__)


def clone_deep(value: Any) -> Any:
    """Return a deep clone of ``value``.

    Shared references clone to one shared instance and cycles are reproduced
    in the clone. Functions and immutable scalars come back as-is.

    Args:
        value: Any Python value.

    Returns:
        The clone. Mutating it never affects ``value``.
    """
    engine = CloneEngine()
    result = engine.clone(value)
    logger.debug("clone_deep registered %d originals", engine.cache_size)
    return result


def list_to_tree(
    items: Any,
    id_field: str = "id",
    pid_field: str = "pid",
    children_field: str = "children",
    *,
    inplace: bool = True,
    detect_cycles: bool = False,
) -> list[Any]:
    """Convert a flat list of records into a list of root nodes.

    A node becomes a root when no node in ``items`` carries its parent
    identifier; otherwise it is appended to that node's children. Input order
    is kept for roots and for every children list.

    Args:
        items:          List or tuple of records (dicts or attribute objects).
                        Any other input returns ``[]``.
        id_field:       Field holding the node identifier.  Default "id".
        pid_field:      Field holding the parent identifier.  Default "pid".
        children_field: Field the children list is installed under.
        inplace:        When True (default) the records themselves receive the
                        children lists; when False shallow copies are linked.
        detect_cycles:  When True, raise TreeCycleError on looping parent chains.
                        When False (default), looping nodes nest silently and
                        are missing from the roots.

    Returns:
        The root nodes.
    """
    builder = ListTreeBuilder(
        fields=TreeFields(id_field, pid_field, children_field),
        inplace=inplace,
        detect_cycles=detect_cycles,
    )
    return builder.build(items)


def traverse_tree(
    tree: Any,
    children_field: str = "children",
    callback: Callable[[Any], Any] | None = None,
    *,
    detect_cycles: bool = False,
) -> list[Any]:
    """Apply ``callback`` to every node of ``tree`` in pre-order.

    The traversed children of each node are stored on the callback's result
    under ``children_field``. Returning the received node from ``callback``
    mutates the input tree.

    Args:
        tree:           List or tuple of root nodes. Any other input returns ``[]``.
        children_field: Field holding each node's children.  Default "children".
        callback:       ``node -> new_node``. Passing a non-callable fails with
                        TypeError on the first node.
        detect_cycles:  When True, raise TreeCycleError if a node appears below
                        itself. When False (default), a cyclic tree ends in
                        RecursionError.

    Returns:
        The transformed roots.
    """
    traverser = TreeTraverser(
        fields=TreeFields(children_field=children_field),
        detect_cycles=detect_cycles,
    )
    return traverser.traverse(tree, callback)  # type: ignore[arg-type]
