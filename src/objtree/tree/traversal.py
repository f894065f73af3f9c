"""TreeTraverser: shape-preserving pre-order map over a tree.

For every node, in pre-order with siblings in order, the callback produces
the output node; the node's children are then traversed the same way and the
resulting list is stored on the output node under the same children field.

Nothing is copied defensively. A callback that returns the node it was given
mutates the input tree, whose children field is replaced by the traversed
list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from objtree.errors import TreeCycleError
from objtree.tree.config import TreeFields
from objtree.tree.nodes import get_field, set_field

__all__ = ["TreeTraverser"]

logger = logging.getLogger(__name__)


@dataclass
class TreeTraverser:
    """Maps a callback over every node of a forest.

    Attributes:
        fields:        Only ``children_field`` drives the traversal;
                       ``id_field`` names the node in TreeCycleError.
        detect_cycles: When True, raise TreeCycleError when a node is reached
                       again below itself.  When False (default), a cyclic
                       tree recurses until RecursionError.

    Example::
        traverser = TreeTraverser()
        tree = traverser.traverse(roots, lambda node: {**node, "visited": True})
    """

    fields: TreeFields = field(default_factory=TreeFields)
    detect_cycles: bool = False

    def traverse(self, tree: Any, callback: Callable[[Any], Any]) -> list[Any]:
        """Return the transformed forest.

        Args:
            tree:     A list or tuple of root nodes. Anything else yields ``[]``.
            callback: Called once per node; its return value replaces the node.

        Raises:
            TypeError: If ``callback`` is not callable (raised by the call).
            TreeCycleError: Only with ``detect_cycles=True``.
        """
        return self._traverse(tree, callback, set())

    def _traverse(
        self, nodes: Any, callback: Callable[[Any], Any], ancestors: set[int]
    ) -> list[Any]:
        if not isinstance(nodes, (list, tuple)):
            return []

        children_field = self.fields.children_field
        out: list[Any] = []
        for node in nodes:
            if self.detect_cycles and id(node) in ancestors:
                node_id = get_field(node, self.fields.id_field)
                logger.debug("children cycle detected at node %r", node_id)
                raise TreeCycleError(node_id)

            result = callback(node)
            children = get_field(node, children_field)

            ancestors.add(id(node))
            try:
                traversed = self._traverse(
                    children if children is not None else [], callback, ancestors
                )
            finally:
                ancestors.discard(id(node))

            set_field(result, children_field, traversed)
            out.append(result)
        return out
