"""ListTreeBuilder: converts a flat parent-pointer list into a nested tree.

Two passes over the input:

- Pass 1 indexes every node by its stringified identifier and installs an
  empty children list on it.
- Pass 2 walks the nodes in input order and appends each one to its parent's
  children, or to the roots when no node carries its parent identifier.

Roots and every children list keep the relative order of the input list.

Identifiers are matched as text, so ``1``, ``1.0`` and ``"1"`` all refer to the
same node. A missing (None) identifier is never indexed and a missing parent
identifier always makes a root.

By default the caller's nodes are modified in place: each gets a fresh
children list. Pass ``inplace=False`` to link shallow copies instead.

Cycles (a node parented to itself, or two nodes parented to each other) are
not detected unless ``detect_cycles=True``; such nodes simply nest under their
parent and never appear among the roots.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from objtree.errors import TreeCycleError
from objtree.tree.config import TreeFields
from objtree.tree.nodes import get_field, set_field

__all__ = ["ListTreeBuilder", "node_key"]

logger = logging.getLogger(__name__)


def node_key(value: Any) -> str | None:
    """Return the lookup key for an identifier, or None for a missing one.

    Integral floats collapse onto their int spelling so ``1.0`` finds ``1``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ListTreeBuilder:
    """Builds a forest out of a flat list of records.

    Attributes:
        fields:        Names of the id, parent id and children fields.
        inplace:       When False, link shallow copies of the input nodes and
                       leave the caller's records untouched.  Default True.
        detect_cycles: When True, raise TreeCycleError instead of silently
                       nesting nodes whose parent chain loops.  Default False.

    Example::
        builder = ListTreeBuilder()
        roots = builder.build([{"id": 1, "pid": 0}, {"id": 2, "pid": 1}])
        # roots: [{"id": 1, "pid": 0, "children": [{"id": 2, "pid": 1, "children": []}]}]
    """

    fields: TreeFields = field(default_factory=TreeFields)
    inplace: bool = True
    detect_cycles: bool = False

    def build(self, items: Any) -> list[Any]:
        """Convert ``items`` into a list of root nodes.

        Args:
            items: A list or tuple of records. Anything else yields ``[]``.

        Returns:
            The root nodes in input order, each carrying its children list.

        Raises:
            TreeCycleError: Only with ``detect_cycles=True``, when a parent
                chain leads back to a node already on it.
        """
        if not isinstance(items, (list, tuple)):
            return []

        nodes = list(items) if self.inplace else [copy.copy(n) for n in items]
        id_field = self.fields.id_field
        pid_field = self.fields.pid_field
        children_field = self.fields.children_field

        index: dict[str | None, Any] = {}
        for node in nodes:
            key = node_key(get_field(node, id_field))
            if key is not None:
                index[key] = node

        if self.detect_cycles:
            self._check_cycles(nodes, index)

        for node in nodes:
            set_field(node, children_field, [])

        roots: list[Any] = []
        for node in nodes:
            parent = index.get(node_key(get_field(node, pid_field)))
            if parent is not None:
                get_field(parent, children_field).append(node)
            else:
                roots.append(node)

        logger.debug("linked %d nodes into %d roots", len(nodes), len(roots))
        return roots

    def _check_cycles(
        self, nodes: Sequence[Any], index: dict[str | None, Any]
    ) -> None:
        """Follow every node's parent chain and fail on the first revisit.

        Chains already walked to a root are remembered in ``safe``, so each
        node is visited once overall rather than once per descendant.
        """
        id_field = self.fields.id_field
        pid_field = self.fields.pid_field
        safe: set[int] = set()

        for node in nodes:
            seen = {id(node)}
            parent = index.get(node_key(get_field(node, pid_field)))
            while parent is not None and id(parent) not in safe:
                if id(parent) in seen:
                    node_id = get_field(parent, id_field)
                    logger.debug("parent cycle detected at node %r", node_id)
                    raise TreeCycleError(node_id)
                seen.add(id(parent))
                parent = index.get(node_key(get_field(parent, pid_field)))
            safe |= seen
