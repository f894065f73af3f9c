"""Exceptions raised by objtree.

The tree utilities degrade silently on malformed input; TreeCycleError is
only raised when a caller opts in with ``detect_cycles=True``.
"""

from __future__ import annotations

from typing import Any

__all__ = ["TreeCycleError"]


class TreeCycleError(ValueError):
    """A parent chain or a children chain leads back to a node already on it.

    Attributes:
        node_id: Identifier of the node where the cycle was detected, or None
            when the node has no identifier field.
    """

    def __init__(self, node_id: Any, message: str | None = None) -> None:
        self.node_id = node_id
        super().__init__(message or f"cycle detected at node {node_id!r}")
