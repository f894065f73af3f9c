"""Tree subpackage for flat-list/tree conversion.

Re-exports the public API for the tree module:
- TreeFields: frozen dataclass naming the id, parent id and children fields
- ListTreeBuilder: links a flat parent-pointer list into a forest
- TreeTraverser: pre-order, shape-preserving map over a forest
- get_field / set_field: item-or-attribute access on tree records
"""

from objtree.tree.builder import ListTreeBuilder
from objtree.tree.config import TreeFields
from objtree.tree.nodes import get_field, set_field
from objtree.tree.traversal import TreeTraverser

__all__ = ["ListTreeBuilder", "TreeFields", "TreeTraverser", "get_field", "set_field"]
