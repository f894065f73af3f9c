"""TreeFields: the named-field configuration shared by the tree utilities.

TreeFields is a frozen (immutable) dataclass naming the record fields that
carry a node's identifier, its parent's identifier, and its children.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TreeFields:
    """Immutable field-name configuration for list/tree conversion.

    Attributes:
        id_field:       Field holding the node identifier.  Default "id".
        pid_field:      Field holding the parent identifier.  Default "pid".
        children_field: Field the children list is installed under.
                        Default "children".  Must differ from both other fields,
                        otherwise installing children would overwrite them.
    """

    id_field: str = "id"
    pid_field: str = "pid"
    children_field: str = "children"

    def __post_init__(self) -> None:
        for name in ("id_field", "pid_field", "children_field"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                msg = f"{name} must be a non-empty string, got {value!r}"
                raise ValueError(msg)
        if self.children_field in (self.id_field, self.pid_field):
            msg = (
                "children_field must differ from id_field and pid_field, "
                f"got {self.children_field!r}"
            )
            raise ValueError(msg)
