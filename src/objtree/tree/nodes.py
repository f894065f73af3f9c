"""Field access on tree records.

A record is either a mapping (fields are items) or any other object (fields
are attributes, e.g. a dataclass). Missing fields read as None.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

__all__ = ["get_field", "set_field"]


def get_field(node: Any, name: str) -> Any:
    """Return ``node[name]`` or ``node.name``; None when the field is absent."""
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


def set_field(node: Any, name: str, value: Any) -> None:
    """Assign ``value`` to ``node[name]`` or ``node.name``.

    Raises:
        TypeError: If ``node`` is an immutable mapping.
        AttributeError: If ``node`` does not accept the attribute.
    """
    if isinstance(node, MutableMapping):
        node[name] = value
    elif isinstance(node, Mapping):
        msg = f"cannot set field {name!r} on immutable mapping {type(node).__name__}"
        raise TypeError(msg)
    else:
        setattr(node, name, value)
