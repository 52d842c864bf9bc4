"""
Sequence and string primitives.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..core.config import get_config
from ..node.guards import assert_node


def arrayify(value: Any) -> List[Any]:
    """
    Cast ``value`` to a list.

    A non-empty string becomes a one-element list, lists and tuples are
    returned as lists, anything else yields an empty list.
    """
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def stringify(value: Any) -> str:
    """Join ``arrayify(value)`` with the configured separator (default ",")."""
    return get_config().join_separator.join(str(item) for item in arrayify(value))


def trim(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def last(seq: Any, n: int = 1) -> Optional[Any]:
    """Return the ``n``-th element from the end, or None when out of range."""
    if not isinstance(seq, (list, tuple)):
        return None
    idx = len(seq) - (n or 1)
    if 0 <= idx < len(seq):
        return seq[idx]
    return None


def last_node(node: Any) -> Optional[Any]:
    assert_node(node)
    nodes = getattr(node, "nodes", None)
    return last(nodes) if isinstance(nodes, list) else None
