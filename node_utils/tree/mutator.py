"""
Tree mutator - push/unshift/pop/shift/remove children.

Each operation delegates to the node's own same-named capability method when
it has one; otherwise it edits ``nodes`` directly and keeps ``child.parent``
pointing at the node the child was inserted under. Removal leaves the
removed child's ``parent`` untouched.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..node.guards import (
    assert_node,
    assert_nodes_list,
    assert_nodes_sequence,
    capability,
)
from ..node.models import link_parent

logger = logging.getLogger(__name__)


def _type_of(node: Any) -> str:
    return repr(getattr(node, "type", None))


def push_node(parent: Any, node: Any) -> int:
    """
    Append ``node`` to ``parent.nodes`` and set ``node.parent``.

    Args:
        parent: Node receiving the child
        node: Child node

    Returns:
        New number of children

    Raises:
        InvalidArgumentError: If either argument is not a node
    """
    assert_node(parent, "parent")
    assert_node(node, "node")

    for name in ("push", "push_node"):
        method = capability(parent, name)
        if method is not None:
            return method(node)

    assert_nodes_list(getattr(parent, "nodes", None), "parent.nodes", optional=True)
    link_parent(node, parent)
    if getattr(parent, "nodes", None) is None:
        parent.nodes = []
    parent.nodes.append(node)
    logger.debug(f"Pushed {_type_of(node)} onto {_type_of(parent)}")
    return len(parent.nodes)


def unshift_node(parent: Any, node: Any) -> int:
    """
    Prepend ``node`` to ``parent.nodes`` and set ``node.parent``.

    Returns:
        New number of children
    """
    assert_node(parent, "parent")
    assert_node(node, "node")

    for name in ("unshift", "unshift_node"):
        method = capability(parent, name)
        if method is not None:
            return method(node)

    assert_nodes_list(getattr(parent, "nodes", None), "parent.nodes", optional=True)
    link_parent(node, parent)
    if getattr(parent, "nodes", None) is None:
        parent.nodes = []
    parent.nodes.insert(0, node)
    logger.debug(f"Unshifted {_type_of(node)} onto {_type_of(parent)}")
    return len(parent.nodes)


def pop_node(node: Any) -> Optional[Any]:
    """Remove and return the last child of ``node``, or None."""
    assert_node(node)

    method = capability(node, "pop")
    if method is not None:
        return method()

    nodes = getattr(node, "nodes", None)
    assert_nodes_list(nodes, "node.nodes", optional=True)
    return nodes.pop() if nodes else None


def shift_node(node: Any) -> Optional[Any]:
    """Remove and return the first child of ``node``, or None."""
    assert_node(node)

    method = capability(node, "shift")
    if method is not None:
        return method()

    nodes = getattr(node, "nodes", None)
    assert_nodes_list(nodes, "node.nodes", optional=True)
    return nodes.pop(0) if nodes else None


def remove_node(parent: Any, node: Any) -> Optional[Any]:
    """
    Remove ``node`` from ``parent.nodes``.

    Children are compared by identity; the first match is removed in place.

    Returns:
        The removed node, or None if it was not a child of ``parent``
    """
    assert_node(parent, "parent")
    assert_node(node, "node")
    assert_nodes_list(getattr(parent, "nodes", None), "parent.nodes", optional=True)

    method = capability(parent, "remove")
    if method is not None:
        return method(node)

    nodes = getattr(parent, "nodes", None)
    if not nodes:
        return None
    for idx, child in enumerate(nodes):
        if child is node:
            logger.debug(f"Removed {_type_of(node)} from {_type_of(parent)} at {idx}")
            return nodes.pop(idx)
    return None


def has_node(node: Any, child: Any) -> bool:
    """Return True if ``child`` is one of ``node``'s direct children."""
    assert_node(node)
    assert_node(child, "child")

    method = capability(node, "has")
    if method is not None:
        return bool(method(child))

    nodes = getattr(node, "nodes", None)
    if nodes is None:
        return False
    assert_nodes_sequence(nodes, "node.nodes")
    return any(c is child for c in nodes)
