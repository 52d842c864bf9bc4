"""
Visitor - pre-order, depth-first, left-to-right walk driven by a callback.

The callback is called for side effects only; its return value never
replaces the visited node.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Any, Callable

from ..node.guards import assert_function, assert_node, assert_nodes_sequence

Visitor = Callable[[Any], Any]


def visit(node: Any, fn: Visitor) -> Any:
    """
    Call ``fn(node)``, then visit every child of ``node``.

    Args:
        node: Subtree root
        fn: Callback invoked once per node

    Returns:
        ``node``
    """
    assert_node(node)
    assert_function(fn)

    fn(node)
    if getattr(node, "nodes", None) is not None:
        return map_visit(node, fn)
    return node


def map_visit(node: Any, fn: Visitor) -> Any:
    """Visit the children of ``node`` without calling ``fn`` on ``node`` itself."""
    assert_node(node)
    assert_function(fn)

    nodes = getattr(node, "nodes", None)
    if nodes is None:
        return node
    assert_nodes_sequence(nodes, "node.nodes")

    for child in nodes:
        visit(child, fn)
    return node
