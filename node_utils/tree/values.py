"""
Value accessor: payload extraction and compiler output helpers.

Handlers receive the compiler (output sink) as their first argument, so
they can be registered directly as compiler callbacks:

    compiler.set("text", identity)
    compiler.set("i.open", append("<i>"))

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..core.constants import NOOP_NODE_TYPE, SINK_METHODS
from ..core.exceptions import InvalidArgumentError
from ..node.guards import assert_node, assert_nodes_list, capability


def value(node: Any) -> Optional[str]:
    """Return ``node.value``, falling back to the legacy ``node.val``."""
    assert_node(node)
    return getattr(node, "value", None) or getattr(node, "val", None)


def _append_to_compiler(compiler: Any, text: str, node: Any) -> Any:
    # Older compilers expose emit() instead of append()
    for name in SINK_METHODS:
        method = capability(compiler, name)
        if method is not None:
            return method(text, node)
    raise InvalidArgumentError(
        'expected "compiler.append" or "compiler.emit" to be a function', argument="compiler"
    )


def identity(compiler: Any, node: Any) -> Any:
    """Append the node's own payload (or "") to the compiler output."""
    assert_node(node)
    return _append_to_compiler(compiler, value(node) or "", node)


def append(text: str) -> Callable[[Any, Any], Any]:
    """
    Return a handler that appends ``text`` regardless of the node's payload.

    Useful when the output for a node type is known at registration time.
    """

    def handler(compiler: Any, node: Any) -> Any:
        assert_node(node)
        return _append_to_compiler(compiler, text, node)

    return handler


def noop(compiler: Any, node: Any) -> Any:
    """Append an empty string: the node keeps its position but emits nothing."""
    assert_node(node)
    return _append_to_compiler(compiler, "", node)


def to_noop(node: Any, nodes: Optional[list] = None) -> None:
    """
    Neutralize ``node`` in place.

    With ``nodes`` given, only ``node.nodes`` is replaced. Otherwise the
    children are dropped and the node becomes an empty text node, so sibling
    indices stay valid and nothing is emitted for it.
    """
    assert_node(node)
    if nodes is not None:
        assert_nodes_list(nodes)
        node.nodes = nodes
        return
    if hasattr(node, "nodes"):
        node.nodes = None
    node.type = NOOP_NODE_TYPE
    node.value = ""
    # value() falls back to val, so it must be cleared too
    if hasattr(node, "val"):
        node.val = ""
