"""
Query helpers - type matching, child lookup and sentinel classification.

A matcher is an exact type name, a compiled ``re.Pattern`` (searched
against the type), or a list/tuple/set of those combined with OR.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Sequence, Union

from ..core.config import get_config
from ..core.exceptions import InvalidArgumentError
from ..node.guards import (
    assert_function,
    assert_node,
    assert_nodes_sequence,
    assert_type,
    assert_type_name,
    capability,
    is_node,
)
from .values import value

Matcher = Union[str, "re.Pattern[str]", list, tuple, set, frozenset]


def is_type(node: Any, matcher: Matcher) -> bool:
    """
    Return True if ``node.type`` matches ``matcher``.

    Raises:
        InvalidArgumentError: If ``matcher`` has an unsupported shape
    """
    assert_node(node)
    assert_type_name(node)

    if isinstance(matcher, str):
        return node.type == matcher
    if isinstance(matcher, re.Pattern):
        return matcher.search(node.type) is not None
    if isinstance(matcher, (list, tuple, set, frozenset)):
        return any(is_type(node, item) for item in matcher)
    raise InvalidArgumentError(
        'expected "type" to be a string, pattern or collection of them', argument="type"
    )


def has_type(node: Any, matcher: Matcher) -> bool:
    """Return True if any direct child of ``node`` matches ``matcher``."""
    assert_node(node)
    nodes = getattr(node, "nodes", None)
    assert_nodes_sequence(nodes, "node.nodes", optional=True)
    return any(is_type(child, matcher) for child in nodes or ())


def first_of_type(nodes: Sequence[Any], matcher: Matcher) -> Optional[Any]:
    """Return the first node in ``nodes`` matching ``matcher``, or None."""
    assert_nodes_sequence(nodes)
    for node in nodes:
        if is_type(node, matcher):
            return node
    return None


def find_node(nodes: Sequence[Any], selector: Union[int, Matcher]) -> Optional[Any]:
    """
    Return ``nodes[selector]`` for an integer selector, else the first match.

    Out-of-range (including negative) indexes yield None.
    """
    assert_nodes_sequence(nodes)
    if isinstance(selector, int) and not isinstance(selector, bool):
        return nodes[selector] if 0 <= selector < len(nodes) else None
    return first_of_type(nodes, selector)


def _classify(node: Any, method_name: str, suffix: str) -> bool:
    assert_node(node)

    method = capability(getattr(node, "parent", None), method_name)
    if method is None:
        method = capability(node, method_name)
    if method is not None:
        return bool(method(node))

    node_type = getattr(node, "type", None)
    assert_type(
        node_type is None or isinstance(node_type, str),
        'expected "node.type" to be a string',
        "node.type",
    )
    return node_type.endswith(suffix) if node_type else False


def is_open(node: Any) -> bool:
    """Return True if ``node`` is an ``*.open`` sentinel."""
    return _classify(node, "is_open", get_config().open_suffix)


def is_close(node: Any) -> bool:
    """Return True if ``node`` is a ``*.close`` sentinel."""
    return _classify(node, "is_close", get_config().close_suffix)


def _edge_child(node: Any, attr: str, index: int) -> Optional[Any]:
    child = getattr(node, attr, None)
    if child is None:
        nodes = getattr(node, "nodes", None)
        assert_nodes_sequence(nodes, "node.nodes", optional=True)
        child = nodes[index] if nodes else None
    if child is not None:
        assert_type(is_node(child), f'expected "{attr}" to be an instance of Node', attr)
    return child


def has_open(node: Any) -> bool:
    """Return True if the first child of ``node`` is its open sentinel."""
    assert_node(node)
    first = _edge_child(node, "first", 0)
    if first is None:
        return False
    method = capability(node, "is_open")
    if method is not None:
        return bool(method(first))
    return getattr(first, "type", None) == f"{node.type}{get_config().open_suffix}"


def has_close(node: Any) -> bool:
    """Return True if the last child of ``node`` is its close sentinel."""
    assert_node(node)
    last_child = _edge_child(node, "last", -1)
    if last_child is None:
        return False
    method = capability(node, "is_close")
    if method is not None:
        return bool(method(last_child))
    return getattr(last_child, "type", None) == f"{node.type}{get_config().close_suffix}"


def has_open_and_close(node: Any) -> bool:
    return has_open(node) and has_close(node)


def is_block(node: Any) -> bool:
    """Return True if ``node`` is wrapped by its own open and close sentinels."""
    assert_node(node)
    assert_nodes_sequence(getattr(node, "nodes", None), "node.nodes", optional=True)

    method = capability(getattr(node, "parent", None), "is_block")
    if method is None:
        method = capability(node, "is_block")
    if method is not None:
        return bool(method(node))
    return has_open_and_close(node)


def is_empty(node: Any, predicate: Optional[Callable[[Any], bool]] = None) -> bool:
    """
    Return True if ``node`` carries no content.

    A node with children is empty when every child is empty; a leaf is empty
    when ``predicate(leaf)`` is true, or (without a predicate) when its
    payload is falsy.
    """
    assert_node(node)
    if predicate is not None:
        assert_function(predicate, "predicate")
    nodes = getattr(node, "nodes", None)
    assert_nodes_sequence(nodes, "node.nodes", optional=True)

    if nodes is not None:
        return all(is_empty(child, predicate) for child in nodes)
    if predicate is not None:
        return bool(predicate(node))
    return not value(node)
