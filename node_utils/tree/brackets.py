"""
Bracket wrapper - synthesize ``<type>.open`` / ``<type>.close`` sentinel children.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from ..core.config import get_config
from ..node.guards import assert_function, assert_node, assert_type_name
from .mutator import push_node, unshift_node

logger = logging.getLogger(__name__)

NodeFilter = Callable[[Any], bool]


def _resolve_args(
    value: Union[str, NodeFilter, None], node_filter: Optional[NodeFilter]
) -> tuple[str, Optional[NodeFilter]]:
    # add_open(node, factory, filter) is accepted as well
    if callable(value):
        return "", value
    return (value if value is not None else ""), node_filter


def _make_sentinel(
    node: Any,
    factory: Callable[..., Any],
    suffix: str,
    value: Union[str, NodeFilter, None],
    node_filter: Optional[NodeFilter],
) -> Optional[Any]:
    assert_node(node)
    assert_function(factory, "factory")
    assert_type_name(node)

    payload, node_filter = _resolve_args(value, node_filter)
    if node_filter is not None and not node_filter(node):
        logger.debug(f"Filter skipped {suffix} sentinel for {node.type!r}")
        return None

    return factory(type=node.type + suffix, value=payload)


def add_open(
    node: Any,
    factory: Callable[..., Any],
    value: Union[str, NodeFilter, None] = None,
    node_filter: Optional[NodeFilter] = None,
) -> Optional[Any]:
    """
    Unshift a ``<type>.open`` node onto ``node.nodes``.

    Args:
        node: Node to receive the sentinel
        factory: Node factory called as ``factory(type=..., value=...)``
        value: Sentinel payload, or the filter when no payload is needed
        node_filter: Predicate; when it returns False nothing is added

    Returns:
        The new open node, or None when the filter rejected ``node``
    """
    open_node = _make_sentinel(
        node, factory, get_config().open_suffix, value, node_filter
    )
    if open_node is not None:
        unshift_node(node, open_node)
    return open_node


def add_close(
    node: Any,
    factory: Callable[..., Any],
    value: Union[str, NodeFilter, None] = None,
    node_filter: Optional[NodeFilter] = None,
) -> Optional[Any]:
    """
    Push a ``<type>.close`` node onto ``node.nodes``.

    Returns:
        The new close node, or None when the filter rejected ``node``
    """
    close_node = _make_sentinel(
        node, factory, get_config().close_suffix, value, node_filter
    )
    if close_node is not None:
        push_node(node, close_node)
    return close_node


def wrap_nodes(
    node: Any, factory: Callable[..., Any], node_filter: Optional[NodeFilter] = None
) -> Any:
    """Wrap ``node.nodes`` as ``[open, *original, close]`` and return ``node``."""
    assert_node(node)
    assert_function(factory, "factory")

    add_open(node, factory, node_filter=node_filter)
    add_close(node, factory, node_filter=node_filter)
    return node
