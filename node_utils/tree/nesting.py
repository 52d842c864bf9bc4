"""
Nesting tracker - per-type stacks of currently entered nodes.

A driver (parser or compiler) pushes a node when it enters a construct and
pops it when it leaves, so "am I inside X" is answered from the running
stacks instead of walking parent links.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional

from ..core.config import get_config
from ..core.exceptions import InvalidArgumentError, NestingStateError
from ..node.guards import assert_node, assert_state, assert_type, is_node

logger = logging.getLogger(__name__)


def _strip_suffix(type_name: str, suffix: str) -> str:
    if type_name.endswith(suffix):
        return type_name[: -len(suffix)]
    return type_name


def _tracking_key(node: Any, suffix: str) -> str:
    """Key is the parent's type, or the node's type without ``suffix``."""
    parent = getattr(node, "parent", None)
    if parent is not None:
        assert_type(
            is_node(parent), 'expected "node.parent" to be an instance of Node', "node.parent"
        )
        assert_type(
            isinstance(getattr(parent, "type", None), str),
            'expected "node.parent.type" to be a string',
            "node.parent.type",
        )
        return parent.type

    assert_type(
        isinstance(getattr(node, "type", None), str),
        'expected "node.type" to be a string',
        "node.type",
    )
    return _strip_suffix(node.type, suffix)


def add_type(state: Any, node: Any) -> List[Any]:
    """
    Push ``node`` onto the ``state.inside`` stack for its type.

    Returns:
        The stack the node was pushed onto
    """
    assert_node(node)
    assert_state(state)

    key = _tracking_key(node, get_config().open_suffix)
    if getattr(state, "inside", None) is None:
        state.inside = {}
    stack = state.inside.setdefault(key, [])
    stack.append(node)
    logger.debug(f"Entered {key!r} (depth {len(stack)})")
    return stack


def remove_type(state: Any, node: Any) -> Optional[Any]:
    """
    Pop the top of the ``state.inside`` stack for the node's type.

    Returns:
        The popped node, or None if that type has no stack

    Raises:
        NestingStateError: If add_type() was never called on ``state``
    """
    assert_node(node)
    assert_state(state)

    key = _tracking_key(node, get_config().close_suffix)
    inside = getattr(state, "inside", None)
    if inside is None:
        raise NestingStateError(
            f'expected "state.inside" to be an object when removing {key!r}',
            node_type=key,
        )

    stack = inside.get(key)
    if not stack:
        return None
    popped = stack.pop()
    logger.debug(f"Left {key!r} (depth {len(stack)})")
    return popped


def is_inside_type(state: Any, type_name: str) -> bool:
    """Return True if the stack for ``type_name`` exists and is non-empty."""
    assert_state(state)
    assert_type(isinstance(type_name, str), 'expected "type" to be a string', "type")

    inside = getattr(state, "inside", None) or {}
    return len(inside.get(type_name) or ()) > 0


def is_inside(state: Any, node: Any, matcher: Any) -> bool:
    """
    Return True if ``node`` is nested in a construct matching ``matcher``.

    Args:
        state: Nesting state
        node: Node being examined
        matcher: Exact type name, compiled pattern, or a collection of either

    Raises:
        InvalidArgumentError: If ``matcher`` has an unsupported shape
    """
    assert_node(node)
    assert_state(state)

    parent = getattr(node, "parent", None)
    assert_type(
        parent is None or is_node(parent),
        'expected "node.parent" to be an instance of Node',
        "node.parent",
    )
    parent_type = getattr(parent, "type", None)

    if isinstance(matcher, str):
        return parent_type == matcher or is_inside_type(state, matcher)

    if isinstance(matcher, re.Pattern):
        if isinstance(parent_type, str) and matcher.search(parent_type):
            return True
        inside = getattr(state, "inside", None) or {}
        return any(stack and matcher.search(key) for key, stack in inside.items())

    if isinstance(matcher, (list, tuple, set, frozenset)):
        return any(is_inside(state, node, item) for item in matcher)

    raise InvalidArgumentError(
        'expected "type" to be a string, pattern or collection of them', argument="type"
    )
