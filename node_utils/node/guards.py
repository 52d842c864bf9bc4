"""
Node capability guard and argument assertions.

Every public operation preconditions its arguments through these helpers
and fails with InvalidArgumentError before touching any state.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Any, Optional

from ..core.constants import NODE_MARKER_ATTR
from ..core.exceptions import InvalidArgumentError


def is_node(value: Any) -> bool:
    """
    Return True if ``value`` carries a truthy node-identity marker.

    The check is shallow: only the marker is inspected, not the full shape.
    Classes are rejected even when they declare the marker as a class attribute.
    """
    if value is None or isinstance(value, type):
        return False
    return bool(getattr(value, NODE_MARKER_ATTR, False))


def is_state(value: Any) -> bool:
    """
    Return True if ``value`` can hold an ``inside`` attribute.

    Any instance with a ``__dict__`` qualifies, as does a ``__slots__`` class
    declaring ``inside``. Mappings are not states: ``{"inside": ...}`` is
    rejected because the tracker reads and assigns ``state.inside``.
    """
    if value is None or isinstance(value, type):
        return False
    return hasattr(value, "__dict__") or hasattr(type(value), "inside")


def capability(obj: Any, name: str) -> Optional[Any]:
    """Return the callable capability method ``name`` of ``obj``, if it has one."""
    if obj is None:
        return None
    method = getattr(obj, name, None)
    return method if callable(method) else None


def assert_type(condition: bool, message: str, argument: str = None) -> None:
    """Raise InvalidArgumentError with ``message`` when ``condition`` is false."""
    if not condition:
        raise InvalidArgumentError(message, argument=argument)


def assert_node(value: Any, argument: str = "node") -> None:
    assert_type(
        is_node(value), f'expected "{argument}" to be an instance of Node', argument
    )


def assert_function(value: Any, argument: str = "fn") -> None:
    assert_type(callable(value), f'expected "{argument}" to be a function', argument)


def assert_state(value: Any, argument: str = "state") -> None:
    assert_type(is_state(value), f'expected "{argument}" to be an object', argument)


def assert_nodes_list(value: Any, argument: str = "nodes", optional: bool = False) -> None:
    """Check that ``value`` is a list (or None when ``optional``)."""
    ok = isinstance(value, list) or (optional and value is None)
    assert_type(ok, f'expected "{argument}" to be an array', argument)


def assert_nodes_sequence(
    value: Any, argument: str = "nodes", optional: bool = False
) -> None:
    """
    Check that ``value`` is a list or tuple (or None when ``optional``).

    Read-only walks accept tuples; inserting operations still need a list.
    """
    ok = isinstance(value, (list, tuple)) or (optional and value is None)
    assert_type(ok, f'expected "{argument}" to be an array', argument)


def assert_type_name(node: Any, argument: str = "node.type") -> None:
    assert_type(
        isinstance(getattr(node, "type", None), str),
        f'expected "{argument}" to be a string',
        argument,
    )
