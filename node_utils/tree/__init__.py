"""
Tree mutation, traversal, nesting and query operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .brackets import add_close, add_open, wrap_nodes
from .mutator import has_node, pop_node, push_node, remove_node, shift_node, unshift_node
from .nesting import add_type, is_inside, is_inside_type, remove_type
from .primitives import arrayify, last, last_node, stringify, trim
from .queries import (
    find_node,
    first_of_type,
    has_close,
    has_open,
    has_open_and_close,
    has_type,
    is_block,
    is_close,
    is_empty,
    is_open,
    is_type,
)
from .values import append, identity, noop, to_noop, value
from .visitor import map_visit, visit

__all__ = [
    "add_close",
    "add_open",
    "wrap_nodes",
    "has_node",
    "pop_node",
    "push_node",
    "remove_node",
    "shift_node",
    "unshift_node",
    "add_type",
    "is_inside",
    "is_inside_type",
    "remove_type",
    "arrayify",
    "last",
    "last_node",
    "stringify",
    "trim",
    "find_node",
    "first_of_type",
    "has_close",
    "has_open",
    "has_open_and_close",
    "has_type",
    "is_block",
    "is_close",
    "is_empty",
    "is_open",
    "is_type",
    "append",
    "identity",
    "noop",
    "to_noop",
    "value",
    "map_visit",
    "visit",
]
