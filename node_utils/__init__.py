"""
node_utils - tree-mutation and nesting-tracking helpers for AST pipelines.

Shared by a parser (while building the tree) and a compiler (while walking
it). Works with any object carrying a truthy ``is_node`` marker and prefers
a node's own capability methods (push, pop, remove, is_open, ...) over the
generic implementations.

Public API:
  - node model: is_node, Node, PlainNode, NestingState
  - mutation: push_node, unshift_node, pop_node, shift_node, remove_node
  - sentinels: add_open, add_close, wrap_nodes
  - traversal: visit, map_visit
  - nesting: add_type, remove_type, is_inside_type, is_inside
  - queries, compiler helpers and primitives (see ``node_utils.tree``)
  - parse_matcher

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .core.config import NodeUtilsConfig, get_config, load_config, set_config
from .core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    MatcherParseError,
    NestingStateError,
    NodeUtilsError,
)
from .matcher import parse_matcher
from .node import NestingState, Node, PlainNode, is_node
from .tree import (
    add_close,
    add_open,
    add_type,
    append,
    arrayify,
    find_node,
    first_of_type,
    has_close,
    has_node,
    has_open,
    has_open_and_close,
    has_type,
    identity,
    is_block,
    is_close,
    is_empty,
    is_inside,
    is_inside_type,
    is_open,
    is_type,
    last,
    last_node,
    map_visit,
    noop,
    pop_node,
    push_node,
    remove_node,
    remove_type,
    shift_node,
    stringify,
    to_noop,
    trim,
    unshift_node,
    value,
    visit,
    wrap_nodes,
)

__version__ = "1.0.0"

__all__ = [
    "NodeUtilsConfig",
    "get_config",
    "load_config",
    "set_config",
    "ConfigurationError",
    "InvalidArgumentError",
    "MatcherParseError",
    "NestingStateError",
    "NodeUtilsError",
    "parse_matcher",
    "NestingState",
    "Node",
    "PlainNode",
    "is_node",
    "add_close",
    "add_open",
    "add_type",
    "append",
    "arrayify",
    "find_node",
    "first_of_type",
    "has_close",
    "has_node",
    "has_open",
    "has_open_and_close",
    "has_type",
    "identity",
    "is_block",
    "is_close",
    "is_empty",
    "is_inside",
    "is_inside_type",
    "is_open",
    "is_type",
    "last",
    "last_node",
    "map_visit",
    "noop",
    "pop_node",
    "push_node",
    "remove_node",
    "remove_type",
    "shift_node",
    "stringify",
    "to_noop",
    "trim",
    "unshift_node",
    "value",
    "visit",
    "wrap_nodes",
]
