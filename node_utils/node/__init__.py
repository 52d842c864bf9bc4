"""
Node model: capability guard, reference nodes and nesting state.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .guards import is_node
from .models import NestingState, Node, PlainNode, link_parent

__all__ = [
    "is_node",
    "NestingState",
    "Node",
    "PlainNode",
    "link_parent",
]
