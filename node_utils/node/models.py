"""
Reference node models.

``Node`` is a "smart" node exposing its own tree-editing capabilities and
doubles as the default node factory. ``PlainNode`` is a bare tagged record
with no capability methods. ``NestingState`` is the caller-owned per-pass
nesting map.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..core.config import get_config
from .guards import assert_node, assert_nodes_list, assert_type, capability


def link_parent(child: Any, parent: Any) -> None:
    """Set ``child.parent``, going through ``child.define`` when available."""
    define = capability(child, "define")
    if define is not None:
        define("parent", parent)
    else:
        setattr(child, "parent", parent)


class Node:
    """
    AST node with built-in tree-editing capabilities.

    ``parent`` is held through a weak reference: the parent's ``nodes`` list
    is the only owning relation.
    """

    is_node = True

    def __init__(
        self,
        type: str,
        value: Optional[str] = None,
        *,
        nodes: Optional[List[Any]] = None,
        val: Optional[str] = None,
        parent: Optional[Any] = None,
        **extra: Any,
    ) -> None:
        assert_type(isinstance(type, str), 'expected "type" to be a string', "type")
        self.type = type
        self.value = value if value is not None else val
        self.nodes: Optional[List[Any]] = None
        self._parent_ref: Optional[Callable[[], Any]] = None
        self._extra_keys: List[str] = []

        for key, item in extra.items():
            assert_type(
                not key.startswith("_") and not hasattr(Node, key),
                f'"{key}" is a reserved node attribute',
                key,
            )
            setattr(self, key, item)
            self._extra_keys.append(key)

        if nodes is not None:
            assert_nodes_list(nodes)
            self.nodes = []
            for child in nodes:
                self.push(child)
        if parent is not None:
            self.parent = parent

    @property
    def parent(self) -> Optional[Any]:
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: Optional[Any]) -> None:
        if value is None:
            self._parent_ref = None
            return
        try:
            self._parent_ref = weakref.ref(value)
        except TypeError:
            # Parent type without __weakref__ slot
            self._parent_ref = lambda: value

    @property
    def children(self) -> Optional[List[Any]]:
        """Read-only alias of ``nodes``."""
        return self.nodes

    @property
    def first(self) -> Optional[Any]:
        return self.nodes[0] if self.nodes else None

    @property
    def last(self) -> Optional[Any]:
        return self.nodes[-1] if self.nodes else None

    def define(self, name: str, value: Any) -> "Node":
        setattr(self, name, value)
        return self

    def push(self, node: Any) -> int:
        """Append ``node`` to ``nodes`` and return the new length."""
        assert_node(node)
        link_parent(node, self)
        if self.nodes is None:
            self.nodes = []
        self.nodes.append(node)
        return len(self.nodes)

    def unshift(self, node: Any) -> int:
        """Prepend ``node`` to ``nodes`` and return the new length."""
        assert_node(node)
        link_parent(node, self)
        if self.nodes is None:
            self.nodes = []
        self.nodes.insert(0, node)
        return len(self.nodes)

    def pop(self) -> Optional[Any]:
        return self.nodes.pop() if self.nodes else None

    def shift(self) -> Optional[Any]:
        return self.nodes.pop(0) if self.nodes else None

    def remove(self, node: Any) -> Optional[Any]:
        """Remove ``node`` (by identity) and return it, or None if absent."""
        if not self.nodes:
            return None
        for idx, child in enumerate(self.nodes):
            if child is node:
                return self.nodes.pop(idx)
        return None

    def has(self, node: Any) -> bool:
        return any(child is node for child in self.nodes or ())

    def is_open(self, node: Any) -> bool:
        """Classify ``node`` as this node's open sentinel (or itself as one)."""
        suffix = get_config().open_suffix
        if node is self:
            return self.type.endswith(suffix)
        return getattr(node, "type", None) == self.type + suffix

    def is_close(self, node: Any) -> bool:
        """Classify ``node`` as this node's close sentinel (or itself as one)."""
        suffix = get_config().close_suffix
        if node is self:
            return self.type.endswith(suffix)
        return getattr(node, "type", None) == self.type + suffix

    def is_block(self, node: Any) -> bool:
        """True if ``node`` starts with its open and ends with its close sentinel."""
        nodes = getattr(node, "nodes", None)
        if not nodes:
            return False
        config = get_config()
        return (
            getattr(nodes[0], "type", None) == node.type + config.open_suffix
            and getattr(nodes[-1], "type", None) == node.type + config.close_suffix
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree to a JSON-compatible dictionary."""
        result: Dict[str, Any] = {"type": self.type}
        if self.value is not None:
            result["value"] = self.value
        for key in self._extra_keys:
            result[key] = getattr(self, key)
        if self.nodes is not None:
            result["nodes"] = [_child_to_dict(child) for child in self.nodes]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        """Build a subtree from ``to_dict()`` output, restoring parent links."""
        assert_type(isinstance(data, dict), 'expected "data" to be a dict', "data")
        assert_type(
            isinstance(data.get("type"), str), 'expected "data.type" to be a string', "data"
        )
        extra = {
            k: v for k, v in data.items() if k not in ("type", "value", "val", "nodes")
        }
        children = data.get("nodes")
        if children is not None:
            assert_nodes_list(children, "data.nodes")
            children = [cls.from_dict(child) for child in children]
        return cls(
            data["type"],
            data.get("value"),
            val=data.get("val"),
            nodes=children,
            **extra,
        )

    def __repr__(self) -> str:
        count = len(self.nodes) if self.nodes is not None else None
        return f"Node(type={self.type!r}, value={self.value!r}, nodes={count})"


def _child_to_dict(child: Any) -> Dict[str, Any]:
    to_dict = capability(child, "to_dict")
    if to_dict is not None:
        return to_dict()
    result: Dict[str, Any] = {"type": child.type}
    value = getattr(child, "value", None) or getattr(child, "val", None)
    if value is not None:
        result["value"] = value
    nodes = getattr(child, "nodes", None)
    if nodes is not None:
        result["nodes"] = [_child_to_dict(c) for c in nodes]
    return result


class PlainNode:
    """Bare tagged record without capability methods."""

    is_node = True

    def __init__(
        self,
        type: str,
        value: Optional[str] = None,
        *,
        val: Optional[str] = None,
        nodes: Optional[List[Any]] = None,
        parent: Optional[Any] = None,
    ) -> None:
        self.type = type
        self.value = value
        self.val = val
        self.nodes = nodes
        self.parent = parent

    def __repr__(self) -> str:
        return f"PlainNode(type={self.type!r}, value={self.value!r})"


@dataclass
class NestingState:
    """
    Per-traversal map from type name to a stack of entered nodes.

    ``inside`` stays None until the first add_type() call.
    """

    inside: Optional[Dict[str, List[Any]]] = None
