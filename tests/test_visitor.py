"""
Tests for visit / map_visit traversal.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from node_utils import InvalidArgumentError, Node, PlainNode, map_visit, visit


def _tree():
    return Node.from_dict(
        {
            "type": "root",
            "nodes": [
                {
                    "type": "a",
                    "nodes": [
                        {"type": "a1", "nodes": [{"type": "a1x", "value": "x"}]},
                        {"type": "a2", "value": "y"},
                    ],
                },
                {"type": "b", "nodes": []},
                {"type": "c", "value": "z"},
            ],
        }
    )


def test_visit_is_preorder_left_to_right_once_per_node() -> None:
    seen = []
    root = _tree()

    result = visit(root, lambda n: seen.append(n.type))

    assert result is root
    assert seen == ["root", "a", "a1", "a1x", "a2", "b", "c"]


def test_map_visit_skips_the_node_itself() -> None:
    seen = []
    map_visit(_tree(), lambda n: seen.append(n.type))
    assert seen[0] == "a"
    assert "root" not in seen


def test_visit_ignores_callback_return_value() -> None:
    root = _tree()
    original = list(root.nodes)
    visit(root, lambda n: Node("replacement"))
    assert root.nodes == original


def test_map_visit_on_leaf_is_noop() -> None:
    leaf = PlainNode("text", "a")
    calls = []
    assert map_visit(leaf, calls.append) is leaf
    assert calls == []


def test_visit_leaf_calls_fn_once() -> None:
    leaf = PlainNode("text", "a")
    calls = []
    visit(leaf, calls.append)
    assert calls == [leaf]


def test_non_list_children_raise() -> None:
    node = PlainNode("bad", nodes="abc")
    with pytest.raises(InvalidArgumentError):
        map_visit(node, lambda n: None)
    with pytest.raises(InvalidArgumentError):
        visit(node, lambda n: None)


def test_visit_requires_callable_and_node() -> None:
    with pytest.raises(InvalidArgumentError):
        visit(Node("a"), "not callable")
    with pytest.raises(InvalidArgumentError):
        visit({"type": "a"}, lambda n: None)


def test_visit_can_mutate_during_walk() -> None:
    root = _tree()
    visit(root, lambda n: setattr(n, "visited", True))
    assert all(getattr(n, "visited", False) for n in [root, *root.nodes])


def test_tuple_children_are_walked() -> None:
    a, b = PlainNode("a"), PlainNode("b")
    root = PlainNode("root", nodes=(a, b))
    seen = []
    visit(root, lambda n: seen.append(n.type))
    assert seen == ["root", "a", "b"]
