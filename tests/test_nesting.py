"""
Tests for the nesting tracker (add_type/remove_type/is_inside).

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import re
from types import SimpleNamespace

import pytest

from node_utils import (
    InvalidArgumentError,
    NestingState,
    NestingStateError,
    Node,
    PlainNode,
    add_type,
    is_inside,
    is_inside_type,
    push_node,
    remove_type,
)


def test_add_then_remove_toggles_inside(state) -> None:
    brace = Node("brace")
    stack = add_type(state, brace)

    assert stack == [brace]
    assert state.inside == {"brace": [brace]}
    assert is_inside_type(state, "brace") is True

    assert remove_type(state, brace) is brace
    assert is_inside_type(state, "brace") is False
    assert state.inside == {"brace": []}


def test_open_suffix_is_stripped_for_orphans(state) -> None:
    add_type(state, PlainNode("brace.open"))
    assert is_inside_type(state, "brace") is True
    assert remove_type(state, PlainNode("brace.close")) is not None
    assert is_inside_type(state, "brace") is False


def test_parent_type_is_the_key(state) -> None:
    brace = Node("brace")
    open_node = Node("brace.open")
    text = Node("text")
    push_node(brace, open_node)
    push_node(brace, text)

    add_type(state, text)
    assert list(state.inside) == ["brace"]
    assert remove_type(state, text) is text


def test_stack_balance_over_sequence(state) -> None:
    nodes = [Node("paren") for _ in range(3)]
    for depth, node in enumerate(nodes, start=1):
        add_type(state, node)
        assert len(state.inside["paren"]) == depth
        assert is_inside_type(state, "paren")

    for node in reversed(nodes):
        assert remove_type(state, node) is node
    assert is_inside_type(state, "paren") is False
    assert remove_type(state, nodes[0]) is None


def test_remove_type_without_any_add_raises(state) -> None:
    with pytest.raises(NestingStateError) as exc_info:
        remove_type(state, Node("brace"))
    assert exc_info.value.node_type == "brace"


def test_remove_type_unknown_key_is_none(state) -> None:
    add_type(state, Node("brace"))
    assert remove_type(state, Node("paren")) is None


def test_is_inside_type_unknown_state_is_false(state) -> None:
    assert is_inside_type(state, "brace") is False


def test_is_inside_exact_by_parent_or_stack(state) -> None:
    brace = Node("brace")
    child = Node("text")
    assert is_inside(state, child, "brace") is False

    push_node(brace, child)
    assert is_inside(state, child, "brace") is True

    orphan = Node("text")
    add_type(state, Node("brace"))
    assert is_inside(state, orphan, "brace") is True


def test_is_inside_collection_is_or(state) -> None:
    add_type(state, Node("brace"))
    node = Node("text")
    assert is_inside(state, node, ["foo", "brace"]) is True
    assert is_inside(state, node, ("foo", "bar")) is False
    assert is_inside(state, node, []) is False


def test_is_inside_pattern(state) -> None:
    node = Node("text")
    assert is_inside(state, node, re.compile("^br")) is False

    parent = Node("bracket")
    push_node(parent, node)
    assert is_inside(state, node, re.compile("^br")) is True

    orphan = Node("text")
    add_type(state, Node("brace"))
    assert is_inside(state, orphan, re.compile("ace$")) is True

    remove_type(state, Node("brace"))
    # key still present but its stack is empty
    assert is_inside(state, orphan, re.compile("ace$")) is False


def test_is_inside_mixed_collection(state) -> None:
    add_type(state, Node("quote"))
    assert is_inside(state, Node("x"), ["brace", re.compile("^qu")]) is True


def test_is_inside_rejects_unknown_matcher(state) -> None:
    with pytest.raises(InvalidArgumentError):
        is_inside(state, Node("text"), 42)


def test_states_are_independent() -> None:
    first, second = NestingState(), NestingState()
    add_type(first, Node("brace"))
    assert is_inside_type(first, "brace")
    assert not is_inside_type(second, "brace")


def test_any_attribute_object_works_as_state() -> None:
    state = SimpleNamespace()
    add_type(state, Node("brace"))
    assert is_inside_type(state, "brace")


def test_invalid_arguments_raise(state) -> None:
    with pytest.raises(InvalidArgumentError):
        add_type(None, Node("brace"))
    with pytest.raises(InvalidArgumentError):
        add_type(state, "brace")
    with pytest.raises(InvalidArgumentError):
        is_inside_type(state, 1)
    with pytest.raises(InvalidArgumentError):
        add_type(state, PlainNode(None))


def test_slotted_object_works_as_state() -> None:
    class SlottedState:
        __slots__ = ("inside",)

    state = SlottedState()
    add_type(state, Node("brace"))
    assert is_inside_type(state, "brace")
    assert remove_type(state, Node("brace")) is not None


def test_mapping_is_not_a_state() -> None:
    with pytest.raises(InvalidArgumentError):
        add_type({"inside": None}, Node("brace"))
