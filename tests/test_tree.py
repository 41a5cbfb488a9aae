"""
Test: Display Tree
==================
"""

import pytest
from dataclasses import FrozenInstanceError

from iitquantity.model.tree import CodeBlock, DisplayTree, Divider, Icon, ScrollView, Stack, Text


@pytest.fixture
def small_tree():
    return DisplayTree(root=ScrollView(role="root", content=Stack(items=(
        Text(role="a", text="First line\nsecond line"),
        Divider(),
        Stack(role="inner", items=(Icon(role="b", name="camera.fill"),)),
        CodeBlock(role="c", content="x\ny\nz"),
    ))))


def test_walk_is_depth_first_in_display_order(small_tree):
    roles = [node.role for node in small_tree.walk() if node.role]
    assert roles == ["root", "a", "inner", "b", "c"]


def test_nodes_are_immutable():
    text = Text(text="hello")
    with pytest.raises(FrozenInstanceError):
        text.text = "changed"


def test_outline(small_tree):
    assert small_tree.outline().splitlines() == [
        "ScrollView [root]",
        "  Stack",
        "    Text [a]: First line",
        "    Divider",
        "    Stack [inner]",
        "      Icon [b]: camera.fill",
        "    CodeBlock [c]: 3 lines",
    ]
