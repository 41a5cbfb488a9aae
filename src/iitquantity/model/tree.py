"""
Display Tree
============
Immutable nodes describing one render pass of a screen.

Every node is a frozen dataclass holding only strings, numbers, style tokens
and tuples of child nodes, so two trees built from the same constants compare
equal. A node may carry a ``role`` naming the display region it represents
(e.g. ``"header"`` or ``"code_panel"``); the Qt layer uses it as the widget's
object name.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from iitquantity.model.styles import Alignment, Axis, Color, Font, Weight


@dataclass(frozen=True)
class Node:
    """Base class for all display tree nodes."""
    role: str = ""

    def children(self) -> tuple[Node, ...]:
        return ()


@dataclass(frozen=True)
class Text(Node):
    text: str = ""
    font: Font = Font.BODY
    weight: Weight = Weight.REGULAR
    color: Color = Color.PRIMARY
    alignment: Alignment = Alignment.LEADING
    markdown: bool = False
    padding_bottom: int = 0


@dataclass(frozen=True)
class Icon(Node):
    """A named symbol, e.g. ``"camera.fill"``."""
    name: str = ""
    color: Color = Color.PRIMARY
    font: Font = Font.LARGE_TITLE
    height: int = 40


@dataclass(frozen=True)
class Divider(Node):
    pass


@dataclass(frozen=True)
class Stack(Node):
    axis: Axis = Axis.VERTICAL
    items: tuple[Node, ...] = ()
    spacing: int = 8
    alignment: Alignment = Alignment.LEADING
    padding: int = 0

    def children(self) -> tuple[Node, ...]:
        return self.items


@dataclass(frozen=True)
class Card(Node):
    """A padded block on a rounded secondary background."""
    content: Node = Divider()
    corner_radius: int = 12
    padding: int = 16

    def children(self) -> tuple[Node, ...]:
        return (self.content,)


@dataclass(frozen=True)
class GroupBox(Node):
    content: Node = Divider()
    padding_top: int = 0

    def children(self) -> tuple[Node, ...]:
        return (self.content,)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Verbatim monospaced text. The content is never parsed."""
    content: str = ""
    font_family: str = "Menlo"
    font_size: int = 12
    padding: int = 16
    corner_radius: int = 8
    border_color: Color = Color.GRAY
    border_opacity: float = 0.3
    border_width: int = 1


@dataclass(frozen=True)
class ScrollView(Node):
    content: Node = Divider()

    def children(self) -> tuple[Node, ...]:
        return (self.content,)


@dataclass(frozen=True)
class DisplayTree:
    """The complete result of a render pass."""
    root: Node

    def walk(self) -> Iterator[Node]:
        """Yield every node, depth first, in display order."""
        stack: list[Node] = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def find_all(self, role: str) -> list[Node]:
        return [node for node in self.walk() if node.role == role]

    def find(self, role: str) -> Node:
        """Return the single node with the given role."""
        found = self.find_all(role)
        if len(found) != 1:
            raise LookupError(f"Expected exactly one node with role '{role}', found {len(found)}.")
        return found[0]

    def outline(self) -> str:
        """An indented, human-readable listing of the tree."""
        lines: list[str] = []
        _outline(self.root, 0, lines)
        return "\n".join(lines)


def _outline(node: Node, depth: int, lines: list[str]) -> None:
    indent = "  " * depth
    label = type(node).__name__
    if node.role:
        label += f" [{node.role}]"

    match node:
        case Text(text=text):
            label += f": {text.splitlines()[0] if text else ''}"
        case Icon(name=name):
            label += f": {name}"
        case CodeBlock(content=content):
            label += f": {len(content.splitlines())} lines"

    lines.append(indent + label)
    for child in node.children():
        _outline(child, depth + 1, lines)
