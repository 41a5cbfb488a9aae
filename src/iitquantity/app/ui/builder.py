"""
Display Tree → Qt Widgets
=========================
Turns the immutable display tree produced by the model layer into a widget
hierarchy. Each node with a ``role`` becomes a widget whose ``objectName`` is
that role, so regions can be located with ``findChild``/``findChildren``.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QIcon, QPainter, QPixmap
from PySide6.QtWidgets import (
    QBoxLayout, QFrame, QGroupBox, QHBoxLayout, QLabel, QPlainTextEdit, QScrollArea,
    QSizePolicy, QVBoxLayout, QWidget,
)

from iitquantity.config import icon_path
from iitquantity.model.styles import Alignment, Axis
from iitquantity.model.tree import Card, CodeBlock, Divider, GroupBox, Icon, Node, ScrollView, Stack, Text
from iitquantity.app.ui.styles import (
    FALLBACK_GLYPH, ICON_GLYPHS, css_rgba, make_code_font, make_font, resolve_color,
)

logger = logging.getLogger(__name__)


class WidgetBuilder:
    """Builds widgets for display tree nodes. Holds no state between builds."""

    def build(self, node: Node, parent: QWidget | None = None) -> QWidget:
        match node:
            case ScrollView():
                widget = self._scroll_view(node, parent)
            case Stack():
                widget = self._stack(node, parent)
            case Card():
                widget = self._card(node, parent)
            case GroupBox():
                widget = self._group_box(node, parent)
            case Text():
                widget = self._text(node, parent)
            case Icon():
                widget = self._icon(node, parent)
            case CodeBlock():
                widget = self._code_block(node, parent)
            case Divider():
                widget = self._divider(parent)
            case _:
                raise TypeError(f"Cannot build a widget for node type '{type(node).__name__}'.")

        if node.role:
            widget.setObjectName(node.role)
        return widget

    # ---- containers ----

    def _scroll_view(self, node: ScrollView, parent: QWidget | None) -> QScrollArea:
        scroller = QScrollArea(parent)
        scroller.setWidgetResizable(True)
        scroller.setFrameShape(QFrame.Shape.NoFrame)
        scroller.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        inner = QWidget()
        lay = QVBoxLayout(inner)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(self.build(node.content, inner))
        lay.addStretch(1)
        scroller.setWidget(inner)
        return scroller

    def _stack(self, node: Stack, parent: QWidget | None) -> QWidget:
        widget = QWidget(parent)
        layout: QBoxLayout
        if node.axis == Axis.HORIZONTAL:
            layout = QHBoxLayout(widget)
        else:
            layout = QVBoxLayout(widget)
        layout.setSpacing(node.spacing)
        layout.setContentsMargins(node.padding, node.padding, node.padding, node.padding)

        for item in node.items:
            child = self.build(item, widget)
            if node.axis == Axis.HORIZONTAL and node.alignment == Alignment.TOP:
                layout.addWidget(child, 1, Qt.AlignmentFlag.AlignTop)
            elif node.axis == Axis.HORIZONTAL:
                layout.addWidget(child, 1)
            else:
                layout.addWidget(child)
        return widget

    def _card(self, node: Card, parent: QWidget | None) -> QFrame:
        frame = QFrame(parent)
        name = node.role or "card"
        frame.setObjectName(name)
        frame.setStyleSheet(
            f"QFrame#{name} {{ background-color: palette(alternate-base); "
            f"border-radius: {node.corner_radius}px; }}"
        )
        lay = QVBoxLayout(frame)
        lay.setContentsMargins(node.padding, node.padding, node.padding, node.padding)
        lay.addWidget(self.build(node.content, frame))
        return frame

    def _group_box(self, node: GroupBox, parent: QWidget | None) -> QGroupBox:
        box = QGroupBox(parent)
        if node.padding_top:
            name = node.role or "group"
            box.setObjectName(name)
            box.setStyleSheet(f"QGroupBox#{name} {{ margin-top: {node.padding_top}px; }}")
        lay = QVBoxLayout(box)
        lay.addWidget(self.build(node.content, box))
        return box

    # ---- leaves ----

    def _text(self, node: Text, parent: QWidget | None) -> QLabel:
        label = QLabel(parent)
        label.setTextFormat(Qt.TextFormat.MarkdownText if node.markdown else Qt.TextFormat.PlainText)
        label.setText(node.text)
        label.setWordWrap(True)
        label.setFont(make_font(node.font, node.weight))
        color = resolve_color(node.color, label.palette())
        label.setStyleSheet(f"color: {css_rgba(color)};")
        if node.alignment == Alignment.CENTER:
            label.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)
        else:
            label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        if node.markdown:
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextBrowserInteraction)
            label.setOpenExternalLinks(True)
        else:
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        label.setContentsMargins(0, 0, 0, node.padding_bottom)
        return label

    def _icon(self, node: Icon, parent: QWidget | None) -> QLabel:
        label = QLabel(parent)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setFixedHeight(node.height)
        color = resolve_color(node.color, label.palette())

        pixmap = self._icon_pixmap(node.name, node.height, color)
        if pixmap is not None:
            label.setPixmap(pixmap)
            return label

        logger.warning("Icon '%s' is not available, falling back to a text glyph.", node.name)
        label.setText(ICON_GLYPHS.get(node.name, FALLBACK_GLYPH))
        label.setFont(make_font(node.font))
        label.setStyleSheet(f"color: {css_rgba(color)};")
        return label

    @staticmethod
    def _icon_pixmap(name: str, size: int, color: QColor) -> QPixmap | None:
        path = icon_path(name)
        if path is None:
            return None
        pixmap = QIcon(path).pixmap(size, size)
        if pixmap.isNull():
            return None

        # Tint the monochrome shape with the accent color
        painter = QPainter(pixmap)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceIn)
        painter.fillRect(pixmap.rect(), color)
        painter.end()
        return pixmap

    def _code_block(self, node: CodeBlock, parent: QWidget | None) -> QPlainTextEdit:
        edit = QPlainTextEdit(parent)
        edit.setReadOnly(True)
        edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        edit.setFont(make_code_font(node.font_family, node.font_size))
        edit.setPlainText(node.content)
        edit.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        edit.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        name = node.role or "code"
        edit.setObjectName(name)
        border = resolve_color(node.border_color, edit.palette())
        edit.setStyleSheet(
            f"QPlainTextEdit#{name} {{ background-color: palette(base); "
            f"border: {node.border_width}px solid {css_rgba(border, node.border_opacity)}; "
            f"border-radius: {node.corner_radius}px; padding: {node.padding}px; }}"
        )

        # Grow to the full content height; the enclosing scroll view scrolls vertically
        lines = node.content.count("\n") + 1
        line_height = edit.fontMetrics().lineSpacing()
        scrollbar = edit.horizontalScrollBar().sizeHint().height()
        edit.setFixedHeight(lines * line_height + 2 * (node.padding + node.border_width) + scrollbar + 8)
        return edit

    @staticmethod
    def _divider(parent: QWidget | None) -> QFrame:
        line = QFrame(parent)
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Sunken)
        return line
