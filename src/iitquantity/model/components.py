"""
Reusable display regions: comparison card, labeled row and code panel.
Each is a pure function from constant data to a display tree node.
"""
from __future__ import annotations

from iitquantity.model.content import ComparisonCardData, LabeledRowData
from iitquantity.model.styles import Alignment, Axis, Color, Font, Weight
from iitquantity.model.tree import Card, CodeBlock, Icon, Stack, Text


def labeled_row(data: LabeledRowData) -> Stack:
    """A small secondary caption above a bold value."""
    return Stack(
        role="labeled_row",
        axis=Axis.VERTICAL,
        spacing=2,
        items=(
            Text(role="row_label", text=data.label, font=Font.CAPTION, weight=Weight.BOLD, color=Color.SECONDARY),
            Text(role="row_value", text=data.value, font=Font.CAPTION, weight=Weight.SEMIBOLD, color=data.value_color),
        ),
    )


def comparison_card(data: ComparisonCardData) -> Card:
    return Card(
        role="card",
        corner_radius=12,
        content=Stack(
            role=f"card:{data.key}",
            axis=Axis.VERTICAL,
            spacing=12,
            alignment=Alignment.CENTER,
            items=(
                Icon(role="card_icon", name=data.icon, color=data.accent, font=Font.LARGE_TITLE, height=40),
                Text(role="card_title", text=data.title, font=Font.HEADLINE, weight=Weight.SEMIBOLD,
                     alignment=Alignment.CENTER),
                Stack(
                    role="card_rows",
                    axis=Axis.VERTICAL,
                    spacing=8,
                    items=tuple(labeled_row(row) for row in data.rows()),
                ),
            ),
        ),
    )


def code_panel(content: str) -> CodeBlock:
    return CodeBlock(role="code_panel", content=content, font_family="Menlo", font_size=12)
