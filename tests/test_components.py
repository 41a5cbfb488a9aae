"""
Test: Reusable Display Regions
==============================

Labeled row, comparison card and code panel as pure functions.
"""

from iitquantity.model.components import code_panel, comparison_card, labeled_row
from iitquantity.model.content import SYSTEMS, ComparisonCardData, LabeledRowData
from iitquantity.model.styles import Alignment, Color, Font, Weight
from iitquantity.model.tree import Card, CodeBlock, Icon, Stack, Text


def test_labeled_row_defaults_to_primary():
    row = labeled_row(LabeledRowData("Integration:", "Trivial"))
    assert isinstance(row, Stack)
    label, value = row.items
    assert (label.text, label.font, label.weight, label.color) == (
        "Integration:", Font.CAPTION, Weight.BOLD, Color.SECONDARY
    )
    assert (value.text, value.font, value.weight, value.color) == (
        "Trivial", Font.CAPTION, Weight.SEMIBOLD, Color.PRIMARY
    )


def test_labeled_row_uses_given_color():
    row = labeled_row(LabeledRowData("Φ (Phi) Value:", "Φ ≈ 0", value_color=Color.BLUE))
    assert row.items[1].color == Color.BLUE


def test_comparison_card_layout():
    data = ComparisonCardData(
        key="thermostat",
        title="A Thermostat",
        icon="thermometer",
        accent=Color.BLUE,
        differentiation="Low",
        integration="Low",
        phi="Φ ≈ 0",
    )
    card = comparison_card(data)
    assert isinstance(card, Card)
    assert card.corner_radius == 12
    stack = card.content
    assert stack.role == "card:thermostat"
    assert stack.spacing == 12
    assert stack.alignment == Alignment.CENTER

    icon, title, rows = stack.items
    assert isinstance(icon, Icon)
    assert (icon.name, icon.color, icon.height) == ("thermometer", Color.BLUE, 40)
    assert isinstance(title, Text)
    assert title.text == "A Thermostat"
    assert title.alignment == Alignment.CENTER
    assert [r.items[1].text for r in rows.items] == ["Low", "Low", "Φ ≈ 0"]
    assert rows.items[2].items[1].color == Color.BLUE


def test_comparison_card_is_pure():
    assert comparison_card(SYSTEMS[0]) == comparison_card(SYSTEMS[0])
    assert comparison_card(SYSTEMS[0]) != comparison_card(SYSTEMS[1])


def test_system_fields_are_non_empty():
    assert len(SYSTEMS) == 3
    for system in SYSTEMS:
        assert all([system.title, system.icon, system.accent, system.differentiation,
                    system.integration, system.phi])


def test_code_panel_keeps_content_verbatim():
    text = "func broken( {\n\t  // not parsed\n"
    panel = code_panel(text)
    assert isinstance(panel, CodeBlock)
    assert panel.content == text
    assert panel.role == "code_panel"
