"""
Test: Content View Renderer
===========================

Structure and literal content of the IIT quantity display tree.
"""

import pytest

from iitquantity.model import content
from iitquantity.model.renderer import render
from iitquantity.model.styles import Axis, Color, Font, Weight
from iitquantity.model.tree import Card, CodeBlock, DisplayTree, GroupBox, ScrollView, Stack, Text


@pytest.fixture
def tree():
    return render()


def _cards(tree):
    return tree.find("comparison_row").items


def _row_texts(card):
    rows = card.content.items[2].items
    return [(row.items[0].text, row.items[1].text) for row in rows]


def test_render_is_deterministic():
    assert render() == render()
    assert render().outline() == render().outline()


def test_root_is_scroll_view(tree):
    assert isinstance(tree, DisplayTree)
    assert isinstance(tree.root, ScrollView)
    assert tree.root.role == "iit_quantity"
    body = tree.root.content
    assert isinstance(body, Stack)
    assert body.axis == Axis.VERTICAL
    assert body.spacing == 30


def test_exactly_one_of_each_region(tree):
    assert len(tree.find_all("header")) == 1
    assert len(tree.find_all("comparison_row")) == 1
    assert len(tree.find_all("code_panel")) == 1
    assert len(tree.find_all("references")) == 1


def test_header_literal(tree):
    header = tree.find("header")
    assert isinstance(header, Text)
    assert header.text == "🧠 Problem 1: Quantity of Consciousness"
    assert header.font == Font.LARGE_TITLE
    assert header.weight == Weight.BOLD


def test_intro_is_secondary_subheadline(tree):
    intro = tree.find("intro")
    assert intro.text == content.INTRO
    assert intro.color == Color.SECONDARY
    assert intro.font == Font.SUBHEADLINE


def test_comparison_row_has_three_cards_in_order(tree):
    row = tree.find("comparison_row")
    assert row.axis == Axis.HORIZONTAL
    assert row.spacing == 15
    cards = _cards(tree)
    assert len(cards) == 3
    assert all(isinstance(card, Card) for card in cards)
    assert [card.content.role for card in cards] == ["card:photodiode", "card:camera", "card:brain"]


def test_card_titles_and_icons(tree):
    cards = _cards(tree)
    icons = [card.content.items[0] for card in cards]
    titles = [card.content.items[1].text for card in cards]
    assert [icon.name for icon in icons] == ["lightbulb.fill", "camera.fill", "brain.head.profile"]
    assert [icon.color for icon in icons] == [Color.GRAY, Color.BLUE, Color.PURPLE]
    assert titles == ["1. The Photodiode", "2. The Digital Camera", "3. The Brain"]


def test_card_rows_in_fixed_order(tree):
    for card in _cards(tree):
        labels = [label for label, _ in _row_texts(card)]
        assert labels == ["Differentiation:", "Integration:", "Φ (Phi) Value:"]


def test_brain_phi_row(tree):
    brain = _cards(tree)[2]
    phi_row = brain.content.items[2].items[2]
    value = phi_row.items[1]
    assert value.text == "Φ > 0 (High)"
    assert value.color == Color.PURPLE
    assert value.color == "purple"


def test_non_phi_rows_use_primary_color(tree):
    for card in _cards(tree):
        rows = card.content.items[2].items
        assert rows[0].items[1].color == Color.PRIMARY
        assert rows[1].items[1].color == Color.PRIMARY


def test_camera_values(tree):
    camera = _cards(tree)[1]
    assert _row_texts(camera) == [
        ("Differentiation:", "Extremely High (2¹'⁰⁰⁰'⁰⁰⁰ states)"),
        ("Integration:", "Extremely Low (pixels are independent)"),
        ("Φ (Phi) Value:", "Φ ≈ 0"),
    ]


def test_code_panel_content_is_verbatim(tree):
    panel = tree.find("code_panel")
    assert isinstance(panel, CodeBlock)
    assert panel.content == content.PHI_CALCULATION_LOGIC
    assert panel.content.encode("utf-8") == content.PHI_CALCULATION_LOGIC.encode("utf-8")
    assert panel.font_family == "Menlo"
    assert panel.font_size == 12


def test_code_panel_sits_in_group_box(tree):
    section = tree.find("code_section")
    assert isinstance(section, GroupBox)
    texts = [node.text for node in section.content.items if isinstance(node, Text)]
    assert texts == [content.CODE_HEADING, content.CODE_DISCLAIMER]


def test_references_block(tree):
    references = tree.find("references")
    citations = [node for node in references.content.items if node.role == "citation"]
    assert len(citations) == 2
    assert citations[0].text.endswith("https://doi.org/10.1186/1471-2202-5-42")
    assert citations[1].text.endswith("https://doi.org/10.1186/1471-2202-4-31")
    assert all(c.font == Font.FOOTNOTE for c in citations)


def test_section_headings_in_display_order(tree):
    headings = [node.text for node in tree.find_all("section_heading")]
    assert headings == [
        "The Analogy: Differentiation vs. Integration",
        "Measuring Integration: Φ (Phi)",
        "The Main Complex",
    ]


def test_find_requires_single_match(tree):
    with pytest.raises(LookupError):
        tree.find("card")
    with pytest.raises(LookupError):
        tree.find("no-such-role")
