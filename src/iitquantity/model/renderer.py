"""
Content View Renderer
=====================
Composes the IIT quantity screen from the constants in
:mod:`iitquantity.model.content`.

``render()`` takes no input, reads no external state and returns an equal
tree on every call. The Qt panel calls it once per presentation and again on
every refresh.
"""
from __future__ import annotations

import logging

from iitquantity.model import content as c
from iitquantity.model.components import code_panel, comparison_card
from iitquantity.model.styles import Alignment, Axis, Color, Font, Weight
from iitquantity.model.tree import DisplayTree, Divider, GroupBox, Node, ScrollView, Stack, Text

logger = logging.getLogger(__name__)


def _heading(text: str) -> Text:
    return Text(role="section_heading", text=text, font=Font.TITLE2, weight=Weight.SEMIBOLD)


def _paragraph(text: str, padding_bottom: int = 0) -> Text:
    return Text(role="paragraph", text=text, markdown=True, padding_bottom=padding_bottom)


def _header() -> tuple[Node, ...]:
    return (
        Text(role="header", text=c.HEADER_TITLE, font=Font.LARGE_TITLE, weight=Weight.BOLD, padding_bottom=5),
        Text(role="intro", text=c.INTRO, font=Font.SUBHEADLINE, color=Color.SECONDARY, markdown=True),
    )


def _analogy() -> tuple[Node, ...]:
    return (
        _heading(c.ANALOGY_HEADING),
        _paragraph(c.ANALOGY_TEXT, padding_bottom=10),
        Stack(
            role="comparison_row",
            axis=Axis.HORIZONTAL,
            alignment=Alignment.TOP,
            spacing=15,
            items=tuple(comparison_card(system) for system in c.SYSTEMS),
        ),
    )


def _phi() -> tuple[Node, ...]:
    return (
        _heading(c.PHI_HEADING),
        _paragraph(c.PHI_TEXT, padding_bottom=10),
        _paragraph(c.MIB_TEXT),
        GroupBox(
            role="code_section",
            content=Stack(
                axis=Axis.VERTICAL,
                spacing=10,
                items=(
                    Text(text=c.CODE_HEADING, font=Font.HEADLINE, weight=Weight.SEMIBOLD),
                    Text(text=c.CODE_DISCLAIMER, font=Font.CAPTION, color=Color.SECONDARY, markdown=True,
                         padding_bottom=5),
                    code_panel(c.PHI_CALCULATION_LOGIC),
                ),
            ),
        ),
    )


def _main_complex() -> tuple[Node, ...]:
    return (
        _heading(c.MAIN_COMPLEX_HEADING),
        _paragraph(c.MAIN_COMPLEX_TEXT),
    )


def _references() -> GroupBox:
    citations = tuple(
        Text(role="citation", text=ref.text, font=Font.FOOTNOTE, markdown=True)
        for ref in c.REFERENCES
    )
    return GroupBox(
        role="references",
        padding_top=16,
        content=Stack(
            axis=Axis.VERTICAL,
            spacing=8,
            items=(Text(text=c.REFERENCES_HEADING, font=Font.HEADLINE, weight=Weight.SEMIBOLD, padding_bottom=5),)
            + citations,
        ),
    )


def render() -> DisplayTree:
    """Build the complete display tree for the IIT quantity screen."""
    body = Stack(
        role="body",
        axis=Axis.VERTICAL,
        spacing=30,
        padding=16,
        items=(
            *_header(),
            Divider(),
            *_analogy(),
            Divider(),
            *_phi(),
            Divider(),
            *_main_complex(),
            _references(),
        ),
    )
    tree = DisplayTree(root=ScrollView(role="iit_quantity", content=body))
    logger.debug("Rendered IIT quantity display tree.")
    return tree
