"""
Style Tokens
============
Plain enumerations passed as data through the display tree.
The Qt layer resolves them to fonts and colors when widgets are built.
"""
from __future__ import annotations

from enum import StrEnum


class Color(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    GRAY = "gray"
    BLUE = "blue"
    PURPLE = "purple"


class Font(StrEnum):
    LARGE_TITLE = "large_title"
    TITLE2 = "title2"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    BODY = "body"
    CAPTION = "caption"
    FOOTNOTE = "footnote"


class Weight(StrEnum):
    REGULAR = "regular"
    SEMIBOLD = "semibold"
    BOLD = "bold"


class Alignment(StrEnum):
    LEADING = "leading"
    CENTER = "center"
    TOP = "top"


class Axis(StrEnum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
