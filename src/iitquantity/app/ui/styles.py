"""
Resolves the style tokens of the display tree to Qt fonts and colors.
"""
from __future__ import annotations

from PySide6.QtGui import QColor, QFont, QFontDatabase, QPalette

from iitquantity.model.styles import Color, Font, Weight

FONT_POINT_SIZES: dict[Font, int] = {
    Font.LARGE_TITLE: 26,
    Font.TITLE2: 17,
    Font.HEADLINE: 13,
    Font.SUBHEADLINE: 12,
    Font.BODY: 13,
    Font.CAPTION: 10,
    Font.FOOTNOTE: 11,
}

FONT_WEIGHTS: dict[Weight, QFont.Weight] = {
    Weight.REGULAR: QFont.Weight.Normal,
    Weight.SEMIBOLD: QFont.Weight.DemiBold,
    Weight.BOLD: QFont.Weight.Bold,
}

# PRIMARY follows the palette's text color
COLOR_HEX: dict[Color, str] = {
    Color.SECONDARY: "#6e6e73",
    Color.GRAY: "#8e8e93",
    Color.BLUE: "#007aff",
    Color.PURPLE: "#af52de",
}

# Glyphs used when an icon file is not available
ICON_GLYPHS: dict[str, str] = {
    "lightbulb.fill": "💡",
    "camera.fill": "📷",
    "brain.head.profile": "🧠",
}
FALLBACK_GLYPH = "?"


def make_font(font: Font, weight: Weight = Weight.REGULAR) -> QFont:
    f = QFont()
    f.setPointSize(FONT_POINT_SIZES[font])
    f.setWeight(FONT_WEIGHTS[weight])
    return f


def make_code_font(family: str, size: int) -> QFont:
    """The requested monospaced family, or the platform fixed font if it is not installed."""
    if family in QFontDatabase.families():
        f = QFont(family)
    else:
        f = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
    f.setPointSize(size)
    f.setStyleHint(QFont.StyleHint.Monospace)
    return f


def resolve_color(color: Color, palette: QPalette) -> QColor:
    if color == Color.PRIMARY:
        return palette.color(QPalette.ColorRole.WindowText)
    return QColor(COLOR_HEX[color])


def css_rgba(color: QColor, opacity: float = 1.0) -> str:
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {round(opacity * 255)})"
