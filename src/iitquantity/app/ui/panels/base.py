from __future__ import annotations

from PySide6.QtWidgets import QWidget


class BasePanel(QWidget):
    """Base class for navigable sections shown in the main window."""
    KEY: str = ""  # Override in subclass
    TITLE: str = "Section"  # Mark with QT_TRANSLATE_NOOP("Sections", ...) in subclasses

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

    def refresh(self) -> None:
        """Rebuild the panel contents."""
        raise NotImplementedError("`refresh` must be implemented in subclass.")
