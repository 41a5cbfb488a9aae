from __future__ import annotations

import logging

from PySide6.QtCore import QT_TRANSLATE_NOOP
from PySide6.QtWidgets import QVBoxLayout, QWidget

from iitquantity.config import SECTION_KEY
from iitquantity.model.renderer import render
from iitquantity.model.tree import DisplayTree
from iitquantity.app.ui.builder import WidgetBuilder
from iitquantity.app.ui.panels.base import BasePanel
from iitquantity.app.ui.panels.registry import register_panel

logger = logging.getLogger(__name__)


@register_panel
class IITQuantityPanel(BasePanel):
    """
    Scrollable explanation of the quantity of consciousness in IIT.

    The contents are rebuilt from a fresh render on every refresh; since the
    renderer only reads constants, the result never changes.
    """
    KEY = SECTION_KEY
    TITLE = QT_TRANSLATE_NOOP("Sections", "Quantity of Consciousness")

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

        self.tree: DisplayTree | None = None
        self.view: QWidget | None = None
        self.refresh()

    def refresh(self) -> None:
        self.tree = render()
        view = WidgetBuilder().build(self.tree.root, self)

        if self.view is not None:
            self._layout.removeWidget(self.view)
            # Detach now so lookups never see the old hierarchy
            self.view.setParent(None)
            self.view.deleteLater()

        self._layout.addWidget(view)
        self.view = view
        logger.debug("Panel '%s' rebuilt.", self.KEY)
