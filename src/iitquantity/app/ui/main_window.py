"""
Main window: a tab bar of registered sections above a stack of panels.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QCoreApplication, Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QStackedWidget, QTabBar, QVBoxLayout, QWidget, QMessageBox, QApplication,
)

import iitquantity
from iitquantity.config import SECTION_KEY, VISIBLE_APP_NAME, WINDOW_SIZE
from iitquantity.app.ui import panels as _panels  # noqa: F401  (registers panels)
from iitquantity.app.ui.panels.base import BasePanel
from iitquantity.app.ui.panels.registry import create_panel, list_keys, panel_title

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, initial_section: str = SECTION_KEY) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # ---- Central: TabBar on top + panel stack below ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.tabs = QTabBar(central)
        self.tabs.setExpanding(True)
        self.tabs.setMovable(False)
        self.tabs.setTabsClosable(False)
        self.tabs.setDrawBase(True)
        self.tabs.setShape(QTabBar.Shape.RoundedNorth)
        v.addWidget(self.tabs, 0)

        self.panel_stack = QStackedWidget(central)
        v.addWidget(self.panel_stack, 1)

        self.setCentralWidget(central)

        self.section_keys = list_keys()
        self.panels: dict[str, BasePanel] = {}
        for key in self.section_keys:
            panel = create_panel(key, parent=self)
            self.panels[key] = panel
            self.panel_stack.addWidget(panel)
            self.tabs.addTab(QCoreApplication.translate("Sections", panel_title(key)))

        self.tabs.currentChanged.connect(self.panel_stack.setCurrentIndex)

        self._create_actions()
        self._create_menus()

        self.show_section(initial_section)

    def _create_actions(self) -> None:
        self.act_reload = QAction(self.tr("Reload"), self)
        self.act_reload.setShortcut(QKeySequence.StandardKey.Refresh)
        self.act_reload.triggered.connect(self.on_reload)

        self.act_quit = QAction(self.tr("Quit"), self)
        self.act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self.act_quit.triggered.connect(self.close)

        self.act_about = QAction(self.tr("About"), self)
        self.act_about.triggered.connect(self.on_about)

    def _create_menus(self) -> None:
        menubar = self.menuBar()

        menu_file = menubar.addMenu(self.tr("File"))
        menu_file.addAction(self.act_quit)

        menu_view = menubar.addMenu(self.tr("View"))
        menu_view.addAction(self.act_reload)

        menu_help = menubar.addMenu(self.tr("Help"))
        menu_help.addAction(self.act_about)

    def show_section(self, key: str) -> None:
        """Switch to the section registered under `key`."""
        if key not in self.panels:
            raise KeyError(f"No panel registered for key '{key}'")
        self.tabs.setCurrentIndex(self.section_keys.index(key))
        self.panel_stack.setCurrentWidget(self.panels[key])

    def current_panel(self) -> BasePanel:
        return self.panels[self.section_keys[self.tabs.currentIndex()]]

    @Slot()
    def on_reload(self) -> None:
        panel = self.current_panel()
        panel.refresh()
        logger.info("Reloaded section '%s'.", panel.KEY)

    @Slot()
    def on_about(self) -> None:
        QMessageBox.about(
            self,
            self.tr("About {app}").format(app=QApplication.applicationDisplayName()),
            self.tr(
                "{app}\n"
                "Version: {ver}\n\n"
                "Content after Tononi (2004) and Tononi and Sporns (2003)."
            ).format(
                app=VISIBLE_APP_NAME,
                ver=iitquantity.__version__,
            ),
        )
