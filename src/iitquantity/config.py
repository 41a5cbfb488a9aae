"""
Configuration & Resource Lookup
===============================
Central registry for global constants and bundled resources.

Icons ship inside the package (``iitquantity/resources/icons``) and are found
with ``importlib.resources``. When the app is frozen with PyInstaller they are
looked up under ``sys._MEIPASS`` instead.

Exports:
    ORG_ID, APP_ID, VISIBLE_APP_NAME: Identifiers used by QCoreApplication.
    SECTION_KEY (str): Fixed name of the IIT quantity section.
    icon_path(name): Absolute path of a bundled icon, or None.
"""
import os
import sys
from importlib.resources import files
from typing import Optional

ORG_ID = "iit-explained"
APP_ID = "iit-quantity"
ORG_DOMAIN = "iit-explained.local"
VISIBLE_APP_NAME = "IIT: Quantity of Consciousness"

WINDOW_SIZE = (1100, 900)

SECTION_KEY = "iit_quantity"

ICON_SUFFIX = ".svg"


def icon_path(name: str) -> Optional[str]:
    """
    Get absolute path to an icon by its symbol name (e.g. ``"camera.fill"``).
    Returns None if no such icon is bundled.
    """
    filename = name + ICON_SUFFIX
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        candidate = os.path.join(base_path, "iitquantity", "resources", "icons", filename)
        return candidate if os.path.isfile(candidate) else None

    resource = files("iitquantity.resources").joinpath("icons").joinpath(filename)
    if not resource.is_file():
        return None
    return str(resource)
