"""
Test: Section Registry
======================
"""

import pytest

from iitquantity.app.ui import panels  # noqa: F401
from iitquantity.app.ui.panels.base import BasePanel
from iitquantity.app.ui.panels.registry import create_panel, list_keys, panel_title, register_panel
from iitquantity.app.ui.panels.iit_quantity import IITQuantityPanel


def test_iit_quantity_is_registered():
    assert "iit_quantity" in list_keys()
    assert panel_title("iit_quantity") == IITQuantityPanel.TITLE


def test_create_panel(qapp):
    panel = create_panel("iit_quantity")
    assert isinstance(panel, IITQuantityPanel)
    panel.deleteLater()


def test_register_requires_key():
    class Nameless(BasePanel):
        pass

    with pytest.raises(ValueError):
        register_panel(Nameless)
    assert "" not in list_keys()


def test_unknown_key():
    with pytest.raises(KeyError):
        create_panel("no-such-section")
    with pytest.raises(KeyError):
        panel_title("no-such-section")
