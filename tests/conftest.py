"""
Pytest configuration for iitquantity tests.

Widget tests run against an offscreen Qt platform so no display is needed.
"""
import logging
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session."""
    from iitquantity.app.application import create_app
    app = create_app(["iitquantity-tests"])
    yield app


@pytest.fixture
def reset_package_logger():
    """Undo `setup_logging` so later tests keep the default logging setup."""
    logger = logging.getLogger("iitquantity")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
