"""Shared pytest fixtures for Qt application lifecycle."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication  # noqa: E402
from PySide6.QtGui import QGuiApplication  # noqa: E402

from shapepaint import PaintModel  # noqa: E402


@pytest.fixture(scope="session")
def app():
    """Provide a single QGuiApplication for all tests."""
    instance = QGuiApplication.instance()
    if instance is None:
        instance = QGuiApplication(sys.argv)

    yield instance

    # Avoid PySide shutdown crashes when clipboard owns QMimeData.
    clipboard = QGuiApplication.clipboard()
    if clipboard is not None:
        clipboard.clear()

    QCoreApplication.processEvents()


@pytest.fixture
def paint_model(app):
    return PaintModel()
