"""Shared pytest fixtures for cortexview tests."""

from __future__ import annotations

import logging
import os
from pathlib import Path

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("CORTEXVIEW_NO_ANIMATIONS", "1")

import pytest
from PySide6.QtCore import QSettings

from cortexview.qt import QtWidgets, application
from cortexview.core.config import Settings
from cortexview.core.layers import cortical_layers


@pytest.fixture(scope="session")
def qapp() -> QtWidgets.QApplication:
    """One QApplication for the whole test session (offscreen platform)."""
    return application(["cortexview-tests"])


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings backed by a throwaway INI file instead of the user's QSettings."""
    return Settings(QSettings(str(tmp_path / "settings.ini"), QSettings.IniFormat))


@pytest.fixture
def layers():
    return cortical_layers()


@pytest.fixture
def by_numeral(layers):
    """Map "I".."VI" to the layer record."""
    return {layer.numeral: layer for layer in layers}


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a setup_logging() call."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            if h not in handlers:
                h.close()
        for h in handlers:
            root.addHandler(h)
        root.setLevel(level)
