"""Tests for the main window shell."""

from __future__ import annotations

import pytest
from PySide6.QtTest import QTest

from app_config import WINDOW_TITLE
from cortexview.qt import QtCore
from cortexview.ui.main_window import MainWindow


@pytest.fixture
def window(qapp, settings) -> MainWindow:
    w = MainWindow(settings=settings, animate=False)
    w.show()
    yield w
    w.close()


def test_title_and_view(window) -> None:
    assert window.windowTitle() == WINDOW_TITLE
    assert window.centralWidget() is window.view
    assert len(window.view.rows) == 6


def test_collapse_all_action(window, by_numeral) -> None:
    QTest.mouseClick(window.view.row_for(by_numeral["III"].id).header, QtCore.Qt.LeftButton)
    assert window.view.selected_id == by_numeral["III"].id

    window.collapse_act.trigger()
    assert window.view.selected_id is None


def test_escape_key_collapses(window, by_numeral) -> None:
    window.activateWindow()
    assert QTest.qWaitForWindowActive(window)
    QTest.mouseClick(window.view.row_for(by_numeral["VI"].id).header, QtCore.Qt.LeftButton)
    assert window.view.selected_id == by_numeral["VI"].id

    QTest.keyClick(window, QtCore.Qt.Key_Escape)
    assert window.view.selected_id is None


def test_geometry_saved_on_close(window, settings) -> None:
    window.close()
    assert isinstance(settings.get("ui/main_geometry"), QtCore.QByteArray)
