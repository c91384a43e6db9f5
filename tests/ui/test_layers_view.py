"""Tests for the scrolling layers view and its accordion behaviour."""

from __future__ import annotations

import pytest
from PySide6.QtTest import QTest

from cortexview.qt import QtCore
from cortexview.ui.layers_view import TITLE, NeocortexLayersView


@pytest.fixture
def view(qapp) -> NeocortexLayersView:
    v = NeocortexLayersView(animate=False)
    v.resize(480, 800)
    v.show()
    yield v
    v.close()


def click(view: NeocortexLayersView, layer) -> None:
    QTest.mouseClick(view.row_for(layer.id).header, QtCore.Qt.LeftButton)


def expanded(view: NeocortexLayersView) -> list:
    return [l.numeral for l in view.layers if view.row_for(l.id).isExpanded()]


def test_rows_in_anatomical_order(view) -> None:
    assert [view.rows[l.id].header.title.text() for l in view.layers] == [
        "Layer I", "Layer II", "Layer III", "Layer IV", "Layer V", "Layer VI",
    ]
    assert view.title_label.text() == TITLE
    assert expanded(view) == []


def test_click_scenario(view, by_numeral) -> None:
    seen: list = []
    view.selectionChanged.connect(seen.append)

    click(view, by_numeral["IV"])
    assert view.selected_id == by_numeral["IV"].id
    assert expanded(view) == ["IV"]

    click(view, by_numeral["IV"])
    assert view.selected_id is None
    assert expanded(view) == []

    click(view, by_numeral["I"])
    assert view.selected_id == by_numeral["I"].id
    assert expanded(view) == ["I"]

    assert seen == [by_numeral["IV"].id, None, by_numeral["I"].id]


def test_switching_rows_keeps_one_open(view, by_numeral) -> None:
    for n in ("II", "VI", "III"):
        click(view, by_numeral[n])
        assert expanded(view) == [n]


def test_clear_collapses(view, by_numeral) -> None:
    click(view, by_numeral["V"])
    view.controller.clear()
    assert expanded(view) == []


def test_click_on_expanded_details_collapses(view, by_numeral) -> None:
    iv = by_numeral["IV"]
    click(view, iv)
    assert view.selected_id == iv.id

    QTest.mouseClick(view.row_for(iv.id).details, QtCore.Qt.LeftButton)
    assert view.selected_id is None
    assert expanded(view) == []
