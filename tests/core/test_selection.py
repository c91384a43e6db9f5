"""Tests for the accordion selection rule and its controller."""

from __future__ import annotations

import pytest

from cortexview.core.selection import SelectionController, toggle


class TestToggleRule:
    def test_none_selects_tapped(self, layers) -> None:
        for layer in layers:
            assert toggle(None, layer.id) == layer.id

    def test_tapping_selected_collapses(self, layers) -> None:
        for layer in layers:
            assert toggle(layer.id, layer.id) is None

    def test_other_tap_replaces(self, layers) -> None:
        for a in layers:
            for b in layers:
                if a.id != b.id:
                    assert toggle(a.id, b.id) == b.id


class TestSelectionController:
    @pytest.fixture
    def controller(self, qapp) -> SelectionController:
        return SelectionController()

    @pytest.fixture
    def emitted(self, controller) -> list:
        seen: list = []
        controller.selectionChanged.connect(seen.append)
        return seen

    def test_starts_collapsed(self, controller, layers) -> None:
        assert controller.selected_id is None
        assert not any(controller.is_expanded(l.id) for l in layers)

    def test_scenario_iv_iv_i(self, controller, emitted, by_numeral) -> None:
        iv, i = by_numeral["IV"].id, by_numeral["I"].id

        controller.toggle(iv)
        assert controller.selected_id == iv
        controller.toggle(iv)
        assert controller.selected_id is None
        controller.toggle(i)
        assert controller.selected_id == i

        assert emitted == [iv, None, i]

    def test_only_one_expanded(self, controller, by_numeral, layers) -> None:
        controller.toggle(by_numeral["II"].id)
        controller.toggle(by_numeral["V"].id)
        expanded = [l.numeral for l in layers if controller.is_expanded(l.id)]
        assert expanded == ["V"]

    def test_clear(self, controller, emitted, by_numeral) -> None:
        controller.clear()
        assert emitted == []

        controller.toggle(by_numeral["III"].id)
        controller.clear()
        assert controller.selected_id is None
        assert emitted == [by_numeral["III"].id, None]

    def test_unknown_id_rejected(self, controller, emitted) -> None:
        with pytest.raises(KeyError):
            controller.toggle("not-a-layer")
        assert controller.selected_id is None
        assert emitted == []

    def test_custom_dataset(self, qapp, layers) -> None:
        controller = SelectionController(layers[:2])
        controller.toggle(layers[1].id)
        assert controller.selected_id == layers[1].id
        with pytest.raises(KeyError):
            controller.toggle(layers[5].id)
