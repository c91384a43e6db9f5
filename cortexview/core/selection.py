# cortexview/core/selection.py
from __future__ import annotations
from typing import Iterable, Optional

from cortexview.qt import QtCore
from cortexview.core.layers import CorticalLayer, cortical_layers
from cortexview.core.logging import get_logger


def toggle(selected_id: Optional[str], layer_id: str) -> Optional[str]:
    """
    Accordion rule for a tap on `layer_id`.
    Tapping the expanded layer collapses it; tapping any other layer expands
    that one instead (the previous one collapses because only one id is held).
    """
    return None if selected_id == layer_id else layer_id


class SelectionController(QtCore.QObject):
    """
    Owns the single Selection State of the layers view.
    selected_id is either None (all collapsed) or the id of one known layer.
    """
    selectionChanged = QtCore.Signal(object)   # Optional[str]

    def __init__(self, layers: Optional[Iterable[CorticalLayer]] = None, parent=None):
        super().__init__(parent)
        self._log = get_logger(__name__)
        self._names = {l.id: l.name for l in (cortical_layers() if layers is None else layers)}
        self._selected_id: Optional[str] = None

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def is_expanded(self, layer_id: str) -> bool:
        return self._selected_id is not None and self._selected_id == layer_id

    @QtCore.Slot(str)
    def toggle(self, layer_id: str) -> None:
        if layer_id not in self._names:
            raise KeyError(f"unknown layer id: {layer_id!r}")
        self._set(toggle(self._selected_id, layer_id))

    @QtCore.Slot()
    def clear(self) -> None:
        if self._selected_id is not None:
            self._set(None)

    def _set(self, new_id: Optional[str]) -> None:
        old_id = self._selected_id
        self._selected_id = new_id
        self._log.debug("selection: %s -> %s", self._names.get(old_id, "none"), self._names.get(new_id, "none"))
        self.selectionChanged.emit(new_id)
