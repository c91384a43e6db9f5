from __future__ import annotations
from typing import Dict, Iterable, Optional

from cortexview.qt import QtCore, QtWidgets
from cortexview.core.layers import CorticalLayer, cortical_layers
from cortexview.core.presentation import present
from cortexview.core.selection import SelectionController
from cortexview.ui.icons import icon, fallback_glyph
from cortexview.ui.layer_row import LayerRowWidget
from cortexview.ui.theme import Theme

TITLE = "The 6 Layers of the Neocortex"
SUBTITLE = (
    "Corticogenesis results in a highly organized, six-layered structure. "
    "The layers are formed in an 'inside-out' sequence (VI → V → IV → III → II). "
    "Tap a layer below to learn more."
)


class NeocortexLayersView(QtWidgets.QScrollArea):
    """
    Scrolling column: header block, then one row per cortical layer in
    anatomical order. Owns the selection; rows only report taps.
    """
    selectionChanged = QtCore.Signal(object)   # Optional[str]

    def __init__(self, layers: Optional[Iterable[CorticalLayer]] = None, animate: bool = True,
                 duration_in_ms: int = 250, duration_out_ms: int = 200, parent=None):
        super().__init__(parent)
        self.layers = tuple(cortical_layers() if layers is None else layers)
        self.controller = SelectionController(self.layers, self)
        self.rows: Dict[str, LayerRowWidget] = {}

        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(QtCore.Qt.ScrollBarAlwaysOff)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        body = QtWidgets.QWidget()
        col = QtWidgets.QVBoxLayout(body)
        col.setContentsMargins(16, 16, 16, 16); col.setSpacing(12)
        col.addWidget(self._build_header())

        for layer in self.layers:
            row = LayerRowWidget(layer, animate, duration_in_ms, duration_out_ms, body)
            row.tapped.connect(self.controller.toggle)
            self.rows[layer.id] = row
            col.addWidget(row)
        col.addStretch(1)
        self.setWidget(body)

        self.controller.selectionChanged.connect(self._on_selection_changed)
        self.refresh()

    @property
    def selected_id(self) -> Optional[str]:
        return self.controller.selected_id

    def row_for(self, layer_id: str) -> LayerRowWidget:
        return self.rows[layer_id]

    def refresh(self) -> None:
        """Re-apply the presentation for the current selection to every row."""
        for rp in present(self.layers, self.controller.selected_id):
            self.rows[rp.layer_id].apply(rp)

    def _on_selection_changed(self, selected_id: Optional[str]) -> None:
        self.refresh()
        if selected_id is not None:
            self.ensureWidgetVisible(self.rows[selected_id], 0, 16)
        self.selectionChanged.emit(selected_id)

    def _build_header(self) -> QtWidgets.QWidget:
        w = QtWidgets.QWidget()
        v = QtWidgets.QVBoxLayout(w)
        v.setContentsMargins(0, 0, 0, 12); v.setSpacing(4)

        brain = QtWidgets.QLabel()
        brain.setAlignment(QtCore.Qt.AlignCenter)
        ic = icon("fa5s.brain", Theme.accent)
        if ic is not None:
            brain.setPixmap(ic.pixmap(40, 40))
        else:
            brain.setText(fallback_glyph("fa5s.brain"))
            brain.setStyleSheet("font-size:30pt;")

        self.title_label = QtWidgets.QLabel(TITLE)
        self.title_label.setAlignment(QtCore.Qt.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(f"color:{Theme.text.name()}; font-size:24pt; font-weight:700;")

        self.subtitle_label = QtWidgets.QLabel(SUBTITLE)
        self.subtitle_label.setAlignment(QtCore.Qt.AlignCenter)
        self.subtitle_label.setWordWrap(True)
        self.subtitle_label.setStyleSheet(f"color:{Theme.text_dim.name()}; padding-top:2px;")

        v.addWidget(brain)
        v.addWidget(self.title_label)
        v.addWidget(self.subtitle_label)
        return w
