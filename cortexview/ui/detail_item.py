from __future__ import annotations
from typing import Optional

from cortexview.qt import QtCore, QtWidgets
from cortexview.core.presentation import DetailPresentation
from cortexview.ui.icons import icon, fallback_glyph
from cortexview.ui.theme import Theme


class DetailItemWidget(QtWidgets.QWidget):
    """One detail line of an expanded row: icon, bold label, comma-joined values."""

    ICON_PX = 18

    def __init__(self, detail: Optional[DetailPresentation] = None, parent=None):
        super().__init__(parent)
        row = QtWidgets.QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0); row.setSpacing(12)

        self.icon_label = QtWidgets.QLabel()
        self.icon_label.setFixedWidth(25)
        self.icon_label.setAlignment(QtCore.Qt.AlignHCenter | QtCore.Qt.AlignTop)
        row.addWidget(self.icon_label, 0, QtCore.Qt.AlignTop)

        col = QtWidgets.QVBoxLayout()
        col.setContentsMargins(0, 0, 0, 0); col.setSpacing(2)
        self.label = QtWidgets.QLabel()
        self.label.setStyleSheet(f"color:{Theme.text.name()}; font-weight:700;")
        self.values = QtWidgets.QLabel()
        self.values.setWordWrap(True)
        self.values.setStyleSheet(f"color:{Theme.text_dim.name()};")
        col.addWidget(self.label)
        col.addWidget(self.values)
        row.addLayout(col, 1)

        self.detail: Optional[DetailPresentation] = None
        if detail is not None:
            self.setDetail(detail)

    def setDetail(self, detail: DetailPresentation) -> None:
        if detail == self.detail:
            return
        self.detail = detail
        ic = icon(detail.icon, Theme.accent)
        if ic is not None:
            self.icon_label.setPixmap(ic.pixmap(self.ICON_PX, self.ICON_PX))
        else:
            self.icon_label.setText(fallback_glyph(detail.icon))
        self.label.setText(detail.label)
        self.values.setText(detail.text)
        self.setAccessibleName(detail.label)
        self.setAccessibleDescription(detail.text)
