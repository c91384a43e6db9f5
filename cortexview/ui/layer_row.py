from __future__ import annotations
from typing import Optional

from cortexview.qt import QtCore, QtGui, QtWidgets
from cortexview.core.layers import CorticalLayer
from cortexview.core.presentation import RowPresentation, present_row
from cortexview.ui.detail_item import DetailItemWidget
from cortexview.ui.icons import icon, fallback_glyph
from cortexview.ui.theme import Theme, ROW_RADIUS_PX, header_gradient_css, rgba_css

QWIDGETSIZE_MAX = 16777215


class RowHeader(QtWidgets.QFrame):
    """Always-visible coloured strip: name, common name and a chevron."""
    clicked = QtCore.Signal()

    CHEVRON_PX = 22

    def __init__(self, layer: CorticalLayer, parent=None):
        super().__init__(parent)
        self.setObjectName("rowHeader")
        self.setCursor(QtCore.Qt.PointingHandCursor)
        self.setStyleSheet(
            f"QFrame#rowHeader {{ background: {header_gradient_css(layer.color)};"
            f" border-radius: {ROW_RADIUS_PX}px; }}"
        )
        lay = QtWidgets.QHBoxLayout(self)
        lay.setContentsMargins(16, 14, 16, 14); lay.setSpacing(10)

        self.title = QtWidgets.QLabel(layer.name)
        self.title.setStyleSheet(f"color:{Theme.on_color.name()}; font-size:18pt; font-weight:800;")
        self.subtitle = QtWidgets.QLabel(layer.common_name)
        self.subtitle.setStyleSheet(f"color:{rgba_css(Theme.on_color_dim)}; font-size:13pt; font-weight:600;")
        self.subtitle.setWordWrap(True)
        self.chevron = QtWidgets.QLabel()
        self.chevron.setStyleSheet(f"color:{rgba_css(Theme.on_color_icon)}; font-size:16pt;")

        lay.addWidget(self.title)
        lay.addWidget(self.subtitle, 1)
        lay.addWidget(self.chevron)

    def setChevron(self, name: str) -> None:
        ic = icon(name, Theme.on_color_icon)
        if ic is not None:
            self.chevron.setPixmap(ic.pixmap(self.CHEVRON_PX, self.CHEVRON_PX))
        else:
            self.chevron.setText(fallback_glyph(name))

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.LeftButton:
            self.clicked.emit()
            e.accept()
            return
        super().mousePressEvent(e)


class LayerRowWidget(QtWidgets.QWidget):
    """
    One tappable layer row. The row never decides its own state: it emits
    tapped(layer_id) and waits for apply() with the new presentation.
    """
    tapped = QtCore.Signal(str)

    def __init__(self, layer: CorticalLayer, animate: bool = True,
                 duration_in_ms: int = 250, duration_out_ms: int = 200, parent=None):
        super().__init__(parent)
        self.layer = layer
        self.animate = animate
        self.duration_in_ms = duration_in_ms
        self.duration_out_ms = duration_out_ms
        self.presentation: Optional[RowPresentation] = None
        self._expanded = False

        self.setFocusPolicy(QtCore.Qt.StrongFocus)
        v = QtWidgets.QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0); v.setSpacing(0)

        self.header = RowHeader(layer, self)
        v.addWidget(self.header)

        self.details = QtWidgets.QFrame(self)
        self.details.setObjectName("rowDetails")
        self.details.setCursor(QtCore.Qt.PointingHandCursor)
        self.details.setStyleSheet(
            f"QFrame#rowDetails {{ background:{Theme.detail_bg.name()};"
            f" border-bottom-left-radius:{ROW_RADIUS_PX}px; border-bottom-right-radius:{ROW_RADIUS_PX}px; }}"
        )
        d_lay = QtWidgets.QVBoxLayout(self.details)
        d_lay.setContentsMargins(16, 14, 16, 14); d_lay.setSpacing(14)
        self.detail_items = [DetailItemWidget(parent=self.details) for _ in range(3)]
        for item in self.detail_items:
            d_lay.addWidget(item)
        v.addWidget(self.details)

        # Details slide (maximumHeight) and fade (opacity) together
        self._fx = QtWidgets.QGraphicsOpacityEffect(self.details)
        self.details.setGraphicsEffect(self._fx)
        self._height_anim = QtCore.QPropertyAnimation(self.details, b"maximumHeight", self)
        self._fade_anim = QtCore.QPropertyAnimation(self._fx, b"opacity", self)
        self._anim = QtCore.QParallelAnimationGroup(self)
        self._anim.addAnimation(self._height_anim)
        self._anim.addAnimation(self._fade_anim)
        self._anim.finished.connect(self._on_anim_finished)
        self.details.setVisible(False)

        self.header.clicked.connect(self._emit_tapped)
        self.apply(present_row(layer, None))

    def isExpanded(self) -> bool:
        return self._expanded

    def apply(self, presentation: RowPresentation) -> None:
        """Reflect a presentation computed for this row's layer."""
        if presentation.layer_id != self.layer.id:
            raise ValueError(f"presentation for {presentation.layer_id!r} applied to row {self.layer.id!r}")
        self.presentation = presentation
        self.header.setChevron(presentation.chevron)
        self.header.setAccessibleName(presentation.accessible_name)
        self.header.setAccessibleDescription(presentation.accessible_hint)
        self.setAccessibleName(presentation.accessible_name)
        self.setAccessibleDescription(presentation.accessible_hint)
        for item, detail in zip(self.detail_items, presentation.details):
            item.setDetail(detail)
        self._setExpanded(presentation.expanded)

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        # Clicks on the details panel land here; the header handles its own
        if e.button() == QtCore.Qt.LeftButton:
            self._emit_tapped()
            e.accept()
            return
        super().mousePressEvent(e)

    def keyPressEvent(self, e: QtGui.QKeyEvent) -> None:
        if e.key() in (QtCore.Qt.Key_Space, QtCore.Qt.Key_Return, QtCore.Qt.Key_Enter):
            self._emit_tapped()
            e.accept()
            return
        super().keyPressEvent(e)

    def _emit_tapped(self) -> None:
        self.tapped.emit(self.layer.id)

    # ── Expansion ──────────────────────────────────────────────────────
    def _setExpanded(self, expanded: bool) -> None:
        if expanded == self._expanded:
            return
        self._expanded = expanded
        self._anim.stop()

        if not self.animate:
            self.details.setMaximumHeight(QWIDGETSIZE_MAX)
            self._fx.setOpacity(1.0)
            self.details.setVisible(expanded)
            return

        if expanded:
            self.details.setMaximumHeight(0)
            self.details.setVisible(True)
            target = self.details.sizeHint().height()
            self._run(self._height_anim, 0, target, self.duration_in_ms, QtCore.QEasingCurve.OutCubic)
            self._run(self._fade_anim, self._fx.opacity() if self._fx.opacity() < 1.0 else 0.0, 1.0,
                      self.duration_in_ms, QtCore.QEasingCurve.OutCubic)
        else:
            self._run(self._height_anim, self.details.height(), 0, self.duration_out_ms, QtCore.QEasingCurve.InCubic)
            self._run(self._fade_anim, self._fx.opacity(), 0.0, self.duration_out_ms, QtCore.QEasingCurve.OutQuad)
        self._anim.start()

    @staticmethod
    def _run(anim: QtCore.QPropertyAnimation, start, end, duration_ms: int, curve) -> None:
        anim.setDuration(duration_ms)
        anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setEasingCurve(curve)

    def _on_anim_finished(self) -> None:
        if self._expanded:
            # Let the panel follow its content again (word wrap on resize)
            self.details.setMaximumHeight(QWIDGETSIZE_MAX)
        else:
            self.details.setVisible(False)
            self.details.setMaximumHeight(QWIDGETSIZE_MAX)
            self._fx.setOpacity(1.0)
