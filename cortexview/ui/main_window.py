# cortexview/ui/main_window.py
from __future__ import annotations
from cortexview.qt import QtCore, QtGui, QtWidgets
from cortexview.core.config import Settings, get_settings
from cortexview.core.logging import get_logger
from cortexview.ui.layers_view import NeocortexLayersView
from app_config import WINDOW_TITLE, animations_enabled

class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, settings: Settings | None = None, animate: bool | None = None):
        super().__init__()
        self._log = get_logger(__name__)
        self.settings = settings if settings is not None else get_settings()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(self.settings.get_int("ui/window_width"), self.settings.get_int("ui/window_height"))

        self.view = NeocortexLayersView(
            animate=animations_enabled() if animate is None else animate,
            duration_in_ms=self.settings.get_int("ui/animation_ms_in"),
            duration_out_ms=self.settings.get_int("ui/animation_ms_out"),
            parent=self,
        )
        self.setCentralWidget(self.view)

        self._build_menu()
        self._restore_state()

    def _build_menu(self):
        bar = self.menuBar()
        file_menu = bar.addMenu("&File")
        exit_act = QtGui.QAction("E&xit", self)
        exit_act.setShortcut(QtGui.QKeySequence(QtGui.QKeySequence.Quit))
        exit_act.triggered.connect(self.close)
        file_menu.addAction(exit_act)

        view_menu = bar.addMenu("&View")
        self.collapse_act = QtGui.QAction("&Collapse All", self)
        self.collapse_act.setShortcut(QtGui.QKeySequence("Esc"))
        self.collapse_act.triggered.connect(self.view.controller.clear)
        view_menu.addAction(self.collapse_act)

    def _restore_state(self):
        g = self.settings.get("ui/main_geometry")
        if isinstance(g, QtCore.QByteArray):
            self.restoreGeometry(g)

    def closeEvent(self, e: QtGui.QCloseEvent) -> None:
        self.settings.set("ui/main_geometry", self.saveGeometry())
        self._log.debug("main window closed")
        return super().closeEvent(e)
