# cortexview/qt.py
from __future__ import annotations
import sys
from typing import Optional, Sequence

from PySide6 import QtCore, QtGui, QtWidgets

Signal = QtCore.Signal
Slot = QtCore.Slot


def application(argv: Optional[Sequence[str]] = None) -> QtWidgets.QApplication:
    """Return the running QApplication, creating it on first use."""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(list(argv if argv is not None else sys.argv))
    return app


__all__ = ["QtCore", "QtGui", "QtWidgets", "Signal", "Slot", "application"]
