# cortexview/ui/theme.py
from cortexview.qt import QtGui, QtWidgets
from cortexview.core.layers import LayerColor

ROW_RADIUS_PX = 12


class Theme:
    bg          = QtGui.QColor("#1f2124")
    panel       = QtGui.QColor("#26292e")
    panel_alt   = QtGui.QColor("#2c3036")
    text        = QtGui.QColor("#d6d7d9")
    text_dim    = QtGui.QColor("#aab0b7")
    accent      = QtGui.QColor("#3fb6ff")

    # Header text sits on saturated layer colours
    on_color        = QtGui.QColor("#ffffff")
    on_color_dim    = QtGui.QColor(255, 255, 255, 217)   # ~85%
    on_color_icon   = QtGui.QColor(255, 255, 255, 179)   # ~70%

    detail_bg = QtGui.QColor("#2c3036")


LAYER_COLORS = {
    LayerColor.PURPLE: "#af52de",
    LayerColor.BLUE:   "#007aff",
    LayerColor.CYAN:   "#32ade6",
    LayerColor.GREEN:  "#34c759",
    LayerColor.ORANGE: "#ff9500",
    LayerColor.RED:    "#ff3b30",
}


def qcolor_hex(c: QtGui.QColor) -> str:
    return c.name(QtGui.QColor.HexRgb)

def rgba_css(c: QtGui.QColor) -> str:
    return f"rgba({c.red()}, {c.green()}, {c.blue()}, {c.alpha()})"

def layer_qcolor(color: LayerColor) -> QtGui.QColor:
    return QtGui.QColor(LAYER_COLORS[color])

def header_gradient_css(color: LayerColor) -> str:
    """Top-to-bottom gradient from the layer colour to a slightly darker shade."""
    top = layer_qcolor(color)
    bottom = top.darker(125)
    return (
        "qlineargradient(x1:0, y1:0, x2:0, y2:1, "
        f"stop:0 {qcolor_hex(top)}, stop:1 {qcolor_hex(bottom)})"
    )

def apply_fusion_theme(app: QtWidgets.QApplication) -> None:
    app.setStyle("Fusion")
    pal = QtGui.QPalette()
    pal.setColor(QtGui.QPalette.Window, Theme.bg)
    pal.setColor(QtGui.QPalette.Base, Theme.panel)
    pal.setColor(QtGui.QPalette.AlternateBase, Theme.panel_alt)
    pal.setColor(QtGui.QPalette.Text, Theme.text)
    pal.setColor(QtGui.QPalette.WindowText, Theme.text)
    pal.setColor(QtGui.QPalette.ButtonText, Theme.text)
    pal.setColor(QtGui.QPalette.Button, Theme.panel)
    pal.setColor(QtGui.QPalette.ToolTipBase, Theme.panel)
    pal.setColor(QtGui.QPalette.ToolTipText, Theme.text)
    pal.setColor(QtGui.QPalette.Highlight, Theme.accent)
    pal.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor("#0c0d0e"))
    app.setPalette(pal)
