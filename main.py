# main.py
from __future__ import annotations
import sys
from cortexview.qt import application
from app_config import ensure_app_dirs, apply_qsettings_org, banner, log_level
from cortexview.core.logging import setup_logging
from cortexview.ui.main_window import MainWindow
from cortexview.ui.theme import apply_fusion_theme


def main() -> int:
    ensure_app_dirs()
    logger = setup_logging(level=log_level())

    app = application(sys.argv)
    apply_qsettings_org()
    logger.info(banner())

    apply_fusion_theme(app)
    mw = MainWindow()
    mw.show()

    return app.exec()

if __name__ == "__main__":
    raise SystemExit(main())
