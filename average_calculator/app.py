from __future__ import annotations

import logging
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from .config import load_preferences
from .env import load_env
from .ui.main_window import MainWindow
from .utils import setup_logging


log = logging.getLogger(__name__)


def stylesheet_path(theme: str) -> Path:
    name = "styles_dark.qss" if theme == "dark" else "styles.qss"
    return Path(__file__).with_name("ui").joinpath(name)


def main():
    load_env()
    prefs = load_preferences()
    setup_logging(prefs.log_level)
    app = QApplication(sys.argv)
    qss_path = stylesheet_path(prefs.theme)
    if qss_path.exists():
        app.setStyleSheet(qss_path.read_text(encoding="utf-8"))
    else:
        log.warning("Stylesheet not found: %s", qss_path)
    if prefs.font_scale != 1.0:
        f = app.font()
        if f.pointSizeF() > 0:
            f.setPointSizeF(f.pointSizeF() * prefs.font_scale)
            app.setFont(f)

    win = MainWindow(prefs)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
