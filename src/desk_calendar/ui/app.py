from __future__ import annotations

import sys

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from ..api import api_state
from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from .main_window import CalendarWindow


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    qt_palette = QPalette()
    qt_palette.setColor(QPalette.ColorRole.Window, QColor(palette.background_primary))
    qt_palette.setColor(QPalette.ColorRole.Base, QColor(palette.background_secondary))
    qt_palette.setColor(QPalette.ColorRole.AlternateBase, QColor(palette.surface))
    qt_palette.setColor(QPalette.ColorRole.Text, QColor(palette.text_primary))
    qt_palette.setColor(QPalette.ColorRole.WindowText, QColor(palette.text_primary))
    qt_palette.setColor(QPalette.ColorRole.Highlight, QColor(palette.accent_secondary))
    app.setPalette(qt_palette)
    app.setStyleSheet(palette.as_stylesheet())


def run_gui() -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    app.setApplicationName(settings.ui.app_name)
    apply_palette(app, AppPalette())

    window = CalendarWindow(service=api_state.calendar, settings=settings)
    window.show()
    sys.exit(app.exec())
