from __future__ import annotations

import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import pyqtgraph as pg

from pointtrigger.config import SETTINGS_LAST_EXPORT_DIR, SURFACE_BACKGROUND, VISIBLE_APP_NAME

ORG_ID = "pointtrigger"
APP_ID = "pointtrigger"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    pg.setConfigOption("background", SURFACE_BACKGROUND)
    pg.setConfigOption("foreground", "k")
    pg.setConfigOption("antialias", True)

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app


def last_export_dir() -> Path:
    """Directory of the previous export, or the home directory on first use."""
    value = QSettings().value(SETTINGS_LAST_EXPORT_DIR, "", type=str)
    if value and Path(value).is_dir():
        return Path(value)
    return Path.home()


def remember_export_dir(directory: str | Path) -> None:
    QSettings().setValue(SETTINGS_LAST_EXPORT_DIR, str(directory))
