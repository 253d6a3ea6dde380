"""
Main Application Window
=======================
The primary GUI container: control panels on the left, drawing surface on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects widget signals (clicks, field edits, buttons) to the
   SessionController, and controller signals back to the widgets.
"""
import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFileDialog, QMessageBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from pointtrigger.app import last_export_dir, remember_export_dir
from pointtrigger.config import EXPORT_EXTENSION, VISIBLE_APP_NAME
from pointtrigger.controller.session import SessionController
from pointtrigger.view.panels.frame_panel import FramePanel
from pointtrigger.view.panels.points_panel import PointsPanel
from pointtrigger.view.widgets.drawing_surface import DrawingSurface

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: SessionController) -> None:
        super().__init__()
        self.controller = controller
        state = controller.state

        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QHBoxLayout(main_widget)

        # --- LEFT SIDE: Control Panels ---
        controls = QWidget()
        controls.setFixedWidth(260)
        controls_layout = QVBoxLayout(controls)
        controls_layout.setContentsMargins(0, 0, 0, 0)

        self.frame_panel = FramePanel(state.bounds)
        self.points_panel = PointsPanel(state.filename)
        controls_layout.addWidget(self.frame_panel)
        controls_layout.addWidget(self.points_panel)
        controls_layout.addStretch()

        main_layout.addWidget(controls)

        # --- RIGHT SIDE: Drawing Surface ---
        self.surface = DrawingSurface(state.surface)
        main_layout.addWidget(self.surface, 0, Qt.AlignTop)

        # --- SIGNAL CONNECTIONS ---
        # 1. User input -> Controller
        self.surface.clicked.connect(self.controller.handle_click)
        self.frame_panel.bounds_edited.connect(self.controller.set_bounds)
        self.points_panel.filename_changed.connect(self.controller.set_filename)
        self.points_panel.export_requested.connect(self.on_export)
        self.points_panel.clear_requested.connect(self.controller.clear)

        # 2. Controller -> Views
        self.controller.marker_added.connect(self.surface.paint_marker)
        self.controller.redraw_requested.connect(self.surface.redraw)
        self.controller.cleared.connect(self.surface.clear)
        self.controller.count_changed.connect(self.points_panel.set_count)
        self.controller.bounds_changed.connect(self.frame_panel.show_bounds)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.points_panel.set_count(self.controller.count())
        self.statusBar().showMessage("Click on the surface to add points.")

    def _create_actions(self) -> None:
        self.act_export = QAction("Export CSV...", self)
        self.act_export.setShortcut("Ctrl+S")
        self.act_export.triggered.connect(self.on_export)

        self.act_clear = QAction("Clear Points", self)
        self.act_clear.setShortcut("Ctrl+Shift+Del")
        self.act_clear.triggered.connect(self.controller.clear)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_export)
        file_menu.addAction(self.act_clear)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_export(self) -> None:
        suggested = last_export_dir() / self.controller.export_name()
        fname, _ = QFileDialog.getSaveFileName(
            self, "Export Points", str(suggested), "CSV Files (*.csv)"
        )
        if not fname:
            return

        # Ensure extension
        if not fname.lower().endswith(EXPORT_EXTENSION):
            fname += EXPORT_EXTENSION

        try:
            path = self.controller.export_to(fname)
        except IOError as e:
            QMessageBox.critical(self, "Export Failed", f"Could not save the file:\n{e}")
            return

        remember_export_dir(Path(path).parent)
        self.statusBar().showMessage(f"Exported {self.controller.count()} points to {path}", 5000)
