"""
Points Control Panel
"""
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QLineEdit, QGroupBox, QFormLayout
)
from PySide6.QtCore import Signal, Qt

from pointtrigger.config import COUNTER_TEMPLATE


class PointsPanel(QWidget):
    export_requested = Signal()
    clear_requested = Signal()
    filename_changed = Signal(str)

    def __init__(self, filename: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Points")
        form = QFormLayout(grp)

        self.lbl_counter = QLabel()
        self.lbl_counter.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        form.addRow(self.lbl_counter)

        self.edit_filename = QLineEdit(filename)
        self.edit_filename.setPlaceholderText("file name (without .csv)")
        self.edit_filename.textChanged.connect(self.filename_changed)
        form.addRow("File name:", self.edit_filename)

        layout.addWidget(grp)

        # --- Actions ---
        buttons = QHBoxLayout()
        self.btn_export = QPushButton("Export CSV...")
        self.btn_export.setMinimumHeight(32)
        self.btn_export.clicked.connect(self.export_requested)
        buttons.addWidget(self.btn_export)

        self.btn_clear = QPushButton("Clear")
        self.btn_clear.setMinimumHeight(32)
        self.btn_clear.clicked.connect(self.clear_requested)
        buttons.addWidget(self.btn_clear)
        layout.addLayout(buttons)

        self.set_count(0)

    def set_count(self, count: int) -> None:
        self.lbl_counter.setText(COUNTER_TEMPLATE.format(count=count))

    def filename(self) -> str:
        return self.edit_filename.text()
