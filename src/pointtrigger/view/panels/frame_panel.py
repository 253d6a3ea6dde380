"""
Frame Control Panel
Four editable bounds of the logical frame and the resulting corner labels.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout,
    QSizePolicy, QDoubleSpinBox
)

from pointtrigger.model.frame import FrameBounds

# Keys in the order FrameBounds takes them
BOUND_KEYS = ("min_x", "max_x", "min_y", "max_y")


class FramePanel(QWidget):
    """
    Edits the logical frame the exported points are scaled into.

    The panel does not repair bounds itself: it reports raw field values via
    `bounds_edited` and shows whatever comes back through `show_bounds`.
    """
    bounds_edited = Signal(float, float, float, float)

    def __init__(self, bounds: FrameBounds, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        box = QGroupBox(self.tr("Frame Bounds"), self)
        layout.addWidget(box)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self._spins: dict[str, QDoubleSpinBox] = {}
        self._row = 0

        self._add_spin("min_x", "Min X:", default=bounds.min_x)
        self._add_spin("max_x", "Max X:", default=bounds.max_x)
        self._add_spin("min_y", "Min Y:", default=bounds.min_y)
        self._add_spin("max_y", "Max Y:", default=bounds.max_y)
        for w in self._spins.values():
            w.valueChanged.connect(self.on_boundary_changed)

        corners_box = QGroupBox(self.tr("Corners"), self)
        layout.addWidget(corners_box)
        corners = QGridLayout(corners_box)
        # top-left, top-right, bottom-left, bottom-right
        self.corner_labels: list[QLabel] = []
        for i, align in enumerate((
            Qt.AlignmentFlag.AlignLeft, Qt.AlignmentFlag.AlignRight,
            Qt.AlignmentFlag.AlignLeft, Qt.AlignmentFlag.AlignRight,
        )):
            lab = QLabel(self)
            lab.setAlignment(align)
            corners.addWidget(lab, i // 2, i % 2)
            self.corner_labels.append(lab)

        self.show_bounds(bounds)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: float = -1e9,
        max_value: float = 1e9,
        step: float = 1.0,
        default: float = 0.0,
        decimals: int = 3
    ) -> QDoubleSpinBox:
        row = self._next_row()
        lab = QLabel(self.tr(label), self)
        self.grid.addWidget(lab, row, 0)
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(w, row, 1)
        self._spins[key] = w
        return w

    def spin(self, key: str) -> QDoubleSpinBox:
        return self._spins[key]

    def values(self) -> tuple[float, float, float, float]:
        return tuple(self._spins[k].value() for k in BOUND_KEYS)

    # ---- slots ----

    @Slot()
    def on_boundary_changed(self) -> None:
        self.bounds_edited.emit(*self.values())

    @Slot(object)
    def show_bounds(self, bounds: FrameBounds) -> None:
        """Write (possibly repaired) bounds back into the fields and refresh the corners."""
        for key in BOUND_KEYS:
            w = self._spins[key]
            value = getattr(bounds, key)
            if w.value() != value:
                w.blockSignals(True)
                try:
                    # A repaired minimum can land one below the field's floor
                    if value < w.minimum():
                        w.setMinimum(value)
                    elif value > w.maximum():
                        w.setMaximum(value)
                    w.setValue(value)
                finally:
                    w.blockSignals(False)

        for lab, text in zip(self.corner_labels, bounds.corner_labels()):
            lab.setText(text)
