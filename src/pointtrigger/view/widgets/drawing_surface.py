"""
Drawing Surface
Fixed-size pyqtgraph canvas that records clicks and paints point markers.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtWidgets import QFrame, QWidget

from pointtrigger.config import MARKER_EDGE_COLOR, MARKER_FILL_COLOR, MARKER_RADIUS, SURFACE_BACKGROUND
from pointtrigger.model.frame import SurfaceSize, flip_y
from pointtrigger.utils import round_half_up

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class DrawingSurface(pg.GraphicsView):
    """
    Pixel canvas of a fixed size with:
      - a locked view box spanning exactly [0, width] x [0, height],
      - y pointing down (surface space), mouse pan/zoom disabled,
      - filled circle markers of a fixed radius.

    Markers are a projection of the point registry only; the surface never
    stores points on its own.
    """
    # Raw surface coordinates (y down), rounded to whole pixels
    clicked = Signal(float, float)

    def __init__(self, surface: SurfaceSize, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background=SURFACE_BACKGROUND)
        self.surface = surface

        self.setFixedSize(surface.width, surface.height)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self.viewbox = pg.ViewBox(enableMouse=False, enableMenu=False, invertY=True, defaultPadding=0.0)
        self.setCentralItem(self.viewbox)
        self.viewbox.setRange(xRange=(0, surface.width), yRange=(0, surface.height), padding=0.0)
        self.viewbox.disableAutoRange()

        self._markers = pg.ScatterPlotItem(
            size=2 * MARKER_RADIUS,
            pxMode=True,
            symbol="o",
            pen=pg.mkPen(MARKER_EDGE_COLOR, width=1),
            brush=pg.mkBrush(MARKER_FILL_COLOR),
        )
        self.viewbox.addItem(self._markers)

        self.scene().sigMouseClicked.connect(self._on_scene_clicked)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def paint_marker(self, x: float, y: float) -> None:
        """Paint one marker at a raw surface coordinate."""
        self._markers.addPoints(x=[x], y=[y])

    def clear(self) -> None:
        """Erase all markers."""
        self._markers.clear()

    def redraw(self, points: npt.NDArray[np.float64]) -> None:
        """
        Repaint the surface from registry points.

        Args:
            points: (N, 2) array of Y-up points, flipped back to surface space here.
        """
        self.clear()
        arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if len(arr) == 0:
            return
        self._markers.addPoints(x=arr[:, 0], y=flip_y(arr[:, 1], self.surface.height))
        logger.debug(f"Surface redrawn with {len(arr)} markers")

    def marker_count(self) -> int:
        return len(self._markers.data)

    def marker_positions(self) -> npt.NDArray[np.float64]:
        """(N, 2) array of painted marker positions, in surface space."""
        x, y = self._markers.getData()
        return np.column_stack([x, y]).astype(np.float64).reshape(-1, 2)

    def to_surface(self, scene_pos: QPointF) -> tuple[int, int]:
        """Translate a scene position into surface-local pixel coordinates."""
        view_pos = self.viewbox.mapSceneToView(scene_pos)
        return round_half_up(view_pos.x()), round_half_up(view_pos.y())

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_scene_clicked(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        scene_pos = event.scenePos()
        if not self.viewbox.sceneBoundingRect().contains(scene_pos):
            return
        event.accept()
        x, y = self.to_surface(scene_pos)
        self.clicked.emit(float(x), float(y))
