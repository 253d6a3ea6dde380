"""
Session Controller
==================
Turns user actions into state changes and tells the views what to repaint.

The controller owns the SessionState and is the only object writing to it.
Views never touch the registry directly; they react to the signals below.
"""
from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from pointtrigger.model import io
from pointtrigger.model.frame import FrameBounds, flip_y
from pointtrigger.model.points import Point
from pointtrigger.model.state import SessionState

logger = logging.getLogger(__name__)


class SessionController(QObject):
    # Raw (y-down) surface coordinates of a newly recorded point
    marker_added = Signal(float, float)
    count_changed = Signal(int)
    # Repaired FrameBounds
    bounds_changed = Signal(object)
    # (N, 2) array of Y-up registry points
    redraw_requested = Signal(object)
    cleared = Signal()

    def __init__(self, state: SessionState | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.state = state if state is not None else SessionState()

    # ------------------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------------------

    def handle_click(self, x: float, y: float) -> Point:
        """Record a click given in raw surface coordinates (y down)."""
        point = Point(x, flip_y(y, self.state.surface.height))
        self.state.registry.append(point)
        self.marker_added.emit(x, y)
        self.count_changed.emit(self.count())
        return point

    def set_bounds(self, min_x: float, max_x: float, min_y: float, max_y: float) -> FrameBounds:
        """Store new frame bounds, repairing min >= max, and replay the registry."""
        bounds = FrameBounds(float(min_x), float(max_x), float(min_y), float(max_y)).repaired()
        self.state.bounds = bounds
        self.bounds_changed.emit(bounds)
        self.redraw_requested.emit(self.state.registry.as_array())
        return bounds

    def set_filename(self, name: str) -> None:
        self.state.filename = name

    def clear(self) -> None:
        """Forget every point. Safe to call on an empty session."""
        self.state.reset()
        self.cleared.emit()
        self.count_changed.emit(0)

    # ------------------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------------------

    def export_name(self) -> str:
        """File name offered in the save dialog."""
        return io.export_filename(self.state.filename)

    def export_payload(self) -> str:
        return io.encode_csv(self.state.registry, self.state.bounds, self.state.surface)

    def export_to(self, path: str | Path) -> Path:
        """
        Write the current points to `path`.

        Raises:
            IOError: If the file cannot be written.
        """
        logger.info(f"Exporting {self.count()} points with bounds {self.state.bounds}")
        return io.write_text(path, self.export_payload())

    def export_to_directory(self, directory: str | Path) -> Path:
        """Write the current points to `{directory}/{filename}.csv`."""
        return io.export_to_file(
            self.state.registry, self.state.bounds, self.state.surface,
            filename=self.state.filename, directory=directory
        )

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    def count(self) -> int:
        return self.state.registry.count()

    @property
    def bounds(self) -> FrameBounds:
        return self.state.bounds
