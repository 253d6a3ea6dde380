"""
Session State (Data Model)
==========================
This module defines the central data structure for the running session.

Why is this file needed?
------------------------
1. State Management: It holds the recorded points, the current frame bounds
   and the export filename in one place instead of module-level globals.
2. Lifecycle: It is created with the main window, reset by "clear" and
   discarded together with the window.
3. Decoupling: Views read from this object; the controller writes to it.

Classes:
    SessionState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from pointtrigger.config import DEFAULT_EXPORT_NAME
from pointtrigger.model.frame import FrameBounds, SurfaceSize
from pointtrigger.model.points import PointRegistry

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """
    Holds the entire state of the open session.
    Pass this instance to the controller; the surface size never changes.
    """
    surface: SurfaceSize = field(default_factory=SurfaceSize)
    registry: PointRegistry = field(default_factory=PointRegistry)
    bounds: FrameBounds | None = None
    filename: str = DEFAULT_EXPORT_NAME

    def __post_init__(self) -> None:
        if self.bounds is None:
            self.bounds = FrameBounds.identity(self.surface)

    def reset(self) -> None:
        """Forget all recorded points. Frame bounds and filename are kept."""
        self.registry.clear()
        logger.info("Session points have been cleared.")
