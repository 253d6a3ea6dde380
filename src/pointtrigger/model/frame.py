"""
Logical Frame & Coordinate Transform
====================================
Geometry of the drawing surface and of the user-defined frame its points are
exported into.

The transform is a plain linear map from [0, width] x [0, height] (Y-up
surface space) onto [min_x, max_x] x [min_y, max_y]. Inputs are not clamped,
so a click right on the surface edge may land slightly outside the frame.

Classes:
    SurfaceSize: Fixed pixel size of the drawing surface.
    FrameBounds: The logical rectangle, with the min < max repair rule.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import TYPE_CHECKING

import numpy as np

from pointtrigger.config import SURFACE_HEIGHT, SURFACE_WIDTH
from pointtrigger.utils import format_number

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurfaceSize:
    width: int = SURFACE_WIDTH
    height: int = SURFACE_HEIGHT


@dataclass(frozen=True)
class FrameBounds:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def identity(cls, surface: SurfaceSize) -> FrameBounds:
        """Bounds that leave surface coordinates unchanged on export."""
        return cls(min_x=0.0, max_x=float(surface.width), min_y=0.0, max_y=float(surface.height))

    def is_valid(self) -> bool:
        return self.min_x < self.max_x and self.min_y < self.max_y

    def repaired(self) -> FrameBounds:
        """
        Return bounds satisfying min < max on both axes.

        An inverted (or collapsed) axis gets its minimum pulled to max - 1.
        Both axes are fixed in the same pass, x first.
        """
        fixed = self
        if not fixed.min_x < fixed.max_x:
            fixed = replace(fixed, min_x=fixed.max_x - 1)
        if not fixed.min_y < fixed.max_y:
            fixed = replace(fixed, min_y=fixed.max_y - 1)
        if fixed != self:
            logger.debug(f"Frame bounds repaired: {self} -> {fixed}")
        return fixed

    def corners(self) -> tuple[tuple[float, float], ...]:
        """Corners as (top-left, top-right, bottom-left, bottom-right), y pointing up."""
        return (
            (self.min_x, self.max_y),
            (self.max_x, self.max_y),
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
        )

    def corner_labels(self) -> tuple[str, ...]:
        return tuple(f"[{format_number(x)},{format_number(y)}]" for x, y in self.corners())


def flip_y(y: float, height: float) -> float:
    """Convert between y-down and y-up surface space. The map is its own inverse."""
    return height - y


def scale_point(x: float, y: float, bounds: FrameBounds, surface: SurfaceSize) -> tuple[float, float]:
    """Map one Y-up surface coordinate into the logical frame."""
    scaled_x = x * (bounds.max_x - bounds.min_x) / surface.width + bounds.min_x
    scaled_y = y * (bounds.max_y - bounds.min_y) / surface.height + bounds.min_y
    return scaled_x, scaled_y


def scale_points(
    points: npt.NDArray[np.float64],
    bounds: FrameBounds,
    surface: SurfaceSize
) -> npt.NDArray[np.float64]:
    """
    Map an (N, 2) array of Y-up surface coordinates into the logical frame.

    Args:
        points: (N, 2) array, columns x and y.
        bounds: Target frame.
        surface: Size of the surface the points were recorded on.

    Returns:
        New (N, 2) array of scaled coordinates.

    Raises:
        ValueError: If the input is not of shape (N, 2).
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")

    span = np.array([bounds.max_x - bounds.min_x, bounds.max_y - bounds.min_y])
    size = np.array([surface.width, surface.height], dtype=np.float64)
    offset = np.array([bounds.min_x, bounds.min_y])
    # Same operation order as scale_point, so both give identical floats
    return arr * span / size + offset
