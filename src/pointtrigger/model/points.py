"""
Point Registry
==============
Holds every point clicked during the current session, in click order.

Points are stored in Y-up surface space: x is the pixel column, y is measured
from the bottom edge of the surface. They are never rescaled in place; the
logical frame is applied only on export (see `pointtrigger.model.frame`).

Classes:
    Point: One recorded click.
    PointRegistry: Ordered, append-only sequence of points.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterator, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass
class PointRegistry:
    """Ordered sequence of recorded points. No duplicate detection."""
    _points: list[Point] = field(default_factory=list)

    def append(self, point: Point) -> None:
        self._points.append(point)
        logger.debug(f"Point #{len(self._points)} recorded at ({point.x}, {point.y})")

    def clear(self) -> None:
        self._points.clear()

    def count(self) -> int:
        return len(self._points)

    def as_array(self) -> npt.NDArray[np.float64]:
        """
        Return the points as an (N, 2) array.

        An empty registry gives an array of shape (0, 2), so callers can
        transform it without special-casing.
        """
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([(p.x, p.y) for p in self._points], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]
