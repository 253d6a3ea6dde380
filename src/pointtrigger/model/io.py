"""
Export Encoder (CSV)
Serializes the point registry into a comma separated file.

Each point is scaled into the logical frame at export time; the registry
itself is never modified.
"""
from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from pointtrigger.config import CSV_HEADER, DEFAULT_EXPORT_NAME, EXPORT_EXTENSION
from pointtrigger.model.frame import FrameBounds, SurfaceSize, scale_points
from pointtrigger.model.points import Point
from pointtrigger.utils import format_number

# Get module logger
logger = logging.getLogger(__name__)


def export_filename(name: str) -> str:
    """
    Resolve the user supplied base name into the exported file name.

    A blank name falls back to DEFAULT_EXPORT_NAME. The extension is only
    appended when it is not there already.
    """
    base = name.strip()
    if not base:
        logger.warning(f"Export filename is blank, using '{DEFAULT_EXPORT_NAME}' instead.")
        base = DEFAULT_EXPORT_NAME
    if base.lower().endswith(EXPORT_EXTENSION):
        return base
    return f"{base}{EXPORT_EXTENSION}"


def encode_csv(points: Iterable[Point], bounds: FrameBounds, surface: SurfaceSize) -> str:
    """Build the CSV payload: header row, then one scaled row per point, '\\n' terminated."""
    xy = np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)
    scaled = scale_points(xy, bounds, surface)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for x, y in scaled:
        writer.writerow((format_number(x), format_number(y)))
    return buffer.getvalue()


def write_text(path: str | Path, payload: str) -> Path:
    """Write the payload as UTF-8 text, raising IOError with a readable message on failure."""
    path = Path(path)
    try:
        with open(path, mode="w", encoding="utf-8", newline="") as f:
            f.write(payload)
    except OSError as e:
        logger.error(f"CSV export failed: {e}")
        raise IOError(f"Failed to write CSV file '{path}': {e}") from e
    logger.info(f"CSV saved to {path}")
    return path


def export_to_file(
    points: Iterable[Point],
    bounds: FrameBounds,
    surface: SurfaceSize,
    filename: str,
    directory: str | Path = "."
) -> Path:
    """
    Encode the points and save them as `{directory}/{filename}.csv`.

    Args:
        points: Registry points in Y-up surface space.
        bounds: Logical frame to scale into.
        surface: Size of the surface the points were recorded on.
        filename: Base filename, without extension.
        directory: Target directory.

    Returns:
        Path of the written file.

    Raises:
        IOError: If the file cannot be written.
    """
    payload = encode_csv(points, bounds, surface)
    return write_text(Path(directory) / export_filename(filename), payload)
