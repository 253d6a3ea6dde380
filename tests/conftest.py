import os
import sys
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import pointtrigger from a checkout
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from pointtrigger.model.frame import FrameBounds, SurfaceSize  # noqa: E402
from pointtrigger.model.points import Point, PointRegistry  # noqa: E402


@pytest.fixture
def surface() -> SurfaceSize:
    return SurfaceSize(500, 500)


@pytest.fixture
def identity_bounds(surface) -> FrameBounds:
    return FrameBounds.identity(surface)


@pytest.fixture
def demo_registry() -> PointRegistry:
    """The two points from the reference export example."""
    registry = PointRegistry()
    registry.append(Point(10, 490))
    registry.append(Point(250, 250))
    return registry


@pytest.fixture
def isolated_settings(qapp, tmp_path, monkeypatch):
    """Point QSettings at a temporary directory so tests never touch the user's config."""
    from PySide6.QtCore import QCoreApplication, QSettings

    QCoreApplication.setOrganizationName("pointtrigger-tests")
    QCoreApplication.setApplicationName("pointtrigger-tests")
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    QSettings.setPath(QSettings.Format.IniFormat, QSettings.Scope.UserScope, str(tmp_path / "settings"))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    return tmp_path
