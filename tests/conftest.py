"""
Shared fixtures for the WangPaint test suite.
"""

import itertools

import pytest
from PyQt6 import QtCore

from wangpaint.core import settings as wang_settings
from wangpaint.core.logging import close_logging, set_logging_enabled
from wangpaint.core.wangid import WangId
from wangpaint.core.wangset import WangColor, WangSet, WangSetType

from .helpers import corner_wang_id, edge_wang_id


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """One QCoreApplication for the whole session (QObject signals, QSettings)."""
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Point settings at a throwaway INI file and reset logging afterwards."""
    wang_settings.init_settings(str(tmp_path / "wangpaint.ini"))
    yield
    close_logging()
    set_logging_enabled(True)


@pytest.fixture
def corner_set() -> WangSet:
    """Corner set with 3 colors; tiles cover every combination of colors 1 and 2."""
    wang_set = WangSet("Terrain", WangSetType.CORNER,
                       [WangColor("Grass"), WangColor("Water"), WangColor("Sand")])
    for tile_id, corners in enumerate(itertools.product([1, 2], repeat=4)):
        wang_set.set_wang_id(tile_id, corner_wang_id(*corners))
    return wang_set


@pytest.fixture
def edge_set() -> WangSet:
    """Edge set with 2 colors; tiles cover every combination of edge colors."""
    wang_set = WangSet("Roads", WangSetType.EDGE, [WangColor("Dirt"), WangColor("Road")])
    for tile_id, edges in enumerate(itertools.product([1, 2], repeat=4)):
        wang_set.set_wang_id(tile_id, edge_wang_id(*edges))
    return wang_set


@pytest.fixture
def mixed_set() -> WangSet:
    """
    Mixed set with 5 colors:
    1 is used on edges and corners, 2 only on edges, 3 only on corners,
    4 and 5 are not used by any tile.
    """
    wang_set = WangSet("Mixed", WangSetType.MIXED,
                       [WangColor(name) for name in ("A", "B", "C", "D", "E")])
    wang_set.set_wang_id(0, WangId.from_colors([1] * 8))
    wang_set.set_wang_id(1, WangId.from_colors([2, 1, 2, 1, 2, 1, 2, 1]))
    wang_set.set_wang_id(2, WangId.from_colors([1, 3, 1, 3, 1, 3, 1, 3]))
    return wang_set
