"""
Core Wang painting logic
"""

from .wangid import (
    WangId, WangIndex, INDEX_MASK, NUM_CORNERS, NUM_EDGES, NUM_INDEXES
)
from .wangset import WangSet, WangSetType, WangColor
from .renderer import HexagonalRenderer, StaggerAxis, StaggerIndex
from .geometry import (
    NeighborGeometry, OrthogonalGeometry, HexagonalGeometry, geometry_for
)
from .constraints import CellInfo, FillRegion
from .brush_mode import BrushMode, brush_mode_for, desired_direction
from .layer import Cell, TileLayer
from .random_picker import RandomPicker, RandomTaker
from .filler import WangFiller, FillResult
from .painter import WangPainter

__all__ = [
    'WangId',
    'WangIndex',
    'INDEX_MASK',
    'NUM_CORNERS',
    'NUM_EDGES',
    'NUM_INDEXES',
    'WangSet',
    'WangSetType',
    'WangColor',
    'HexagonalRenderer',
    'StaggerAxis',
    'StaggerIndex',
    'NeighborGeometry',
    'OrthogonalGeometry',
    'HexagonalGeometry',
    'geometry_for',
    'CellInfo',
    'FillRegion',
    'BrushMode',
    'brush_mode_for',
    'desired_direction',
    'Cell',
    'TileLayer',
    'RandomPicker',
    'RandomTaker',
    'WangFiller',
    'FillResult',
    'WangPainter',
]
