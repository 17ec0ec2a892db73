"""
WangPaint - Wang tile constraint painting for tile map editors.
"""

from .core.painter import WangPainter
from .core.wangset import WangSet, WangSetType, WangColor
from .core.wangid import WangId, WangIndex
from .core.brush_mode import BrushMode
from .core.layer import Cell, TileLayer

__version__ = '1.0.0'
__all__ = [
    'WangPainter',
    'WangSet',
    'WangSetType',
    'WangColor',
    'WangId',
    'WangIndex',
    'BrushMode',
    'Cell',
    'TileLayer',
]
