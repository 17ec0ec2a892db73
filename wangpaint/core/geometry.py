"""
Neighbor geometry - Which grid cell shares a given edge or corner

Orthogonal maps use a fixed offset table. Hexagonal maps ask the renderer,
since the neighbor of a staggered tile depends on row/column parity. Both
variants answer the same questions so the painter never looks at the map
orientation itself.
"""
from typing import Iterable, List, Optional, Tuple
from abc import ABC, abstractmethod

from PyQt6 import QtCore

from .wangid import WangId, WangIndex, NUM_INDEXES
from .renderer import HexagonalRenderer


Point = Tuple[int, int]

# Offsets of the tile sharing each slot, indexed like WangIndex
AROUND_TILE_POINTS: Tuple[Point, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


class NeighborGeometry(ABC):
    """Maps (position, slot) to the position of the tile sharing that slot"""

    @abstractmethod
    def neighbor(self, pos: Point, index: int) -> Point:
        """
        Get the tile on the other side of an edge or corner.

        Args:
            pos: Tile coordinate (x, y)
            index: Slot index (WangIndex)

        Returns:
            Coordinate of the tile sharing that edge or corner
        """

    def neighbors(self, pos: Point) -> List[Point]:
        """All 8 neighbors of a tile, indexed like WangIndex"""
        return [self.neighbor(pos, i) for i in range(NUM_INDEXES)]

    def vertex_neighbors(self, pos: Point, corner_index: int) -> List[Tuple[Point, int]]:
        """
        Get the 4 tiles meeting at one corner of a tile.

        The tile across the edge before the corner (counterclockwise) sees
        the vertex two slots further clockwise, the tile across the edge
        after it two slots further counterclockwise, and the tile across
        the corner sees it at the opposite corner.

        Args:
            pos: Tile coordinate (x, y)
            corner_index: Odd slot index of the corner

        Returns:
            List of (position, corner slot index) pairs, one per tile
        """
        assert WangId.is_corner(corner_index)
        edge_before = (corner_index - 1) % NUM_INDEXES
        edge_after = (corner_index + 1) % NUM_INDEXES

        return [
            (self.neighbor(pos, edge_after), (corner_index - 2) % NUM_INDEXES),
            (pos, corner_index),
            (self.neighbor(pos, edge_before), (corner_index + 2) % NUM_INDEXES),
            (self.neighbor(pos, corner_index), WangId.opposite_index(corner_index)),
        ]


class OrthogonalGeometry(NeighborGeometry):
    """Square grids: every tile has the same neighbor offsets"""

    def neighbor(self, pos: Point, index: int) -> Point:
        dx, dy = AROUND_TILE_POINTS[index]
        return (pos[0] + dx, pos[1] + dy)

    def __repr__(self):
        return "OrthogonalGeometry()"


class HexagonalGeometry(NeighborGeometry):
    """
    Staggered hexagonal grids.

    The four edges map onto the renderer's diagonal neighbors. A corner
    neighbor is reached by stepping across the two edges around it, which
    only relies on the renderer's own neighbor queries.
    """

    def __init__(self, renderer: HexagonalRenderer):
        self.renderer = renderer

    def _edge_neighbor(self, pos: Point, index: int) -> Point:
        x, y = pos
        if index == WangIndex.TOP:
            return self.renderer.top_right(x, y)
        if index == WangIndex.RIGHT:
            return self.renderer.bottom_right(x, y)
        if index == WangIndex.BOTTOM:
            return self.renderer.bottom_left(x, y)
        return self.renderer.top_left(x, y)

    def neighbor(self, pos: Point, index: int) -> Point:
        assert 0 <= index < NUM_INDEXES
        if not WangId.is_corner(index):
            return self._edge_neighbor(pos, index)

        edge_before = (index - 1) % NUM_INDEXES
        edge_after = (index + 1) % NUM_INDEXES
        return self._edge_neighbor(self._edge_neighbor(pos, edge_before), edge_after)

    def __repr__(self):
        return f"HexagonalGeometry({self.renderer!r})"


def geometry_for(renderer: Optional[HexagonalRenderer] = None) -> NeighborGeometry:
    """
    Pick the neighbor geometry for a map.

    Args:
        renderer: Hexagonal renderer of the map, or None for orthogonal maps

    Returns:
        HexagonalGeometry when a renderer is given, OrthogonalGeometry otherwise
    """
    if renderer is None:
        return OrthogonalGeometry()
    return HexagonalGeometry(renderer)


def bounding_rect(positions: Iterable[Point]) -> QtCore.QRect:
    """Smallest QRect holding every (x, y) position (invalid when empty)"""
    positions = list(positions)
    if not positions:
        return QtCore.QRect()
    xs = [x for x, y in positions]
    ys = [y for x, y in positions]
    return QtCore.QRect(QtCore.QPoint(min(xs), min(ys)),
                        QtCore.QPoint(max(xs), max(ys)))
