"""
Hexagonal renderer - Neighbor queries on staggered hexagonal maps

On a staggered map every other row (or column) is shifted by half a tile,
so the coordinates of a diagonal neighbor depend on the parity of the row
(or column) the tile is in.
"""
from typing import Tuple
from enum import Enum


Point = Tuple[int, int]


class StaggerAxis(Enum):
    """Which axis is staggered"""
    X = "x"  # Columns are shifted
    Y = "y"  # Rows are shifted


class StaggerIndex(Enum):
    """Whether the odd or the even rows/columns are shifted"""
    ODD = "odd"
    EVEN = "even"


class HexagonalRenderer:
    """
    Answers "which tile is to the top-left/top-right/... of (x, y)" on a
    staggered hexagonal map.
    """

    def __init__(self, stagger_axis: StaggerAxis = StaggerAxis.Y,
                 stagger_index: StaggerIndex = StaggerIndex.ODD):
        self.stagger_axis = stagger_axis
        self.stagger_index = stagger_index

    @property
    def stagger_x(self) -> bool:
        return self.stagger_axis == StaggerAxis.X

    def _shifted(self, value: int) -> bool:
        """True if the row/column holding value is the shifted one"""
        stagger_even = self.stagger_index == StaggerIndex.EVEN
        return bool((value & 1) ^ stagger_even)

    def top_left(self, x: int, y: int) -> Point:
        if not self.stagger_x:
            if self._shifted(y):
                return (x, y - 1)
            return (x - 1, y - 1)
        if self._shifted(x):
            return (x - 1, y)
        return (x - 1, y - 1)

    def top_right(self, x: int, y: int) -> Point:
        if not self.stagger_x:
            if self._shifted(y):
                return (x + 1, y - 1)
            return (x, y - 1)
        if self._shifted(x):
            return (x + 1, y)
        return (x + 1, y - 1)

    def bottom_left(self, x: int, y: int) -> Point:
        if not self.stagger_x:
            if self._shifted(y):
                return (x, y + 1)
            return (x - 1, y + 1)
        if self._shifted(x):
            return (x - 1, y + 1)
        return (x - 1, y)

    def bottom_right(self, x: int, y: int) -> Point:
        if not self.stagger_x:
            if self._shifted(y):
                return (x + 1, y + 1)
            return (x, y + 1)
        if self._shifted(x):
            return (x + 1, y + 1)
        return (x + 1, y)

    def __repr__(self):
        return f"HexagonalRenderer(axis={self.stagger_axis.name}, index={self.stagger_index.name})"
