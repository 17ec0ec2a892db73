"""
Constraint grid - Desired colors accumulated during a paint gesture
"""
from typing import Dict, Iterator, Set, Tuple
from dataclasses import dataclass, field

from PyQt6 import QtCore

from .wangid import WangId, INDEX_MASK, NUM_INDEXES
from .geometry import bounding_rect


Point = Tuple[int, int]


@dataclass
class CellInfo:
    """
    Constraints on a single grid cell.

    A slot only counts when its mask nibble is INDEX_MASK; desired colors
    at other slots carry no meaning.
    """
    desired: WangId = field(default_factory=WangId)
    mask: WangId = field(default_factory=WangId)

    def copy(self) -> 'CellInfo':
        return CellInfo(self.desired.copy(), self.mask.copy())

    def constrain(self, index: int, color: int) -> None:
        """Require a color at a slot"""
        self.desired.set_index_color(index, color)
        self.mask.set_index_color(index, INDEX_MASK)

    def is_set(self, index: int) -> bool:
        return self.mask.is_index_set(index)

    def color(self, index: int) -> int:
        """Desired color at a slot, or 0 when the slot is not constrained"""
        if not self.is_set(index):
            return 0
        return self.desired.index_color(index)

    def constrained_indexes(self) -> Iterator[int]:
        for i in range(NUM_INDEXES):
            if self.is_set(i):
                yield i


@dataclass
class FillRegion:
    """
    Sparse grid of CellInfo plus the set of positions touched so far.

    Positions missing from the grid are fully unconstrained. The region only
    ever grows until the whole FillRegion is thrown away.
    """
    grid: Dict[Point, CellInfo] = field(default_factory=dict)
    region: Set[Point] = field(default_factory=set)

    def get(self, pos: Point) -> CellInfo:
        """
        Get a copy of the constraints at a position.

        Args:
            pos: Grid coordinate (x, y)

        Returns:
            CellInfo copy, all-zero if the position was never touched
        """
        info = self.grid.get(pos)
        return info.copy() if info is not None else CellInfo()

    def set(self, pos: Point, info: CellInfo) -> None:
        self.grid[pos] = info

    def touch(self, pos: Point) -> None:
        """Add a position to the region without constraining it"""
        self.region.add(pos)

    def constrain(self, pos: Point, index: int, color: int) -> None:
        """
        Require a color at one slot of a cell and add the cell to the region.

        Args:
            pos: Grid coordinate (x, y)
            index: Slot index (WangIndex)
            color: Color to require
        """
        info = self.grid.get(pos)
        if info is None:
            info = CellInfo()
            self.grid[pos] = info
        info.constrain(index, color)
        self.region.add(pos)

    def is_empty(self) -> bool:
        return not self.grid

    def bounding_rect(self) -> QtCore.QRect:
        """Bounding rectangle of the region (an invalid QRect when empty)"""
        return bounding_rect(self.region)

    def __len__(self) -> int:
        return len(self.grid)

    def __contains__(self, pos) -> bool:
        return pos in self.grid
