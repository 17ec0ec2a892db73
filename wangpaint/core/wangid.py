"""
WangId - Packed per-tile encoding of edge and corner colors

A WangId holds 8 slots, 4 bits each, going clockwise from the top edge:

     7 0 1
     6   2
     5 4 3

Even indexes are edges, odd indexes are corners. A slot value of 0 means
the slot is unconstrained.
"""
from typing import Iterable, List
from enum import IntEnum


BITS_PER_INDEX = 4
INDEX_MASK = 0xF
MAX_COLOR = INDEX_MASK

NUM_CORNERS = 4
NUM_EDGES = 4
NUM_INDEXES = 8

FULL_MASK = (1 << (BITS_PER_INDEX * NUM_INDEXES)) - 1


class WangIndex(IntEnum):
    """Slot index enumeration, clockwise starting at the top edge"""
    TOP = 0
    TOP_RIGHT = 1
    RIGHT = 2
    BOTTOM_RIGHT = 3
    BOTTOM = 4
    BOTTOM_LEFT = 5
    LEFT = 6
    TOP_LEFT = 7


class WangId:
    """
    Colors of the 8 slots of a tile, packed into a single integer.

    Corner helpers take a corner number 0-3 (TopRight, BottomRight,
    BottomLeft, TopLeft) and edge helpers an edge number 0-3 (Top, Right,
    Bottom, Left).
    """

    __slots__ = ('_id',)

    def __init__(self, value: int = 0):
        assert 0 <= value <= FULL_MASK
        self._id = value

    @classmethod
    def from_colors(cls, colors: Iterable[int]) -> 'WangId':
        """
        Build a WangId from a sequence of 8 slot colors.

        Args:
            colors: Colors for indexes 0-7

        Returns:
            New WangId instance
        """
        colors = list(colors)
        assert len(colors) == NUM_INDEXES

        wang_id = cls()
        for index, color in enumerate(colors):
            wang_id.set_index_color(index, color)
        return wang_id

    @property
    def value(self) -> int:
        return self._id

    def copy(self) -> 'WangId':
        return WangId(self._id)

    def colors(self) -> List[int]:
        """Get the colors of all 8 slots, indexed like WangIndex"""
        return [self.index_color(i) for i in range(NUM_INDEXES)]

    def index_color(self, index: int) -> int:
        assert 0 <= index < NUM_INDEXES
        return (self._id >> (index * BITS_PER_INDEX)) & INDEX_MASK

    def set_index_color(self, index: int, color: int) -> None:
        assert 0 <= index < NUM_INDEXES
        assert 0 <= color <= MAX_COLOR
        shift = index * BITS_PER_INDEX
        self._id &= ~(INDEX_MASK << shift)
        self._id |= color << shift

    def corner_color(self, corner: int) -> int:
        assert 0 <= corner < NUM_CORNERS
        return self.index_color(corner * 2 + 1)

    def set_corner_color(self, corner: int, color: int) -> None:
        assert 0 <= corner < NUM_CORNERS
        self.set_index_color(corner * 2 + 1, color)

    def edge_color(self, edge: int) -> int:
        assert 0 <= edge < NUM_EDGES
        return self.index_color(edge * 2)

    def set_edge_color(self, edge: int, color: int) -> None:
        assert 0 <= edge < NUM_EDGES
        self.set_index_color(edge * 2, color)

    def is_empty(self) -> bool:
        return self._id == 0

    def is_index_set(self, index: int) -> bool:
        """True when the slot holds the full-set sentinel (mask usage)"""
        return self.index_color(index) == INDEX_MASK

    def mask(self) -> 'WangId':
        """
        Get a mask with the full-set sentinel in every non-zero slot.

        Returns:
            New WangId usable as the mask of this one
        """
        mask = WangId()
        for i in range(NUM_INDEXES):
            if self.index_color(i):
                mask.set_index_color(i, INDEX_MASK)
        return mask

    def matches(self, other: 'WangId', mask: 'WangId') -> bool:
        """
        Compare two WangIds on the slots set in the mask only.

        Args:
            other: WangId to compare against
            mask: Slots to compare (full-set sentinel per slot)

        Returns:
            True if every masked slot holds the same color in both
        """
        return (self._id & mask.value) == (other.value & mask.value)

    @staticmethod
    def is_corner(index: int) -> bool:
        return index & 1 == 1

    @staticmethod
    def opposite_index(index: int) -> int:
        return (index + 4) % NUM_INDEXES

    @staticmethod
    def corner_index(corner: int) -> int:
        """Slot index of corner number 0-3"""
        return corner * 2 + 1

    @staticmethod
    def index_to_corner(index: int) -> int:
        """Corner number 0-3 of an odd slot index"""
        assert WangId.is_corner(index)
        return index // 2

    def __eq__(self, other):
        if not isinstance(other, WangId):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"WangId({','.join(str(c) for c in self.colors())})"
