"""
Tile layer - Sparse storage of placed tiles

This is the small slice of a map layer the painter needs: read and write
cells, a position, and cropping of temporary stamp layers.
"""
from typing import Callable, Dict, Iterator, Optional, Set, Tuple
from dataclasses import dataclass

from PyQt6 import QtCore

from .geometry import bounding_rect


Point = Tuple[int, int]


@dataclass
class Cell:
    """A single layer cell. checked marks cells written by the filler."""
    tile_id: Optional[int] = None
    checked: bool = False

    @property
    def is_empty(self) -> bool:
        return self.tile_id is None


EMPTY_CELL = Cell()


class TileLayer:
    """
    Layer of tiles stored as {(x, y): Cell}.

    Cells are addressed in layer coordinates. The layer is unbounded;
    width and height describe the area last set through resize().
    """

    def __init__(self, name: str = "", x: int = 0, y: int = 0,
                 width: int = 0, height: int = 0):
        self.name = name
        self._position: Point = (x, y)
        self.width = width
        self.height = height
        self._cells: Dict[Point, Cell] = {}

    @property
    def x(self) -> int:
        return self._position[0]

    @property
    def y(self) -> int:
        return self._position[1]

    def position(self) -> Point:
        return self._position

    def set_position(self, pos: Point) -> None:
        self._position = (pos[0], pos[1])

    def cell_at(self, x: int, y: int) -> Cell:
        return self._cells.get((x, y), EMPTY_CELL)

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """
        Place a cell, or remove whatever is there when the cell is empty.

        Args:
            x: Cell X coordinate
            y: Cell Y coordinate
            cell: Cell to store
        """
        if cell.is_empty:
            self._cells.pop((x, y), None)
        else:
            self._cells[(x, y)] = Cell(cell.tile_id, cell.checked)

    def cells(self) -> Iterator[Tuple[Point, Cell]]:
        """Iterate over ((x, y), cell) for every non-empty cell"""
        yield from self._cells.items()

    def region(self, predicate: Callable[[Cell], bool]) -> Set[Point]:
        """Positions of the non-empty cells matching the predicate"""
        return {pos for pos, cell in self._cells.items() if predicate(cell)}

    def bounding_rect(self) -> QtCore.QRect:
        """Bounding rectangle of all non-empty cells (invalid when empty)"""
        return bounding_rect(self._cells.keys())

    def resize(self, size: Tuple[int, int], offset: Point) -> None:
        """
        Shift the contents and crop them to a new size.

        Args:
            size: New (width, height)
            offset: Amount added to every cell coordinate before cropping
        """
        width, height = size
        dx, dy = offset
        resized = {}
        for (x, y), cell in self._cells.items():
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                resized[(nx, ny)] = cell
        self._cells = resized
        self.width = width
        self.height = height

    def is_empty(self) -> bool:
        return not self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self):
        return f"TileLayer(name='{self.name}', pos={self._position}, cells={len(self._cells)})"
