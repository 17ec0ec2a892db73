"""
Wang painter - Paints adjacency colors into a constraint grid and commits
the tiles resolved from it to a tile layer
"""
from typing import List, Optional, Tuple
import random

from PyQt6 import QtCore

from .wangid import WangId, NUM_INDEXES
from .wangset import WangSet
from .renderer import HexagonalRenderer
from .geometry import NeighborGeometry, geometry_for, bounding_rect
from .constraints import FillRegion
from .brush_mode import BrushMode, brush_mode_for, desired_direction, specialize
from .layer import TileLayer
from .filler import WangFiller
from .settings import setting
from .logging import log_painter


Point = Tuple[int, int]


class WangPainter(QtCore.QObject):
    """
    Turns paint actions into Wang constraints and applies them.

    A paint gesture accumulates constraints in the painter's own FillRegion.
    commit() resolves them into tiles and writes those to a layer. Every
    paint method also accepts an explicit FillRegion, so a caller can preview
    a stroke on a scratch grid without touching the live one.

    Signals:
        brush_mode_changed: Emitted when the brush mode changes (BrushMode)
        color_changed: Emitted when the active color changes (color)
        committed: Emitted after commit() (number of cells written)
    """

    brush_mode_changed = QtCore.pyqtSignal(object)
    color_changed = QtCore.pyqtSignal(int)
    committed = QtCore.pyqtSignal(int)

    def __init__(self, renderer: Optional[HexagonalRenderer] = None,
                 rng: Optional[random.Random] = None, parent=None):
        """
        Initialize the painter.

        Args:
            renderer: Hexagonal renderer of the map, None for orthogonal maps
            rng: Random source for tile choices
            parent: Parent QObject
        """
        super().__init__(parent)

        self._wang_set: Optional[WangSet] = None
        self._color = 0
        self._brush_mode = BrushMode.IDLE
        self._geometry: NeighborGeometry = geometry_for(renderer)
        self._fill = FillRegion()
        self._rng = rng

    @property
    def wang_set(self) -> Optional[WangSet]:
        return self._wang_set

    @property
    def color(self) -> int:
        return self._color

    @property
    def brush_mode(self) -> BrushMode:
        return self._brush_mode

    @property
    def geometry(self) -> NeighborGeometry:
        return self._geometry

    @property
    def fill(self) -> FillRegion:
        """The live constraint grid of the current gesture"""
        return self._fill

    def set_renderer(self, renderer: Optional[HexagonalRenderer]) -> None:
        """Switch neighbor geometry when the map orientation changes"""
        self._geometry = geometry_for(renderer)

    # =========================================================================
    # WANG SET AND COLOR
    # =========================================================================

    def set_wang_set(self, wang_set: Optional[WangSet]) -> None:
        """
        Change the active Wang set. Resets the color to 0.

        Args:
            wang_set: New Wang set, or None to stop painting
        """
        if wang_set is self._wang_set:
            return

        self._wang_set = wang_set
        log_painter(f"Wang set: {wang_set!r}")

        if self._color != 0:
            self._color = 0
            self.color_changed.emit(0)

        self._update_brush_mode()

    def set_color(self, color: int) -> None:
        """
        Change the active color.

        For mixed Wang sets this rescans the set to find out whether the
        color is used on corners, edges or both.
        """
        if color == self._color:
            return

        assert color >= 0
        self._color = color
        self.color_changed.emit(color)

        if self._wang_set is None:
            return

        self._update_brush_mode()

    def _update_brush_mode(self) -> None:
        mode = brush_mode_for(self._wang_set, self._color)
        if mode != self._brush_mode:
            self._brush_mode = mode
            log_painter(f"Brush mode: {mode.name}")
            self.brush_mode_changed.emit(mode)

    def desired_direction(self, initial_direction: int) -> int:
        """Slot actually painted when the pointer hovers initial_direction"""
        return desired_direction(self._brush_mode, initial_direction)

    # =========================================================================
    # PAINTING
    # =========================================================================

    def set_terrain(self, color: int, pos: Point, direction: Optional[int],
                    use_tile_mode: bool = False,
                    fill: Optional[FillRegion] = None) -> None:
        """
        Select a color and paint it.

        Args:
            color: Color to paint
            pos: Tile coordinate (x, y)
            direction: Slot under the pointer, None when there is none
            use_tile_mode: Paint the whole tile instead of a single slot
            fill: Constraint grid to paint into, the live one if None
        """
        self.set_color(color)

        if use_tile_mode:
            self.paint_block(color, pos, fill=fill)
        elif direction is not None:
            self.paint(color, pos, direction, fill=fill)

    def set_terrain_line(self, color: int, start: Point, end: Point,
                         direction: Optional[int], use_tile_mode: bool = False,
                         fill: Optional[FillRegion] = None) -> None:
        """
        Paint every tile on the line from start to end, so a fast drag
        leaves no gaps.
        """
        for pos in self.line_points(start[0], start[1], end[0], end[1]):
            self.set_terrain(color, pos, direction, use_tile_mode, fill)

    def set_index_terrain(self, color: int, pos: Point, index: int,
                          fill: Optional[FillRegion] = None) -> None:
        """
        Paint exactly one slot, bypassing brush mode normalization.

        The slot kind alone decides whether it is propagated as a corner or
        as an edge.
        """
        target = self._fill if fill is None else fill
        mode = specialize(BrushMode.PAINT_EDGE_AND_CORNER, index)
        self._paint_slot(target, color, pos, index, mode)

    def paint(self, color: int, pos: Point, direction: int,
              fill: Optional[FillRegion] = None) -> None:
        """
        Paint a single edge or corner and the matching slots of the tiles
        sharing it.

        Args:
            color: Color to paint
            pos: Tile coordinate (x, y)
            direction: Slot under the pointer (WangIndex)
            fill: Constraint grid to paint into, the live one if None
        """
        if self._brush_mode == BrushMode.IDLE:
            return

        target = self._fill if fill is None else fill
        direction = self.desired_direction(direction)
        mode = specialize(self._brush_mode, direction)
        self._paint_slot(target, color, pos, direction, mode)

    def _paint_slot(self, fill: FillRegion, color: int, pos: Point,
                    index: int, mode: BrushMode) -> None:
        fill.constrain(pos, index, color)

        if mode == BrushMode.PAINT_CORNER:
            # A vertex is shared by 4 tiles
            for p, corner in self._geometry.vertex_neighbors(pos, index):
                fill.constrain(p, corner, color)

        elif mode == BrushMode.PAINT_EDGE:
            # An edge is shared by 2 tiles
            p = self._geometry.neighbor(pos, index)
            fill.constrain(p, WangId.opposite_index(index), color)

    def paint_block(self, color: int, pos: Point,
                    fill: Optional[FillRegion] = None) -> None:
        """
        Paint every slot of the current brush mode on one tile.

        Neighbors get the opposite slot of each painted slot. When corners
        are painted, edge neighbors also get the two corners they share with
        the tile.

        Args:
            color: Color to paint
            pos: Tile coordinate (x, y)
            fill: Constraint grid to paint into, the live one if None
        """
        mode = self._brush_mode
        if mode == BrushMode.IDLE:
            return

        target = self._fill if fill is None else fill
        paint_corners = mode in (BrushMode.PAINT_CORNER, BrushMode.PAINT_EDGE_AND_CORNER)
        paint_edges = mode in (BrushMode.PAINT_EDGE, BrushMode.PAINT_EDGE_AND_CORNER)

        for i in range(NUM_INDEXES):
            paint_slot = paint_corners if WangId.is_corner(i) else paint_edges
            if paint_slot:
                target.constrain(pos, i, color)

        for i, p in enumerate(self._geometry.neighbors(pos)):
            is_corner = WangId.is_corner(i)
            if is_corner and not paint_corners:
                continue

            target.touch(p)

            # Opposite side or corner of the adjacent tile
            if is_corner or paint_edges:
                target.constrain(p, WangId.opposite_index(i), color)

            # Corners the edge neighbor shares with this tile
            if not is_corner and paint_corners:
                target.constrain(p, (i + 3) % NUM_INDEXES, color)
                target.constrain(p, (i + 5) % NUM_INDEXES, color)

    @staticmethod
    def line_points(x0: int, y0: int, x1: int, y1: int) -> List[Point]:
        """
        Bresenham's line algorithm for coordinate interpolation.

        Args:
            x0: Starting X coordinate
            y0: Starting Y coordinate
            x1: Ending X coordinate
            y1: Ending Y coordinate

        Returns:
            List of (x, y) tuples representing all tiles along the line
        """
        points = []

        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1

        if dx > dy:
            # More horizontal than vertical
            err = dx / 2.0
            y = y0
            for x in range(x0, x1 + sx, sx):
                points.append((x, y))
                err -= dy
                if err < 0:
                    y += sy
                    err += dx
        else:
            # More vertical than horizontal
            err = dy / 2.0
            x = x0
            for y in range(y0, y1 + sy, sy):
                points.append((x, y))
                err -= dx
                if err < 0:
                    x += sx
                    err += dy

        return points

    # =========================================================================
    # COMMIT
    # =========================================================================

    def clear(self) -> None:
        """Throw away the constraints of the current gesture"""
        self._fill = FillRegion()

    def commit(self, tile_layer: TileLayer) -> int:
        """
        Resolve the current constraints and write the tiles to a layer.

        The resolved tiles go to a temporary stamp first, which is cropped to
        the cells that actually received a tile and then copied into the
        layer in one go. The constraint grid is cleared afterwards.

        Args:
            tile_layer: Layer receiving the tiles

        Returns:
            Number of cells written
        """
        if self._wang_set is None or self._fill.is_empty():
            log_painter("Nothing to commit")
            return 0

        stamp = TileLayer("stamp")
        filler = WangFiller(self._wang_set, self._geometry, self._rng)
        filler.set_corrections_enabled(setting('CorrectionsEnabled', True))
        filler.fill_region(stamp, tile_layer, self._fill.region, self._fill)

        brush_rect = bounding_rect(stamp.region(lambda cell: cell.checked))

        count = 0
        if brush_rect.isValid():
            stamp.set_position((brush_rect.x(), brush_rect.y()))
            stamp.resize((brush_rect.width(), brush_rect.height()),
                         (-brush_rect.x(), -brush_rect.y()))

            for j in range(stamp.height):
                for i in range(stamp.width):
                    cell = stamp.cell_at(i, j)
                    if cell.is_empty:
                        continue
                    tile_layer.set_cell(stamp.x + i, stamp.y + j, cell)
                    count += 1

        self.clear()

        log_painter(f"Committed {count} cell(s) to {tile_layer.name or 'layer'}")
        self.committed.emit(count)
        return count
