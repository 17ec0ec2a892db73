"""
Wang filler - Picks tiles that satisfy the painted constraints

A best-effort resolver: every cell of the region gets the tile that breaks
the fewest constraints. Painted slots weigh much more than agreement with
neighboring tiles. Cells for which the Wang set has no tile at all are
left empty.
"""
from typing import Dict, Iterable, List, Optional, Set, Tuple
from dataclasses import dataclass, field
import random

from .wangid import WangId, INDEX_MASK, NUM_INDEXES
from .wangset import WangSet
from .geometry import NeighborGeometry
from .constraints import FillRegion
from .layer import Cell, TileLayer
from .random_picker import RandomPicker
from .logging import log_filler


Point = Tuple[int, int]

# Penalty for a tile slot that disagrees with a painted slot
HARD_PENALTY = 100

# Penalty for a tile slot that disagrees with a neighboring tile
SOFT_PENALTY = 1


@dataclass
class FillResult:
    """Outcome of WangFiller.fill_region()"""
    filled: Set[Point] = field(default_factory=set)  # Region cells that received a tile
    unresolved: Set[Point] = field(default_factory=set)  # Region cells left empty
    corrected: Set[Point] = field(default_factory=set)  # Existing tiles replaced around the region

    @property
    def count(self) -> int:
        return len(self.filled) + len(self.corrected)


class WangFiller:
    """
    Resolves a constraint grid into tiles of a Wang set.

    With corrections enabled, tiles already in the layer right next to the
    region are replaced when a better matching tile exists for them.
    """

    def __init__(self, wang_set: WangSet, geometry: NeighborGeometry,
                 rng: Optional[random.Random] = None):
        self.wang_set = wang_set
        self.geometry = geometry
        self.corrections_enabled = False
        self._rng = rng or random.Random()

    def set_corrections_enabled(self, enabled: bool) -> None:
        self.corrections_enabled = enabled

    def fill_region(self, stamp: TileLayer, layer: TileLayer,
                    region: Iterable[Point], fill: FillRegion) -> FillResult:
        """
        Fill a region of the stamp with tiles matching the constraints.

        Args:
            stamp: Layer receiving the chosen tiles (layer coordinates)
            layer: Layer the stamp will be applied to, used for context
            region: Positions to fill
            fill: Constraint grid

        Returns:
            FillResult describing which cells got a tile
        """
        region = set(region)
        resolved: Dict[Point, int] = {}
        result = FillResult()

        for pos in sorted(region, key=lambda p: (p[1], p[0])):
            info = fill.get(pos)
            soft_desired, soft_mask = self._neighbor_constraints(
                pos, lambda p: self._wang_id_at(p, resolved, layer, region))

            tile_id = self._pick(info.desired, info.mask, soft_desired, soft_mask)
            if tile_id is None:
                result.unresolved.add(pos)
                continue

            resolved[pos] = tile_id
            stamp.set_cell(pos[0], pos[1], Cell(tile_id, checked=True))
            result.filled.add(pos)

        if result.unresolved:
            log_filler(f"No tile found for {len(result.unresolved)} cell(s)")

        if self.corrections_enabled and resolved:
            result.corrected = self._correct_neighbors(stamp, layer, region, resolved)
            if result.corrected:
                log_filler(f"Corrected {len(result.corrected)} neighboring tile(s)")

        return result

    # =========================================================================
    # CONSTRAINTS
    # =========================================================================

    def _wang_id_at(self, pos: Point, resolved: Dict[Point, int],
                    layer: TileLayer, region: Set[Point]) -> Optional[WangId]:
        """WangId of the tile at pos, preferring freshly resolved tiles"""
        if pos in resolved:
            return self.wang_set.wang_id_of(resolved[pos])
        if pos in region:
            # Will be overwritten, not resolved yet
            return None
        cell = layer.cell_at(pos[0], pos[1])
        if cell.is_empty or not self.wang_set.has_tile(cell.tile_id):
            return None
        return self.wang_set.wang_id_of(cell.tile_id)

    def _neighbor_constraints(self, pos: Point, wang_id_at) -> Tuple[WangId, WangId]:
        """
        Collect the colors the neighbors of a cell expect from it.

        Each neighbor contributes the color of the slot facing this cell.
        Edge neighbors also share two corners with this cell.

        Args:
            pos: Cell position
            wang_id_at: Callable returning the WangId at a position, or None

        Returns:
            Tuple of (desired, mask)
        """
        desired = WangId()
        mask = WangId()

        def expect(index, color):
            if color and not mask.is_index_set(index):
                desired.set_index_color(index, color)
                mask.set_index_color(index, INDEX_MASK)

        for i in range(NUM_INDEXES):
            neighbor_id = wang_id_at(self.geometry.neighbor(pos, i))
            if neighbor_id is None:
                continue

            expect(i, neighbor_id.index_color(WangId.opposite_index(i)))

            if not WangId.is_corner(i):
                expect((i + 1) % NUM_INDEXES, neighbor_id.index_color((i + 3) % NUM_INDEXES))
                expect((i + 7) % NUM_INDEXES, neighbor_id.index_color((i + 5) % NUM_INDEXES))

        return desired, mask

    @staticmethod
    def _score(wang_id: WangId, desired: WangId, mask: WangId,
               soft_desired: WangId, soft_mask: WangId) -> int:
        score = 0
        for i in range(NUM_INDEXES):
            color = wang_id.index_color(i)
            if mask.is_index_set(i):
                if color != desired.index_color(i):
                    score += HARD_PENALTY
            elif soft_mask.is_index_set(i):
                if color != soft_desired.index_color(i):
                    score += SOFT_PENALTY
        return score

    def _pick(self, desired: WangId, mask: WangId,
              soft_desired: WangId, soft_mask: WangId) -> Optional[int]:
        """
        Pick the best matching tile.

        Returns:
            Tile ID, or None if the Wang set has no tiles
        """
        best_score = None
        best: List[int] = []

        for tile_id, wang_id in self.wang_set.wang_ids():
            score = self._score(wang_id, desired, mask, soft_desired, soft_mask)
            if best_score is None or score < best_score:
                best_score = score
                best = [tile_id]
            elif score == best_score:
                best.append(tile_id)

        if not best:
            return None

        picker = RandomPicker(self._rng)
        for tile_id in best:
            picker.add(tile_id, self.wang_set.tile_probability(tile_id))

        if picker.is_empty():
            return best[0]
        return picker.pick()

    # =========================================================================
    # CORRECTIONS
    # =========================================================================

    def _correct_neighbors(self, stamp: TileLayer, layer: TileLayer,
                           region: Set[Point], resolved: Dict[Point, int]) -> Set[Point]:
        """
        Replace existing tiles around the region that no longer fit.

        Slots shared with freshly placed tiles are hard constraints for the
        replacement, slots shared with untouched tiles are soft ones.

        Returns:
            Positions of the replaced tiles
        """
        candidates = set()
        for pos in resolved:
            for neighbor in self.geometry.neighbors(pos):
                if neighbor in region:
                    continue
                cell = layer.cell_at(neighbor[0], neighbor[1])
                if not cell.is_empty and self.wang_set.has_tile(cell.tile_id):
                    candidates.add(neighbor)

        placed = dict(resolved)
        corrected = set()

        def placed_wang_id(p):
            if p in placed:
                return self.wang_set.wang_id_of(placed[p])
            return None

        def existing_wang_id(p):
            if p in placed or p in region:
                return None
            cell = layer.cell_at(p[0], p[1])
            if cell.is_empty or not self.wang_set.has_tile(cell.tile_id):
                return None
            return self.wang_set.wang_id_of(cell.tile_id)

        for pos in sorted(candidates, key=lambda p: (p[1], p[0])):
            current = layer.cell_at(pos[0], pos[1]).tile_id
            desired, mask = self._neighbor_constraints(pos, placed_wang_id)
            soft_desired, soft_mask = self._neighbor_constraints(pos, existing_wang_id)

            current_score = self._score(self.wang_set.wang_id_of(current),
                                        desired, mask, soft_desired, soft_mask)
            if current_score < HARD_PENALTY:
                continue

            tile_id = self._pick(desired, mask, soft_desired, soft_mask)
            if tile_id is None:
                continue

            new_score = self._score(self.wang_set.wang_id_of(tile_id),
                                    desired, mask, soft_desired, soft_mask)
            if new_score < current_score:
                placed[pos] = tile_id
                stamp.set_cell(pos[0], pos[1], Cell(tile_id, checked=True))
                corrected.add(pos)

        return corrected
