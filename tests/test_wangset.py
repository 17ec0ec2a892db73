"""
Tests for the WangSet and TileLayer collaborators.
"""

import pytest

from wangpaint.core.layer import Cell, TileLayer
from wangpaint.core.wangid import WangId
from wangpaint.core.wangset import WangColor, WangSet, WangSetType

from .helpers import corner_wang_id


class TestWangSet:
    """Tests for WangSet lookups."""

    def test_color_count(self, corner_set: WangSet) -> None:
        assert corner_set.color_count == 3
        assert len(corner_set) == 16

    def test_wang_id_lookup(self, corner_set: WangSet) -> None:
        tile_id, wang_id = next(iter(corner_set.wang_ids()))
        assert corner_set.wang_id_of(tile_id) == wang_id
        assert corner_set.has_tile(tile_id)

    def test_unknown_tile_has_empty_wang_id(self, corner_set: WangSet) -> None:
        assert corner_set.wang_id_of(12345).is_empty()
        assert corner_set.wang_id_of(None).is_empty()
        assert not corner_set.has_tile(None)

    def test_lookup_returns_copy(self, corner_set: WangSet) -> None:
        wang_id = corner_set.wang_id_of(0)
        wang_id.set_index_color(1, 3)
        assert corner_set.wang_id_of(0) != wang_id

    def test_color_above_count_is_asserted(self) -> None:
        wang_set = WangSet("Small", WangSetType.CORNER, [WangColor("A")])
        with pytest.raises(AssertionError):
            wang_set.set_wang_id(0, corner_wang_id(2, 1, 1, 1))

    def test_tile_probability_uses_colors(self) -> None:
        wang_set = WangSet("Weighted", WangSetType.CORNER,
                           [WangColor("A", 1.0), WangColor("B", 0.5)])
        wang_set.set_wang_id(0, corner_wang_id(1, 1, 1, 1), probability=2.0)
        wang_set.set_wang_id(1, corner_wang_id(2, 1, 1, 1))
        assert wang_set.tile_probability(0) == pytest.approx(2.0)
        assert wang_set.tile_probability(1) == pytest.approx(0.5)
        assert wang_set.tile_probability(99) == 0.0
        assert wang_set.color_probability(0) == 0.0


class TestTileLayer:
    """Tests for the sparse tile layer."""

    def test_empty_cell_by_default(self) -> None:
        assert TileLayer().cell_at(4, 4).is_empty

    def test_set_and_clear_cell(self) -> None:
        layer = TileLayer("Ground")
        layer.set_cell(1, 2, Cell(7))
        assert layer.cell_at(1, 2).tile_id == 7
        layer.set_cell(1, 2, Cell())
        assert layer.is_empty()

    def test_region_with_predicate(self) -> None:
        layer = TileLayer()
        layer.set_cell(0, 0, Cell(1, checked=True))
        layer.set_cell(1, 0, Cell(2))
        assert layer.region(lambda cell: cell.checked) == {(0, 0)}

    def test_resize_shifts_and_crops(self) -> None:
        layer = TileLayer()
        layer.set_cell(4, 4, Cell(1))
        layer.set_cell(5, 5, Cell(2))
        layer.set_cell(9, 9, Cell(3))
        layer.resize((2, 2), (-4, -4))

        assert (layer.width, layer.height) == (2, 2)
        assert layer.cell_at(0, 0).tile_id == 1
        assert layer.cell_at(1, 1).tile_id == 2
        assert len(layer) == 2

    def test_position(self) -> None:
        layer = TileLayer("Stamp", 3, -2)
        assert layer.position() == (3, -2)
        layer.set_position((0, 1))
        assert (layer.x, layer.y) == (0, 1)

    def test_bounding_rect(self) -> None:
        layer = TileLayer()
        layer.set_cell(-1, 2, Cell(1))
        layer.set_cell(3, 0, Cell(1))
        rect = layer.bounding_rect()
        assert (rect.x(), rect.y(), rect.width(), rect.height()) == (-1, 0, 5, 3)

    def test_wang_id_is_hashable(self) -> None:
        assert len({WangId(1), WangId(1), WangId(2)}) == 2
