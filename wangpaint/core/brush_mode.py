"""
Brush modes - Whether a paint action affects corners, edges or both
"""
from typing import Optional
from enum import Enum, auto

from .wangid import WangId, WangIndex, NUM_INDEXES
from .wangset import WangSet, WangSetType


class BrushMode(Enum):
    """Brush mode enumeration"""
    IDLE = auto()                   # No Wang set selected
    PAINT_CORNER = auto()           # Paint corners only
    PAINT_EDGE = auto()             # Paint edges only
    PAINT_EDGE_AND_CORNER = auto()  # Paint whichever slot is under the pointer


# A hovered corner maps to the nearest edge when only edges can be painted
_CORNER_TO_EDGE = {
    WangIndex.BOTTOM_RIGHT: WangIndex.BOTTOM,
    WangIndex.BOTTOM_LEFT: WangIndex.LEFT,
    WangIndex.TOP_LEFT: WangIndex.TOP,
    WangIndex.TOP_RIGHT: WangIndex.RIGHT,
}


def color_usage(wang_set: WangSet, color: int):
    """
    Find out where a color is used in a Wang set.

    Args:
        wang_set: Wang set to scan
        color: Color number (1-based)

    Returns:
        Tuple of (used_as_corner, used_as_edge)
    """
    used_as_corner = False
    used_as_edge = False

    if 0 < color <= wang_set.color_count:
        for _tile_id, wang_id in wang_set.wang_ids():
            for i in range(NUM_INDEXES):
                if wang_id.index_color(i) == color:
                    if WangId.is_corner(i):
                        used_as_corner = True
                    else:
                        used_as_edge = True
            if used_as_corner and used_as_edge:
                break

    return used_as_corner, used_as_edge


def brush_mode_for(wang_set: Optional[WangSet], color: int) -> BrushMode:
    """
    Determine the brush mode for a Wang set and color.

    Corner and edge sets have a fixed mode. For mixed sets the mode depends
    on where the color appears in the set's tiles: only on edges gives
    PAINT_EDGE, only on corners PAINT_CORNER, both or neither
    PAINT_EDGE_AND_CORNER.

    Args:
        wang_set: Active Wang set, or None
        color: Active color

    Returns:
        BrushMode value
    """
    if wang_set is None:
        return BrushMode.IDLE

    if wang_set.type == WangSetType.CORNER:
        return BrushMode.PAINT_CORNER
    if wang_set.type == WangSetType.EDGE:
        return BrushMode.PAINT_EDGE

    used_as_corner, used_as_edge = color_usage(wang_set, color)

    if used_as_edge == used_as_corner:
        return BrushMode.PAINT_EDGE_AND_CORNER
    if used_as_edge:
        return BrushMode.PAINT_EDGE
    return BrushMode.PAINT_CORNER


def desired_direction(mode: BrushMode, initial_direction: int) -> int:
    """
    Turn the slot under the pointer into the slot that actually gets painted.

    A pointer position is ambiguous between an edge and its two corners.
    Corner painting always targets the top-left vertex of the hovered tile,
    edge painting snaps corners to an edge.

    Args:
        mode: Current brush mode
        initial_direction: Slot index under the pointer

    Returns:
        Slot index to paint (WangIndex)
    """
    if mode == BrushMode.PAINT_CORNER:
        return WangIndex.TOP_LEFT

    if mode == BrushMode.PAINT_EDGE:
        return _CORNER_TO_EDGE.get(initial_direction, WangIndex(initial_direction))

    if mode == BrushMode.PAINT_EDGE_AND_CORNER:
        if WangId.is_corner(initial_direction):
            return WangIndex.TOP_LEFT

    return WangIndex(initial_direction)


def specialize(mode: BrushMode, direction: int) -> BrushMode:
    """
    Resolve PAINT_EDGE_AND_CORNER for a single slot.

    Args:
        mode: Current brush mode
        direction: Slot being painted

    Returns:
        PAINT_CORNER or PAINT_EDGE for mixed painting, mode unchanged otherwise
    """
    if mode == BrushMode.PAINT_EDGE_AND_CORNER:
        return BrushMode.PAINT_CORNER if WangId.is_corner(direction) else BrushMode.PAINT_EDGE
    return mode
