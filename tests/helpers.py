"""
Helpers shared by the WangPaint tests.
"""

from wangpaint.core.wangid import WangId


def corner_wang_id(top_right: int, bottom_right: int, bottom_left: int, top_left: int) -> WangId:
    return WangId.from_colors([0, top_right, 0, bottom_right, 0, bottom_left, 0, top_left])


def edge_wang_id(top: int, right: int, bottom: int, left: int) -> WangId:
    return WangId.from_colors([top, 0, right, 0, bottom, 0, left, 0])
