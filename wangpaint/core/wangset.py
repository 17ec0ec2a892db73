"""
WangSet - Colors and the mapping from tile IDs to WangIds
"""
from typing import Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum

from .wangid import WangId, NUM_INDEXES, MAX_COLOR


class WangSetType(Enum):
    """Which slots the tiles of a Wang set carry colors on"""
    CORNER = "corner"  # Only corners are labeled
    EDGE = "edge"      # Only edges are labeled
    MIXED = "mixed"    # Both edges and corners are labeled


@dataclass
class WangColor:
    """A named color of a Wang set"""
    name: str
    probability: float = 1.0


class WangSet:
    """
    A Wang set: a list of colors and the WangId of every tile in it.

    Colors are numbered from 1; color 0 means "no color". The painter only
    reads from a WangSet, tiles are assigned by whoever builds the set.
    """

    def __init__(self, name: str, wang_set_type: WangSetType,
                 colors: Optional[List[WangColor]] = None):
        """
        Initialize a WangSet.

        Args:
            name: Wang set name (e.g., "Grass and Water")
            wang_set_type: CORNER, EDGE or MIXED
            colors: Colors of the set, color 1 first
        """
        self.name = name
        self.type = wang_set_type
        self.colors: List[WangColor] = list(colors or [])
        assert len(self.colors) <= MAX_COLOR

        self._wang_id_by_tile_id: Dict[int, WangId] = {}
        self._tile_probability: Dict[int, float] = {}

    @property
    def color_count(self) -> int:
        return len(self.colors)

    def color_probability(self, color: int) -> float:
        """
        Get the probability of a color.

        Args:
            color: Color number (1-based)

        Returns:
            The color's probability, or 0.0 for an unknown color
        """
        if 0 < color <= self.color_count:
            return self.colors[color - 1].probability
        return 0.0

    def set_wang_id(self, tile_id: int, wang_id: WangId, probability: float = 1.0) -> None:
        """
        Assign a WangId to a tile.

        Args:
            tile_id: Tile identifier
            wang_id: Slot colors of the tile
            probability: Relative chance of picking this tile among equals
        """
        for i in range(NUM_INDEXES):
            assert wang_id.index_color(i) <= self.color_count
        self._wang_id_by_tile_id[tile_id] = wang_id.copy()
        self._tile_probability[tile_id] = probability

    def wang_id_of(self, tile_id: Optional[int]) -> WangId:
        """
        Reverse lookup: Get the WangId of a tile.

        Args:
            tile_id: Tile identifier, or None for an empty cell

        Returns:
            The tile's WangId, or an empty WangId if the tile is not in the set
        """
        wang_id = self._wang_id_by_tile_id.get(tile_id)
        return wang_id.copy() if wang_id is not None else WangId()

    def has_tile(self, tile_id: Optional[int]) -> bool:
        return tile_id in self._wang_id_by_tile_id

    def tile_probability(self, tile_id: int) -> float:
        """Probability of a tile, scaled by the probability of the colors it uses"""
        probability = self._tile_probability.get(tile_id, 0.0)
        wang_id = self._wang_id_by_tile_id.get(tile_id)
        if wang_id is None:
            return 0.0
        for color in wang_id.colors():
            if color:
                probability *= self.color_probability(color)
        return probability

    def wang_ids(self) -> Iterator[Tuple[int, WangId]]:
        """Iterate over (tile_id, WangId) pairs"""
        for tile_id, wang_id in self._wang_id_by_tile_id.items():
            yield tile_id, wang_id

    def __len__(self) -> int:
        return len(self._wang_id_by_tile_id)

    def __repr__(self) -> str:
        return f"WangSet(name='{self.name}', type={self.type.name}, colors={self.color_count})"

    def __str__(self) -> str:
        return self.name
