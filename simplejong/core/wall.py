"""Wall (牌山) management."""

import random
from typing import List, Optional

from .tile import Tile, ALL_TILES_34, COPIES_PER_KIND, NUM_KINDS

TOTAL_TILES = NUM_KINDS * COPIES_PER_KIND  # 136


class Wall:
    """The shared pool of undrawn tiles, four copies of each kind.

    Tiles are drawn from the front of ``tiles``; there is no dead wall.
    """

    def __init__(self, shuffle: bool = True, rng: Optional[random.Random] = None):
        self._build_wall(shuffle, rng or random.Random())

    def _build_wall(self, shuffle: bool, rng: random.Random):
        """Build and shuffle the wall."""
        self.tiles: List[Tile] = [t for t in ALL_TILES_34
                                  for _ in range(COPIES_PER_KIND)]
        if shuffle:
            rng.shuffle(self.tiles)
        self.initial_order: List[Tile] = list(self.tiles)

    @classmethod
    def from_tiles(cls, tiles):
        """Build a Wall whose draw order is exactly ``tiles``."""
        wall = cls.__new__(cls)
        wall.tiles = list(tiles)
        wall.initial_order = list(tiles)
        return wall

    @property
    def remaining(self) -> int:
        """Number of drawable tiles left."""
        return len(self.tiles)

    @property
    def is_empty(self) -> bool:
        return len(self.tiles) == 0

    def draw(self) -> Optional[Tile]:
        """Draw a tile, or None once the wall is exhausted."""
        if self.tiles:
            return self.tiles.pop(0)
        return None
