"""Per-seat tile holdings - sorted concealed tiles, drawn tile, discard pool."""

import bisect
from typing import List, Optional

from .tile import Tile


class Hand:
    """Manages one seat's tiles during a round.

    Attributes:
        closed_tiles: Concealed tiles, always in canonical order
        draw_tile: The tile just drawn, kept apart from the sorted tiles
        discard_pool: Tiles discarded (in order)
    """

    def __init__(self):
        self.closed_tiles: List[Tile] = []
        self.draw_tile: Optional[Tile] = None
        self.discard_pool: List[Tile] = []

    def deal(self, tile: Tile):
        """Add a dealt tile, keeping concealed tiles sorted."""
        bisect.insort(self.closed_tiles, tile)

    def draw(self, tile: Tile):
        """Hold a freshly drawn tile apart from the sorted hand."""
        if self.draw_tile is not None:
            raise ValueError("hand already holds a drawn tile")
        self.draw_tile = tile

    def holds(self, tile_id: int) -> bool:
        """Whether the tile is the drawn tile or one of the concealed tiles."""
        if self.draw_tile is not None and self.draw_tile.id == tile_id:
            return True
        return any(t.id == tile_id for t in self.closed_tiles)

    def merge_draw(self):
        """Insert the drawn tile into sorted position."""
        if self.draw_tile is not None:
            bisect.insort(self.closed_tiles, self.draw_tile)
            self.draw_tile = None

    def discard(self, tile_id: int) -> Tile:
        """Discard a tile by identifier.

        Discarding the drawn tile leaves the sorted tiles untouched; any other
        choice merges the drawn tile first. Raises LookupError if the tile is
        not held, without changing the hand.
        """
        if self.draw_tile is not None and self.draw_tile.id == tile_id:
            tile = self.draw_tile
            self.draw_tile = None
        else:
            idx = next((i for i, t in enumerate(self.closed_tiles)
                        if t.id == tile_id), None)
            if idx is None:
                raise LookupError(f"tile {tile_id} not in hand")
            tile = self.closed_tiles.pop(idx)
            self.merge_draw()
        self.discard_pool.append(tile)
        return tile

    def available_tiles(self) -> List[Tile]:
        """Every tile that could be discarded, drawn tile merged in order."""
        tiles = list(self.closed_tiles)
        if self.draw_tile is not None:
            bisect.insort(tiles, self.draw_tile)
        return tiles

    @property
    def total_tiles(self) -> int:
        """Concealed tiles plus the drawn tile."""
        return len(self.closed_tiles) + (1 if self.draw_tile is not None else 0)

