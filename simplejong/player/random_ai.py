"""Random AI player - legal moves only, no strategy."""

import random
from typing import List, Optional

from simplejong.core.tile import Tile
from simplejong.player.base import Player


class RandomAI(Player):
    """Discards uniformly at random among the tiles it holds."""

    def __init__(self, name: str, rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def choose_discard(self, available: List[Tile]) -> Tile:
        if not available:
            raise ValueError(f"{self.name} has no tile to discard")
        return self.rng.choice(available)
