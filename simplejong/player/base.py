"""Abstract interface for automated seats."""

from abc import ABC, abstractmethod
from typing import List

from simplejong.core.tile import Tile


class Player(ABC):
    """Decision maker for one automated seat."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_discard(self, available: List[Tile]) -> Tile:
        """Choose a tile to discard from the seat's tiles (drawn tile merged in)."""
        ...
