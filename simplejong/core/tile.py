"""Tile definition (34 kinds, one identifier per kind)."""

from enum import IntEnum
from typing import Iterable, List, Optional


class TileSuit(IntEnum):
    MAN = 0    # 萬子
    PIN = 1    # 筒子
    SOU = 2    # 索子
    HONOR = 3  # 字牌


class HonorKind(IntEnum):
    EAST = 27   # 東
    SOUTH = 28  # 南
    WEST = 29   # 西
    NORTH = 30  # 北
    WHITE = 31  # 白
    GREEN = 32  # 發
    RED = 33    # 中


NUM_KINDS = 34
COPIES_PER_KIND = 4

# First identifier of each suit; honors start at 27
SUIT_STARTS = (0, 9, 18)
HONOR_START = 27

TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "東", "南", "西", "北", "白", "發", "中",
]

_HONOR_CHARS = {name: HONOR_START + i for i, name in enumerate(TILE_NAMES_34[HONOR_START:])}


class Tile:
    """Immutable tile identified only by its kind (0-33)."""
    __slots__ = ('_id', '_suit', '_rank')

    def __init__(self, tile_id: int):
        if not (0 <= tile_id < NUM_KINDS):
            raise ValueError(f"tile_id must be 0..33, got {tile_id}")
        self._id = tile_id
        if tile_id < HONOR_START:
            self._suit = TileSuit(tile_id // 9)
            self._rank = tile_id % 9 + 1
        else:
            self._suit = TileSuit.HONOR
            self._rank = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def rank(self) -> Optional[int]:
        """Rank 1-9 within the suit, None for honors."""
        return self._rank

    @property
    def honor(self) -> Optional[HonorKind]:
        if self._suit == TileSuit.HONOR:
            return HonorKind(self._id)
        return None

    @property
    def is_honor(self) -> bool:
        return self._suit == TileSuit.HONOR

    @property
    def name(self) -> str:
        return TILE_NAMES_34[self._id]

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._id == other._id
        return NotImplemented

    def __hash__(self):
        return self._id

    def __lt__(self, other):
        if isinstance(other, Tile):
            return self._id < other._id
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Tile):
            return self._id <= other._id
        return NotImplemented


# One shared instance per kind
ALL_TILES_34 = [Tile(i) for i in range(NUM_KINDS)]


def tile_34_to_name(index34: int) -> str:
    return TILE_NAMES_34[index34]


def tiles_to_34_array(tiles: Iterable[Tile]) -> List[int]:
    """Convert tiles to a 34-length count array."""
    arr = [0] * NUM_KINDS
    for t in tiles:
        arr[t.id] += 1
    return arr


def sort_tiles(tiles: List[Tile]) -> List[Tile]:
    """Canonical display order: man, pin, sou, then honors."""
    return sorted(tiles)


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse a shorthand string like '123m456p789s東南' into tiles."""
    tiles = []
    numbers = []
    for ch in s:
        if ch.isdigit():
            numbers.append(int(ch))
        elif ch in ('m', 'p', 's'):
            suit_offset = {'m': 0, 'p': 9, 's': 18}[ch]
            for n in numbers:
                if not 1 <= n <= 9:
                    raise ValueError(f"rank must be 1..9, got {n}")
                tiles.append(ALL_TILES_34[suit_offset + n - 1])
            numbers = []
        elif ch in _HONOR_CHARS:
            tiles.append(ALL_TILES_34[_HONOR_CHARS[ch]])
    return tiles
