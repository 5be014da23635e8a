"""Win (和了) detection - four melds plus one pair.

Only answers whether a hand is complete; which decomposition proves it is
never reported.
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

from simplejong.core.tile import Tile, NUM_KINDS, SUIT_STARTS, tiles_to_34_array

WINNING_HAND_SIZE = 14
WAITING_HAND_SIZE = 13
MELDS_IN_HAND = 4


def is_complete(hand: Sequence[Tile]) -> bool:
    """Check whether exactly 14 tiles form four melds and one pair."""
    if len(hand) != WINNING_HAND_SIZE:
        return False

    counts = tiles_to_34_array(hand)

    # Try each possible pair (head)
    for head in range(NUM_KINDS):
        if counts[head] < 2:
            continue
        remaining = list(counts)
        remaining[head] -= 2
        if decomposes_into_melds(remaining, MELDS_IN_HAND):
            return True
    return False


def decomposes_into_melds(counts: Sequence[int], n: int) -> bool:
    """Check whether the 34-array splits into exactly ``n`` melds."""
    return _decomposes(tuple(counts), n)


@lru_cache(maxsize=65536)
def _decomposes(counts: Tuple[int, ...], n: int) -> bool:
    if n == 0:
        return all(c == 0 for c in counts)

    # Triplets (刻子) of any kind
    for idx in range(NUM_KINDS):
        if counts[idx] >= 3:
            tiles = list(counts)
            tiles[idx] -= 3
            if _decomposes(tuple(tiles), n - 1):
                return True

    # Sequences (顺子) - number tiles only, start rank 1..7
    for suit_start in SUIT_STARTS:
        for idx in range(suit_start, suit_start + 7):
            if counts[idx] >= 1 and counts[idx + 1] >= 1 and counts[idx + 2] >= 1:
                tiles = list(counts)
                tiles[idx] -= 1
                tiles[idx + 1] -= 1
                tiles[idx + 2] -= 1
                if _decomposes(tuple(tiles), n - 1):
                    return True

    return False


def can_complete_with(hand13: Sequence[Tile], extra_tile: Tile) -> bool:
    """Whether a 13-tile hand plus one more tile is complete.

    Used both for claiming a discard (ron) and, with a seat's own drawn
    tile, for self-draw (tsumo).
    """
    if len(hand13) != WAITING_HAND_SIZE:
        return False
    return is_complete(list(hand13) + [extra_tile])


def waiting_tiles(hand13: Sequence[Tile]) -> List[int]:
    """Find all tile kinds that would complete a 13-tile hand."""
    if len(hand13) != WAITING_HAND_SIZE:
        return []

    counts = tiles_to_34_array(hand13)
    waits = []
    for i in range(NUM_KINDS):
        if counts[i] >= 4:
            continue
        test = list(hand13) + [Tile(i)]
        if is_complete(test):
            waits.append(i)
    return waits
