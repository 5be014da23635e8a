"""Tests for hand.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from simplejong.core.tile import Tile, make_tiles_from_string
from simplejong.core.hand import Hand


def make_hand(s: str, draw: str = None) -> Hand:
    hand = Hand()
    for t in make_tiles_from_string(s):
        hand.deal(t)
    if draw:
        hand.draw(make_tiles_from_string(draw)[0])
    return hand


class TestHand:
    def test_deal_keeps_sorted(self):
        hand = make_hand("東1s1p1m")
        assert [t.id for t in hand.closed_tiles] == [0, 9, 18, 27]

    def test_draw_held_apart(self):
        hand = make_hand("123m", draw="1m")
        assert len(hand.closed_tiles) == 3
        assert hand.draw_tile == Tile(0)
        assert hand.total_tiles == 4

    def test_second_draw_rejected(self):
        hand = make_hand("123m", draw="1m")
        with pytest.raises(ValueError):
            hand.draw(Tile(5))

    def test_discard_drawn_tile(self):
        hand = make_hand("159m", draw="中")
        before = list(hand.closed_tiles)
        tile = hand.discard(33)
        assert tile == Tile(33)
        assert hand.closed_tiles == before
        assert hand.draw_tile is None
        assert hand.discard_pool == [Tile(33)]

    def test_discard_from_hand_merges_draw(self):
        hand = make_hand("159m", draw="3m")
        hand.discard(8)  # 9m
        assert [t.id for t in hand.closed_tiles] == [0, 2, 4]
        assert hand.draw_tile is None
        assert hand.discard_pool == [Tile(8)]

    def test_discard_prefers_drawn_copy(self):
        hand = make_hand("115m", draw="1m")
        hand.discard(0)
        assert hand.draw_tile is None
        assert [t.id for t in hand.closed_tiles] == [0, 0, 4]

    def test_discard_missing_tile(self):
        hand = make_hand("159m", draw="3m")
        with pytest.raises(LookupError):
            hand.discard(30)
        assert hand.draw_tile == Tile(2)
        assert len(hand.closed_tiles) == 3
        assert hand.discard_pool == []

    def test_holds(self):
        hand = make_hand("159m", draw="中")
        assert hand.holds(33)
        assert hand.holds(4)
        assert not hand.holds(1)

    def test_available_tiles(self):
        hand = make_hand("19m", draw="5m")
        assert [t.id for t in hand.available_tiles()] == [0, 4, 8]
        # Does not merge in place
        assert hand.draw_tile == Tile(4)

