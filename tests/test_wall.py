"""Tests for wall.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random

from simplejong.core.tile import tiles_to_34_array, Tile
from simplejong.core.wall import Wall, TOTAL_TILES


class TestWall:
    def test_full_wall(self):
        wall = Wall()
        assert TOTAL_TILES == 136
        assert wall.remaining == 136

    def test_four_copies_each(self):
        wall = Wall()
        assert tiles_to_34_array(wall.tiles) == [4] * 34

    def test_unshuffled_order(self):
        wall = Wall(shuffle=False)
        assert [t.id for t in wall.tiles[:5]] == [0, 0, 0, 0, 1]

    def test_seeded_shuffle_is_reproducible(self):
        a = Wall(rng=random.Random(7))
        b = Wall(rng=random.Random(7))
        assert a.tiles == b.tiles
        assert a.tiles != Wall(shuffle=False).tiles

    def test_draw(self):
        wall = Wall()
        first = wall.tiles[0]
        tile = wall.draw()
        assert tile == first
        assert wall.remaining == 135

    def test_draw_until_empty(self):
        wall = Wall()
        count = 0
        while not wall.is_empty:
            assert wall.draw() is not None
            count += 1
        assert count == 136
        assert wall.draw() is None

    def test_from_tiles(self):
        wall = Wall.from_tiles([Tile(3), Tile(1)])
        assert wall.remaining == 2
        assert wall.draw() == Tile(3)
        assert wall.initial_order == [Tile(3), Tile(1)]
