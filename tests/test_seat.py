"""Tests for seat.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from simplejong.core.seat import Seat, SEATS, NUM_SEATS


class TestSeat:
    def test_rotation(self):
        assert Seat.HUMAN.next == Seat.AUTO1
        assert Seat.AUTO1.next == Seat.AUTO2
        assert Seat.AUTO2.next == Seat.AUTO3
        assert Seat.AUTO3.next == Seat.HUMAN

    def test_full_cycle(self):
        seat = Seat.AUTO2
        for _ in range(NUM_SEATS):
            seat = seat.next
        assert seat == Seat.AUTO2

    def test_turn_order(self):
        assert SEATS == (Seat.HUMAN, Seat.AUTO1, Seat.AUTO2, Seat.AUTO3)

    def test_labels(self):
        assert [s.label for s in SEATS] == ["Human", "Auto1", "Auto2", "Auto3"]

    def test_is_human(self):
        assert Seat.HUMAN.is_human
        assert not any(s.is_human for s in SEATS[1:])

    def test_indexes_seat_arrays(self):
        flags = [False, False, True, False]
        assert flags[Seat.AUTO2]
