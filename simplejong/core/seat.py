"""Seats and their fixed turn rotation."""

from enum import IntEnum


class Seat(IntEnum):
    HUMAN = 0
    AUTO1 = 1
    AUTO2 = 2
    AUTO3 = 3

    @property
    def next(self) -> 'Seat':
        """The seat that plays after this one."""
        return _ROTATION[self]

    @property
    def label(self) -> str:
        """Tag used in serialized snapshots."""
        return _LABELS[self]

    @property
    def is_human(self) -> bool:
        return self is Seat.HUMAN


_ROTATION = {
    Seat.HUMAN: Seat.AUTO1,
    Seat.AUTO1: Seat.AUTO2,
    Seat.AUTO2: Seat.AUTO3,
    Seat.AUTO3: Seat.HUMAN,
}

_LABELS = {
    Seat.HUMAN: "Human",
    Seat.AUTO1: "Auto1",
    Seat.AUTO2: "Auto2",
    Seat.AUTO3: "Auto3",
}

# Turn order starting from the dealer
SEATS = (Seat.HUMAN, Seat.AUTO1, Seat.AUTO2, Seat.AUTO3)
NUM_SEATS = len(SEATS)
