"""Recoverable failures reported by engine actions.

Every error is raised before any state is touched, so a failed action leaves
the round exactly as it was.
"""


class ActionError(ValueError):
    """An action that was rejected by the turn engine."""


class TurnViolation(ActionError):
    """A seat acted while it was not that seat's turn."""

    def __init__(self, seat, current_seat):
        # seat is None when an automated step was requested on the human's turn
        self.seat = seat
        self.current_seat = current_seat
        actor = seat.label if seat is not None else "automated step"
        super().__init__(
            f"not this seat's turn: {actor} acted, "
            f"{current_seat.label} is expected")


class PhaseViolation(ActionError):
    """The action is not valid in the current phase."""

    def __init__(self, action, phase, reason: str = ""):
        self.action = action
        self.phase = phase
        message = f"action not valid in current phase: {action.value} during {phase.value}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TileNotFound(ActionError):
    """The referenced tile is not among the actor's tiles."""

    def __init__(self, seat, tile_id: int):
        self.seat = seat
        self.tile_id = tile_id
        super().__init__(f"tile {tile_id} not found in {seat.label}'s hand")


class RoundOver(ActionError):
    """The round has ended; only starting a new round is accepted."""

    def __init__(self, action):
        self.action = action
        super().__init__(f"round is over: {action.value} rejected, start a new round")
