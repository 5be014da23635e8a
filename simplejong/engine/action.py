"""Action and phase definitions for the turn engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from simplejong.core.seat import Seat


class GamePhase(Enum):
    DRAW = "Draw"
    DISCARD = "Discard"
    RON = "Ron"        # A seat may claim the last discard
    END = "End"


class ActionType(Enum):
    START = "start"
    DRAW = "draw"
    DISCARD = "discard"
    TSUMO = "tsumo"
    RON = "ron"
    PASS = "pass"
    AUTO_STEP = "auto_step"


class WinType(Enum):
    TSUMO = "tsumo"
    RON = "ron"


class EndReason(Enum):
    TSUMO = "tsumo"
    RON = "ron"
    EXHAUSTIVE = "exhaustive"  # 荒牌流局


# Phase in which each seat-specific action is accepted
ACTION_PHASES = {
    ActionType.DRAW: GamePhase.DRAW,
    ActionType.DISCARD: GamePhase.DISCARD,
    ActionType.TSUMO: GamePhase.DISCARD,
    ActionType.RON: GamePhase.RON,
    ActionType.PASS: GamePhase.RON,
}


@dataclass(frozen=True)
class Action:
    """A request against the engine."""
    action_type: ActionType
    seat: Seat = Seat.HUMAN
    tile_id: Optional[int] = None  # Only for discards

    def __repr__(self):
        parts = [self.action_type.value]
        if self.tile_id is not None:
            parts.append(f"tile={self.tile_id}")
        return f"Action({', '.join(parts)}, {self.seat.label})"
