"""Read-only round snapshot - the value handed back after every action."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from simplejong.core.seat import Seat, SEATS
from simplejong.core.tile import Tile
from simplejong.engine.action import GamePhase, WinType, EndReason


@dataclass(frozen=True)
class RoundSnapshot:
    """Copy of the round state at one moment.

    Per-seat tuples are indexed by ``Seat``. Nothing here aliases the live
    state, so a snapshot never changes after it is taken.
    """
    hands: Tuple[Tuple[Tile, ...], ...]
    drawn_tile: Tuple[Optional[Tile], ...]
    discards: Tuple[Tuple[Tile, ...], ...]
    wall_remaining: int
    current_seat: Seat
    phase: GamePhase
    can_tsumo: Tuple[bool, ...]
    can_ron: Tuple[bool, ...]
    last_discarder: Optional[Seat]
    winner: Optional[Seat] = None
    win_type: Optional[WinType] = None
    end_reason: Optional[EndReason] = None

    @classmethod
    def from_state(cls, rs) -> 'RoundSnapshot':
        return cls(
            hands=tuple(tuple(rs.hands[s].closed_tiles) for s in SEATS),
            drawn_tile=tuple(rs.hands[s].draw_tile for s in SEATS),
            discards=tuple(tuple(rs.hands[s].discard_pool) for s in SEATS),
            wall_remaining=rs.wall_remaining,
            current_seat=rs.current_seat,
            phase=rs.phase,
            can_tsumo=tuple(rs.can_tsumo),
            can_ron=tuple(rs.can_ron),
            last_discarder=rs.last_discarder,
            winner=rs.winner,
            win_type=rs.win_type,
            end_reason=rs.end_reason,
        )

    @property
    def tile_total(self) -> int:
        """Hands + drawn tiles + discards + wall; always 136."""
        return (sum(len(h) for h in self.hands)
                + sum(1 for t in self.drawn_tile if t is not None)
                + sum(len(d) for d in self.discards)
                + self.wall_remaining)

    def available_tiles(self, seat: Seat) -> List[Tile]:
        """The seat's hand followed by its drawn tile, as displayed."""
        tiles = list(self.hands[seat])
        if self.drawn_tile[seat] is not None:
            tiles.append(self.drawn_tile[seat])
        return tiles

    def to_dict(self) -> Dict[str, Any]:
        """Plain structured data: tile ids, fixed four-slot lists, string tags."""
        return {
            "hands": [[t.id for t in h] for h in self.hands],
            "drawn_tile": [t.id if t is not None else None for t in self.drawn_tile],
            "discards": [[t.id for t in d] for d in self.discards],
            "wall_remaining": self.wall_remaining,
            "current_seat": self.current_seat.label,
            "phase": self.phase.value,
            "can_tsumo": list(self.can_tsumo),
            "can_ron": list(self.can_ron),
            "last_discarder": self.last_discarder.label if self.last_discarder is not None else None,
            "winner": self.winner.label if self.winner is not None else None,
            "win_type": self.win_type.value if self.win_type is not None else None,
            "end_reason": self.end_reason.value if self.end_reason is not None else None,
        }
