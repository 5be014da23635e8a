"""Single round (局) flow control - the turn engine.

The engine owns the wall and the round state. Callers drive it one action at
a time; each action is validated completely before anything is mutated, so a
rejected action leaves the round untouched.
"""

import random
from typing import Dict, List, Optional, Set

from simplejong.core.hand import Hand
from simplejong.core.seat import Seat, SEATS, NUM_SEATS
from simplejong.core.tile import Tile
from simplejong.core.wall import Wall, TOTAL_TILES
from simplejong.engine.action import (
    Action, ActionType, GamePhase, WinType, EndReason, ACTION_PHASES,
)
from simplejong.engine.config import RoundConfig
from simplejong.engine.errors import (
    TurnViolation, PhaseViolation, TileNotFound, RoundOver,
)
from simplejong.engine.event import EventBus, EventType, GameEvent
from simplejong.engine.snapshot import RoundSnapshot
from simplejong.player.base import Player
from simplejong.player.random_ai import RandomAI
from simplejong.rules.agari import can_complete_with

HAND_SIZE = 13


class RoundState:
    """Mutable state for a single round.

    Per-seat data lives in ``hands``, indexed by ``Seat``. ``can_tsumo`` and
    ``can_ron`` are only ever written by ``RoundEngine._refresh_eligibility``.
    """

    def __init__(self, wall: Wall):
        self.wall = wall
        self.hands: List[Hand] = [Hand() for _ in range(NUM_SEATS)]
        self.current_seat = Seat.HUMAN
        self.phase = GamePhase.END
        self.can_tsumo: List[bool] = [False] * NUM_SEATS
        self.can_ron: List[bool] = [False] * NUM_SEATS
        self.last_discarder: Optional[Seat] = None

        # The discard that may still be claimed, cleared by the next draw
        self.live_discard: Optional[Tile] = None
        self.passed: Set[Seat] = set()

        # Result
        self.winner: Optional[Seat] = None
        self.win_type: Optional[WinType] = None
        self.end_reason: Optional[EndReason] = None

    @property
    def wall_remaining(self) -> int:
        return self.wall.remaining

    def tile_count(self) -> int:
        """Tiles accounted for across hands, drawn tiles, discards and wall."""
        held = sum(h.total_tiles + len(h.discard_pool) for h in self.hands)
        return held + self.wall.remaining


class RoundEngine:
    """Turn engine for one round: draw, discard, claim, pass, automated step."""

    def __init__(self, config: Optional[RoundConfig] = None,
                 event_bus: Optional[EventBus] = None,
                 players: Optional[Dict[Seat, Player]] = None):
        self.config = config or RoundConfig()
        self.event_bus = event_bus or EventBus()
        self.rng = random.Random(self.config.seed)
        if players is None:
            players = {seat: RandomAI(seat.label, self.rng)
                       for seat in SEATS if not seat.is_human}
        self.players = players
        # Unstarted: the full wall is undealt and only start_round is accepted
        self.state = RoundState(Wall(shuffle=False))

    # --- Transitions ---

    def start_round(self, wall: Optional[Wall] = None) -> RoundState:
        """Start a fresh round: shuffle, deal 13 each, dealer draws one."""
        if wall is None:
            wall = Wall(rng=self.rng)
        if wall.remaining < HAND_SIZE * NUM_SEATS + 1:
            raise ValueError(f"wall needs at least {HAND_SIZE * NUM_SEATS + 1} tiles, "
                             f"got {wall.remaining}")

        rs = RoundState(wall)
        for seat in SEATS:
            for _ in range(HAND_SIZE):
                rs.hands[seat].deal(wall.draw())

        # The dealer has already drawn their first tile
        rs.hands[Seat.HUMAN].draw(wall.draw())
        rs.current_seat = Seat.HUMAN
        rs.phase = GamePhase.DISCARD
        self.state = rs
        self._refresh_eligibility()

        self.event_bus.emit(GameEvent(EventType.ROUND_START, {
            "wall": wall,
            "hands": [list(h.closed_tiles) for h in rs.hands],
            "dealer": Seat.HUMAN,
            "draw_tile": rs.hands[Seat.HUMAN].draw_tile,
        }))
        return rs

    def draw(self, seat: Seat) -> Optional[Tile]:
        """Draw for ``seat``. Returns None when the wall was already empty."""
        self._check(seat, ActionType.DRAW)
        rs = self.state

        if rs.wall.is_empty:
            self._end_round(EndReason.EXHAUSTIVE)
            return None

        tile = rs.wall.draw()
        rs.hands[seat].draw(tile)
        rs.live_discard = None
        rs.passed.clear()
        rs.phase = GamePhase.DISCARD
        self._refresh_eligibility()

        self.event_bus.emit(GameEvent(EventType.DRAW, {
            "player": seat,
            "tile": tile,
            "remaining": rs.wall.remaining,
        }))
        return tile

    def discard(self, seat: Seat, tile_id: int) -> Tile:
        """Discard a tile by identifier, then resolve who may claim it."""
        self._check(seat, ActionType.DISCARD)
        rs = self.state
        hand = rs.hands[seat]
        if not hand.holds(tile_id):
            raise TileNotFound(seat, tile_id)

        is_tsumogiri = hand.draw_tile is not None and hand.draw_tile.id == tile_id
        tile = hand.discard(tile_id)
        rs.last_discarder = seat
        rs.live_discard = tile
        rs.passed.clear()
        self._refresh_eligibility()

        self.event_bus.emit(GameEvent(EventType.DISCARD, {
            "player": seat,
            "tile": tile,
            "is_tsumogiri": is_tsumogiri,
        }))
        self._resolve_ron_priority()
        return tile

    def declare_tsumo(self, seat: Seat):
        """Win on the seat's own drawn tile."""
        self._check(seat, ActionType.TSUMO)
        rs = self.state
        if not rs.can_tsumo[seat]:
            raise PhaseViolation(ActionType.TSUMO, rs.phase, "no tsumo available")

        self.event_bus.emit(GameEvent(EventType.TSUMO, {
            "player": seat,
            "tile": rs.hands[seat].draw_tile,
        }))
        self._end_round(EndReason.TSUMO, seat, WinType.TSUMO)

    def claim_win(self, seat: Seat):
        """Win by claiming the last discard (ron)."""
        self._check(seat, ActionType.RON)
        rs = self.state
        if not rs.can_ron[seat]:
            raise PhaseViolation(ActionType.RON, rs.phase, "no ron available")

        self.event_bus.emit(GameEvent(EventType.RON, {
            "player": seat,
            "from_player": rs.last_discarder,
            "tile": rs.live_discard,
        }))
        self._end_round(EndReason.RON, seat, WinType.RON)

    def pass_claim(self, seat: Seat):
        """Decline the claim and let the next eligible seat, if any, decide."""
        self._check(seat, ActionType.PASS)
        rs = self.state
        rs.passed.add(seat)
        self._refresh_eligibility()

        self.event_bus.emit(GameEvent(EventType.PASS, {
            "player": seat,
            "tile": rs.live_discard,
        }))
        self._resolve_ron_priority()

    def auto_step(self) -> Action:
        """Perform the current automated seat's action for its phase.

        Returns the action that was taken.
        """
        rs = self.state
        if rs.phase == GamePhase.END:
            raise RoundOver(ActionType.AUTO_STEP)
        seat = rs.current_seat
        if seat.is_human:
            raise TurnViolation(None, seat)

        if rs.phase == GamePhase.DRAW:
            action = Action(ActionType.DRAW, seat)
        elif rs.phase == GamePhase.DISCARD:
            if rs.can_tsumo[seat] and self.config.auto_tsumo:
                action = Action(ActionType.TSUMO, seat)
            else:
                choice = self.players[seat].choose_discard(
                    rs.hands[seat].available_tiles())
                action = Action(ActionType.DISCARD, seat, tile_id=choice.id)
        else:
            # Automated seats always take a win they are offered
            action = Action(ActionType.RON, seat)

        self.apply(action)
        return action

    def apply(self, action: Action):
        """Dispatch an Action record to the matching transition."""
        if action.action_type == ActionType.START:
            return self.start_round()
        if action.action_type == ActionType.DRAW:
            return self.draw(action.seat)
        if action.action_type == ActionType.DISCARD:
            if action.tile_id is None:
                raise ValueError("discard requires a tile_id")
            return self.discard(action.seat, action.tile_id)
        if action.action_type == ActionType.TSUMO:
            return self.declare_tsumo(action.seat)
        if action.action_type == ActionType.RON:
            return self.claim_win(action.seat)
        if action.action_type == ActionType.PASS:
            return self.pass_claim(action.seat)
        if action.action_type == ActionType.AUTO_STEP:
            return self.auto_step()
        raise ValueError(f"unknown action type: {action.action_type}")

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot.from_state(self.state)

    # --- Internals ---

    def _check(self, seat: Seat, action_type: ActionType):
        """Reject out-of-turn, wrong-phase and after-the-end actions."""
        rs = self.state
        if rs.phase == GamePhase.END:
            raise RoundOver(action_type)
        if seat != rs.current_seat:
            raise TurnViolation(seat, rs.current_seat)
        if rs.phase != ACTION_PHASES[action_type]:
            raise PhaseViolation(action_type, rs.phase)

    def _refresh_eligibility(self):
        """Recompute every tsumo/ron flag from the current tiles and phase."""
        rs = self.state
        for seat in SEATS:
            hand = rs.hands[seat]
            rs.can_tsumo[seat] = (
                rs.phase == GamePhase.DISCARD
                and hand.draw_tile is not None
                and can_complete_with(hand.closed_tiles, hand.draw_tile)
            )
            rs.can_ron[seat] = (
                rs.phase != GamePhase.END
                and rs.live_discard is not None
                and seat != rs.last_discarder
                and seat not in rs.passed
                and hand.draw_tile is None
                and can_complete_with(hand.closed_tiles, rs.live_discard)
            )

    def _resolve_ron_priority(self):
        """Hand the turn to the first seat able to claim, else play on.

        Seats are scanned in fixed order from HUMAN, not from the discarder.
        """
        rs = self.state
        for seat in SEATS:
            if rs.can_ron[seat]:
                rs.current_seat = seat
                rs.phase = GamePhase.RON
                self.event_bus.emit(GameEvent(EventType.RON_CHANCE, {
                    "player": seat,
                    "from_player": rs.last_discarder,
                    "tile": rs.live_discard,
                }))
                return

        rs.current_seat = rs.last_discarder.next
        rs.phase = GamePhase.DRAW

    def _end_round(self, reason: EndReason, winner: Optional[Seat] = None,
                   win_type: Optional[WinType] = None):
        rs = self.state
        rs.phase = GamePhase.END
        rs.end_reason = reason
        rs.winner = winner
        rs.win_type = win_type
        self._refresh_eligibility()

        if reason == EndReason.EXHAUSTIVE:
            self.event_bus.emit(GameEvent(EventType.EXHAUSTIVE_DRAW, {}))
        self.event_bus.emit(GameEvent(EventType.ROUND_END, {
            "reason": reason,
            "winner": winner,
            "win_type": win_type,
        }))

    def check_invariants(self):
        """Raise AssertionError if the tile total or hand sizes are off."""
        rs = self.state
        total = rs.tile_count()
        if total != TOTAL_TILES:
            raise AssertionError(f"tile count {total} != {TOTAL_TILES}")
        for seat in SEATS:
            if rs.hands[seat].total_tiles > HAND_SIZE + 1:
                raise AssertionError(f"{seat.label} holds {rs.hands[seat].total_tiles} tiles")
