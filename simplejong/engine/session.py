"""Game session - the action surface exposed to callers.

All engine access goes through one lock: an action observes and mutates the
round as a unit, and snapshot reads wait behind in-flight actions.
"""

import threading
from typing import Optional

from simplejong.core.seat import Seat
from simplejong.core.wall import Wall
from simplejong.engine.action import Action, ActionType
from simplejong.engine.config import RoundConfig
from simplejong.engine.event import EventBus, EventType, GameEvent
from simplejong.engine.game_logger import GameLogger
from simplejong.engine.round import RoundEngine
from simplejong.engine.snapshot import RoundSnapshot


class GameSession:
    """Lock-protected wrapper around a RoundEngine.

    Human actions are always performed for ``Seat.HUMAN``; automated seats
    advance only through ``auto_step``. Every method returns a fresh
    ``RoundSnapshot`` or raises an ``ActionError``.
    """

    def __init__(self, config: Optional[RoundConfig] = None,
                 event_bus: Optional[EventBus] = None):
        self.config = config or RoundConfig()
        self.event_bus = event_bus or EventBus()
        self._lock = threading.Lock()
        self._engine = RoundEngine(self.config, self.event_bus)

        self.logger: Optional[GameLogger] = None
        self.last_log_path: Optional[str] = None
        if self.config.record_log:
            self.logger = GameLogger(self.config.log_dir, self.config.to_dict())
            self.logger.subscribe_events(self.event_bus)
            self.event_bus.subscribe(EventType.ROUND_END, self._on_round_end)

    def start_round(self, wall: Optional[Wall] = None) -> RoundSnapshot:
        with self._lock:
            self._engine.start_round(wall)
            return self._engine.snapshot()

    def draw(self) -> RoundSnapshot:
        return self._act(Action(ActionType.DRAW, Seat.HUMAN))

    def discard(self, tile_id: int) -> RoundSnapshot:
        return self._act(Action(ActionType.DISCARD, Seat.HUMAN, tile_id=tile_id))

    def declare_tsumo(self) -> RoundSnapshot:
        return self._act(Action(ActionType.TSUMO, Seat.HUMAN))

    def claim_win(self) -> RoundSnapshot:
        return self._act(Action(ActionType.RON, Seat.HUMAN))

    def pass_claim(self) -> RoundSnapshot:
        return self._act(Action(ActionType.PASS, Seat.HUMAN))

    def auto_step(self) -> RoundSnapshot:
        return self._act(Action(ActionType.AUTO_STEP))

    def apply(self, action: Action) -> RoundSnapshot:
        """Perform an Action record; seat-specific actions must be the human's."""
        if action.action_type == ActionType.START:
            return self.start_round()
        if action.action_type != ActionType.AUTO_STEP and not action.seat.is_human:
            raise ValueError(f"{action.seat.label} is driven by auto_step, not apply")
        return self._act(action)

    def snapshot(self) -> RoundSnapshot:
        with self._lock:
            return self._engine.snapshot()

    def _act(self, action: Action) -> RoundSnapshot:
        with self._lock:
            self._engine.apply(action)
            return self._engine.snapshot()

    def _on_round_end(self, event: GameEvent):
        # Runs inside the action that ended the round, lock already held
        self.last_log_path = self.logger.save()


_default_session: Optional[GameSession] = None
_default_lock = threading.Lock()


def default_session(config: Optional[RoundConfig] = None) -> GameSession:
    """The single live session for this process, created on first use."""
    global _default_session
    with _default_lock:
        if _default_session is None:
            _default_session = GameSession(config)
        return _default_session
