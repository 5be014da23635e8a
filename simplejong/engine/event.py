"""Engine events, consumed by the terminal UI and the round logger."""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, DefaultDict, Dict, List

from simplejong.core.seat import Seat


class EventType(Enum):
    # Payload keys in comments
    ROUND_START = "round_start"          # wall, hands, dealer, draw_tile
    ROUND_END = "round_end"              # reason, winner, win_type
    DRAW = "draw"                        # player, tile, remaining
    DISCARD = "discard"                  # player, tile, is_tsumogiri
    RON_CHANCE = "ron_chance"            # player, from_player, tile
    PASS = "pass"                        # player, tile
    TSUMO = "tsumo"                      # player, tile
    RON = "ron"                          # player, from_player, tile
    EXHAUSTIVE_DRAW = "exhaustive_draw"


# Events produced by a single seat's action
SEAT_ACTIONS = (EventType.DRAW, EventType.DISCARD, EventType.PASS,
                EventType.TSUMO, EventType.RON)


@dataclass
class GameEvent:
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def player(self) -> Seat:
        """Acting seat; only present on seat events."""
        return self.data["player"]


Listener = Callable[[GameEvent], None]


class EventBus:
    """Synchronous publish/subscribe, listeners run in subscription order."""

    def __init__(self):
        self._listeners: DefaultDict[EventType, List[Listener]] = defaultdict(list)

    def subscribe(self, event_type: EventType, callback: Listener):
        self._listeners[event_type].append(callback)

    def subscribe_many(self, event_types, callback: Listener):
        for event_type in event_types:
            self.subscribe(event_type, callback)

    def emit(self, event: GameEvent):
        for callback in list(self._listeners[event.event_type]):
            callback(event)
