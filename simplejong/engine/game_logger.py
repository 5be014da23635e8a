"""Round logger - writes every round of a session to one JSON file.

The file holds the initial wall order and dealt hands, so a round can be
replayed by feeding ``wall.tile_ids`` back through ``Wall.from_tiles``.
"""

import json
import os
import uuid
from datetime import datetime
from typing import Any, List, Optional

from simplejong.core.seat import Seat
from simplejong.core.tile import Tile
from simplejong.engine.event import EventBus, EventType, GameEvent, SEAT_ACTIONS


def _plain(value: Any) -> Any:
    """Tiles and seats become their names; enums their values."""
    if isinstance(value, Tile):
        return value.name
    if isinstance(value, Seat):
        return value.label
    if hasattr(value, "value"):
        return value.value
    return value


class GameLogger:
    """Collects rounds from the event bus and saves them as JSON."""

    def __init__(self, log_dir: str, config_info: dict):
        self.session_id = uuid.uuid4().hex[:12]
        self.started_at = datetime.now().isoformat()
        self.log_dir = log_dir
        self.config_info = config_info
        self.rounds: List[dict] = []
        self._open_round: Optional[dict] = None

    def subscribe_events(self, event_bus: EventBus):
        event_bus.subscribe(EventType.ROUND_START, self._on_round_start)
        event_bus.subscribe_many(SEAT_ACTIONS, self._on_seat_action)
        event_bus.subscribe(EventType.ROUND_END, self._on_round_end)

    @property
    def path(self) -> str:
        return os.path.join(self.log_dir, f"round_{self.session_id}.json")

    def save(self) -> str:
        """Write the session so far, replacing any earlier save. Returns the path."""
        os.makedirs(self.log_dir, exist_ok=True)
        payload = {
            "session_id": self.session_id,
            "timestamp": self.started_at,
            "config": self.config_info,
            "rounds": self.rounds,
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        return self.path

    def _on_round_start(self, event: GameEvent):
        order = event.data["wall"].initial_order
        self._open_round = {
            "round_id": uuid.uuid4().hex[:8],
            "wall": {
                "tile_ids": [t.id for t in order],
                "tile_names": [t.name for t in order],
            },
            "initial_hands": {
                Seat(i).label: [t.name for t in tiles]
                for i, tiles in enumerate(event.data["hands"])
            },
            "dealer_draw": event.data["draw_tile"].name,
            "actions": [],
            "result": None,
        }
        self.rounds.append(self._open_round)

    def _on_seat_action(self, event: GameEvent):
        if self._open_round is None:
            return
        entry = {"action": event.event_type.value, "seat": event.player.label}
        for key, value in event.data.items():
            if key == "player":
                continue
            entry[key] = _plain(value)
        self._open_round["actions"].append(entry)

    def _on_round_end(self, event: GameEvent):
        if self._open_round is None:
            return
        self._open_round["result"] = {
            key: _plain(event.data[key]) for key in ("reason", "winner", "win_type")
        }
        self._open_round = None
