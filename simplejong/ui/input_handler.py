"""User input handling for the terminal UI."""

from typing import List

from rich.console import Console

from simplejong.core.seat import Seat
from simplejong.core.tile import Tile
from simplejong.engine.action import Action, ActionType, GamePhase
from simplejong.engine.snapshot import RoundSnapshot


def get_player_input(console: Console, snap: RoundSnapshot) -> Action:
    """Ask the human for the action that fits the current phase."""
    if snap.phase == GamePhase.DRAW:
        console.input("  > Enter to draw ")
        return Action(ActionType.DRAW, Seat.HUMAN)

    if snap.phase == GamePhase.RON:
        return _get_ron_input(console)

    return _get_discard_input(console, snap)


def _get_ron_input(console: Console) -> Action:
    """Claim the last discard or let it go."""
    while True:
        choice = console.input("  > h: Ron | s: Pass: ").strip().lower()
        if choice == 'h':
            return Action(ActionType.RON, Seat.HUMAN)
        if choice == 's':
            return Action(ActionType.PASS, Seat.HUMAN)
        console.print("  [red]Invalid input, try again[/red]")


def _get_discard_input(console: Console, snap: RoundSnapshot) -> Action:
    """Get a discard by position, or tsumo when it is available."""
    tiles = _get_display_tiles(snap)
    n = len(tiles)
    can_tsumo = snap.can_tsumo[Seat.HUMAN]

    prompt = f"  > Discard 1-{n}"
    if can_tsumo:
        prompt += " | t: Tsumo"
    prompt += ": "

    while True:
        choice = console.input(prompt).strip().lower()
        if choice == 't' and can_tsumo:
            return Action(ActionType.TSUMO, Seat.HUMAN)
        try:
            idx = int(choice) - 1
            if 0 <= idx < n:
                return Action(ActionType.DISCARD, Seat.HUMAN, tile_id=tiles[idx].id)
        except ValueError:
            pass
        console.print("  [red]Invalid input, try again[/red]")


def _get_display_tiles(snap: RoundSnapshot) -> List[Tile]:
    """Tiles in display order: sorted hand, then the drawn tile."""
    return snap.available_tiles(Seat.HUMAN)
