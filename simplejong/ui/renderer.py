"""Rich rendering engine - ties together all UI components."""

from rich.console import Console

from simplejong.engine.event import EventBus, EventType, GameEvent
from simplejong.engine.snapshot import RoundSnapshot
from simplejong.ui.board_layout import (
    SEAT_NAMES, render_board, render_action_prompt, render_debug_panel,
    render_round_end,
)
from simplejong.ui.tile_display import tile_to_rich_text


class Renderer:
    """Main rendering engine that subscribes to game events."""

    def __init__(self, console: Console, event_bus: EventBus):
        self.console = console
        self.event_bus = event_bus
        self.show_debug = False
        self._subscribe_events()

    def _subscribe_events(self):
        """Subscribe to relevant game events."""
        self.event_bus.subscribe(EventType.DISCARD, self._on_discard)
        self.event_bus.subscribe(EventType.RON_CHANCE, self._on_ron_chance)
        self.event_bus.subscribe(EventType.PASS, self._on_pass)

    def render(self, snap: RoundSnapshot):
        """Render the board and, when enabled, the debug panel."""
        render_board(self.console, snap)
        if self.show_debug:
            render_debug_panel(self.console, snap)
        render_action_prompt(self.console, snap)

    def show_round_end(self, snap: RoundSnapshot):
        render_round_end(self.console, snap)

    def _on_discard(self, event: GameEvent):
        player = event.player
        if player.is_human:
            return
        line = f"  {SEAT_NAMES[player]} discards "
        self.console.print(line, end="")
        self.console.print(tile_to_rich_text(event.data["tile"]))

    def _on_ron_chance(self, event: GameEvent):
        player = event.player
        if not player.is_human:
            self.console.print(f"  [bold yellow]{SEAT_NAMES[player]} can claim the discard[/bold yellow]")

    def _on_pass(self, event: GameEvent):
        self.console.print(f"  [dim]{SEAT_NAMES[event.player]} passes[/dim]")

    def pause(self, message: str = "Press Enter to continue..."):
        """Pause and wait for user input."""
        self.console.input(f"\n  {message}")
