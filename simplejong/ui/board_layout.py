"""Board layout rendering using Rich."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from simplejong.core.seat import Seat, SEATS
from simplejong.engine.action import GamePhase, EndReason
from simplejong.engine.snapshot import RoundSnapshot
from simplejong.rules.agari import waiting_tiles
from simplejong.core.tile import tile_34_to_name
from simplejong.ui.tile_display import (
    tile_to_rich_text, tiles_to_rich_text, format_discard_pool, hidden_tiles_text,
    tile_display_width,
)

SEAT_NAMES = {
    Seat.HUMAN: "You",
    Seat.AUTO1: "CPU 1",
    Seat.AUTO2: "CPU 2",
    Seat.AUTO3: "CPU 3",
}

COL_WIDTH = 5  # Display columns per tile slot: "[1m] "


def render_board(console: Console, snap: RoundSnapshot, reveal: bool = False):
    """Render the full board from the human seat's point of view."""
    header = Text()
    header.append(f"  Wall: {snap.wall_remaining}  Phase: {snap.phase.value}  ")
    header.append(f"Turn: {SEAT_NAMES[snap.current_seat]}")
    console.print(Panel(header, title="[bold]Mahjong[/bold]", border_style="cyan"))

    for seat in SEATS:
        _render_seat_row(console, snap, seat, reveal)

    console.print("─" * 60, style="dim")
    _render_player_hand(console, snap)


def _render_seat_row(console: Console, snap: RoundSnapshot, seat: Seat, reveal: bool):
    """Render one seat's header, concealed tiles and discard pool."""
    turn_mark = " [bold yellow]◀[/bold yellow]" if seat == snap.current_seat else ""
    if seat.is_human:
        name_display = f"[bold cyan]{SEAT_NAMES[seat]}[/bold cyan]"
    else:
        name_display = SEAT_NAMES[seat]
    console.print(f"  {name_display}{turn_mark}")

    if not seat.is_human:
        row = Text("  Hand: ")
        if reveal:
            row.append_text(tiles_to_rich_text(snap.available_tiles(seat)))
        else:
            row.append_text(hidden_tiles_text(len(snap.available_tiles(seat))))
        console.print(row)

    discards = snap.discards[seat]
    if discards:
        is_live = (snap.phase == GamePhase.RON and snap.last_discarder == seat)
        discard_text = Text("  Discards: ")
        discard_text.append_text(format_discard_pool(discards, is_live))
        console.print(discard_text)
    else:
        console.print("  Discards: ", style="dim")
    console.print()


def _render_player_hand(console: Console, snap: RoundSnapshot):
    """Render the human's tiles with selection numbers, drawn tile set apart."""
    console.print("  [bold]Your hand[/bold]")

    hand = snap.hands[Seat.HUMAN]
    draw_tile = snap.drawn_tile[Seat.HUMAN]

    num_text = Text("  ")
    for i in range(len(hand)):
        num_text.append(str(i + 1).center(COL_WIDTH), style="dim")
    if draw_tile is not None:
        num_text.append(" ")
        num_text.append(str(len(hand) + 1).center(COL_WIDTH), style="dim cyan")
    console.print(num_text)

    tile_text = Text("  ")
    for t in hand:
        tile_text.append_text(tile_to_rich_text(t))
        tile_text.append(" " * max(1, COL_WIDTH - tile_display_width(t)))
    if draw_tile is not None:
        tile_text.append(" ")
        tile_text.append_text(tile_to_rich_text(draw_tile, highlight=True))
    console.print(tile_text)
    console.print()


def render_action_prompt(console: Console, snap: RoundSnapshot):
    """Show the special actions open to the human."""
    actions = []
    if snap.can_tsumo[Seat.HUMAN]:
        actions.append("[bold green]Tsumo![/bold green]")
    if snap.can_ron[Seat.HUMAN] and snap.phase == GamePhase.RON:
        actions.append("[bold green]Ron![/bold green]")
    if actions:
        console.print(f"  Available: {' '.join(actions)}")


def render_debug_panel(console: Console, snap: RoundSnapshot):
    """Round state internals: flags, tile counts and waits per seat."""
    table = Table(title="Debug", border_style="dim")
    table.add_column("Seat", style="bold")
    table.add_column("Hand", justify="right")
    table.add_column("Drawn", justify="center")
    table.add_column("Discards", justify="right")
    table.add_column("Tsumo", justify="center")
    table.add_column("Ron", justify="center")
    table.add_column("Waits")

    for seat in SEATS:
        waits = waiting_tiles(snap.hands[seat]) if snap.drawn_tile[seat] is None else []
        drawn = snap.drawn_tile[seat]
        table.add_row(
            seat.label,
            str(len(snap.hands[seat])),
            drawn.name if drawn is not None else "-",
            str(len(snap.discards[seat])),
            "Yes" if snap.can_tsumo[seat] else "No",
            "Yes" if snap.can_ron[seat] else "No",
            " ".join(tile_34_to_name(w) for w in waits),
        )

    console.print(table)
    last = snap.last_discarder.label if snap.last_discarder is not None else "-"
    console.print(f"  [dim]Current: {snap.current_seat.label}  Phase: {snap.phase.value}  "
                  f"Wall: {snap.wall_remaining}  Last discarder: {last}  "
                  f"Tiles: {snap.tile_total}[/dim]")


def render_round_end(console: Console, snap: RoundSnapshot):
    """Render the end-of-round screen with the reason and every hand."""
    console.print()
    if snap.end_reason == EndReason.EXHAUSTIVE:
        console.print(Panel("[bold yellow]Wall exhausted (流局)[/bold yellow]",
                            border_style="yellow"))
    elif snap.end_reason == EndReason.TSUMO:
        console.print(Panel(
            f"[bold green]{SEAT_NAMES[snap.winner]} wins by Tsumo![/bold green]",
            border_style="green"))
    elif snap.end_reason == EndReason.RON:
        console.print(Panel(
            f"[bold green]{SEAT_NAMES[snap.winner]} wins by Ron from "
            f"{SEAT_NAMES[snap.last_discarder]}![/bold green]",
            border_style="green"))
    else:
        console.print(Panel("[bold]No round in progress[/bold]", border_style="dim"))

    for seat in SEATS:
        tiles = Text(f"  {SEAT_NAMES[seat]:<6} ")
        tiles.append_text(tiles_to_rich_text(snap.hands[seat]))
        if snap.drawn_tile[seat] is not None:
            tiles.append("  ")
            tiles.append_text(tile_to_rich_text(snap.drawn_tile[seat], highlight=True))
        if seat == snap.winner:
            tiles.append("  ★", style="bold green")
        console.print(tiles)
    console.print()
