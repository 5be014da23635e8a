#!/usr/bin/env python3
"""Simplified Mahjong - one round against three automated seats in the terminal."""

import argparse

from rich.console import Console
from rich.panel import Panel

from simplejong.engine.action import GamePhase
from simplejong.engine.config import RoundConfig
from simplejong.engine.errors import ActionError
from simplejong.engine.event import EventBus
from simplejong.engine.session import GameSession
from simplejong.ui.input_handler import get_player_input
from simplejong.ui.renderer import Renderer

console = Console()


def show_menu(show_debug: bool) -> int:
    """Show the main menu and return the choice."""
    console.print()
    console.print(Panel(
        "[bold cyan]Mahjong[/bold cyan]\n"
        "[dim]One round, four seats, first complete hand wins[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    console.print()
    console.print("  1. New round")
    console.print(f"  2. Debug panel: {'on' if show_debug else 'off'}")
    console.print("  0. Quit")
    console.print()

    while True:
        try:
            choice = int(console.input("  > Choose 0-2: ").strip())
            if 0 <= choice <= 2:
                return choice
        except ValueError:
            pass
        console.print("  [red]Invalid input[/red]")


def play_round(session: GameSession, renderer: Renderer):
    """Play one round to its end."""
    snap = session.start_round()

    while snap.phase != GamePhase.END:
        if not snap.current_seat.is_human:
            snap = session.auto_step()
            continue

        renderer.render(snap)
        action = get_player_input(console, snap)
        try:
            snap = session.apply(action)
        except ActionError as e:
            console.print(f"  [red]{e}[/red]")

    renderer.show_round_end(snap)
    if session.last_log_path:
        console.print(f"  [dim]Log saved: {session.last_log_path}[/dim]")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the wall shuffle and automated discards")
    parser.add_argument("--log", action="store_true",
                        help="write a JSON log of each round")
    parser.add_argument("--log-dir", default=None, help="directory for round logs")
    args = parser.parse_args()

    config = RoundConfig(seed=args.seed, log_dir=args.log_dir, record_log=args.log)
    event_bus = EventBus()
    session = GameSession(config, event_bus)
    renderer = Renderer(console, event_bus)

    try:
        while True:
            choice = show_menu(renderer.show_debug)
            if choice == 0:
                console.print("\n  Goodbye!\n")
                break
            elif choice == 2:
                renderer.show_debug = not renderer.show_debug
                continue
            play_round(session, renderer)
            renderer.pause()
    except (KeyboardInterrupt, EOFError):
        console.print("\n\n  [dim]Game exited[/dim]\n")


if __name__ == "__main__":
    main()
