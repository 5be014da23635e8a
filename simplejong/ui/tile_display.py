"""Tile display formatting with colors for terminal output."""

from rich.text import Text

from simplejong.core.tile import Tile, TileSuit


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.HONOR: "yellow",
}


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    style = f"bold {SUIT_COLORS[tile.suit]}"
    if highlight:
        style += " on white"
    return Text(f"[{tile.name}]", style=style)


def tiles_to_rich_text(tiles, separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def format_discard_pool(tiles, last_is_live: bool = False) -> Text:
    """Format a discard pool, highlighting the claimable last tile."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(" ")
        is_last = i == len(tiles) - 1
        result.append_text(tile_to_rich_text(tile, highlight=last_is_live and is_last))
    return result


def hidden_tiles_text(count: int) -> Text:
    """Face-down tiles for automated seats."""
    return Text("[■]" * count, style="dim")


def tile_display_width(tile: Tile) -> int:
    """Terminal columns taken by ``[name]``; honor glyphs are fullwidth."""
    width = 2
    for ch in tile.name:
        if '\u4e00' <= ch <= '\u9fff':
            width += 2
        else:
            width += 1
    return width
