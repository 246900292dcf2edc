"""Render a dungeon layout to an ASCII grid."""

from __future__ import annotations

from typing import List

from dungeon_geometry import Direction
from dungeon_layout import DungeonLayout
from dungeon_models import RoomType

ROOM_GLYPHS = {
    RoomType.NONE: " ",
    RoomType.NORMAL: "o",
    RoomType.START: "S",
    RoomType.BOSS: "B",
    RoomType.SPECIAL: "$",
    RoomType.LOCKED: "I",
    RoomType.SECRET: "?",
    RoomType.SUPER_SECRET: "!",
}
DOOR_GLYPH = {Direction.EAST: "-", Direction.SOUTH: "|"}
SECRET_DOOR_GLYPH = {Direction.EAST: ":", Direction.SOUTH: ":"}


def render_layout(layout: DungeonLayout, show_secret_chance: bool = False) -> List[str]:
    """Return text rows; each tile sits on odd coordinates with doors between.

    With ``show_secret_chance`` empty tiles print their secret chance instead
    of a blank, which is handy when tuning secret placement.
    """
    canvas = [[" "] * (layout.width * 2 + 1) for _ in range(layout.height * 2 + 1)]
    for tile in layout.grid:
        cx, cy = tile.x * 2 + 1, tile.y * 2 + 1
        glyph = ROOM_GLYPHS[tile.type]
        if show_secret_chance and tile.type is RoomType.NONE and tile.secret_chance > 0:
            glyph = str(tile.secret_chance)
        canvas[cy][cx] = glyph
        # East and south edges cover every shared edge exactly once.
        for direction in (Direction.EAST, Direction.SOUTH):
            ex, ey = cx + direction.dx, cy + direction.dy
            if tile.door_towards(direction):
                canvas[ey][ex] = DOOR_GLYPH[direction]
            elif tile.secret_door_towards(direction):
                canvas[ey][ex] = SECRET_DOOR_GLYPH[direction]
    return ["".join(row).rstrip() for row in canvas]


def print_layout(layout: DungeonLayout, show_secret_chance: bool = False) -> None:
    """Prints the ASCII grid to the console."""
    for row in render_layout(layout, show_secret_chance):
        print(row)
