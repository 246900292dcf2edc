"""Super-secret phase: one hidden room hanging off a single normal room."""

from __future__ import annotations

from dungeon_constants import MAX_BORDERING_ROOMS
from dungeon_models import RoomType, Tile
from phase_context import PhaseContext


def is_super_secret_candidate(context: PhaseContext, tile: Tile) -> bool:
    grid = context.grid
    if tile.type is not RoomType.NONE:
        return False
    if tile.secret_chance != 1:
        return False
    if grid.bordering_rooms(tile) > MAX_BORDERING_ROOMS:
        return False
    return grid.count_neighbors_of_type(tile, RoomType.NORMAL) >= 1


def run_find_super_candidates(context: PhaseContext) -> bool:
    layout = context.layout
    for tile in layout.secret_candidates:
        if is_super_secret_candidate(context, tile):
            layout.super_candidates.add(tile)
    return len(layout.super_candidates) > 0


def run_pick_super_secret_room(context: PhaseContext) -> bool:
    """Pick one candidate uniformly and connect it to its normal neighbors only."""
    layout = context.layout
    grid = context.grid
    candidates = list(layout.super_candidates)
    if not candidates:
        return False
    room = context.rng.choice(candidates)
    room.type = RoomType.SUPER_SECRET
    layout.super_secret_room = room
    for direction, neighbor in grid.neighbors(room):
        if neighbor.type is RoomType.NORMAL:
            grid.connect_secret(room, direction)
    return True
