"""Growth phase: breadth-first expansion of normal rooms from the start tile."""

from __future__ import annotations

from dungeon_constants import GROWTH_ACCEPT_PROBABILITY, MAX_BORDERING_ROOMS
from dungeon_models import RoomType, Tile
from phase_context import PhaseContext


def can_place_room(context: PhaseContext, tile: Tile) -> bool:
    """Check the structural rules first, then spend one coin flip.

    The flip is drawn only when every other rule passes, so the random stream
    is consumed in a fixed order.
    """
    if tile.type is not RoomType.NONE:
        return False
    if context.grid.bordering_rooms(tile) > MAX_BORDERING_ROOMS:
        return False
    if len(context.layout.rooms) >= context.budget.max_rooms:
        return False
    return context.rng.random() < GROWTH_ACCEPT_PROBABILITY


def place_start_room(context: PhaseContext) -> Tile:
    layout = context.layout
    start = layout.create_room(context.grid.center(), RoomType.START)
    layout.start_room = start
    return start


def run_growth_phase(context: PhaseContext) -> int:
    """Grow the room graph and return how many rooms were placed, start included."""
    layout = context.layout
    grid = context.grid
    rooms = layout.rooms
    if layout.start_room is None:
        place_start_room(context)

    # The room set doubles as the queue; rooms appended here are visited later.
    index = 0
    while index < len(rooms):
        current = rooms[index]
        index += 1
        for direction, neighbor in grid.neighbors(current):
            if not can_place_room(context, neighbor):
                continue
            layout.create_room(neighbor, RoomType.NORMAL)
            grid.connect(current, direction)

    return len(rooms)
