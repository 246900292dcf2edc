"""Secret phases: per-tile secret chance and greedy secret-room selection."""

from __future__ import annotations

from typing import Optional

from dungeon_models import SECRET_DOOR_BLOCKED_TYPES, RoomType, Tile
from phase_context import PhaseContext

# Rooms whose empty neighbors do not gain secret chance.
_CHANCE_SKIPPED_TYPES = frozenset((RoomType.START, RoomType.BOSS))


def is_secret_candidate(context: PhaseContext, tile: Tile) -> bool:
    if tile.type is not RoomType.NONE:
        return False
    if tile.secret_chance <= 0:
        return False
    if tile in context.layout.secret_candidates:
        return False
    grid = context.grid
    if grid.count_neighbors_of_type(tile, RoomType.NORMAL) < 1:
        return False
    return grid.count_neighbors_of_type(tile, RoomType.BOSS) == 0


def run_compute_secret_chances(context: PhaseContext) -> int:
    """Raise secret chance on every empty tile next to a placed room.

    A tile gains one point per bordering room and may keep gaining after it
    became a candidate. Returns the number of candidates found.
    """
    layout = context.layout
    grid = context.grid
    for room in layout.rooms:
        if room.type in _CHANCE_SKIPPED_TYPES:
            continue
        for _, neighbor in grid.neighbors(room):
            if neighbor.type is not RoomType.NONE:
                continue
            neighbor.secret_chance += 1
            if is_secret_candidate(context, neighbor):
                layout.secret_candidates.add(neighbor)
    return len(layout.secret_candidates)


def _best_secret_candidate(context: PhaseContext) -> Optional[Tile]:
    layout = context.layout
    best: Optional[Tile] = None
    for candidate in layout.secret_candidates:
        if candidate.type is not RoomType.NONE or candidate in layout.secret_rooms:
            continue
        # >= so the last candidate scanned wins ties.
        if best is None or candidate.secret_chance >= best.secret_chance:
            best = candidate
    return best


def connect_secret_room(context: PhaseContext, room: Tile) -> int:
    """Open secret doors towards every neighbor a secret room may lead into."""
    connected = 0
    for direction, neighbor in context.grid.neighbors(room):
        if neighbor.type in SECRET_DOOR_BLOCKED_TYPES:
            continue
        context.grid.connect_secret(room, direction)
        connected += 1
    return connected


def run_pick_secret_rooms(context: PhaseContext) -> bool:
    """Greedily accept the highest-chance candidates, one per decision step.

    Stops once ``max_secrets`` rooms are accepted, the lifespan budget of
    ``config.secret_selection_steps`` runs out, or no candidate is left.
    """
    layout = context.layout
    target = context.budget.max_secrets
    steps_left = context.config.secret_selection_steps
    while len(layout.secret_rooms) < target and steps_left > 0:
        steps_left -= 1
        best = _best_secret_candidate(context)
        if best is None:
            break
        layout.secret_rooms.add(best)

    for room in layout.secret_rooms:
        room.type = RoomType.SECRET
        connect_secret_room(context, room)

    return len(layout.secret_rooms) == target
