"""Classification phases: end rooms, boss, shop and locked item rooms."""

from __future__ import annotations

from typing import Optional

from dungeon_constants import MAX_BORDERING_ROOMS
from dungeon_models import RoomType, Tile
from phase_context import PhaseContext


def is_end_room(context: PhaseContext, tile: Tile) -> bool:
    """A normal leaf room that touches nothing except the room it hangs from."""
    if tile.type is not RoomType.NORMAL:
        return False
    if tile.doors != 1:
        return False
    return context.grid.bordering_rooms(tile) <= MAX_BORDERING_ROOMS


def run_find_end_rooms(context: PhaseContext) -> bool:
    """Collect end rooms; fail when too few remain for boss, shop and items."""
    layout = context.layout
    for room in layout.rooms:
        if is_end_room(context, room):
            layout.end_rooms.add(room)
    return len(layout.end_rooms) >= context.budget.min_end_rooms


def _start_distance(context: PhaseContext, tile: Tile) -> float:
    start = context.layout.start_room
    if start is None:
        raise AssertionError("Start room must be placed before classification")
    return tile.pos.distance_to(start.pos)


def run_pick_boss_room(context: PhaseContext) -> bool:
    """Turn the end room farthest from the start into the boss room.

    Ties go to the end room scanned last.
    """
    layout = context.layout
    best: Optional[Tile] = None
    best_distance = 0.0
    for room in layout.end_rooms:
        distance = _start_distance(context, room)
        if best is None or distance >= best_distance:
            best = room
            best_distance = distance
    if best is None:
        return False
    best.type = RoomType.BOSS
    layout.boss_room = best
    return True


def run_pick_shop_room(context: PhaseContext) -> bool:
    """Turn the normal end room closest to the start into the shop.

    Ties go to the end room scanned last.
    """
    layout = context.layout
    best: Optional[Tile] = None
    best_distance = 0.0
    for room in layout.end_rooms:
        if room.type is not RoomType.NORMAL:
            continue
        distance = _start_distance(context, room)
        if best is None or distance <= best_distance:
            best = room
            best_distance = distance
    if best is None:
        return False
    best.type = RoomType.SPECIAL
    layout.shop_room = best
    return True


def run_pick_item_rooms(context: PhaseContext) -> bool:
    """Lock remaining normal end rooms in order until the item budget is spent.

    Placing fewer than ``max_item_rooms`` is accepted unless the config asks
    for ``strict_item_rooms``.
    """
    layout = context.layout
    target = context.budget.max_item_rooms
    for room in layout.end_rooms:
        if len(layout.item_rooms) >= target:
            break
        if room.type is not RoomType.NORMAL:
            continue
        room.type = RoomType.LOCKED
        layout.item_rooms.add(room)
    if context.config.strict_item_rooms:
        return len(layout.item_rooms) == target
    return True
