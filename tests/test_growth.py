import random

from dungeon_geometry import Direction, TilePos
from dungeon_models import RoomType
from phases.growth import can_place_room, run_growth_phase
from room_budget import RoomBudget


def test_always_accepting_growth_fills_start_neighbors_first(make_context, scripted_rng):
    rng = scripted_rng(values=(0.0,))
    context = make_context(budget=RoomBudget(max_rooms=5, max_secrets=1, max_item_rooms=1), rng=rng)

    placed = run_growth_phase(context)

    layout = context.layout
    assert placed == 5
    assert layout.rooms.positions() == [
        TilePos(4, 4),
        TilePos(4, 3),
        TilePos(5, 4),
        TilePos(4, 5),
        TilePos(3, 4),
    ]
    assert [room.region for room in layout.rooms] == [1, 2, 3, 4, 5]
    assert layout.start_room.type is RoomType.START
    assert layout.start_room.doors == 4
    assert all(room.doors == 1 for room in list(layout.rooms)[1:])


def test_coin_flip_is_drawn_only_after_structural_checks(make_context, scripted_rng):
    rng = scripted_rng(values=(0.0,))
    context = make_context(budget=RoomBudget(max_rooms=5, max_secrets=1, max_item_rooms=1), rng=rng)

    run_growth_phase(context)

    # One draw per accepted neighbor; the room cap rejects the rest without drawing.
    assert rng.random_calls == 4


def test_rejecting_every_flip_leaves_only_the_start_room(make_context, scripted_rng):
    rng = scripted_rng(values=(0.99,))
    context = make_context(budget=RoomBudget(max_rooms=8, max_secrets=1, max_item_rooms=1), rng=rng)

    assert run_growth_phase(context) == 1
    assert rng.random_calls == 4
    assert context.layout.start_room.doors == 0


def test_can_place_room_rejects_crowded_tiles_without_drawing(
    make_context, place_start, attach, scripted_rng
):
    rng = scripted_rng(values=(0.0,))
    context = make_context(rng=rng)
    start = place_start(context)
    north = attach(context, start, Direction.NORTH)
    attach(context, start, Direction.EAST)

    # (5, 3) touches both the north and the east room.
    crowded = context.grid.tile(5, 3)
    assert context.grid.bordering_rooms(crowded) == 2
    assert not can_place_room(context, crowded)
    assert not can_place_room(context, north)
    assert rng.random_calls == 0


def test_seeded_growth_builds_a_tree_with_symmetric_doors(make_context):
    for seed in range(10):
        context = make_context(
            width=15,
            height=15,
            budget=RoomBudget(max_rooms=14, max_secrets=1, max_item_rooms=1),
            rng=random.Random(seed),
        )

        placed = run_growth_phase(context)

        layout = context.layout
        grid = context.grid
        assert 1 <= placed <= 14
        assert sum(room.doors for room in layout.rooms) == 2 * (placed - 1)
        for room in layout.rooms:
            for direction, neighbor in grid.neighbors(room):
                assert room.door_towards(direction) == neighbor.door_towards(direction.opposite())
        assert sum(1 for tile in grid if tile.is_room) == placed
