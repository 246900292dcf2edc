import random

import pytest

from room_budget import RoomBudget, clamp_level


def test_level_zero_only_draws_room_jitter():
    rng = random.Random(5)
    mirror = random.Random(5)

    budget = RoomBudget.roll(0, rng)
    mirror.randrange(3)

    assert budget.max_secrets == 1
    assert budget.max_item_rooms == 1
    assert 8 <= budget.max_rooms <= 10
    assert rng.random() == mirror.random()


def test_higher_levels_draw_rooms_then_secrets_then_items():
    rng = random.Random(11)
    mirror = random.Random(11)

    budget = RoomBudget.roll(3, rng)

    assert budget.max_rooms == mirror.randrange(3) + 8 + 3 * 2
    assert budget.max_secrets == 1 + mirror.randrange(2)
    assert budget.max_item_rooms == 1 + mirror.randrange(2)


@pytest.mark.parametrize("level,expected", [(-4, 0), (0, 0), (7, 7), (25, 10)])
def test_level_is_clamped(level, expected):
    assert clamp_level(level) == expected


def test_clamped_level_bounds_room_count():
    for seed in range(20):
        budget = RoomBudget.roll(99, random.Random(seed))
        assert 28 <= budget.max_rooms <= 30
        assert budget.max_secrets in (1, 2)
        assert budget.max_item_rooms in (1, 2)


def test_min_end_rooms_reserves_boss_and_shop():
    assert RoomBudget(max_rooms=10, max_secrets=1, max_item_rooms=2).min_end_rooms == 4
