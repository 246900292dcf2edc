import json

import pytest

from dungeon_analysis import iter_invariant_violations
from dungeon_config import DungeonConfig
from dungeon_errors import GenerationFailed, InvalidDimensions
from dungeon_generator import PHASES, DungeonGenerator, GenerationState, generate
from dungeon_models import RoomType


@pytest.mark.parametrize("level", [0, 1, 3])
@pytest.mark.parametrize("seed", [0, 1, 2, 42, 1234])
def test_generated_layouts_hold_every_invariant(level, seed):
    layout = generate(level, seed)

    assert list(iter_invariant_violations(layout)) == []
    assert [room.region for room in layout.rooms] == list(range(1, len(layout.rooms) + 1))
    assert len(layout.end_rooms) >= layout.budget.min_end_rooms
    for room in layout.tiles_of_type(RoomType.SECRET):
        assert room.secret_doors >= 1
    super_room = layout.super_secret_room
    assert super_room.secret_doors == 1
    assert super_room.doors == 0


def test_same_seed_gives_identical_layout():
    first = generate(2, 1234)
    second = generate(2, 1234)

    assert json.dumps(first.to_dict(), sort_keys=True) == json.dumps(second.to_dict(), sort_keys=True)


def test_different_seeds_give_different_layouts():
    layouts = {json.dumps(generate(1, seed).to_dict(), sort_keys=True) for seed in range(5)}

    assert len(layouts) > 1


def test_level_zero_default_grid_has_one_secret_and_one_item_room():
    layout = generate(0, 7, width=15, height=15)

    assert layout.width == 15 and layout.height == 15
    assert layout.budget.max_secrets == 1
    assert layout.budget.max_item_rooms == 1
    assert layout.count(RoomType.SECRET) == 1
    assert layout.count(RoomType.LOCKED) == 1
    assert layout.start_room is layout.tile(7, 7)


def test_even_width_is_rejected_before_generation():
    with pytest.raises(InvalidDimensions):
        generate(0, 1, width=14, height=15)


def test_gives_up_after_max_attempts():
    config = DungeonConfig(width=3, height=3, max_attempts=5)
    generator = DungeonGenerator(config, level_difficulty=0, seed=3)

    with pytest.raises(GenerationFailed) as excinfo:
        generator.generate()

    assert excinfo.value.attempts == 5
    assert excinfo.value.failures == {"grow": 5}
    assert isinstance(excinfo.value, RuntimeError)
    assert generator.layout is None


def test_failed_run_keeps_previous_layout():
    generator = DungeonGenerator(DungeonConfig(), level_difficulty=1, seed=9)
    first = generator.generate()

    generator.config = DungeonConfig(width=3, height=3, max_attempts=1)
    with pytest.raises(GenerationFailed):
        generator.generate()

    assert generator.layout is first


def test_run_phases_yields_every_boundary_of_a_failing_run():
    generator = DungeonGenerator(DungeonConfig(width=3, height=3, max_attempts=2), seed=1)
    events = []

    with pytest.raises(GenerationFailed):
        for event in generator.run_phases():
            events.append(event)

    assert [(e.tick, e.attempt, e.state, e.passed) for e in events] == [
        (1, 1, GenerationState.RESET, True),
        (2, 1, GenerationState.GROW, False),
        (3, 2, GenerationState.RESET, True),
        (4, 2, GenerationState.GROW, False),
    ]


def test_successful_attempt_walks_every_state_in_order():
    generator = DungeonGenerator(DungeonConfig(), level_difficulty=0, seed=5)

    events = list(generator.run_phases())

    expected = [GenerationState.RESET] + [state for state, _ in PHASES] + [GenerationState.DONE]
    assert [event.state for event in events[-len(expected):]] == expected
    assert all(event.passed for event in events[-len(expected):])
    assert events[-1].attempt == generator.attempts
    assert [event.tick for event in events] == list(range(1, len(events) + 1))
    assert generator.layout is not None


def test_metrics_track_attempts_and_restarts():
    config = DungeonConfig(collect_metrics=True)
    generator = DungeonGenerator(config, level_difficulty=2, seed=11)

    generator.generate()

    metrics = generator.metrics
    assert metrics.attempts == generator.attempts
    assert metrics.phases["grow"].invocations == generator.attempts
    assert sum(metrics.restarts_by_state.values()) == generator.attempts - 1
    assert metrics.restarts_by_state == generator.failures


def test_strict_item_rooms_places_full_budget():
    layout = generate(4, 21, strict_item_rooms=True)

    assert layout.count(RoomType.LOCKED) == layout.budget.max_item_rooms


def test_random_seed_is_recorded_for_replay():
    generator = DungeonGenerator(DungeonConfig())
    layout = generator.generate()

    replay = generate(0, generator.seed)

    assert replay.to_dict() == layout.to_dict()
