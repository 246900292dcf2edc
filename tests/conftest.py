import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from dungeon_config import DungeonConfig
from dungeon_geometry import Direction
from dungeon_layout import DungeonLayout
from dungeon_models import RoomType, Tile
from phase_context import PhaseContext
from room_budget import RoomBudget


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed values and counts draws."""

    def __init__(self, values: Sequence[float] = (0.0,), choice_index: int = 0) -> None:
        self.values = list(values)
        self.choice_index = choice_index
        self.random_calls = 0

    def random(self) -> float:
        value = self.values[self.random_calls % len(self.values)]
        self.random_calls += 1
        return value

    def randrange(self, *args) -> int:
        return 0

    def choice(self, seq):
        return seq[self.choice_index]


@pytest.fixture
def make_context() -> Callable[..., PhaseContext]:
    def _make_context(
        *,
        width: int = 9,
        height: int = 9,
        budget: Optional[RoomBudget] = None,
        rng=None,
        **config_kwargs,
    ) -> PhaseContext:
        config = DungeonConfig(width=width, height=height, **config_kwargs)
        layout = DungeonLayout(config, budget or RoomBudget(max_rooms=10, max_secrets=1, max_item_rooms=1))
        return PhaseContext(config=config, layout=layout, rng=rng or ScriptedRandom())

    return _make_context


@pytest.fixture
def attach() -> Callable[..., Tile]:
    """Create a room next to ``tile`` and open the door between them."""

    def _attach(
        context: PhaseContext,
        tile: Tile,
        direction: Direction,
        room_type: RoomType = RoomType.NORMAL,
    ) -> Tile:
        neighbor = context.grid.neighbor(tile, direction)
        context.layout.create_room(neighbor, room_type)
        context.grid.connect(tile, direction)
        return neighbor

    return _attach


@pytest.fixture
def place_start() -> Callable[[PhaseContext], Tile]:
    def _place_start(context: PhaseContext) -> Tile:
        layout = context.layout
        layout.start_room = layout.create_room(context.grid.center(), RoomType.START)
        return layout.start_room

    return _place_start


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    return ScriptedRandom
