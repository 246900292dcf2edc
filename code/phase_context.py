"""Context object providing shared state for the generation phases."""

from __future__ import annotations

import random
from dataclasses import dataclass

from dungeon_config import DungeonConfig
from dungeon_grid import Grid
from dungeon_layout import DungeonLayout
from room_budget import RoomBudget


@dataclass
class PhaseContext:
    """Encapsulates the attempt state every phase reads and writes."""

    config: DungeonConfig
    layout: DungeonLayout
    rng: random.Random

    @property
    def grid(self) -> Grid:
        return self.layout.grid

    @property
    def budget(self) -> RoomBudget:
        return self.layout.budget
