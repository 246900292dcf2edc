"""Per-attempt room counts derived from the level difficulty."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict

from dungeon_constants import (
    BASE_ITEM_ROOMS,
    BASE_SECRETS,
    ITEM_ROOM_JITTER,
    MAX_LEVEL,
    MIN_LEVEL,
    ROOM_BASE,
    ROOM_JITTER,
    ROOMS_PER_LEVEL,
    SECRET_JITTER,
)


def clamp_level(level_difficulty: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level_difficulty)))


@dataclass(frozen=True)
class RoomBudget:
    """Targets one generation attempt has to meet."""

    max_rooms: int
    max_secrets: int
    max_item_rooms: int

    @property
    def min_end_rooms(self) -> int:
        # Boss and shop each need an end room besides the item rooms.
        return 2 + self.max_item_rooms

    @classmethod
    def roll(cls, level_difficulty: int, rng: random.Random) -> RoomBudget:
        """Draw the budget; consumes rng in the order rooms, secrets, item rooms.

        Level 0 uses fixed secret and item counts and draws only for max_rooms.
        """
        level = clamp_level(level_difficulty)
        max_rooms = rng.randrange(ROOM_JITTER) + ROOM_BASE + level * ROOMS_PER_LEVEL
        if level == MIN_LEVEL:
            return cls(max_rooms, BASE_SECRETS, BASE_ITEM_ROOMS)
        max_secrets = BASE_SECRETS + rng.randrange(SECRET_JITTER)
        max_item_rooms = BASE_ITEM_ROOMS + rng.randrange(ITEM_ROOM_JITTER)
        return cls(max_rooms, max_secrets, max_item_rooms)

    def to_dict(self) -> Dict[str, int]:
        return {
            "max_rooms": self.max_rooms,
            "max_secrets": self.max_secrets,
            "max_item_rooms": self.max_item_rooms,
        }
