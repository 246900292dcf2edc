"""Core dataclasses used by the dungeon generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from dungeon_geometry import CARDINAL_DIRECTIONS, Direction, TilePos


class RoomType(Enum):
    """Specifies what a grid tile holds."""
    NONE = 0 # Empty tile, not part of the dungeon.
    NORMAL = 1 # Placed by the growth phase.
    START = 2 # Center tile, the first room placed.
    BOSS = 3 # End room farthest from the start.
    SPECIAL = 4 # Shop; end room closest to the start.
    LOCKED = 5 # Item room.
    SECRET = 6 # Hidden room bordering several placed rooms.
    SUPER_SECRET = 7 # Hidden room hanging off a single normal room.


# Room types a secret door may lead into.
SECRET_DOOR_BLOCKED_TYPES = frozenset(
    (RoomType.NONE, RoomType.BOSS, RoomType.SECRET, RoomType.SUPER_SECRET)
)


@dataclass
class Tile:
    """One grid cell with its door and secret-door flags."""

    x: int
    y: int
    region: int = -1
    type: RoomType = RoomType.NONE

    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    secret_chance: int = 0
    secret_top: bool = False
    secret_right: bool = False
    secret_bottom: bool = False
    secret_left: bool = False

    @property
    def pos(self) -> TilePos:
        return TilePos(self.x, self.y)

    @property
    def doors(self) -> int:
        return sum(1 for direction in CARDINAL_DIRECTIONS if self.door_towards(direction))

    @property
    def secret_doors(self) -> int:
        return sum(
            1 for direction in CARDINAL_DIRECTIONS if self.secret_door_towards(direction)
        )

    @property
    def is_room(self) -> bool:
        return self.type is not RoomType.NONE

    def door_towards(self, direction: Direction) -> bool:
        return getattr(self, direction.side)

    def secret_door_towards(self, direction: Direction) -> bool:
        return getattr(self, "secret_" + direction.side)

    def set_door(self, direction: Direction) -> None:
        setattr(self, direction.side, True)

    def set_secret_door(self, direction: Direction) -> None:
        setattr(self, "secret_" + direction.side, True)

    def reset(self) -> None:
        """Return the tile to the empty state, keeping its coordinates."""
        self.region = -1
        self.type = RoomType.NONE
        self.secret_chance = 0
        for direction in CARDINAL_DIRECTIONS:
            setattr(self, direction.side, False)
            setattr(self, "secret_" + direction.side, False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "region": self.region,
            "type": self.type.name,
            "doors": [self.door_towards(d) for d in CARDINAL_DIRECTIONS],
            "secret_doors": [self.secret_door_towards(d) for d in CARDINAL_DIRECTIONS],
            "secret_chance": self.secret_chance,
        }
