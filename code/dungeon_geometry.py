"""Geometry helpers for cardinal neighbor scans on the room grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Cardinal directions with unit vectors on the tile grid."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def side(self) -> str:
        """Name of the door flag facing this direction on a tile."""
        return _SIDE_NAMES[self]

    def opposite(self) -> Direction:
        return Direction.from_tuple((-self.dx, -self.dy))

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> Direction:
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unsupported direction {value}") from exc


_SIDE_NAMES = {
    Direction.NORTH: "top",
    Direction.EAST: "right",
    Direction.SOUTH: "bottom",
    Direction.WEST: "left",
}

# Scan order for every neighbor walk; tie-breaks depend on it.
CARDINAL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


@dataclass(frozen=True, order=True)
class TilePos:
    """Integer tile coordinate."""

    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def offset(self, direction: Direction) -> TilePos:
        return TilePos(self.x + direction.dx, self.y + direction.dy)

    def distance_to(self, other: TilePos) -> float:
        """Euclidean distance in tile units."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y
