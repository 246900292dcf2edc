"""Fixed-size grid of tiles with cardinal neighbor helpers."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from dungeon_errors import InvalidArgument, InvalidDimensions
from dungeon_geometry import CARDINAL_DIRECTIONS, Direction, TilePos
from dungeon_models import RoomType, Tile


def validate_dimensions(width: int, height: int) -> None:
    """Raise ``InvalidDimensions`` unless both sides are positive and odd."""
    if width <= 0 or height <= 0 or width % 2 == 0 or height % 2 == 0:
        raise InvalidDimensions(width, height)


class Grid:
    """Owns every tile of a W x H room map, addressed by ``(x, y)``."""

    def __init__(self, width: int, height: int) -> None:
        validate_dimensions(width, height)
        self.width = width
        self.height = height
        self._rows: List[List[Tile]] = [
            [Tile(x, y) for x in range(width)] for y in range(height)
        ]

    def __iter__(self) -> Iterator[Tile]:
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return self.width * self.height

    def reset(self) -> None:
        for tile in self:
            tile.reset()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise InvalidArgument(f"Tile {(x, y)} is outside the {self.width}x{self.height} grid")
        return self._rows[y][x]

    def tile_at(self, pos: TilePos) -> Tile:
        return self.tile(pos.x, pos.y)

    def center(self) -> Tile:
        return self._rows[self.height // 2][self.width // 2]

    def _require(self, tile: Optional[Tile]) -> Tile:
        if tile is None:
            raise InvalidArgument("Expected a tile, got None")
        if not self.in_bounds(tile.x, tile.y) or self._rows[tile.y][tile.x] is not tile:
            raise InvalidArgument(f"Tile {(tile.x, tile.y)} does not belong to this grid")
        return tile

    def neighbor(self, tile: Tile, direction: Direction) -> Optional[Tile]:
        """Return the adjacent tile, or None past the grid edge."""
        self._require(tile)
        x, y = tile.x + direction.dx, tile.y + direction.dy
        if not self.in_bounds(x, y):
            return None
        return self._rows[y][x]

    def neighbors(self, tile: Tile) -> Iterator[Tuple[Direction, Tile]]:
        """Yield in-bounds neighbors in N, E, S, W order."""
        for direction in CARDINAL_DIRECTIONS:
            other = self.neighbor(tile, direction)
            if other is not None:
                yield direction, other

    def bordering_rooms(self, tile: Tile) -> int:
        """Count sides that are not empty in-bounds tiles.

        Differs from ``tile.doors``: a room can border another spatially without
        a door between them. Sides past the grid edge count as bordered.
        """
        empty_sides = sum(
            1 for _, other in self.neighbors(tile) if other.type is RoomType.NONE
        )
        return len(CARDINAL_DIRECTIONS) - empty_sides

    def count_neighbors_of_type(self, tile: Tile, room_type: RoomType) -> int:
        return sum(1 for _, other in self.neighbors(tile) if other.type is room_type)

    def connect(self, tile: Tile, direction: Direction) -> Tile:
        """Open a door on both sides of the shared edge and return the neighbor."""
        other = self._neighbor_or_raise(tile, direction)
        tile.set_door(direction)
        other.set_door(direction.opposite())
        return other

    def connect_secret(self, tile: Tile, direction: Direction) -> Tile:
        """Open a secret door on both sides of the shared edge and return the neighbor."""
        other = self._neighbor_or_raise(tile, direction)
        tile.set_secret_door(direction)
        other.set_secret_door(direction.opposite())
        return other

    def _neighbor_or_raise(self, tile: Tile, direction: Direction) -> Tile:
        other = self.neighbor(tile, direction)
        if other is None:
            raise InvalidArgument(
                f"Cannot connect tile {(tile.x, tile.y)} {direction.name}: edge of grid"
            )
        return other
