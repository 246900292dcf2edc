"""Data container for one generation attempt's dungeon state."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from dungeon_config import DungeonConfig
from dungeon_errors import InvalidArgument
from dungeon_grid import Grid
from dungeon_models import RoomType, Tile
from room_budget import RoomBudget
from room_sets import RoomSet, RoomSets


class DungeonLayout:
    """Stores the grid, room sets and budget of a single attempt.

    Phases mutate it while an attempt runs. Once the controller accepts an
    attempt the layout is handed out and treated as read-only.
    """

    def __init__(self, config: DungeonConfig, budget: RoomBudget) -> None:
        self.config = config
        self.budget = budget
        self.grid = Grid(config.width, config.height)
        self.room_sets = RoomSets()
        self.start_room: Optional[Tile] = None
        self.boss_room: Optional[Tile] = None
        self.shop_room: Optional[Tile] = None
        self.super_secret_room: Optional[Tile] = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def rooms(self) -> RoomSet:
        return self.room_sets.rooms

    @property
    def end_rooms(self) -> RoomSet:
        return self.room_sets.end_rooms

    @property
    def item_rooms(self) -> RoomSet:
        return self.room_sets.item_rooms

    @property
    def secret_candidates(self) -> RoomSet:
        return self.room_sets.secret_candidates

    @property
    def secret_rooms(self) -> RoomSet:
        return self.room_sets.secret_rooms

    @property
    def super_candidates(self) -> RoomSet:
        return self.room_sets.super_candidates

    def tile(self, x: int, y: int) -> Tile:
        return self.grid.tile(x, y)

    def tiles(self) -> List[Tile]:
        return list(self.grid)

    def tiles_of_type(self, room_type: RoomType) -> List[Tile]:
        return [tile for tile in self.grid if tile.type is room_type]

    def count(self, room_type: RoomType) -> int:
        return sum(1 for tile in self.grid if tile.type is room_type)

    def create_room(self, tile: Tile, room_type: RoomType) -> Tile:
        """Claim an empty tile and append it to the room queue."""
        if tile.type is not RoomType.NONE:
            raise InvalidArgument(
                f"Tile {tile.pos.to_tuple()} is already a {tile.type.name} room"
            )
        tile.type = room_type
        tile.region = self.rooms.add(tile)
        return tile

    def counters(self) -> Dict[str, int]:
        """Debug counters for host overlays."""
        return {
            "created_rooms": len(self.rooms),
            "max_rooms": self.budget.max_rooms,
            "end_rooms": len(self.end_rooms),
            "item_rooms": len(self.item_rooms),
            "max_item_rooms": self.budget.max_item_rooms,
            "secret_candidates": len(self.secret_candidates),
            "secret_rooms": len(self.secret_rooms),
            "max_secrets": self.budget.max_secrets,
            "super_candidates": len(self.super_candidates),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Deterministic, JSON-ready snapshot of the layout."""
        return {
            "width": self.width,
            "height": self.height,
            "budget": self.budget.to_dict(),
            "tiles": [tile.to_dict() for tile in self.grid if tile.is_room],
            "room_sets": {
                name: [list(pos.to_tuple()) for pos in room_set.positions()]
                for name, room_set in self.room_sets.all().items()
            },
        }
