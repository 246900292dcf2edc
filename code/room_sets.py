"""Ordered tile collections that serve as work queues and result sets."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Dict, Iterator, List, Optional, Set

from dungeon_errors import InvalidArgument
from dungeon_geometry import TilePos
from dungeon_models import Tile


class RoomSet:
    """Insertion-ordered tiles with coordinate-based membership.

    Order drives processing order and tie-breaks. Membership is O(1) by
    position. Appending while iterating by index is supported, so the set can
    act as a breadth-first queue.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._tiles: List[Tile] = []
        self._positions: Set[TilePos] = set()

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(list(self._tiles))

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Tile):
            return item.pos in self._positions
        if isinstance(item, TilePos):
            return item in self._positions
        return False

    def __repr__(self) -> str:
        return f"RoomSet({self.name!r}, {[tile.pos.to_tuple() for tile in self._tiles]})"

    def add(self, tile: Optional[Tile]) -> int:
        """Append ``tile`` and return its 1-based position in the set."""
        if tile is None:
            raise InvalidArgument(f"Cannot add a missing tile to {self.name}")
        if tile.pos in self._positions:
            raise InvalidArgument(f"Tile {tile.pos.to_tuple()} is already in {self.name}")
        self._tiles.append(tile)
        self._positions.add(tile.pos)
        return len(self._tiles)

    def positions(self) -> List[TilePos]:
        return [tile.pos for tile in self._tiles]

    def clear(self) -> None:
        self._tiles.clear()
        self._positions.clear()


@dataclass
class RoomSets:
    """The per-attempt collections, in the order phases fill them."""

    rooms: RoomSet = field(default_factory=lambda: RoomSet("rooms"))
    end_rooms: RoomSet = field(default_factory=lambda: RoomSet("end_rooms"))
    item_rooms: RoomSet = field(default_factory=lambda: RoomSet("item_rooms"))
    secret_candidates: RoomSet = field(default_factory=lambda: RoomSet("secret_candidates"))
    secret_rooms: RoomSet = field(default_factory=lambda: RoomSet("secret_rooms"))
    super_candidates: RoomSet = field(default_factory=lambda: RoomSet("super_candidates"))

    def all(self) -> Dict[str, RoomSet]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def counts(self) -> Dict[str, int]:
        return {name: len(room_set) for name, room_set in self.all().items()}
