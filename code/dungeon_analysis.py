"""Graph-level checks and statistics for generated layouts."""

from __future__ import annotations

from typing import Iterator

import networkx as nx

from dungeon_geometry import CARDINAL_DIRECTIONS, TilePos
from dungeon_layout import DungeonLayout
from dungeon_models import RoomType

SINGLE_ROOM_TYPES = (
    RoomType.START,
    RoomType.BOSS,
    RoomType.SPECIAL,
    RoomType.SUPER_SECRET,
)


def build_door_graph(layout: DungeonLayout, include_secret: bool = True) -> nx.Graph:
    """Rooms as nodes, one edge per door pair (secret doors optional)."""
    graph = nx.Graph()
    for tile in layout.grid:
        if not tile.is_room:
            continue
        if not include_secret and tile.type in (RoomType.SECRET, RoomType.SUPER_SECRET):
            continue
        graph.add_node(tile.pos, type=tile.type)

    for tile in layout.grid:
        if tile.pos not in graph:
            continue
        for direction, neighbor in layout.grid.neighbors(tile):
            if neighbor.pos not in graph:
                continue
            if tile.door_towards(direction):
                graph.add_edge(tile.pos, neighbor.pos, secret=False)
            elif include_secret and tile.secret_door_towards(direction):
                graph.add_edge(tile.pos, neighbor.pos, secret=True)
    return graph


def is_connected(layout: DungeonLayout, include_secret: bool = True) -> bool:
    graph = build_door_graph(layout, include_secret)
    return graph.number_of_nodes() > 0 and nx.is_connected(graph)


def layout_diameter(layout: DungeonLayout) -> int:
    """Longest shortest path between rooms over normal doors."""
    graph = build_door_graph(layout, include_secret=False)
    if graph.number_of_nodes() < 2 or not nx.is_connected(graph):
        return 0
    return int(nx.diameter(graph))


def start_distances(layout: DungeonLayout) -> dict[TilePos, int]:
    """Door-steps from the start room to every room reachable over normal doors."""
    if layout.start_room is None:
        return {}
    graph = build_door_graph(layout, include_secret=False)
    return dict(nx.single_source_shortest_path_length(graph, layout.start_room.pos))


def iter_invariant_violations(layout: DungeonLayout) -> Iterator[str]:
    """Yield a message for every broken layout invariant; nothing when valid."""
    grid = layout.grid
    for tile in grid:
        where = tile.pos.to_tuple()
        if tile.type is RoomType.NONE:
            if tile.doors or tile.secret_doors:
                yield f"Empty tile {where} has doors"
            if tile.region != -1:
                yield f"Empty tile {where} has region {tile.region}"
        for direction in CARDINAL_DIRECTIONS:
            neighbor = grid.neighbor(tile, direction)
            if neighbor is None:
                if tile.door_towards(direction) or tile.secret_door_towards(direction):
                    yield f"Tile {where} has a door {direction.name} off the grid"
                continue
            back = direction.opposite()
            if tile.door_towards(direction) != neighbor.door_towards(back):
                yield f"Door between {where} and {neighbor.pos.to_tuple()} is one-sided"
            if tile.secret_door_towards(direction) != neighbor.secret_door_towards(back):
                yield f"Secret door between {where} and {neighbor.pos.to_tuple()} is one-sided"

    for room_type in SINGLE_ROOM_TYPES:
        count = layout.count(room_type)
        if count != 1:
            yield f"Expected exactly one {room_type.name} room, found {count}"

    if len(layout.rooms) != layout.budget.max_rooms:
        yield f"Placed {len(layout.rooms)} rooms, budget is {layout.budget.max_rooms}"
    if layout.count(RoomType.SECRET) != layout.budget.max_secrets:
        yield (
            f"Found {layout.count(RoomType.SECRET)} secret rooms, "
            f"budget is {layout.budget.max_secrets}"
        )
    if layout.count(RoomType.LOCKED) > layout.budget.max_item_rooms:
        yield (
            f"Found {layout.count(RoomType.LOCKED)} locked rooms, "
            f"budget is {layout.budget.max_item_rooms}"
        )
    if not is_connected(layout):
        yield "Rooms do not form a single connected graph"
