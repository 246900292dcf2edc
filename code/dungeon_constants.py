"""Shared constants for the dungeon floor generator."""

from __future__ import annotations

DEFAULT_WIDTH = 15
DEFAULT_HEIGHT = 15

MAX_ATTEMPTS = 10_000  # Full restarts allowed before generation gives up.
SECRET_SELECTION_STEPS = 32  # Lifespan budget of the greedy secret-room loop.

# Room budget: max_rooms = randrange(ROOM_JITTER) + ROOM_BASE + level * ROOMS_PER_LEVEL
MIN_LEVEL = 0
MAX_LEVEL = 10
ROOM_JITTER = 3
ROOM_BASE = 8
ROOMS_PER_LEVEL = 2

BASE_SECRETS = 1
SECRET_JITTER = 2
BASE_ITEM_ROOMS = 1
ITEM_ROOM_JITTER = 2

# Boss and shop each take one end room on top of the item rooms.
RESERVED_END_ROOMS = 2

GROWTH_ACCEPT_PROBABILITY = 0.5
MAX_BORDERING_ROOMS = 1
