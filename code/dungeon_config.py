"""Configuration container for the dungeon floor generator."""

from __future__ import annotations

from dataclasses import dataclass

from dungeon_constants import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_ATTEMPTS,
    SECRET_SELECTION_STEPS,
)
from dungeon_errors import InvalidArgument
from dungeon_grid import validate_dimensions


@dataclass
class DungeonConfig:
    """Aggregates all tunable parameters for dungeon generation."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    # Full restarts allowed before GenerationFailed is raised.
    max_attempts: int = MAX_ATTEMPTS
    # Decision steps the greedy secret-room selection may spend.
    secret_selection_steps: int = SECRET_SELECTION_STEPS
    # Reject attempts that place fewer locked rooms than budgeted.
    strict_item_rooms: bool = False
    collect_metrics: bool = False

    def __post_init__(self) -> None:
        validate_dimensions(self.width, self.height)
        if self.max_attempts <= 0:
            raise InvalidArgument("DungeonConfig max_attempts must be positive")
        if self.secret_selection_steps <= 0:
            raise InvalidArgument("DungeonConfig secret_selection_steps must be positive")
