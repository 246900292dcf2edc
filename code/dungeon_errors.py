"""Exception types raised by the dungeon generator."""

from __future__ import annotations

from typing import Dict, Optional


class DungeonGenerationError(Exception):
    """Base class for every error the generator raises."""


class InvalidArgument(DungeonGenerationError, ValueError):
    """A caller or internal phase broke a usage contract (missing tile, bad value)."""


class InvalidDimensions(InvalidArgument):
    """Grid width and height must both be positive odd numbers."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"Grid dimensions must be positive and odd, got {width}x{height}"
        )
        self.width = width
        self.height = height


class GenerationFailed(DungeonGenerationError, RuntimeError):
    """No attempt satisfied every phase postcondition within the attempt bound."""

    def __init__(self, attempts: int, failures: Optional[Dict[str, int]] = None) -> None:
        self.attempts = attempts
        self.failures = dict(failures or {})
        detail = ", ".join(f"{state}={count}" for state, count in sorted(self.failures.items()))
        message = f"Dungeon generation failed after {attempts} attempts"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
