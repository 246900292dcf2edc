"""DungeonGenerator runs the generation phases and restarts on any failed check."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from time import perf_counter
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from dungeon_config import DungeonConfig
from dungeon_errors import GenerationFailed
from dungeon_layout import DungeonLayout
from metrics import GenerationMetrics
from phase_context import PhaseContext
from phases import (
    run_compute_secret_chances,
    run_find_end_rooms,
    run_find_super_candidates,
    run_growth_phase,
    run_pick_boss_room,
    run_pick_item_rooms,
    run_pick_secret_rooms,
    run_pick_shop_room,
    run_pick_super_secret_room,
)
from room_budget import RoomBudget

logger = logging.getLogger(__name__)


class GenerationState(Enum):
    """Controller states, in the order an attempt walks through them."""

    RESET = "reset"
    GROW = "grow"
    FIND_ENDS = "find_ends"
    PICK_BOSS = "pick_boss"
    PICK_SHOP = "pick_shop"
    PICK_ITEMS = "pick_items"
    SCAN_SECRET_CHANCE = "scan_secret_chance"
    PICK_SECRETS = "pick_secrets"
    FIND_SUPER_CANDIDATES = "find_super_candidates"
    PICK_SUPER = "pick_super"
    DONE = "done"


@dataclass(frozen=True)
class PhaseEvent:
    """Emitted at every phase boundary; the host may pace or draw here."""

    tick: int
    attempt: int
    state: GenerationState
    passed: bool


def _grow(context: PhaseContext) -> bool:
    return run_growth_phase(context) == context.budget.max_rooms


def _scan_secret_chance(context: PhaseContext) -> bool:
    run_compute_secret_chances(context)
    return True


PhaseFunc = Callable[[PhaseContext], bool]

PHASES: List[Tuple[GenerationState, PhaseFunc]] = [
    (GenerationState.GROW, _grow),
    (GenerationState.FIND_ENDS, run_find_end_rooms),
    (GenerationState.PICK_BOSS, run_pick_boss_room),
    (GenerationState.PICK_SHOP, run_pick_shop_room),
    (GenerationState.PICK_ITEMS, run_pick_item_rooms),
    (GenerationState.SCAN_SECRET_CHANCE, _scan_secret_chance),
    (GenerationState.PICK_SECRETS, run_pick_secret_rooms),
    (GenerationState.FIND_SUPER_CANDIDATES, run_find_super_candidates),
    (GenerationState.PICK_SUPER, run_pick_super_secret_room),
]


class DungeonGenerator:
    """Manages the overall process of generating a dungeon floor layout.

    Every attempt starts from a fresh layout. A failed phase check throws the
    whole attempt away and starts over, up to ``config.max_attempts`` times.
    Only fully validated layouts are ever stored in ``self.layout``.
    """

    def __init__(
        self,
        config: DungeonConfig,
        level_difficulty: int = 0,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config
        self.level_difficulty = level_difficulty
        if seed is None:
            # Pick a seed and log it, so a run can be reproduced.
            seed = random.randint(0, 1_000_000)
            logger.info("Using random seed %d", seed)
        self.seed = seed
        self.rng = random.Random(seed)
        self.metrics = GenerationMetrics() if config.collect_metrics else None
        self.layout: Optional[DungeonLayout] = None
        self.attempts = 0
        self.failures: Dict[str, int] = {}
        self._tick = 0

    def _run_phase(self, state: GenerationState, func: PhaseFunc, context: PhaseContext) -> bool:
        if self.metrics is None:
            return func(context)

        start = perf_counter()
        passed = False
        try:
            passed = func(context)
            return passed
        finally:
            self.metrics.record_phase_run(state.value, perf_counter() - start, passed)

    def _event(self, state: GenerationState, passed: bool = True) -> PhaseEvent:
        self._tick += 1
        return PhaseEvent(tick=self._tick, attempt=self.attempts, state=state, passed=passed)

    def _new_attempt(self) -> PhaseContext:
        budget = RoomBudget.roll(self.level_difficulty, self.rng)
        layout = DungeonLayout(self.config, budget)
        return PhaseContext(config=self.config, layout=layout, rng=self.rng)

    def run_phases(self) -> Iterator[PhaseEvent]:
        """Run attempts until one passes every check, yielding after each phase.

        Raises ``GenerationFailed`` once ``config.max_attempts`` attempts failed.
        """
        self.attempts = 0
        self.failures = {}
        for _ in range(self.config.max_attempts):
            self.attempts += 1
            if self.metrics is not None:
                self.metrics.record_attempt()
            context = self._new_attempt()
            yield self._event(GenerationState.RESET)

            failed_state: Optional[GenerationState] = None
            for state, func in PHASES:
                passed = self._run_phase(state, func, context)
                yield self._event(state, passed)
                if not passed:
                    failed_state = state
                    break

            if failed_state is None:
                self.layout = context.layout
                logger.info(
                    "Generated dungeon (seed %s, level %s) after %d attempt(s): %s",
                    self.seed,
                    self.level_difficulty,
                    self.attempts,
                    context.layout.counters(),
                )
                yield self._event(GenerationState.DONE)
                return

            self.failures[failed_state.value] = self.failures.get(failed_state.value, 0) + 1
            if self.metrics is not None:
                self.metrics.record_restart(failed_state.value)
            logger.debug(
                "Attempt %d failed at %s (%s); restarting",
                self.attempts,
                failed_state.value,
                context.layout.counters(),
            )

        logger.error(
            "Giving up after %d attempts (seed %s, level %s)",
            self.attempts,
            self.seed,
            self.level_difficulty,
        )
        raise GenerationFailed(self.attempts, self.failures)

    def generate(self) -> DungeonLayout:
        """Generates the dungeon and returns the accepted layout."""
        for _ in self.run_phases():
            pass
        assert self.layout is not None
        return self.layout


def generate(
    level_difficulty: int,
    seed: Optional[int],
    *,
    width: Optional[int] = None,
    height: Optional[int] = None,
    max_attempts: Optional[int] = None,
    **config_overrides,
) -> DungeonLayout:
    """Generate one dungeon floor; deterministic for a given seed, level and size."""
    if width is not None:
        config_overrides["width"] = width
    if height is not None:
        config_overrides["height"] = height
    if max_attempts is not None:
        config_overrides["max_attempts"] = max_attempts
    config = DungeonConfig(**config_overrides)
    return DungeonGenerator(config, level_difficulty, seed).generate()
