"""Helpers for collecting instrumentation data during dungeon generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class PhaseMetrics:
    """Aggregated metrics for a single phase across attempts."""

    name: str
    invocations: int = 0
    failures: int = 0
    total_time: float = 0.0

    def record(self, duration: float, passed: bool) -> None:
        self.invocations += 1
        self.total_time += duration
        if not passed:
            self.failures += 1

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        failure_rate = self.failures / self.invocations if self.invocations else 0.0
        return {
            "invocations": self.invocations,
            "failures": self.failures,
            "failure_rate": failure_rate,
            "total_time": self.total_time,
            "average_time": average_time,
        }


@dataclass
class GenerationMetrics:
    """Container for phase metrics and restart counts of a generation run."""

    phases: Dict[str, PhaseMetrics] = field(default_factory=dict)
    attempts: int = 0
    restarts_by_state: Dict[str, int] = field(default_factory=dict)

    def record_phase_run(self, name: str, duration: float, passed: bool) -> None:
        metrics = self.phases.get(name)
        if metrics is None:
            metrics = PhaseMetrics(name=name)
            self.phases[name] = metrics
        metrics.record(duration, passed)

    def record_attempt(self) -> None:
        self.attempts += 1

    def record_restart(self, state: str) -> None:
        self.restarts_by_state[state] = self.restarts_by_state.get(state, 0) + 1

    def snapshot(self) -> Dict[str, object]:
        return {
            "attempts": self.attempts,
            "restarts": dict(self.restarts_by_state),
            "phases": {name: metrics.to_dict() for name, metrics in self.phases.items()},
        }
