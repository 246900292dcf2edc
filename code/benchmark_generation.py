#!/usr/bin/env python3

# Generates many floors from a seeded harness and summarizes restart cost
# and floor shape. Invariant violations are counted per run.

from __future__ import annotations

import argparse
import json
import logging
import random
import statistics
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

import networkx as nx

from dungeon_analysis import build_door_graph, iter_invariant_violations, layout_diameter
from dungeon_config import DungeonConfig
from dungeon_generator import DungeonGenerator

QUANTILES = (5, 25, 50, 75, 95, 99)


@dataclass
class FloorSample:
    seed: int
    seconds: float
    attempts: int
    rooms: int
    end_rooms: int
    secret_rooms: int
    diameter: int
    cycles: int
    violations: List[str] = field(default_factory=list)
    restarts: Dict[str, int] = field(default_factory=dict)


def summarize(values: Sequence[float]) -> Dict[str, float]:
    """Count, mean, extremes and the ``QUANTILES`` cut points of ``values``."""
    if not values:
        return {"count": 0}
    ordered = sorted(values)
    if len(ordered) > 1:
        cuts = statistics.quantiles(ordered, n=100, method="inclusive")
    else:
        cuts = [ordered[0]] * 99
    summary = {
        "count": len(ordered),
        "mean": statistics.fmean(ordered),
        "min": ordered[0],
        "max": ordered[-1],
    }
    for q in QUANTILES:
        summary[f"p{q}"] = cuts[q - 1]
    return summary


def sample_floor(seed: int, level: int, config: DungeonConfig) -> FloorSample:
    generator = DungeonGenerator(config, level, seed)
    began = time.perf_counter()
    layout = generator.generate()
    elapsed = time.perf_counter() - began

    doors = build_door_graph(layout, include_secret=False)
    return FloorSample(
        seed=seed,
        seconds=elapsed,
        attempts=generator.attempts,
        rooms=len(layout.rooms),
        end_rooms=len(layout.end_rooms),
        secret_rooms=len(layout.secret_rooms),
        diameter=layout_diameter(layout),
        cycles=len(nx.cycle_basis(doors)),
        violations=list(iter_invariant_violations(layout)),
        restarts=dict(generator.failures),
    )


def sample_floors(runs: int, seed: Optional[int], level: int, config: DungeonConfig) -> List[FloorSample]:
    """Draw one floor seed per run from a harness RNG seeded with ``seed``."""
    harness = random.Random(seed)
    return [sample_floor(harness.randint(0, 1_000_000), level, config) for _ in range(runs)]


def as_duration(value: float) -> str:
    return f"{value:.3f}s" if value >= 1.0 else f"{value * 1000:.1f}ms"


def as_count(value: float) -> str:
    return f"{value:.1f}"


COLUMNS: List[tuple[str, str, Callable[[FloorSample], float], Callable[[float], str]]] = [
    ("seconds", "Generation time", lambda s: s.seconds, as_duration),
    ("attempts", "Attempts per floor", lambda s: s.attempts, as_count),
    ("rooms", "Rooms placed", lambda s: s.rooms, as_count),
    ("end_rooms", "End rooms", lambda s: s.end_rooms, as_count),
    ("diameter", "Door-graph diameter", lambda s: s.diameter, as_count),
    ("cycles", "Door-graph cycles", lambda s: s.cycles, as_count),
]


def print_summary(label: str, summary: Dict[str, float], fmt: Callable[[float], str]) -> None:
    if not summary["count"]:
        print(f"{label}: no data")
        return
    quantiles = " ".join(f"p{q}={fmt(summary[f'p{q}'])}" for q in QUANTILES)
    print(
        f"{label}: mean {fmt(summary['mean'])}, "
        f"range {fmt(summary['min'])}..{fmt(summary['max'])}, {quantiles}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark dungeon floor generation over many seeds.")
    parser.add_argument("-n", "--runs", type=int, default=20, help="Floors to generate (default: 20)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the harness RNG")
    parser.add_argument("-l", "--level", type=int, default=1, help="Level difficulty for every floor")
    parser.add_argument("--width", type=int, default=15)
    parser.add_argument("--height", type=int, default=15)
    parser.add_argument("--json", dest="json_path", default=None, help="Also write samples to this file")
    parser.add_argument("--log-level", default="warning")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    if args.runs <= 0:
        parser.error("--runs must be positive")

    config = DungeonConfig(width=args.width, height=args.height)
    samples = sample_floors(args.runs, args.seed, args.level, config)

    for number, sample in enumerate(samples, start=1):
        flag = f"{len(sample.violations)} violations" if sample.violations else "ok"
        print(
            f"#{number:02d} seed {sample.seed}: {as_duration(sample.seconds)}, "
            f"{sample.attempts} attempts, {sample.rooms} rooms, "
            f"diameter {sample.diameter}, {flag}"
        )
    print()

    summaries = {}
    for key, label, pick, fmt in COLUMNS:
        summaries[key] = summarize([float(pick(sample)) for sample in samples])
        print_summary(label, summaries[key], fmt)

    restarts: Counter[str] = Counter()
    for sample in samples:
        restarts.update(sample.restarts)
    if restarts:
        print()
        print("Restarts by failed state: " + ", ".join(f"{state}={n}" for state, n in restarts.most_common()))

    if args.json_path:
        payload = {
            "summaries": summaries,
            "restarts": dict(restarts),
            "samples": [asdict(sample) for sample in samples],
        }
        with open(args.json_path, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
        print(f"\nWrote {len(samples)} samples to {args.json_path}")

    return 1 if any(sample.violations for sample in samples) else 0


if __name__ == "__main__":
    raise SystemExit(main())
