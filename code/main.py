#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from dungeon_config import DungeonConfig
from dungeon_constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_ATTEMPTS, SECRET_SELECTION_STEPS
from dungeon_errors import DungeonGenerationError
from dungeon_generator import DungeonGenerator
from grid_renderer import print_layout


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate one dungeon floor and print it.")
    parser.add_argument("-l", "--level", type=int, default=1, help="Level difficulty (clamped to 0-10)")
    parser.add_argument("-s", "--seed", type=int, default=None, help="Random seed; random when omitted")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid width (odd)")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Grid height (odd)")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=MAX_ATTEMPTS,
        help=f"Restart bound before giving up (default: {MAX_ATTEMPTS})",
    )
    parser.add_argument(
        "--secret-steps",
        type=int,
        default=SECRET_SELECTION_STEPS,
        help="Decision steps the secret-room selection may spend",
    )
    parser.add_argument(
        "--strict-item-rooms",
        action="store_true",
        help="Restart when fewer locked rooms than budgeted are placed",
    )
    parser.add_argument("--json", action="store_true", help="Print the layout as JSON")
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Print every phase boundary and the secret-chance overlay",
    )
    parser.add_argument("--log-level", default="warning", help="Logging level (default: warning)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        config = DungeonConfig(
            width=args.width,
            height=args.height,
            max_attempts=args.max_attempts,
            secret_selection_steps=args.secret_steps,
            strict_item_rooms=args.strict_item_rooms,
        )
        generator = DungeonGenerator(config, args.level, args.seed)
        for event in generator.run_phases():
            if args.visualize:
                status = "ok" if event.passed else "FAILED"
                print(f"[tick {event.tick:05d}] attempt {event.attempt}: {event.state.value} {status}")
    except DungeonGenerationError as exc:
        logging.error("%s", exc)
        return 1

    layout = generator.layout
    assert layout is not None
    if args.json:
        print(json.dumps(layout.to_dict(), indent=2, sort_keys=True))
        return 0

    print(f"Seed {generator.seed}, level {args.level}, {generator.attempts} attempt(s)")
    print_layout(layout)
    if args.visualize:
        print()
        print_layout(layout, show_secret_chance=True)
        print()
        for name, value in layout.counters().items():
            print(f"{name}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
