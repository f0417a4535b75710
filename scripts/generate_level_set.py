#!/usr/bin/env python3
"""
Generate the level catalogue (or a range of seeds for one config) to CSV.

Each row records how the level was obtained and the level itself, so a
batch can be inspected for fallbacks or tuned against the retry limits.
"""

import argparse
import csv
import json
import sys
import time
from pathlib import Path
from typing import Dict

from tqdm import tqdm

# Add parent directory to path to import sokogen
sys.path.insert(0, str(Path(__file__).parent.parent))

from sokogen.game.levels import CLASSIC_LEVELS
from sokogen.generator.config import PRESETS, GeneratorConfig, resolve_config
from sokogen.generator.level_set import config_for_level, seed_for_level
from sokogen.generator.orchestrator import GenerationReport, LevelGenerator
from sokogen.logger import setup_logging
from sokogen.solver.solver import BFSSolver

FIELDNAMES = [
    "index",
    "seed",
    "width",
    "height",
    "boxes",
    "state",
    "attempts",
    "pulls",
    "solution_length",
    "level",
]


def report_to_row(
    index: int, seed: int, report: GenerationReport, solver: BFSSolver = None
) -> Dict:
    level = report.level
    solution_length = ""
    if solver is not None:
        result = solver.solve(level)
        solution_length = result.solution_length if result.success else -1

    return {
        "index": index,
        "seed": seed,
        "width": level.width,
        "height": level.height,
        "boxes": len(level.boxes),
        "state": report.state.value,
        "attempts": report.attempts,
        "pulls": report.scramble.pull_count if report.scramble else "",
        "solution_length": solution_length,
        "level": json.dumps(level.to_dict()),
    }


def main():
    parser = argparse.ArgumentParser(description="Generate a batch of levels to CSV")
    parser.add_argument(
        "--output", type=str, default="levels.csv", help="Output CSV file"
    )
    parser.add_argument(
        "--count", type=int, default=60,
        help="Number of levels (catalogue size without --preset)",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Use one preset for every level instead of the catalogue ramp",
    )
    parser.add_argument(
        "--start-seed",
        type=int,
        default=None,
        help="With --preset, seed of the first level (incremented per level)",
    )
    parser.add_argument(
        "--solve", action="store_true", help="Record BFS solution lengths"
    )
    parser.add_argument(
        "--depth-cap", type=int, default=200, help="BFS depth limit"
    )
    parser.add_argument(
        "--timeout-ms", type=int, default=2000, help="BFS timeout in milliseconds"
    )
    args = parser.parse_args()

    setup_logging("WARNING")

    generator = LevelGenerator()
    solver = (
        BFSSolver(depth_cap=args.depth_cap, timeout_ms=args.timeout_ms)
        if args.solve
        else None
    )

    print(f"Generating {args.count} levels...")
    print(f"Output: {args.output}")
    start_time = time.time()

    with open(args.output, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=FIELDNAMES)
        writer.writeheader()

        # Catalogue entries before the first generated level are hand-authored
        first = 0 if args.preset is not None else len(CLASSIC_LEVELS)
        for index in tqdm(range(first, args.count), desc="Levels", unit="level"):
            if args.preset is not None:
                seed = (args.start_seed or 0) + index
                config: GeneratorConfig = resolve_config(args.preset)
            else:
                seed = seed_for_level(index)
                config = config_for_level(index + 1)

            report = generator.generate_with_report(seed, config)
            writer.writerow(report_to_row(index, seed, report, solver))

    elapsed = time.time() - start_time
    stats = generator.stats
    print(f"\n=== Generation Complete ===")
    print(f"Levels: {stats.levels:,}")
    print(f"Attempts: {stats.attempts:,} ({stats.attempts / max(stats.levels, 1):.1f} per level)")
    print(f"Fallbacks: {stats.fallbacks:,}")
    print(f"Time elapsed: {elapsed:.1f}s")


if __name__ == "__main__":
    main()
