#!/usr/bin/env python3
"""
Sokoban level generator

Generates deterministic, solvable box-pushing levels from a seed and a
difficulty preset or explicit size, and prints them as text or JSON.
"""

import argparse
import json
import sys

from loguru import logger

from sokogen.errors import ConfigError
from sokogen.generator.config import PRESETS, GeneratorConfig
from sokogen.generator.level_set import DEFAULT_TOTAL_LEVELS, LevelSet
from sokogen.generator.orchestrator import LevelGenerator
from sokogen.logger import setup_logging
from sokogen.solver.solver import BFSSolver


def build_config(args):
    """Explicit size flags win over the preset."""
    if args.width is None and args.height is None and args.boxes is None:
        return args.preset
    return GeneratorConfig(
        width=args.width if args.width is not None else 8,
        height=args.height if args.height is not None else 8,
        box_count=args.boxes if args.boxes is not None else 1,
        steps=args.steps,
    )


def print_solution(level):
    solver = BFSSolver()
    result = solver.solve(level)
    if result.success:
        moves = "".join(d.name[0] for d in result.solution)
        print(
            f"Solved in {result.solution_length} moves ({result.pushes} pushes, "
            f"{result.nodes_explored} nodes, {result.time_taken_ms:.1f} ms): {moves}"
        )
    else:
        print(
            f"No solution found within limits ({result.nodes_explored} nodes, "
            f"{result.time_taken_ms:.1f} ms)"
        )


def run_level_set(args):
    level_set = LevelSet(total=DEFAULT_TOTAL_LEVELS)
    if not 1 <= args.level <= len(level_set):
        raise IndexError(f"--level must be between 1 and {len(level_set)}")
    level = level_set[args.level - 1]

    if args.json:
        print(json.dumps(level.to_dict()))
    else:
        print(f"Level {args.level} / {len(level_set)}:")
        print(level.render())
    if args.solve:
        print_solution(level)


def run_generate(args):
    config = build_config(args)
    generator = LevelGenerator()
    report = generator.generate_with_report(args.seed, config)
    level = report.level

    if args.json:
        data = level.to_dict()
        data["state"] = report.state.value
        data["attempts"] = report.attempts
        print(json.dumps(data))
    else:
        print(f"Generated level with seed {args.seed} ({report.state.value}, "
              f"{report.attempts} attempt(s)):")
        print(level.render())
        print(f"Player: {level.player}")
        print(f"Boxes: {list(level.boxes)}")
        print(f"Targets: {level.targets}")
        if report.scramble is not None:
            print(f"Pulls during scramble: {report.scramble.pull_count}")
    if args.solve:
        print_solution(level)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Sokoban level generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --seed 42                       # Medium preset
  python main.py --seed 7 --preset hard --json   # Hard preset as JSON
  python main.py --seed 123 --width 7 --height 7 --boxes 1 --steps 100 --solve
  python main.py --level 12                      # Level 12 of the catalogue
        """,
    )

    parser.add_argument("--seed", type=int, default=0, help="Base random seed")
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="medium",
        help="Difficulty preset (ignored when size flags are given)",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width")
    parser.add_argument("--height", type=int, default=None, help="Grid height")
    parser.add_argument("--boxes", type=int, default=None, help="Number of boxes")
    parser.add_argument(
        "--steps", type=int, default=None, help="Scramble step budget"
    )
    parser.add_argument(
        "--level",
        type=int,
        default=None,
        help=f"Print level N (1..{DEFAULT_TOTAL_LEVELS}) of the built-in catalogue",
    )
    parser.add_argument(
        "--solve", action="store_true", help="Solve the level with BFS and print moves"
    )
    parser.add_argument("--json", action="store_true", help="Print the level as JSON")
    parser.add_argument(
        "--log-level", default="INFO", help="Minimum log level (e.g. DEBUG, TRACE)"
    )

    args = parser.parse_args()
    setup_logging(args.log_level)

    try:
        if args.level is not None:
            run_level_set(args)
        else:
            run_generate(args)
    except (ConfigError, IndexError) as e:
        logger.error(str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
