#!/usr/bin/env python3
"""
gridpath CLI - Run a path search on a text map.

Usage:
    python scripts/run_search.py --start 0,0 --goal 15,9
    python scripts/run_search.py --map maps/walled.txt --start 0,0 --goal 9,4 --mode dijkstra
    python scripts/run_search.py --start 0,0 --goal 15,9 --mode astar --heuristic octile --show-steps
    python scripts/run_search.py --start 0,0 --goal 15,9 --mode bfs --goal-test frontier

Modes:
    breadth_first - FIFO order (alias: bfs)
    dijkstra      - Lowest distance traveled first
    greedy        - Lowest heuristic distance to goal first
    astar         - Distance traveled + heuristic (alias: a*)

Map format:
    One row per line, one digit per cell, last line is y = 0.
    0 open, 1 blocked, 2 light, 3 medium, 4 heavy terrain.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from gridpath import config  # noqa: E402
from gridpath.errors import GridPathError  # noqa: E402
from gridpath.graph import GridGraph  # noqa: E402
from gridpath.maps import load_map  # noqa: E402
from gridpath.search import GOAL_TESTS, SearchEngine  # noqa: E402
from gridpath.strategies import HEURISTICS, MODES  # noqa: E402


def parse_cell(value: str) -> tuple[int, int]:
    """Parse an 'x,y' argument."""
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected x,y but got '{value}'") from e
    return (x, y)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a grid path search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--map",
        type=str,
        default=str(config.DEFAULT_MAP_PATH),
        help="Map file, or name of a map in maps/ (default: maps/demo.txt)",
    )
    parser.add_argument(
        "--start",
        type=parse_cell,
        required=True,
        help="Start cell as x,y",
    )
    parser.add_argument(
        "--goal",
        type=parse_cell,
        required=True,
        help="Goal cell as x,y",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=config.DEFAULT_MODE,
        help=f"Search mode: {', '.join(MODES)} (default: {config.DEFAULT_MODE})",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        default=config.DEFAULT_HEURISTIC,
        choices=list(HEURISTICS),
        help=f"Heuristic for greedy/astar (default: {config.DEFAULT_HEURISTIC})",
    )
    parser.add_argument(
        "--goal-test",
        type=str,
        default=config.DEFAULT_GOAL_TEST,
        choices=list(GOAL_TESTS),
        help=f"When the search succeeds (default: {config.DEFAULT_GOAL_TEST})",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=config.MAX_STEPS,
        help=f"Maximum steps before giving up (default: {config.MAX_STEPS})",
    )
    parser.add_argument(
        "--keep-searching",
        action="store_true",
        help="Keep expanding after the goal is reached until the frontier is empty",
    )
    parser.add_argument(
        "--show-steps",
        action="store_true",
        help="Print frontier/explored sizes after every step",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        graph = GridGraph.build(load_map(args.map))
        engine = SearchEngine(
            mode=args.mode,
            heuristic=args.heuristic,
            goal_test=args.goal_test,
            exit_on_goal=not args.keep_searching,
        )
        engine.init(graph, args.start, args.goal)
    except (GridPathError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print("Grid Path Search")
    print("=" * 60)
    print(f"  Map:   {args.map} ({graph.width}x{graph.height}, {len(graph.blocked)} blocked)")
    print(f"  Start: {args.start}")
    print(f"  Goal:  {args.goal}")
    print(f"  Mode:  {engine.mode} - {engine.strategy.description}")
    print(f"  Goal test: {engine.goal_test}")
    print("=" * 60 + "\n")

    try:
        if args.show_steps:
            while not engine.is_complete and engine.iterations < args.max_steps:
                snapshot = engine.step()
                print(
                    f"  step {snapshot.iteration:4}: current={snapshot.current} "
                    f"frontier={len(snapshot.frontier):3} explored={len(snapshot.explored):3}"
                )
            result = engine.result()
        else:
            result = engine.run(max_steps=args.max_steps)
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    # Print results
    print("\n" + "=" * 60)
    if result.found:
        print(f"Path found: {result.step_count} steps, cost {result.cost:.1f}")
    elif result.status.is_complete:
        print("No path: frontier exhausted")
    else:
        print(f"Stopped after {result.iterations} iterations without completing")
    print("=" * 60)

    if result.path:
        print("\nPath:")
        print("  " + " -> ".join(f"({x},{y})" for x, y in result.path))

    print(f"\nIterations: {result.iterations}")
    print(f"Explored:   {result.explored_count}")
    print(f"Time:       {result.elapsed_ms:.2f}ms")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
