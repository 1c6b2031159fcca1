#!/usr/bin/env python3
"""
Compare all search modes on one map.

Usage:
    python scripts/compare_modes.py
    python scripts/compare_modes.py --map maps/demo.txt --start 0,0 --goal 15,9 --heuristic octile
"""

from __future__ import annotations

import argparse
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

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from gridpath import config
from gridpath.graph import GridGraph
from gridpath.maps import load_map
from gridpath.search import GOAL_TESTS, SearchEngine
from gridpath.strategies import HEURISTICS, MODES


def parse_cell(value: str) -> tuple[int, int]:
    x, y = (int(part) for part in value.split(","))
    return (x, y)


def run_comparison(args: argparse.Namespace) -> None:
    graph = GridGraph.build(load_map(args.map))

    print("=" * 70)
    print("Grid Path Search - Mode Comparison")
    print("=" * 70)
    print(f"\nMap {args.map} ({graph.width}x{graph.height}), {args.start} -> {args.goal}")
    print(f"Heuristic: {args.heuristic}, goal test: {args.goal_test}\n")
    print(f"  {'mode':15} {'status':10} {'steps':>6} {'cost':>8} {'iters':>6} {'explored':>9} {'ms':>8}")
    print("-" * 70)

    for mode in MODES:
        engine = SearchEngine(mode=mode, heuristic=args.heuristic, goal_test=args.goal_test)
        try:
            engine.init(graph, args.start, args.goal)
            result = engine.run(max_steps=config.MAX_STEPS)
        except Exception as e:
            print(f"  {mode:15} : ERROR - {e}")
            continue

        cost = f"{result.cost:.1f}" if result.cost is not None else "-"
        print(
            f"  {mode:15} {result.status.value:10} {result.step_count:6} {cost:>8} "
            f"{result.iterations:6} {result.explored_count:9} {result.elapsed_ms:8.2f}"
        )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Compare search modes on one map")
    parser.add_argument("--map", default=str(config.DEFAULT_MAP_PATH))
    parser.add_argument("--start", type=parse_cell, default=(0, 0))
    parser.add_argument("--goal", type=parse_cell, default=(15, 9))
    parser.add_argument("--heuristic", default=config.DEFAULT_HEURISTIC, choices=list(HEURISTICS))
    parser.add_argument("--goal-test", default=config.DEFAULT_GOAL_TEST, choices=list(GOAL_TESTS))
    run_comparison(parser.parse_args())
