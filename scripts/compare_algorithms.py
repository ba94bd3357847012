#!/usr/bin/env python3
"""
Compare every search algorithm on one start/goal pair.

Usage:
    python scripts/compare_algorithms.py --graph data/cities.json --start Gothenburg --goal Stockholm
    python scripts/compare_algorithms.py --graph data/maze.txt --start 1,1 --goal 7,18 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathsearch.graph.loader import load_graph  # noqa: E402
from pathsearch.search import PathFinder, available_algorithms  # noqa: E402

# Keeps the random walk from running forever on cyclic graphs
DEFAULT_RANDOM_MAX_STEPS = 100_000


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare search algorithms on a graph file")
    parser.add_argument("--graph", type=Path, required=True, help="Graph file")
    parser.add_argument("--start", type=str, required=True, help="Start vertex")
    parser.add_argument("--goal", type=str, required=True, help="Goal vertex")
    parser.add_argument("--seed", type=int, default=None, help="Random walk seed")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_RANDOM_MAX_STEPS,
        help=f"Random walk move limit (default: {DEFAULT_RANDOM_MAX_STEPS:,})",
    )
    return parser.parse_args(argv)


def run_comparison(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        graph = load_graph(args.graph)
        start = graph.parse_vertex(args.start)
        goal = graph.parse_vertex(args.goal)

        finder = PathFinder(graph)
        results = []
        for name in available_algorithms():
            kwargs = {"seed": args.seed, "max_steps": args.max_steps} if name == "random" else {}
            results.append(finder.search(name, start, goal, **kwargs))
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 70)
    print("pathsearch - Algorithm Comparison")
    print("=" * 70)
    print(f"  Graph: {finder.graph!r}")
    print(f"  Start: {start}")
    print(f"  Goal:  {goal}")
    print()
    print(f"{'Algorithm':<12} {'Found':<6} {'Cost':>12} {'Hops':>6} {'Visited':>10} {'Time (s)':>10}")
    print("-" * 70)

    for result in results:
        cost = f"{result.cost:.3f}" if result.success else "-"
        hops = str(result.hops) if result.success else "-"
        print(
            f"{result.algorithm:<12} {'yes' if result.success else 'no':<6} {cost:>12} "
            f"{hops:>6} {result.visited_nodes:>10,} {result.elapsed_time:>10.4f}"
        )

    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(run_comparison())
