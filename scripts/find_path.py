#!/usr/bin/env python3
"""
pathsearch CLI - Find a path between two vertices of a graph file.

Usage:
    python scripts/find_path.py --graph data/cities.json --start Gothenburg --goal Stockholm
    python scripts/find_path.py --graph data/cities.json --start Gothenburg --goal Stockholm --algorithm dijkstra
    python scripts/find_path.py --graph data/maze.txt --start 1,1 --goal 7,18 --algorithm astar
    python scripts/find_path.py --graph data/maze.txt --start 1,1 --goal 7,18 --algorithm random --seed 42 --max-steps 1000

Algorithms:
    random   - Random walk baseline (not optimal, may not terminate without --max-steps)
    dijkstra - Dijkstra's algorithm (optimal)
    astar    - A* with the graph's heuristic (optimal for admissible heuristics)

Graph files:
    .json / .msgpack - Edge lists: {"edges": [[source, target, weight], ...], "positions": {...}}
    .txt / .map      - Grid maps: '.' open, '#' blocked; vertices are written 'row,col'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathsearch.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    LOG_LEVEL,
    RANDOM_SEED,
    RANDOM_WALK_MAX_STEPS,
)
from pathsearch.graph.loader import load_graph  # noqa: E402
from pathsearch.search import PathFinder, available_algorithms  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path between two vertices of a graph file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graph",
        type=Path,
        required=True,
        help="Graph file (.json, .msgpack, .txt, .map)",
    )
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start vertex",
    )
    parser.add_argument(
        "--goal",
        type=str,
        required=True,
        help="Goal vertex",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        help=f"Search algorithm: {', '.join(available_algorithms())} (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Random seed for --algorithm random",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=RANDOM_WALK_MAX_STEPS,
        help="Give up the random walk after this many moves (default: unbounded)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        graph = load_graph(args.graph)
        start = graph.parse_vertex(args.start)
        goal = graph.parse_vertex(args.goal)

        kwargs = {}
        if args.algorithm == "random":
            kwargs = {"seed": args.seed, "max_steps": args.max_steps}

        result = PathFinder(graph).search(args.algorithm, start, goal, **kwargs)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        print(result)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
