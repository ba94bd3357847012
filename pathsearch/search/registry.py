"""
Name -> algorithm registry.
"""

from __future__ import annotations

from typing import Any

from pathsearch.search.astar import AStarSearch
from pathsearch.search.base import InvalidArgument, SearchAlgorithm
from pathsearch.search.dijkstra import DijkstraSearch
from pathsearch.search.random_walk import RandomWalkSearch

ALGORITHMS: dict[str, type[SearchAlgorithm]] = {
    "random": RandomWalkSearch,
    "dijkstra": DijkstraSearch,
    "astar": AStarSearch,
}


def available_algorithms() -> list[str]:
    """Registered algorithm names."""
    return list(ALGORITHMS)


def get_algorithm(name: str, **kwargs: Any) -> SearchAlgorithm:
    """
    Get a search algorithm by name.

    Args:
        name: Algorithm identifier (random, dijkstra, astar)
        **kwargs: Arguments for the algorithm constructor (e.g., seed, max_steps)

    Returns:
        Instantiated algorithm

    Raises:
        InvalidArgument: If algorithm name is unknown
    """
    if name not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise InvalidArgument(f"Unknown search algorithm '{name}'. Available: {available}")

    # Only the random walk takes options
    if name == "random":
        return RandomWalkSearch(**kwargs)

    return ALGORITHMS[name]()
