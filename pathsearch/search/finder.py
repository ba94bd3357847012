"""
PathFinder: the single entry point for searching a graph by algorithm name.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Hashable
from typing import Any

from pathsearch.graph.base import DirectedGraph
from pathsearch.search.registry import get_algorithm
from pathsearch.search.result import Result

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Runs named search algorithms against one graph.

    Usage:
        finder = PathFinder(graph)
        result = finder.search("dijkstra", "A", "C")
        print(result)
    """

    def __init__(self, graph: DirectedGraph) -> None:
        self._graph = graph

    @property
    def graph(self) -> DirectedGraph:
        return self._graph

    def search(
        self,
        algorithm: str,
        start: Hashable,
        goal: Hashable,
        **kwargs: Any,
    ) -> Result:
        """
        Search for a path from start to goal.

        Args:
            algorithm: Algorithm name (random, dijkstra, astar)
            start: Start vertex
            goal: Goal vertex
            **kwargs: Passed to the algorithm constructor (e.g., seed)

        Returns:
            Result of the search; success is False if goal is unreachable

        Raises:
            InvalidArgument: If algorithm name is unknown
        """
        started_at = time.perf_counter()
        searcher = get_algorithm(algorithm, **kwargs)

        logger.info(f"Searching {start!r} -> {goal!r} with {searcher.name}")
        result = searcher.search(self._graph, start, goal, started_at=started_at)

        if result.success:
            logger.info(
                f"Found path ({result.hops} edges, cost {result.cost}) "
                f"after visiting {result.visited_nodes} nodes"
            )
        else:
            logger.info(f"No path from {start!r} after visiting {result.visited_nodes} nodes")

        return result
