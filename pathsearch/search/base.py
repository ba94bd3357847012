"""
Search algorithm base class.

All algorithms implement _run() and report through the shared Result
record, so callers can swap strategies by name.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Hashable

from pathsearch.graph.base import DirectedEdge, DirectedGraph
from pathsearch.search.result import Result


class InvalidArgument(ValueError):
    """Raised when a search is requested with an unknown algorithm name."""


class SearchAlgorithm(ABC):
    """
    Abstract base class for start-to-goal path search strategies.

    Each call to search() owns its frontier state; instances hold only
    configuration and can be reused across searches and graphs.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier (e.g., 'dijkstra', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @property
    def optimal(self) -> bool:
        """Whether successful results are guaranteed minimum-cost."""
        return False

    def search(
        self,
        graph: DirectedGraph,
        start: Hashable,
        goal: Hashable,
        started_at: float | None = None,
    ) -> Result:
        """
        Search for a path from start to goal.

        Args:
            graph: Graph to query
            start: Start vertex
            goal: Goal vertex
            started_at: time.perf_counter() value the elapsed time is
                measured from (defaults to now)

        Returns:
            A Result; an unreachable goal is reported, not raised
        """
        if started_at is None:
            started_at = time.perf_counter()
        return self._run(graph, start, goal, started_at)

    @abstractmethod
    def _run(
        self,
        graph: DirectedGraph,
        start: Hashable,
        goal: Hashable,
        started_at: float,
    ) -> Result:
        ...

    def _found(
        self,
        start: Hashable,
        goal: Hashable,
        cost: float,
        path: list,
        visited_nodes: int,
        started_at: float,
    ) -> Result:
        return Result.found(
            start,
            goal,
            cost,
            path,
            visited_nodes,
            elapsed_time=time.perf_counter() - started_at,
            algorithm=self.name,
        )

    def _not_found(self, start: Hashable, visited_nodes: int, started_at: float) -> Result:
        return Result.not_found(
            start,
            visited_nodes,
            elapsed_time=time.perf_counter() - started_at,
            algorithm=self.name,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def reconstruct_path(
    edge_to: dict[Hashable, DirectedEdge],
    start: Hashable,
    goal: Hashable,
) -> list:
    """
    Walk predecessor edges back from goal and return the start -> goal path.

    edge_to must hold the edge that produced each vertex's final distance;
    start has no entry.
    """
    path = []
    edge = edge_to.get(goal)
    while edge is not None:
        path.append(edge.target)
        edge = edge_to.get(edge.source)
    path.append(start)
    path.reverse()
    return path
