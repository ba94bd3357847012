"""
A* search: Dijkstra ordered by distance plus the graph's cost estimate.
"""

from __future__ import annotations

from collections.abc import Hashable

from pathsearch.graph.base import DirectedGraph
from pathsearch.search.dijkstra import DijkstraSearch


class AStarSearch(DijkstraSearch):
    """
    A* using DirectedGraph.guess_cost as the heuristic.

    Optimal when the heuristic is admissible and consistent. An
    inconsistent heuristic still terminates, but the returned cost may
    exceed the true minimum.
    """

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* search guided by the graph's cost estimate"

    def _priority(self, graph: DirectedGraph, vertex: Hashable, dist: float, goal: Hashable) -> float:
        return dist + graph.guess_cost(vertex, goal)
