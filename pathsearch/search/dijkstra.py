"""
Heap-based Dijkstra search from a start vertex to a goal vertex.

Uses Python's heapq with lazy deletion: a vertex may sit in the queue
several times, and every pop after the first is discarded by the
closed-set check.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Hashable

from pathsearch.graph.base import DirectedEdge, DirectedGraph
from pathsearch.search.base import SearchAlgorithm, reconstruct_path
from pathsearch.search.result import Result

logger = logging.getLogger(__name__)


class DijkstraSearch(SearchAlgorithm):
    """
    Single-goal Dijkstra using a binary heap.

    Optimal for non-negative edge weights. Ties are broken by insertion
    order. visited_nodes counts vertices closed, not heap pops.

    Complexity:
        O(E log V) over the vertices reachable before the goal is closed.
    """

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra's algorithm (uniform-cost search)"

    @property
    def optimal(self) -> bool:
        return True

    def _priority(self, graph: DirectedGraph, vertex: Hashable, dist: float, goal: Hashable) -> float:
        """Queue key for vertex, snapshotted when it is pushed."""
        return dist

    def _run(
        self,
        graph: DirectedGraph,
        start: Hashable,
        goal: Hashable,
        started_at: float,
    ) -> Result:
        visited_nodes = 0
        dist_to: dict[Hashable, float] = {start: 0.0}
        edge_to: dict[Hashable, DirectedEdge] = {}
        visited: set[Hashable] = set()

        # (priority, insertion order, vertex); the counter keeps vertices
        # out of comparisons and makes ties FIFO
        counter = itertools.count()
        queue = [(self._priority(graph, start, 0.0, goal), next(counter), start)]

        while queue:
            _, _, current = heapq.heappop(queue)

            # Skip outdated entries
            if current in visited:
                continue
            visited.add(current)
            visited_nodes += 1

            if current == goal:
                path = reconstruct_path(edge_to, start, goal)
                logger.debug(f"{self.name}: closed goal after {visited_nodes} vertices")
                return self._found(start, goal, dist_to[goal], path, visited_nodes, started_at)

            d_current = dist_to[current]
            for edge in graph.outgoing_edges(current):
                nxt = edge.target
                alt = d_current + edge.weight
                if nxt not in dist_to or alt < dist_to[nxt]:
                    dist_to[nxt] = alt
                    edge_to[nxt] = edge
                    heapq.heappush(queue, (self._priority(graph, nxt, alt, goal), next(counter), nxt))

        logger.debug(f"{self.name}: frontier exhausted after {visited_nodes} vertices")
        return self._not_found(start, visited_nodes, started_at)
