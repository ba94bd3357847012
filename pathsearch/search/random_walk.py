"""
Random walk baseline - follows uniformly random outgoing edges.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Hashable

from pathsearch.config import RANDOM_SEED, RANDOM_WALK_MAX_STEPS
from pathsearch.graph.base import DirectedGraph
from pathsearch.search.base import SearchAlgorithm
from pathsearch.search.result import Result

logger = logging.getLogger(__name__)


class RandomWalkSearch(SearchAlgorithm):
    """
    Baseline that wanders from the start along random edges.

    Used to establish a lower bound on path quality. The walk stops when
    it reaches the goal or a dead end. On a graph with cycles it may never
    stop unless max_steps is set.
    """

    def __init__(
        self,
        seed: int | None = RANDOM_SEED,
        max_steps: int | None = RANDOM_WALK_MAX_STEPS,
    ) -> None:
        """
        Initialize the random walk.

        Args:
            seed: Random seed for reproducibility
            max_steps: Give up after this many moves (None = never)
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self._rng = random.Random(seed)
        self._max_steps = max_steps

    @property
    def name(self) -> str:
        return "random"

    @property
    def description(self) -> str:
        if self._max_steps is None:
            return "Uniformly random walk until goal or dead end"
        return f"Uniformly random walk, at most {self._max_steps} moves"

    def _run(
        self,
        graph: DirectedGraph,
        start: Hashable,
        goal: Hashable,
        started_at: float,
    ) -> Result:
        visited_nodes = 0
        cost = 0.0
        current = start
        path = [current]

        while True:
            visited_nodes += 1
            if current == goal:
                return self._found(start, current, cost, path, visited_nodes, started_at)

            if self._max_steps is not None and len(path) - 1 >= self._max_steps:
                logger.debug(f"Random walk gave up after {self._max_steps} moves")
                break

            edges = graph.outgoing_edges(current)
            if not edges:
                logger.debug(f"Random walk hit dead end at {current!r}")
                break

            edge = self._rng.choice(edges)
            cost += edge.weight
            current = edge.target
            path.append(current)

        return self._not_found(start, visited_nodes, started_at)
