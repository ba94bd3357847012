"""
Directed graph contract queried by the search algorithms.

Graphs are never materialized by the engine: it asks for the outgoing
edges of one vertex at a time, and (for A*) for a cost estimate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class DirectedEdge(Generic[V]):
    """
    A directed connection source -> target.

    Attributes:
        source: Vertex the edge leaves
        target: Vertex the edge enters
        weight: Non-negative traversal cost
    """

    source: V
    target: V
    weight: float = 1.0


class DirectedGraph(ABC, Generic[V]):
    """
    Abstract directed, weighted graph over hashable vertices.

    Implementations must be side-effect free from the caller's point of
    view; the engine may query the same vertex any number of times.
    """

    @abstractmethod
    def outgoing_edges(self, vertex: V) -> Sequence[DirectedEdge[V]]:
        """
        Edges leaving vertex.

        Returns:
            A sequence of edges, empty for a dead end. Never None.
        """
        ...

    def guess_cost(self, vertex: V, goal: V) -> float:
        """
        Estimated remaining cost from vertex to goal (used by A* only).

        Must be non-negative. For A* to stay optimal it must never
        overestimate and must satisfy the triangle inequality. The default
        of zero is always safe and makes A* behave like Dijkstra.
        """
        return 0.0
