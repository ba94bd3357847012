"""
Adjacency-list graph: a mutable, dict-backed DirectedGraph.

Optionally carries 2-D vertex positions, which turn the A* heuristic into
a straight-line distance estimate.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator

import numpy as np

from pathsearch.graph.base import DirectedEdge, DirectedGraph


class AdjacencyGraph(DirectedGraph[Hashable]):
    """
    Directed, weighted graph backed by a vertex -> edge list mapping.

    The heuristic is the Euclidean distance between vertex positions,
    multiplied by heuristic_scale. It is admissible as long as no edge is
    cheaper than heuristic_scale times the straight-line length it covers.
    Vertices without a position get a zero estimate.
    """

    def __init__(self, heuristic_scale: float = 1.0) -> None:
        if heuristic_scale < 0:
            raise ValueError(f"heuristic_scale must be non-negative, got {heuristic_scale}")
        self._adj: dict[Hashable, list[DirectedEdge]] = {}
        self._positions: dict[Hashable, np.ndarray] = {}
        self.heuristic_scale = heuristic_scale

    # --- Construction (caller side, not part of DirectedGraph) ---------------

    def add_node(self, vertex: Hashable) -> None:
        """Ensure vertex exists in the graph."""
        self._adj.setdefault(vertex, [])

    def add_edge(self, source: Hashable, target: Hashable, weight: float = 1.0) -> None:
        """
        Add a directed edge source -> target.

        Auto-adds both vertices. Parallel edges are kept.

        Raises:
            ValueError: If weight is negative or not finite
        """
        weight = float(weight)
        if not np.isfinite(weight) or weight < 0:
            raise ValueError(f"Edge {source!r} -> {target!r} has invalid weight {weight}")
        self.add_node(source)
        self.add_node(target)
        self._adj[source].append(DirectedEdge(source, target, weight))

    def set_position(self, vertex: Hashable, x: float, y: float) -> None:
        """Attach 2-D coordinates to vertex (adds the vertex if missing)."""
        self.add_node(vertex)
        self._positions[vertex] = np.array([x, y], dtype=np.float64)

    def position(self, vertex: Hashable) -> tuple[float, float] | None:
        """Coordinates of vertex, or None if it has none."""
        pos = self._positions.get(vertex)
        if pos is None:
            return None
        return float(pos[0]), float(pos[1])

    # --- Inspection ----------------------------------------------------------

    def vertices(self) -> Iterable[Hashable]:
        """All vertices in insertion order."""
        return self._adj.keys()

    def edges(self) -> Iterator[DirectedEdge]:
        """All edges, grouped by source vertex."""
        for out in self._adj.values():
            yield from out

    def parse_vertex(self, text: str) -> Hashable:
        """
        Map a command-line string to a vertex of this graph.

        Tries the string itself, then its integer value.

        Raises:
            ValueError: If neither form is a vertex
        """
        if text in self._adj:
            return text
        try:
            as_int = int(text)
        except ValueError:
            as_int = None
        if as_int is not None and as_int in self._adj:
            return as_int
        raise ValueError(f"Unknown vertex '{text}'")

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        edge_count = sum(len(out) for out in self._adj.values())
        return f"{self.__class__.__name__}(vertices={len(self)}, edges={edge_count})"

    # --- DirectedGraph interface ---------------------------------------------

    def outgoing_edges(self, vertex: Hashable) -> list[DirectedEdge]:
        return list(self._adj.get(vertex, ()))  # copy

    def guess_cost(self, vertex: Hashable, goal: Hashable) -> float:
        a = self._positions.get(vertex)
        b = self._positions.get(goal)
        if a is None or b is None:
            return 0.0
        return self.heuristic_scale * float(np.linalg.norm(b - a))
