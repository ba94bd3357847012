"""
Search result record.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pathsearch.config import NO_PATH_COST

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Result(Generic[V]):
    """
    Outcome of one search call.

    Attributes:
        success: Whether the goal was reached
        start: Start vertex
        goal: Goal vertex, or None if no path was found
        cost: Total path cost, or NO_PATH_COST if no path was found
        path: Vertices from start to goal, or None if no path was found
        visited_nodes: Number of vertices the algorithm visited
        elapsed_time: Wall-clock seconds from dispatch to this result
        algorithm: Name of the algorithm that produced the result
    """

    success: bool
    start: V
    goal: V | None
    cost: float
    path: tuple[V, ...] | None
    visited_nodes: int
    elapsed_time: float
    algorithm: str = ""

    @classmethod
    def found(
        cls,
        start: V,
        goal: V,
        cost: float,
        path: list[V],
        visited_nodes: int,
        elapsed_time: float,
        algorithm: str = "",
    ) -> Result[V]:
        """Build a successful result."""
        return cls(
            success=True,
            start=start,
            goal=goal,
            cost=cost,
            path=tuple(path),
            visited_nodes=visited_nodes,
            elapsed_time=elapsed_time,
            algorithm=algorithm,
        )

    @classmethod
    def not_found(
        cls,
        start: V,
        visited_nodes: int,
        elapsed_time: float,
        algorithm: str = "",
    ) -> Result[V]:
        """Build a result for an unreachable goal."""
        return cls(
            success=False,
            start=start,
            goal=None,
            cost=NO_PATH_COST,
            path=None,
            visited_nodes=visited_nodes,
            elapsed_time=elapsed_time,
            algorithm=algorithm,
        )

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if no path was found."""
        if self.path is None:
            return None
        return len(self.path) - 1

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation."""
        return {
            "algorithm": self.algorithm,
            "success": self.success,
            "start": self.start,
            "goal": self.goal,
            "cost": self.cost,
            "path": list(self.path) if self.path is not None else None,
            "visited_nodes": self.visited_nodes,
            "elapsed_time": self.elapsed_time,
        }

    def __str__(self) -> str:
        lines = [
            f"Visited nodes: {self.visited_nodes}",
            f"Elapsed time: {self.elapsed_time:.1f} seconds",
        ]
        if self.success:
            lines.append(f"Total cost from {self.start} -> {self.goal}: {self.cost}")
            lines.append("Path: " + " -> ".join(str(v) for v in self.path))
        else:
            lines.append(f"No path found from {self.start}")
        return "\n".join(lines)
