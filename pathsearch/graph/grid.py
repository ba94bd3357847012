"""
Grid graph over a 2-D occupancy map.

Vertices are (row, col) tuples. Moving to an orthogonal neighbour costs 1,
a diagonal move (8-way mode only) costs sqrt(2).
"""

from __future__ import annotations

import math

import numpy as np

from pathsearch.graph.base import DirectedEdge, DirectedGraph

Cell = tuple[int, int]

ORTHOGONAL_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))
DIAGONAL_MOVES = ((-1, 1), (1, 1), (1, -1), (-1, -1))

SQRT2 = math.sqrt(2.0)


class GridGraph(DirectedGraph[Cell]):
    """
    DirectedGraph over the passable cells of a boolean grid.

    The heuristic is Manhattan distance for 4-way movement and octile
    distance for 8-way movement; both are admissible and consistent for
    these move costs. Diagonal moves may not cut a blocked corner.
    """

    def __init__(self, passable: np.ndarray, diagonal: bool = True) -> None:
        """
        Initialize the grid.

        Args:
            passable: 2-D array, truthy where a cell can be entered
            diagonal: Allow 8-way movement instead of 4-way
        """
        grid = np.asarray(passable, dtype=bool)
        if grid.ndim != 2:
            raise ValueError(f"Grid must be 2-D, got shape {grid.shape}")
        self._grid = grid
        self._diagonal = diagonal

    @property
    def shape(self) -> tuple[int, int]:
        return self._grid.shape

    @property
    def diagonal(self) -> bool:
        return self._diagonal

    def is_passable(self, cell: Cell) -> bool:
        """Whether cell lies inside the grid and is not blocked."""
        row, col = cell
        rows, cols = self._grid.shape
        return 0 <= row < rows and 0 <= col < cols and bool(self._grid[row, col])

    def parse_vertex(self, text: str) -> Cell:
        """
        Parse 'row,col' into a cell.

        Raises:
            ValueError: If the text is malformed or the cell is not passable
        """
        parts = text.replace(":", ",").split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'row,col', got '{text}'")
        cell = (int(parts[0]), int(parts[1]))
        if not self.is_passable(cell):
            raise ValueError(f"Cell {cell} is blocked or outside the grid")
        return cell

    def __repr__(self) -> str:
        rows, cols = self._grid.shape
        mode = "8-way" if self._diagonal else "4-way"
        return f"{self.__class__.__name__}({rows}x{cols}, {mode}, open={int(self._grid.sum())})"

    # --- DirectedGraph interface ---------------------------------------------

    def outgoing_edges(self, vertex: Cell) -> list[DirectedEdge[Cell]]:
        if not self.is_passable(vertex):
            return []

        row, col = vertex
        edges = []
        for dr, dc in ORTHOGONAL_MOVES:
            nxt = (row + dr, col + dc)
            if self.is_passable(nxt):
                edges.append(DirectedEdge(vertex, nxt, 1.0))

        if self._diagonal:
            for dr, dc in DIAGONAL_MOVES:
                nxt = (row + dr, col + dc)
                # No corner cutting: both orthogonal cells must be open
                if (
                    self.is_passable(nxt)
                    and self.is_passable((row + dr, col))
                    and self.is_passable((row, col + dc))
                ):
                    edges.append(DirectedEdge(vertex, nxt, SQRT2))

        return edges

    def guess_cost(self, vertex: Cell, goal: Cell) -> float:
        dr = abs(goal[0] - vertex[0])
        dc = abs(goal[1] - vertex[1])
        if not self._diagonal:
            return float(dr + dc)
        return float(max(dr, dc) + (SQRT2 - 1.0) * min(dr, dc))
