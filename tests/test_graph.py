"""
Unit tests for the caller-side graph implementations.
"""

import math

import numpy as np
import pytest

from pathsearch.graph import AdjacencyGraph, DirectedEdge, DirectedGraph, GridGraph


class TestDirectedGraphContract:
    """Test the abstract base class."""

    def test_cannot_instantiate_abstract(self):
        """DirectedGraph requires outgoing_edges."""
        with pytest.raises(TypeError):
            DirectedGraph()

    def test_default_heuristic_is_zero(self):
        """Graphs that only define outgoing_edges get a zero estimate."""

        class Line(DirectedGraph):
            def outgoing_edges(self, vertex):
                return [DirectedEdge(vertex, vertex + 1, 1.0)]

        assert Line().guess_cost(0, 10) == 0.0

    def test_edges_are_hashable_values(self):
        """Edges compare by value."""
        assert DirectedEdge("A", "B", 1.0) == DirectedEdge("A", "B", 1.0)
        assert len({DirectedEdge("A", "B", 1.0), DirectedEdge("A", "B", 1.0)}) == 1


class TestAdjacencyGraph:
    """Test AdjacencyGraph construction and queries."""

    def test_add_edges(self, abc_graph):
        """Outgoing edges reflect what was added."""
        assert set(abc_graph.vertices()) == {"A", "B", "C"}
        assert abc_graph.outgoing_edges("A") == [
            DirectedEdge("A", "B", 1.0),
            DirectedEdge("A", "C", 5.0),
        ]
        assert abc_graph.outgoing_edges("C") == []

    def test_unknown_vertex_is_dead_end(self, abc_graph):
        """Unknown vertices have no edges rather than raising."""
        assert abc_graph.outgoing_edges("Z") == []

    def test_outgoing_returns_copy(self, abc_graph):
        """Mutating the returned list must not affect the graph."""
        out = abc_graph.outgoing_edges("A")
        out.clear()
        assert len(abc_graph.outgoing_edges("A")) == 2

    def test_negative_weight_rejected(self):
        """Negative weights break optimality and are refused."""
        g = AdjacencyGraph()
        with pytest.raises(ValueError):
            g.add_edge("A", "B", -1.0)

    def test_nan_weight_rejected(self):
        """Non-finite weights are refused."""
        g = AdjacencyGraph()
        with pytest.raises(ValueError):
            g.add_edge("A", "B", float("nan"))

    def test_negative_scale_rejected(self):
        """Heuristic scale must be non-negative."""
        with pytest.raises(ValueError):
            AdjacencyGraph(heuristic_scale=-0.5)

    def test_heuristic_without_positions(self, abc_graph):
        """No coordinates means no estimate."""
        assert abc_graph.guess_cost("A", "C") == 0.0

    def test_heuristic_euclidean(self):
        """Estimate is straight-line distance times the scale."""
        g = AdjacencyGraph(heuristic_scale=2.0)
        g.set_position("A", 0, 0)
        g.set_position("B", 3, 4)
        assert g.guess_cost("A", "B") == pytest.approx(10.0)
        assert g.guess_cost("B", "B") == 0.0

    def test_position_roundtrip(self):
        """Positions come back as plain floats."""
        g = AdjacencyGraph()
        g.set_position("A", 1, 2)
        assert g.position("A") == (1.0, 2.0)
        assert g.position("B") is None

    def test_len_and_contains(self, abc_graph):
        """Container protocol covers vertices."""
        assert len(abc_graph) == 3
        assert "B" in abc_graph
        assert "Z" not in abc_graph

    def test_parse_vertex(self):
        """CLI strings map to string or integer vertices."""
        g = AdjacencyGraph()
        g.add_edge("A", 2, 1.0)
        assert g.parse_vertex("A") == "A"
        assert g.parse_vertex("2") == 2
        with pytest.raises(ValueError):
            g.parse_vertex("missing")


class TestGridGraph:
    """Test GridGraph moves and heuristic."""

    def test_center_has_eight_neighbours(self, open_grid):
        """Open 8-way grid: center reaches every surrounding cell."""
        edges = open_grid.outgoing_edges((1, 1))
        assert len(edges) == 8
        assert sum(1 for e in edges if e.weight == 1.0) == 4
        assert sum(1 for e in edges if e.weight == pytest.approx(math.sqrt(2))) == 4

    def test_corner_has_three_neighbours(self, open_grid):
        """Grid edges are not wrapped."""
        targets = {e.target for e in open_grid.outgoing_edges((0, 0))}
        assert targets == {(0, 1), (1, 0), (1, 1)}

    def test_four_way(self):
        """4-way grids only move orthogonally."""
        grid = GridGraph(np.ones((3, 3), dtype=bool), diagonal=False)
        targets = {e.target for e in grid.outgoing_edges((1, 1))}
        assert targets == {(0, 1), (1, 2), (2, 1), (1, 0)}

    def test_no_corner_cutting(self):
        """Diagonal moves need both orthogonal cells open."""
        grid = GridGraph(np.array([[1, 0], [1, 1]], dtype=bool))
        targets = {e.target for e in grid.outgoing_edges((0, 0))}
        assert targets == {(1, 0)}

    def test_blocked_cell_is_dead_end(self):
        """Blocked or out-of-grid cells have no edges."""
        grid = GridGraph(np.array([[1, 0]], dtype=bool))
        assert grid.outgoing_edges((0, 1)) == []
        assert grid.outgoing_edges((5, 5)) == []

    def test_octile_heuristic(self, open_grid):
        """8-way estimate is octile distance."""
        expected = 3 + (math.sqrt(2) - 1) * 2
        assert open_grid.guess_cost((0, 0), (2, 3)) == pytest.approx(expected)

    def test_manhattan_heuristic(self):
        """4-way estimate is Manhattan distance."""
        grid = GridGraph(np.ones((3, 3), dtype=bool), diagonal=False)
        assert grid.guess_cost((0, 0), (2, 3)) == 5.0

    def test_parse_vertex(self, maze_graph):
        """Cells are written 'row,col'."""
        assert maze_graph.parse_vertex("1,1") == (1, 1)
        with pytest.raises(ValueError):
            maze_graph.parse_vertex("0,0")  # wall
        with pytest.raises(ValueError):
            maze_graph.parse_vertex("1")

    def test_rejects_non_2d(self):
        """Grid must be a matrix."""
        with pytest.raises(ValueError):
            GridGraph(np.ones(4, dtype=bool))
