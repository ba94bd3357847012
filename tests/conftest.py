"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import numpy as np
import pytest

from pathsearch.graph import AdjacencyGraph, DirectedGraph, GridGraph
from pathsearch.graph.loader import load_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def abc_graph() -> AdjacencyGraph:
    """A -> B (1), B -> C (2), A -> C (5)."""
    g = AdjacencyGraph()
    g.add_edge("A", "B", 1.0)
    g.add_edge("B", "C", 2.0)
    g.add_edge("A", "C", 5.0)
    return g


@pytest.fixture
def cities_graph(data_dir: Path) -> AdjacencyGraph:
    """Road network with coordinates (shortest Gothenburg -> Stockholm is 525)."""
    return load_graph(data_dir / "cities.json")


@pytest.fixture
def maze_graph(data_dir: Path) -> GridGraph:
    """8-way grid maze loaded from data/maze.txt."""
    return load_graph(data_dir / "maze.txt")


@pytest.fixture
def open_grid() -> GridGraph:
    """3x3 grid with every cell open, 8-way movement."""
    return GridGraph(np.ones((3, 3), dtype=bool), diagonal=True)


def path_cost(graph: DirectedGraph, path) -> float:
    """Sum of the cheapest edge weights joining consecutive path vertices."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        weights = [e.weight for e in graph.outgoing_edges(a) if e.target == b]
        assert weights, f"No edge {a!r} -> {b!r}"
        total += min(weights)
    return total
