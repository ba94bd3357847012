"""
Graph module.

Provides the graph contract used by the search engine plus caller-side
implementations:
- DirectedGraph / DirectedEdge: Abstract query interface
- AdjacencyGraph: Dict-backed graph with optional coordinates
- GridGraph: Occupancy-grid graph with 4- or 8-way moves
- load_graph / save_graph: Edge-list and grid map files
"""

from pathsearch.graph.adjacency import AdjacencyGraph
from pathsearch.graph.base import DirectedEdge, DirectedGraph
from pathsearch.graph.grid import GridGraph
from pathsearch.graph.loader import load_graph, save_graph

__all__ = [
    "DirectedGraph",
    "DirectedEdge",
    "AdjacencyGraph",
    "GridGraph",
    "load_graph",
    "save_graph",
]
