"""
pathsearch - shortest-path search over abstract directed graphs.

Compares a random walk, Dijkstra's algorithm and A* on any graph that
implements the DirectedGraph query interface.
"""

from pathsearch.graph import DirectedEdge, DirectedGraph
from pathsearch.search import InvalidArgument, PathFinder, Result

__version__ = "0.1.0"

__all__ = [
    "DirectedGraph",
    "DirectedEdge",
    "PathFinder",
    "Result",
    "InvalidArgument",
]
