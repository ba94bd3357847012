"""
Search module.

Provides start-to-goal path search over any DirectedGraph:
- RandomWalkSearch: Random baseline
- DijkstraSearch: Optimal for non-negative weights
- AStarSearch: Dijkstra guided by the graph's cost estimate
- PathFinder: Runs an algorithm chosen by name
- Result: Uniform outcome record
"""

from pathsearch.search.astar import AStarSearch
from pathsearch.search.base import InvalidArgument, SearchAlgorithm
from pathsearch.search.dijkstra import DijkstraSearch
from pathsearch.search.finder import PathFinder
from pathsearch.search.random_walk import RandomWalkSearch
from pathsearch.search.registry import ALGORITHMS, available_algorithms, get_algorithm
from pathsearch.search.result import Result

__all__ = [
    "SearchAlgorithm",
    "InvalidArgument",
    "RandomWalkSearch",
    "DijkstraSearch",
    "AStarSearch",
    "PathFinder",
    "Result",
    "ALGORITHMS",
    "available_algorithms",
    "get_algorithm",
]
