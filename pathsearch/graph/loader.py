"""
Read and write graph files.

Supported formats:
    .json / .msgpack  Edge lists -> AdjacencyGraph
    .txt / .map       Occupancy grids -> GridGraph

Edge-list layout (same keys in both encodings):

    {
        "edges": [["A", "B", 1.0], ["B", "C", 2.0]],
        "positions": [["A", [0, 0]], ["B", [1, 0]]],  # optional
        "heuristic_scale": 1.0                         # optional
    }

positions may also be a {vertex: [x, y]} mapping (string or int vertices).

Usage:
    from pathsearch.graph.loader import load_graph

    graph = load_graph("data/example.json")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import msgpack
import numpy as np

from pathsearch.config import EDGE_LIST_SUFFIXES, GRID_BLOCKED_CHARS, GRID_SUFFIXES
from pathsearch.graph.adjacency import AdjacencyGraph
from pathsearch.graph.grid import GridGraph

logger = logging.getLogger(__name__)


def load_graph(path: str | Path) -> AdjacencyGraph | GridGraph:
    """
    Load a graph file, choosing the format from its suffix.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is unsupported or the contents are malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in GRID_SUFFIXES:
        return load_grid(path)
    if suffix == ".json":
        logger.info(f"Loading edge list from {path}...")
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    elif suffix == ".msgpack":
        logger.info(f"Loading edge list from {path}...")
        with open(path, "rb") as f:
            data = msgpack.load(f, strict_map_key=False, use_list=False)
    else:
        supported = ", ".join(EDGE_LIST_SUFFIXES + GRID_SUFFIXES)
        raise ValueError(f"Unsupported graph file '{path.name}'. Supported: {supported}")

    graph = graph_from_dict(data)
    logger.info(f"Loaded {graph!r}")
    return graph


def graph_from_dict(data: dict[str, Any]) -> AdjacencyGraph:
    """
    Build an AdjacencyGraph from a decoded edge-list mapping.

    positions may be a {vertex: [x, y]} mapping or a list of
    [vertex, [x, y]] pairs; the pair form also carries composite vertices.

    Raises:
        ValueError: If an edge or position record is malformed, or a
            weight is negative or not a number
    """
    if not isinstance(data, dict) or "edges" not in data:
        raise ValueError("Edge-list data must be a mapping with an 'edges' key")

    edges = data["edges"]
    if not isinstance(edges, (list, tuple)):
        raise ValueError(f"'edges' must be a list, got {type(edges).__name__}")

    try:
        scale = float(data.get("heuristic_scale", 1.0))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid heuristic_scale: {e}") from e
    graph = AdjacencyGraph(heuristic_scale=scale)

    for i, record in enumerate(edges):
        if not isinstance(record, (list, tuple)) or len(record) not in (2, 3):
            raise ValueError(f"Edge #{i} must be [source, target] or [source, target, weight], got {record!r}")
        source, target = _vertex(record[0]), _vertex(record[1])
        try:
            weight = float(record[2]) if len(record) == 3 else 1.0
        except (TypeError, ValueError) as e:
            raise ValueError(f"Edge #{i} has invalid weight {record[2]!r}") from e
        graph.add_edge(source, target, weight)

    for key, coords in _position_items(data.get("positions")):
        if not isinstance(coords, (list, tuple)) or len(coords) != 2:
            raise ValueError(f"Position of {key!r} must be [x, y], got {coords!r}")
        vertex = _vertex(key)
        # JSON object keys are always strings; match integer vertices too
        if vertex not in graph and isinstance(vertex, str):
            try:
                if int(vertex) in graph:
                    vertex = int(vertex)
            except ValueError:
                pass
        try:
            graph.set_position(vertex, float(coords[0]), float(coords[1]))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Position of {key!r} must be numeric, got {coords!r}") from e

    return graph


def _position_items(positions: Any) -> list:
    if not positions:
        return []
    if isinstance(positions, dict):
        return list(positions.items())
    if not isinstance(positions, (list, tuple)):
        raise ValueError(f"'positions' must be a mapping or a list, got {type(positions).__name__}")
    for i, pair in enumerate(positions):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"Position #{i} must be [vertex, [x, y]], got {pair!r}")
    return [tuple(pair) for pair in positions]


def _vertex(value: Any) -> Any:
    """Decoded lists are unhashable; use tuples for composite vertex ids."""
    if isinstance(value, (list, tuple)):
        return tuple(_vertex(v) for v in value)
    return value


def graph_to_dict(graph: AdjacencyGraph) -> dict[str, Any]:
    """Inverse of graph_from_dict. Positions are written as pairs."""
    data: dict[str, Any] = {
        "edges": [[e.source, e.target, e.weight] for e in graph.edges()],
        "heuristic_scale": graph.heuristic_scale,
    }
    positions = []
    for vertex in graph.vertices():
        pos = graph.position(vertex)
        if pos is not None:
            positions.append([vertex, list(pos)])
    if positions:
        data["positions"] = positions
    return data


def save_graph(graph: AdjacencyGraph, path: str | Path) -> None:
    """
    Write an AdjacencyGraph as JSON or msgpack, chosen by suffix.

    Raises:
        ValueError: If the suffix is not an edge-list format
    """
    path = Path(path)
    data = graph_to_dict(graph)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    elif suffix == ".msgpack":
        with open(path, "wb") as f:
            msgpack.dump(data, f)
    else:
        raise ValueError(f"Cannot save edge list as '{path.name}'. Use .json or .msgpack")

    logger.info(f"Saved {graph!r} to {path}")


def load_grid(path: str | Path, diagonal: bool = True) -> GridGraph:
    """
    Load an occupancy grid text file.

    Each line is a row; '.' is open, any of GRID_BLOCKED_CHARS is blocked.
    Short rows (including blank lines) are padded with blocked cells.
    Trailing blank lines are ignored.
    """
    path = Path(path)
    logger.info(f"Loading grid map from {path}...")
    with open(path, encoding="utf-8") as f:
        rows = [line.rstrip("\r\n") for line in f]

    while rows and not rows[-1].strip():
        rows.pop()

    if not rows:
        raise ValueError(f"Grid file '{path.name}' is empty")

    width = max(len(row) for row in rows)
    passable = np.zeros((len(rows), width), dtype=bool)
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char not in GRID_BLOCKED_CHARS and char != " ":
                passable[r, c] = True

    graph = GridGraph(passable, diagonal=diagonal)
    logger.info(f"Loaded {graph!r}")
    return graph
