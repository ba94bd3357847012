"""
Configuration constants for the pathsearch project.

All paths, defaults, and tunable parameters are defined here.
Overrides are read from environment variables (or a project .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathsearch/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Example graph files used by the scripts
DATA_DIR = PROJECT_ROOT / "data"

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm used when the caller does not name one
DEFAULT_ALGORITHM = os.environ.get("PATHSEARCH_ALGORITHM", "astar")

# Cost reported on a Result when no path was found
NO_PATH_COST = -1.0


def _optional_int(name: str) -> int | None:
    """Read an integer environment variable, or None if unset/empty."""
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return None
    return int(value)


# Maximum moves for the random walk (None = walk until goal or dead end)
RANDOM_WALK_MAX_STEPS = _optional_int("PATHSEARCH_RANDOM_MAX_STEPS")

# Seed for the random walk (None = nondeterministic)
RANDOM_SEED = _optional_int("PATHSEARCH_SEED")

# =============================================================================
# Graph File Configuration
# =============================================================================

# Characters marking impassable cells in grid map files
GRID_BLOCKED_CHARS = frozenset("#@T")

# Edge-list file suffixes understood by the loader
EDGE_LIST_SUFFIXES = (".json", ".msgpack")

# Grid map file suffixes understood by the loader
GRID_SUFFIXES = (".txt", ".map")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
