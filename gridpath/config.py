"""
Configuration constants for the gridpath project.

All paths, costs, and tunable defaults are defined here.
Overridable values are read from environment variables (scripts load a
.env file from the project root first).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of gridpath/
PROJECT_ROOT = Path(__file__).parent.parent

# Sample text maps shipped with the repo
MAPS_DIR = PROJECT_ROOT / "maps"

# Default map used by the scripts
DEFAULT_MAP_PATH = MAPS_DIR / "demo.txt"

# =============================================================================
# Cost Configuration
# =============================================================================

# Octile step costs (diagonal approximates sqrt(2))
STRAIGHT_COST = 1.0
DIAGONAL_COST = 1.4

# Movement-cost add-on per terrain code, charged when leaving a cell.
# Code 1 (blocked) is never traversed and has no entry.
TERRAIN_COSTS = {
    0: 0,  # open
    2: 2,  # light terrain
    3: 3,  # medium terrain
    4: 4,  # heavy terrain
}

# =============================================================================
# Search Configuration
# =============================================================================

# Strategy used when none is given (breadth_first, dijkstra, greedy, astar)
DEFAULT_MODE = os.environ.get("GRIDPATH_MODE", "astar")

# When a run succeeds:
#   "dequeue"  - the goal has been popped from the frontier
#   "frontier" - the goal has merely entered the frontier (legacy)
DEFAULT_GOAL_TEST = "dequeue"

# Stop at the first goal hit; False keeps searching until the frontier empties
EXIT_ON_GOAL = True

# Heuristic for greedy and A* ("manhattan" or "octile")
DEFAULT_HEURISTIC = "manhattan"

# Step cap used by the scripts; the engine itself is unbounded
MAX_STEPS = 10_000

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


# =============================================================================
# Validation Helpers
# =============================================================================

def list_maps() -> list[Path]:
    """Return the sample map files, sorted by name."""
    if not MAPS_DIR.exists():
        return []
    return sorted(MAPS_DIR.glob("*.txt"))
