"""
Grid graph module.

Provides the static structure searched by the engine:
- Terrain: Cell terrain classes and their cost codes
- Node: Immutable grid cell with adjacency as node indices
- GridGraph: 8-connected graph built from a cost map
"""

from gridpath.graph.grid import DIRECTIONS, Cell, GridGraph, Node
from gridpath.graph.terrain import Terrain, resolve_terrain_costs

__all__ = [
    "Cell",
    "DIRECTIONS",
    "GridGraph",
    "Node",
    "Terrain",
    "resolve_terrain_costs",
]
