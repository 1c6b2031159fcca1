"""
Path reconstruction and path checks.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from gridpath.graph.grid import Cell, GridGraph
from gridpath.search.state import NO_PREDECESSOR


def reconstruct_path(predecessor: np.ndarray, goal: int) -> list[int]:
    """
    Walk predecessor links back from goal.

    Only meaningful once the engine reports success; for a goal that was
    never reached the result is just [goal].

    Args:
        predecessor: Predecessor index per node (NO_PREDECESSOR for none)
        goal: Index of the goal node

    Returns:
        Node indices ordered from start to goal
    """
    path = [goal]
    current = int(predecessor[goal])
    while current != NO_PREDECESSOR:
        path.append(current)
        current = int(predecessor[current])
    path.reverse()
    return path


def path_cost(graph: GridGraph, path: Sequence[Cell]) -> float:
    """
    Total traversal cost of a path.

    Each move costs the octile edge cost plus the terrain cost of the
    cell being left, the same formula the search strategies use.
    """
    total = 0.0
    for a, b in zip(path, path[1:]):
        src = graph.node_at(a)
        total += graph.edge_cost(src, graph.node_at(b)) + graph.terrain_cost(src)
    return total


def is_contiguous(graph: GridGraph, path: Sequence[Cell]) -> bool:
    """True if every cell is traversable and consecutive cells are neighbors."""
    for cell in path:
        if cell not in graph or graph.node_at(cell).is_blocked:
            return False
    for a, b in zip(path, path[1:]):
        if graph.node_at(b).index not in graph.node_at(a).neighbors:
            return False
    return True
