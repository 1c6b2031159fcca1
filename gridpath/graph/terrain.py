"""
Terrain classes for cost-map cells.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum

from gridpath.config import TERRAIN_COSTS


class Terrain(IntEnum):
    """Terrain class of a cell. Values are the codes used in cost maps."""

    OPEN = 0
    BLOCKED = 1
    LIGHT = 2
    MEDIUM = 3
    HEAVY = 4

    @property
    def is_blocked(self) -> bool:
        return self is Terrain.BLOCKED


TERRAIN_CODES = frozenset(int(t) for t in Terrain)


def resolve_terrain_costs(overrides: Mapping[int, float] | None = None) -> dict[Terrain, float]:
    """
    Build the cost table for every traversable terrain class.

    Args:
        overrides: Optional mapping of terrain code to cost add-on, merged
            over the configured defaults

    Returns:
        Dict mapping each non-blocked Terrain to its cost add-on

    Raises:
        ValueError: If a cost is negative or a traversable class has no cost
    """
    merged: dict[int, float] = dict(TERRAIN_COSTS)
    if overrides:
        merged.update({int(code): cost for code, cost in overrides.items()})

    costs: dict[Terrain, float] = {}
    for terrain in Terrain:
        if terrain.is_blocked:
            continue
        if int(terrain) not in merged:
            raise ValueError(f"No movement cost configured for {terrain.name}")
        cost = float(merged[int(terrain)])
        if cost < 0:
            raise ValueError(f"Movement cost for {terrain.name} must be non-negative, got {cost}")
        costs[terrain] = cost
    return costs
