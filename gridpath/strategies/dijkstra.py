"""
Dijkstra's algorithm.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpath.graph.grid import Node
from gridpath.strategies.base import Strategy

if TYPE_CHECKING:
    from gridpath.search.state import SearchRun


class DijkstraStrategy(Strategy):
    """
    Uniform-cost search ordered by distance traveled.

    Queued neighbors are re-examined and relaxed when a shorter route is
    found; their priority follows the new distance.
    """

    skip_queued = False
    relax_if_shorter = True

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra (lowest distance traveled first)"

    def priority(self, run: SearchRun, neighbor: Node) -> float:
        return float(run.distance[neighbor.index])
