"""
Greedy best-first search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpath.graph.grid import Node
from gridpath.strategies.base import HeuristicStrategy

if TYPE_CHECKING:
    from gridpath.search.state import SearchRun


class GreedyBestFirstStrategy(HeuristicStrategy):
    """
    Expands whichever cell looks closest to the goal.

    Ordering ignores the cost already paid, so paths are found quickly but
    are not guaranteed to be the cheapest.
    """

    skip_queued = True
    relax_if_shorter = False

    @property
    def name(self) -> str:
        return "greedy"

    @property
    def description(self) -> str:
        return f"Greedy best-first ({self.heuristic} distance to goal)"

    def priority(self, run: SearchRun, neighbor: Node) -> float:
        return self.estimate(run, neighbor)
