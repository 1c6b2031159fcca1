"""
Breadth-first search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridpath.graph.grid import Node
from gridpath.strategies.base import Strategy

if TYPE_CHECKING:
    from gridpath.search.state import SearchRun


class BreadthFirstStrategy(Strategy):
    """
    Expands cells in the order they were discovered.

    The priority is the explored-set size at expansion time. It never
    decreases, so combined with the frontier's insertion-order tie-break
    the frontier behaves as a FIFO queue. Distances are still accumulated
    for reporting but do not influence the order.
    """

    skip_queued = True
    relax_if_shorter = False

    @property
    def name(self) -> str:
        return "breadth_first"

    @property
    def description(self) -> str:
        return "Breadth-first (FIFO order, ignores costs)"

    def priority(self, run: SearchRun, neighbor: Node) -> float:
        return float(len(run.explored))
