"""
Strategy base class for frontier expansion.

All four search modes share the same neighbor loop. They differ only in
whether a neighbor already waiting in the frontier is looked at again,
whether its distance is overwritten or only lowered, and what becomes
its priority. Subclasses set the two flags and implement priority().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from gridpath.config import DEFAULT_HEURISTIC
from gridpath.errors import SearchConfigurationError
from gridpath.graph.grid import GridGraph, Node

if TYPE_CHECKING:
    from gridpath.search.state import SearchRun

HEURISTICS: dict[str, Callable[[Node, Node], float]] = {
    "manhattan": GridGraph.heuristic_cost,
    "octile": GridGraph.octile_cost,
}


class Strategy(ABC):
    """
    Abstract base class for search strategies.

    Attributes:
        skip_queued: Ignore neighbors that are already in the frontier
        relax_if_shorter: Only overwrite a neighbor's distance when the new
            one is smaller; otherwise overwrite unconditionally
    """

    skip_queued: bool = True
    relax_if_shorter: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the strategy (e.g., 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @abstractmethod
    def priority(self, run: SearchRun, neighbor: Node) -> float:
        """
        Frontier priority for neighbor, computed after its distance update.

        Args:
            run: Active search run
            neighbor: Node about to be queued or re-prioritized

        Returns:
            Priority value; lower values are popped first
        """
        ...

    def expand(self, run: SearchRun, current: int) -> list[int]:
        """
        Relax the neighbors of current and queue the new ones.

        The terrain cost of current (the cell being left) is added once
        per edge.

        Args:
            run: Active search run
            current: Index of the node just popped

        Returns:
            Indices pushed onto the frontier by this expansion
        """
        graph = run.graph
        node = graph.nodes[current]
        base = run.distance[current] + graph.terrain_cost(node)
        opened: list[int] = []

        for index in node.neighbors:
            if run.is_explored(index):
                continue
            queued = index in run.frontier
            if queued and self.skip_queued:
                continue

            neighbor = graph.nodes[index]
            new_distance = graph.edge_cost(node, neighbor) + base

            if not self.relax_if_shorter or new_distance < run.distance[index]:
                run.distance[index] = new_distance
                run.predecessor[index] = current
                if queued:
                    run.priority[index] = self.priority(run, neighbor)

            if not queued:
                run.priority[index] = self.priority(run, neighbor)
                run.frontier.push(index)
                opened.append(index)

        return opened

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class HeuristicStrategy(Strategy):
    """Strategy that estimates the remaining distance to the goal."""

    def __init__(self, heuristic: str = DEFAULT_HEURISTIC) -> None:
        """
        Args:
            heuristic: Heuristic name ("manhattan" or "octile")

        Raises:
            SearchConfigurationError: If the heuristic is unknown
        """
        if heuristic not in HEURISTICS:
            available = ", ".join(HEURISTICS)
            raise SearchConfigurationError(
                f"Unknown heuristic '{heuristic}'. Available: {available}"
            )
        self._heuristic_name = heuristic
        self._heuristic = HEURISTICS[heuristic]

    @property
    def heuristic(self) -> str:
        return self._heuristic_name

    def estimate(self, run: SearchRun, node: Node) -> float:
        """Heuristic distance from node to the run's goal."""
        return self._heuristic(node, run.goal)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, heuristic={self._heuristic_name!r})"
