"""
Search run state, per-step snapshots and final results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

import numpy as np

from gridpath.graph.grid import Cell, GridGraph, Node
from gridpath.search.frontier import PriorityFrontier

NO_PREDECESSOR = -1


class SearchStatus(str, Enum):
    """Lifecycle of a search engine."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    RUNNING = "running"
    SUCCESS = "success"
    EXHAUSTED = "exhausted"

    @property
    def is_complete(self) -> bool:
        return self in (SearchStatus.SUCCESS, SearchStatus.EXHAUSTED)


@dataclass(frozen=True)
class SearchSnapshot:
    """
    Read-only view of a run after one step, for presentation code.

    Attributes:
        frontier: Frontier cells in insertion order (may repeat)
        explored: Explored cells in the order they were finalized
        path: Cells from start to goal; empty until a path is found
        iteration: Number of nodes popped so far
        status: Run status after the step
        current: Cell popped by this step, if any
    """

    frontier: tuple[Cell, ...]
    explored: tuple[Cell, ...]
    path: tuple[Cell, ...]
    iteration: int
    status: SearchStatus
    current: Cell | None = None

    @property
    def is_complete(self) -> bool:
        return self.status.is_complete

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.SUCCESS


@dataclass
class SearchResult:
    """
    Outcome of a search run.

    Attributes:
        start: Start cell
        goal: Goal cell
        mode: Name of the strategy used
        status: Final (or current, if capped) status
        path: Cells from start to goal; empty when no path was found
        cost: Total traversal cost of path, None when no path was found
        iterations: Number of nodes popped
        explored_count: Size of the explored set
        elapsed_ms: Wall time spent inside step() calls
        timestamp: When the result was produced
    """

    start: Cell
    goal: Cell
    mode: str
    status: SearchStatus
    path: list[Cell]
    cost: float | None
    iterations: int
    explored_count: int
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.SUCCESS

    @property
    def step_count(self) -> int:
        """Number of moves along the path (len(path) - 1)."""
        return max(len(self.path) - 1, 0)


@dataclass
class SearchRun:
    """
    Mutable state of a single search, owned by one SearchEngine.

    Per-node fields live in arrays indexed by Node.index so the graph
    itself stays read-only.

    Attributes:
        graph: Graph being searched
        start: Start node
        goal: Goal node
        distance: Distance traveled per node (inf until reached)
        predecessor: Predecessor index per node (NO_PREDECESSOR if none)
        priority: Frontier priority per node
        frontier: Nodes discovered but not yet explored
        explored: Explored node indices in finalization order
        path: Node indices from start to goal once found
        path_distance: Distance of path at the moment it was recorded
        iterations: Number of nodes popped
        status: Current lifecycle status
    """

    graph: GridGraph
    start: Node
    goal: Node
    distance: np.ndarray = field(init=False)
    predecessor: np.ndarray = field(init=False)
    priority: np.ndarray = field(init=False)
    frontier: PriorityFrontier[int] = field(init=False)
    explored: dict[int, None] = field(init=False, default_factory=dict)
    path: list[int] = field(init=False, default_factory=list)
    path_distance: float | None = field(init=False, default=None)
    iterations: int = field(init=False, default=0)
    status: SearchStatus = field(init=False, default=SearchStatus.READY)
    elapsed_ms: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        size = len(self.graph)
        self.distance = np.full(size, np.inf, dtype=np.float64)
        self.predecessor = np.full(size, NO_PREDECESSOR, dtype=np.int64)
        self.priority = np.zeros(size, dtype=np.float64)
        self.frontier = PriorityFrontier(self._priority_of)

        self.distance[self.start.index] = 0.0
        self.frontier.push(self.start.index)

    def _priority_of(self, index: int) -> float:
        return float(self.priority[index])

    def mark_explored(self, index: int) -> None:
        """Add index to the explored set; repeats are ignored."""
        self.explored.setdefault(index, None)

    def is_explored(self, index: int) -> bool:
        return index in self.explored

    def cells(self, indices) -> tuple[Cell, ...]:
        nodes = self.graph.nodes
        return tuple(nodes[i].cell for i in indices)

    def snapshot(self, current: int | None = None) -> SearchSnapshot:
        return SearchSnapshot(
            frontier=self.cells(self.frontier.snapshot()),
            explored=self.cells(self.explored),
            path=self.cells(self.path),
            iteration=self.iterations,
            status=self.status,
            current=self.graph.nodes[current].cell if current is not None else None,
        )
