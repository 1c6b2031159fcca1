"""
Stepwise search engine.

The engine is pull-based: callers invoke step() at their own pace (for
example once per animation frame) and receive a snapshot after each
call. Stopping early needs no cleanup; the run can be resumed until it
completes.
"""

from __future__ import annotations

import logging
import time
from numbers import Integral

from gridpath.config import (
    DEFAULT_GOAL_TEST,
    DEFAULT_HEURISTIC,
    DEFAULT_MODE,
    EXIT_ON_GOAL,
)
from gridpath.errors import SearchConfigurationError, SearchStateError
from gridpath.graph.grid import Cell, GridGraph, Node
from gridpath.search.path import reconstruct_path
from gridpath.search.state import (
    NO_PREDECESSOR,
    SearchResult,
    SearchRun,
    SearchSnapshot,
    SearchStatus,
)
from gridpath.strategies import Strategy, get_strategy

logger = logging.getLogger(__name__)

GOAL_TESTS = ("dequeue", "frontier")


class SearchEngine:
    """
    Runs one search at a time over a GridGraph.

    Lifecycle: UNINITIALIZED -> READY (init) -> RUNNING (step) ->
    SUCCESS or EXHAUSTED. Calling init() again starts a fresh run.

    Goal tests:
    - "dequeue": succeed when the goal is popped from the frontier
    - "frontier": succeed as soon as the goal sits in the frontier after
      a pop (or is the popped node). The popped node is still expanded
      on that step. This may report a path before it is proven cheapest,
      even for Dijkstra and A*.

    With exit_on_goal=False the run does not stop at the goal: the path
    is refreshed whenever the goal test holds and the search continues
    until the frontier empties, ending in SUCCESS if a path was found.
    """

    def __init__(
        self,
        mode: str = DEFAULT_MODE,
        heuristic: str = DEFAULT_HEURISTIC,
        goal_test: str = DEFAULT_GOAL_TEST,
        exit_on_goal: bool = EXIT_ON_GOAL,
    ) -> None:
        """
        Initialize the engine.

        Args:
            mode: Default strategy name, used when init() gets no mode
            heuristic: Heuristic for greedy and astar ("manhattan" or "octile")
            goal_test: "dequeue" or "frontier"
            exit_on_goal: Stop as soon as the goal test holds; if False,
                keep searching until the frontier is empty

        Raises:
            SearchConfigurationError: If mode, heuristic or goal_test is unknown
        """
        if goal_test not in GOAL_TESTS:
            available = ", ".join(GOAL_TESTS)
            raise SearchConfigurationError(
                f"Unknown goal test '{goal_test}'. Available: {available}"
            )
        self._heuristic = heuristic
        self._goal_test = goal_test
        self._exit_on_goal = exit_on_goal
        self._strategy: Strategy = get_strategy(mode, heuristic)
        self._run: SearchRun | None = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def init(
        self,
        graph: GridGraph | None,
        start: Cell | Node,
        goal: Cell | Node,
        mode: str | None = None,
    ) -> SearchSnapshot:
        """
        Start a new run, discarding any previous one.

        Nothing is changed if validation fails.

        Args:
            graph: Graph to search
            start: Start cell (x, y) or node
            goal: Goal cell (x, y) or node
            mode: Strategy for this and later runs (default: keep current)

        Returns:
            Snapshot of the fresh run (start in the frontier)

        Raises:
            SearchConfigurationError: If the graph is missing, start or goal
                is out of bounds or blocked, or mode is unknown
        """
        if graph is None:
            logger.warning("Search init rejected: no graph")
            raise SearchConfigurationError("Cannot initialize a search without a graph")

        start_node = self._resolve(graph, start, "start")
        goal_node = self._resolve(graph, goal, "goal")
        strategy = get_strategy(mode, self._heuristic) if mode is not None else self._strategy

        self._strategy = strategy
        self._run = SearchRun(graph=graph, start=start_node, goal=goal_node)

        logger.info(
            f"Starting {strategy.name} search: {start_node.cell} -> {goal_node.cell} "
            f"(goal test: {self._goal_test})"
        )
        return self._run.snapshot()

    @staticmethod
    def _resolve(graph: GridGraph, cell: Cell | Node, label: str) -> Node:
        """Look up a start/goal cell and check it can be searched from/to."""
        if isinstance(cell, Node):
            x, y = cell.x, cell.y
        else:
            try:
                x, y = cell
            except (TypeError, ValueError) as e:
                raise SearchConfigurationError(
                    f"{label.capitalize()} must be an (x, y) pair, got {cell!r}"
                ) from e
            if not isinstance(x, Integral) or not isinstance(y, Integral):
                raise SearchConfigurationError(
                    f"{label.capitalize()} coordinates must be integers, got {cell!r}"
                )
            x, y = int(x), int(y)

        if not graph.in_bounds(x, y):
            logger.warning(f"Search init rejected: {label} ({x}, {y}) out of bounds")
            raise SearchConfigurationError(
                f"{label.capitalize()} ({x}, {y}) is outside the "
                f"{graph.width}x{graph.height} grid"
            )

        node = graph.node(x, y)
        if node.is_blocked:
            logger.warning(f"Search init rejected: {label} ({x}, {y}) is blocked")
            raise SearchConfigurationError(f"{label.capitalize()} ({x}, {y}) is a blocked cell")
        return node

    def _require_run(self) -> SearchRun:
        if self._run is None:
            raise SearchStateError("Search has not been initialized; call init() first")
        return self._run

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def step(self) -> SearchSnapshot:
        """
        Advance the search by one node.

        Returns:
            Snapshot of the run after this step

        Raises:
            SearchStateError: If the engine is uninitialized or the run has
                already completed
        """
        run = self._require_run()
        if run.status.is_complete:
            raise SearchStateError(f"Search already completed ({run.status.value}); call init() to restart")

        step_start = time.perf_counter()

        if not run.frontier:
            run.elapsed_ms += (time.perf_counter() - step_start) * 1000
            if run.path:
                run.status = SearchStatus.SUCCESS
                self._log_found(run)
            else:
                run.status = SearchStatus.EXHAUSTED
                logger.info(
                    f"No path from {run.start.cell} to {run.goal.cell} "
                    f"({run.iterations} iterations, {len(run.explored)} explored)"
                )
            return run.snapshot()

        current = run.frontier.pop_min()
        run.iterations += 1
        run.mark_explored(current)
        run.status = SearchStatus.RUNNING

        reached = self._goal_reached(run, current)
        if reached:
            # record before expanding, expansion may relax the goal again
            run.path = reconstruct_path(run.predecessor, run.goal.index)
            run.path_distance = float(run.distance[run.goal.index])
        stop = reached and self._exit_on_goal

        if not stop or self._goal_test == "frontier":
            opened = self._strategy.expand(run, current)
            logger.debug(
                f"Iteration {run.iterations}: expanded {run.graph.nodes[current].cell}, "
                f"opened {len(opened)}, frontier {len(run.frontier)}"
            )

        if stop:
            run.status = SearchStatus.SUCCESS
            self._log_found(run)

        run.elapsed_ms += (time.perf_counter() - step_start) * 1000
        return run.snapshot(current)

    def _log_found(self, run: SearchRun) -> None:
        logger.info(
            f"{self._strategy.name}: path found ({len(run.path) - 1} steps, "
            f"cost {run.path_distance:.1f}) after {run.iterations} iterations"
        )

    def _goal_reached(self, run: SearchRun, current: int) -> bool:
        goal = run.goal.index
        if current == goal:
            return True
        return self._goal_test == "frontier" and goal in run.frontier

    def run(self, max_steps: int | None = None) -> SearchResult:
        """
        Step until the run completes or max_steps steps have been taken.

        A capped run stays resumable; call run() or step() again to go on.

        Args:
            max_steps: Optional cap on the number of step() calls

        Returns:
            SearchResult for the run in its current state

        Raises:
            SearchStateError: If the engine is uninitialized
        """
        run = self._require_run()
        steps = 0
        while not run.status.is_complete:
            if max_steps is not None and steps >= max_steps:
                logger.warning(f"Search stopped after {steps} steps without completing")
                break
            self.step()
            steps += 1
        return self.result()

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def snapshot(self) -> SearchSnapshot:
        return self._require_run().snapshot()

    def result(self) -> SearchResult:
        """Summarize the current run."""
        run = self._require_run()
        found = run.status is SearchStatus.SUCCESS
        return SearchResult(
            start=run.start.cell,
            goal=run.goal.cell,
            mode=self._strategy.name,
            status=run.status,
            path=list(run.cells(run.path)),
            cost=run.path_distance if found else None,
            iterations=run.iterations,
            explored_count=len(run.explored),
            elapsed_ms=run.elapsed_ms,
        )

    @property
    def status(self) -> SearchStatus:
        if self._run is None:
            return SearchStatus.UNINITIALIZED
        return self._run.status

    @property
    def is_complete(self) -> bool:
        return self.status.is_complete

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @property
    def mode(self) -> str:
        return self._strategy.name

    @property
    def goal_test(self) -> str:
        return self._goal_test

    @property
    def exit_on_goal(self) -> bool:
        return self._exit_on_goal

    @property
    def iterations(self) -> int:
        return self._run.iterations if self._run is not None else 0

    @property
    def path(self) -> list[Cell]:
        if self._run is None:
            return []
        return list(self._run.cells(self._run.path))

    def distance_to(self, cell: Cell) -> float:
        """Distance traveled recorded for cell in the current run."""
        run = self._require_run()
        return float(run.distance[run.graph.node_at(cell).index])

    def priority_of(self, cell: Cell) -> float:
        """Frontier priority last assigned to cell in the current run."""
        run = self._require_run()
        return float(run.priority[run.graph.node_at(cell).index])

    def predecessor_of(self, cell: Cell) -> Cell | None:
        """Predecessor of cell in the current run, or None."""
        run = self._require_run()
        index = int(run.predecessor[run.graph.node_at(cell).index])
        if index == NO_PREDECESSOR:
            return None
        return run.graph.nodes[index].cell

    def __repr__(self) -> str:
        return f"SearchEngine(mode={self.mode!r}, status={self.status.value!r})"
