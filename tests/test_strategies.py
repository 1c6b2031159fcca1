"""
Unit tests for strategy lookup and single expansions.
"""

import pytest

from gridpath.errors import SearchConfigurationError
from gridpath.search import SearchRun
from gridpath.strategies import (
    AStarStrategy,
    BreadthFirstStrategy,
    DijkstraStrategy,
    GreedyBestFirstStrategy,
    get_strategy,
)


def start_run(graph, start, goal) -> tuple[SearchRun, int]:
    """Create a run and pop its start node, as the engine's first step does."""
    run = SearchRun(graph=graph, start=graph.node_at(start), goal=graph.node_at(goal))
    current = run.frontier.pop_min()
    run.mark_explored(current)
    return run, current


class TestGetStrategy:
    """Test strategy lookup by name."""

    @pytest.mark.parametrize(
        "name, cls",
        [
            ("breadth_first", BreadthFirstStrategy),
            ("bfs", BreadthFirstStrategy),
            ("dijkstra", DijkstraStrategy),
            ("greedy", GreedyBestFirstStrategy),
            ("greedy_best_first", GreedyBestFirstStrategy),
            ("astar", AStarStrategy),
            ("A*", AStarStrategy),
            (" a_star ", AStarStrategy),
        ],
    )
    def test_names_and_aliases(self, name, cls):
        """Canonical names and aliases resolve to the right class."""
        assert isinstance(get_strategy(name), cls)

    def test_unknown_name(self):
        """Unknown names list the available modes."""
        with pytest.raises(SearchConfigurationError, match="Available: breadth_first"):
            get_strategy("depth_first")

    def test_heuristic_passed_through(self):
        """Informed strategies take the heuristic; others ignore it."""
        assert get_strategy("astar", heuristic="octile").heuristic == "octile"
        assert get_strategy("greedy").heuristic == "manhattan"
        assert isinstance(get_strategy("dijkstra", heuristic="octile"), DijkstraStrategy)

    def test_unknown_heuristic(self):
        """Unknown heuristics are rejected."""
        with pytest.raises(SearchConfigurationError, match="Unknown heuristic"):
            get_strategy("astar", heuristic="euclid")

    def test_descriptions(self):
        """Every strategy describes itself."""
        for name in ("breadth_first", "dijkstra", "greedy", "astar"):
            strategy = get_strategy(name)
            assert strategy.name == name
            assert strategy.description


class TestExpand:
    """Test one expansion of the start node on an open 3x3 grid."""

    def test_breadth_first(self, open_grid):
        """Neighbors get the explored-set size as priority."""
        run, current = start_run(open_grid, (0, 0), (2, 2))
        opened = BreadthFirstStrategy().expand(run, current)

        assert run.cells(opened) == ((0, 1), (1, 1), (1, 0))
        assert all(run.priority[i] == 1.0 for i in opened)
        assert run.distance[open_grid.node(1, 1).index] == pytest.approx(1.4)
        assert run.predecessor[open_grid.node(1, 0).index] == current

    def test_dijkstra(self, open_grid):
        """Neighbors are prioritized by distance traveled."""
        run, current = start_run(open_grid, (0, 0), (2, 2))
        opened = DijkstraStrategy().expand(run, current)

        priorities = {run.graph.nodes[i].cell: run.priority[i] for i in opened}
        assert priorities[(0, 1)] == pytest.approx(1.0)
        assert priorities[(1, 1)] == pytest.approx(1.4)

    def test_greedy(self, open_grid):
        """Neighbors are prioritized by Manhattan distance to the goal."""
        run, current = start_run(open_grid, (0, 0), (2, 2))
        opened = GreedyBestFirstStrategy().expand(run, current)

        priorities = {run.graph.nodes[i].cell: run.priority[i] for i in opened}
        assert priorities == {(0, 1): 3.0, (1, 1): 2.0, (1, 0): 3.0}

    def test_astar(self, open_grid):
        """Neighbors are prioritized by distance + heuristic."""
        run, current = start_run(open_grid, (0, 0), (2, 2))
        opened = AStarStrategy().expand(run, current)

        priorities = {run.graph.nodes[i].cell: run.priority[i] for i in opened}
        assert priorities[(0, 1)] == pytest.approx(4.0)
        assert priorities[(1, 1)] == pytest.approx(3.4)

    def test_terrain_of_cell_left(self, heavy_detour_grid):
        """Leaving heavy terrain adds its cost; entering it does not."""
        run, current = start_run(heavy_detour_grid, (0, 0), (2, 0))
        DijkstraStrategy().expand(run, current)
        heavy = heavy_detour_grid.node(1, 0).index
        assert run.distance[heavy] == pytest.approx(1.0)

        run.frontier.pop_min()  # (0, 1)
        run.mark_explored(heavy_detour_grid.node(0, 1).index)
        DijkstraStrategy().expand(run, heavy)
        assert run.distance[heavy_detour_grid.node(2, 0).index] == pytest.approx(6.0)

    def test_skips_queued_for_uninformed_order(self, open_grid):
        """Breadth-first never touches a neighbor that is already queued."""
        run, current = start_run(open_grid, (0, 0), (2, 2))
        strategy = BreadthFirstStrategy()
        strategy.expand(run, current)

        nxt = run.frontier.pop_min()  # (0, 1)
        run.mark_explored(nxt)
        before = run.predecessor.copy()
        strategy.expand(run, nxt)
        # (1, 1) and (1, 0) were queued and keep their predecessor
        for cell in [(1, 1), (1, 0)]:
            index = open_grid.node_at(cell).index
            assert run.predecessor[index] == before[index]
        assert len(run.frontier) == 4
