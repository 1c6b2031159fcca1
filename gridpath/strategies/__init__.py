"""
Strategies module.

Provides the frontier-expansion policies the engine can run:
- BreadthFirstStrategy: FIFO order, first discovery wins
- DijkstraStrategy: Lowest distance traveled first
- GreedyBestFirstStrategy: Lowest heuristic distance to goal first
- AStarStrategy: Lowest distance traveled + heuristic first
"""

from gridpath.config import DEFAULT_HEURISTIC
from gridpath.errors import SearchConfigurationError
from gridpath.strategies.astar import AStarStrategy
from gridpath.strategies.base import HEURISTICS, HeuristicStrategy, Strategy
from gridpath.strategies.breadth_first import BreadthFirstStrategy
from gridpath.strategies.dijkstra import DijkstraStrategy
from gridpath.strategies.greedy import GreedyBestFirstStrategy

__all__ = [
    "Strategy",
    "HeuristicStrategy",
    "HEURISTICS",
    "BreadthFirstStrategy",
    "DijkstraStrategy",
    "GreedyBestFirstStrategy",
    "AStarStrategy",
    "MODES",
    "get_strategy",
]

MODES = ("breadth_first", "dijkstra", "greedy", "astar")

_ALIASES = {
    "bfs": "breadth_first",
    "breadth-first": "breadth_first",
    "greedy_best_first": "greedy",
    "greedy-best-first": "greedy",
    "a*": "astar",
    "a_star": "astar",
    "a-star": "astar",
}


def get_strategy(name: str, heuristic: str = DEFAULT_HEURISTIC) -> Strategy:
    """
    Get a strategy by name.

    Args:
        name: Strategy identifier (breadth_first, dijkstra, greedy, astar)
            or one of its aliases (bfs, a*, ...)
        heuristic: Heuristic for greedy and astar; ignored by the others

    Returns:
        Instantiated strategy

    Raises:
        SearchConfigurationError: If the name or heuristic is unknown
    """
    strategies = {
        "breadth_first": BreadthFirstStrategy,
        "dijkstra": DijkstraStrategy,
        "greedy": GreedyBestFirstStrategy,
        "astar": AStarStrategy,
    }

    key = name.strip().lower()
    key = _ALIASES.get(key, key)

    if key not in strategies:
        available = ", ".join(strategies.keys())
        raise SearchConfigurationError(f"Unknown mode '{name}'. Available: {available}")

    # Informed strategies take the heuristic
    if issubclass(strategies[key], HeuristicStrategy):
        return strategies[key](heuristic=heuristic)

    return strategies[key]()
