"""
Search module.

Provides stepwise search over a GridGraph:
- PriorityFrontier: Frontier ordered by current priority
- SearchRun: Mutable per-run state
- SearchSnapshot: Read-only view after each step
- SearchResult: Summary of a run
- SearchEngine: Runs searches one step at a time
"""

from gridpath.search.engine import GOAL_TESTS, SearchEngine
from gridpath.search.frontier import PriorityFrontier
from gridpath.search.path import is_contiguous, path_cost, reconstruct_path
from gridpath.search.state import SearchResult, SearchRun, SearchSnapshot, SearchStatus

__all__ = [
    "GOAL_TESTS",
    "PriorityFrontier",
    "SearchEngine",
    "SearchResult",
    "SearchRun",
    "SearchSnapshot",
    "SearchStatus",
    "is_contiguous",
    "path_cost",
    "reconstruct_path",
]
