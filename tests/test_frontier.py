"""
Unit tests for PriorityFrontier.
"""

import pytest

from gridpath.errors import FrontierEmptyError
from gridpath.search import PriorityFrontier


@pytest.fixture
def priorities() -> dict[str, float]:
    """Mutable priority table read by the frontier."""
    return {}


@pytest.fixture
def frontier(priorities) -> PriorityFrontier:
    return PriorityFrontier(priorities.__getitem__)


class TestPopMin:
    """Test ordering of pop_min()."""

    def test_pops_lowest_priority(self, frontier, priorities):
        """The smallest priority comes out first."""
        priorities.update(a=3.0, b=1.0, c=2.0)
        for item in "abc":
            frontier.push(item)
        assert [frontier.pop_min() for _ in range(3)] == ["b", "c", "a"]

    def test_ties_by_insertion_order(self, frontier, priorities):
        """Equal priorities come out first-in, first-out."""
        priorities.update(a=1.0, b=1.0, c=0.5, d=1.0)
        for item in "abcd":
            frontier.push(item)
        assert [frontier.pop_min() for _ in range(4)] == ["c", "a", "b", "d"]

    def test_priority_read_at_pop_time(self, frontier, priorities):
        """Lowering a queued item's priority changes the order without re-pushing."""
        priorities.update(a=1.0, b=5.0)
        frontier.push("a")
        frontier.push("b")
        priorities["b"] = 0.1
        assert frontier.pop_min() == "b"

    def test_empty_raises(self, frontier):
        """Popping an empty frontier raises FrontierEmptyError."""
        with pytest.raises(FrontierEmptyError):
            frontier.pop_min()

    def test_empty_error_is_index_error(self, frontier):
        """FrontierEmptyError should also be an IndexError."""
        with pytest.raises(IndexError):
            frontier.pop_min()


class TestMembership:
    """Test contains(), duplicates and snapshots."""

    def test_contains(self, frontier, priorities):
        """Pushed items are members until popped."""
        priorities.update(a=1.0)
        assert not frontier.contains("a")
        frontier.push("a")
        assert frontier.contains("a")
        assert "a" in frontier
        frontier.pop_min()
        assert "a" not in frontier

    def test_duplicates(self, frontier, priorities):
        """Duplicates are kept; membership lasts until the last copy is popped."""
        priorities.update(a=1.0)
        frontier.push("a")
        frontier.push("a")
        assert len(frontier) == 2
        frontier.pop_min()
        assert "a" in frontier
        frontier.pop_min()
        assert "a" not in frontier
        assert not frontier

    def test_snapshot_does_not_remove(self, frontier, priorities):
        """snapshot() copies the contents in insertion order."""
        priorities.update(a=2.0, b=1.0)
        frontier.push("a")
        frontier.push("b")
        snap = frontier.snapshot()
        assert snap == ("a", "b")
        assert len(frontier) == 2
        frontier.pop_min()
        assert snap == ("a", "b")

    def test_clear(self, frontier, priorities):
        """clear() empties the frontier."""
        priorities.update(a=1.0)
        frontier.push("a")
        frontier.clear()
        assert len(frontier) == 0
        assert "a" not in frontier
