"""
Priority frontier with priorities read at pop time.

Entries are not keyed by the priority they had when pushed. The frontier
asks a priority callable for each entry's current value whenever it pops,
so a strategy may lower a queued node's priority in place without
removing and re-inserting it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterator
from typing import Generic, TypeVar

from gridpath.errors import FrontierEmptyError

T = TypeVar("T", bound=Hashable)


class PriorityFrontier(Generic[T]):
    """
    Multiset of items ordered by their current priority.

    Duplicates are allowed. Ties are broken by insertion order, so items
    pushed with equal priority come out first-in, first-out.
    """

    def __init__(self, priority: Callable[[T], float]) -> None:
        """
        Args:
            priority: Returns an item's current priority (lower pops first)
        """
        self._priority = priority
        self._entries: list[T] = []  # insertion order
        self._counts: Counter[T] = Counter()

    def push(self, item: T) -> None:
        self._entries.append(item)
        self._counts[item] += 1

    def pop_min(self) -> T:
        """
        Remove and return the item with the smallest current priority.

        Raises:
            FrontierEmptyError: If the frontier is empty
        """
        if not self._entries:
            raise FrontierEmptyError("pop_min() called on an empty frontier")

        entries = self._entries
        priority = self._priority
        best = min(range(len(entries)), key=lambda i: (priority(entries[i]), i))
        item = entries.pop(best)

        self._counts[item] -= 1
        if self._counts[item] == 0:
            del self._counts[item]
        return item

    def contains(self, item: T) -> bool:
        return item in self._counts

    def snapshot(self) -> tuple[T, ...]:
        """Point-in-time copy of the contents, in insertion order."""
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._counts.clear()

    def __contains__(self, item: object) -> bool:
        return item in self._counts

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"PriorityFrontier(size={len(self._entries)})"
