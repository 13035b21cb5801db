"""Interval conflict index for study_tracker.

This module provides the structure holding unavailable time blocks and
rejecting any block that overlaps one already stored.
"""

from dataclasses import dataclass
from datetime import time

from study_tracker.logging import get_logger
from study_tracker.models.schedule import TimeInterval

__all__ = [
    "IntervalIndex",
]

logger = get_logger(__name__)


@dataclass
class _Node:
    interval: TimeInterval
    max_end: time
    left: "_Node | None" = None
    right: "_Node | None" = None


class IntervalIndex:
    """Binary search tree of non-overlapping intervals keyed by start time.

    Every node visited while descending is checked for overlap with the
    candidate, and the insertion is rejected at the first overlap. A start
    strictly before the node's start goes left, anything else goes right.
    Each node tracks the largest end time in its subtree.

    The tree is not self-balancing, so inserts are O(n) in the worst case.
    Blocks cannot be removed once inserted.

    Example:
        index = IntervalIndex()
        index.insert(TimeInterval(start="09:00", end="10:00"))  # True
        index.insert(TimeInterval(start="09:30", end="10:30"))  # False
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, interval: TimeInterval) -> bool:
        """Insert an interval unless it overlaps a stored one.

        Args:
            interval: Candidate interval

        Returns:
            True if inserted, False if rejected as a conflict
        """
        if self._root is None:
            self._root = _Node(interval=interval, max_end=interval.end)
            self._size = 1
            return True

        path: list[_Node] = []
        node: _Node | None = self._root
        while node is not None:
            if node.interval.overlaps(interval):
                logger.debug(
                    "interval_conflict",
                    candidate=str(interval),
                    existing=str(node.interval),
                )
                return False
            path.append(node)
            node = node.left if interval.start < node.interval.start else node.right

        parent = path[-1]
        leaf = _Node(interval=interval, max_end=interval.end)
        if interval.start < parent.interval.start:
            parent.left = leaf
        else:
            parent.right = leaf

        for ancestor in path:
            if ancestor.max_end < interval.end:
                ancestor.max_end = interval.end

        self._size += 1
        return True

    def intervals(self) -> list[TimeInterval]:
        """Return stored intervals ordered by start time."""
        ordered: list[TimeInterval] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            ordered.append(node.interval)
            node = node.right
        return ordered

    @property
    def max_end(self) -> time | None:
        """Latest end time across all stored intervals."""
        return self._root.max_end if self._root is not None else None
