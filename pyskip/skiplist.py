"""A skip list storing a sorted multiset of values.

Every level is a singly linked forward chain that starts at a value-less
head node. Heads are stacked through their ``down`` links, the top one is
the entry point of the whole structure. A value lives on level 0 and on a
random number of levels above it; each copy points ``down`` to the copy one
level below.

    level 2   H ──────────────────► 4
              │                     │
    level 1   H ──────► 1 ────────► 4 ──────► 7
              │         │           │         │
    level 0   H ──► 0 ► 1 ► 1 ► 3 ► 4 ► 5 ► 6 ► 7

Duplicates are allowed. Search moves right while the next value is strictly
smaller than the target, so a new value is linked in front of the values
equal to it, and ``remove`` takes out that front-most occurrence.

Complexities (expected):
    • add / find / remove – O(log n)
    • iterate             – O(n)

The structure is single-owner: there is no locking and mutating the list
while an iterator over it is being consumed gives unspecified results.
"""
from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

from .exceptions import InvariantViolation, NotFoundError
from .level import DEFAULT_FACTOR, MAX_LEVEL, LevelChooser, RandomSource

__all__ = ["SkipList"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "down", "right")

    def __init__(self, value: Optional[T], down: Optional[_Node[T]] = None, right: Optional[_Node[T]] = None):
        self.value = value  # None only for head sentinels
        self.down = down
        self.right = right

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self.value!r}>"


# (predecessor, successor) for a single level
_Span = tuple[_Node[T], Optional[_Node[T]]]


class SkipList(Generic[T]):
    """Sorted container of totally ordered values, duplicates included.

    Parameters
    ----------
    items: Iterable
        Values bulk-loaded through :meth:`add` in arrival order.
    rng: RandomSource | None
        Source of uniform integers used to pick levels. Defaults to a private
        unseeded ``random.Random``; pass a seeded one for reproducible shapes.
    factor: int
        Branching factor, a value climbs one level with probability 1/factor.
    max_level: int
        Upper bound on the number of levels a single value may span.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        *,
        rng: Optional[RandomSource] = None,
        factor: int = DEFAULT_FACTOR,
        max_level: int = MAX_LEVEL,
    ) -> None:
        self._levels = LevelChooser(rng if rng is not None else random.Random(), factor, max_level)
        self._head: _Node[T] = _Node(None)
        for item in items:
            self.add(item)

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def add(self, value: T) -> None:
        """Insert `value`.

        The new value is linked immediately before the first node whose
        value is not less than it, on every level it spans. Among equal
        values the most recently added one therefore comes first.
        """
        span = self._levels.choose() + 1
        self._ensure_height(span)

        tracked = self._traverse(value)
        down: Optional[_Node[T]] = None
        for level in range(span):
            pre, nxt = tracked[level]
            node = _Node(value, down, nxt)
            pre.right = node
            down = node

    def remove(self, value: T) -> None:
        """Remove one occurrence of `value`.

        Raises
        ------
        NotFoundError
            If `value` is not stored; the list is left untouched.
        """
        tracked = self._traverse(value)
        _, cur = tracked[0]
        if cur is None or cur.value != value:
            raise NotFoundError(value)

        for pre, cur in tracked:
            if cur is None or cur.value != value:
                continue
            pre.right = cur.right

        self._collapse_head()

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def find(self, value: T) -> bool:
        """Return whether at least one occurrence of `value` is stored."""
        _, cur = self._traverse(value)[0]
        return cur is not None and cur.value == value

    @property
    def height(self) -> int:
        """Number of levels, i.e. the length of the head chain."""
        height = 1
        cur = self._head
        while cur.down is not None:
            height += 1
            cur = cur.down
        return height

    # ------------------------------------------------------------------
    # Iteration helpers (ordered)
    # ------------------------------------------------------------------
    def iter(self) -> Iterator[T]:
        """Yield every stored value in non-decreasing order.

        Each call starts a fresh walk of level 0. Results are unspecified if
        the list is mutated before the returned iterator is exhausted.
        """
        row = self._head
        while row.down is not None:
            row = row.down

        cur = row.right
        while cur is not None:
            yield cur.value  # type: ignore[misc]
            cur = cur.right

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __repr__(self) -> str:  # pragma: no cover
        return f"SkipList(height={self.height})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _ensure_height(self, expected: int) -> None:
        if expected < 1:
            raise InvariantViolation(f"height must be positive, got {expected}")
        current = self.height
        if current >= expected:
            return
        for _ in range(current, expected):
            self._head = _Node(None, self._head)
        logger.debug("head chain grown from %d to %d levels", current, expected)

    def _collapse_head(self) -> None:
        before = self.height
        while self._head.right is None and self._head.down is not None:
            self._head = self._head.down
        after = self.height
        if after != before:
            logger.debug("head chain collapsed from %d to %d levels", before, after)

    def _traverse(self, value: T) -> list[_Span[T]]:
        """Locate `value` on every level.

        Returns a list indexed by level (0 is the bottom) holding the last
        node whose value is strictly less than `value` and the node right
        after it.
        """
        level = self.height - 1
        tracked: list[_Span[T]] = [None] * (level + 1)  # type: ignore[list-item]

        pre: Optional[_Node[T]] = self._head
        while pre is not None:
            cur = pre.right
            while cur is not None and cur.value < value:  # type: ignore[operator]
                pre = cur
                cur = cur.right

            if level < 0:
                raise InvariantViolation("traversal descended below level 0")
            tracked[level] = (pre, cur)
            pre = pre.down
            level -= 1

        if level != -1:
            raise InvariantViolation(f"traversal stopped at level {level}, expected -1")
        return tracked
