"""PySkip: a probabilistic sorted multiset built on a skip list.

The package exposes `pyskip.SkipList` with four operations (add, find,
remove, ordered iteration) plus the exceptions it raises.
"""

from __future__ import annotations

__all__ = [
    "SkipList",
    "SkipListError",
    "NotFoundError",
    "InvariantViolation",
]

from .exceptions import InvariantViolation, NotFoundError, SkipListError
from .skiplist import SkipList
