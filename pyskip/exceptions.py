"""Exception hierarchy for :mod:`pyskip`.

Two failure kinds exist and they are deliberately kept apart:

    • ``NotFoundError``      – recoverable, raised by ``SkipList.remove``
    • ``InvariantViolation`` – fatal, the linked structure is corrupted
"""
from __future__ import annotations

from typing import Any

__all__ = ["SkipListError", "NotFoundError", "InvariantViolation"]


class SkipListError(Exception):
    """Base class for every error raised by this package."""


class NotFoundError(SkipListError, ValueError):
    """The requested value is not stored in the skip list."""

    def __init__(self, value: Any):
        super().__init__(f"no such value: {value!r}")
        self.value = value


class InvariantViolation(SkipListError, AssertionError):
    """Internal consistency check failed; the structure can no longer be trusted."""
