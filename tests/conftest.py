"""Shared fixtures and helpers for the skip-list tests."""
import random

import pytest


class ScriptedRandom:
    """Random source replaying a fixed list of draws."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self._draws.pop(0)


def spans(*heights):
    """Build the draw script making consecutive adds span `heights` levels."""
    draws = []
    for h in heights:
        draws.extend([0] * (h - 1) + [1])
    return ScriptedRandom(draws)


def level_rows(sl):
    """Return the values on every level, bottom level first."""
    rows = []
    head = sl._head
    while head is not None:
        row = []
        cur = head.right
        while cur is not None:
            row.append(cur.value)
            cur = cur.right
        rows.append(row)
        head = head.down
    return rows[::-1]


def assert_well_formed(sl):
    """Check ordering, sentinel and down-link invariants on every level."""
    head = sl._head
    while head is not None:
        assert head.value is None
        cur = head.right
        prev = None
        while cur is not None:
            if prev is not None:
                assert not cur.value < prev.value
            if head.down is not None:
                assert cur.down is not None
                assert cur.down.value == cur.value
            else:
                assert cur.down is None
            prev = cur
            cur = cur.right
        head = head.down


@pytest.fixture
def rng():
    """Deterministic random source for reproducible shapes."""
    return random.Random(1234)
