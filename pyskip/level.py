"""Randomised level selection for the skip list.

A value always lives on level 0 and climbs one more level every time a draw
from ``[0, factor)`` comes up zero, i.e. the geometric policy with success
probability ``1 / factor``. With the default branching factor of 4 a value
spans ``1 + 1/3`` levels on average and the list height stays near
``log4(n)``.

The climb is clipped at ``max_level - 1`` so that an unlucky streak cannot
grow the head chain without bound.
"""
from __future__ import annotations

import logging
from typing import Protocol

__all__ = ["DEFAULT_FACTOR", "MAX_LEVEL", "RandomSource", "LevelChooser"]

logger = logging.getLogger(__name__)

DEFAULT_FACTOR = 4
MAX_LEVEL = 32  # log4(2**64): enough for any list that fits in memory.


class RandomSource(Protocol):
    """Anything producing uniform integers in ``[lo, hi)``; ``random.Random`` qualifies."""

    def randrange(self, start: int, stop: int) -> int: ...


class LevelChooser:
    """Draw the top level (0-based) a freshly added value is linked into."""

    __slots__ = ("rng", "factor", "max_level")

    def __init__(self, rng: RandomSource, factor: int = DEFAULT_FACTOR, max_level: int = MAX_LEVEL):
        if factor < 2:
            raise ValueError(f"branching factor must be >= 2, got {factor}")
        if max_level < 1:
            raise ValueError(f"max_level must be >= 1, got {max_level}")
        self.rng = rng
        self.factor = factor
        self.max_level = max_level

    def choose(self) -> int:
        level = 0
        while self.rng.randrange(0, self.factor) == 0:
            if level + 1 >= self.max_level:
                logger.debug("level draw clipped at cap %d", self.max_level)
                break
            level += 1
        return level

    def __repr__(self) -> str:  # pragma: no cover
        return f"LevelChooser(factor={self.factor}, max_level={self.max_level})"
