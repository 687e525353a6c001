"""Unit tests for randomised level selection."""
import logging
import random

import pytest

from pyskip.level import DEFAULT_FACTOR, MAX_LEVEL, LevelChooser

from conftest import ScriptedRandom


def test_defaults():
    chooser = LevelChooser(random.Random(0))
    assert chooser.factor == DEFAULT_FACTOR == 4
    assert chooser.max_level == MAX_LEVEL


def test_climbs_while_draw_is_zero():
    """Each zero draw adds a level, the first non-zero draw stops."""
    chooser = LevelChooser(ScriptedRandom([0, 0, 3, 0, 2, 1]))
    assert chooser.choose() == 2
    assert chooser.choose() == 1
    assert chooser.choose() == 0


def test_cap_clips_level(caplog):
    """Level never reaches max_level, the clip is logged."""
    chooser = LevelChooser(ScriptedRandom([0] * 10), max_level=3)
    with caplog.at_level(logging.DEBUG, logger="pyskip.level"):
        assert chooser.choose() == 2
    assert "clipped" in caplog.text


def test_single_level_cap():
    chooser = LevelChooser(ScriptedRandom([0]), max_level=1)
    assert chooser.choose() == 0


@pytest.mark.parametrize("factor, max_level", [(1, 32), (0, 32), (4, 0)])
def test_rejects_bad_settings(factor, max_level):
    with pytest.raises(ValueError):
        LevelChooser(random.Random(0), factor, max_level)


def test_distribution_is_geometric():
    """Mean extra level approaches 1 / (factor - 1)."""
    chooser = LevelChooser(random.Random(2024))
    draws = [chooser.choose() for _ in range(20000)]
    mean = sum(draws) / len(draws)
    assert abs(mean - 1 / 3) < 0.05
    assert draws.count(0) / len(draws) == pytest.approx(0.75, abs=0.02)
