"""
Pytest fixtures for rpg-stats test suite.

Provides reusable Exp tables, stats and registries.
"""

import pytest

from rpg_stats.advancement.exp_table import ExpTable
from rpg_stats.advancement.rpg_stat import RPGStat
from rpg_stats.advancement.stat_registry import StatRegistry


# =============================================================================
# EXP TABLE FIXTURES
# =============================================================================


@pytest.fixture
def small_table():
    """Three-level table: 100 to leave level 0, 200 for level 1, 300 for level 2."""
    return ExpTable([100, 200, 300])


@pytest.fixture
def geometric_table():
    """Ten-level generated table doubling every level."""
    return ExpTable.create_from_multiplier(10, 2, 10)


# =============================================================================
# STAT FIXTURES
# =============================================================================


@pytest.fixture
def stat(small_table):
    """A fresh stat using the three-level table, capped at level 3."""
    return RPGStat("Popping Power", max_level=3, exp_table=small_table)


@pytest.fixture
def long_stat():
    """A stat capped at level 10 on a flat 100 Exp per level table."""
    return RPGStat("Archery", max_level=10, exp_table=ExpTable([100] * 10))


@pytest.fixture
def level_events(stat):
    """Record level-raised and level-reduced notifications of ``stat``."""
    events: list[tuple[str, int]] = []
    stat.on_level_raised.append(lambda: events.append(("raised", stat.current_level)))
    stat.on_level_reduced.append(lambda: events.append(("reduced", stat.current_level)))
    return events


# =============================================================================
# REGISTRY FIXTURES
# =============================================================================


@pytest.fixture
def registry():
    """An empty caller-owned stat registry."""
    return StatRegistry()
