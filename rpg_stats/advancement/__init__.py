"""
Advancement system for rpg-stats.

Handles Exp tables, stat leveling and stat creation.
"""

from rpg_stats.advancement.exp_table import ExpTable
from rpg_stats.advancement.rpg_stat import (
    LevelCallback,
    LevelingStat,
    RPGStat,
)
from rpg_stats.advancement.stat_registry import (
    StatRegistry,
    create_stat,
)

__all__ = [
    "ExpTable",
    "LevelCallback",
    "LevelingStat",
    "RPGStat",
    "StatRegistry",
    "create_stat",
]
