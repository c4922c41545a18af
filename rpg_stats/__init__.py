"""
rpg-stats: experience and level progression for game stats.

A stat tracks Exp and a level between a min and max level. Gaining or losing
Exp moves it along an Exp table, and observers are notified once for every
level gained or lost.
"""

from rpg_stats.advancement import (
    ExpTable,
    LevelCallback,
    LevelingStat,
    RPGStat,
    StatRegistry,
    create_stat,
)
from rpg_stats.config import StatConfig, setup_logging

__all__ = [
    "ExpTable",
    "LevelCallback",
    "LevelingStat",
    "RPGStat",
    "StatRegistry",
    "create_stat",
    "StatConfig",
    "setup_logging",
]
