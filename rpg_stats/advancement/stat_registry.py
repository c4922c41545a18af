"""
Stat Registry for rpg-stats.

Creates RPGStats and keeps track of every stat created through it. Any
LevelingStat, including ones that do not derive from RPGStat, can be added
with register(). The registry is owned by the caller; there is no global
instance.
"""

from typing import Iterator, Optional
import logging

from rpg_stats.advancement.exp_table import ExpTable
from rpg_stats.advancement.rpg_stat import LevelingStat, RPGStat
from rpg_stats.config import StatConfig

logger = logging.getLogger(__name__)


def create_stat(
    name: str,
    max_level: int,
    base_exp: Optional[float] = None,
    exp_multiplier: Optional[float] = None,
    *,
    registry: Optional["StatRegistry"] = None,
    stat_cls: type[RPGStat] = RPGStat,
) -> RPGStat:
    """
    Create a stat, optionally recording it in a registry.

    Args:
        name: Name of the stat. Also used as its display name
        max_level: Max level for the stat
        base_exp: Exp level 0 requires to level up (used with exp_multiplier)
        exp_multiplier: Growth of the requirement from level to level
        registry: Registry to add the new stat to
        stat_cls: RPGStat subclass implementing the leveling policy

    Returns:
        The new stat
    """
    stat = stat_cls(name, max_level, base_exp, exp_multiplier)
    if registry is not None:
        registry.register(stat)
    return stat


class StatRegistry:
    """
    Caller-owned collection of every stat created through it.

    Usage:
        registry = StatRegistry()
        strength = registry.create("Strength", max_level=50, base_exp=100, exp_multiplier=1.2)
        registry.get("Strength") is strength   # True

        for stat in registry:
            print(stat.display_name, stat.current_level)
    """

    def __init__(self, stat_cls: type[RPGStat] = RPGStat):
        """
        Initialize an empty registry.

        Args:
            stat_cls: Default RPGStat subclass used by create() and
                create_from_config()
        """
        self.stat_cls = stat_cls
        self._stats: list[LevelingStat] = []

    @property
    def all_stats(self) -> list[LevelingStat]:
        """Get every registered stat in creation order."""
        return self._stats.copy()

    def create(
        self,
        name: str,
        max_level: int,
        base_exp: Optional[float] = None,
        exp_multiplier: Optional[float] = None,
        stat_cls: Optional[type[RPGStat]] = None,
    ) -> RPGStat:
        """
        Create a stat and register it.

        Args:
            name: Name of the stat
            max_level: Max level for the stat
            base_exp: Exp level 0 requires to level up (used with exp_multiplier)
            exp_multiplier: Growth of the requirement from level to level
            stat_cls: Override the registry's default stat class

        Returns:
            The new stat
        """
        stat = create_stat(
            name,
            max_level,
            base_exp,
            exp_multiplier,
            registry=self,
            stat_cls=stat_cls or self.stat_cls,
        )
        logger.info(f"Created stat '{name}' (max level {stat.max_level})")
        return stat

    def create_from_config(self, config: StatConfig) -> RPGStat:
        """
        Create a stat from a StatConfig and register it.

        Args:
            config: Stat configuration

        Returns:
            The new stat
        """
        if config.generates_table:
            exp_table = ExpTable.create_from_multiplier(
                config.base_exp, config.exp_multiplier, config.max_level
            )
        else:
            exp_table = ExpTable(config.exp_per_level)

        stat = self.stat_cls(
            name=config.name,
            max_level=config.max_level,
            exp_table=exp_table,
            min_level=config.min_level,
            display_name=config.display_name,
        )
        self.register(stat)
        logger.info(
            f"Created stat '{config.name}' from config "
            f"(levels {stat.min_level}-{stat.max_level}, {len(exp_table)} table entries)"
        )
        return stat

    def register(self, stat: LevelingStat) -> None:
        """
        Add an existing stat to the registry.

        Accepts any LevelingStat, not only RPGStat subclasses.

        Args:
            stat: The stat to add
        """
        self._stats.append(stat)

    def get(self, name: str) -> Optional[LevelingStat]:
        """
        Look up a stat by name.

        Args:
            name: Name of the stat

        Returns:
            The first stat registered with that name, or None
        """
        for stat in self._stats:
            if stat.name == name:
                return stat
        logger.debug(f"Stat not found: {name}")
        return None

    def names(self) -> list[str]:
        """Get the names of all registered stats in creation order."""
        return [stat.name for stat in self._stats]

    def remove(self, name: str) -> bool:
        """
        Remove the first stat registered with a name.

        Args:
            name: Name of the stat

        Returns:
            True if a stat was removed
        """
        stat = self.get(name)
        if stat is None:
            return False
        self._stats.remove(stat)
        return True

    def clear(self) -> None:
        """Remove all registered stats."""
        self._stats.clear()

    def __len__(self) -> int:
        return len(self._stats)

    def __iter__(self) -> Iterator[LevelingStat]:
        return iter(self._stats.copy())

    def __contains__(self, name: object) -> bool:
        return any(stat.name == name for stat in self._stats)

    def __repr__(self) -> str:
        return f"StatRegistry(stats={len(self._stats)})"
