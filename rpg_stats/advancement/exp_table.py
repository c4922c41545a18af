"""
Experience table for RPG stats.

Holds the per-level schedule of how much Exp a stat needs to level up.
Index 0 is the requirement to go from level 0 to level 1, index 1 from
level 1 to level 2, and so on. Levels the schedule does not cover are
reported as unknown (None), which stat logic treats as "cannot level further".
"""

from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ExpTable:
    """
    Per-level Exp requirements for a stat.

    Usage:
        # Explicit schedule
        table = ExpTable([100, 200, 300])

        # Generated schedule: 100, 150, 225, ...
        table = ExpTable.create_from_multiplier(100, 1.5, levels_to_make=10)

        table.get_level_max_exp(1)        # 200.0
        table.get_level_max_exp(5)        # None (not covered)
        table.can_level_up(0, 120)        # True
    """

    def __init__(self, exp_per_level: Optional[list[float]] = None):
        """
        Initialize the table.

        Args:
            exp_per_level: How much Exp each level requires to level up
        """
        self.exp_per_level: list[float] = [float(exp) for exp in exp_per_level or []]

    @property
    def max_known_level(self) -> int:
        """Highest level index with a known requirement (-1 for an empty table)."""
        return len(self.exp_per_level) - 1

    def get_level_max_exp(self, level: int) -> Optional[float]:
        """
        Get how much Exp a level requires to level up.

        Args:
            level: The level to look up

        Returns:
            The requirement, or None if the table does not cover the level
        """
        if level < 0 or level >= len(self.exp_per_level):
            return None
        return self.exp_per_level[level]

    def get_remaining_exp(self, level: int, current_exp: float) -> Optional[float]:
        """
        Get how much Exp is still needed to level up.

        Args:
            level: Stat's current level
            current_exp: Stat's current Exp

        Returns:
            Requirement minus current Exp, or None if the requirement is unknown
        """
        max_exp = self.get_level_max_exp(level)
        if max_exp is None:
            return None
        return max_exp - current_exp

    def can_level_up(self, level: int, current_exp: float) -> bool:
        """
        Check if a stat can level up based on its current level and Exp.

        Args:
            level: Stat's current level
            current_exp: Stat's current Exp

        Returns:
            True if the requirement is known and has been met
        """
        max_exp = self.get_level_max_exp(level)
        if max_exp is None:
            return False
        return current_exp >= max_exp

    def total_exp_for_level(self, level: int) -> Optional[float]:
        """
        Get the cumulative Exp needed to reach a level starting from level 0.

        Args:
            level: Target level

        Returns:
            Sum of the requirements of every level below ``level``, or None
            if any of them is unknown
        """
        if level < 0 or level - 1 > self.max_known_level:
            return None
        return sum(self.exp_per_level[:level], 0.0)

    @classmethod
    def create_from_multiplier(
        cls,
        base_exp: float,
        multiplier: float,
        levels_to_make: int,
    ) -> "ExpTable":
        """
        Build a table from a base amount and a growth multiplier.

        A multiplier above 1 grows geometrically (previous * multiplier).
        A multiplier of 1 or less is read as a fractional increase
        (previous + previous * multiplier), so the schedule never shrinks.

        Args:
            base_exp: Exp required for level 0 to level up
            multiplier: Growth applied from one level to the next
            levels_to_make: Number of entries to produce

        Returns:
            A new ExpTable with exactly ``levels_to_make`` entries
        """
        exp_per_level: list[float] = []
        last_exp = float(base_exp)

        for i in range(levels_to_make):
            if i > 0:
                next_exp = last_exp * multiplier
                if multiplier <= 1:
                    next_exp += last_exp
                last_exp = next_exp
            exp_per_level.append(last_exp)

        logger.debug(
            f"Generated ExpTable: base={base_exp}, multiplier={multiplier}, "
            f"levels={len(exp_per_level)}"
        )
        return cls(exp_per_level)

    def __len__(self) -> int:
        return len(self.exp_per_level)

    def __repr__(self) -> str:
        return f"ExpTable(levels={len(self.exp_per_level)})"
