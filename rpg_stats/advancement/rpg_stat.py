"""
RPG Stat leveling for rpg-stats.

Implements the leveling state machine for a single stat:
- Raising Exp consumes the Exp table level by level, firing one
  level-raised notification per level gained
- Reducing Exp walks levels back down; dropping a level lands the stat at
  the full requirement of the level it enters
- Levels can also be raised, reduced or set directly

Notifications are plain zero-argument callables kept in two ordered lists,
``on_level_raised`` and ``on_level_reduced``. They are invoked inline, so a
callback that changes the same stat takes effect before the triggering
operation continues.
"""

from typing import Any, Callable, Optional, Protocol, runtime_checkable
import logging

from rpg_stats.advancement.exp_table import ExpTable

logger = logging.getLogger(__name__)


LevelCallback = Callable[[], Any]


@runtime_checkable
class LevelingStat(Protocol):
    """
    Protocol for stats that can be leveled.

    RPGStat is the default implementation. A class implementing this protocol
    from scratch is added to a StatRegistry with register(); the registry's
    create methods build RPGStat subclasses only.
    """

    name: str
    display_name: str
    on_level_raised: list[Optional[LevelCallback]]
    on_level_reduced: list[Optional[LevelCallback]]

    @property
    def current_level(self) -> int:
        ...

    @property
    def current_exp(self) -> float:
        ...

    @property
    def min_level(self) -> int:
        ...

    @property
    def max_level(self) -> int:
        ...

    def raise_exp(self, amount_to_add: float) -> None:
        ...

    def reduce_exp(self, amount_to_remove: float) -> None:
        ...

    def raise_level(self, num_levels: int = 1) -> None:
        ...

    def reduce_level(self, num_levels: int = 1) -> None:
        ...

    def set_level(self, new_level: int, use_leveling_logic: bool = True) -> None:
        ...

    def set_min_level(self, new_min_level: int, use_leveling_logic: bool = True) -> None:
        ...

    def set_max_level(self, new_max_level: int, use_leveling_logic: bool = True) -> None:
        ...


def _invoke_all(callbacks: list[Optional[LevelCallback]]) -> None:
    # Callbacks added during dispatch fire from the next level step on
    for callback in list(callbacks):
        if callback is not None:
            callback()


class RPGStat:
    """
    A named stat with a level, Exp, level bounds and an Exp table.

    The stat starts at level 0 with 0 Exp. Level and Exp are read-only from
    the outside and only change through the leveling operations.

    Attributes:
        name: Name of the stat
        display_name: Name shown to players (defaults to name)
        exp_table: Exp required per level; may be shared between stats
        on_level_raised: Called once for every level gained
        on_level_reduced: Called once for every level lost
    """

    def __init__(
        self,
        name: str = "",
        max_level: int = 0,
        base_exp: Optional[float] = None,
        exp_multiplier: Optional[float] = None,
        exp_table: Optional[ExpTable] = None,
        min_level: int = 0,
        display_name: Optional[str] = None,
    ):
        """
        Initialize the stat.

        Args:
            name: Name of the stat. Also used as display_name unless given
            max_level: Max level for the stat
            base_exp: Exp level 0 requires to level up. Used with
                exp_multiplier to generate an Exp table with max_level entries
            exp_multiplier: Growth of the requirement from level to level
            exp_table: Explicit Exp table; ignored when base_exp and
                exp_multiplier are both given
            min_level: Minimum level; also the starting level when above 0
            display_name: Name shown to players
        """
        self.name = name
        self.display_name = display_name if display_name is not None else name

        if max_level < min_level:
            logger.warning(
                f"Stat '{name}' max level {max_level} is below min level "
                f"{min_level}; using {min_level}"
            )
            max_level = min_level

        self._min_level: int = min_level
        self._max_level: int = max_level
        self._current_level: int = min(max(0, min_level), max_level)
        self._current_exp: float = 0.0

        if base_exp is not None and exp_multiplier is not None:
            self.exp_table = ExpTable.create_from_multiplier(base_exp, exp_multiplier, max_level)
        else:
            self.exp_table = exp_table if exp_table is not None else ExpTable()

        self.on_level_raised: list[Optional[LevelCallback]] = []
        self.on_level_reduced: list[Optional[LevelCallback]] = []

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def current_level(self) -> int:
        """Current level of the stat."""
        return self._current_level

    @property
    def current_exp(self) -> float:
        """Exp accumulated towards the next level."""
        return self._current_exp

    @property
    def min_level(self) -> int:
        """Minimum level the stat can be."""
        return self._min_level

    @property
    def max_level(self) -> int:
        """Max level of the stat."""
        return self._max_level

    @property
    def is_max_level(self) -> bool:
        """Check if the stat has reached its max level."""
        return self._current_level >= self._max_level

    @property
    def exp_to_next_level(self) -> Optional[float]:
        """Exp still needed to level up, or None at max level or past the table."""
        if self.is_max_level:
            return None
        return self.exp_table.get_remaining_exp(self._current_level, self._current_exp)

    def can_level_up(self) -> bool:
        """Check if the stat has enough Exp to level up."""
        if self.is_max_level:
            return False
        return self.exp_table.can_level_up(self._current_level, self._current_exp)

    def get_progress(self) -> dict[str, Any]:
        """
        Get detailed Exp progress for the stat.

        Returns:
            Dictionary with level, Exp and progress towards the next level
        """
        level_max_exp = self.exp_table.get_level_max_exp(self._current_level)
        at_max_level = self.is_max_level

        result = {
            "name": self.name,
            "display_name": self.display_name,
            "level": self._current_level,
            "min_level": self._min_level,
            "max_level": self._max_level,
            "current_exp": self._current_exp,
            "level_max_exp": level_max_exp,
            "at_max_level": at_max_level,
        }

        if level_max_exp is not None and not at_max_level:
            progress_pct = (
                self._current_exp / level_max_exp * 100 if level_max_exp > 0 else 100
            )
            result["exp_needed"] = max(0.0, level_max_exp - self._current_exp)
            result["progress_percent"] = round(min(progress_pct, 100.0), 1)

        return result

    # =========================================================================
    # EXP
    # =========================================================================

    def raise_exp(self, amount_to_add: float) -> None:
        """
        Add Exp and raise the level for every requirement that gets filled.

        Exp left over after a level up carries into the next level, including
        Exp the stat already held above its requirement. Exp that
        cannot be used (max level reached, or the table does not cover the
        current level) is discarded.

        Args:
            amount_to_add: Amount of Exp to add. Zero or negative does nothing
        """
        if amount_to_add <= 0:
            return

        logger.debug(f"{self.name}: raising Exp by {amount_to_add}")

        while self._current_level < self._max_level and amount_to_add > 0:
            exp_to_level_up = self.exp_table.get_remaining_exp(
                self._current_level, self._current_exp
            )
            if exp_to_level_up is None:
                logger.debug(
                    f"{self.name}: no Exp requirement for level {self._current_level}, "
                    f"discarding {amount_to_add} Exp"
                )
                break

            if amount_to_add < exp_to_level_up:
                self._current_exp += amount_to_add
                amount_to_add = 0
            else:
                # Consume what this level needs, then carry the rest over.
                # Exp above the requirement (negative remaining) joins the pool
                amount_to_add -= exp_to_level_up
                self._current_exp += exp_to_level_up
                self.raise_level()

    def reduce_exp(self, amount_to_remove: float) -> None:
        """
        Remove Exp and reduce the level when the current Exp runs out.

        Dropping a level sets Exp to the full requirement of the level the
        stat drops into. At min level Exp bottoms out at 0.

        Args:
            amount_to_remove: Amount of Exp to remove
        """
        if amount_to_remove > 0:
            logger.debug(f"{self.name}: reducing Exp by {amount_to_remove}")

        while amount_to_remove > 0:
            if amount_to_remove <= self._current_exp:
                self._current_exp -= amount_to_remove
                amount_to_remove = 0
            elif self._current_level <= self._min_level:
                self._current_exp = 0.0
                amount_to_remove = 0
            else:
                amount_to_remove -= self._current_exp
                self.reduce_level()
                level_max_exp = self.exp_table.get_level_max_exp(self._current_level)
                self._current_exp = level_max_exp if level_max_exp is not None else 0.0

        if self._current_exp < 0:
            self._current_exp = 0.0

    # =========================================================================
    # LEVELS
    # =========================================================================

    def raise_level(self, num_levels: int = 1) -> None:
        """
        Raise the level one step at a time.

        Each step resets Exp to 0 and calls every on_level_raised callback.

        Args:
            num_levels: Number of levels to raise by; stops at max level
        """
        while num_levels > 0 and self._current_level < self._max_level:
            self._current_level += 1
            self._current_exp = 0.0
            logger.debug(f"{self.name} leveled up! Level {self._current_level}")
            _invoke_all(self.on_level_raised)
            num_levels -= 1

    def reduce_level(self, num_levels: int = 1) -> None:
        """
        Reduce the level one step at a time.

        Each step resets Exp to 0 and calls every on_level_reduced callback.

        Args:
            num_levels: Number of levels to reduce by; stops at min level
        """
        while num_levels > 0 and self._current_level > self._min_level:
            self._current_level -= 1
            self._current_exp = 0.0
            logger.debug(f"{self.name} lost a level. Level {self._current_level}")
            _invoke_all(self.on_level_reduced)
            num_levels -= 1

    def set_level(self, new_level: int, use_leveling_logic: bool = True) -> None:
        """
        Set the level of the stat.

        Args:
            new_level: Level to move to
            use_leveling_logic: If True, move there with raise_level or
                reduce_level so every step fires its callbacks. If False,
                assign the level directly (clamped to the level bounds)
                without callbacks or an Exp reset, e.g. when restoring state
        """
        if not use_leveling_logic:
            self._current_level = min(max(new_level, self._min_level), self._max_level)
            return

        if self._current_level < new_level:
            self.raise_level(new_level - self._current_level)

        if self._current_level > new_level:
            self.reduce_level(self._current_level - new_level)

    def set_min_level(self, new_min_level: int, use_leveling_logic: bool = True) -> None:
        """
        Set the min level, raising the current level if it falls below it.

        Args:
            new_min_level: New minimum level. Clamped to max_level
            use_leveling_logic: Passed to set_level when the current level
                has to be raised
        """
        if new_min_level > self._max_level:
            logger.warning(
                f"{self.name}: min level {new_min_level} is above max level "
                f"{self._max_level}; using {self._max_level}"
            )
            new_min_level = self._max_level

        if new_min_level == self._min_level:
            return

        if self._current_level < new_min_level:
            self.set_level(new_min_level, use_leveling_logic)

        self._min_level = new_min_level

    def set_max_level(self, new_max_level: int, use_leveling_logic: bool = True) -> None:
        """
        Set the max level, reducing the current level if it is above it.

        Args:
            new_max_level: New max level. Clamped to min_level
            use_leveling_logic: Passed to set_level when the current level
                has to be reduced
        """
        if new_max_level < self._min_level:
            logger.warning(
                f"{self.name}: max level {new_max_level} is below min level "
                f"{self._min_level}; using {self._min_level}"
            )
            new_max_level = self._min_level

        if new_max_level == self._max_level:
            return

        if self._current_level > new_max_level:
            self.set_level(new_max_level, use_leveling_logic)

        self._max_level = new_max_level

    def __repr__(self) -> str:
        return (
            f"RPGStat(name={self.name!r}, level={self._current_level}, "
            f"exp={self._current_exp}, min={self._min_level}, max={self._max_level})"
        )
