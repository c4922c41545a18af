"""
Unit tests for StatRegistry.

Tests stat creation, lookup and custom leveling policies.
"""

import logging

from rpg_stats.advancement.exp_table import ExpTable
from rpg_stats.advancement.rpg_stat import LevelingStat, RPGStat
from rpg_stats.advancement.stat_registry import StatRegistry, create_stat
from rpg_stats.config import StatConfig


class DoubleStepStat(RPGStat):
    """Leveling policy that gains two levels for every level earned."""

    def raise_level(self, num_levels: int = 1) -> None:
        super().raise_level(num_levels * 2)


class FixedStat:
    """Stat with a level that never changes, written against LevelingStat only."""

    def __init__(self, name: str, level: int):
        self.name = name
        self.display_name = name
        self.on_level_raised = []
        self.on_level_reduced = []
        self._level = level

    @property
    def current_level(self) -> int:
        return self._level

    @property
    def current_exp(self) -> float:
        return 0.0

    @property
    def min_level(self) -> int:
        return self._level

    @property
    def max_level(self) -> int:
        return self._level

    def raise_exp(self, amount_to_add: float) -> None:
        pass

    def reduce_exp(self, amount_to_remove: float) -> None:
        pass

    def raise_level(self, num_levels: int = 1) -> None:
        pass

    def reduce_level(self, num_levels: int = 1) -> None:
        pass

    def set_level(self, new_level: int, use_leveling_logic: bool = True) -> None:
        pass

    def set_min_level(self, new_min_level: int, use_leveling_logic: bool = True) -> None:
        pass

    def set_max_level(self, new_max_level: int, use_leveling_logic: bool = True) -> None:
        pass


class TestCreateStat:
    """Tests for the create_stat function."""

    def test_create_without_registry(self):
        """A stat can be built without recording it anywhere."""
        stat = create_stat("Cooking", 20)
        assert isinstance(stat, RPGStat)
        assert stat.name == "Cooking"
        assert stat.max_level == 20
        assert len(stat.exp_table) == 0

    def test_create_with_generated_table(self):
        """Base Exp and multiplier build a table."""
        stat = create_stat("Cooking", 20, 100, 1.1)
        assert len(stat.exp_table) == 20

    def test_create_into_registry(self, registry):
        """Passing a registry records the stat."""
        stat = create_stat("Cooking", 20, registry=registry)
        assert registry.all_stats == [stat]

    def test_create_with_custom_class(self):
        """An RPGStat subclass replaces the leveling policy."""
        stat = create_stat("Luck", 10, 100, 2, stat_cls=DoubleStepStat)
        stat.raise_exp(100)
        assert isinstance(stat, DoubleStepStat)
        assert stat.current_level == 2


class TestStatRegistry:
    """Tests for StatRegistry."""

    def test_empty_registry(self, registry):
        """A new registry holds nothing."""
        assert len(registry) == 0
        assert registry.all_stats == []
        assert registry.names() == []

    def test_create_registers_in_order(self, registry):
        """Stats are kept in creation order."""
        strength = registry.create("Strength", 50, 100, 1.2)
        agility = registry.create("Agility", 30)
        assert registry.all_stats == [strength, agility]
        assert registry.names() == ["Strength", "Agility"]
        assert len(registry) == 2

    def test_create_logs(self, registry, caplog):
        """Creating a stat is logged."""
        with caplog.at_level(logging.INFO):
            registry.create("Strength", 50)
        assert "Created stat 'Strength'" in caplog.text

    def test_all_stats_is_a_copy(self, registry):
        """Mutating the returned list does not touch the registry."""
        registry.create("Strength", 50)
        registry.all_stats.clear()
        assert len(registry) == 1

    def test_get_by_name(self, registry):
        """Lookup returns the first stat with the name."""
        first = registry.create("Strength", 50)
        registry.create("Strength", 10)
        assert registry.get("Strength") is first

    def test_get_unknown_returns_none(self, registry):
        """Unknown names return None."""
        assert registry.get("Charisma") is None

    def test_contains(self, registry):
        """Membership checks stat names."""
        registry.create("Strength", 50)
        assert "Strength" in registry
        assert "Charisma" not in registry

    def test_iterate(self, registry):
        """Iterating yields every stat."""
        registry.create("Strength", 50)
        registry.create("Agility", 30)
        assert [stat.name for stat in registry] == ["Strength", "Agility"]

    def test_register_existing_stat(self, registry, stat):
        """Stats built elsewhere can be registered."""
        registry.register(stat)
        assert registry.get("Popping Power") is stat

    def test_register_protocol_only_stat(self, registry):
        """A LevelingStat that is not an RPGStat can be registered and looked up."""
        fixed = FixedStat("Age", 30)
        assert isinstance(fixed, LevelingStat)
        assert not isinstance(fixed, RPGStat)

        registry.register(fixed)
        fixed.raise_exp(500)

        assert "Age" in registry
        assert registry.get("Age") is fixed
        assert registry.get("Age").current_level == 30
        assert registry.remove("Age") is True

    def test_remove(self, registry):
        """Removing a stat drops it from the registry."""
        registry.create("Strength", 50)
        assert registry.remove("Strength") is True
        assert registry.remove("Strength") is False
        assert len(registry) == 0

    def test_clear(self, registry):
        """Clearing empties the registry."""
        registry.create("Strength", 50)
        registry.create("Agility", 30)
        registry.clear()
        assert len(registry) == 0

    def test_registries_are_independent(self):
        """Each registry only tracks its own stats."""
        first = StatRegistry()
        second = StatRegistry()
        first.create("Strength", 50)
        assert len(second) == 0

    def test_default_stat_class(self):
        """The registry's stat class is used for create()."""
        registry = StatRegistry(stat_cls=DoubleStepStat)
        stat = registry.create("Luck", 10, 100, 2)
        assert isinstance(stat, DoubleStepStat)
        assert isinstance(stat, LevelingStat)

    def test_registered_stats_level_independently(self, registry):
        """Stats created by one registry do not share state."""
        strength = registry.create("Strength", 5, 100, 1.5)
        agility = registry.create("Agility", 5, 100, 1.5)
        strength.raise_exp(100)
        assert strength.current_level == 1
        assert agility.current_level == 0


class TestCreateFromConfig:
    """Tests for building stats from StatConfig."""

    def test_generated_table_from_config(self, registry):
        """Base Exp and multiplier in the config generate the table."""
        config = StatConfig(name="Mining", max_level=4, base_exp=100, exp_multiplier=0.5)
        stat = registry.create_from_config(config)
        assert stat.exp_table.exp_per_level == [100, 150, 225, 337.5]
        assert registry.get("Mining") is stat

    def test_explicit_table_from_config(self, registry):
        """An explicit schedule takes priority over the generator."""
        config = StatConfig(
            name="Mining",
            max_level=3,
            base_exp=5,
            exp_multiplier=2,
            exp_per_level=[100, 200, 300],
        )
        stat = registry.create_from_config(config)
        assert stat.exp_table.exp_per_level == [100, 200, 300]

    def test_bounds_and_display_name_from_config(self, registry):
        """Min level and display name carry over."""
        config = StatConfig(
            name="str", max_level=10, min_level=2, display_name="Strength"
        )
        stat = registry.create_from_config(config)
        assert stat.display_name == "Strength"
        assert stat.min_level == 2
        assert stat.current_level == 2

    def test_config_stat_levels(self, registry):
        """Stats built from config level like any other."""
        stat = registry.create_from_config(
            StatConfig(name="Mining", max_level=3, exp_per_level=[100, 200, 300])
        )
        stat.raise_exp(250)
        assert stat.current_level == 1
        assert stat.current_exp == 150

    def test_config_uses_registry_stat_class(self):
        """Config-built stats use the registry's stat class."""
        registry = StatRegistry(stat_cls=DoubleStepStat)
        stat = registry.create_from_config(StatConfig(name="Luck", max_level=4))
        assert isinstance(stat, DoubleStepStat)

    def test_config_table_not_shared(self, registry):
        """Each config-built stat owns its own table."""
        config = StatConfig(name="Mining", max_level=3, exp_per_level=[100, 200, 300])
        first = registry.create_from_config(config)
        second = registry.create_from_config(config)
        assert first.exp_table is not second.exp_table
        assert isinstance(first.exp_table, ExpTable)
