"""Tests for loot and reward calculation."""

from __future__ import annotations

from forest_heroes.data.monsters import create_monster
from forest_heroes.engine.loot import (
    LootDrop,
    calculate_total_gold,
    calculate_total_xp,
    generate_loot,
)


class TestGenerateLoot:
    """Tests for generate_loot."""

    def test_every_entry_rolled(self, scripted_roller) -> None:
        """Test each loot entry is an independent roll."""
        goblin = create_monster("goblin")
        roller = scripted_roller([0.1, 0.05])

        drops = generate_loot([goblin], roller)

        assert drops == [LootDrop("healing_potion", 1), LootDrop("iron_sword", 1)]
        assert roller.draws == 2

    def test_failed_rolls_drop_nothing(self, always_miss) -> None:
        """Test no drops when every roll fails."""
        assert generate_loot([create_monster("goblin")], always_miss) == []

    def test_roll_must_be_below_chance(self, scripted_roller) -> None:
        """Test a draw equal to the chance does not drop."""
        drops = generate_loot([create_monster("slime")], scripted_roller([0.3]))

        assert drops == []

    def test_same_item_merged_in_first_appearance_order(self, scripted_roller) -> None:
        """Test drops of one item id across enemies are merged."""
        enemies = [create_monster("bat"), create_monster("slime"), create_monster("wolf")]
        roller = scripted_roller([0.0, 0.0, 0.0])

        drops = generate_loot(enemies, roller)

        assert drops == [LootDrop("mana_potion", 1), LootDrop("healing_potion", 2)]

    def test_enemies_not_mutated(self, always_hit) -> None:
        """Test the enemy list is only read."""
        enemies = [create_monster("stone_golem")]
        snapshot = [enemy.model_copy(deep=True) for enemy in enemies]

        generate_loot(enemies, always_hit)

        assert enemies == snapshot

    def test_boss_has_no_loot(self, always_hit) -> None:
        """Test the dragon drops nothing."""
        assert generate_loot([create_monster("red_dragon")], always_hit) == []


class TestRewardTotals:
    """Tests for XP and gold totals."""

    def test_sums(self) -> None:
        """Test totals sum over all enemies."""
        enemies = [create_monster("slime"), create_monster("goblin"), create_monster("slime")]

        assert calculate_total_xp(enemies) == 25
        assert calculate_total_gold(enemies) == 25

    def test_boss_gives_nothing(self) -> None:
        """Test the boss contributes no XP or gold of its own."""
        dragon = [create_monster("red_dragon")]

        assert calculate_total_xp(dragon) == 0
        assert calculate_total_gold(dragon) == 0

    def test_empty(self) -> None:
        """Test empty parties give nothing."""
        assert calculate_total_xp([]) == 0
        assert calculate_total_gold([]) == 0
