"""Integration tests for a full play session.

Walks a new game through an encounter, a battle, its rewards, a shop visit
and a save/load cycle using only the public engine functions.
"""

from __future__ import annotations

from pathlib import Path

from forest_heroes.core.config import GameSettings
from forest_heroes.data.monsters import create_monster
from forest_heroes.data.shops import get_shop
from forest_heroes.engine import (
    CombatSystem,
    apply_defeat,
    apply_victory,
    buy_item,
    check_for_encounter,
    create_player,
    equip_item,
    generate_encounter,
    get_item_quantity,
    get_total_def,
)
from forest_heroes.models import CombatResult, GameState, PlayerAction
from forest_heroes.storage import SaveManager


def _walk_until_encounter(state: GameState, settings: GameSettings, roller) -> int:
    steps = 0
    while True:
        steps += 1
        state.increment_encounter_steps()
        if check_for_encounter(state, settings, roller):
            return steps


class TestSessionFlow:
    """End-to-end session scenarios."""

    def test_encounter_battle_and_rewards(
        self,
        game_state: GameState,
        game_settings: GameSettings,
        scripted_roller,
    ) -> None:
        """Walk into a slime, defeat it and collect the rewards."""
        roller = scripted_roller(rolls=[1], default=0.0)

        steps = _walk_until_encounter(game_state, game_settings, roller)
        assert steps == 6
        assert game_state.encounter_steps == 0

        enemies = generate_encounter("forest_north", game_state.player.level, roller)
        assert [enemy.id for enemy in enemies] == ["slime"]

        combat = CombatSystem(game_state.player, enemies, roller=roller)
        turns = 0
        while not combat.is_combat_ended():
            turns += 1
            event = combat.execute_player_action(PlayerAction.ATTACK_NORMAL)
            if not event.combat_ended:
                combat.run_enemy_phase()
            assert turns < 10

        assert combat.get_combat_result() is CombatResult.VICTORY
        assert turns == 2
        assert game_state.player.current_hp == 39

        rewards = apply_victory(game_state, enemies, roller=roller)

        assert rewards.xp == 5
        assert game_state.gold == 105
        assert game_state.player.xp == 5
        assert game_state.battles_won == 1
        assert get_item_quantity(game_state.inventory, "healing_potion") == 4

    def test_shop_and_equip(self, game_state: GameState) -> None:
        """Buy a shield at the blacksmith and wear it."""
        shop = get_shop("blacksmith_shop")

        result = buy_item(game_state.inventory, game_state.gold, shop.find("wooden_shield"))
        game_state.set_gold(result.gold)

        assert result.success
        assert game_state.gold == 40
        assert equip_item(game_state.inventory, game_state.player, "wooden_shield")
        assert get_total_def(game_state.player) == 9
        assert game_state.inventory.find("wooden_shield") is None

    def test_defeat_then_retry(self, game_state: GameState, always_hit) -> None:
        """Lose to the dragon and come back restored."""
        dragon = create_monster("red_dragon")
        combat = CombatSystem(game_state.player, [dragon], roller=always_hit)

        events = []
        while not combat.is_combat_ended():
            combat.execute_player_action(PlayerAction.DEFEND)
            events.extend(combat.run_enemy_phase())

        assert combat.get_combat_result() is CombatResult.DEFEAT
        assert events[-1].combat_result is CombatResult.DEFEAT

        apply_defeat(game_state)
        assert game_state.player.current_hp == game_state.player.base_stats.max_hp

    def test_save_and_resume(self, game_state: GameState, tmp_path: Path, always_hit) -> None:
        """Progress survives a save/load cycle."""
        apply_victory(game_state, [create_monster("goblin")], roller=always_hit)
        game_state.set_map("forest_south", 2, 5)
        game_state.set_flag("first_battle")

        manager = SaveManager(tmp_path / "savegame.json")
        assert manager.save(game_state)

        resumed = manager.load()

        assert resumed == game_state
        assert resumed.player.level == 1
        assert resumed.player.xp == 15
        assert resumed.current_map == "forest_south"
        assert resumed.get_flag("first_battle")
        assert get_item_quantity(resumed.inventory, "iron_sword") == 1

    def test_fresh_player_matches_new_game(self, game_state: GameState) -> None:
        """The hero of a new game differs from a bare player only in gear."""
        bare = create_player(game_state.player.name)

        assert bare.base_stats == game_state.player.base_stats
        assert bare.equipment.weapon is None
        assert game_state.player.equipment.weapon is not None
