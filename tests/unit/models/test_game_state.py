"""Tests for the game state aggregate."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from forest_heroes.models.game_state import GameState


class TestGold:
    """Tests for gold bookkeeping."""

    def test_add_gold_clamps(self, game_state: GameState) -> None:
        """Test gold never goes negative."""
        game_state.add_gold(-500)
        assert game_state.gold == 0

    def test_remove_gold(self, game_state: GameState) -> None:
        """Test spending only what is available."""
        assert game_state.remove_gold(40) is True
        assert game_state.gold == 60
        assert game_state.remove_gold(61) is False
        assert game_state.remove_gold(-1) is False
        assert game_state.gold == 60

    def test_set_gold(self, game_state: GameState) -> None:
        """Test setting gold clamps at zero."""
        game_state.set_gold(-3)
        assert game_state.gold == 0


class TestWorld:
    """Tests for position, flags and counters."""

    def test_set_map_with_position(self, game_state: GameState) -> None:
        """Test moving maps places the player."""
        game_state.set_map("forest_north", 3, 4)

        assert game_state.current_map == "forest_north"
        assert (game_state.player_position.x, game_state.player_position.y) == (3, 4)

    def test_set_map_keeps_position(self, game_state: GameState) -> None:
        """Test moving maps without coordinates keeps the position."""
        game_state.set_map("mountain")

        assert (game_state.player_position.x, game_state.player_position.y) == (8, 8)

    def test_flags(self, game_state: GameState) -> None:
        """Test flag helpers."""
        assert game_state.get_flag("met_elder") is False
        game_state.set_flag("met_elder")
        assert game_state.get_flag("met_elder") is True

    def test_encounter_steps(self, game_state: GameState) -> None:
        """Test step counter."""
        assert game_state.increment_encounter_steps() == 1
        assert game_state.increment_encounter_steps() == 2
        game_state.reset_encounter_steps()
        assert game_state.encounter_steps == 0

    def test_play_time_ignores_negative(self, game_state: GameState) -> None:
        """Test play time only grows."""
        game_state.add_play_time(12.5)
        game_state.add_play_time(-3)
        assert game_state.play_time == pytest.approx(12.5)


class TestSerialization:
    """Tests for the JSON document."""

    def test_round_trip(self, game_state: GameState) -> None:
        """Test a state survives to_json/from_json unchanged."""
        game_state.set_flag("met_elder")
        game_state.player.current_hp = 12
        game_state.increment_battles_won()

        restored = GameState.from_json(game_state.to_json())

        assert restored == game_state
        assert restored.player.equipment.weapon.id == "wooden_sword"

    def test_malformed_document(self) -> None:
        """Test invalid documents raise pydantic errors."""
        with pytest.raises(ValidationError):
            GameState.from_json('{"gold": 5}')
