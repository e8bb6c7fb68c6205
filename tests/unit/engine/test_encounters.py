"""Tests for encounter generation and pacing."""

from __future__ import annotations

import pytest

from forest_heroes.core.config import GameSettings
from forest_heroes.core.exceptions import EncounterTableNotFoundError
from forest_heroes.data import monsters as monster_data
from forest_heroes.engine.encounters import (
    check_for_encounter,
    encounter_chance,
    generate_encounter,
    get_encounter_table,
    roll_party_size,
)
from forest_heroes.engine.dice import DiceRoller
from forest_heroes.models.game_state import GameState
from forest_heroes.models.monster import EncounterEntry, EncounterTable


class TestGenerateEncounter:
    """Tests for generate_encounter."""

    def test_weighted_members(self, scripted_roller) -> None:
        """Test members are picked by cumulative weight."""
        roller = scripted_roller([0.2, 0.9], rolls=[2])

        party = generate_encounter("forest_north", roller=roller)

        assert [monster.id for monster in party] == ["slime", "wolf"]

    def test_fresh_instances(self, scripted_roller) -> None:
        """Test members of the same id are independent full-HP instances."""
        party = generate_encounter("forest_north", roller=scripted_roller([0.0, 0.0], rolls=[2]))
        party[0].current_hp = 1

        assert party[1].current_hp == 15
        assert monster_data.MONSTERS["slime"].stats.max_hp == 15

    def test_party_size_bounds(self) -> None:
        """Test real rolls stay within the table bounds."""
        roller = DiceRoller(seed=11)
        sizes = {len(generate_encounter("mountain", roller=roller)) for _ in range(30)}

        assert sizes <= {1, 2}

    def test_party_size_clamped(self, scripted_roller) -> None:
        """Test out-of-range totals are clamped to the table."""
        table = get_encounter_table("forest_south")

        assert roll_party_size(table, scripted_roller(rolls=[7])) == 2
        assert roll_party_size(table, scripted_roller(rolls=[0])) == 1

    def test_unknown_table(self) -> None:
        """Test unknown tables raise."""
        with pytest.raises(EncounterTableNotFoundError):
            generate_encounter("volcano")

    def test_level_band(self, scripted_roller, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test entries outside the player's level band are skipped."""
        table = EncounterTable(
            monsters=(
                EncounterEntry(monster_id="slime", weight=1.0, max_level=2),
                EncounterEntry(monster_id="stone_golem", weight=1.0, min_level=3),
            ),
            min_encounters=1,
            max_encounters=1,
        )
        monkeypatch.setitem(monster_data.ENCOUNTER_TABLES, "test_band", table)

        low = generate_encounter("test_band", player_level=1, roller=scripted_roller([0.9], rolls=[1]))
        high = generate_encounter("test_band", player_level=5, roller=scripted_roller([0.0], rolls=[1]))

        assert [m.id for m in low] == ["slime"]
        assert [m.id for m in high] == ["stone_golem"]

    def test_level_band_fallback(self, scripted_roller, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test all entries are used when none admit the level."""
        table = EncounterTable(
            monsters=(EncounterEntry(monster_id="bat", weight=1.0, min_level=5),),
        )
        monkeypatch.setitem(monster_data.ENCOUNTER_TABLES, "test_fallback", table)

        party = generate_encounter("test_fallback", player_level=1, roller=scripted_roller(rolls=[1]))

        assert [m.id for m in party] == ["bat"]


class TestEncounterChance:
    """Tests for the per-step encounter chance."""

    @pytest.mark.parametrize(
        ("steps", "expected"),
        [(0, 0.0), (4, 0.0), (5, 0.0), (6, 0.06), (8, 0.18), (10, 0.3), (25, 0.3)],
    )
    def test_curve(self, game_settings: GameSettings, steps: int, expected: float) -> None:
        """Test the chance ramps linearly and caps."""
        assert encounter_chance(steps, game_settings) == pytest.approx(expected)


class TestCheckForEncounter:
    """Tests for check_for_encounter."""

    def test_triggers_and_resets(
        self, game_state: GameState, game_settings: GameSettings, scripted_roller
    ) -> None:
        """Test a successful roll fires and resets the step counter."""
        game_state.encounter_steps = 10

        assert check_for_encounter(game_state, game_settings, scripted_roller([0.29]))
        assert game_state.encounter_steps == 0

    def test_failed_roll_keeps_steps(
        self, game_state: GameState, game_settings: GameSettings, scripted_roller
    ) -> None:
        """Test a failed roll leaves the counter alone."""
        game_state.encounter_steps = 10

        assert not check_for_encounter(game_state, game_settings, scripted_roller([0.3]))
        assert game_state.encounter_steps == 10

    def test_too_few_steps(
        self, game_state: GameState, game_settings: GameSettings, scripted_roller
    ) -> None:
        """Test no roll happens before the minimum step count."""
        game_state.encounter_steps = 3
        roller = scripted_roller()

        assert not check_for_encounter(game_state, game_settings, roller)
        assert roller.draws == 0
