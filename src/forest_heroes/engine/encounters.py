"""Random encounter generation.

Builds monster parties from the encounter tables and decides, step by
step, when a random encounter fires on the overworld.
"""

from __future__ import annotations

from forest_heroes.core.config import GameSettings
from forest_heroes.core.exceptions import EncounterTableNotFoundError
from forest_heroes.core.logging import get_logger
from forest_heroes.data.monsters import ENCOUNTER_TABLES, create_monster
from forest_heroes.engine.dice import DiceRoller, get_default_roller
from forest_heroes.models.game_state import GameState
from forest_heroes.models.monster import EncounterEntry, EncounterTable, Monster


logger = get_logger(__name__)


def get_encounter_table(table_id: str) -> EncounterTable:
    """Look up an encounter table.

    Raises:
        EncounterTableNotFoundError: If no table has this id.
    """
    table = ENCOUNTER_TABLES.get(table_id)
    if table is None:
        raise EncounterTableNotFoundError(
            f"Encounter table not found: {table_id}", table_id=table_id
        )
    return table


def _eligible_entries(table: EncounterTable, player_level: int) -> tuple[EncounterEntry, ...]:
    eligible = tuple(entry for entry in table.monsters if entry.admits_level(player_level))
    return eligible or table.monsters


def roll_party_size(table: EncounterTable, roller: DiceRoller) -> int:
    """Roll how many monsters appear, uniformly in the table's bounds."""
    span = table.max_encounters - table.min_encounters + 1
    result = roller.roll(f"1d{span}+{table.min_encounters - 1}")
    return min(table.max_encounters, max(table.min_encounters, result.total))


def generate_encounter(
    table_id: str,
    player_level: int = 1,
    roller: DiceRoller | None = None,
) -> list[Monster]:
    """Create a fresh monster party from an encounter table.

    Each member is picked by weight among the entries whose level band
    admits ``player_level`` (all entries if none do) and instantiated
    at full HP.

    Args:
        table_id: Encounter table id.
        player_level: Level used to filter level-banded entries.
        roller: Random source, the shared default roller if omitted.

    Returns:
        The new monster instances in battle order.

    Raises:
        EncounterTableNotFoundError: If the table does not exist.
        MonsterNotFoundError: If the table names an unknown monster.
    """
    roller = roller or get_default_roller()
    table = get_encounter_table(table_id)
    entries = _eligible_entries(table, player_level)

    count = roll_party_size(table, roller)
    party = [
        create_monster(roller.choice_weighted(entries, lambda entry: entry.weight).monster_id)
        for _ in range(count)
    ]

    logger.info(
        "Encounter generated",
        table_id=table_id,
        player_level=player_level,
        monsters=[monster.id for monster in party],
    )
    return party


def encounter_chance(steps: int, settings: GameSettings) -> float:
    """Probability that the current step triggers an encounter.

    Zero below ``encounter_min_steps``, then rising linearly to
    ``encounter_max_chance`` at ``encounter_max_steps`` and capped there.
    """
    if steps < settings.encounter_min_steps:
        return 0.0
    progress = (steps - settings.encounter_min_steps) / (
        settings.encounter_max_steps - settings.encounter_min_steps
    )
    return min(settings.encounter_max_chance, progress * settings.encounter_max_chance)


def check_for_encounter(
    state: GameState,
    settings: GameSettings,
    roller: DiceRoller | None = None,
) -> bool:
    """Roll for a random encounter at the state's current step count.

    The step counter is reset when an encounter fires.
    """
    chance = encounter_chance(state.encounter_steps, settings)
    if chance <= 0.0:
        return False

    roller = roller or get_default_roller()
    if not roller.chance(chance):
        return False

    logger.debug("Encounter triggered", steps=state.encounter_steps, chance=chance)
    state.reset_encounter_steps()
    return True


__all__ = [
    "get_encounter_table",
    "roll_party_size",
    "generate_encounter",
    "encounter_chance",
    "check_for_encounter",
]
