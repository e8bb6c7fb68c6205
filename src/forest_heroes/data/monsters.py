"""Monster catalog and encounter tables."""

from __future__ import annotations

from forest_heroes.core.exceptions import MonsterNotFoundError
from forest_heroes.models.enums import AIType
from forest_heroes.models.monster import (
    EncounterEntry,
    EncounterTable,
    LootEntry,
    Monster,
    MonsterStats,
    MonsterTemplate,
)


# =============================================================================
# Monster Templates
# =============================================================================

MONSTERS: dict[str, MonsterTemplate] = {
    template.id: template
    for template in (
        MonsterTemplate(
            id="slime",
            name="Slime",
            sprite="monster_slime",
            stats=MonsterStats(max_hp=15, atk=5, defense=2),
            xp_reward=5,
            gold_reward=5,
            loot=(LootEntry(item_id="healing_potion", chance=0.3),),
            ai_type=AIType.BASIC,
        ),
        MonsterTemplate(
            id="wolf",
            name="Wolf",
            sprite="monster_wolf",
            stats=MonsterStats(max_hp=25, atk=9, defense=3),
            xp_reward=10,
            gold_reward=10,
            loot=(LootEntry(item_id="healing_potion", chance=0.4),),
            ai_type=AIType.AGGRESSIVE,
        ),
        MonsterTemplate(
            id="goblin",
            name="Goblin",
            sprite="monster_goblin",
            stats=MonsterStats(max_hp=30, atk=11, defense=5),
            xp_reward=15,
            gold_reward=15,
            loot=(
                LootEntry(item_id="healing_potion", chance=0.5),
                LootEntry(item_id="iron_sword", chance=0.1),
            ),
            ai_type=AIType.AGGRESSIVE,
        ),
        MonsterTemplate(
            id="bat",
            name="Bat",
            sprite="monster_bat",
            stats=MonsterStats(max_hp=18, atk=8, defense=2),
            xp_reward=8,
            gold_reward=8,
            loot=(LootEntry(item_id="mana_potion", chance=0.4),),
            ai_type=AIType.BASIC,
        ),
        MonsterTemplate(
            id="stone_golem",
            name="Stone Golem",
            sprite="monster_golem",
            stats=MonsterStats(max_hp=50, atk=14, defense=12),
            xp_reward=25,
            gold_reward=25,
            loot=(
                LootEntry(item_id="large_healing_potion", chance=0.6),
                LootEntry(item_id="chainmail", chance=0.15),
            ),
            ai_type=AIType.BASIC,
        ),
        # Boss: no XP or gold of its own; the victory bonus is granted
        # by the session layer.
        MonsterTemplate(
            id="red_dragon",
            name="Red Dragon",
            sprite="monster_dragon",
            stats=MonsterStats(max_hp=200, atk=22, defense=15),
            xp_reward=0,
            gold_reward=0,
            loot=(),
            ai_type=AIType.BOSS,
        ),
    )
}


# =============================================================================
# Encounter Tables
# =============================================================================

ENCOUNTER_TABLES: dict[str, EncounterTable] = {
    "forest_north": EncounterTable(
        monsters=(
            EncounterEntry(monster_id="slime", weight=0.6),
            EncounterEntry(monster_id="wolf", weight=0.4),
        ),
        min_encounters=1,
        max_encounters=2,
    ),
    "forest_south": EncounterTable(
        monsters=(
            EncounterEntry(monster_id="wolf", weight=0.5),
            EncounterEntry(monster_id="goblin", weight=0.5),
        ),
        min_encounters=1,
        max_encounters=2,
    ),
    "mountain": EncounterTable(
        monsters=(
            EncounterEntry(monster_id="bat", weight=0.4),
            EncounterEntry(monster_id="stone_golem", weight=0.6),
        ),
        min_encounters=1,
        max_encounters=2,
    ),
}


def get_monster_template(monster_id: str) -> MonsterTemplate:
    """Look up a monster template.

    Raises:
        MonsterNotFoundError: If no template has this id.
    """
    template = MONSTERS.get(monster_id)
    if template is None:
        raise MonsterNotFoundError(
            f"Monster not found: {monster_id}", monster_id=monster_id
        )
    return template


def create_monster(monster_id: str) -> Monster:
    """Create a fresh battle instance of a catalog monster."""
    return get_monster_template(monster_id).instantiate()


__all__ = [
    "MONSTERS",
    "ENCOUNTER_TABLES",
    "get_monster_template",
    "create_monster",
]
