"""Enumeration types for Forest Heroes.

Action kinds are closed enums so a misspelled or unsupported action fails
loudly instead of silently doing nothing.
"""

from __future__ import annotations

from enum import StrEnum


class ItemType(StrEnum):
    """Kinds of catalog items."""

    WEAPON = "weapon"
    ARMOR = "armor"
    SHIELD = "shield"
    CONSUMABLE = "consumable"

    @property
    def is_equipment(self) -> bool:
        """Whether items of this type go into an equipment slot."""
        return self is not ItemType.CONSUMABLE


class EffectType(StrEnum):
    """Effects a consumable can apply."""

    HEAL_HP = "heal_hp"
    HEAL_MP = "heal_mp"


class EquipmentSlot(StrEnum):
    """Player equipment slots, one item each."""

    WEAPON = "weapon"
    ARMOR = "armor"
    SHIELD = "shield"


class AIType(StrEnum):
    """Enemy behaviour profiles."""

    BASIC = "basic"
    """Always attacks."""

    AGGRESSIVE = "aggressive"
    """Always attacks."""

    BOSS = "boss"
    """Phase-dependent: heals once when low, breathes fire more when hurt."""


class PlayerAction(StrEnum):
    """Actions the player can choose on their turn."""

    ATTACK_NORMAL = "attack_normal"
    ATTACK_HEAVY = "attack_heavy"
    DEFEND = "defend"
    ITEM_HEAL = "item_heal"
    SPELL_FIRE = "spell_fire"
    SPELL_HEAL = "spell_heal"


class EnemyAction(StrEnum):
    """Actions an enemy AI can select."""

    ATTACK = "attack"
    FIRE_BREATH = "fire_breath"
    BOSS_HEAL = "boss_heal"


class CombatResult(StrEnum):
    """Outcome of a finished battle."""

    VICTORY = "victory"
    DEFEAT = "defeat"


__all__ = [
    "ItemType",
    "EffectType",
    "EquipmentSlot",
    "AIType",
    "PlayerAction",
    "EnemyAction",
    "CombatResult",
]
