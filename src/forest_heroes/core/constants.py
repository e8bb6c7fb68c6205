"""Game rule constants for Forest Heroes.

Accuracy values are probabilities compared against a uniform roll in
[0, 1); multipliers are applied before flooring.
"""

from __future__ import annotations

# =============================================================================
# Player Actions
# =============================================================================

NORMAL_ATTACK_ACCURACY = 0.95
"""Hit chance of a balanced attack."""

HEAVY_ATTACK_ACCURACY = 0.70
"""Hit chance of a heavy attack."""

HEAVY_ATTACK_MULTIPLIER = 1.5
"""ATK multiplier of a heavy attack."""

HEALING_ITEM_AMOUNT = 30
"""HP restored by the in-battle healing potion action."""

FIRE_SPELL_MP_COST = 5
FIRE_SPELL_BASE_DAMAGE = 15
FIRE_SPELL_DAMAGE_PER_LEVEL = 2
FIRE_SPELL_DEF_FACTOR = 0.3
"""Share of the target's DEF that still blocks fire damage."""

HEAL_SPELL_MP_COST = 4
HEAL_SPELL_BASE_AMOUNT = 20
HEAL_SPELL_AMOUNT_PER_LEVEL = 3

# =============================================================================
# Enemy Actions
# =============================================================================

ENEMY_ATTACK_ACCURACY = 0.90
"""Hit chance of a plain enemy attack."""

DEFEND_DAMAGE_FACTOR = 0.5
"""Damage multiplier for a plain attack against a defending player."""

FIRE_BREATH_ATK_MULTIPLIER = 1.3
FIRE_BREATH_DEF_FACTOR = 0.5
FIRE_BREATH_DEFEND_FACTOR = 0.6
"""Damage multiplier for fire breath against a defending player."""

BOSS_HEAL_THRESHOLD = 0.3
"""HP fraction below which a boss heals itself (once per battle)."""

BOSS_HEAL_FRACTION = 0.25
"""Share of max HP a boss restores when it heals."""

BOSS_ENRAGE_THRESHOLD = 0.5
"""HP fraction below which a boss enters its second phase."""

BOSS_FIRE_BREATH_CHANCE = 0.4
BOSS_ENRAGED_FIRE_BREATH_CHANCE = 0.7

MIN_DAMAGE = 1
"""Floor for every damaging attack."""

# =============================================================================
# Shop
# =============================================================================

DEFAULT_SELL_PRICE = 5
"""Sell price for items without a priced stat or effect."""

CONSUMABLE_SELL_DIVISOR = 3
EQUIPMENT_SELL_MULTIPLIER = 5


__all__ = [
    "NORMAL_ATTACK_ACCURACY",
    "HEAVY_ATTACK_ACCURACY",
    "HEAVY_ATTACK_MULTIPLIER",
    "HEALING_ITEM_AMOUNT",
    "FIRE_SPELL_MP_COST",
    "FIRE_SPELL_BASE_DAMAGE",
    "FIRE_SPELL_DAMAGE_PER_LEVEL",
    "FIRE_SPELL_DEF_FACTOR",
    "HEAL_SPELL_MP_COST",
    "HEAL_SPELL_BASE_AMOUNT",
    "HEAL_SPELL_AMOUNT_PER_LEVEL",
    "ENEMY_ATTACK_ACCURACY",
    "DEFEND_DAMAGE_FACTOR",
    "FIRE_BREATH_ATK_MULTIPLIER",
    "FIRE_BREATH_DEF_FACTOR",
    "FIRE_BREATH_DEFEND_FACTOR",
    "BOSS_HEAL_THRESHOLD",
    "BOSS_HEAL_FRACTION",
    "BOSS_ENRAGE_THRESHOLD",
    "BOSS_FIRE_BREATH_CHANCE",
    "BOSS_ENRAGED_FIRE_BREATH_CHANCE",
    "MIN_DAMAGE",
    "DEFAULT_SELL_PRICE",
    "CONSUMABLE_SELL_DIVISOR",
    "EQUIPMENT_SELL_MULTIPLIER",
]
