"""Game engine: dice, inventory, progression, loot, combat, and sessions.

Exports:
    CombatSystem: Single-battle combat state machine.
    DiceRoller: Injectable random source.
    new_game / apply_victory / apply_defeat: Session lifecycle.
"""

from __future__ import annotations

from forest_heroes.engine.character import (
    LevelUpResult,
    StatGains,
    add_xp,
    get_xp_to_next_level,
)
from forest_heroes.engine.combat import PLAYER_ID, CombatSystem, calculate_physical_damage
from forest_heroes.engine.dice import (
    DiceResult,
    DiceRoller,
    get_default_roller,
    reset_default_roller,
)
from forest_heroes.engine.encounters import (
    check_for_encounter,
    encounter_chance,
    generate_encounter,
    get_encounter_table,
)
from forest_heroes.engine.events import (
    check_condition,
    clear_flag,
    get_set_flags,
    has_all_flags,
    has_any_flag,
    has_flag,
    set_flag,
)
from forest_heroes.engine.game import (
    BattleRewards,
    apply_defeat,
    apply_victory,
    create_player,
    new_game,
)
from forest_heroes.engine.inventory import (
    add_item,
    equip_item,
    get_item_quantity,
    get_total_atk,
    get_total_def,
    has_item,
    remove_item,
    slot_for_item,
    unequip_item,
    use_consumable,
)
from forest_heroes.engine.loot import (
    LootDrop,
    calculate_total_gold,
    calculate_total_xp,
    generate_loot,
)
from forest_heroes.engine.shop import (
    ShopResult,
    buy_item,
    buy_items,
    calculate_sell_price,
    sell_item,
)


__all__ = [
    # Dice
    "DiceResult",
    "DiceRoller",
    "get_default_roller",
    "reset_default_roller",
    # Inventory
    "add_item",
    "remove_item",
    "has_item",
    "get_item_quantity",
    "use_consumable",
    "slot_for_item",
    "equip_item",
    "unequip_item",
    "get_total_atk",
    "get_total_def",
    # Progression
    "StatGains",
    "LevelUpResult",
    "add_xp",
    "get_xp_to_next_level",
    # Loot
    "LootDrop",
    "generate_loot",
    "calculate_total_xp",
    "calculate_total_gold",
    # Combat
    "PLAYER_ID",
    "CombatSystem",
    "calculate_physical_damage",
    # Encounters
    "get_encounter_table",
    "generate_encounter",
    "encounter_chance",
    "check_for_encounter",
    # Shop
    "ShopResult",
    "buy_item",
    "buy_items",
    "calculate_sell_price",
    "sell_item",
    # Events
    "has_flag",
    "set_flag",
    "clear_flag",
    "has_all_flags",
    "has_any_flag",
    "get_set_flags",
    "check_condition",
    # Session
    "BattleRewards",
    "create_player",
    "new_game",
    "apply_victory",
    "apply_defeat",
]
