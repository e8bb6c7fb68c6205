"""Pydantic models for Forest Heroes game state and catalog content."""

from __future__ import annotations

from forest_heroes.models.base import CatalogModel, GameModel
from forest_heroes.models.combat import CombatEvent
from forest_heroes.models.enums import (
    AIType,
    CombatResult,
    EffectType,
    EnemyAction,
    EquipmentSlot,
    ItemType,
    PlayerAction,
)
from forest_heroes.models.game_state import GameState, Position
from forest_heroes.models.inventory import Inventory, InventoryEntry
from forest_heroes.models.items import Item, ItemEffect, ItemStats
from forest_heroes.models.monster import (
    EncounterEntry,
    EncounterTable,
    LootEntry,
    Monster,
    MonsterStats,
    MonsterTemplate,
)
from forest_heroes.models.player import BaseStats, Equipment, Player
from forest_heroes.models.progression import (
    LEVEL_TABLE,
    LevelData,
    get_level_data,
    max_level,
)
from forest_heroes.models.shop import Shop, ShopItem


__all__ = [
    # Base
    "GameModel",
    "CatalogModel",
    # Enums
    "ItemType",
    "EffectType",
    "EquipmentSlot",
    "AIType",
    "PlayerAction",
    "EnemyAction",
    "CombatResult",
    # Items and inventory
    "ItemStats",
    "ItemEffect",
    "Item",
    "InventoryEntry",
    "Inventory",
    # Player
    "BaseStats",
    "Equipment",
    "Player",
    # Monsters
    "MonsterStats",
    "LootEntry",
    "MonsterTemplate",
    "Monster",
    "EncounterEntry",
    "EncounterTable",
    # Combat
    "CombatEvent",
    # Progression
    "LevelData",
    "LEVEL_TABLE",
    "get_level_data",
    "max_level",
    # Shops
    "ShopItem",
    "Shop",
    # State
    "Position",
    "GameState",
]
