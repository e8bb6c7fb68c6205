"""Static game content: items, monsters, encounter tables and shops."""

from __future__ import annotations

from forest_heroes.data.items import ITEMS, STARTER_ITEMS, get_item, get_items_by_type
from forest_heroes.data.monsters import (
    ENCOUNTER_TABLES,
    MONSTERS,
    create_monster,
    get_monster_template,
)
from forest_heroes.data.shops import SHOPS, get_shop


__all__ = [
    "ITEMS",
    "STARTER_ITEMS",
    "get_item",
    "get_items_by_type",
    "MONSTERS",
    "ENCOUNTER_TABLES",
    "get_monster_template",
    "create_monster",
    "SHOPS",
    "get_shop",
]
