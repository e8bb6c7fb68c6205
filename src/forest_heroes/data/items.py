"""Item catalog.

Static item definitions keyed by id, grouped by type.
"""

from __future__ import annotations

from forest_heroes.models.enums import EffectType, ItemType
from forest_heroes.models.items import Item, ItemEffect, ItemStats


def _weapon(item_id: str, name: str, atk: int, description: str) -> Item:
    return Item(
        id=item_id,
        name=name,
        type=ItemType.WEAPON,
        description=description,
        stats=ItemStats(atk=atk),
    )


def _protection(
    item_id: str, name: str, item_type: ItemType, defense: int, description: str
) -> Item:
    return Item(
        id=item_id,
        name=name,
        type=item_type,
        description=description,
        stats=ItemStats(defense=defense),
    )


def _consumable(
    item_id: str, name: str, effect: EffectType, value: int, description: str
) -> Item:
    return Item(
        id=item_id,
        name=name,
        type=ItemType.CONSUMABLE,
        description=description,
        effect=ItemEffect(type=effect, value=value),
    )


ITEMS: dict[str, Item] = {
    item.id: item
    for item in (
        # =====================================================================
        # Weapons
        # =====================================================================
        _weapon("wooden_sword", "Wooden Sword", 3, "A simple wooden sword. Better than nothing."),
        _weapon("iron_sword", "Iron Sword", 7, "A sturdy iron blade favoured by seasoned fighters."),
        _weapon("magic_sword", "Magic Sword", 12, "A sword bound with ancient magic."),
        # =====================================================================
        # Armor and shields
        # =====================================================================
        _protection(
            "leather_armor", "Leather Armor", ItemType.ARMOR, 3, "Light armor of hardened leather."
        ),
        _protection(
            "chainmail", "Chainmail", ItemType.ARMOR, 7, "Armor of interlocking iron rings."
        ),
        _protection(
            "dragon_scale_armor",
            "Dragon Scale Armor",
            ItemType.ARMOR,
            12,
            "Armor forged from dragon scales. Remarkable protection.",
        ),
        _protection(
            "wooden_shield", "Wooden Shield", ItemType.SHIELD, 2, "A round shield of oak planks."
        ),
        # =====================================================================
        # Consumables
        # =====================================================================
        _consumable(
            "healing_potion", "Healing Potion", EffectType.HEAL_HP, 30, "Restores 30 HP."
        ),
        _consumable(
            "large_healing_potion",
            "Large Healing Potion",
            EffectType.HEAL_HP,
            80,
            "Restores 80 HP.",
        ),
        _consumable("mana_potion", "Mana Potion", EffectType.HEAL_MP, 20, "Restores 20 MP."),
    )
}

# (item_id, quantity) pairs every new game starts with.
STARTER_ITEMS: tuple[tuple[str, int], ...] = (
    ("wooden_sword", 1),
    ("leather_armor", 1),
    ("healing_potion", 3),
)


def get_item(item_id: str) -> Item | None:
    """Look up an item by id. Returns None for unknown ids."""
    return ITEMS.get(item_id)


def get_items_by_type(item_type: ItemType) -> list[Item]:
    """All catalog items of one type, in catalog order."""
    return [item for item in ITEMS.values() if item.type == item_type]


__all__ = ["ITEMS", "STARTER_ITEMS", "get_item", "get_items_by_type"]
