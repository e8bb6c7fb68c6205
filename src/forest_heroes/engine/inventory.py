"""Inventory and equipment manager.

Module-level operations over an ``Inventory`` and/or ``Player`` passed by
reference and mutated in place. Player-reachable failures (unknown item,
full inventory, missing item, empty slot) return ``False`` and leave
everything untouched; nothing here raises for them.

Equipment bonuses are computed only by ``get_total_atk`` and
``get_total_def``. Combat reads attack and defense through them.
"""

from __future__ import annotations

from collections.abc import Callable

from forest_heroes.core.exceptions import ValidationError
from forest_heroes.core.logging import get_logger
from forest_heroes.data.items import get_item
from forest_heroes.models.enums import EffectType, EquipmentSlot, ItemType
from forest_heroes.models.inventory import Inventory, InventoryEntry
from forest_heroes.models.items import Item
from forest_heroes.models.player import Player


logger = get_logger(__name__)

ItemLookup = Callable[[str], Item | None]

_SLOT_BY_TYPE: dict[ItemType, EquipmentSlot] = {
    ItemType.WEAPON: EquipmentSlot.WEAPON,
    ItemType.ARMOR: EquipmentSlot.ARMOR,
    ItemType.SHIELD: EquipmentSlot.SHIELD,
}


def _check_quantity(quantity: int) -> None:
    if quantity < 1:
        raise ValidationError(
            "Quantity must be at least 1",
            field_name="quantity",
            invalid_value=quantity,
        )


# =============================================================================
# Stacks
# =============================================================================


def add_item(
    inventory: Inventory,
    item_id: str,
    quantity: int = 1,
    *,
    catalog: ItemLookup = get_item,
) -> bool:
    """Add units of an item.

    An existing stack always grows, even when every slot is taken. A new
    stack needs a free slot and a known item id.

    Args:
        inventory: Inventory to mutate.
        item_id: Catalog id of the item.
        quantity: Units to add (at least 1).
        catalog: Item lookup, the item catalog by default.

    Returns:
        True if the units were added.

    Raises:
        ValidationError: If ``quantity`` is below 1.
    """
    _check_quantity(quantity)

    entry = inventory.find(item_id)
    if entry is not None:
        entry.quantity += quantity
        return True

    if inventory.is_full:
        logger.warning("Inventory full", item_id=item_id, max_slots=inventory.max_slots)
        return False

    item = catalog(item_id)
    if item is None:
        logger.warning("Unknown item", item_id=item_id)
        return False

    inventory.items.append(InventoryEntry(item=item, quantity=quantity))
    return True


def remove_item(inventory: Inventory, item_id: str, quantity: int = 1) -> bool:
    """Remove units of an item, dropping the stack when it reaches zero.

    Raises:
        ValidationError: If ``quantity`` is below 1.
    """
    _check_quantity(quantity)

    entry = inventory.find(item_id)
    if entry is None or entry.quantity < quantity:
        return False

    if entry.quantity == quantity:
        inventory.items.remove(entry)
    else:
        entry.quantity -= quantity
    return True


def has_item(inventory: Inventory, item_id: str, quantity: int = 1) -> bool:
    entry = inventory.find(item_id)
    return entry is not None and entry.quantity >= quantity


def get_item_quantity(inventory: Inventory, item_id: str) -> int:
    entry = inventory.find(item_id)
    return entry.quantity if entry is not None else 0


# =============================================================================
# Consumables
# =============================================================================


def use_consumable(
    inventory: Inventory,
    player: Player,
    item_id: str,
    *,
    catalog: ItemLookup = get_item,
) -> bool:
    """Apply a consumable's effect to the player and use up one unit.

    Healing is clamped to the player's maximums.

    Returns:
        False without any change if the item is unknown, not a consumable,
        has no effect, or is not carried.
    """
    item = catalog(item_id)
    if item is None or item.type != ItemType.CONSUMABLE or item.effect is None:
        return False
    if not has_item(inventory, item_id):
        return False

    if item.effect.type == EffectType.HEAL_HP:
        restored = player.heal_hp(item.effect.value)
    else:
        restored = player.restore_mp(item.effect.value)

    remove_item(inventory, item_id)
    logger.debug("Consumable used", item_id=item_id, restored=restored)
    return True


# =============================================================================
# Equipment
# =============================================================================


def slot_for_item(item: Item) -> EquipmentSlot | None:
    """Equipment slot an item goes into, or None for non-equipment."""
    return _SLOT_BY_TYPE.get(item.type)


def equip_item(
    inventory: Inventory,
    player: Player,
    item_id: str,
    *,
    catalog: ItemLookup = get_item,
) -> bool:
    """Equip one unit of a carried item, swapping out the current one.

    One unit of the new item leaves the inventory first, then the
    previously equipped item goes back in. If the old item cannot be stored
    the new unit is put back and the equip is rejected, so an equipped item
    is never lost.

    Returns:
        True if the item is now equipped.
    """
    item = catalog(item_id)
    if item is None:
        return False
    slot = slot_for_item(item)
    if slot is None:
        return False
    if not has_item(inventory, item_id):
        return False

    entry = inventory.find(item_id)
    position = inventory.items.index(entry)
    stack_dropped = entry.quantity == 1
    remove_item(inventory, item_id)

    previous = player.equipment.get(slot)
    if previous is not None:
        stored = add_item(inventory, previous.id, catalog=lambda _id: previous)
        if not stored:
            # Put the unit back where it was.
            if stack_dropped:
                inventory.items.insert(position, entry)
            else:
                entry.quantity += 1
            logger.warning(
                "Equip rejected, no room for previous item",
                item_id=item_id,
                previous=previous.id,
            )
            return False

    player.equipment.set(slot, item)
    logger.debug(
        "Item equipped",
        item_id=item_id,
        slot=slot.value,
        previous=previous.id if previous is not None else None,
    )
    return True


def unequip_item(
    inventory: Inventory,
    player: Player,
    slot: EquipmentSlot,
) -> bool:
    """Move the item in a slot back into the inventory.

    Returns:
        False, leaving the slot as it was, if the slot is empty or the
        inventory has no room for the item.
    """
    item = player.equipment.get(slot)
    if item is None:
        return False

    if not add_item(inventory, item.id, catalog=lambda _id: item):
        return False

    player.equipment.set(slot, None)
    logger.debug("Item unequipped", item_id=item.id, slot=EquipmentSlot(slot).value)
    return True


# =============================================================================
# Totals
# =============================================================================


def get_total_atk(player: Player) -> int:
    """Base attack plus the equipped weapon's bonus."""
    weapon = player.equipment.weapon
    return player.base_stats.atk + (weapon.atk_bonus if weapon is not None else 0)


def get_total_def(player: Player) -> int:
    """Base defense plus the equipped armor's and shield's bonuses."""
    armor = player.equipment.armor
    shield = player.equipment.shield
    return (
        player.base_stats.defense
        + (armor.defense_bonus if armor is not None else 0)
        + (shield.defense_bonus if shield is not None else 0)
    )


__all__ = [
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
]
