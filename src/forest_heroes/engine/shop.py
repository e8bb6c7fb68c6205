"""Shop buying and selling.

Functions take the inventory and the current gold amount and return a
``ShopResult`` carrying the new gold amount. Gold is not written anywhere;
the caller stores ``result.gold`` (typically with ``GameState.set_gold``).
Every failure comes back as ``success=False`` with its own message.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from forest_heroes.core.constants import (
    CONSUMABLE_SELL_DIVISOR,
    DEFAULT_SELL_PRICE,
    EQUIPMENT_SELL_MULTIPLIER,
)
from forest_heroes.core.exceptions import ValidationError
from forest_heroes.core.logging import get_logger
from forest_heroes.data.items import get_item
from forest_heroes.engine.inventory import add_item, get_item_quantity, remove_item
from forest_heroes.models.enums import ItemType
from forest_heroes.models.inventory import Inventory
from forest_heroes.models.items import Item
from forest_heroes.models.shop import ShopItem


logger = get_logger(__name__)

ItemLookup = Callable[[str], Item | None]


@dataclass
class ShopResult:
    """Outcome of a trade.

    Attributes:
        success: Whether at least one unit changed hands.
        gold: Gold after the trade (unchanged on failure).
        message: Text to show the player.
        quantity: Units actually bought or sold.
    """

    success: bool
    gold: int
    message: str
    quantity: int = 0


def _check_quantity(quantity: int) -> None:
    if quantity < 1:
        raise ValidationError(
            "Quantity must be at least 1",
            field_name="quantity",
            invalid_value=quantity,
        )


# =============================================================================
# Buying
# =============================================================================


def buy_item(
    inventory: Inventory,
    gold: int,
    shop_item: ShopItem,
    *,
    catalog: ItemLookup = get_item,
) -> ShopResult:
    """Buy one unit of a shop item."""
    item = catalog(shop_item.item_id)
    if item is None:
        return ShopResult(False, gold, f"Item not found: {shop_item.item_id}")

    if gold < shop_item.price:
        return ShopResult(False, gold, f"Not enough gold! Costs {shop_item.price}g.")

    if inventory.is_full and inventory.find(item.id) is None:
        return ShopResult(False, gold, "Inventory is full!")

    add_item(inventory, item.id, catalog=catalog)
    logger.debug("Item bought", item_id=item.id, price=shop_item.price)
    return ShopResult(
        True,
        gold - shop_item.price,
        f"Bought {item.name} for {shop_item.price}g.",
        quantity=1,
    )


def buy_items(
    inventory: Inventory,
    gold: int,
    shop_item: ShopItem,
    quantity: int,
    *,
    catalog: ItemLookup = get_item,
) -> ShopResult:
    """Buy several units, one at a time.

    The full cost must be affordable up front. If the inventory fills up
    part way, the units already bought are kept and reported.

    Raises:
        ValidationError: If ``quantity`` is below 1.
    """
    _check_quantity(quantity)

    total_cost = shop_item.price * quantity
    if gold < total_cost:
        return ShopResult(False, gold, f"Not enough gold! Costs {total_cost}g.")

    bought = 0
    for _ in range(quantity):
        result = buy_item(inventory, gold, shop_item, catalog=catalog)
        if not result.success:
            if bought == 0:
                return result
            item = catalog(shop_item.item_id)
            return ShopResult(
                True,
                gold,
                f"Bought {bought}x {item.name}. {result.message}",
                quantity=bought,
            )
        gold = result.gold
        bought += 1

    if bought == 1:
        return result

    item = catalog(shop_item.item_id)
    logger.info("Items bought", item_id=shop_item.item_id, quantity=bought, cost=total_cost)
    return ShopResult(
        True,
        gold,
        f"Bought {bought}x {item.name} for {total_cost}g.",
        quantity=bought,
    )


# =============================================================================
# Selling
# =============================================================================


def calculate_sell_price(item: Item) -> int:
    """What a shop pays for one unit of an item.

    Consumables fetch a third of their effect value, weapons five gold per
    ATK point and armor or shields five gold per DEF point. Never below 1.
    """
    price = DEFAULT_SELL_PRICE
    if item.type == ItemType.CONSUMABLE:
        if item.effect is not None and item.effect.value:
            price = item.effect.value // CONSUMABLE_SELL_DIVISOR
    elif item.type == ItemType.WEAPON:
        price = (item.atk_bonus or 1) * EQUIPMENT_SELL_MULTIPLIER
    elif item.type in (ItemType.ARMOR, ItemType.SHIELD):
        price = (item.defense_bonus or 1) * EQUIPMENT_SELL_MULTIPLIER
    return max(1, price)


def sell_item(
    inventory: Inventory,
    gold: int,
    item_id: str,
    sell_price: int,
    quantity: int = 1,
    *,
    catalog: ItemLookup = get_item,
) -> ShopResult:
    """Sell units of a carried item.

    Sells at most as many units as are carried.

    Raises:
        ValidationError: If ``quantity`` is below 1.
    """
    _check_quantity(quantity)

    item = catalog(item_id)
    if item is None:
        return ShopResult(False, gold, "Item not found!")

    carried = get_item_quantity(inventory, item_id)
    if carried == 0:
        return ShopResult(False, gold, "You don't have that item!")

    sold = min(quantity, carried)
    remove_item(inventory, item_id, sold)
    total = sell_price * sold

    logger.debug("Item sold", item_id=item_id, quantity=sold, total=total)
    if sold == 1:
        message = f"Sold {item.name} for {sell_price}g."
    else:
        message = f"Sold {sold}x {item.name} for {total}g."
    return ShopResult(True, gold + total, message, quantity=sold)


__all__ = [
    "ShopResult",
    "buy_item",
    "buy_items",
    "calculate_sell_price",
    "sell_item",
]
