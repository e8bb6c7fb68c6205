"""Shop catalog."""

from __future__ import annotations

from forest_heroes.core.exceptions import ShopNotFoundError
from forest_heroes.models.shop import Shop, ShopItem


SHOPS: dict[str, Shop] = {
    shop.id: shop
    for shop in (
        Shop(
            id="village_shop",
            name="Village Shop",
            items=(
                ShopItem(item_id="healing_potion", price=30),
                ShopItem(item_id="large_healing_potion", price=80),
                ShopItem(item_id="mana_potion", price=40),
            ),
        ),
        Shop(
            id="blacksmith_shop",
            name="Blacksmith",
            items=(
                ShopItem(item_id="wooden_sword", price=50),
                ShopItem(item_id="iron_sword", price=200),
                ShopItem(item_id="magic_sword", price=800, stock=1),
                ShopItem(item_id="leather_armor", price=50),
                ShopItem(item_id="chainmail", price=200),
                ShopItem(item_id="dragon_scale_armor", price=1000, stock=1),
                ShopItem(item_id="wooden_shield", price=60),
            ),
        ),
    )
}


def get_shop(shop_id: str) -> Shop:
    """Look up a shop.

    Raises:
        ShopNotFoundError: If no shop has this id.
    """
    shop = SHOPS.get(shop_id)
    if shop is None:
        raise ShopNotFoundError(f"Shop not found: {shop_id}", shop_id=shop_id)
    return shop


__all__ = ["SHOPS", "get_shop"]
