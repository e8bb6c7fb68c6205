"""Tests for shop buying and selling."""

from __future__ import annotations

import pytest

from forest_heroes.core.exceptions import ShopNotFoundError, ValidationError
from forest_heroes.data.items import get_item
from forest_heroes.data.shops import get_shop
from forest_heroes.engine.inventory import add_item, get_item_quantity
from forest_heroes.engine.shop import buy_item, buy_items, calculate_sell_price, sell_item
from forest_heroes.models.inventory import Inventory
from forest_heroes.models.shop import ShopItem


POTION = ShopItem(item_id="healing_potion", price=30)


class TestBuyItem:
    """Tests for buy_item."""

    def test_buy(self, inventory: Inventory) -> None:
        """Test a purchase adds the item and deducts gold."""
        result = buy_item(inventory, 100, POTION)

        assert result.success
        assert result.gold == 70
        assert result.quantity == 1
        assert result.message == "Bought Healing Potion for 30g."
        assert get_item_quantity(inventory, "healing_potion") == 1

    def test_not_enough_gold(self, inventory: Inventory) -> None:
        """Test a purchase the player cannot afford."""
        result = buy_item(inventory, 29, POTION)

        assert not result.success
        assert result.gold == 29
        assert result.message == "Not enough gold! Costs 30g."
        assert inventory.items == []

    def test_inventory_full(self, small_inventory: Inventory) -> None:
        """Test a full inventory blocks a new stack."""
        add_item(small_inventory, "mana_potion")
        add_item(small_inventory, "iron_sword")

        result = buy_item(small_inventory, 100, POTION)

        assert not result.success
        assert result.message == "Inventory is full!"
        assert result.gold == 100

    def test_full_inventory_stacks(self, small_inventory: Inventory) -> None:
        """Test buying more of a carried item works when full."""
        add_item(small_inventory, "healing_potion")
        add_item(small_inventory, "iron_sword")

        assert buy_item(small_inventory, 100, POTION).success
        assert get_item_quantity(small_inventory, "healing_potion") == 2

    def test_unknown_item(self, inventory: Inventory) -> None:
        """Test a shop entry for an unknown item."""
        result = buy_item(inventory, 100, ShopItem(item_id="mystery", price=1))

        assert not result.success
        assert "mystery" in result.message


class TestBuyItems:
    """Tests for buy_items."""

    def test_buy_several(self, inventory: Inventory) -> None:
        """Test buying several units at once."""
        result = buy_items(inventory, 100, POTION, 3)

        assert result.success
        assert result.gold == 10
        assert result.quantity == 3
        assert result.message == "Bought 3x Healing Potion for 90g."

    def test_total_checked_up_front(self, inventory: Inventory) -> None:
        """Test nothing is bought when the total is unaffordable."""
        result = buy_items(inventory, 80, POTION, 3)

        assert not result.success
        assert result.message == "Not enough gold! Costs 90g."
        assert inventory.items == []

    def test_full_inventory(self) -> None:
        """Test a full inventory fails the first unit and keeps the gold."""
        inventory = Inventory(max_slots=1)
        sword = ShopItem(item_id="iron_sword", price=10)
        add_item(inventory, "mana_potion")

        result = buy_items(inventory, 100, sword, 2)

        assert not result.success
        assert result.message == "Inventory is full!"
        assert result.gold == 100
        assert result.quantity == 0

    def test_single_unit(self, inventory: Inventory) -> None:
        """Test a quantity of one reads like a single purchase."""
        result = buy_items(inventory, 100, POTION, 1)

        assert result.message == "Bought Healing Potion for 30g."

    def test_invalid_quantity(self, inventory: Inventory) -> None:
        """Test zero quantities are rejected."""
        with pytest.raises(ValidationError):
            buy_items(inventory, 100, POTION, 0)


class TestSellItem:
    """Tests for sell_item and calculate_sell_price."""

    @pytest.mark.parametrize(
        ("item_id", "price"),
        [
            ("healing_potion", 10),
            ("large_healing_potion", 26),
            ("mana_potion", 6),
            ("wooden_sword", 15),
            ("magic_sword", 60),
            ("chainmail", 35),
            ("wooden_shield", 10),
        ],
    )
    def test_sell_price(self, item_id: str, price: int) -> None:
        """Test sell prices per item type."""
        assert calculate_sell_price(get_item(item_id)) == price

    def test_sell_one(self, inventory: Inventory) -> None:
        """Test selling one unit."""
        add_item(inventory, "iron_sword", 2)

        result = sell_item(inventory, 10, "iron_sword", 35)

        assert result.success
        assert result.gold == 45
        assert result.message == "Sold Iron Sword for 35g."
        assert get_item_quantity(inventory, "iron_sword") == 1

    def test_sell_capped_at_carried(self, inventory: Inventory) -> None:
        """Test selling more than carried sells what there is."""
        add_item(inventory, "healing_potion", 2)

        result = sell_item(inventory, 0, "healing_potion", 10, quantity=5)

        assert result.quantity == 2
        assert result.gold == 20
        assert result.message == "Sold 2x Healing Potion for 20g."
        assert inventory.items == []

    def test_not_carried(self, inventory: Inventory) -> None:
        """Test selling an item the player lacks."""
        result = sell_item(inventory, 10, "iron_sword", 35)

        assert not result.success
        assert result.message == "You don't have that item!"
        assert result.gold == 10

    def test_unknown_item(self, inventory: Inventory) -> None:
        """Test selling an unknown item."""
        result = sell_item(inventory, 10, "mystery", 1)

        assert not result.success
        assert result.message == "Item not found!"


class TestShopCatalog:
    """Tests for the shop catalog."""

    def test_village_shop(self) -> None:
        """Test the village shop's price list."""
        shop = get_shop("village_shop")

        assert shop.find("healing_potion").price == 30
        assert shop.find("iron_sword") is None

    def test_limited_stock(self) -> None:
        """Test limited items carry a stock count."""
        shop = get_shop("blacksmith_shop")

        assert shop.find("magic_sword").stock == 1
        assert shop.find("iron_sword").stock is None

    def test_unknown_shop(self) -> None:
        """Test unknown shops raise."""
        with pytest.raises(ShopNotFoundError):
            get_shop("pawn_shop")
