"""Shop catalog models."""

from __future__ import annotations

from pydantic import Field

from forest_heroes.models.base import CatalogModel


class ShopItem(CatalogModel):
    """An item offered for sale. ``stock`` of None means unlimited."""

    item_id: str
    price: int = Field(ge=0)
    stock: int | None = Field(default=None, ge=0)


class Shop(CatalogModel):
    """A shop and its price list."""

    id: str
    name: str
    items: tuple[ShopItem, ...] = Field(default=())

    def find(self, item_id: str) -> ShopItem | None:
        for shop_item in self.items:
            if shop_item.item_id == item_id:
                return shop_item
        return None


__all__ = ["ShopItem", "Shop"]
