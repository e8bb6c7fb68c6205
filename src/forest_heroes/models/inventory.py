"""Inventory model.

One entry per distinct item id. ``max_slots`` limits the number of
entries, not the total quantity carried.
"""

from __future__ import annotations

from typing import Self

from pydantic import Field, model_validator

from forest_heroes.models.base import GameModel
from forest_heroes.models.items import Item


class InventoryEntry(GameModel):
    """A stack of one item."""

    item: Item
    quantity: int = Field(default=1, ge=1)

    @property
    def item_id(self) -> str:
        return self.item.id


class Inventory(GameModel):
    """The player's carried items."""

    items: list[InventoryEntry] = Field(default_factory=list)
    max_slots: int = Field(default=20, ge=1)

    @model_validator(mode="after")
    def check_stacks(self) -> Self:
        """Reject duplicate stacks and more stacks than slots."""
        ids = [entry.item.id for entry in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError("inventory contains more than one stack of the same item")
        if len(ids) > self.max_slots:
            raise ValueError(f"inventory holds {len(ids)} stacks but has {self.max_slots} slots")
        return self

    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.max_slots

    def find(self, item_id: str) -> InventoryEntry | None:
        """Get the stack for an item id, if any."""
        for entry in self.items:
            if entry.item.id == item_id:
                return entry
        return None


__all__ = ["InventoryEntry", "Inventory"]
