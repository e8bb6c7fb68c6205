"""Item definitions.

Items are immutable catalog values. Inventories and equipment slots hold
references to them; nothing mutates an item after it is defined.
"""

from __future__ import annotations

from pydantic import Field

from forest_heroes.models.base import CatalogModel
from forest_heroes.models.enums import EffectType, ItemType


class ItemStats(CatalogModel):
    """Stat bonuses granted by an equipped item."""

    atk: int | None = Field(default=None, description="Attack bonus")
    defense: int | None = Field(default=None, description="Defense bonus")


class ItemEffect(CatalogModel):
    """Effect applied when a consumable is used."""

    type: EffectType
    value: int = Field(ge=0, description="Amount restored")


class Item(CatalogModel):
    """A catalog item.

    Equipment items carry ``stats``; consumables carry an ``effect``.
    """

    id: str = Field(min_length=1)
    name: str
    type: ItemType
    description: str = Field(default="")
    stats: ItemStats | None = Field(default=None)
    effect: ItemEffect | None = Field(default=None)

    @property
    def is_equipment(self) -> bool:
        return self.type.is_equipment

    @property
    def atk_bonus(self) -> int:
        """Attack this item adds when equipped (0 if none)."""
        if self.stats is None or self.stats.atk is None:
            return 0
        return self.stats.atk

    @property
    def defense_bonus(self) -> int:
        """Defense this item adds when equipped (0 if none)."""
        if self.stats is None or self.stats.defense is None:
            return 0
        return self.stats.defense


__all__ = ["ItemStats", "ItemEffect", "Item"]
