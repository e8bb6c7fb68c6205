"""Player character model.

The player's ``base_stats`` come solely from the progression table.
Equipment bonuses are never folded into them; they are added on demand by
``forest_heroes.engine.inventory.get_total_atk`` / ``get_total_def``.
"""

from __future__ import annotations

from typing import Self

from pydantic import Field, model_validator

from forest_heroes.models.base import GameModel
from forest_heroes.models.enums import EquipmentSlot
from forest_heroes.models.items import Item


class BaseStats(GameModel):
    """Level-derived stats."""

    max_hp: int = Field(ge=1, description="Maximum hit points")
    max_mp: int = Field(ge=0, description="Maximum magic points")
    atk: int = Field(ge=0, description="Base attack")
    defense: int = Field(ge=0, description="Base defense")


class Equipment(GameModel):
    """Equipped items, at most one per slot."""

    weapon: Item | None = Field(default=None)
    armor: Item | None = Field(default=None)
    shield: Item | None = Field(default=None)

    def get(self, slot: EquipmentSlot) -> Item | None:
        """Get the item in a slot."""
        return getattr(self, EquipmentSlot(slot).value)

    def set(self, slot: EquipmentSlot, item: Item | None) -> None:
        """Put an item into a slot (or clear it with None)."""
        setattr(self, EquipmentSlot(slot).value, item)

    def equipped_items(self) -> list[Item]:
        """All equipped items in slot order."""
        return [item for item in (self.weapon, self.armor, self.shield) if item is not None]


class Player(GameModel):
    """The player character.

    ``current_hp`` and ``current_mp`` always stay within
    ``[0, base_stats.max_*]``. The mutation helpers below clamp; direct
    assignment outside that range is rejected.
    """

    name: str = Field(default="Hero")
    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0, description="Cumulative experience")
    xp_to_next: int = Field(default=0, ge=0, description="XP threshold of the next level")
    base_stats: BaseStats
    current_hp: int = Field(ge=0)
    current_mp: int = Field(ge=0)
    equipment: Equipment = Field(default_factory=Equipment)

    @model_validator(mode="after")
    def check_pools_within_max(self) -> Self:
        """Reject HP/MP above their maximums."""
        if self.current_hp > self.base_stats.max_hp:
            raise ValueError(
                f"current_hp ({self.current_hp}) exceeds max_hp ({self.base_stats.max_hp})"
            )
        if self.current_mp > self.base_stats.max_mp:
            raise ValueError(
                f"current_mp ({self.current_mp}) exceeds max_mp ({self.base_stats.max_mp})"
            )
        return self

    @property
    def is_defeated(self) -> bool:
        return self.current_hp == 0

    def take_damage(self, amount: int) -> int:
        """Apply damage and return the HP actually lost."""
        actual = min(self.current_hp, max(0, amount))
        self.current_hp -= actual
        return actual

    def heal_hp(self, amount: int) -> int:
        """Restore HP without overhealing. Returns HP actually restored."""
        actual = max(0, min(amount, self.base_stats.max_hp - self.current_hp))
        self.current_hp += actual
        return actual

    def restore_mp(self, amount: int) -> int:
        """Restore MP without exceeding the maximum. Returns MP restored."""
        actual = max(0, min(amount, self.base_stats.max_mp - self.current_mp))
        self.current_mp += actual
        return actual

    def spend_mp(self, cost: int) -> bool:
        """Deduct MP if enough is available."""
        if self.current_mp < cost:
            return False
        self.current_mp -= cost
        return True

    def full_restore(self) -> None:
        """Refill HP and MP to their maximums."""
        self.current_hp = self.base_stats.max_hp
        self.current_mp = self.base_stats.max_mp


__all__ = ["BaseStats", "Equipment", "Player"]
