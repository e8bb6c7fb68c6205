"""Monster templates, battle instances and encounter tables.

Templates are immutable catalog entries. A battle works on ``Monster``
instances created by ``MonsterTemplate.instantiate``, which copies every
field so damaging one instance can never touch the template or a sibling
instance of the same id.
"""

from __future__ import annotations

from typing import Self

from pydantic import Field, model_validator

from forest_heroes.models.base import CatalogModel, GameModel
from forest_heroes.models.enums import AIType


class MonsterStats(GameModel):
    """Combat stats of a monster."""

    max_hp: int = Field(ge=1)
    atk: int = Field(ge=0)
    defense: int = Field(ge=0)


class LootEntry(GameModel):
    """One independent drop roll."""

    item_id: str
    chance: float = Field(ge=0.0, le=1.0, description="Drop probability")


class MonsterTemplate(CatalogModel):
    """Catalog definition a monster instance is created from."""

    id: str = Field(min_length=1)
    name: str
    sprite: str = Field(default="")
    stats: MonsterStats
    xp_reward: int = Field(default=0, ge=0)
    gold_reward: int = Field(default=0, ge=0)
    loot: tuple[LootEntry, ...] = Field(default=())
    ai_type: AIType = Field(default=AIType.BASIC)

    def instantiate(self) -> Monster:
        """Create a fresh, fully healed battle instance."""
        data = self.model_dump()
        return Monster(
            **data,
            current_hp=self.stats.max_hp,
            has_healed=False,
        )


class Monster(GameModel):
    """A monster taking part in one battle.

    ``id`` is the template id and is not unique within a battle; instances
    are told apart by their position in the enemy list.
    """

    id: str
    name: str
    sprite: str = Field(default="")
    stats: MonsterStats
    current_hp: int = Field(ge=0)
    xp_reward: int = Field(default=0, ge=0)
    gold_reward: int = Field(default=0, ge=0)
    loot: list[LootEntry] = Field(default_factory=list)
    ai_type: AIType = Field(default=AIType.BASIC)
    has_healed: bool = Field(default=False, description="Boss self-heal already used")

    @model_validator(mode="after")
    def check_hp_within_max(self) -> Self:
        if self.current_hp > self.stats.max_hp:
            raise ValueError(
                f"current_hp ({self.current_hp}) exceeds max_hp ({self.stats.max_hp})"
            )
        return self

    @property
    def is_alive(self) -> bool:
        return self.current_hp > 0

    @property
    def hp_fraction(self) -> float:
        return self.current_hp / self.stats.max_hp

    def take_damage(self, amount: int) -> int:
        """Apply damage and return the HP actually lost."""
        actual = min(self.current_hp, max(0, amount))
        self.current_hp -= actual
        return actual

    def heal(self, amount: int) -> int:
        """Restore HP without overhealing. Returns HP actually restored."""
        actual = max(0, min(amount, self.stats.max_hp - self.current_hp))
        self.current_hp += actual
        return actual


class EncounterEntry(CatalogModel):
    """A weighted monster choice in an encounter table.

    ``min_level``/``max_level`` restrict the entry to a player level band.
    """

    monster_id: str
    weight: float = Field(gt=0.0)
    min_level: int | None = Field(default=None, ge=1)
    max_level: int | None = Field(default=None, ge=1)

    def admits_level(self, level: int) -> bool:
        if self.min_level is not None and level < self.min_level:
            return False
        if self.max_level is not None and level > self.max_level:
            return False
        return True


class EncounterTable(CatalogModel):
    """Which monsters appear in an area, and how many at once."""

    monsters: tuple[EncounterEntry, ...]
    min_encounters: int = Field(default=1, ge=1)
    max_encounters: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        if self.max_encounters < self.min_encounters:
            raise ValueError("max_encounters must be >= min_encounters")
        if not self.monsters:
            raise ValueError("encounter table needs at least one monster entry")
        return self


__all__ = [
    "MonsterStats",
    "LootEntry",
    "MonsterTemplate",
    "Monster",
    "EncounterEntry",
    "EncounterTable",
]
