"""Loot and reward calculation over defeated monsters.

Pure functions: the monster list is only read. Each loot-table entry is an
independent roll, so one monster can drop several items and drops of the
same item id from different monsters are merged.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from forest_heroes.core.logging import get_logger
from forest_heroes.engine.dice import DiceRoller, get_default_roller
from forest_heroes.models.monster import Monster


logger = get_logger(__name__)


@dataclass
class LootDrop:
    """Aggregated drop of one item id."""

    item_id: str
    quantity: int = 1


def generate_loot(enemies: Iterable[Monster], roller: DiceRoller | None = None) -> list[LootDrop]:
    """Roll every loot entry of every enemy.

    Args:
        enemies: Defeated monsters.
        roller: Random source, the shared default roller if omitted.

    Returns:
        Drops in order of first appearance, one per item id.
    """
    roller = roller or get_default_roller()
    drops: dict[str, LootDrop] = {}

    for enemy in enemies:
        for entry in enemy.loot:
            if not roller.chance(entry.chance):
                continue
            if entry.item_id in drops:
                drops[entry.item_id].quantity += 1
            else:
                drops[entry.item_id] = LootDrop(item_id=entry.item_id)

    result = list(drops.values())
    if result:
        logger.info(
            "Loot dropped",
            drops={drop.item_id: drop.quantity for drop in result},
        )
    return result


def calculate_total_xp(enemies: Iterable[Monster]) -> int:
    return sum(enemy.xp_reward for enemy in enemies)


def calculate_total_gold(enemies: Iterable[Monster]) -> int:
    return sum(enemy.gold_reward for enemy in enemies)


__all__ = ["LootDrop", "generate_loot", "calculate_total_xp", "calculate_total_gold"]
