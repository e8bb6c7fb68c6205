"""Character progression: XP grants and level-ups.

All stat values come from ``forest_heroes.models.progression.LEVEL_TABLE``.
A level-up overwrites the player's base stats with the new row and fully
restores HP and MP.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from forest_heroes.core.exceptions import ValidationError
from forest_heroes.core.logging import get_logger
from forest_heroes.models.player import BaseStats, Player
from forest_heroes.models.progression import LevelData, get_level_data


logger = get_logger(__name__)


@dataclass
class StatGains:
    """Per-stat increase from one or more level-ups."""

    max_hp: int = 0
    max_mp: int = 0
    atk: int = 0
    defense: int = 0

    def __add__(self, other: StatGains) -> StatGains:
        return StatGains(
            max_hp=self.max_hp + other.max_hp,
            max_mp=self.max_mp + other.max_mp,
            atk=self.atk + other.atk,
            defense=self.defense + other.defense,
        )

    @classmethod
    def between(cls, old: LevelData, new: LevelData) -> StatGains:
        return cls(
            max_hp=new.max_hp - old.max_hp,
            max_mp=new.max_mp - old.max_mp,
            atk=new.atk - old.atk,
            defense=new.defense - old.defense,
        )


@dataclass
class LevelUpResult:
    """Outcome of an XP grant.

    Attributes:
        leveled_up: Whether at least one level was gained.
        new_level: The player's level after the grant.
        stat_gains: Summed stat increases over every level gained.
        levels_gained: Number of levels crossed by this grant.
    """

    leveled_up: bool
    new_level: int
    stat_gains: StatGains = field(default_factory=StatGains)
    levels_gained: int = 0


def base_stats_for(level_data: LevelData) -> BaseStats:
    """Base stats a player has at the given table row."""
    return BaseStats(
        max_hp=level_data.max_hp,
        max_mp=level_data.max_mp,
        atk=level_data.atk,
        defense=level_data.defense,
    )


def _level_up(player: Player) -> StatGains:
    old_data = get_level_data(player.level)
    new_data = get_level_data(player.level + 1)
    gains = StatGains.between(old_data, new_data)

    player.level = new_data.level
    # Stats first so the restored pools fit the new maximums.
    player.base_stats = base_stats_for(new_data)
    player.full_restore()

    following = get_level_data(player.level + 1)
    player.xp_to_next = following.xp_required if following is not None else player.xp

    logger.info(
        "Level up",
        new_level=player.level,
        max_hp=player.base_stats.max_hp,
        atk=player.base_stats.atk,
    )
    return gains


def add_xp(player: Player, amount: int) -> LevelUpResult:
    """Grant experience and apply any level-ups it earns.

    XP accumulates and is never reset. Level-ups repeat until the XP no
    longer reaches the next threshold or the level cap is hit, so a single
    large grant can cross several levels.

    Args:
        player: Player to mutate.
        amount: XP to add (non-negative).

    Returns:
        LevelUpResult with the new level and the summed stat gains.

    Raises:
        ValidationError: If ``amount`` is negative.
    """
    if amount < 0:
        raise ValidationError(
            "XP amount cannot be negative",
            field_name="amount",
            invalid_value=amount,
        )

    player.xp += amount

    next_data = get_level_data(player.level + 1)
    if next_data is None:
        return LevelUpResult(leveled_up=False, new_level=player.level)

    gains = StatGains()
    levels_gained = 0
    while next_data is not None and player.xp >= next_data.xp_required:
        gains = gains + _level_up(player)
        levels_gained += 1
        next_data = get_level_data(player.level + 1)

    if levels_gained == 0:
        player.xp_to_next = next_data.xp_required
        return LevelUpResult(leveled_up=False, new_level=player.level)

    return LevelUpResult(
        leveled_up=True,
        new_level=player.level,
        stat_gains=gains,
        levels_gained=levels_gained,
    )


def get_xp_to_next_level(player: Player) -> int:
    """XP still needed for the next level, 0 at the level cap."""
    next_data = get_level_data(player.level + 1)
    if next_data is None:
        return 0
    return max(0, next_data.xp_required - player.xp)


__all__ = [
    "StatGains",
    "LevelUpResult",
    "base_stats_for",
    "add_xp",
    "get_xp_to_next_level",
]
