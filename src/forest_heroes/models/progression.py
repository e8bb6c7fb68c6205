"""Character level progression data.

The level table is the single source of truth for a player's base stats.
Level 1 requires 0 XP; each later level requires strictly more XP than the
one before it, and every stat is non-decreasing from level to level.
"""

from __future__ import annotations

from pydantic import Field

from forest_heroes.models.base import CatalogModel


class LevelData(CatalogModel):
    """Thresholds and stats for one level."""

    level: int = Field(ge=1)
    xp_required: int = Field(ge=0, description="Cumulative XP needed to reach this level")
    max_hp: int = Field(ge=1)
    max_mp: int = Field(ge=0)
    atk: int = Field(ge=0)
    defense: int = Field(ge=0)


# =============================================================================
# Level Table
# =============================================================================

LEVEL_TABLE: tuple[LevelData, ...] = (
    LevelData(level=1, xp_required=0, max_hp=40, max_mp=15, atk=8, defense=4),
    LevelData(level=2, xp_required=20, max_hp=48, max_mp=18, atk=10, defense=5),
    LevelData(level=3, xp_required=50, max_hp=56, max_mp=21, atk=12, defense=6),
    LevelData(level=4, xp_required=100, max_hp=64, max_mp=24, atk=14, defense=7),
    LevelData(level=5, xp_required=170, max_hp=72, max_mp=27, atk=16, defense=8),
    LevelData(level=6, xp_required=260, max_hp=80, max_mp=30, atk=18, defense=9),
    LevelData(level=7, xp_required=380, max_hp=88, max_mp=33, atk=20, defense=10),
    LevelData(level=8, xp_required=530, max_hp=96, max_mp=36, atk=22, defense=11),
    LevelData(level=9, xp_required=720, max_hp=104, max_mp=39, atk=24, defense=12),
    LevelData(level=10, xp_required=950, max_hp=112, max_mp=42, atk=26, defense=13),
)

_LEVELS_BY_NUMBER: dict[int, LevelData] = {data.level: data for data in LEVEL_TABLE}


def get_level_data(level: int) -> LevelData | None:
    """Get the table row for a level. Returns None outside 1..max_level()."""
    return _LEVELS_BY_NUMBER.get(level)


def max_level() -> int:
    """Highest level in the table."""
    return LEVEL_TABLE[-1].level


__all__ = ["LevelData", "LEVEL_TABLE", "get_level_data", "max_level"]
