"""Tests for XP grants and level-ups."""

from __future__ import annotations

import pytest

from forest_heroes.core.exceptions import ValidationError
from forest_heroes.engine.character import (
    LevelUpResult,
    StatGains,
    add_xp,
    base_stats_for,
    get_xp_to_next_level,
)
from forest_heroes.models.player import Player
from forest_heroes.models.progression import LEVEL_TABLE, get_level_data, max_level


def _player_at(level: int) -> Player:
    data = get_level_data(level)
    following = get_level_data(level + 1)
    return Player(
        level=level,
        xp=data.xp_required,
        xp_to_next=following.xp_required if following else data.xp_required,
        base_stats=base_stats_for(data),
        current_hp=data.max_hp,
        current_mp=data.max_mp,
    )


class TestAddXp:
    """Tests for add_xp."""

    def test_no_level_up(self, player: Player) -> None:
        """Test XP below the threshold only accumulates."""
        result = add_xp(player, 10)

        assert result == LevelUpResult(leveled_up=False, new_level=1)
        assert player.xp == 10
        assert player.xp_to_next == 20

    def test_single_level_up(self, player: Player) -> None:
        """Test crossing one threshold levels up once and restores HP/MP."""
        player.current_hp = 3
        player.current_mp = 0

        result = add_xp(player, 25)

        assert result.leveled_up is True
        assert result.new_level == 2
        assert result.levels_gained == 1
        assert result.stat_gains == StatGains(max_hp=8, max_mp=3, atk=2, defense=1)
        assert player.xp == 25
        assert player.xp_to_next == 50
        assert player.current_hp == 48
        assert player.current_mp == 18
        assert player.base_stats.atk == 10

    def test_exact_threshold(self, player: Player) -> None:
        """Test reaching the threshold exactly levels up."""
        assert add_xp(player, 20).leveled_up

    def test_multiple_levels_in_one_grant(self, player: Player) -> None:
        """Test a large grant crosses every threshold it reaches."""
        result = add_xp(player, 120)

        assert result.new_level == 4
        assert result.levels_gained == 3
        assert result.stat_gains == StatGains(max_hp=24, max_mp=9, atk=6, defense=3)
        assert player.xp_to_next == 170
        assert player.current_hp == 64

    def test_reaching_cap(self) -> None:
        """Test levelling into the cap leaves xp_to_next at the current XP."""
        player = _player_at(9)

        result = add_xp(player, 300)

        assert result.new_level == max_level()
        assert player.xp == 1020
        assert player.xp_to_next == 1020

    def test_at_cap(self) -> None:
        """Test XP still accumulates at the cap without a level-up."""
        player = _player_at(max_level())
        before = player.xp_to_next

        result = add_xp(player, 500)

        assert result == LevelUpResult(leveled_up=False, new_level=10)
        assert player.xp == 950 + 500
        assert player.xp_to_next == before

    def test_zero_xp(self, player: Player) -> None:
        """Test a zero grant is a no-op."""
        assert not add_xp(player, 0).leveled_up
        assert player.xp == 0

    def test_negative_xp(self, player: Player) -> None:
        """Test negative grants are rejected."""
        with pytest.raises(ValidationError):
            add_xp(player, -5)


class TestXpToNextLevel:
    """Tests for get_xp_to_next_level."""

    def test_remaining(self, player: Player) -> None:
        """Test the remaining XP is the gap to the next threshold."""
        add_xp(player, 12)
        assert get_xp_to_next_level(player) == 8

    def test_at_cap(self) -> None:
        """Test 0 at the level cap."""
        assert get_xp_to_next_level(_player_at(10)) == 0


class TestLevelTable:
    """Tests for the progression table."""

    def test_shape(self) -> None:
        """Test the table starts at 0 XP and is strictly ascending."""
        assert LEVEL_TABLE[0].xp_required == 0
        assert [row.level for row in LEVEL_TABLE] == list(range(1, 11))
        for lower, upper in zip(LEVEL_TABLE, LEVEL_TABLE[1:]):
            assert upper.xp_required > lower.xp_required
            assert StatGains.between(lower, upper) == StatGains(
                max_hp=8, max_mp=3, atk=2, defense=1
            )

    def test_lookup_out_of_range(self) -> None:
        """Test rows outside the table are absent."""
        assert get_level_data(0) is None
        assert get_level_data(11) is None
        assert get_level_data(10).max_hp == 112
