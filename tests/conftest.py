"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Forest Heroes test suite.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import pytest

from forest_heroes.core.config import GameSettings
from forest_heroes.data.items import get_item
from forest_heroes.engine.dice import DiceResult, DiceRoller
from forest_heroes.engine.game import create_player, new_game
from forest_heroes.models.game_state import GameState
from forest_heroes.models.inventory import Inventory
from forest_heroes.models.player import Player


if TYPE_CHECKING:
    from collections.abc import Generator


class ScriptedRoller(DiceRoller):
    """DiceRoller that replays fixed values.

    ``random()`` returns the scripted floats in order and ``default`` once
    they run out. ``roll()`` returns the scripted dice totals in order and
    falls back to real d20 rolls afterwards.
    """

    def __init__(
        self,
        values: Iterable[float] = (),
        *,
        rolls: Iterable[int] = (),
        default: float = 0.0,
    ) -> None:
        super().__init__(seed=0)
        self._values = list(values)
        self._rolls = list(rolls)
        self._default = default
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        if self._values:
            return self._values.pop(0)
        return self._default

    def roll(self, expression: str) -> DiceResult:
        if self._rolls:
            total = self._rolls.pop(0)
            return DiceResult(expression=expression, total=total, dice=[total])
        return super().roll(expression)


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from forest_heroes.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def game_settings() -> GameSettings:
    """Default game settings, independent of the environment."""
    return GameSettings(_env_file=None)


# =============================================================================
# Randomness Fixtures
# =============================================================================


@pytest.fixture
def always_hit() -> ScriptedRoller:
    """Roller whose every uniform draw is 0.0 (every chance succeeds)."""
    return ScriptedRoller(default=0.0)


@pytest.fixture
def always_miss() -> ScriptedRoller:
    """Roller whose every uniform draw is just below 1.0 (every chance fails)."""
    return ScriptedRoller(default=0.999)


@pytest.fixture
def scripted_roller() -> type[ScriptedRoller]:
    """The ScriptedRoller class, for tests that need specific sequences."""
    return ScriptedRoller


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def player() -> Player:
    """A fresh level-1 player with nothing equipped."""
    return create_player("Tester")


@pytest.fixture
def inventory() -> Inventory:
    """An empty inventory with the default 20 slots."""
    return Inventory()


@pytest.fixture
def small_inventory() -> Inventory:
    """An empty two-slot inventory for capacity tests."""
    return Inventory(max_slots=2)


@pytest.fixture
def game_state(game_settings: GameSettings) -> GameState:
    """A freshly started game."""
    return new_game(game_settings)


@pytest.fixture
def wooden_sword():
    return get_item("wooden_sword")
