"""Forest Heroes - turn-based RPG game core.

A headless engine for a small turn-based role-playing game: combat
resolution, character progression, loot, inventory and equipment, shops,
story flags and save files. Rendering and input live elsewhere; they call
into this package and render the ``CombatEvent`` values it returns.

Example:
    >>> from forest_heroes import CombatSystem, PlayerAction, create_monster, new_game
    >>>
    >>> state = new_game()
    >>> combat = CombatSystem(state.player, [create_monster("slime")])
    >>> event = combat.execute_player_action(PlayerAction.ATTACK_NORMAL)
    >>> print(event.message)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 models for players, items, monsters and game state.
    data: Static item, monster, encounter and shop catalogs.
    engine: Dice, inventory, progression, loot, combat and session logic.
    storage: JSON save-file persistence.
"""

from __future__ import annotations

# Core
from forest_heroes.core.config import Settings, get_settings
from forest_heroes.core.exceptions import ForestHeroesError
from forest_heroes.core.logging import configure_logging, get_logger, setup_logging

# Catalog
from forest_heroes.data import create_monster, get_item, get_shop

# Engine
from forest_heroes.engine import (
    BattleRewards,
    CombatSystem,
    DiceRoller,
    add_xp,
    apply_defeat,
    apply_victory,
    generate_encounter,
    new_game,
)

# Models
from forest_heroes.models import (
    CombatEvent,
    CombatResult,
    GameState,
    Inventory,
    Monster,
    Player,
    PlayerAction,
)

# Storage
from forest_heroes.storage import SaveManager


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "ForestHeroesError",
    "Settings",
    "get_settings",
    "configure_logging",
    "setup_logging",
    "get_logger",
    # Catalog
    "get_item",
    "create_monster",
    "get_shop",
    # Engine
    "CombatSystem",
    "DiceRoller",
    "add_xp",
    "generate_encounter",
    "new_game",
    "apply_victory",
    "apply_defeat",
    "BattleRewards",
    # Models
    "Player",
    "Inventory",
    "Monster",
    "GameState",
    "CombatEvent",
    "CombatResult",
    "PlayerAction",
    # Storage
    "SaveManager",
]
