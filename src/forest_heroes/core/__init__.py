"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        ForestHeroesError: Base exception for all application errors.
        CatalogError: Missing authored content (monsters, tables, shops).
        CombatError: Combat engine driven outside its contract.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the cached settings.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        setup_logging: Configure logging from Settings.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from forest_heroes.core.config import (
    GameSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from forest_heroes.core.exceptions import (
    CatalogError,
    CombatError,
    ConfigurationError,
    DiceRollError,
    EncounterTableNotFoundError,
    ForestHeroesError,
    GameEngineError,
    MonsterNotFoundError,
    PersistenceError,
    SaveGameError,
    ShopNotFoundError,
    ValidationError,
)
from forest_heroes.core.logging import (
    configure_logging,
    get_logger,
    setup_logging,
)


__all__ = [
    # Exceptions
    "ForestHeroesError",
    "CatalogError",
    "MonsterNotFoundError",
    "EncounterTableNotFoundError",
    "ShopNotFoundError",
    "GameEngineError",
    "CombatError",
    "DiceRollError",
    "PersistenceError",
    "SaveGameError",
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "GameSettings",
    "StorageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "setup_logging",
]
