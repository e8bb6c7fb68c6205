"""Configuration management for Forest Heroes.

Settings are loaded with pydantic-settings from environment variables and an
optional ``.env`` file. Only the outer layers (new-game setup, save/load,
encounter pacing) read configuration; combat, inventory and progression
rules take everything they need as arguments.

Example:
    >>> from forest_heroes.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.inventory_max_slots
    20

Environment Variables:
    FOREST_HEROES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    FOREST_HEROES_SAVE_PATH: Path to the save file
    FOREST_HEROES_GAME_INVENTORY_MAX_SLOTS: Distinct item stacks a player can carry
    FOREST_HEROES_GAME_STARTING_GOLD: Gold at the start of a new game
    FOREST_HEROES_GAME_RANDOM_SEED: Optional seed for reproducible sessions
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forest_heroes.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Configuration for new games and encounter pacing.

    Attributes:
        player_name: Name given to the hero of a new game.
        inventory_max_slots: Maximum number of distinct item stacks.
        starting_gold: Gold the player starts with.
        starting_map: Map id a new game starts on.
        starting_position_x: Starting tile column.
        starting_position_y: Starting tile row.
        encounter_min_steps: Steps before random encounters can trigger.
        encounter_max_steps: Steps at which the encounter chance peaks.
        encounter_max_chance: Peak per-step encounter chance.
        boss_gold_bonus: Gold granted for each boss defeated.
        random_seed: Optional seed for the shared dice roller.
    """

    model_config = SettingsConfigDict(
        env_prefix="FOREST_HEROES_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    player_name: str = Field(default="Hero", min_length=1, description="Hero name")
    inventory_max_slots: int = Field(
        default=20,
        ge=1,
        le=99,
        description="Distinct item stacks the player can carry",
    )
    starting_gold: int = Field(default=100, ge=0, description="Gold for a new game")
    starting_map: str = Field(default="village", description="Map id for a new game")
    starting_position_x: int = Field(default=8, ge=0)
    starting_position_y: int = Field(default=8, ge=0)
    encounter_min_steps: int = Field(
        default=5,
        ge=0,
        description="Steps before random encounters can trigger",
    )
    encounter_max_steps: int = Field(
        default=10,
        ge=1,
        description="Steps at which the encounter chance peaks",
    )
    encounter_max_chance: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Peak per-step encounter chance",
    )
    boss_gold_bonus: int = Field(default=500, ge=0, description="Gold per boss defeated")
    random_seed: int | None = Field(default=None, description="Seed for the dice roller")

    @model_validator(mode="after")
    def validate_encounter_steps(self) -> "GameSettings":
        """Ensure the encounter ramp has a positive length.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If encounter_max_steps <= encounter_min_steps.
        """
        if self.encounter_max_steps <= self.encounter_min_steps:
            raise ConfigurationError(
                f"encounter_max_steps ({self.encounter_max_steps}) must be greater than "
                f"encounter_min_steps ({self.encounter_min_steps})",
                config_key="encounter_max_steps",
            )
        return self


class StorageSettings(BaseSettings):
    """Configuration for save file storage.

    Attributes:
        save_path: Path to the single save file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FOREST_HEROES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    save_path: Path = Field(
        default=Path("data/saves/savegame.json"),
        description="Path to the save file",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Emit JSON log lines instead of console output.
        game: New-game and encounter settings.
        storage: Save file settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="FOREST_HEROES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Forest Heroes", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    game: GameSettings = Field(default_factory=GameSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached application settings.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Primarily useful for tests or after environment variables change.
    """
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "StorageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
