"""Custom exception hierarchy for Forest Heroes.

Only programmer and content errors are raised as exceptions. Conditions a
player can reach during normal play (a missed attack, not enough MP, a full
inventory, too little gold) are reported through return values so the
presentation layer can show an in-fiction message instead.

Example:
    >>> from forest_heroes.core.exceptions import MonsterNotFoundError
    >>> raise MonsterNotFoundError("Unknown monster", monster_id="kraken")
"""

from __future__ import annotations

from typing import Any


class ForestHeroesError(Exception):
    """Base exception for all Forest Heroes errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Catalog Exceptions
# =============================================================================


class CatalogError(ForestHeroesError):
    """Base exception for static content lookups that must succeed.

    Monster, encounter table and shop ids come from authored content. A
    missing id is a data bug, never a player-driven condition.
    """


class MonsterNotFoundError(CatalogError):
    """Raised when a monster template id is not in the catalog."""

    def __init__(
        self,
        message: str,
        *,
        monster_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if monster_id:
            combined_details["monster_id"] = monster_id
        super().__init__(message, details=combined_details)


class EncounterTableNotFoundError(CatalogError):
    """Raised when an encounter table id is not in the catalog."""

    def __init__(
        self,
        message: str,
        *,
        table_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if table_id:
            combined_details["table_id"] = table_id
        super().__init__(message, details=combined_details)


class ShopNotFoundError(CatalogError):
    """Raised when a shop id is not in the catalog."""

    def __init__(
        self,
        message: str,
        *,
        shop_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if shop_id:
            combined_details["shop_id"] = shop_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(ForestHeroesError):
    """Base exception for all game engine errors."""


class CombatError(GameEngineError):
    """Raised when the combat engine is driven outside its contract.

    Acting after the battle has ended, targeting an enemy slot that does
    not exist or is already defeated, and unknown action kinds all land
    here. Misses and insufficient MP do not.
    """

    def __init__(
        self,
        message: str,
        *,
        combatant_id: str | None = None,
        action: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize combat error with combat context.

        Args:
            message: Human-readable error description.
            combatant_id: Identifier of the combatant involved.
            action: The action that was attempted.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if combatant_id:
            combined_details["combatant_id"] = combatant_id
        if action:
            combined_details["action"] = action
        super().__init__(message, details=combined_details)


class DiceRollError(GameEngineError):
    """Raised when dice rolling operations fail.

    This typically occurs when parsing invalid dice notation.
    """

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if expression:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


# =============================================================================
# Persistence Exceptions
# =============================================================================


class PersistenceError(ForestHeroesError):
    """Base exception for save/load errors."""


class SaveGameError(PersistenceError):
    """Raised when a save file exists but cannot be read back.

    A missing save is not an error; a corrupt or incompatible one is.
    """

    def __init__(
        self,
        message: str,
        *,
        save_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if save_path:
            combined_details["save_path"] = save_path
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(ForestHeroesError):
    """Raised when application configuration is invalid.

    This includes missing required settings, invalid values, or
    incompatible configuration combinations.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(ForestHeroesError):
    """Raised when an argument fails a domain check.

    Used for values no legitimate caller should pass, such as a negative
    XP grant or a zero quantity.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "ForestHeroesError",
    # Catalog exceptions
    "CatalogError",
    "MonsterNotFoundError",
    "EncounterTableNotFoundError",
    "ShopNotFoundError",
    # Game engine exceptions
    "GameEngineError",
    "CombatError",
    "DiceRollError",
    # Persistence exceptions
    "PersistenceError",
    "SaveGameError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
]
