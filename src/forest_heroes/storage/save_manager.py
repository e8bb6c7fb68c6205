"""JSON save-file persistence.

A save is the complete ``GameState.to_json()`` document written to a single
file. A missing file means "no save"; a file that cannot be parsed back
into a valid state raises ``SaveGameError``.

Default location comes from ``StorageSettings.save_path``
(``data/saves/savegame.json``).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from forest_heroes.core.config import get_settings
from forest_heroes.core.exceptions import SaveGameError
from forest_heroes.core.logging import get_logger
from forest_heroes.models.game_state import GameState


logger = get_logger(__name__)


class SaveManager:
    """Reads and writes the save file.

    Example:
        >>> manager = SaveManager(Path("/tmp/save.json"))
        >>> manager.save(state)
        True
        >>> manager.load() == state
        True
    """

    def __init__(self, save_path: str | Path | None = None) -> None:
        """Initialize the manager.

        Args:
            save_path: Save file location. Defaults to the configured path.
        """
        self.save_path = Path(save_path) if save_path else get_settings().storage.save_path
        logger.debug("SaveManager initialized", save_path=str(self.save_path))

    def save(self, state: GameState) -> bool:
        """Write the state to the save file.

        The document is written to a temporary sibling first and then moved
        into place, so an interrupted write never truncates an existing save.

        Returns:
            True on success, False if the file could not be written.
        """
        tmp_path = self.save_path.with_suffix(self.save_path.suffix + ".tmp")
        try:
            self.save_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(state.to_json(), encoding="utf-8")
            tmp_path.replace(self.save_path)
        except OSError as exc:
            logger.error("Failed to save game", save_path=str(self.save_path), error=str(exc))
            return False

        logger.info(
            "Game saved",
            save_path=str(self.save_path),
            level=state.player.level,
            gold=state.gold,
        )
        return True

    def load(self) -> GameState | None:
        """Read the save file.

        Returns:
            The saved state, or None if there is no save file.

        Raises:
            SaveGameError: If the file cannot be read or does not hold a
                valid game state.
        """
        if not self.has_save_data():
            logger.info("No save data found", save_path=str(self.save_path))
            return None

        try:
            data = self.save_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SaveGameError(
                f"Could not read save file: {exc}",
                save_path=str(self.save_path),
            ) from exc

        try:
            state = GameState.from_json(data)
        except PydanticValidationError as exc:
            raise SaveGameError(
                "Save file is corrupt or incompatible",
                save_path=str(self.save_path),
                details={"errors": exc.error_count()},
            ) from exc

        logger.info("Game loaded", save_path=str(self.save_path), level=state.player.level)
        return state

    def has_save_data(self) -> bool:
        return self.save_path.is_file()

    def delete_save(self) -> bool:
        """Remove the save file. Returns False if there was none."""
        if not self.has_save_data():
            return False
        self.save_path.unlink()
        logger.info("Save data deleted", save_path=str(self.save_path))
        return True


__all__ = ["SaveManager"]
