"""Save-file persistence."""

from forest_heroes.storage.save_manager import SaveManager

__all__ = ["SaveManager"]
