"""Game state aggregate.

``GameState`` owns everything that must survive a save/load cycle: the
player, their inventory, world position, story flags, gold and counters.
There is no process-wide instance; whoever starts a game owns the state and
passes it to the engine functions that need it.
"""

from __future__ import annotations

from pydantic import Field

from forest_heroes.models.base import GameModel
from forest_heroes.models.inventory import Inventory
from forest_heroes.models.player import Player


class Position(GameModel):
    """Tile coordinates on the current map."""

    x: int = 0
    y: int = 0


class GameState(GameModel):
    """Everything a save file records about one playthrough."""

    player: Player
    inventory: Inventory = Field(default_factory=Inventory)
    event_flags: dict[str, bool] = Field(default_factory=dict)
    current_map: str = Field(default="village")
    player_position: Position = Field(default_factory=Position)
    play_time: float = Field(default=0.0, ge=0.0, description="Seconds played")
    encounter_steps: int = Field(default=0, ge=0)
    gold: int = Field(default=0, ge=0)
    battles_won: int = Field(default=0, ge=0)

    # -------------------------------------------------------------------------
    # Flags
    # -------------------------------------------------------------------------

    def get_flag(self, flag: str) -> bool:
        return self.event_flags.get(flag, False)

    def set_flag(self, flag: str, value: bool = True) -> None:
        self.event_flags[flag] = value

    # -------------------------------------------------------------------------
    # World position
    # -------------------------------------------------------------------------

    def set_position(self, x: int, y: int) -> None:
        self.player_position = Position(x=x, y=y)

    def set_map(self, map_name: str, x: int | None = None, y: int | None = None) -> None:
        """Move to another map, optionally placing the player on it."""
        self.current_map = map_name
        if x is not None and y is not None:
            self.set_position(x, y)

    def increment_encounter_steps(self) -> int:
        self.encounter_steps += 1
        return self.encounter_steps

    def reset_encounter_steps(self) -> None:
        self.encounter_steps = 0

    def add_play_time(self, seconds: float) -> None:
        self.play_time += max(0.0, seconds)

    # -------------------------------------------------------------------------
    # Gold and counters
    # -------------------------------------------------------------------------

    def add_gold(self, amount: int) -> None:
        self.gold = max(0, self.gold + amount)

    def remove_gold(self, amount: int) -> bool:
        """Spend gold if the player can afford it."""
        if amount < 0 or self.gold < amount:
            return False
        self.gold -= amount
        return True

    def set_gold(self, amount: int) -> None:
        self.gold = max(0, amount)

    def increment_battles_won(self) -> None:
        self.battles_won += 1

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_json(self) -> str:
        """Serialize to the save-file JSON document."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str | bytes) -> GameState:
        """Rebuild a state from ``to_json`` output.

        Raises:
            pydantic.ValidationError: If the document is malformed or breaks
                a model invariant.
        """
        return cls.model_validate_json(data)


__all__ = ["Position", "GameState"]
