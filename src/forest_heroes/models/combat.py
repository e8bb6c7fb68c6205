"""Combat event records.

Every resolved action, player or enemy, produces exactly one
``CombatEvent``. Events are immutable once created.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from forest_heroes.models.enums import CombatResult


class CombatEvent(BaseModel):
    """Outcome of a single combat action.

    Attributes:
        actor: ``"player"`` or the acting monster's id.
        action: The action value (a ``PlayerAction`` or ``EnemyAction``).
        target: ``"player"``, a monster id, or None for self-targeted actions.
        hit: False for misses and rejected actions (e.g. not enough MP).
        damage: HP removed from the target.
        healing: HP restored.
        mp_cost: MP spent.
        resulting_hp: Target HP after the action, or the actor's for heals.
        message: Human-readable description.
        combat_ended: True when this action finished the battle.
        combat_result: Set together with ``combat_ended``.
    """

    model_config = ConfigDict(frozen=True)

    actor: str
    action: str
    target: str | None = None
    hit: bool = True
    damage: int = Field(default=0, ge=0)
    healing: int = Field(default=0, ge=0)
    mp_cost: int = Field(default=0, ge=0)
    resulting_hp: int | None = None
    message: str = ""
    combat_ended: bool = False
    combat_result: CombatResult | None = None


__all__ = ["CombatEvent"]
