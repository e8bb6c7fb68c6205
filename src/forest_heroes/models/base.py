"""Shared pydantic base classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GameModel(BaseModel):
    """Base class for mutable game state models.

    Assignments are validated so a field can never be set to a value its
    declaration forbids (negative HP, zero quantity, and so on).
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )


class CatalogModel(BaseModel):
    """Base class for immutable catalog definitions."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )


__all__ = ["GameModel", "CatalogModel"]
