"""Randomness for Forest Heroes.

``DiceRoller`` is the one place the engine draws random numbers from.
Every engine operation that needs randomness accepts an optional roller so
callers (and tests) can inject a seeded or scripted one; when none is given
the shared default roller is used.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

import d20

from forest_heroes.core.config import get_settings
from forest_heroes.core.exceptions import DiceRollError
from forest_heroes.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DiceResult:
    """Outcome of a dice-notation roll.

    Attributes:
        expression: The expression that was rolled.
        total: Final result including modifiers.
        dice: Values of the individual kept dice.
    """

    expression: str
    total: int
    dice: list[int]


class DiceRoller:
    """Injectable random source.

    Uniform draws come from a private ``random.Random``. Dice-notation
    rolls go through the d20 library, which draws from the module-level
    ``random`` generator; a seeded roller seeds that generator too so whole
    sessions are reproducible.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> roller.chance(0.95)
        True
        >>> roller.roll("1d2").total in (1, 2)
        True
    """

    def __init__(self, *, seed: int | None = None, rng: random.Random | None = None) -> None:
        """Initialize the roller.

        Args:
            seed: Optional seed for reproducible draws.
            rng: Explicit generator to draw from. Takes precedence over ``seed``.
        """
        self._seed = seed
        self._rng = rng if rng is not None else random.Random(seed)
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self.random() < probability

    def roll(self, expression: str) -> DiceResult:
        """Roll dice notation such as ``"1d2"`` or ``"2d6+3"``.

        Args:
            expression: Dice expression understood by d20.

        Returns:
            DiceResult with the total and the individual dice.

        Raises:
            DiceRollError: If the expression is empty or invalid.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        try:
            result = d20.roll(expression)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        dice_values = self._extract_dice_values(result.expr)
        logger.debug("Dice rolled", expression=expression, total=result.total)
        return DiceResult(expression=expression, total=result.total, dice=dice_values)

    def _extract_dice_values(self, expr: Any) -> list[int]:
        """Collect the kept dice values from a d20 expression tree."""
        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if die.kept:
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values

    def choice_weighted(self, entries: Sequence[T], weight: Callable[[T], float]) -> T:
        """Pick one entry with probability proportional to its weight.

        Draws ``r`` uniformly over the total weight and walks the entries
        subtracting each weight; the first entry that brings ``r`` to zero or
        below is chosen.

        Raises:
            DiceRollError: If ``entries`` is empty.
        """
        if not entries:
            raise DiceRollError("Cannot choose from an empty sequence")

        total = sum(weight(entry) for entry in entries)
        remaining = self.random() * total
        for entry in entries:
            remaining -= weight(entry)
            if remaining <= 0:
                return entry
        return entries[-1]


_default_roller: DiceRoller | None = None


def get_default_roller() -> DiceRoller:
    """Shared roller used when an operation is not given one.

    Seeded from ``GameSettings.random_seed`` on first use.
    """
    global _default_roller
    if _default_roller is None:
        _default_roller = DiceRoller(seed=get_settings().game.random_seed)
    return _default_roller


def reset_default_roller() -> None:
    """Drop the shared roller so the next use re-reads the settings."""
    global _default_roller
    _default_roller = None


__all__ = ["DiceResult", "DiceRoller", "get_default_roller", "reset_default_roller"]
