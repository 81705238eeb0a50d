"""Randomness for the simulation.

Every random decision in a session goes through one DiceRoller: dice
expressions via the d20 library, percentage checks as d100 rolls, and
uniform fractions for weighted tables. Seeding the roller makes a whole
session reproducible.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

import d20

from endless_realms.core.exceptions import DiceRollError
from endless_realms.core.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class DiceExpression:
    """A rolled dice expression.

    Attributes:
        expression: The original dice expression string.
        total: The total result of the roll.
        dice: Individual kept die results.
        modifier: Static modifier applied (total minus dice).
    """

    expression: str
    total: int
    dice: list[int]
    modifier: int


class DiceRoller:
    """Seedable source of all random draws.

    Example:
        >>> roller = DiceRoller(seed=7)
        >>> result = roller.roll("1d20+5")
        >>> if roller.chance(35):
        ...     print("spawn attempt")
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls. d20 draws
                from the module-level generator, so the seed is applied
                there.
        """
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def roll(self, expression: str) -> DiceExpression:
        """Roll dice according to the given expression.

        Args:
            expression: Dice expression (e.g., '1d100', '1d7-1').

        Returns:
            DiceExpression containing roll results.

        Raises:
            DiceRollError: If the expression is invalid.
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
        return DiceExpression(
            expression=expression,
            total=result.total,
            dice=dice_values,
            modifier=result.total - sum(dice_values),
        )

    def _extract_dice_values(self, expr: Any) -> list[int]:
        """Extract kept die values from a d20 expression tree."""
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

    def chance(self, percent: float) -> bool:
        """Percentage check: succeeds when a d100 lands at or under percent.

        Zero and negative chances never succeed and 100 or more always
        succeeds, without consuming a roll.
        """
        if percent <= 0:
            return False
        if percent >= 100:
            return True
        return self.roll("1d100").total <= percent

    def variance(self, spread: int) -> int:
        """Uniform integer in [0, spread), i.e. floor(random * spread)."""
        if spread <= 1:
            return 0
        return self.roll(f"1d{spread}-1").total

    def fraction(self) -> float:
        """Uniform float in [0, 1) for cumulative weight tables."""
        return random.random()

    def between(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return random.randint(low, high)

    def pick(self, options: Sequence[T]) -> T:
        """Uniform choice from a non-empty sequence."""
        return random.choice(options)


__all__ = [
    "DiceExpression",
    "DiceRoller",
]
