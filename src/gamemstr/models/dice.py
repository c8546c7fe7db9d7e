"""Dice expressions with a derived expected value.

A DieExpression is the stat-block formula for hit points and damage,
such as ``6d10 + 12``. Its value is the average roll rounded down, which
is the number printed in front of the formula in published stat blocks.
"""

from __future__ import annotations

from pydantic import Field

from gamemstr.models.base import ValueModel
from gamemstr.models.enums import Die


class DieExpression(ValueModel):
    """A dice-roll formula: count, die size, and flat bonus.

    Attributes:
        count: Number of dice rolled (zero or more).
        die: The die rolled.
        bonus: Flat amount added to the roll.

    Example:
        >>> expr = DieExpression(count=2, die=Die.D6, bonus=3)
        >>> expr.value()
        10
        >>> str(expr)
        '2d6 + 3'
    """

    count: int = Field(ge=0, description="Number of dice")
    die: Die = Field(description="Die size")
    bonus: int = Field(default=0, description="Flat bonus added to the roll")

    def value(self) -> int:
        """Get the expected total, rounded down.

        Each die averages ``faces / 2 + 0.5``; the summed average is
        floored before the bonus is added. ``count * (faces + 1) // 2``
        is the same quantity in exact integer arithmetic.

        Returns:
            The floored average total.
        """
        return self.count * (self.die.faces + 1) // 2 + self.bonus

    def __str__(self) -> str:
        return f"{self.count}{self.die.display_name} + {self.bonus}"


__all__ = ["DieExpression"]
