# Area: Game
"""
fair_dice.dice — Die and DiceSet models
=======================================

A Die is an immutable ordered sequence of integer faces. A DiceSet holds
at least three dice for one game. Dice are distinct by identity: two dice
with the same faces are still two separate choices, so callers remove
dice by position, never by value.
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

MIN_DICE = 3


class Die(BaseModel):
    """
    One die.

    Attributes:
        values: Face values in roll order (at least one face)
    """

    model_config = ConfigDict(frozen=True)

    values: Tuple[StrictInt, ...] = Field(min_length=1)

    # Frozen models hash and compare by value; dice must compare by identity.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    @property
    def faces(self) -> int:
        """Number of faces on the die."""
        return len(self.values)

    def roll(self, index: int) -> int:
        """Return the face value at the given index."""
        return self.values[index]

    def __str__(self) -> str:
        return ",".join(str(v) for v in self.values)


class DiceSet(BaseModel):
    """
    The dice available for one game.

    Use DiceSet.create() to build one; it converts pydantic errors into
    the package's ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    dice: Tuple[Die, ...] = Field(min_length=MIN_DICE)

    @classmethod
    def create(cls, dice: Iterable) -> "DiceSet":
        """
        Build a validated DiceSet.

        Args:
            dice: Die instances or sequences of integer faces

        Returns:
            The validated DiceSet

        Raises:
            ValidationError: If fewer than 3 dice are given, a die is
                empty or a face is not an integer
        """
        try:
            items = [d if isinstance(d, Die) else _build_die(d) for d in dice]
        except TypeError as e:
            raise ValidationError(
                f"Invalid dice set: expected a sequence of dice, "
                f"got {type(dice).__name__}",
                hint="Example: [[2, 2, 4, 4, 9, 9], [1, 1, 6, 6, 8, 8], [3, 3, 5, 5, 7, 7]]",
            ) from e
        try:
            dice_set = cls(dice=tuple(items))
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid dice set: provide at least {MIN_DICE} dice "
                f"(got {len(items)})",
                hint=_first_error(e),
            ) from e
        if len({id(d) for d in dice_set.dice}) != len(dice_set.dice):
            raise ValidationError(
                "Invalid dice set: the same Die object was passed more than once"
            )
        return dice_set

    def __len__(self) -> int:
        return len(self.dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(self.dice)

    def __getitem__(self, index: int) -> Die:
        return self.dice[index]

    def available(self) -> List[Die]:
        """Return a fresh, mutable list of the dice in set order."""
        return list(self.dice)


def _build_die(values) -> Die:
    try:
        return Die(values=tuple(values))
    except (PydanticValidationError, TypeError) as e:
        raise ValidationError(
            f"Invalid dice values: {values!r}. Must be a non-empty list of integers.",
        ) from e


def _first_error(error: PydanticValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first.get('msg', '')}" if loc else first.get("msg", "")
