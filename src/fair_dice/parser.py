# Area: Interaction
"""
fair_dice.parser — Dice definitions from command-line arguments
===============================================================

One argument per die, faces separated by commas:

    fair-dice 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3
"""

import re
from typing import List, Sequence

from .dice import DiceSet, Die, MIN_DICE
from .errors import ValidationError

USAGE_EXAMPLE = "fair-dice 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3"
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_die(arg: str) -> Die:
    """
    Parse one comma-separated die definition.

    Raises:
        ValidationError: If any face is not an integer
    """
    tokens = [t.strip() for t in arg.split(",")]
    if not all(INTEGER_PATTERN.match(t) for t in tokens):
        raise ValidationError(
            f"Invalid dice values: '{arg}'. Faces must be comma-separated integers.",
            hint=f"Example: {USAGE_EXAMPLE}",
        )
    return Die(values=tuple(int(t) for t in tokens))


def parse_dice_args(args: Sequence[str]) -> DiceSet:
    """
    Parse command-line arguments into a validated DiceSet.

    Args:
        args: One string per die

    Returns:
        The DiceSet

    Raises:
        ValidationError: If fewer than 3 dice are given or a face is not an integer
    """
    if len(args) < MIN_DICE:
        raise ValidationError(
            f"Invalid input: at least {MIN_DICE} dice are required, got {len(args)}. "
            "Each die is a comma-separated list of integer faces.",
            hint=f"Example: {USAGE_EXAMPLE}",
        )
    dice: List[Die] = [parse_die(arg) for arg in args]
    return DiceSet.create(dice)
