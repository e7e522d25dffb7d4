# Area: Fairness
"""
fair_dice._fairness.probability — Win probability between two dice
==================================================================

Enumerates every ordered pair of faces. Ties count for neither side, so
win_probability(a, b) + win_probability(b, a) is below 1 whenever the
dice share a face value.
"""

from fractions import Fraction

from ..dice import Die


def count_wins(die_a: Die, die_b: Die) -> int:
    """Count face pairs (u, c) where u from die_a strictly beats c from die_b."""
    return sum(1 for u in die_a.values for c in die_b.values if u > c)


def count_ties(die_a: Die, die_b: Die) -> int:
    """Count face pairs with equal values."""
    return sum(1 for u in die_a.values for c in die_b.values if u == c)


def win_probability(die_a: Die, die_b: Die) -> Fraction:
    """Probability that one roll of die_a strictly beats one roll of die_b."""
    total = die_a.faces * die_b.faces
    return Fraction(count_wins(die_a, die_b), total)
