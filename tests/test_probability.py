# Area: Fairness Tests
"""Tests for the win probability engine."""

from fractions import Fraction

import pytest

from fair_dice.dice import Die
from fair_dice._fairness.probability import count_ties, count_wins, win_probability


def die(*values):
    return Die(values=values)


class TestWinProbability:
    """Tests for win_probability()."""

    def test_reference_pair(self):
        a = die(2, 2, 4, 4, 9, 9)
        b = die(6, 8, 1, 1, 8, 6)
        assert count_wins(a, b) == 20
        assert win_probability(a, b) == Fraction(20, 36)
        assert float(win_probability(a, b)) == pytest.approx(0.5556, abs=1e-4)

    def test_ties_do_not_count(self):
        a = die(1, 2, 3)
        assert win_probability(a, a) == Fraction(3, 9)
        assert count_ties(a, a) == 3

    def test_certain_win_and_loss(self):
        high = die(10, 11)
        low = die(1, 2, 3)
        assert win_probability(high, low) == 1
        assert win_probability(low, high) == 0

    def test_different_face_counts(self):
        a = die(5)
        b = die(1, 5, 9, 4)
        assert win_probability(a, b) == Fraction(2, 4)

    @pytest.mark.parametrize("a_values, b_values", [
        ((2, 2, 4, 4, 9, 9), (6, 8, 1, 1, 8, 6)),
        ((1, 2, 3, 4, 5, 6), (1, 2, 3, 4, 5, 6)),
        ((3, 3, 5, 5, 7, 7), (1, 1, 6, 6, 8, 8)),
        ((0,), (0, 0, 1)),
        ((-3, 4, 4), (4, 10)),
    ])
    def test_wins_losses_and_ties_sum_to_one(self, a_values, b_values):
        a, b = die(*a_values), die(*b_values)
        total = a.faces * b.faces
        assert (
            win_probability(a, b)
            + win_probability(b, a)
            + Fraction(count_ties(a, b), total)
        ) == 1

    def test_non_transitive_cycle(self):
        a = die(2, 2, 4, 4, 9, 9)
        b = die(1, 1, 6, 6, 8, 8)
        c = die(3, 3, 5, 5, 7, 7)
        assert win_probability(a, b) > Fraction(1, 2)
        assert win_probability(b, c) > Fraction(1, 2)
        assert win_probability(c, a) > Fraction(1, 2)

    def test_pure(self):
        a = die(2, 2, 4, 4, 9, 9)
        b = die(6, 8, 1, 1, 8, 6)
        assert win_probability(a, b) == win_probability(a, b)
        assert a.values == (2, 2, 4, 4, 9, 9)
