# Area: Interaction
"""
fair_dice.demo_peer — Automatic peer for demo runs
==================================================

A ready-to-use PeerInteraction that answers every question on its own,
so a full game can be watched without typing anything.

Usage:
    from fair_dice import DemoPeer, GameSession

    result = GameSession(dice, DemoPeer()).play()

Every prompt the session issues ends with its valid range written as
"(lo..hi): ". DemoPeer reads that range and answers with a random
number inside it.
"""

import re
from typing import Optional

from .interaction import PeerInteraction
from ._fairness.secure_random import SecureRandom, default_random

RANGE_PATTERN = re.compile(r"\((\d+)\.\.(\d+)\)\s*:?\s*$")


class DemoPeer(PeerInteraction):
    """
    Peer that answers with random valid input and echoes the exchange.

    Attributes:
        answers: Every answer given, in order
    """

    def __init__(self, rng: Optional[SecureRandom] = None, echo: bool = True):
        """
        Initialize DemoPeer.

        Args:
            rng: Randomness source for the answers
            echo: Print prompts, answers and messages to stdout
        """
        self._rng = rng or default_random()
        self._echo = echo
        self.answers = []

    def ask(self, prompt: str) -> str:
        match = RANGE_PATTERN.search(prompt)
        if not match:
            raise ValueError(f"DemoPeer cannot answer prompt without a range: {prompt!r}")
        low, high = int(match.group(1)), int(match.group(2))
        answer = str(low + self._rng.randbelow(high - low + 1))
        self.answers.append(answer)
        if self._echo:
            print(f"{prompt}{answer}")
        return answer

    def show(self, message: str) -> None:
        if self._echo:
            print(message)
