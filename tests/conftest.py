# Area: Test Fixtures
"""Shared fixtures: scripted peer and deterministic randomness."""

from typing import List

import pytest

from fair_dice._fairness.secure_random import SecureRandom
from fair_dice.interaction import PeerInteraction


class ScriptedInteraction(PeerInteraction):
    """PeerInteraction that replays canned answers and records everything."""

    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.messages: List[str] = []
        self.log: List[tuple] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self.log.append(("ask", prompt))
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt: {prompt!r}")
        return self.answers.pop(0).strip()

    def show(self, message: str) -> None:
        self.messages.append(message)
        self.log.append(("show", message))


class SequenceRandom(SecureRandom):
    """Deterministic SecureRandom returning queued randbelow values."""

    def __init__(self, values: List[int] = None):
        self.values = list(values or [])
        self.key_counter = 0
        self.calls: List[int] = []

    def token_bytes(self, n: int) -> bytes:
        self.key_counter += 1
        return bytes([self.key_counter % 256]) * n

    def randbelow(self, n: int) -> int:
        self.calls.append(n)
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < n, f"queued value {value} outside [0, {n})"
        return value


@pytest.fixture
def three_dice():
    return [[2, 2, 4, 4, 9, 9], [6, 8, 1, 1, 8, 6], [7, 5, 3, 7, 5, 3]]
