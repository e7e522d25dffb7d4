"""
fair_dice.errors — Custom exception classes
===========================================

Defines the exception hierarchy for the dice game.

- ValidationError is fatal to a session (bad dice, bad protocol arguments).
- InputError is local and recoverable (the peer is asked again).
- VerificationFailure is reported to the caller, who decides the policy.
"""

from __future__ import annotations
from typing import Optional


class FairDiceError(Exception):
    """Base exception for all fair_dice errors."""
    pass


class ValidationError(FairDiceError):
    """Raised when dice definitions or protocol arguments are malformed."""

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(message)


class InputError(FairDiceError):
    """Raised when a peer response is not a valid answer to the question."""

    def __init__(self, message: str, raw_input: str = ""):
        self.message = message
        self.raw_input = raw_input
        super().__init__(message)


class VerificationFailure(FairDiceError):
    """Raised when a revealed secret does not match its published digest."""

    def __init__(self, label: str, digest: str, key_hex: str, number: int):
        self.label = label
        self.digest = digest
        self.key_hex = key_hex
        self.number = number
        super().__init__(
            f"Commitment for '{label}' failed verification (digest={digest})"
        )

    def format_error_log(self) -> str:
        lines = [
            "",
            "=" * 64,
            " VERIFICATION FAILURE — COMMITMENT DOES NOT MATCH",
            "=" * 64,
            f" Round:        {self.label}",
            f" Digest:       {self.digest}",
            f" Revealed key: {self.key_hex}",
            f" Revealed #:   {self.number}",
            "",
            "=" * 64,
            "",
        ]
        return "\n".join(lines)
