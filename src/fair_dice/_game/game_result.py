# Area: Game
"""
fair_dice._game.game_result — Round and Game Result Dataclasses
===============================================================

Records produced while a session runs. RoundRecord keeps the published
digest next to what was later revealed, so a third party can re-run
verify() on every round after the game.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import List, Optional

from ..dice import Die
from .enums import Party, ProtocolStep, TiePolicy


@dataclass
class ProtocolEvent:
    """
    One step of a commit-reveal round.

    Attributes:
        label: Round label, e.g. "first-player" or "roll:user"
        step: Which protocol step happened
        detail: Public data attached to the step (never a secret before reveal)
    """

    label: str
    step: ProtocolStep
    detail: dict = field(default_factory=dict)


@dataclass
class RoundRecord:
    """
    Public record of one commit-reveal round.

    Attributes:
        label: Round label
        range: Number of possible outcomes
        digest: Digest published before the peer answered
        contribution: Peer's answer (guess or number)
        result: Combined value, or the secret bit for the first-player round
        key_hex: Revealed key, hex-encoded
        number: Revealed secret number
        verified: Whether the reveal matched the digest
    """

    label: str
    range: int
    digest: str
    contribution: int
    result: int
    key_hex: str
    number: int
    verified: bool


@dataclass
class RollOutcome:
    """A resolved die roll."""

    party: Party
    die: Die
    face_index: int
    value: int
    record: RoundRecord


@dataclass
class GameResult:
    """
    Complete result of one game.

    Attributes:
        user_first: True if the user picked a die first
        user_die: Die held by the user
        system_die: Die held by the system
        unassigned: Dice nobody picked
        win_probability: Chance the user's die strictly beats the system's
        user_roll: The user's roll
        system_roll: The system's roll
        winner: Winning party, or None on a draw
        tie_policy: Policy applied if the rolls were equal
        rounds: Every commit-reveal round, in order
    """

    user_first: bool
    user_die: Die
    system_die: Die
    unassigned: List[Die]
    win_probability: Fraction
    user_roll: RollOutcome
    system_roll: RollOutcome
    winner: Optional[Party]
    tie_policy: TiePolicy
    rounds: List[RoundRecord] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def all_verified(self) -> bool:
        return all(r.verified for r in self.rounds)

    def to_dict(self) -> dict:
        """JSON-friendly summary of the game."""
        return {
            "user_first": self.user_first,
            "user_die": list(self.user_die.values),
            "system_die": list(self.system_die.values),
            "unassigned": [list(d.values) for d in self.unassigned],
            "win_probability": float(self.win_probability),
            "user_roll": self.user_roll.value,
            "system_roll": self.system_roll.value,
            "winner": self.winner.value if self.winner else None,
            "tie_policy": self.tie_policy.value,
            "rounds": [
                {
                    "label": r.label,
                    "range": r.range,
                    "digest": r.digest,
                    "contribution": r.contribution,
                    "result": r.result,
                    "key": r.key_hex,
                    "number": r.number,
                    "verified": r.verified,
                }
                for r in self.rounds
            ],
        }
