"""
fair_dice — Provably fair non-transitive dice
=============================================

Two parties, the user and the system, each get one die and roll it.
Every random outcome the user has to trust (who picks first, each roll)
is produced by a commit-reveal round: the system publishes an
HMAC-SHA3-256 digest, the user answers, and only then does the system
reveal the key and number so the user can check the digest.

Quick Start (interactive):
    from fair_dice import ConsoleInteraction, GameSession, parse_dice_args
    dice = parse_dice_args(["2,2,4,4,9,9", "6,8,1,1,8,6", "7,5,3,7,5,3"])
    result = GameSession(dice, ConsoleInteraction()).play()

Custom peer channel:
    from fair_dice import PeerInteraction
    class MyPeer(PeerInteraction): ...  # Implement ask() and show()

Verifying a round after the game:
    from fair_dice import verify
    for r in result.rounds:
        assert verify(r.digest, r.key_hex, r.number)
"""

from .dice import Die, DiceSet
from .demo_peer import DemoPeer
from .errors import (
    FairDiceError,
    ValidationError,
    InputError,
    VerificationFailure,
)
from .interaction import PeerInteraction, ConsoleInteraction
from .parser import parse_dice_args, USAGE_EXAMPLE
from ._fairness import (
    Commitment,
    commit,
    reveal,
    verify,
    combine,
    count_wins,
    count_ties,
    win_probability,
    SecureRandom,
    SystemSecureRandom,
)
from ._game import (
    GamePhase,
    GameSession,
    GameResult,
    Party,
    RollOutcome,
    RoundRecord,
    TiePolicy,
)

__all__ = [
    # Dice
    "Die",
    "DiceSet",
    "parse_dice_args",
    "USAGE_EXAMPLE",
    # Errors
    "FairDiceError",
    "ValidationError",
    "InputError",
    "VerificationFailure",
    # Interaction
    "PeerInteraction",
    "ConsoleInteraction",
    "DemoPeer",
    # Fairness
    "Commitment",
    "commit",
    "reveal",
    "verify",
    "combine",
    "count_wins",
    "count_ties",
    "win_probability",
    "SecureRandom",
    "SystemSecureRandom",
    # Game
    "GamePhase",
    "GameSession",
    "GameResult",
    "Party",
    "RollOutcome",
    "RoundRecord",
    "TiePolicy",
]
__version__ = "1.0.0"
