# Area: Game
"""
fair_dice._game.enums — Game State Machine Enums
================================================

Defines the phases, events, parties and tie policies of one game session.
"""

from enum import Enum


class GamePhase(Enum):
    """
    Phases of a game session.

    Phase transitions:
    INIT -> DETERMINE_FIRST_PLAYER (on DICE_VALIDATED)
    INIT -> ABORTED (on VALIDATION_FAILED)
    DETERMINE_FIRST_PLAYER -> SELECT_DICE (on FIRST_PLAYER_DECIDED)
    SELECT_DICE -> COMPUTE_PROBABILITY (on DICE_SELECTED)
    COMPUTE_PROBABILITY -> ROLL (on PROBABILITY_REPORTED)
    ROLL -> RESULT (on ROLLS_COMPLETE)
    RESULT -> TERMINATED (on WINNER_DECLARED)
    """
    INIT = "INIT"
    DETERMINE_FIRST_PLAYER = "DETERMINE_FIRST_PLAYER"
    SELECT_DICE = "SELECT_DICE"
    COMPUTE_PROBABILITY = "COMPUTE_PROBABILITY"
    ROLL = "ROLL"
    RESULT = "RESULT"
    TERMINATED = "TERMINATED"
    ABORTED = "ABORTED"


class GameEvent(Enum):
    """Events that move the session from one phase to the next."""
    DICE_VALIDATED = "DICE_VALIDATED"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    FIRST_PLAYER_DECIDED = "FIRST_PLAYER_DECIDED"
    DICE_SELECTED = "DICE_SELECTED"
    PROBABILITY_REPORTED = "PROBABILITY_REPORTED"
    ROLLS_COMPLETE = "ROLLS_COMPLETE"
    WINNER_DECLARED = "WINNER_DECLARED"


class Party(Enum):
    """The two sides of the game."""
    USER = "user"
    SYSTEM = "system"


class TiePolicy(Enum):
    """
    How equal rolls are resolved.

    SYSTEM_WINS: the user only wins with a strictly greater roll
    DRAW: equal rolls end the game without a winner
    """
    SYSTEM_WINS = "system_wins"
    DRAW = "draw"


class ProtocolStep(Enum):
    """Steps of one commit-reveal round, in the order they must happen."""
    COMMITTED = "COMMITTED"
    CONTRIBUTED = "CONTRIBUTED"
    COMBINED = "COMBINED"
    REVEALED = "REVEALED"
    VERIFIED = "VERIFIED"
