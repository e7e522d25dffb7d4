# Area: Game
"""
Game orchestration.

This package handles:
- The phase state machine
- The game session (first player, dice selection, probability, rolls, result)
- Round and game result records
"""

from .enums import GamePhase, GameEvent, Party, TiePolicy, ProtocolStep
from .game_result import GameResult, RollOutcome, RoundRecord, ProtocolEvent
from .state_machine import GameStateMachine, TRANSITIONS
from .session import GameSession, parse_choice, resolve_winner

__all__ = [
    "GamePhase",
    "GameEvent",
    "Party",
    "TiePolicy",
    "ProtocolStep",
    "GameResult",
    "RollOutcome",
    "RoundRecord",
    "ProtocolEvent",
    "GameStateMachine",
    "TRANSITIONS",
    "GameSession",
    "parse_choice",
    "resolve_winner",
]
