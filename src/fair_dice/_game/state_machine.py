# Area: Game
"""
fair_dice._game.state_machine — Game State Machine
==================================================

Tracks the phase of one game session and validates transitions. The
path is linear; input retries happen inside a phase and never move it.
"""

import logging

from .enums import GamePhase, GameEvent

logger = logging.getLogger("fair_dice.state_machine")

# Valid phase transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    GamePhase.INIT: {
        GameEvent.DICE_VALIDATED: GamePhase.DETERMINE_FIRST_PLAYER,
        GameEvent.VALIDATION_FAILED: GamePhase.ABORTED,
    },
    GamePhase.DETERMINE_FIRST_PLAYER: {
        GameEvent.FIRST_PLAYER_DECIDED: GamePhase.SELECT_DICE,
    },
    GamePhase.SELECT_DICE: {
        GameEvent.DICE_SELECTED: GamePhase.COMPUTE_PROBABILITY,
    },
    GamePhase.COMPUTE_PROBABILITY: {
        GameEvent.PROBABILITY_REPORTED: GamePhase.ROLL,
    },
    GamePhase.ROLL: {
        GameEvent.ROLLS_COMPLETE: GamePhase.RESULT,
    },
    GamePhase.RESULT: {
        GameEvent.WINNER_DECLARED: GamePhase.TERMINATED,
    },
    GamePhase.TERMINATED: {},
    GamePhase.ABORTED: {},
}

TERMINAL_PHASES = frozenset({GamePhase.TERMINATED, GamePhase.ABORTED})


class GameStateMachine:
    """
    State machine for one game session.

    Attributes:
        current_phase: The phase the session is in
        history: Phases visited, in order, starting with INIT
    """

    def __init__(self):
        """Initialize state machine in INIT."""
        self.current_phase = GamePhase.INIT
        self.history = [GamePhase.INIT]

    @property
    def is_finished(self) -> bool:
        return self.current_phase in TERMINAL_PHASES

    def can_transition(self, event: GameEvent) -> bool:
        """Check if a transition is valid from the current phase."""
        return event in TRANSITIONS.get(self.current_phase, {})

    def transition(self, event: GameEvent) -> GamePhase:
        """
        Execute a phase transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new phase after transition

        Raises:
            ValueError: If the transition is not valid from the current phase
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_phase.value}"
            )

        next_phase = TRANSITIONS[self.current_phase][event]
        logger.debug(
            f"{self.current_phase.value} --{event.value}--> {next_phase.value}"
        )
        self.current_phase = next_phase
        self.history.append(next_phase)
        return next_phase
