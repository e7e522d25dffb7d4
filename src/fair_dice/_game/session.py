# Area: Game
"""
fair_dice._game.session — One game between the user and the system
===================================================================

GameSession drives a game through its phases:

    INIT -> DETERMINE_FIRST_PLAYER -> SELECT_DICE -> COMPUTE_PROBABILITY
         -> ROLL -> RESULT -> TERMINATED

Every random outcome the user must be able to trust comes from a
commit-reveal round. Within a round the digest is published before the
peer is asked anything, and the secret is revealed only after the peer's
answer is recorded (and combined, for rolls). Each step is appended to
`transcript` so that order can be checked after the game.

A session is single use. Create a new one for the next game.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable, List, Optional, Tuple, Union, TYPE_CHECKING

from ..dice import DiceSet, Die
from ..errors import InputError, ValidationError, VerificationFailure
from ..interaction import PeerInteraction
from .._fairness.commitment import Commitment, commit, reveal, verify, combine
from .._fairness.probability import win_probability
from .._fairness.secure_random import SecureRandom, default_random
from .enums import GameEvent, GamePhase, Party, ProtocolStep, TiePolicy
from .game_result import GameResult, ProtocolEvent, RollOutcome, RoundRecord
from .state_machine import GameStateMachine

if TYPE_CHECKING:
    from .._shared.protocol_logger import ProtocolLogger

logger = logging.getLogger("fair_dice.session")

FIRST_PLAYER_LABEL = "first-player"
NUMBER_PATTERN = re.compile(r"^[0-9]+$")


class GameSession:
    """
    State-machine driven game session.

    Attributes:
        state: Phase tracker
        transcript: Every protocol step, in the order it happened
        rounds: Public record of every commit-reveal round
        dice_set: Validated dice, set after INIT
        user_die: Die held by the user, set in SELECT_DICE
        system_die: Die held by the system, set in SELECT_DICE
        unassigned: Dice nobody holds, set in SELECT_DICE
    """

    def __init__(
        self,
        dice: Union[DiceSet, Iterable],
        interaction: PeerInteraction,
        rng: Optional[SecureRandom] = None,
        tie_policy: TiePolicy = TiePolicy.SYSTEM_WINS,
        protocol_logger: Optional["ProtocolLogger"] = None,
    ):
        """
        Initialize a session in INIT.

        Args:
            dice: A DiceSet, or anything DiceSet.create() accepts
            interaction: Channel to the peer
            rng: Randomness source, defaults to the OS CSPRNG
            tie_policy: How equal rolls are resolved
            protocol_logger: Optional trace output for each protocol step
        """
        self._raw_dice = dice
        self.interaction = interaction
        self.rng = rng or default_random()
        self.tie_policy = tie_policy
        self.protocol_logger = protocol_logger

        self.state = GameStateMachine()
        self.transcript: List[ProtocolEvent] = []
        self.rounds: List[RoundRecord] = []

        self.dice_set: Optional[DiceSet] = None
        self.user_first: Optional[bool] = None
        self.user_die: Optional[Die] = None
        self.system_die: Optional[Die] = None
        self.unassigned: List[Die] = []
        self.win_probability = None

    @property
    def phase(self) -> GamePhase:
        return self.state.current_phase

    # ──────────────────────────────────────────────────────────────
    # Full game
    # ──────────────────────────────────────────────────────────────

    def play(self) -> GameResult:
        """
        Run the whole game.

        Returns:
            The GameResult once the session reaches TERMINATED

        Raises:
            ValidationError: If the dice are invalid (session is ABORTED)
        """
        self.validate_dice()
        user_first = self.determine_first_player()
        self.select_dice(user_first)
        self.report_probability()
        user_roll, system_roll = self.roll_dice()
        return self.declare_result(user_roll, system_roll)

    # ──────────────────────────────────────────────────────────────
    # Phases
    # ──────────────────────────────────────────────────────────────

    def validate_dice(self) -> DiceSet:
        """INIT: validate the dice set."""
        self._require_phase(GamePhase.INIT)
        try:
            if isinstance(self._raw_dice, DiceSet):
                dice_set = self._raw_dice
            else:
                dice_set = DiceSet.create(self._raw_dice)
        except ValidationError as e:
            logger.error(f"Dice validation failed: {e}")
            self.state.transition(GameEvent.VALIDATION_FAILED)
            raise

        self.dice_set = dice_set
        logger.info(f"Session started with {len(dice_set)} dice")
        self.state.transition(GameEvent.DICE_VALIDATED)
        return dice_set

    def determine_first_player(self) -> bool:
        """
        DETERMINE_FIRST_PLAYER: the user guesses a committed bit.

        The guess is not combined with the secret. A correct guess lets
        the user pick a die first.

        Returns:
            True if the user picks first
        """
        self._require_phase(GamePhase.DETERMINE_FIRST_PLAYER)
        self.interaction.show("Let's determine who makes the first move.")

        commitment = self._commit(FIRST_PLAYER_LABEL, 2)
        guess = self._ask_number(FIRST_PLAYER_LABEL, "Try to guess my selection (0..1): ", 2)

        key, number = self._reveal(FIRST_PLAYER_LABEL, commitment)
        self.interaction.show(f"My selection: {number} (KEY={key.hex()}).")
        verified = self._verify(FIRST_PLAYER_LABEL, commitment, key, number)

        self.rounds.append(RoundRecord(
            label=FIRST_PLAYER_LABEL,
            range=2,
            digest=commitment.digest,
            contribution=guess,
            result=number,
            key_hex=key.hex(),
            number=number,
            verified=verified,
        ))

        self.user_first = guess == number
        if self.user_first:
            self.interaction.show("You guessed correctly, you choose your dice first.")
        else:
            self.interaction.show("I make the first move.")
        logger.info(f"First player decided: {'user' if self.user_first else 'system'}")

        self.state.transition(GameEvent.FIRST_PLAYER_DECIDED)
        return self.user_first

    def select_dice(self, user_first: bool) -> Tuple[Die, Die]:
        """
        SELECT_DICE: assign one die to each party.

        Dice are removed by position so that dice with equal faces stay
        distinct choices. The system's pick is a plain secure random index,
        not a commit-reveal round.

        Returns:
            (user_die, system_die)
        """
        self._require_phase(GamePhase.SELECT_DICE)
        available = self.dice_set.available()

        if user_first:
            self.user_die = self._choose_die(available)

        system_index = self.rng.randbelow(len(available))
        self.system_die = available.pop(system_index)
        self.interaction.show(f"I choose the [{self.system_die}] dice.")

        if not user_first:
            self.user_die = self._choose_die(available)

        self.unassigned = available
        logger.info(f"Dice selected: user=[{self.user_die}] system=[{self.system_die}]")

        self.state.transition(GameEvent.DICE_SELECTED)
        return self.user_die, self.system_die

    def report_probability(self):
        """
        COMPUTE_PROBABILITY: show the user's chance of a strict win.

        Returns:
            The probability as a Fraction
        """
        self._require_phase(GamePhase.COMPUTE_PROBABILITY)
        self.win_probability = win_probability(self.user_die, self.system_die)
        self.interaction.show(
            f"Your chance of winning with [{self.user_die}] against "
            f"[{self.system_die}]: {float(self.win_probability) * 100:.2f}%"
        )
        self.state.transition(GameEvent.PROBABILITY_REPORTED)
        return self.win_probability

    def roll_dice(self) -> Tuple[RollOutcome, RollOutcome]:
        """
        ROLL: one commit-reveal round per party.

        Returns:
            (user_roll, system_roll)
        """
        self._require_phase(GamePhase.ROLL)
        self.interaction.show("It's time for your roll.")
        user_roll = self.fair_roll(Party.USER, self.user_die)
        self.interaction.show(f"Your roll result is {user_roll.value}.")

        self.interaction.show("It's time for my roll.")
        system_roll = self.fair_roll(Party.SYSTEM, self.system_die)
        self.interaction.show(f"My roll result is {system_roll.value}.")

        self.state.transition(GameEvent.ROLLS_COMPLETE)
        return user_roll, system_roll

    def declare_result(self, user_roll: RollOutcome, system_roll: RollOutcome) -> GameResult:
        """
        RESULT: compare the rolls and apply the tie policy.

        Returns:
            The finished GameResult
        """
        self._require_phase(GamePhase.RESULT)
        winner = resolve_winner(user_roll.value, system_roll.value, self.tie_policy)

        if winner == Party.USER:
            self.interaction.show(f"You win ({user_roll.value} > {system_roll.value})!")
        elif winner is None:
            self.interaction.show(f"It's a draw ({user_roll.value} = {system_roll.value}).")
        elif user_roll.value == system_roll.value:
            self.interaction.show(
                f"It's a tie ({user_roll.value} = {system_roll.value}), ties go to me. I win!"
            )
        else:
            self.interaction.show(f"I win ({system_roll.value} > {user_roll.value})!")

        result = GameResult(
            user_first=bool(self.user_first),
            user_die=self.user_die,
            system_die=self.system_die,
            unassigned=list(self.unassigned),
            win_probability=self.win_probability,
            user_roll=user_roll,
            system_roll=system_roll,
            winner=winner,
            tie_policy=self.tie_policy,
            rounds=list(self.rounds),
        )
        logger.info(f"Game over: winner={winner.value if winner else 'draw'}")
        self.state.transition(GameEvent.WINNER_DECLARED)
        return result

    # ──────────────────────────────────────────────────────────────
    # Commit-reveal round
    # ──────────────────────────────────────────────────────────────

    def fair_roll(self, party: Party, die: Die) -> RollOutcome:
        """
        Roll a die with a full commit -> contribute -> combine -> reveal round.

        Args:
            party: Whose die is rolled
            die: The die to roll

        Returns:
            The resolved RollOutcome
        """
        label = f"roll:{party.value}"
        range_ = die.faces

        commitment = self._commit(label, range_)
        contribution = self._ask_number(
            label, f"Add your number modulo {range_} (0..{range_ - 1}): ", range_
        )

        face_index = combine(commitment.number, contribution, range_)
        self._record(label, ProtocolStep.COMBINED, {"result": face_index})

        key, number = self._reveal(label, commitment)
        self.interaction.show(f"My number is {number} (KEY={key.hex()}).")
        self.interaction.show(
            f"The fair number generation result is {number} + {contribution} "
            f"= {face_index} (mod {range_})."
        )
        verified = self._verify(label, commitment, key, number)

        record = RoundRecord(
            label=label,
            range=range_,
            digest=commitment.digest,
            contribution=contribution,
            result=face_index,
            key_hex=key.hex(),
            number=number,
            verified=verified,
        )
        self.rounds.append(record)
        return RollOutcome(
            party=party,
            die=die,
            face_index=face_index,
            value=die.roll(face_index),
            record=record,
        )

    def _commit(self, label: str, range_: int) -> Commitment:
        commitment = commit(range_, self.rng)
        self._record(label, ProtocolStep.COMMITTED, {"range": range_, "digest": commitment.digest})
        self.interaction.show(
            f"I selected a random value in the range 0..{range_ - 1} "
            f"(HMAC={commitment.digest})."
        )
        return commitment

    def _reveal(self, label: str, commitment: Commitment) -> Tuple[bytes, int]:
        key, number = reveal(commitment)
        self._record(label, ProtocolStep.REVEALED, {"key": key.hex(), "number": number})
        return key, number

    def _verify(self, label: str, commitment: Commitment, key: bytes, number: int) -> bool:
        ok = verify(commitment, key, number)
        self._record(label, ProtocolStep.VERIFIED, {"ok": ok})
        if not ok:
            failure = VerificationFailure(label, commitment.digest, key.hex(), number)
            logger.error(str(failure))
            if self.protocol_logger:
                self.protocol_logger.log_error(str(failure))
            self.interaction.show(f"WARNING: {failure}")
        return ok

    # ──────────────────────────────────────────────────────────────
    # Peer input
    # ──────────────────────────────────────────────────────────────

    def _ask_number(self, label: str, prompt: str, range_: int) -> int:
        """Ask until the peer gives an integer in [0, range_), then record it."""
        while True:
            raw = self.interaction.ask(prompt)
            try:
                value = parse_choice(raw, range_)
                break
            except InputError as e:
                logger.info(f"[{label}] rejected input {raw!r}: {e.message}")
                self.interaction.show(e.message)

        self._record(label, ProtocolStep.CONTRIBUTED, {"value": value})
        return value

    def _choose_die(self, available: List[Die]) -> Die:
        """Let the user pick a die by index and remove it from `available`."""
        lines = ["Choose your dice:"]
        lines.extend(f"{i} - {die}" for i, die in enumerate(available))
        lines.append(f"Your selection (0..{len(available) - 1}): ")
        prompt = "\n".join(lines)

        while True:
            raw = self.interaction.ask(prompt)
            try:
                index = parse_choice(raw, len(available))
                break
            except InputError as e:
                logger.info(f"[select] rejected input {raw!r}: {e.message}")
                self.interaction.show(e.message)

        die = available.pop(index)
        self.interaction.show(f"You choose the [{die}] dice.")
        return die

    # ──────────────────────────────────────────────────────────────
    # Helpers
    # ──────────────────────────────────────────────────────────────

    def _record(self, label: str, step: ProtocolStep, detail: dict) -> None:
        self.transcript.append(ProtocolEvent(label=label, step=step, detail=detail))
        logger.debug(f"[{label}] {step.value} {detail}")
        if self.protocol_logger:
            self.protocol_logger.log_step(label, step, detail)

    def _require_phase(self, phase: GamePhase) -> None:
        if self.state.current_phase != phase:
            raise ValueError(
                f"Session is in {self.state.current_phase.value}, expected {phase.value}"
            )


def parse_choice(raw: str, range_: int) -> int:
    """
    Parse a peer answer as an integer in [0, range_).

    Raises:
        InputError: If the answer is not a non-negative integer below range_
    """
    text = (raw or "").strip()
    if not NUMBER_PATTERN.match(text):
        raise InputError(
            f"Invalid input! Enter a whole number from 0 to {range_ - 1}.", raw_input=raw
        )
    value = int(text)
    if value >= range_:
        raise InputError(
            f"Invalid input! {value} is out of range, enter 0 to {range_ - 1}.", raw_input=raw
        )
    return value


def resolve_winner(user_value: int, system_value: int, tie_policy: TiePolicy) -> Optional[Party]:
    """
    Decide the winner of two rolls.

    Returns:
        The winning Party, or None for a draw under TiePolicy.DRAW
    """
    if user_value > system_value:
        return Party.USER
    if system_value > user_value:
        return Party.SYSTEM
    if tie_policy == TiePolicy.DRAW:
        return None
    return Party.SYSTEM
