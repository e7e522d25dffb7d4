# Area: Game Tests
"""Tests for GameSession orchestration."""

from fractions import Fraction

import pytest

from fair_dice import verify
from fair_dice._game import session as session_module
from fair_dice._game.enums import GamePhase, Party, ProtocolStep, TiePolicy
from fair_dice._game.session import GameSession, parse_choice, resolve_winner
from fair_dice._shared.protocol_logger import ProtocolLogger
from fair_dice.demo_peer import DemoPeer
from fair_dice.dice import DiceSet
from fair_dice.errors import InputError, ValidationError

from conftest import ScriptedInteraction, SequenceRandom


def steps_for(session, label):
    return [e.step for e in session.transcript if e.label == label]


class TestUserPicksFirst:
    """Game where the user guesses the committed bit."""

    def setup_method(self):
        # first-player bit=1, system pick index 0, user roll 3, system roll 5
        self.rng = SequenceRandom([1, 0, 3, 5])
        self.peer = ScriptedInteraction(["1", "0", "4", "2"])

    def play(self, dice):
        self.session = GameSession(dice, self.peer, rng=self.rng)
        return self.session.play()

    def test_reaches_terminated(self, three_dice):
        self.play(three_dice)
        assert self.session.phase == GamePhase.TERMINATED
        assert self.session.state.history[-1] == GamePhase.TERMINATED

    def test_dice_assignment(self, three_dice):
        result = self.play(three_dice)
        assert result.user_first is True
        assert result.user_die.values == (2, 2, 4, 4, 9, 9)
        assert result.system_die.values == (6, 8, 1, 1, 8, 6)
        assert [d.values for d in result.unassigned] == [(7, 5, 3, 7, 5, 3)]

    def test_probability_reported(self, three_dice):
        result = self.play(three_dice)
        assert result.win_probability == Fraction(20, 36)
        assert any("55.56%" in m for m in self.peer.messages)

    def test_rolls_combine_secret_and_contribution(self, three_dice):
        result = self.play(three_dice)
        assert result.user_roll.face_index == (3 + 4) % 6
        assert result.user_roll.value == 2
        assert result.system_roll.face_index == (5 + 2) % 6
        assert result.system_roll.value == 8
        assert result.winner == Party.SYSTEM

    def test_all_rounds_verify(self, three_dice):
        result = self.play(three_dice)
        assert [r.label for r in result.rounds] == ["first-player", "roll:user", "roll:system"]
        assert result.all_verified
        for r in result.rounds:
            assert verify(r.digest, r.key_hex, r.number)


class TestSystemPicksFirst:
    """Game where the user's guess is wrong."""

    def test_system_picks_then_user(self, three_dice):
        rng = SequenceRandom([0, 2, 0, 0])
        peer = ScriptedInteraction(["1", "1", "1", "0"])
        result = GameSession(three_dice, peer, rng=rng).play()

        assert result.user_first is False
        assert rng.calls == [2, 3, 6, 6]
        assert result.system_die.values == (7, 5, 3, 7, 5, 3)
        assert result.user_die.values == (6, 8, 1, 1, 8, 6)
        assert [d.values for d in result.unassigned] == [(2, 2, 4, 4, 9, 9)]
        assert result.user_roll.value == 8
        assert result.system_roll.value == 7
        assert result.winner == Party.USER

    def test_user_menu_lists_only_remaining_dice(self, three_dice):
        rng = SequenceRandom([0, 2, 0, 0])
        peer = ScriptedInteraction(["1", "1", "1", "0"])
        GameSession(three_dice, peer, rng=rng).play()
        menu = peer.prompts[1]
        assert "0 - 2,2,4,4,9,9" in menu
        assert "1 - 6,8,1,1,8,6" in menu
        assert "7,5,3,7,5,3" not in menu


class TestProtocolOrdering:
    """Commit before contribution, reveal after combination."""

    def test_transcript_order_per_round(self, three_dice):
        peer = ScriptedInteraction(["0", "0", "3", "5"])
        session = GameSession(three_dice, peer, rng=SequenceRandom([0, 0, 1, 2]))
        session.play()

        assert steps_for(session, "first-player") == [
            ProtocolStep.COMMITTED,
            ProtocolStep.CONTRIBUTED,
            ProtocolStep.REVEALED,
            ProtocolStep.VERIFIED,
        ]
        for label in ("roll:user", "roll:system"):
            assert steps_for(session, label) == [
                ProtocolStep.COMMITTED,
                ProtocolStep.CONTRIBUTED,
                ProtocolStep.COMBINED,
                ProtocolStep.REVEALED,
                ProtocolStep.VERIFIED,
            ]

    def test_digest_shown_before_question_and_key_after(self, three_dice):
        peer = ScriptedInteraction(["0", "0", "3", "5"])
        result = GameSession(three_dice, peer, rng=SequenceRandom([0, 0, 1, 2])).play()

        for record in result.rounds:
            digest_at = next(
                i for i, (kind, text) in enumerate(peer.log)
                if kind == "show" and record.digest in text
            )
            key_at = next(
                i for i, (kind, text) in enumerate(peer.log)
                if kind == "show" and f"KEY={record.key_hex}" in text
            )
            asks_between = [
                i for i, (kind, _) in enumerate(peer.log)
                if kind == "ask" and digest_at < i < key_at
            ]
            assert asks_between, f"no question between commit and reveal for {record.label}"

    def test_commit_event_carries_only_public_data(self, three_dice):
        peer = ScriptedInteraction(["0", "0", "3", "5"])
        session = GameSession(three_dice, peer, rng=SequenceRandom([0, 0, 1, 2]))
        session.play()
        for event in session.transcript:
            if event.step == ProtocolStep.COMMITTED:
                assert set(event.detail) == {"range", "digest"}

    def test_digest_independent_of_contribution(self, three_dice):
        digests = []
        for answer in ("0", "5"):
            peer = ScriptedInteraction(["0", "0", answer, "0"])
            result = GameSession(three_dice, peer, rng=SequenceRandom([0, 0, 2, 0])).play()
            digests.append(result.rounds[1].digest)
        assert digests[0] == digests[1]


class TestInputRetry:
    """Invalid peer input is re-prompted within the phase."""

    def test_invalid_guess_reprompts(self, three_dice):
        peer = ScriptedInteraction(["2", "x", "", "-1", "0", "0", "0", "0"])
        session = GameSession(three_dice, peer, rng=SequenceRandom())
        session.play()

        guess_prompts = [p for p in peer.prompts if p.startswith("Try to guess")]
        assert len(guess_prompts) == 5
        assert sum(1 for m in peer.messages if m.startswith("Invalid input!")) == 4
        assert steps_for(session, "first-player").count(ProtocolStep.CONTRIBUTED) == 1

    def test_out_of_range_roll_number_reprompts(self, three_dice):
        peer = ScriptedInteraction(["0", "0", "6", "17", "2", "0"])
        result = GameSession(three_dice, peer, rng=SequenceRandom()).play()
        assert result.rounds[1].contribution == 2
        roll_prompts = [p for p in peer.prompts if p.startswith("Add your number")]
        assert len(roll_prompts) == 4

    def test_invalid_die_index_reprompts(self, three_dice):
        peer = ScriptedInteraction(["0", "3", "abc", "2", "0", "0"])
        result = GameSession(three_dice, peer, rng=SequenceRandom()).play()
        assert result.user_die.values == (7, 5, 3, 7, 5, 3)


class TestDiceIdentity:
    """Dice with equal faces stay distinct choices."""

    def test_removal_by_position(self):
        dice_set = DiceSet.create([[1, 2, 3]] * 3)
        peer = ScriptedInteraction(["0", "1", "0", "0"])
        # bit=0 so the user picks first; system takes index 1 of the remaining two
        result = GameSession(dice_set, peer, rng=SequenceRandom([0, 1])).play()

        assert result.user_die is dice_set[1]
        assert result.system_die is dice_set[2]
        assert result.unassigned[0] is dice_set[0]
        assert result.user_die is not result.system_die


class TestTiePolicy:
    """Equal rolls follow the configured policy."""

    def play(self, policy):
        peer = ScriptedInteraction(["0", "0", "0", "0"])
        return GameSession([[5], [5], [5]], peer, rng=SequenceRandom(), tie_policy=policy).play(), peer

    def test_ties_go_to_system_by_default(self):
        result, peer = self.play(TiePolicy.SYSTEM_WINS)
        assert result.user_roll.value == result.system_roll.value
        assert result.winner == Party.SYSTEM
        assert any("ties go to me" in m for m in peer.messages)

    def test_draw_policy(self):
        result, peer = self.play(TiePolicy.DRAW)
        assert result.winner is None
        assert result.is_draw
        assert any("draw" in m for m in peer.messages)


class TestFailures:
    """Validation and verification failures."""

    def test_invalid_dice_abort_session(self):
        peer = ScriptedInteraction([])
        session = GameSession([[1, 2], [3, 4]], peer)
        with pytest.raises(ValidationError):
            session.play()
        assert session.phase == GamePhase.ABORTED
        assert peer.prompts == []

    def test_missing_dice_abort_session(self):
        session = GameSession(None, ScriptedInteraction([]))
        with pytest.raises(ValidationError) as exc:
            session.play()
        assert exc.value.hint
        assert session.phase == GamePhase.ABORTED

    def test_phase_guard(self, three_dice):
        session = GameSession(three_dice, ScriptedInteraction([]))
        with pytest.raises(ValueError):
            session.select_dice(True)

    def test_verification_failure_is_reported_not_fatal(self, three_dice, monkeypatch):
        monkeypatch.setattr(session_module, "verify", lambda *args: False)
        peer = ScriptedInteraction(["0", "0", "0", "0"])
        session = GameSession(three_dice, peer, rng=SequenceRandom())
        result = session.play()

        assert session.phase == GamePhase.TERMINATED
        assert not result.all_verified
        assert sum(1 for m in peer.messages if m.startswith("WARNING")) == 3


class TestTraceAndDemo:
    """Protocol trace output and the automatic peer."""

    def test_protocol_logger_prints_steps(self, three_dice, capsys):
        peer = ScriptedInteraction(["0", "0", "0", "0"])
        GameSession(
            three_dice, peer, rng=SequenceRandom(), protocol_logger=ProtocolLogger()
        ).play()
        out = capsys.readouterr().out
        assert "COMMIT" in out
        assert "REVEAL" in out
        assert "roll:system" in out

    def test_demo_peer_plays_full_game(self, three_dice):
        peer = DemoPeer(echo=False)
        session = GameSession(three_dice, peer)
        result = session.play()
        assert session.phase == GamePhase.TERMINATED
        assert result.all_verified
        assert len(peer.answers) == 4


class TestHelpers:
    """Tests for parse_choice() and resolve_winner()."""

    @pytest.mark.parametrize("raw, expected", [("0", 0), ("5", 5), (" 3 ", 3)])
    def test_parse_choice_valid(self, raw, expected):
        assert parse_choice(raw, 6) == expected

    @pytest.mark.parametrize("raw", ["6", "-1", "1.0", "", "one", "\u0663", None])
    def test_parse_choice_invalid(self, raw):
        with pytest.raises(InputError):
            parse_choice(raw, 6)

    def test_resolve_winner(self):
        assert resolve_winner(5, 3, TiePolicy.SYSTEM_WINS) == Party.USER
        assert resolve_winner(3, 5, TiePolicy.DRAW) == Party.SYSTEM
        assert resolve_winner(4, 4, TiePolicy.SYSTEM_WINS) == Party.SYSTEM
        assert resolve_winner(4, 4, TiePolicy.DRAW) is None
