# Area: Shared Tests
"""Tests for the commit-reveal protocol trace logger."""

from fair_dice._game.enums import ProtocolStep
from fair_dice._shared.protocol_logger import (
    GREEN,
    NEXT_STEPS,
    ORANGE,
    RED,
    RESET,
    STEP_DISPLAY_NAMES,
    ProtocolLogger,
    get_protocol_logger,
)


class TestStepMappings:
    """Tests for step → display name mappings."""

    def test_every_step_has_display_name(self):
        assert set(STEP_DISPLAY_NAMES) == set(ProtocolStep)

    def test_every_step_has_next_step(self):
        assert set(NEXT_STEPS) == set(ProtocolStep)

    def test_display_names(self):
        assert STEP_DISPLAY_NAMES[ProtocolStep.COMMITTED] == "COMMIT"
        assert STEP_DISPLAY_NAMES[ProtocolStep.CONTRIBUTED] == "PEER-INPUT"
        assert STEP_DISPLAY_NAMES[ProtocolStep.REVEALED] == "REVEAL"


class TestProtocolLogger:
    """Tests for ProtocolLogger output."""

    def test_commit_line(self, capsys):
        ProtocolLogger().log_step("roll:user", ProtocolStep.COMMITTED, {"range": 6, "digest": "abc"})
        out = capsys.readouterr().out
        assert out.startswith(GREEN)
        assert out.rstrip("\n").endswith(RESET)
        assert "ROUND: roll:user" in out
        assert "COMMIT" in out
        assert "NEXT: PEER-INPUT" in out
        assert "range=6 digest=abc" in out

    def test_peer_input_in_orange(self, capsys):
        ProtocolLogger().log_step("first-player", ProtocolStep.CONTRIBUTED, {"value": 1})
        assert capsys.readouterr().out.startswith(ORANGE)

    def test_step_without_detail(self, capsys):
        ProtocolLogger().log_step("roll:system", ProtocolStep.VERIFIED)
        assert "VERIFY" in capsys.readouterr().out

    def test_error_to_stderr(self, capsys):
        ProtocolLogger().log_error("digest mismatch")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith(RED)
        assert "digest mismatch" in captured.err

    def test_singleton(self):
        assert get_protocol_logger() is get_protocol_logger()
