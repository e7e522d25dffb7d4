# Area: Shared
"""
fair_dice._shared.protocol_logger — Commit-reveal trace output
==============================================================

Prints one colored line per protocol step so a watcher can follow each
round: digest published, peer answer recorded, values combined, secret
revealed, reveal verified.
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional

from .._game.enums import ProtocolStep

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Protocol steps
ORANGE = "\033[38;5;208m"  # Peer input
RED = "\033[31m"           # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# STEP → DISPLAY NAME MAPPINGS
# ══════════════════════════════════════════════════════════════

STEP_DISPLAY_NAMES = {
    ProtocolStep.COMMITTED: "COMMIT",
    ProtocolStep.CONTRIBUTED: "PEER-INPUT",
    ProtocolStep.COMBINED: "COMBINE",
    ProtocolStep.REVEALED: "REVEAL",
    ProtocolStep.VERIFIED: "VERIFY",
}

# Step expected to follow each step within a round
NEXT_STEPS = {
    ProtocolStep.COMMITTED: "PEER-INPUT",
    ProtocolStep.CONTRIBUTED: "COMBINE or REVEAL",
    ProtocolStep.COMBINED: "REVEAL",
    ProtocolStep.REVEALED: "VERIFY",
    ProtocolStep.VERIFIED: "None (round complete)",
}


class ProtocolLogger:
    """Logger for commit-reveal protocol steps."""

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def log_step(self, label: str, step: ProtocolStep, detail: Optional[dict] = None) -> None:
        """Log one protocol step of a round."""
        display = STEP_DISPLAY_NAMES.get(step, step.value)
        expected = NEXT_STEPS.get(step, "Unknown")
        color = ORANGE if step == ProtocolStep.CONTRIBUTED else GREEN
        fields = " ".join(f"{k}={v}" for k, v in (detail or {}).items())

        line = (
            f"{color}{self._now_ms()} | ROUND: {label:14} | {display:10} | "
            f"NEXT: {expected:22} | {fields}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_error(self, description: str) -> None:
        """Log an error."""
        line = f"{RED}[ERROR] {self._now_ms()} | {description}{RESET}"
        print(line, file=sys.stderr)


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
