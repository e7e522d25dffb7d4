# Area: Shared
"""
fair_dice._shared.logging_config — Structured logging setup
===========================================================

Configures dual logging: terminal (colored) + optional file (JSON).
Provides verification-failure logging and termination functions.
Protocol trace mode suppresses standard logs on the terminal.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import VerificationFailure

# Package logger
logger = logging.getLogger("fair_dice")

# Flag to control protocol-only terminal output
_protocol_mode_enabled = False


class ProtocolFilter(logging.Filter):
    """Filter that suppresses terminal logs when protocol mode is enabled.

    In protocol mode the ProtocolLogger prints the commit-reveal trace
    directly instead of going through the logging handlers.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _protocol_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = None,
    level: int = logging.WARNING,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON log file. No file is written when omitted.
    level : int
        Logging level. Defaults to WARNING so game output stays readable.
    """
    pkg_logger = logging.getLogger("fair_dice")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors (stderr keeps stdout for the game itself)
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(ProtocolFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_verification_failure(error: "VerificationFailure") -> None:
    """
    Log a verification failure in the structured block format.

    Parameters
    ----------
    error : VerificationFailure
        The failed reveal.
    """
    print(error.format_error_log(), file=sys.stderr)

    logger.error(
        f"Verification failed: {error.label}",
        extra={"label": error.label, "digest": error.digest},
    )


def log_and_terminate(error: "VerificationFailure", exit_code: int = 2) -> None:
    """
    Log the failure and terminate the process.

    Parameters
    ----------
    error : VerificationFailure
        The failed reveal.
    exit_code : int
        Exit code for the process. Defaults to 2.
    """
    log_verification_failure(error)
    logger.critical("Process terminated due to verification failure")
    sys.exit(exit_code)


def enable_protocol_mode() -> None:
    """
    Enable protocol trace mode.

    In protocol mode:
    - Standard logs are suppressed from the terminal
    - Only the colored commit-reveal trace is shown
    - File logging remains unchanged for debugging
    """
    global _protocol_mode_enabled
    _protocol_mode_enabled = True


def disable_protocol_mode() -> None:
    """Disable protocol trace mode (restore standard logging)."""
    global _protocol_mode_enabled
    _protocol_mode_enabled = False


def is_protocol_mode_enabled() -> bool:
    """Check if protocol mode is enabled."""
    return _protocol_mode_enabled
