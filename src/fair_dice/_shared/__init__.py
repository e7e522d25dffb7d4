# Area: Shared
"""
Shared utilities used by the session and the CLI.

This package contains:
- Logging configuration
- The commit-reveal protocol trace logger
"""

from .logging_config import (
    setup_logging,
    log_and_terminate,
    log_verification_failure,
    enable_protocol_mode,
    disable_protocol_mode,
    is_protocol_mode_enabled,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger

__all__ = [
    "setup_logging",
    "log_and_terminate",
    "log_verification_failure",
    "enable_protocol_mode",
    "disable_protocol_mode",
    "is_protocol_mode_enabled",
    "get_protocol_logger",
    "ProtocolLogger",
]
