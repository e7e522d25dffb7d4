# Area: Fairness
"""
Fairness primitives shared by the game session.

This package contains:
- The commit-reveal protocol (commit, reveal, verify, combine)
- The injectable secure randomness source
- The win probability engine
"""

from .commitment import (
    Commitment,
    commit,
    reveal,
    verify,
    combine,
    compute_digest,
    require_verified,
)
from .probability import count_wins, count_ties, win_probability
from .secure_random import SecureRandom, SystemSecureRandom, default_random

__all__ = [
    "Commitment",
    "commit",
    "reveal",
    "verify",
    "combine",
    "compute_digest",
    "require_verified",
    "count_wins",
    "count_ties",
    "win_probability",
    "SecureRandom",
    "SystemSecureRandom",
    "default_random",
]
