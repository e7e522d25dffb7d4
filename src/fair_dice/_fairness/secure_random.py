# Area: Fairness
"""
fair_dice._fairness.secure_random — Injectable randomness source
================================================================

Everything that consumes randomness takes a SecureRandom so tests can
swap in a deterministic source without changing the protocol shape.
"""

import secrets
from abc import ABC, abstractmethod


class SecureRandom(ABC):
    """Capability for drawing cryptographically secure random values."""

    @abstractmethod
    def token_bytes(self, n: int) -> bytes:
        """Return n random bytes."""
        ...

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return an integer drawn uniformly from [0, n) without modulo bias."""
        ...


class SystemSecureRandom(SecureRandom):
    """SecureRandom backed by the operating system CSPRNG."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def randbelow(self, n: int) -> int:
        # secrets.randbelow uses rejection sampling over getrandbits
        return secrets.randbelow(n)


_default_random = SystemSecureRandom()


def default_random() -> SecureRandom:
    """Return the shared system-backed source."""
    return _default_random
