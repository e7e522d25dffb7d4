# Area: Fairness
"""
fair_dice._fairness.commitment — Commit-reveal protocol
=======================================================

Produces a value neither party can bias:

1. commit(range) draws a secret key and a secret number and publishes
   only the HMAC-SHA3-256 digest of the number.
2. The peer supplies a contribution in [0, range).
3. combine() mixes the secret number with the contribution.
4. reveal() hands out the key and number so anyone can verify() them
   against the digest published in step 1.

The functions here are stateless. GameSession is responsible for
calling them in that order.
"""

from __future__ import annotations
import hashlib
import hmac
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..errors import ValidationError, VerificationFailure
from .secure_random import SecureRandom, default_random

logger = logging.getLogger("fair_dice.commitment")

KEY_BYTES = 32
DIGEST_ALGORITHM = hashlib.sha3_256


@dataclass(frozen=True)
class Commitment:
    """
    A committed secret number.

    Attributes:
        key: 256-bit HMAC key (withheld until reveal)
        number: Secret number in [0, range) (withheld until reveal)
        digest: Hex HMAC-SHA3-256 of str(number) under key (published)
        range: Upper bound (exclusive) of the secret number
    """

    key: bytes = field(repr=False)
    number: int = field(repr=False)
    digest: str
    range: int

    @property
    def key_hex(self) -> str:
        return self.key.hex()


def compute_digest(key: bytes, number: int) -> str:
    """Return the hex HMAC-SHA3-256 of the decimal string of number."""
    return hmac.new(key, str(number).encode("ascii"), DIGEST_ALGORITHM).hexdigest()


def commit(range_: int, rng: Optional[SecureRandom] = None) -> Commitment:
    """
    Create a commitment to a number drawn uniformly from [0, range_).

    Args:
        range_: Number of possible values (must be >= 1)
        rng: Randomness source, defaults to the OS CSPRNG

    Returns:
        A fresh Commitment with a never-reused key

    Raises:
        ValidationError: If range_ is not a positive integer
    """
    if not _is_int(range_) or range_ < 1:
        raise ValidationError(f"Commitment range must be a positive integer, got {range_!r}")

    rng = rng or default_random()
    key = rng.token_bytes(KEY_BYTES)
    number = rng.randbelow(range_)
    digest = compute_digest(key, number)
    logger.debug(f"Committed to a value in [0, {range_}) digest={digest}")
    return Commitment(key=key, number=number, digest=digest, range=range_)


def reveal(commitment: Commitment) -> Tuple[bytes, int]:
    """Expose the withheld key and number of a commitment."""
    return commitment.key, commitment.number


def verify(
    commitment: Union[Commitment, str],
    key: Union[bytes, str],
    number: int,
) -> bool:
    """
    Check a revealed key and number against a published digest.

    Args:
        commitment: The Commitment, or just its published hex digest
        key: Revealed key as raw bytes or hex string
        number: Revealed secret number

    Returns:
        True if the digest matches, False otherwise (never raises)
    """
    digest = commitment.digest if isinstance(commitment, Commitment) else commitment
    try:
        key_bytes = bytes.fromhex(key) if isinstance(key, str) else bytes(key)
        if not _is_int(number):
            return False
        expected = compute_digest(key_bytes, number)
        return hmac.compare_digest(expected, str(digest))
    except (TypeError, ValueError):
        return False


def require_verified(label: str, commitment: Commitment, key: bytes, number: int) -> None:
    """
    Verify a reveal and raise if it does not match.

    Raises:
        VerificationFailure: If verify() returns False
    """
    if not verify(commitment, key, number):
        raise VerificationFailure(
            label=label,
            digest=commitment.digest,
            key_hex=key.hex() if isinstance(key, bytes) else str(key),
            number=number,
        )


def combine(number: int, contribution: int, range_: int) -> int:
    """
    Mix the secret number with the peer's contribution.

    Returns:
        (number + contribution) mod range_

    Raises:
        ValidationError: If contribution is not an integer in [0, range_)
    """
    if not _is_int(range_) or range_ < 1:
        raise ValidationError(f"Range must be a positive integer, got {range_!r}")
    if not _is_int(contribution) or not 0 <= contribution < range_:
        raise ValidationError(
            f"Contribution must be an integer in [0, {range_}), got {contribution!r}"
        )
    return (number + contribution) % range_


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
