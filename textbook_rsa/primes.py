"""Random prime generation for RSA key material."""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from Crypto.Random import get_random_bytes

from .bigint import MAX_BITS
from .errors import PrimeSearchExhaustedError
from .primality import is_probable_prime

logger = logging.getLogger(__name__)

# Candidates congruent to 1 modulo the conventional public exponent are
# skipped so that 65537 stays usable with the resulting prime.
PUBLIC_EXPONENT_FILTER = 2 ** 16 + 1


class RandomBitSource:
    """Uniform random bits from a private, freshly seeded engine.

    Without a *seed* the engine is seeded from 256 bits of system entropy,
    so two sources never share state.  A seed makes the stream reproducible.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = int.from_bytes(get_random_bytes(32), "big")
        self._engine = random.Random(seed)

    def bits(self, count: int) -> int:
        """Return an integer made of *count* independent uniform bits."""

        if count < 0:
            raise ValueError("Bit count must be non-negative")
        return self._engine.getrandbits(count) if count else 0


def candidate_mask(bit_length: int) -> int:
    """Mask forcing the top two bits and the lowest bit of a candidate."""

    if bit_length < 2:
        raise ValueError("Prime size must be at least 2 bits")
    return (3 << (bit_length - 2)) | 1


def default_attempt_cap(bit_length: int) -> int:
    """Attempt budget far above the ~``bit_length * ln 2 / 2`` expected trials."""

    return max(1000, 100 * bit_length)


@dataclass(frozen=True)
class PrimeSearch:
    """Outcome of a prime search."""

    value: int
    bit_length: int
    attempts: int
    elapsed: float


def find_prime(
    bit_length: int,
    *,
    max_attempts: Optional[int] = None,
    deadline: Optional[float] = None,
    witnesses: Optional[Sequence[int]] = None,
    rounds: Optional[int] = None,
    source: Optional[RandomBitSource] = None,
    max_bits: int = MAX_BITS,
) -> PrimeSearch:
    """Sample masked candidates until one is a probable prime.

    The search stops with :class:`PrimeSearchExhaustedError` after
    ``max_attempts`` candidates or once ``deadline`` seconds have elapsed.
    *max_bits* is handed to the primality test.
    """

    mask = candidate_mask(bit_length)
    if max_attempts is None:
        max_attempts = default_attempt_cap(bit_length)
    if max_attempts < 1:
        raise ValueError("max_attempts must be positive")
    if source is None:
        source = RandomBitSource()

    start = time.monotonic()
    attempts = 0
    while attempts < max_attempts:
        attempts += 1
        candidate = source.bits(bit_length) | mask
        if candidate % PUBLIC_EXPONENT_FILTER != 1 and is_probable_prime(
            candidate, witnesses=witnesses, rounds=rounds, max_bits=max_bits
        ):
            elapsed = time.monotonic() - start
            logger.debug(
                "Found %d-bit prime after %d attempt(s) in %.3fs",
                bit_length,
                attempts,
                elapsed,
            )
            return PrimeSearch(candidate, bit_length, attempts, elapsed)
        if deadline is not None and time.monotonic() - start >= deadline:
            raise PrimeSearchExhaustedError(
                f"No {bit_length}-bit prime found within {deadline}s", attempts
            )

    raise PrimeSearchExhaustedError(
        f"No {bit_length}-bit prime found in {max_attempts} attempts", attempts
    )


def generate_prime(bit_length: int, **kwargs) -> int:
    """Generate a random probable prime with exactly *bit_length* bits."""

    return find_prime(bit_length, **kwargs).value


__all__ = [
    "PUBLIC_EXPONENT_FILTER",
    "RandomBitSource",
    "candidate_mask",
    "default_attempt_cap",
    "PrimeSearch",
    "find_prime",
    "generate_prime",
]
