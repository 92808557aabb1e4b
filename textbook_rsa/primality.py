"""Miller-Rabin primality test with a small-prime pre-filter."""
from __future__ import annotations

import math
import secrets
from typing import Iterable, Optional, Sequence, Tuple

from .bigint import MAX_BITS
from .modexp import mod_pow

# The first ten odd primes; dividing by these rejects most candidates cheaply.
SMALL_PRIMES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31)

# Historical single-witness form.  Fooled by base-2 strong pseudoprimes
# such as 4033 = 37 * 109.
FIXED_WITNESS: Sequence[int] = (2,)


def rounds_for_error_bound(bound: float) -> int:
    """Random-witness rounds needed to push the error below *bound*.

    Each independent round lets a composite through with probability at most
    1/4, so ``k`` rounds give ``4**-k``.
    """

    if not (0.0 < bound < 1.0):
        raise ValueError("Error bound must lie in (0, 1)")
    return max(1, math.ceil(-math.log2(bound) / 2))


def _decompose(value: int) -> Tuple[int, int]:
    # value - 1 == 2**s * d with d odd
    d = value - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return s, d


def _passes_witness(witness: int, value: int, s: int, d: int, max_bits: int) -> bool:
    x = mod_pow(witness, d, value, max_bits=max_bits)
    if x == 1 or x == value - 1:
        return True
    for _ in range(s - 1):
        x = (x * x) % value
        if x == value - 1:
            return True
    return False


def _random_witnesses(value: int, rounds: int) -> Iterable[int]:
    for _ in range(rounds):
        yield secrets.randbelow(value - 3) + 2  # 2 <= a <= value-2


def is_probable_prime(
    value: int,
    *,
    witnesses: Optional[Sequence[int]] = None,
    rounds: Optional[int] = None,
    max_bits: int = MAX_BITS,
) -> bool:
    """Return ``True`` when *value* is probably prime.

    Pass ``witnesses`` for a fixed base set (``FIXED_WITNESS`` reproduces the
    single base-2 test) or ``rounds`` for that many random bases.  With
    neither, the round count comes from a ``2**-80`` error bound.  *max_bits*
    bounds the squarings of the test, so *value* may use at most half of it.
    """

    if value < 2:
        return False
    if value == 2:
        return True
    if value % 2 == 0:
        return False
    for p in SMALL_PRIMES:
        if value == p:
            return True
        if value % p == 0:
            return False

    s, d = _decompose(value)

    if witnesses is None:
        if rounds is None:
            rounds = rounds_for_error_bound(2.0 ** -80)
        if rounds < 1:
            raise ValueError("At least one Miller-Rabin round is required")
        witnesses = _random_witnesses(value, rounds)

    for witness in witnesses:
        witness %= value
        if witness in (0, 1, value - 1):
            continue
        if not _passes_witness(witness, value, s, d, max_bits):
            return False
    return True


__all__ = [
    "SMALL_PRIMES",
    "FIXED_WITNESS",
    "rounds_for_error_bound",
    "is_probable_prime",
]
