"""RSA key-pair derivation from two primes."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .bigint import MAX_BITS
from .config import DEFAULT_CONFIG, RsaConfig
from .errors import (
    KeyValidationError,
    MagnitudeOverflowError,
    NonInvertibleError,
    PrimeSearchExhaustedError,
)
from .euclid import inv_mod
from .primes import RandomBitSource, generate_prime

logger = logging.getLogger(__name__)

# Redraws of q when it collides with p.
DISTINCT_PRIME_DRAWS = 8


@dataclass(frozen=True)
class PublicKey:
    e: int
    n: int
    max_bits: int = field(default=MAX_BITS, compare=False)


@dataclass(frozen=True)
class PrivateKey:
    d: int
    n: int
    max_bits: int = field(default=MAX_BITS, compare=False)


@dataclass(frozen=True)
class KeyPair:
    """Public exponent ``e``, private exponent ``d`` and shared modulus ``n``.

    ``max_bits`` is the magnitude bound the pair was generated under; both
    halves carry it into :func:`textbook_rsa.codec.encode` and ``decode``.
    """

    e: int
    d: int
    n: int
    max_bits: int = field(default=MAX_BITS, compare=False)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(e=self.e, n=self.n, max_bits=self.max_bits)

    @property
    def private_key(self) -> PrivateKey:
        return PrivateKey(d=self.d, n=self.n, max_bits=self.max_bits)

    def __repr__(self) -> str:
        return f"KeyPair(e={self.e}, n=<{self.n.bit_length()} bits>)"


def _check_exponents(e: int, d: int, phi: int) -> None:
    if (e * d) % phi != 1:
        raise KeyValidationError(f"(e * d) mod phi != 1 for e={e}")


def validate_key_pair(keys: KeyPair, p: int, q: int) -> None:
    """Raise :class:`KeyValidationError` unless *keys* is consistent with *p*, *q*."""

    if keys.n != p * q:
        raise KeyValidationError("Modulus does not equal p * q")
    _check_exponents(keys.e, keys.d, (p - 1) * (q - 1))


def generate_key_pair(
    p: int,
    q: int,
    bit_length: int,
    *,
    public_exponent: Optional[int] = None,
    config: Optional[RsaConfig] = None,
    source: Optional[RandomBitSource] = None,
) -> KeyPair:
    """Combine two distinct primes into a validated key pair.

    Without *public_exponent* a prime ``e`` of ``min(bit_length, 32)`` bits is
    drawn and redrawn until ``gcd(e, phi) == 1``.  An explicit exponent that
    is not invertible modulo ``phi`` raises :class:`NonInvertibleError`.
    """

    config = config or DEFAULT_CONFIG
    if p < 2 or q < 2:
        raise ValueError("p and q must be primes")
    if p == q:
        raise ValueError("p and q must be distinct")

    n = p * q
    # Encode/decode square values below n, so n may use half the bound.
    if 2 * n.bit_length() > config.max_bits:
        raise MagnitudeOverflowError(
            f"{n.bit_length()}-bit modulus squares past the {config.max_bits}-bit bound"
        )
    phi = (p - 1) * (q - 1)

    if public_exponent is not None:
        e = public_exponent
        if not (1 < e < phi):
            raise ValueError("Public exponent must satisfy 1 < e < phi")
        d = inv_mod(e, phi)
    else:
        exponent_bits = min(bit_length, config.exponent_bits)
        for attempt in range(1, config.max_exponent_attempts + 1):
            e = generate_prime(exponent_bits, source=source, **config.search_kwargs())
            if e >= phi:
                logger.debug("Rejected e=%d: not below phi", e)
                continue
            try:
                d = inv_mod(e, phi)
            except NonInvertibleError as exc:
                logger.debug("Rejected e=%d: gcd(e, phi)=%d", e, exc.gcd)
                continue
            logger.debug("Accepted e=%d after %d draw(s)", e, attempt)
            break
        else:
            raise PrimeSearchExhaustedError(
                f"No public exponent coprime to phi in {config.max_exponent_attempts} draws",
                config.max_exponent_attempts,
            )

    _check_exponents(e, d, phi)
    return KeyPair(e=e, d=d, n=n, max_bits=config.max_bits)


def generate_keys(
    bit_length: Optional[int] = None,
    *,
    config: Optional[RsaConfig] = None,
    source: Optional[RandomBitSource] = None,
) -> KeyPair:
    """Generate two fresh primes of *bit_length* bits and derive a key pair."""

    config = config or DEFAULT_CONFIG
    bits = bit_length if bit_length is not None else config.bit_length

    p = generate_prime(bits, source=source, **config.search_kwargs())
    for _ in range(DISTINCT_PRIME_DRAWS):
        q = generate_prime(bits, source=source, **config.search_kwargs())
        if q != p:
            break
    else:
        raise PrimeSearchExhaustedError(
            f"Could not find two distinct {bits}-bit primes",
            DISTINCT_PRIME_DRAWS,
        )
    logger.info("Generated two %d-bit primes", bits)
    return generate_key_pair(p, q, bits, config=config, source=source)


__all__ = [
    "PublicKey",
    "PrivateKey",
    "KeyPair",
    "validate_key_pair",
    "generate_key_pair",
    "generate_keys",
]
