"""Binary modular exponentiation."""
from __future__ import annotations

from .bigint import MAX_BITS
from .errors import MagnitudeOverflowError


def mod_pow(base: int, exponent: int, modulus: int, *, max_bits: int = MAX_BITS) -> int:
    """Return ``base**exponent mod modulus`` by square-and-multiply.

    The exponent is scanned from its most significant bit down, which is the
    same sequence of squarings the recursive ``exponent // 2`` formulation
    performs, without the call depth.  ``exponent == 0`` yields ``1`` for any
    base (including 0), reduced into ``[0, modulus)``.
    """

    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("Modulus must be positive")
    # Every intermediate product is below modulus**2.
    if 2 * modulus.bit_length() > max_bits:
        raise MagnitudeOverflowError(
            f"{modulus.bit_length()}-bit modulus squares past the {max_bits}-bit bound"
        )

    base %= modulus
    result = 1 % modulus
    for bit in bin(exponent)[2:]:
        result = (result * result) % modulus
        if bit == "1":
            result = (result * base) % modulus
    return result


__all__ = ["mod_pow"]
