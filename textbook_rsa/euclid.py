"""Extended Euclidean algorithm and modular inverses."""
from __future__ import annotations

from typing import Tuple

from .errors import NonInvertibleError


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``.

    Iterative so that 2048-bit operands cannot hit the recursion limit.
    Intended for non-negative inputs.
    """

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    return old_r, old_s, old_t


def extended_euclid(a: int, b: int) -> Tuple[int, int]:
    """Bézout coefficients ``(x, y)`` of *a* and *b*.

    The coefficients exist for any pair; ``x`` is only an inverse of *a*
    modulo *b* when ``gcd(a, b) == 1``, which callers must check.
    """

    _, x, y = egcd(a, b)
    return x, y


def inv_mod(a: int, m: int) -> int:
    g, x, _ = egcd(a, m)
    if g != 1:
        raise NonInvertibleError(a, m, g)
    return x % m


__all__ = ["egcd", "extended_euclid", "inv_mod"]
