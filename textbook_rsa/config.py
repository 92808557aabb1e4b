"""Tunables shared by prime search and key generation."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .bigint import MAX_BITS
from .primality import FIXED_WITNESS, rounds_for_error_bound

DEFAULT_ERROR_BOUND = 2.0 ** -80


@dataclass(frozen=True)
class RsaConfig:
    """Knobs for key generation.

    ``fixed_witness`` switches Miller-Rabin to the historical single base-2
    witness.  ``max_prime_attempts`` of ``None`` derives a cap from the bit
    length; ``deadline`` is a wall-clock budget in seconds per prime search.
    """

    bit_length: int = 1024
    max_bits: int = MAX_BITS
    exponent_bits: int = 32
    error_bound: float = DEFAULT_ERROR_BOUND
    fixed_witness: bool = False
    max_prime_attempts: Optional[int] = None
    deadline: Optional[float] = None
    max_exponent_attempts: int = 1000

    def __post_init__(self) -> None:
        if self.bit_length < 2:
            raise ValueError("bit_length must be at least 2")
        if self.exponent_bits < 2:
            raise ValueError("exponent_bits must be at least 2")
        if not (0.0 < self.error_bound < 1.0):
            raise ValueError("error_bound must lie in (0, 1)")
        if self.max_prime_attempts is not None and self.max_prime_attempts < 1:
            raise ValueError("max_prime_attempts must be positive")
        if self.deadline is not None and self.deadline <= 0:
            raise ValueError("deadline must be positive")
        if self.max_exponent_attempts < 1:
            raise ValueError("max_exponent_attempts must be positive")

    def witness_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments selecting the Miller-Rabin witnesses."""

        if self.fixed_witness:
            return {"witnesses": FIXED_WITNESS}
        return {"rounds": rounds_for_error_bound(self.error_bound)}

    def search_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`textbook_rsa.primes.find_prime`."""

        kwargs = self.witness_kwargs()
        kwargs["max_attempts"] = self.max_prime_attempts
        kwargs["deadline"] = self.deadline
        kwargs["max_bits"] = self.max_bits
        return kwargs

    def replace(self, **changes: Any) -> "RsaConfig":
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = RsaConfig()

__all__ = ["DEFAULT_ERROR_BOUND", "RsaConfig", "DEFAULT_CONFIG"]
