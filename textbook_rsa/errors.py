"""Exceptions raised by the textbook RSA primitives."""
from __future__ import annotations


class RsaError(Exception):
    """Base class for every error raised by :mod:`textbook_rsa`."""


class NonInvertibleError(RsaError, ValueError):
    """Raised when a value has no inverse modulo the given modulus."""

    def __init__(self, value: int, modulus: int, gcd: int) -> None:
        super().__init__(f"{value} is not invertible modulo {modulus} (gcd={gcd})")
        self.value = value
        self.modulus = modulus
        self.gcd = gcd


class MessageTooLargeError(RsaError, ValueError):
    """Raised when a message block does not fit below the modulus."""


class KeyValidationError(RsaError, RuntimeError):
    """Raised when a derived key pair fails ``(e * d) mod phi == 1``."""


class PrimeSearchExhaustedError(RsaError, RuntimeError):
    """Raised when a bounded search gives up before finding a value."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class MagnitudeOverflowError(RsaError, OverflowError):
    """Raised when a value exceeds the configured magnitude width."""


__all__ = [
    "RsaError",
    "NonInvertibleError",
    "MessageTooLargeError",
    "KeyValidationError",
    "PrimeSearchExhaustedError",
    "MagnitudeOverflowError",
]
