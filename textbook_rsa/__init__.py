"""Textbook RSA built from first principles."""
from __future__ import annotations

from .bigint import MAX_BITS, ensure_fits, parse_int
from .codec import decode, encode
from .config import DEFAULT_CONFIG, RsaConfig
from .errors import (
    KeyValidationError,
    MagnitudeOverflowError,
    MessageTooLargeError,
    NonInvertibleError,
    PrimeSearchExhaustedError,
    RsaError,
)
from .euclid import egcd, extended_euclid, inv_mod
from .keys import KeyPair, PrivateKey, PublicKey, generate_key_pair, generate_keys, validate_key_pair
from .modexp import mod_pow
from .primality import FIXED_WITNESS, is_probable_prime, rounds_for_error_bound
from .primes import RandomBitSource, candidate_mask, find_prime, generate_prime

__all__ = [
    "MAX_BITS",
    "ensure_fits",
    "parse_int",
    "encode",
    "decode",
    "DEFAULT_CONFIG",
    "RsaConfig",
    "RsaError",
    "KeyValidationError",
    "MagnitudeOverflowError",
    "MessageTooLargeError",
    "NonInvertibleError",
    "PrimeSearchExhaustedError",
    "egcd",
    "extended_euclid",
    "inv_mod",
    "KeyPair",
    "PrivateKey",
    "PublicKey",
    "generate_key_pair",
    "generate_keys",
    "validate_key_pair",
    "mod_pow",
    "FIXED_WITNESS",
    "is_probable_prime",
    "rounds_for_error_bound",
    "RandomBitSource",
    "candidate_mask",
    "find_prime",
    "generate_prime",
]
