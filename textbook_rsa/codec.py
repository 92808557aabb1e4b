"""Unpadded single-block encode/decode."""
from __future__ import annotations

from typing import Optional

from .errors import MessageTooLargeError
from .keys import PrivateKey, PublicKey
from .modexp import mod_pow


def encode(message: int, public_key: PublicKey, *, max_bits: Optional[int] = None) -> int:
    """Return ``message**e mod n``; the message must lie in ``[0, n)``.

    *max_bits* defaults to the bound the key was generated under.
    """

    if message < 0:
        raise ValueError("Message must be non-negative")
    if message >= public_key.n:
        raise MessageTooLargeError("Message block too large for modulus")
    bound = public_key.max_bits if max_bits is None else max_bits
    return mod_pow(message, public_key.e, public_key.n, max_bits=bound)


def decode(cipher: int, private_key: PrivateKey, *, max_bits: Optional[int] = None) -> int:
    if not (0 <= cipher < private_key.n):
        raise ValueError("Ciphertext representative out of range")
    bound = private_key.max_bits if max_bits is None else max_bits
    return mod_pow(cipher, private_key.d, private_key.n, max_bits=bound)


__all__ = ["encode", "decode"]
