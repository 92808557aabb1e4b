"""Conversions between integers and fixed-width bit strings."""
from __future__ import annotations

import logging
from typing import Union

from textbook_rsa.bigint import parse_int

logger = logging.getLogger(__name__)


def to_bits(value: Union[int, str], bit_count: int) -> str:
    """Render the low *bit_count* bits of *value*, most significant first.

    *value* may be an ``int`` or a decimal literal.
    """

    if bit_count < 0:
        raise ValueError("bit_count must be non-negative")
    if isinstance(value, str):
        value = parse_int(value, field="value")
    return "".join("1" if value & (1 << i) else "0" for i in range(bit_count - 1, -1, -1))


def from_bits(bits: str, bit_count: int) -> int:
    """Read up to *bit_count* bits from the right-hand end of *bits*.

    A length mismatch is only logged; the conversion proceeds with whatever
    bits overlap.
    """

    if len(bits) != bit_count:
        logger.warning("Bit string has %d characters, expected %d", len(bits), bit_count)

    value = 0
    for i, char in enumerate(reversed(bits[-bit_count:] if bit_count else "")):
        if char == "1":
            value |= 1 << i
        elif char != "0":
            raise ValueError(f"Invalid bit character {char!r}")
    return value


__all__ = ["to_bits", "from_bits"]
