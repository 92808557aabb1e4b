"""Magnitude bound for the integers flowing through the core.

Python integers never wrap, so the fixed width is enforced explicitly:
any value wider than ``max_bits`` raises instead of being truncated.
"""
from __future__ import annotations

from .errors import MagnitudeOverflowError

MAX_BITS = 4096


def ensure_fits(value: int, max_bits: int = MAX_BITS, what: str = "value") -> int:
    """Return *value* unchanged or raise if it needs more than *max_bits* bits."""

    width = abs(value).bit_length()
    if width > max_bits:
        raise MagnitudeOverflowError(
            f"{what} needs {width} bits which exceeds the {max_bits}-bit bound"
        )
    return value


def parse_int(value: str, *, field: str = "value") -> int:
    """Parse a decimal (or ``0x``-prefixed hex) literal."""

    text = value.strip().lower().replace("_", "")
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if text.startswith("0x"):
        base = 16
        text = text[2:]
    else:
        base = 10
    if not text:
        raise ValueError(f"Invalid integer for {field}")
    try:
        parsed = int(text, base)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {field}") from exc
    return -parsed if negative else parsed


__all__ = ["MAX_BITS", "ensure_fits", "parse_int"]
