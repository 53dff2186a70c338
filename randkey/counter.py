"""
Big counter helpers.

Python ints are already arbitrary precision; this module only adds the
parsing rules and the checked conversions the engine relies on.
"""

from __future__ import annotations

import re
import sys

from .errors import InvalidNumber, KeySizeError
from .numtext import describe, format_decimal, parse_decimal

# ASCII digits only: no sign, whitespace, underscores or other numerals.
_DECIMAL = re.compile(r"[0-9]+", re.ASCII)

BOUNDED_MAX = sys.maxsize


def parse_count(value: str | int) -> int:
    """
    Parse a non-negative integer from decimal text (or pass an int through).

    Raises InvalidNumber for negative numbers, signs, non-digit characters
    and non-ASCII numerals. Length is not limited.
    """
    if isinstance(value, bool):
        raise InvalidNumber(value)
    if isinstance(value, int):
        if value < 0:
            raise InvalidNumber(value)
        return value
    if not isinstance(value, str) or not _DECIMAL.fullmatch(value):
        raise InvalidNumber(value)
    return parse_decimal(value)


def format_count(value: int) -> str:
    """Decimal text of a count, however many digits it has."""
    return format_decimal(value)


def checked_sub(a: int, b: int) -> int:
    """Subtract without going below zero; underflow is an error."""
    if b > a:
        raise ArithmeticError(f"Counter underflow: {describe(a)} - {describe(b)}")
    return a - b


def to_bounded(value: int) -> int:
    """Return value if it fits the bounded machine range, else raise KeySizeError."""
    if value < 0 or value > BOUNDED_MAX:
        raise KeySizeError(f"{describe(value)} does not fit in [0, {BOUNDED_MAX}]")
    return value
