"""
Split a (possibly huge) count into bounded chunks.
"""

from __future__ import annotations

from typing import Iterator

from .counter import checked_sub
from .errors import InvalidNumber, InvalidUnit


def divide(total: int, unit: int) -> Iterator[int]:
    """
    Lazily yield chunk sizes that add up to total.

    Emits unit while at least unit remains, then the remainder if it is
    nonzero. divide(0, unit) yields nothing, so callers never sample an
    empty chunk. Only the current remainder is held in memory.
    """
    if unit <= 0:
        raise InvalidUnit(unit)
    if total < 0:
        raise InvalidNumber(total)

    remaining = total
    while remaining >= unit:
        remaining = checked_sub(remaining, unit)
        yield unit
    if remaining:
        yield remaining


def chunk_count(total: int, unit: int) -> int:
    """Number of chunks divide() will produce: ceil(total / unit)."""
    if unit <= 0:
        raise InvalidUnit(unit)
    return -(-total // unit)
