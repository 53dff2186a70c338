"""
Uniform index sampling for a single chunk.
"""

from __future__ import annotations

import random

from .counter import to_bounded


def sample_indices(count: int, alphabet_size: int, rng: random.Random | None = None) -> list[int]:
    """
    Draw count independent indices uniformly from [0, alphabet_size).
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count and alphabet_size <= 0:
        raise ValueError("Cannot sample from an empty alphabet class")

    rng = rng or random.Random()
    randbelow = rng.randrange
    return [randbelow(alphabet_size) for _ in range(count)]


def sample_chunk(count: int, table: bytes, seed: int) -> bytes:
    """
    Build one chunk of key material.

    Runs on a worker thread: it owns its Random instance (seeded by the
    caller) and only reads the immutable table.
    """
    count = to_bounded(count)
    rng = random.Random(seed)
    return bytes(table[i] for i in sample_indices(count, len(table), rng))
