"""
Entropy helpers:
Pack measured bits, mix them with SHA-256 and turn them into a PRNG seed.
"""

from __future__ import annotations

import hashlib
from typing import List


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack bits (MSB first) into bytes, zero-padding the last byte.
    """
    if not bits:
        return b""

    pad_len = (8 - len(bits) % 8) % 8
    value = 0
    for bit in bits:
        value = (value << 1) | (bit & 1)
    value <<= pad_len
    return value.to_bytes((len(bits) + pad_len) // 8, "big")


def bytes_to_bits(data: bytes) -> List[int]:
    """Unpack bytes into a list of bits, MSB first."""
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the packed bits with SHA-256 `rounds` times.

    With rounds <= 0 the bits are returned unchanged; otherwise the result
    is always 256 bits regardless of the input length.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return bytes_to_bits(data)


def bits_to_seed(bits: List[int], rounds: int = 2) -> int:
    """
    Derive an integer seed for random.Random from raw bits.

    At least one hashing round is always applied so short measurements
    still spread over the full seed width.
    """
    mixed = amplify_entropy(bits, max(1, rounds))
    return int.from_bytes(bits_to_bytes(mixed), "big")
