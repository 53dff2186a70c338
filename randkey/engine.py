"""
RandKey: the key generator.

A RandKey holds a requested count of letters, symbols and digits, its own
alphabet and the last generated key. generate() splits each count into
chunks, samples the chunks on a thread pool, shuffles the joined bytes and
publishes the result as the new key in one assignment.
"""

from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Iterable, Tuple

from .alphabet import CLASS_ORDER, Alphabet, CharClass, count_classes
from .chunker import chunk_count, divide
from .config import DEFAULT_CONFIG, RandKeyConfig, make_rng
from .counter import BOUNDED_MAX, format_count, parse_count
from .errors import (
    InconsistentField,
    InvalidKind,
    InvalidUnit,
    KeySizeError,
    MissingCharacterClass,
)
from .numtext import describe
from .sampler import sample_chunk

logger = logging.getLogger(__name__)

Counts = Tuple[int, int, int]


def _describe_counts(counts: Counts) -> str:
    return "(" + ", ".join(describe(c) for c in counts) + ")"


class KeyMode(Enum):
    """How set_key treats the per-class counts."""

    # Recompute counts from the new text and store both.
    UPDATE = "update"
    # Accept the text only if its counts match the stored ones.
    CHECK = "check"

    @classmethod
    def parse(cls, mode: "KeyMode | str") -> "KeyMode":
        if isinstance(mode, KeyMode):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.lower())
            except ValueError:
                pass
        raise InvalidKind(mode)


class RandKey:
    """
    Random key generator with arbitrary-precision per-class counts.

    Counts may be given as decimal text or ints:

        r = RandKey("10", "2", "3")
        r.generate()
        len(r)  # 15

    Not safe for concurrent mutation from several threads.
    """

    def __init__(
        self,
        letters: str | int = "0",
        symbols: str | int = "0",
        digits: str | int = "0",
        config: RandKeyConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self._letters = parse_count(letters)
        self._symbols = parse_count(symbols)
        self._digits = parse_count(digits)
        self._unit = self.config.unit
        self._alphabet = Alphabet()
        self._key = ""
        # Created on first use so quantum seeding only runs when needed.
        self._rng: random.Random | None = None

    @classmethod
    def from_text(cls, text: str, config: RandKeyConfig | None = None) -> "RandKey":
        """Build a RandKey whose key is text and whose counts are tallied from it."""
        rk = cls(config=config)
        rk.set_key(text, KeyMode.UPDATE)
        return rk

    # ---------- key ----------

    @property
    def key(self) -> str:
        return self._key

    def val(self) -> str:
        return self._key

    def set_key(self, text: str, mode: KeyMode | str = KeyMode.UPDATE) -> None:
        """
        Replace the key with text.

        UPDATE overwrites the counts with the tally of text. CHECK only
        accepts text whose tally equals the current counts and raises
        InconsistentField otherwise, leaving everything unchanged.
        Non-ASCII text raises InvalidChar in both modes.
        """
        mode = KeyMode.parse(mode)
        counts = self._tally(text)

        if mode is KeyMode.CHECK and counts != self.counts:
            logger.warning(
                "Rejected key: counts %s differ from stored %s",
                _describe_counts(counts), _describe_counts(self.counts),
            )
            raise InconsistentField("key", expected=self.counts, actual=counts)

        self._letters, self._symbols, self._digits = counts
        self._key = text

    def __len__(self) -> int:
        return len(self._key)

    def is_empty(self) -> bool:
        return not self._key

    def __str__(self) -> str:
        return self._key

    # ---------- unit ----------

    @property
    def unit(self) -> int:
        return self._unit

    def get_unit(self) -> str:
        return format_count(self._unit)

    def set_unit(self, value: str | int) -> None:
        """Set the chunk size. Zero raises InvalidUnit, bad text InvalidNumber."""
        unit = parse_count(value)
        if unit == 0:
            raise InvalidUnit(value)
        self._unit = unit

    # ---------- counts ----------

    @property
    def counts(self) -> Counts:
        return self._letters, self._symbols, self._digits

    def _count_of(self, kind: CharClass) -> int:
        if kind is CharClass.LETTER:
            return self._letters
        if kind is CharClass.SYMBOL:
            return self._symbols
        return self._digits

    def get_count(self, kind: CharClass | str) -> str:
        return format_count(self._count_of(CharClass.parse(kind)))

    def set_count(self, kind: CharClass | str, value: str | int) -> None:
        kind = CharClass.parse(kind)
        count = parse_count(value)
        if kind is CharClass.LETTER:
            self._letters = count
        elif kind is CharClass.SYMBOL:
            self._symbols = count
        else:
            self._digits = count

    # ---------- alphabet ----------

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def data(self, kind: CharClass | str) -> list[str]:
        return self._alphabet.data_for(kind)

    def all_data(self) -> Tuple[list[str], list[str], list[str]]:
        return self._alphabet.all_data()

    def add_chars(self, chars: Iterable[str]) -> None:
        self._alphabet.add(chars)

    def delete_chars(self, chars: Iterable[str]) -> None:
        self._alphabet.delete(chars)

    def replace_alphabet(self, chars: Iterable[str]) -> None:
        """
        Rebuild the alphabet from chars.

        If the new alphabet lacks a class that has a nonzero count, the
        previous alphabet is restored and MissingCharacterClass is raised.
        """
        previous = self._alphabet.copy()
        self._alphabet.replace_all(chars)
        try:
            self._alphabet.check_consistency(self.counts)
        except MissingCharacterClass:
            self._alphabet = previous
            raise

    def clear(self, kind: CharClass | str) -> None:
        self._alphabet.clear(kind)

    def clear_all(self) -> None:
        self._alphabet.clear_all()

    # ---------- generation ----------

    def _get_rng(self) -> random.Random:
        if self._rng is None:
            self._rng = make_rng(self.config)
        return self._rng

    def generate(self) -> None:
        """
        Generate a fresh key from the current counts and alphabet.

        Raises MissingCharacterClass if a requested class has no characters
        and KeySizeError if the key could not fit in memory. On failure the
        previous key is kept.
        """
        counts = self.counts
        try:
            self._alphabet.check_consistency(counts)
        except MissingCharacterClass as exc:
            logger.warning("Cannot generate key: %s", exc)
            raise

        total = sum(counts)
        if total > BOUNDED_MAX:
            raise KeySizeError(f"Requested key length {describe(total)} exceeds {BOUNDED_MAX}")

        unit = self._unit
        rng = self._get_rng()
        started = time.perf_counter()

        # Snapshot inputs; workers only see immutable values.
        sizes: list[int] = []
        tables: list[bytes] = []
        seeds: list[int] = []
        for kind, count in zip(CLASS_ORDER, counts):
            table = self._alphabet.table_for(kind)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "%s: %d chars in %d chunk(s) of <= %s",
                    kind, count, chunk_count(count, unit), describe(unit),
                )
            for size in divide(count, unit):
                sizes.append(size)
                tables.append(table)
                seeds.append(rng.getrandbits(64))

        buffer = bytearray()
        if sizes:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                for part in pool.map(sample_chunk, sizes, tables, seeds):
                    buffer += part

        rng.shuffle(buffer)
        self._key = buffer.decode("ascii")

        logger.debug(
            "Generated key of length %d from %d chunk(s) in %.4fs",
            len(self._key), len(sizes), time.perf_counter() - started,
        )

    # Names used by earlier releases.
    join = generate
    set_val = set_key

    def _tally(self, text: str) -> Counts:
        """Per-class counts of text, counted in unit-sized slices."""
        if len(text) <= self._unit:
            return count_classes(text)

        slices = []
        start = 0
        for size in divide(len(text), self._unit):
            slices.append(text[start:start + size])
            start += size

        letters = symbols = digits = 0
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            for n_ltr, n_sbl, n_num in pool.map(count_classes, slices):
                letters += n_ltr
                symbols += n_sbl
                digits += n_num
        return letters, symbols, digits

    # ---------- combination ----------

    def copy(self) -> "RandKey":
        clone = RandKey(*self.counts, config=self.config)
        clone._unit = self._unit
        clone._alphabet = self._alphabet.copy()
        clone._key = self._key
        return clone

    def __iadd__(self, other: object) -> "RandKey":
        if not isinstance(other, RandKey):
            return NotImplemented
        self._letters += other._letters
        self._symbols += other._symbols
        self._digits += other._digits
        self._key = self._key + other._key
        self._alphabet = self._alphabet.union(other._alphabet)
        return self

    def __add__(self, other: object) -> "RandKey":
        if not isinstance(other, RandKey):
            return NotImplemented
        combined = self.copy()
        combined += other
        return combined

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RandKey):
            return NotImplemented
        return (
            self.counts == other.counts
            and self._key == other._key
            and self._unit == other._unit
            and self._alphabet == other._alphabet
        )

    def __repr__(self) -> str:
        return (
            f"RandKey(letters={describe(self._letters)}, symbols={describe(self._symbols)}, "
            f"digits={describe(self._digits)}, unit={describe(self._unit)}, len={len(self._key)})"
        )
