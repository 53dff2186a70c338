"""
Character classes and the per-engine alphabet.

The alphabet is three disjoint ordered sets (letters, symbols, digits)
of printable ASCII characters. Which set a character lands in is always
decided by its ASCII classification, never by the caller.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Tuple

from .errors import (
    DeleteNonexistentValue,
    InvalidChar,
    InvalidKind,
    MissingCharacterClass,
)

_LETTERS = frozenset(string.ascii_letters)
_SYMBOLS = frozenset(string.punctuation)
_DIGITS = frozenset(string.digits)


class CharClass(Enum):
    LETTER = "letter"
    SYMBOL = "symbol"
    DIGIT = "digit"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, kind: "CharClass | str") -> "CharClass":
        """
        Resolve a class selector.

        Accepts a CharClass member or one of the short/long names
        ("ltr", "letter", "sbl", "symbol", "num", "digit", ...).
        OTHER is not a selectable class.
        """
        if isinstance(kind, CharClass):
            if kind is CharClass.OTHER:
                raise InvalidKind(kind)
            return kind
        if isinstance(kind, str):
            found = _ALIASES.get(kind.lower())
            if found is not None:
                return found
        raise InvalidKind(kind)


_ALIASES = {
    "ltr": CharClass.LETTER,
    "letter": CharClass.LETTER,
    "letters": CharClass.LETTER,
    "sbl": CharClass.SYMBOL,
    "symbol": CharClass.SYMBOL,
    "symbols": CharClass.SYMBOL,
    "num": CharClass.DIGIT,
    "digit": CharClass.DIGIT,
    "digits": CharClass.DIGIT,
}

# Fixed generation order.
CLASS_ORDER: Tuple[CharClass, CharClass, CharClass] = (
    CharClass.LETTER,
    CharClass.SYMBOL,
    CharClass.DIGIT,
)


def classify(ch: str) -> CharClass:
    """Return the ASCII class of a single character."""
    if ch in _LETTERS:
        return CharClass.LETTER
    if ch in _SYMBOLS:
        return CharClass.SYMBOL
    if ch in _DIGITS:
        return CharClass.DIGIT
    return CharClass.OTHER


def validate_char(ch: str) -> None:
    """Raise InvalidChar unless ch is printable ASCII (space included)."""
    if not ch.isascii() or not ch.isprintable():
        raise InvalidChar(ch)


def count_classes(text: str) -> Tuple[int, int, int]:
    """
    Count letters, symbols and digits in text.

    count_classes("ab123_c53") == (3, 1, 5)

    Characters outside the three classes (space) are not counted.
    Non-ASCII input raises InvalidChar.
    """
    if not text.isascii():
        raise InvalidChar(next(ch for ch in text if not ch.isascii()))
    letters = symbols = digits = 0
    for ch in text:
        if ch in _LETTERS:
            letters += 1
        elif ch in _SYMBOLS:
            symbols += 1
        elif ch in _DIGITS:
            digits += 1
    return letters, symbols, digits


def _iter_chars(chars: Iterable[str]) -> Iterator[str]:
    # Accept both "abc" and ["a", "b", "c"] (or ["ab", "c"]).
    for item in chars:
        yield from item


def _validated(chars: Iterable[str]) -> list[str]:
    out = list(_iter_chars(chars))
    for ch in out:
        validate_char(ch)
    return out


def _default_set(members: frozenset) -> list[str]:
    return sorted(members)


@dataclass
class Alphabet:
    """
    Letters, symbols and digits enabled for generation.

    Each list is kept free of duplicates and sorted by ASCII code.
    """

    letters: list[str] = field(default_factory=lambda: _default_set(_LETTERS))
    symbols: list[str] = field(default_factory=lambda: _default_set(_SYMBOLS))
    digits: list[str] = field(default_factory=lambda: _default_set(_DIGITS))

    @classmethod
    def empty(cls) -> "Alphabet":
        return cls(letters=[], symbols=[], digits=[])

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> "Alphabet":
        alphabet = cls.empty()
        alphabet.add(chars)
        return alphabet

    # --- queries ---

    def _subset(self, kind: CharClass | str) -> list[str]:
        kind = CharClass.parse(kind)
        if kind is CharClass.LETTER:
            return self.letters
        if kind is CharClass.SYMBOL:
            return self.symbols
        return self.digits

    def data_for(self, kind: CharClass | str) -> list[str]:
        """Return a copy of the characters enabled for one class."""
        return list(self._subset(kind))

    def table_for(self, kind: CharClass | str) -> bytes:
        """The class characters as ASCII bytes, for index lookups."""
        return "".join(self._subset(kind)).encode("ascii")

    def all_data(self) -> Tuple[list[str], list[str], list[str]]:
        return list(self.letters), list(self.symbols), list(self.digits)

    def __contains__(self, ch: object) -> bool:
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        kind = classify(ch)
        return kind is not CharClass.OTHER and ch in self._subset(kind)

    def __len__(self) -> int:
        return len(self.letters) + len(self.symbols) + len(self.digits)

    def check_consistency(self, counts: Iterable[int]) -> None:
        """
        Make sure every class with a nonzero count has characters.

        counts is ordered like CLASS_ORDER. Raises MissingCharacterClass
        for the first offending class.
        """
        for kind, count in zip(CLASS_ORDER, counts):
            if count and not self._subset(kind):
                raise MissingCharacterClass(kind)

    # --- mutation ---

    def add(self, chars: Iterable[str]) -> None:
        """Merge characters into their classes; space is dropped."""
        incoming = _validated(chars)
        self._merge(incoming)

    def delete(self, chars: Iterable[str]) -> None:
        """
        Remove characters from whichever class holds them.

        Nothing is removed unless every character is valid and present.
        """
        outgoing = _validated(chars)
        for ch in outgoing:
            if ch not in self:
                raise DeleteNonexistentValue(ch)
        doomed = set(outgoing)
        self.letters = [c for c in self.letters if c not in doomed]
        self.symbols = [c for c in self.symbols if c not in doomed]
        self.digits = [c for c in self.digits if c not in doomed]

    def replace_all(self, chars: Iterable[str]) -> None:
        """
        Rebuild all three classes from chars.

        Callers are expected to run check_consistency afterwards.
        """
        incoming = _validated(chars)
        self.letters, self.symbols, self.digits = [], [], []
        self._merge(incoming)

    def clear(self, kind: CharClass | str) -> None:
        self._subset(kind).clear()

    def clear_all(self) -> None:
        self.letters.clear()
        self.symbols.clear()
        self.digits.clear()

    def _merge(self, chars: Iterable[str]) -> None:
        buckets = {
            CharClass.LETTER: set(self.letters),
            CharClass.SYMBOL: set(self.symbols),
            CharClass.DIGIT: set(self.digits),
        }
        for ch in chars:
            kind = classify(ch)
            if kind is not CharClass.OTHER:
                buckets[kind].add(ch)
        self.letters = sorted(buckets[CharClass.LETTER])
        self.symbols = sorted(buckets[CharClass.SYMBOL])
        self.digits = sorted(buckets[CharClass.DIGIT])

    # --- copies ---

    def copy(self) -> "Alphabet":
        return Alphabet(
            letters=list(self.letters),
            symbols=list(self.symbols),
            digits=list(self.digits),
        )

    def union(self, other: "Alphabet") -> "Alphabet":
        merged = self.copy()
        merged.add(other.letters + other.symbols + other.digits)
        return merged
