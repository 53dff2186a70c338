"""
Error types raised by the key generator.

Every failure the engine can report derives from RandKeyError, so callers
can catch the whole family at once. The subclasses also inherit from the
closest built-in exception where one fits.
"""

from __future__ import annotations

from .numtext import describe


def _describe_counts(counts: object) -> str:
    if isinstance(counts, tuple):
        return "(" + ", ".join(describe(c) for c in counts) + ")"
    return describe(counts)


class RandKeyError(Exception):
    """Generic key generator error."""


class InvalidNumber(RandKeyError, ValueError):
    """Text is not a valid non-negative integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"{describe(value)} is not a valid non-negative integer")


class InvalidChar(RandKeyError, ValueError):
    """Character is non-ASCII or an ASCII control character."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid character {char!r}: only printable ASCII is allowed")


class DeleteNonexistentValue(RandKeyError, KeyError):
    """Tried to remove a character the alphabet does not contain."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(char)

    def __str__(self) -> str:
        return f"Cannot delete {self.char!r}: not present in the alphabet"


class MissingCharacterClass(RandKeyError):
    """A class has a nonzero count but no characters to draw from."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"No characters available for {kind} but its count is nonzero")


class InvalidUnit(RandKeyError, ValueError):
    """Unit (chunk size) must be positive."""

    def __init__(self, value: object = 0) -> None:
        self.value = value
        super().__init__(f"Unit must be greater than zero, got {describe(value)}")


class InconsistentField(RandKeyError):
    """New key text does not match the stored per-class counts."""

    def __init__(self, field: str, expected: object = None, actual: object = None) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        msg = f"The {field!r} field is inconsistent"
        if expected is not None:
            msg += f": expected {_describe_counts(expected)}, got {_describe_counts(actual)}"
        super().__init__(msg)


class InvalidKind(RandKeyError, ValueError):
    """Unknown character class (or mode) selector."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"No {describe(kind)} kind of field in RandKey")


class KeySizeError(RandKeyError, OverflowError):
    """Requested key is larger than can be held in memory."""
