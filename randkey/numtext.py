"""
Decimal text for ints of any size.

int() and str() refuse numbers past the interpreter's digit limit
(sys.get_int_max_str_digits), so counts are converted in fixed-size
slices that always stay below it.
"""

from __future__ import annotations

# Digits per slice; well under the 640-digit minimum the limit can be set to.
SLICE_DIGITS = 500
_SLICE_BASE = 10 ** SLICE_DIGITS

# Above this many bits, messages show a digit count instead of the number.
_SUMMARY_BITS = 256


def parse_decimal(text: str) -> int:
    """Parse a string of ASCII digits. The caller validates the text."""
    value = 0
    for start in range(0, len(text), SLICE_DIGITS):
        piece = text[start:start + SLICE_DIGITS]
        value = value * 10 ** len(piece) + int(piece)
    return value


def format_decimal(value: int) -> str:
    """Decimal text of value, with no digit limit."""
    if value < 0:
        return "-" + format_decimal(-value)
    if value < _SLICE_BASE:
        return str(value)

    pieces = []
    while value:
        value, low = divmod(value, _SLICE_BASE)
        pieces.append(low)
    head = str(pieces.pop())
    return head + "".join(str(p).zfill(SLICE_DIGITS) for p in reversed(pieces))


def describe(value: object) -> str:
    """
    Short text for messages and reprs.

    Huge ints become "<N-digit number>"; anything else uses repr().
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if value.bit_length() > _SUMMARY_BITS:
            digits = len(format_decimal(abs(value)))
            sign = "-" if value < 0 else ""
            return f"<{sign}{digits}-digit number>"
        return str(value)
    return repr(value)
