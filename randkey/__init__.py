"""
Random key generator with arbitrary-precision per-class counts.
"""

from .alphabet import Alphabet, CharClass, classify, count_classes
from .cli import generate_key
from .config import DEFAULT_CONFIG, RandKeyConfig
from .engine import KeyMode, RandKey
from .errors import (
    DeleteNonexistentValue,
    InconsistentField,
    InvalidChar,
    InvalidKind,
    InvalidNumber,
    InvalidUnit,
    KeySizeError,
    MissingCharacterClass,
    RandKeyError,
)

__all__ = [
    "Alphabet",
    "CharClass",
    "classify",
    "count_classes",
    "generate_key",
    "DEFAULT_CONFIG",
    "RandKeyConfig",
    "KeyMode",
    "RandKey",
    "RandKeyError",
    "InvalidNumber",
    "InvalidChar",
    "DeleteNonexistentValue",
    "MissingCharacterClass",
    "InvalidUnit",
    "InconsistentField",
    "InvalidKind",
    "KeySizeError",
]
