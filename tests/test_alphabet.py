"""
Test character classification and alphabet mutation.
"""

import string

import pytest

from randkey.alphabet import Alphabet, CharClass, classify, count_classes
from randkey.errors import (
    DeleteNonexistentValue,
    InvalidChar,
    InvalidKind,
    MissingCharacterClass,
)


def test_classify():
    assert classify("a") is CharClass.LETTER
    assert classify("Z") is CharClass.LETTER
    assert classify("~") is CharClass.SYMBOL
    assert classify("7") is CharClass.DIGIT
    assert classify(" ") is CharClass.OTHER
    assert classify("é") is CharClass.OTHER


def test_default_alphabet_covers_printable_ascii():
    alphabet = Alphabet()
    assert "".join(alphabet.letters) == "".join(sorted(string.ascii_letters))
    assert "".join(alphabet.symbols) == "".join(sorted(string.punctuation))
    assert alphabet.digits == list(string.digits)
    assert len(alphabet) == 94


def test_class_parse_aliases():
    assert CharClass.parse("ltr") is CharClass.LETTER
    assert CharClass.parse("Symbols") is CharClass.SYMBOL
    assert CharClass.parse("num") is CharClass.DIGIT
    for bad in ("foo", CharClass.OTHER, 3):
        with pytest.raises(InvalidKind):
            CharClass.parse(bad)


def test_count_classes():
    assert count_classes("ab123_c53") == (3, 1, 5)
    assert count_classes("a b") == (2, 0, 0)
    assert count_classes("") == (0, 0, 0)
    with pytest.raises(InvalidChar):
        count_classes("abc你")


def test_add_classifies_and_deduplicates():
    alphabet = Alphabet.empty()
    alphabet.add(["b", "a", "b", "!", "9", " "])
    assert alphabet.all_data() == (["a", "b"], ["!"], ["9"])
    alphabet.add("ab")
    assert alphabet.letters == ["a", "b"]


@pytest.mark.parametrize("bad", ["\n", "\x00", "\x7f", "你", "é"])
def test_add_rejects_invalid_chars(bad):
    alphabet = Alphabet.empty()
    with pytest.raises(InvalidChar):
        alphabet.add(["a", bad])
    assert len(alphabet) == 0


def test_delete():
    alphabet = Alphabet()
    alphabet.delete(list("0123456789"))
    assert alphabet.digits == []
    assert "a" in alphabet


def test_delete_missing_value_is_atomic():
    alphabet = Alphabet()
    alphabet.delete(["a"])
    with pytest.raises(DeleteNonexistentValue) as exc_info:
        alphabet.delete(["b", "a"])
    assert exc_info.value.char == "a"
    assert "b" in alphabet


@pytest.mark.parametrize("bad", ["\t", "ß"])
def test_delete_invalid_char(bad):
    with pytest.raises(InvalidChar):
        Alphabet().delete([bad])


def test_replace_all_drops_other_chars():
    alphabet = Alphabet()
    alphabet.replace_all(["1", "a", ".", " "])
    assert alphabet.all_data() == (["a"], ["."], ["1"])
    with pytest.raises(InvalidChar):
        alphabet.replace_all(["\x1b"])


def test_check_consistency():
    alphabet = Alphabet.from_chars("1")
    alphabet.check_consistency((0, 0, 5))
    with pytest.raises(MissingCharacterClass) as exc_info:
        alphabet.check_consistency((1, 0, 5))
    assert exc_info.value.kind is CharClass.LETTER


def test_clear_and_union():
    left = Alphabet()
    left.clear("sbl")
    assert left.symbols == []
    right = Alphabet.from_chars("!?")
    merged = left.union(right)
    assert merged.symbols == ["!", "?"]
    assert left.symbols == []
    left.clear_all()
    assert len(left) == 0


def test_copy_is_independent():
    original = Alphabet()
    clone = original.copy()
    clone.delete("a")
    assert "a" in original
    assert "a" not in clone
