"""
Tests for count parsing, chunking and index sampling.
"""

import random
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from randkey.chunker import chunk_count, divide
from randkey.counter import checked_sub, format_count, parse_count, to_bounded
from randkey.errors import InvalidNumber, InvalidUnit, KeySizeError
from randkey.sampler import sample_chunk, sample_indices


@pytest.mark.parametrize("text", ["abc", "-1", "", " 5", "+5", "1_000", "你好", "١٢٣", "1.5"])
def test_parse_count_rejects_invalid_text(text):
    with pytest.raises(InvalidNumber):
        parse_count(text)


def test_parse_count_accepts_huge_numbers():
    text = "9" * 200
    assert parse_count(text) == int(text)
    # Past the interpreter's int/str digit limit.
    assert parse_count("9" * 5000) == 10**5000 - 1
    assert parse_count("1" + "0" * 9000) == 10**9000
    assert parse_count("0") == 0
    assert parse_count(42) == 42


@pytest.mark.parametrize("value", [-1, True, 1.0, None])
def test_parse_count_rejects_non_count_values(value):
    with pytest.raises(InvalidNumber):
        parse_count(value)


def test_checked_sub_refuses_underflow():
    assert checked_sub(5, 5) == 0
    with pytest.raises(ArithmeticError):
        checked_sub(1, 2)


def test_to_bounded():
    assert to_bounded(sys.maxsize) == sys.maxsize
    with pytest.raises(KeySizeError):
        to_bounded(sys.maxsize + 1)


@given(st.integers(min_value=0, max_value=10**40), st.integers(min_value=10**36, max_value=10**40))
def test_divide_large_counts(total, unit):
    chunks = list(divide(total, unit))
    assert sum(chunks) == total
    assert all(0 < c <= unit for c in chunks)
    assert len(chunks) == chunk_count(total, unit)


@given(st.integers(min_value=0, max_value=5000), st.integers(min_value=1, max_value=700))
def test_divide_sums_to_total(total, unit):
    chunks = list(divide(total, unit))
    assert sum(chunks) == total
    assert all(c <= unit for c in chunks)
    assert len(chunks) == -(-total // unit)


def test_divide_zero_yields_nothing():
    assert list(divide(0, 10)) == []
    assert chunk_count(0, 10) == 0


def test_divide_shape():
    assert list(divide(10, 4)) == [4, 4, 2]
    assert list(divide(8, 4)) == [4, 4]
    assert list(divide(3, 4)) == [3]


def test_divide_rejects_zero_unit():
    with pytest.raises(InvalidUnit):
        list(divide(10, 0))


@given(st.integers(min_value=0, max_value=2000), st.integers(min_value=1, max_value=100))
def test_sample_indices_in_range(count, size):
    idxs = sample_indices(count, size, random.Random(7))
    assert len(idxs) == count
    assert all(0 <= i < size for i in idxs)


def test_sample_indices_empty_alphabet():
    assert sample_indices(0, 0) == []
    with pytest.raises(ValueError):
        sample_indices(3, 0)


def test_sample_chunk_is_seeded_and_uses_table():
    table = b"xyz"
    first = sample_chunk(500, table, seed=99)
    assert first == sample_chunk(500, table, seed=99)
    assert len(first) == 500
    assert set(first) <= set(table)


def test_format_count_has_no_digit_limit():
    assert format_count(0) == "0"
    assert format_count(12345) == "12345"
    assert format_count(10**5000) == "1" + "0" * 5000
    assert format_count(10**5000 - 1) == "9" * 5000
    # Inner slices keep their leading zeros.
    assert format_count(10**1200 + 7) == "1" + "0" * 1199 + "7"
    assert parse_count(format_count(3**12000)) == 3**12000


def test_huge_values_in_error_messages():
    with pytest.raises(InvalidNumber) as exc_info:
        parse_count(-(10**5000))
    assert "5001-digit" in str(exc_info.value)

    with pytest.raises(KeySizeError) as exc_info:
        to_bounded(10**5000)
    assert "5001-digit" in str(exc_info.value)
