# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

import pytest

from bankocr.checksum import alternate_digits, find_adjacent, is_checksum_valid


def test_can_validate_checksum():
    assert is_checksum_valid("000000000")
    assert is_checksum_valid("500000301")
    assert is_checksum_valid("135802539")
    assert is_checksum_valid("000000019")
    assert not is_checksum_valid("000000001")


@pytest.mark.parametrize("value", ["00000019", "0000000019", "", "49006771?", "12345678a", "１２３４５６７８９"])
def test_malformed_strings_are_invalid(value):
    assert not is_checksum_valid(value)


def test_non_string_is_rejected():
    with pytest.raises(TypeError):
        is_checksum_valid(123456789)


def test_alternate_digits_table():
    assert alternate_digits("0") == ("8",)
    assert alternate_digits("2") == ()
    assert alternate_digits("4") == ()
    assert alternate_digits("8") == ("0", "6", "9")
    assert alternate_digits("9") == ("3", "5", "8")
    with pytest.raises(ValueError):
        alternate_digits("?")


def test_alternate_digits_are_symmetric():
    for digit in "0123456789":
        for alt in alternate_digits(digit):
            assert digit in alternate_digits(alt)


def test_find_adjacent_single_correction():
    assert find_adjacent("723456789") == ["123456789"]


def test_find_adjacent_valid_number_has_no_neighbours():
    assert find_adjacent("123456789") == []


def test_find_adjacent_keeps_position_order():
    assert find_adjacent("490067715") == ["490867715", "490067115", "490067719"]


def test_find_adjacent_requires_nine_digits():
    with pytest.raises(ValueError):
        find_adjacent("49006771?")
    with pytest.raises(ValueError):
        find_adjacent("12345678")
