# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Account number checksum and single-segment correction search.

The checksum weights the rightmost digit by 1, the next by 2 and so on up to
9 for the leftmost digit; a number is valid when the weighted sum is a
multiple of 11.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

from .register import DIGITS_PER_ENTRY

CHECKSUM_MODULUS = 11

# Digits one segment toggle away from each other in glyph space.
_ALTERNATE_DIGITS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "0": ("8",),
        "1": ("7",),
        "2": (),
        "3": ("9",),
        "4": (),
        "5": ("6", "9"),
        "6": ("5", "8"),
        "7": ("1",),
        "8": ("0", "6", "9"),
        "9": ("3", "5", "8"),
    }
)

_ASCII_DIGITS = frozenset("0123456789")


def _is_account_number(value: str) -> bool:
    return len(value) == DIGITS_PER_ENTRY and all(ch in _ASCII_DIGITS for ch in value)


def is_checksum_valid(account_number: str) -> bool:
    """Return ``True`` when ``account_number`` passes the mod-11 checksum.

    Anything other than nine ASCII digits is reported as invalid. Passing a
    non-string is a programming error and raises :class:`TypeError`.
    """
    if not isinstance(account_number, str):
        raise TypeError(f"account number must be str, not {type(account_number).__name__}")
    if not _is_account_number(account_number):
        return False

    total = 0
    for weight, ch in enumerate(reversed(account_number), start=1):
        total += int(ch) * weight
    return total % CHECKSUM_MODULUS == 0


def alternate_digits(ch: str) -> Tuple[str, ...]:
    try:
        return _ALTERNATE_DIGITS[ch]
    except KeyError:
        raise ValueError(f"Not a digit: {ch!r}") from None


def find_adjacent(account_number: str) -> List[str]:
    """Find checksum-valid numbers one segment toggle away.

    Candidates are ordered by position, then by the alternate table order.
    No de-duplication is performed and no candidate is preferred over
    another.
    """
    if not isinstance(account_number, str) or not _is_account_number(account_number):
        raise ValueError(f"Expected {DIGITS_PER_ENTRY} digits, got {account_number!r}")

    candidates: List[str] = []
    for index, ch in enumerate(account_number):
        for alt in alternate_digits(ch):
            candidate = account_number[:index] + alt + account_number[index + 1 :]
            if is_checksum_valid(candidate):
                candidates.append(candidate)
    return candidates
