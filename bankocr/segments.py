# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Seven-segment glyph codec.

A glyph cell is 3 columns wide and 3 rows tall::

     _      row 0: top
    |_|     row 1: upper-left, middle, upper-right
    |_|     row 2: lower-left, bottom, lower-right

Each stroke owns one bit of a segment pattern. The top stroke is bit 7, the
middle row maps to bits 6/5/4 and the bottom row to bits 3/2/1 (left to
right). Bit 0 is never set: it absorbs the positions that can only hold a
space (the two top corners and the separator row).
"""
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

ILLEGIBLE = "?"

GLYPH_WIDTH = 3
GLYPH_ROWS = 3

SEGMENT_BITS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)

_ON_CHARS: Mapping[Tuple[int, int], str] = MappingProxyType(
    {
        (0, 1): "_",
        (1, 0): "|",
        (1, 1): "_",
        (1, 2): "|",
        (2, 0): "|",
        (2, 1): "_",
        (2, 2): "|",
    }
)

_BIT_POSITIONS: Mapping[Tuple[int, int], int] = MappingProxyType(
    {
        (0, 1): 7,
        (1, 0): 6,
        (1, 1): 5,
        (1, 2): 4,
        (2, 0): 3,
        (2, 1): 2,
        (2, 2): 1,
    }
)

_DIGIT_BY_PATTERN: Mapping[int, str] = MappingProxyType(
    {
        222: "0",
        18: "1",
        188: "2",
        182: "3",
        114: "4",
        230: "5",
        238: "6",
        146: "7",
        254: "8",
        246: "9",
    }
)

_PATTERN_BY_DIGIT: Mapping[str, int] = MappingProxyType(
    {digit: pattern for pattern, digit in _DIGIT_BY_PATTERN.items()}
)


def on_char(row: int, col: int) -> Optional[str]:
    """Return the character that marks a lit segment at ``(row, col)``.

    ``None`` means the position must always be blank.
    """
    return _ON_CHARS.get((row, col))


def bit_pos(row: int, col: int) -> int:
    return _BIT_POSITIONS.get((row, col), 0)


def decode(pattern: int) -> str:
    """Map a segment pattern to its digit, or ``ILLEGIBLE``."""
    return _DIGIT_BY_PATTERN.get(pattern, ILLEGIBLE)


def encode(digit: str) -> int:
    try:
        return _PATTERN_BY_DIGIT[digit]
    except KeyError:
        raise ValueError(f"No glyph for {digit!r}") from None


def close_matches(pattern: int) -> List[str]:
    """Digits reachable from ``pattern`` by toggling exactly one segment.

    Results follow ascending bit index. The digit ``pattern`` already decodes
    to (if any) is never included.
    """
    current = decode(pattern)
    matches: List[str] = []
    for bit in SEGMENT_BITS:
        candidate = decode(pattern ^ (1 << bit))
        if candidate != ILLEGIBLE and candidate != current:
            matches.append(candidate)
    return matches


def render(account_number: str) -> List[str]:
    """Render digits as the three glyph rows the parser reads back."""
    rows = [[] for _ in range(GLYPH_ROWS)]
    for digit in account_number:
        pattern = encode(digit)
        for row in range(GLYPH_ROWS):
            for col in range(GLYPH_WIDTH):
                lit = on_char(row, col)
                if lit is not None and pattern & (1 << bit_pos(row, col)):
                    rows[row].append(lit)
                else:
                    rows[row].append(" ")
    return ["".join(chars) for chars in rows]
