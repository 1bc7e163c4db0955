# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Segment register for one entry of nine digits."""
from __future__ import annotations

from typing import Iterator, List

from .segments import ILLEGIBLE, decode

DIGITS_PER_ENTRY = 9


class EntryRegister:
    """Accumulates segment bits for the nine digit cells of an entry.

    The register is owned by a single :class:`~bankocr.parser.LineParser` and
    cleared whenever a new entry starts.
    """

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots = bytearray(DIGITS_PER_ENTRY)

    def clear(self) -> None:
        for index in range(DIGITS_PER_ENTRY):
            self._slots[index] = 0

    def set_segment(self, index: int, bit: int) -> None:
        if not 0 <= index < DIGITS_PER_ENTRY:
            raise IndexError(f"digit index {index} outside entry")
        self._slots[index] |= 1 << bit

    def __getitem__(self, index: int) -> int:
        return self._slots[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots)

    def __len__(self) -> int:
        return DIGITS_PER_ENTRY

    def digits(self) -> str:
        """Decode every slot; illegible cells show as ``?``."""
        return "".join(decode(pattern) for pattern in self._slots)

    def illegible_positions(self) -> List[int]:
        return [idx for idx, pattern in enumerate(self._slots) if decode(pattern) == ILLEGIBLE]

    def __repr__(self) -> str:
        return f"EntryRegister({list(self._slots)!r})"
