# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Line-oriented parser for scanned account number entries.

An entry spans four physical lines: three glyph rows followed by a blank
separator. The parser keeps a running line counter for the whole stream, so
the row within an entry is always ``(line_number - 1) % 4``. When a line is
malformed the rest of the entry is skipped silently and parsing resumes at
the next entry boundary.
"""
from __future__ import annotations

import logging

from .models import (
    EntryBadDigits,
    EntryError,
    EntryIncomplete,
    EntrySuccess,
    LineStatus,
    ParseError,
)
from .register import DIGITS_PER_ENTRY, EntryRegister
from .segments import GLYPH_ROWS, GLYPH_WIDTH, bit_pos, close_matches, on_char

logger = logging.getLogger(__name__)

LINES_PER_ENTRY = GLYPH_ROWS + 1
SEPARATOR_ROW = GLYPH_ROWS

LINE_TOO_LONG = "Input line is too long."


class LineParser:
    """Stateful parser fed one physical line at a time.

    Create one parser per input stream; the register and counters are not
    meant to be shared between streams.
    """

    def __init__(self) -> None:
        self.register = EntryRegister()
        self._line_number = 0
        self._skip = False

    @property
    def line_number(self) -> int:
        """1-based number of the last line processed (0 before any line)."""
        return self._line_number

    @property
    def skipping(self) -> bool:
        return self._skip

    @property
    def row(self) -> int:
        return (self._line_number - 1) % LINES_PER_ENTRY

    def process_line(self, line: str) -> LineStatus:
        self._line_number += 1
        row = self.row

        if row == 0:
            if self._skip:
                logger.debug("resynchronised at line %d", self._line_number)
            self._skip = False
            self.register.clear()
        elif self._skip:
            return EntryIncomplete()

        if row < SEPARATOR_ROW:
            error = self._scan(line, row)
            if error is not None:
                return error
            return EntryIncomplete()

        return self._read_register()

    def _scan(self, line: str, row: int) -> EntryError | None:
        for col, ch in enumerate(line):
            digit_index, pos = divmod(col, GLYPH_WIDTH)
            if digit_index >= DIGITS_PER_ENTRY:
                if ch.isspace():
                    continue
                return self._fail(LINE_TOO_LONG, col, row)

            lit = on_char(row, pos)
            if lit is None:
                if ch != " ":
                    return self._fail(f"Expected space but found '{ch}'.", col, row)
            elif ch == lit:
                self.register.set_segment(digit_index, bit_pos(row, pos))
            elif ch != " ":
                return self._fail(f"Expected space or '{lit}' but found '{ch}'.", col, row)
        return None

    def _fail(self, message: str, col: int, row: int) -> EntryError:
        self._skip = True
        error = ParseError(message=message, line_number=self._line_number, col=col, row=row)
        logger.debug("line %d col %d row %d: %s", error.line_number, col, row, message)
        return EntryError(error=error)

    def _read_register(self) -> LineStatus:
        account_number = self.register.digits()
        illegible = self.register.illegible_positions()
        if not illegible:
            return EntrySuccess(account_number=account_number)

        alternates = []
        if len(illegible) == 1:
            index = illegible[0]
            for digit in close_matches(self.register[index]):
                alternates.append(account_number[:index] + digit + account_number[index + 1 :])
        return EntryBadDigits(account_number=account_number, alternates=alternates)
