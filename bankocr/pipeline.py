# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Composition of the line parser with the checksum engine."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .checksum import find_adjacent, is_checksum_valid
from .models import (
    BadChecksum,
    BadDigits,
    EntryBadDigits,
    EntryError,
    EntryIncomplete,
    EntryResult,
    EntrySuccess,
    InvalidCharacter,
    LineStatus,
    Success,
)
from .parser import LineParser

logger = logging.getLogger(__name__)


@dataclass
class Processor:
    """Turn a stream of lines into one classified result per entry.

    Results are produced lazily: each one is yielded as soon as the line that
    completes (or breaks) its entry has been read.
    """

    parser: LineParser = field(default_factory=LineParser)

    def process(self, lines: Iterable[str]) -> Iterator[EntryResult]:
        for line in lines:
            result = self.classify(self.parser.process_line(line))
            if result is None:
                continue
            logger.debug("line %d: %s", result.line_number, result.kind)
            yield result

    def classify(self, status: LineStatus) -> Optional[EntryResult]:
        line_number = self.parser.line_number
        if isinstance(status, EntrySuccess):
            number = status.account_number
            if is_checksum_valid(number):
                return Success(account_number=number, line_number=line_number)
            return BadChecksum(
                account_number=number,
                alternates=find_adjacent(number),
                line_number=line_number,
            )
        if isinstance(status, EntryBadDigits):
            return BadDigits(
                account_number=status.account_number,
                alternates=[alt for alt in status.alternates if is_checksum_valid(alt)],
                line_number=line_number,
            )
        if isinstance(status, EntryError):
            return InvalidCharacter(error=status.error)
        if isinstance(status, EntryIncomplete):
            return None
        raise TypeError(f"Unexpected parser status {status!r}")  # pragma: no cover


def process_lines(lines: Iterable[str]) -> Iterator[EntryResult]:
    """Process ``lines`` with a fresh parser."""
    return Processor().process(lines)
