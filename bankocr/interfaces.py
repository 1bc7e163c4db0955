# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Interfaces for the collaborators around the parsing core."""
from __future__ import annotations

from typing import Iterator, Protocol

from .models import EntryResult


class LineSource(Protocol):
    """Yields text lines in document order, blank lines included."""

    def __iter__(self) -> Iterator[str]:
        ...


class ResultSink(Protocol):
    def emit(self, result: EntryResult) -> None:
        ...
