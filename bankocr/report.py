# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Human-readable and JSON Lines reporting of entry results.

Text output follows the usual account-report conventions: a number that
needs no correction (or has exactly one correction) is printed on its own,
``ERR`` marks a checksum failure with no fix, ``ILL`` marks illegible digits
with no fix and ``AMB`` lists several equally plausible fixes.
"""
from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from typing import IO, Dict, Iterable, List

from .interfaces import ResultSink
from .models import BadChecksum, BadDigits, EntryResult, InvalidCharacter, Success


def _format_candidates(account_number: str, alternates: List[str], unresolved: str) -> str:
    if len(alternates) == 1:
        return alternates[0]
    if not alternates:
        return f"{account_number} {unresolved}"
    listed = ", ".join(f"'{alt}'" for alt in alternates)
    return f"{account_number} AMB [{listed}]"


def format_result(result: EntryResult) -> str:
    if isinstance(result, Success):
        return result.account_number
    if isinstance(result, BadChecksum):
        return _format_candidates(result.account_number, result.alternates, "ERR")
    if isinstance(result, BadDigits):
        return _format_candidates(result.account_number, result.alternates, "ILL")
    if isinstance(result, InvalidCharacter):
        err = result.error
        return f"ERROR: {err.line_number}:{err.col}: row {err.row}: {err.message}"
    raise TypeError(f"Unexpected result {result!r}")  # pragma: no cover


class TextReportSink(ResultSink):
    def __init__(self, stream: IO[str]) -> None:
        self.stream = stream

    def emit(self, result: EntryResult) -> None:
        self.stream.write(format_result(result))
        self.stream.write("\n")


class JsonlReportSink(ResultSink):
    """Write each result as one JSON object per line."""

    def __init__(self, stream: IO[str]) -> None:
        self.stream = stream

    def emit(self, result: EntryResult) -> None:
        payload = result.model_dump()
        if isinstance(result, InvalidCharacter):
            payload["line_number"] = result.line_number
        self.stream.write(json.dumps(payload, ensure_ascii=False))
        self.stream.write("\n")


@dataclass
class ReportSummary:
    total: int = 0
    by_kind: Dict[str, int] = field(default_factory=dict)


def write_results(results: Iterable[EntryResult], sink: ResultSink) -> ReportSummary:
    """Drain ``results`` into ``sink`` and count them per kind."""
    counts: Counter[str] = Counter()
    for result in results:
        sink.emit(result)
        counts[result.kind] += 1
    return ReportSummary(total=sum(counts.values()), by_kind=dict(counts))
