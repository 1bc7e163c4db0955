# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Command-line entry for decoding scanned account number files.

Reads glyph lines from a file (or stdin with ``-``), writes one report line
per entry to ``--out`` (stdout by default) and exits non-zero when the input
cannot be read.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import IO, List, Optional, Sequence

from .config import LOG_LEVELS, OUTPUT_FORMATS, Settings, configure_logging, format_run_summary
from .input_handler import STDIN_PATH, FileLineSource
from .interfaces import ResultSink
from .pipeline import Processor
from .report import JsonlReportSink, ReportSummary, TextReportSink, write_results


def _parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bankocr", description="Decode scanned bank account numbers")
    parser.add_argument("input", help="Input file with glyph entries, or '-' for stdin")
    parser.add_argument("--out", default="-", help="Output file path or '-' for stdout")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=settings.output_format,
        dest="output_format",
        help="Report format (default: %(default)s)",
    )
    parser.add_argument("--encoding", default=settings.encoding, help="Input encoding (default: %(default)s)")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def build_sink(output_format: str, stream: IO[str]) -> ResultSink:
    if output_format == "jsonl":
        return JsonlReportSink(stream)
    return TextReportSink(stream)


def run(source: FileLineSource, stream: IO[str], output_format: str) -> ReportSummary:
    results = Processor().process(source)
    return write_results(results, build_sink(output_format, stream))


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    args = _parse_args(argv, settings)
    settings = Settings(
        encoding=args.encoding,
        output_format=args.output_format,
        log_level=args.log_level,
        log_format=settings.log_format,
    )
    logger = configure_logging(settings)

    if args.input != STDIN_PATH and not Path(args.input).is_file():
        print(f"[ERROR] {args.input}: input file not found", file=sys.stderr)
        return 2

    source = FileLineSource(args.input, encoding=settings.encoding)
    try:
        if args.out == "-":
            summary = run(source, sys.stdout, settings.output_format)
        else:
            with Path(args.out).open("w", encoding="utf-8") as stream:
                summary = run(source, stream, settings.output_format)
    except (OSError, ValueError, LookupError) as exc:
        print(f"[ERROR] {args.input}: {exc}", file=sys.stderr)
        return 2

    logger.info(
        format_run_summary(args.input, summary.total, summary.by_kind, fmt=settings.log_format)
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
