# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 bankocr contributors

"""Line sources feeding the parser.

All sources yield lines in document order with their line terminators
removed. Blank lines are kept since they close each entry.
"""
from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import IO, Iterator

from .interfaces import LineSource

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def iter_text_lines(text: str) -> Iterator[str]:
    """Yield the lines of an in-memory document."""
    yield from text.splitlines()


def iter_stream_lines(stream: IO[str]) -> Iterator[str]:
    """Lazily yield lines from an open text stream."""
    for raw in stream:
        yield raw.rstrip("\r\n")


class FileLineSource(LineSource):
    """Read lines from a file path, or standard input for ``"-"``.

    The file is opened when iteration starts and closed when it ends, so the
    source can be iterated again to re-read the file.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = str(path)
        self.encoding = encoding

    def _open_stdin(self) -> IO[str]:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return sys.stdin
        return io.TextIOWrapper(buffer, encoding=self.encoding)

    def __iter__(self) -> Iterator[str]:
        if self.path == STDIN_PATH:
            stream = self._open_stdin()
            try:
                yield from self._decode(stream)
            finally:
                if stream is not sys.stdin:
                    stream.detach()
            return

        path = Path(self.path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {self.path}")

        logger.info("reading %s (%s)", self.path, self.encoding)
        with path.open("r", encoding=self.encoding) as stream:
            yield from self._decode(stream)

    def _decode(self, stream: IO[str]) -> Iterator[str]:
        try:
            yield from iter_stream_lines(stream)
        except UnicodeDecodeError as exc:
            raise ValueError(
                f"Cannot decode {self.path} as {self.encoding}: {exc.reason} at byte {exc.start}"
            ) from exc
