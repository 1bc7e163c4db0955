import io
import sys

import pytest

from bankocr import FileLineSource, iter_stream_lines, iter_text_lines


def test_iter_text_lines_keeps_blank_lines():
    assert list(iter_text_lines("a\n\nb\r\n\n")) == ["a", "", "b", ""]


def test_iter_stream_lines_strips_terminators():
    stream = io.StringIO(" _ \r\n| |\n|_|\n\n")
    assert list(iter_stream_lines(stream)) == [" _ ", "| |", "|_|", ""]


def test_file_line_source_reads_in_order(tmp_path):
    path = tmp_path / "entries.txt"
    path.write_text("line one\n\nline three\n", encoding="utf-8")

    source = FileLineSource(path)

    assert list(source) == ["line one", "", "line three"]
    # re-iterating re-reads the file
    assert list(source) == ["line one", "", "line three"]


def test_file_line_source_missing_file(tmp_path):
    source = FileLineSource(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        list(source)


def test_file_line_source_reports_decode_errors(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b" _ \n\xff\xfe\n")

    with pytest.raises(ValueError) as err:
        list(FileLineSource(path, encoding="utf-8"))

    message = str(err.value)
    assert "latin1.txt" in message
    assert "utf-8" in message


def test_file_line_source_reads_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("first\n\nsecond\n"))
    assert list(FileLineSource("-")) == ["first", "", "second"]
