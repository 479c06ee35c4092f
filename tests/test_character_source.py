"""Tests for TextStreamSource and open_source."""

import io
import sys

import pytest

from bufscan.scanner.config import ScannerConfig
from bufscan.source.character_source import (
    ExhaustedSource,
    TextStreamSource,
    open_source,
)


def _drain(source) -> str:
    out = []
    while c := source.next_char():
        out.append(c)
    return "".join(out)


# --- TextStreamSource ---

def test_next_char_across_small_buffers():
    src = TextStreamSource(io.StringIO("abcdefg"), buffer_size=3)
    assert _drain(src) == "abcdefg"
    assert src.next_char() == ""
    assert src.next_char() == ""


def test_read_line_terminators():
    src = TextStreamSource(io.StringIO("one\ntwo\r\nthree\rfour"), buffer_size=4)
    assert src.read_line() == "one"
    assert src.read_line() == "two"
    assert src.read_line() == "three"
    assert src.read_line() == "four"
    assert src.read_line() is None


def test_read_line_crlf_split_across_refill():
    # buffer_size=2 puts '\r' and '\n' in different chunks
    src = TextStreamSource(io.StringIO("a\r\nb"), buffer_size=2)
    assert src.read_line() == "a"
    assert src.read_line() == "b"


def test_read_line_empty_lines():
    src = TextStreamSource(io.StringIO("\n\nx\n"))
    assert src.read_line() == ""
    assert src.read_line() == ""
    assert src.read_line() == "x"
    assert src.read_line() is None


def test_chars_and_lines_interleave():
    src = TextStreamSource(io.StringIO("ab\ncd\n"), buffer_size=2)
    assert src.next_char() == "a"
    assert src.read_line() == "b"
    assert src.next_char() == "c"
    assert src.read_line() == "d"


def test_close_closes_stream_by_default():
    stream = io.StringIO("abc")
    src = TextStreamSource(stream)
    src.close()
    assert stream.closed
    assert src.next_char() == ""


def test_close_can_leave_stream_open():
    stream = io.StringIO("abc")
    TextStreamSource(stream, close_stream=False).close()
    assert not stream.closed


def test_exhausted_source():
    src = ExhaustedSource()
    assert src.next_char() == ""
    assert src.read_line() is None
    src.close()


# --- open_source ---

def test_open_source_path(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("x y\n", encoding="utf-8")
    src = open_source(path)
    assert _drain(src) == "x y\n"
    src.close()

    src = open_source(str(path))
    assert src.read_line() == "x y"
    src.close()


def test_open_source_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_source(tmp_path / "missing.txt")


def test_open_source_binary_stream_decodes():
    src = open_source(io.BytesIO("héllo".encode("latin-1")), ScannerConfig(encoding="latin-1"))
    assert _drain(src) == "héllo"


def test_open_source_passes_sources_through():
    src = ExhaustedSource()
    assert open_source(src) is src


def test_open_source_none_wraps_stdin(monkeypatch):
    fake = io.StringIO("7\n")
    monkeypatch.setattr(sys, "stdin", fake)
    src = open_source(None)
    assert src.next_char() == "7"
    src.close()
    assert not fake.closed


def test_open_source_rejects_unknown_types():
    with pytest.raises(TypeError, match="Cannot read characters"):
        open_source(42)


def test_open_source_without_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", None)
    src = open_source(None)
    assert isinstance(src, ExhaustedSource)
    assert src.next_char() == ""


# --- Incremental decoding ---

def test_multibyte_character_split_across_chunks():
    # "é" is two bytes in UTF-8; buffer_size=1 splits it
    src = TextStreamSource(io.BytesIO("aé b".encode("utf-8")), buffer_size=1, encoding="utf-8")
    assert _drain(src) == "aé b"


def test_strict_decode_error_after_valid_prefix():
    src = TextStreamSource(io.BytesIO(b"ok\xffmore"), encoding="utf-8", errors="strict")
    assert src.next_char() == "o"
    assert src.next_char() == "k"
    with pytest.raises(UnicodeDecodeError):
        src.next_char()
    with pytest.raises(UnicodeDecodeError):
        src.next_char()


def test_replace_decoding_substitutes_bad_bytes():
    src = TextStreamSource(io.BytesIO(b"a\xffb"), encoding="utf-8", errors="replace")
    assert _drain(src) == "a\ufffdb"


def test_open_source_path_keeps_crlf_for_read_line(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\ntwo\r\n")
    src = open_source(path)
    assert src.read_line() == "one"
    assert src.read_line() == "two"
    assert src.read_line() is None
    src.close()
