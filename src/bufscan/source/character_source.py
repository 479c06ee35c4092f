"""Character sources the scanner reads from.

A source hands out one character at a time and owns whatever buffering sits
underneath. Sources are allowed to raise OSError; the scanner is the layer
that turns those into read state.
"""

import codecs
import io
import os
import sys
from typing import BinaryIO, Protocol, TextIO

from bufscan.scanner.config import ScannerConfig


class CharacterSource(Protocol):
    def next_char(self) -> str:
        """Return the next character, or "" at end of input."""
        ...

    def read_line(self) -> str | None:
        """Return the next line without its terminator, or None at end of input."""
        ...

    def close(self) -> None:
        ...


class TextStreamSource:
    """Chunk-buffered character reads over a text or binary stream.

    Characters and lines are served from the same buffer, so mixing
    next_char() and read_line() never skips or repeats input.

    When *encoding* is given the stream yields bytes and is decoded here,
    incrementally. A decode error under errors="strict" keeps the characters
    decoded before the bad byte; the error is raised once they are used up,
    and again on every later refill.
    """

    __slots__ = (
        "_stream", "_buffer_size", "_buf", "_pos", "_eof", "_close_stream",
        "_encoding", "_decoder", "_decode_error",
    )

    def __init__(
        self,
        stream: TextIO | BinaryIO,
        buffer_size: int = 8192,
        *,
        close_stream: bool = True,
        encoding: str | None = None,
        errors: str = "strict",
    ) -> None:
        self._stream = stream
        self._buffer_size = buffer_size
        self._buf = ""
        self._pos = 0
        self._eof = False
        self._close_stream = close_stream
        self._encoding = encoding
        self._decoder = (
            codecs.getincrementaldecoder(encoding)(errors) if encoding is not None else None
        )
        self._decode_error: UnicodeDecodeError | None = None

    def _read_chunk(self) -> str:
        """Next run of decoded characters, or "" at end of input."""
        if self._decode_error is not None:
            raise self._decode_error
        if self._decoder is None:
            return self._stream.read(self._buffer_size)
        while True:
            raw = self._stream.read(self._buffer_size) or b""
            try:
                text = self._decoder.decode(raw, final=not raw)
            except UnicodeDecodeError as exc:
                self._decode_error = exc
                # everything before exc.start decoded cleanly
                text = codecs.decode(exc.object[: exc.start], self._encoding)
                if not text:
                    raise
                return text
            # a chunk ending mid-character decodes to "" until the rest arrives
            if text or not raw:
                return text

    def _fill(self) -> bool:
        """Refill the buffer if it is drained. Returns False at end of input."""
        if self._pos < len(self._buf):
            return True
        if self._eof:
            return False
        chunk = self._read_chunk()
        if not chunk:
            self._eof = True
            self._buf = ""
            self._pos = 0
            return False
        self._buf = chunk
        self._pos = 0
        return True

    def next_char(self) -> str:
        if not self._fill():
            return ""
        c = self._buf[self._pos]
        self._pos += 1
        return c

    def read_line(self) -> str | None:
        """Read up to '\\n', '\\r' or '\\r\\n'. The terminator is consumed, not returned."""
        if not self._fill():
            return None
        parts: list[str] = []
        while True:
            buf, start = self._buf, self._pos
            end = len(buf)
            i = start
            while i < end and buf[i] != "\n" and buf[i] != "\r":
                i += 1
            parts.append(buf[start:i])
            if i == end:
                self._pos = end
                if not self._fill():
                    return "".join(parts)
                continue
            self._pos = i + 1
            if buf[i] == "\r" and self._fill() and self._buf[self._pos] == "\n":
                self._pos += 1
            return "".join(parts)

    def close(self) -> None:
        self._buf = ""
        self._pos = 0
        self._eof = True
        if self._close_stream:
            self._stream.close()


class ExhaustedSource:
    """Stand-in for a source that could not be opened."""

    __slots__ = ()

    def next_char(self) -> str:
        return ""

    def read_line(self) -> str | None:
        return None

    def close(self) -> None:
        pass


def _is_source(target: object) -> bool:
    return all(
        callable(getattr(target, name, None))
        for name in ("next_char", "read_line", "close")
    )


def open_source(target: object, config: ScannerConfig | None = None) -> CharacterSource:
    """Build a CharacterSource for whatever the caller handed the scanner.

    Accepts an existing CharacterSource, a filesystem path, a text stream, a
    binary stream, or None for standard input. Opening a path may raise
    OSError; callers that must not raise are expected to catch it.

    Raises:
        TypeError: If *target* is none of the supported kinds.
    """
    config = config or ScannerConfig()

    if target is None:
        if sys.stdin is None:
            return ExhaustedSource()
        # stdin belongs to the process; closing the scanner must not close it
        return TextStreamSource(sys.stdin, config.buffer_size, close_stream=False)

    if _is_source(target):
        return target  # type: ignore[return-value]

    if isinstance(target, (str, os.PathLike)):
        stream = open(target, "rb")
        return TextStreamSource(
            stream, config.buffer_size, encoding=config.encoding, errors=config.errors
        )

    if isinstance(target, io.TextIOBase):
        return TextStreamSource(target, config.buffer_size)

    if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
        return TextStreamSource(
            target, config.buffer_size, encoding=config.encoding, errors=config.errors
        )

    raise TypeError(f"Cannot read characters from {type(target).__name__}")
