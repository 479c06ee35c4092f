"""Buffered scanner with typed token reads and a sticky read state.

Reads never raise on bad input or I/O trouble. End of input and source
failures are recorded in the scanner's ReaderState and read calls fall
back to their zero values ("", 0, 0.0). Callers that care whether a value
was real check `is_valid` / `last_error` afterwards:

    with BufferedScanner("numbers.txt") as scanner:
        n = scanner.read_int()
        values = scanner.read_int_vector(n)
        if scanner.last_error is not None:
            ...

Design: one scanning loop (_scan) skips delimiters and feeds each token
character into an accumulator. Strings, ints and floats differ only in the
accumulator they pass in, so numbers are parsed in a single pass without
building an intermediate string.
"""

from collections.abc import Callable, Iterator
from typing import TypeVar

from bufscan.models.state import ReaderState
from bufscan.scanner.accumulators import FloatAccumulator, IntAccumulator, TokenAccumulator
from bufscan.scanner.config import ScannerConfig
from bufscan.scanner.delimiters import DelimiterClassifier
from bufscan.source.character_source import CharacterSource, ExhaustedSource, open_source


READ_FAILURE = -1

# Failures absorbed into ReaderState.last_error instead of propagating.
_SOURCE_ERRORS = (OSError, UnicodeDecodeError)

T = TypeVar("T")
A = TypeVar("A", TokenAccumulator, IntAccumulator, FloatAccumulator)


class BufferedScanner:
    """Tokenizing reader over a CharacterSource.

    *source* may be a CharacterSource, a filesystem path, a text or binary
    stream, or None for standard input. A path that cannot be opened leaves
    the scanner exhausted with the error in `last_error`.
    """

    __slots__ = ("_source", "_state", "_delimiters", "_closed")

    def __init__(self, source: object = None, *, config: ScannerConfig | None = None) -> None:
        config = config or ScannerConfig()
        config.validate()

        self._state = ReaderState(delimiter=config.delimiter)
        self._delimiters = DelimiterClassifier(self._state)
        self._closed = False
        try:
            self._source: CharacterSource = open_source(source, config)
        except _SOURCE_ERRORS as exc:
            self._source = ExhaustedSource()
            self._state.record_error(exc)
            self._state.mark_exhausted()

    def __enter__(self) -> "BufferedScanner":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Read state ---

    @property
    def is_exhausted(self) -> bool:
        """True once the source has reported end of input (or was closed)."""
        return self._state.exhausted

    @property
    def last_error(self) -> Exception | None:
        """The most recent I/O failure, or None if every read has succeeded."""
        return self._state.last_error

    @property
    def is_valid(self) -> bool:
        return self._state.is_valid

    # --- Delimiter configuration ---

    @property
    def delimiter(self) -> str | None:
        """The extra delimiter character, or None when only whitespace splits tokens."""
        return self._state.delimiter

    def set_delimiter(self, c: str) -> None:
        """Treat *c* as a token boundary in addition to whitespace."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"Delimiter must be a single character, got {c!r}")
        self._state.delimiter = c

    def clear_delimiter(self) -> None:
        self._state.delimiter = None

    # --- Source adapter ---

    def _next_char(self) -> str:
        """Next character from the source, or "" on end of input or failure."""
        if self._closed:
            return ""
        try:
            c = self._source.next_char()
        except _SOURCE_ERRORS as exc:
            self._state.record_error(exc)
            return ""
        if not c:
            self._state.mark_exhausted()
        return c

    def read_char(self) -> int:
        """Read one character.

        Returns:
            The character's code point, or READ_FAILURE at end of input or
            after an I/O error.
        """
        c = self._next_char()
        return ord(c) if c else READ_FAILURE

    def read_line(self) -> str | None:
        """Read the rest of the current line.

        A line ends at '\\n', '\\r', '\\r\\n' or end of input. The terminator
        is consumed but not returned.

        Returns:
            The line, or None if end of input was reached before any
            character or an I/O error occurred.
        """
        if self._closed:
            return None
        try:
            line = self._source.read_line()
        except _SOURCE_ERRORS as exc:
            self._state.record_error(exc)
            return None
        if line is None:
            self._state.mark_exhausted()
        return line

    # --- Token scanning ---

    def _scan(self, acc: A) -> A:
        is_delimiter = self._delimiters.is_delimiter
        c = self._next_char()

        # skip delimiters before the characters that matter
        while c and is_delimiter(c):
            c = self._next_char()

        # the terminating delimiter is consumed here and dropped
        while c and not is_delimiter(c):
            acc.feed(c)
            c = self._next_char()

        return acc

    def read_string(self) -> str:
        """Read the next token, or "" if input ended before one started."""
        return self._scan(TokenAccumulator()).result()

    def read_int(self) -> int:
        """Read the next token as an integer.

        Non-digit characters are skipped, except a '-' as the first
        character, which negates the result. "12a3" reads as 123 and
        "1-2" as 12.
        """
        return self._scan(IntAccumulator()).result()

    def read_float(self) -> float:
        """Read the next token as a float.

        Like read_int, but the first '.' starts the fractional part.
        Later dots are skipped, so "3.14.15" reads as 3.1415.
        """
        return self._scan(FloatAccumulator()).result()

    read_double = read_float

    def iter_strings(self) -> Iterator[str]:
        """Yield tokens until end of input or the first I/O error."""
        while True:
            token = self.read_string()
            if token:
                yield token
            if not self._state.is_valid:
                return

    # --- Batch reads ---

    @staticmethod
    def _repeat(read: Callable[[], T], count: int) -> list[T]:
        if count < 0:
            raise ValueError(f"Length must be non-negative, got {count}")
        return [read() for _ in range(count)]

    def _matrix(self, read: Callable[[], T], rows: int, cols: int) -> list[list[T]]:
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix shape must be non-negative, got {rows}x{cols}")
        return [self._repeat(read, cols) for _ in range(rows)]

    def read_int_vector(self, length: int) -> list[int]:
        """Read *length* integers. Slots past end of input hold 0."""
        return self._repeat(self.read_int, length)

    def read_float_vector(self, length: int) -> list[float]:
        """Read *length* floats. Slots past end of input hold 0.0."""
        return self._repeat(self.read_float, length)

    def read_string_vector(self, length: int) -> list[str]:
        """Read *length* tokens. Slots past end of input hold ""."""
        return self._repeat(self.read_string, length)

    def read_int_matrix(self, rows: int, cols: int) -> list[list[int]]:
        """Read a rows x cols integer matrix in row-major order."""
        return self._matrix(self.read_int, rows, cols)

    def read_float_matrix(self, rows: int, cols: int) -> list[list[float]]:
        return self._matrix(self.read_float, rows, cols)

    def read_string_matrix(self, rows: int, cols: int) -> list[list[str]]:
        return self._matrix(self.read_string, rows, cols)

    read_double_vector = read_float_vector
    read_double_matrix = read_float_matrix

    # --- Release ---

    def close(self) -> None:
        """Release the source. Safe to call more than once.

        A failure while closing is recorded in `last_error`. Afterwards every
        read behaves as if the input had ended.
        """
        if self._closed:
            return
        self._closed = True
        self._state.mark_exhausted()
        try:
            self._source.close()
        except _SOURCE_ERRORS as exc:
            self._state.record_error(exc)
