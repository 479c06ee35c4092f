"""Mutable read state owned by a single scanner instance."""

from dataclasses import dataclass


@dataclass(slots=True)
class ReaderState:
    """What the scanner knows about its source after the last read.

    `exhausted` only ever goes from False to True. `last_error` holds the
    most recent I/O failure and is replaced, never cleared, by later ones.
    """
    delimiter: str | None = None       # None = whitespace only
    exhausted: bool = False
    last_error: Exception | None = None

    @property
    def is_valid(self) -> bool:
        return not self.exhausted and self.last_error is None

    def mark_exhausted(self) -> None:
        self.exhausted = True

    def record_error(self, exc: Exception) -> None:
        self.last_error = exc
