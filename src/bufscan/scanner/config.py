"""Configuration knobs for BufferedScanner.

Defaults mirror a plain buffered text reader: 8192-character refills,
UTF-8 decoding with malformed bytes replaced by U+FFFD, whitespace-only
delimiting.
"""

import codecs
from dataclasses import dataclass


@dataclass(slots=True)
class ScannerConfig:
    """Settings applied when a scanner opens or wraps its source."""

    buffer_size: int = 8192        # characters pulled per refill
    encoding: str = "utf-8"        # for paths and binary streams
    errors: str = "replace"        # codec error handler; "strict" records decode errors
    delimiter: str | None = None   # extra single-character delimiter

    def validate(self) -> None:
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.delimiter is not None and len(self.delimiter) != 1:
            raise ValueError(
                f"Delimiter must be a single character, got {self.delimiter!r}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding {self.encoding!r}") from exc
        try:
            codecs.lookup_error(self.errors)
        except LookupError as exc:
            raise ValueError(f"Unknown error handler {self.errors!r}") from exc
