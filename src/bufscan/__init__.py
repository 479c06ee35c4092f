"""Buffered tokenizing reader with typed value extraction."""

from bufscan.scanner.buffered_scanner import READ_FAILURE, BufferedScanner
from bufscan.scanner.config import ScannerConfig
from bufscan.source.character_source import (
    CharacterSource,
    ExhaustedSource,
    TextStreamSource,
    open_source,
)

__all__ = [
    "READ_FAILURE",
    "BufferedScanner",
    "CharacterSource",
    "ExhaustedSource",
    "ScannerConfig",
    "TextStreamSource",
    "open_source",
]
