"""Read a fixed mix of values from stdin (or a file) and echo them back.

Expected input: a float, a word, four ints, then six ints forming a 2x3
matrix. Everything is whitespace separated unless --delimiter adds one
more separator character.

Usage:
    python -m scripts.scan_stdin [--input PATH] [--delimiter CHAR] [-v]

Example:
    printf '2.5 hello 1 2 3 4\\n5 6 7\\n8 9 10\\n' | python -m scripts.scan_stdin
"""

import argparse
import logging
from pathlib import Path

from bufscan.scanner.buffered_scanner import BufferedScanner
from bufscan.scanner.config import ScannerConfig


logger = logging.getLogger("scan_stdin")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_vector(values: list) -> str:
    return " ".join(str(v) for v in values)


def format_matrix(rows: list[list]) -> str:
    return "\n".join("\t".join(str(v) for v in row) for row in rows)


def scan_report(scanner: BufferedScanner) -> list[str]:
    """Read the demo sequence from *scanner* and return the output lines."""
    lines = [
        f"float: {scanner.read_float():f}",
        f"str: {scanner.read_string()}",
        f"int[]: {format_vector(scanner.read_int_vector(4))}",
        "int[][]:",
    ]
    matrix = format_matrix(scanner.read_int_matrix(2, 3))
    lines.extend(matrix.splitlines())
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scan typed values from stdin")
    parser.add_argument("--input", type=Path, help="Read from this file instead of stdin")
    parser.add_argument("--delimiter", help="Extra single-character delimiter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = ScannerConfig(delimiter=args.delimiter)
        config.validate()
    except ValueError as exc:
        logger.error(f"Bad option: {exc}")
        return 2

    source = args.input
    logger.debug(f"Reading from {source or '<stdin>'}")

    with BufferedScanner(source, config=config) as scanner:
        for line in scan_report(scanner):
            print(line)
        if scanner.last_error is not None:
            logger.warning(f"Input failed: {scanner.last_error}")
            return 1
        if scanner.is_exhausted:
            logger.debug("Input ended; trailing values may be zero-filled")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
