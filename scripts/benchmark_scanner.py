"""Time BufferedScanner against str.split() on a file of random integers.

Usage:
    python -m scripts.benchmark_scanner [--count N] [--seed S] [--buffer-size B]
"""

import argparse
import logging
import random
import tempfile
import time
from pathlib import Path

from bufscan.scanner.buffered_scanner import BufferedScanner
from bufscan.scanner.config import ScannerConfig


logger = logging.getLogger("benchmark_scanner")


def write_numbers(path: Path, count: int, seed: int = 0) -> list[int]:
    """Write *count* random ints to *path*, ten per line. Returns them."""
    rng = random.Random(seed)
    numbers = [rng.randint(-1_000_000, 1_000_000) for _ in range(count)]
    with open(path, "w", encoding="utf-8") as fh:
        for i in range(0, count, 10):
            fh.write(" ".join(str(n) for n in numbers[i : i + 10]))
            fh.write("\n")
    return numbers


def time_scanner(path: Path, count: int, buffer_size: int) -> tuple[float, list[int]]:
    start = time.perf_counter()
    with BufferedScanner(path, config=ScannerConfig(buffer_size=buffer_size)) as scanner:
        values = scanner.read_int_vector(count)
    return time.perf_counter() - start, values


def time_split(path: Path, count: int) -> tuple[float, list[int]]:
    start = time.perf_counter()
    with open(path, encoding="utf-8") as fh:
        values = [int(tok) for tok in fh.read().split()[:count]]
    return time.perf_counter() - start, values


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark BufferedScanner.read_int_vector")
    parser.add_argument("--count", type=int, default=200_000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--buffer-size", type=int, default=8192)
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "numbers.txt"
        expected = write_numbers(path, args.count, args.seed)

        scan_secs, scanned = time_scanner(path, args.count, args.buffer_size)
        split_secs, split = time_split(path, args.count)

    if scanned != expected or split != expected:
        logger.error("Readers disagree with the generated input")
        return 1

    logger.info("-" * 40)
    logger.info(f"Integers      : {args.count:,}")
    logger.info(f"BufferedScanner: {scan_secs:.3f}s ({args.count / scan_secs:,.0f}/s)")
    logger.info(f"str.split     : {split_secs:.3f}s ({args.count / split_secs:,.0f}/s)")
    logger.info("-" * 40)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
