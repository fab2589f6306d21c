"""Measure synchronous write latency of 1 KiB blocks at random offsets."""

from __future__ import annotations

import os
import random
import sys
import time
from collections.abc import Sequence

BLOCK_SIZE = 1024
MAX_OFFSET = 1023


def io_lat_write(iterations: int, file_path: str) -> int:
    """Write ``iterations`` blocks to ``file_path`` and return the mean time per write in ns.

    The file is created or truncated. Each block is written at a random offset
    between 0 and 1023 and flushed to disk before the next one.
    """
    if iterations < 1:
        raise ValueError("iterations must be positive")
    block = b"A" * BLOCK_SIZE
    rng = random.Random()
    with open(file_path, "wb", buffering=0) as handle:
        descriptor = handle.fileno()
        start = time.perf_counter_ns()
        for _ in range(iterations):
            handle.seek(rng.randint(0, MAX_OFFSET))
            written = handle.write(block)
            if written != BLOCK_SIZE:
                raise OSError(f"short write to {file_path}: {written} bytes")
            os.fsync(descriptor)
        elapsed = time.perf_counter_ns() - start
    return elapsed // iterations


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``io-lat-write <outputFile> <number of iterations>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: io-lat-write <outputFile> <number of iterations>", file=sys.stderr)
        return 1
    file_path, count = args
    try:
        iterations = int(count)
        average = io_lat_write(iterations, file_path)
    except ValueError as exc:
        print(f"invalid number of iterations: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error writing file: {file_path}: {exc}", file=sys.stderr)
        return 1
    print(f"average write time per iteration: {average} [ns]")
    return 0