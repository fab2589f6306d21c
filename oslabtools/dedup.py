"""Remove duplicate integers from a whitespace-separated file."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class DedupError(ValueError):
    """Raised when there is nothing to deduplicate."""


def _parse_ints(text: str) -> Iterator[int]:
    """Yield leading integers from ``text``, stopping at the first word that is not one."""
    pos = 0
    while True:
        match = _INTEGER_RE.match(text, pos)
        if match is None:
            return
        value = int(match.group(1))
        if not INT_MIN <= value <= INT_MAX:
            return
        yield value
        pos = match.end()


def read_data(filename: str) -> list[int]:
    """Read the integers at the start of ``filename``.

    Parsing stops at the first word that is not a 32-bit integer.
    """
    with open(filename, "rb") as handle:
        content = handle.read().decode("latin-1")
    return list(_parse_ints(content))


def write_data(filename: str, data: Iterable[int]) -> None:
    """Write each value followed by a space into an existing file.

    The file is overwritten from its start and is not truncated.
    """
    payload = "".join(f"{value} " for value in data).encode("ascii")
    with open(filename, "r+b") as handle:
        handle.write(payload)


def dedup(input_file: str, output_file: str) -> list[int]:
    """Write the distinct values of ``input_file`` to ``output_file`` and return them.

    Distinct values are written in reverse order of their first appearance.
    """
    values = read_data(input_file)
    if not values:
        raise DedupError("no data to deduplicate")
    unique = list(dict.fromkeys(values))
    unique.reverse()
    write_data(output_file, unique)
    return unique


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``dedup <inputFile> <outputFile>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: dedup <inputFile> <outputFile>", file=sys.stderr)
        return 1
    input_file, output_file = args
    try:
        dedup(input_file, output_file)
    except OSError as exc:
        print(f"error opening file: {exc.filename}", file=sys.stderr)
        return 1
    except DedupError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"deduplication complete. new file is: {output_file}")
    return 0