"""A small interactive shell that runs the bundled tools and times them."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from oslabtools import dedup, io_lat_write

WELCOME = "Welcome to the new shell! Type 'exit' to exit the shell\n"
PROMPT = "shell> "
INFO_TEXT = "dedup <inputFile> <outputFile>\nio-lat-write <outputFile> <number of iterations>\n"

COMMANDS: dict[str, Callable[[list[str]], int]] = {
    "dedup": dedup.main,
    "io-lat-write": io_lat_write.main,
}


class UnknownCommandError(LookupError):
    """Raised when a command name is not one the shell knows."""


@dataclass(frozen=True)
class CommandResult:
    """Exit status and wall-clock duration of a finished command."""

    status: int
    elapsed_ms: int


def split_command(line: str) -> list[str]:
    """Split ``line`` on spaces, dropping empty parts."""
    return [part for part in line.split(" ") if part]


def run_command(command: str, args: Sequence[str]) -> CommandResult:
    """Run a known command with ``args`` and report how long it took."""
    try:
        entry = COMMANDS[command]
    except KeyError:
        raise UnknownCommandError(command) from None
    start = time.perf_counter_ns()
    status = entry(list(args))
    elapsed_ms = (time.perf_counter_ns() - start) // 1_000_000
    return CommandResult(status, elapsed_ms)


def execute_shell(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read commands line by line until ``exit`` or end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(WELCOME)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        parts = split_command(line.rstrip("\n"))
        if not parts:
            continue
        command, *args = parts
        if command == "exit":
            stdout.write("Exiting shell...\n")
            break
        if command == "info":
            stdout.write(INFO_TEXT + "\n")
            continue
        try:
            result = run_command(command, args)
        except UnknownCommandError:
            print(f"Error executing command: {command}", file=sys.stderr)
            continue
        stdout.write(f"Execution time: {result.elapsed_ms} ms\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell."""
    execute_shell()
    return 0