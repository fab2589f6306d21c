# oslabtools

A few small command-line tools for poking at the file system and timing work:

- **dedup** reads whitespace-separated integers from a file and writes each
  distinct value once to another file.
- **io-lat-write** measures the average latency of small synchronous writes.
- **oslab-shell** is a minimal interactive shell that runs these two tools and
  reports how long each run took.

There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## dedup

```
dedup <inputFile> <outputFile>
```

Reads integers from the start of `inputFile`. Reading stops at the first
word that is not an integer in the 32-bit signed range. The distinct values
are written to `outputFile` in reverse order of their first appearance, each
followed by a single space. For example, an input of `1 2 2 3` gives `3 2 1 `.

The output file must already exist. It is written from its start and is not
truncated, so any longer earlier content past the new data stays in place.

The command prints `deduplication complete. new file is: <outputFile>` and
exits with status 0 on success. It exits with status 1 and prints a message
to standard error when the argument count is wrong, a file cannot be opened,
or the input holds no integers (`no data to deduplicate`).

From Python:

```python
from oslabtools.dedup import DedupError, dedup, read_data, write_data

values = read_data("in.txt")          # list of ints
unique = dedup("in.txt", "out.txt")   # the values written, in written order
write_data("out.txt", [3, 2, 1])      # out.txt must exist
```

`read_data` and `write_data` raise `OSError` when the file cannot be opened;
`dedup` raises `DedupError` (a `ValueError`) when the input holds no integers.

## io-lat-write

```
io-lat-write <outputFile> <number of iterations>
```

Creates or truncates `outputFile`. On each iteration it writes a 1 KiB block
of `A` bytes at a random offset between 0 and 1023 and calls `fsync` before
the next one. At the end it prints the average time per iteration in
nanoseconds:

```
average write time per iteration: 123456 [ns]
```

A missing argument, a non-numeric or non-positive iteration count, or a
write error prints a message to standard error and exits with status 1.

From Python:

```python
from oslabtools.io_lat_write import io_lat_write

average_ns = io_lat_write(1000, "test_io.txt")
```

`io_lat_write` returns the mean time per write in nanoseconds and raises
`ValueError` if `iterations` is less than 1.

## oslab-shell

```
oslab-shell
```

Prints a welcome line, then shows a `shell> ` prompt and reads one command
per line. Words are separated by spaces, and repeated spaces are ignored.
Empty lines are skipped.

- `info` lists the available commands and their arguments.
- `exit` prints `Exiting shell...` and leaves the shell; the end of input
  also ends it.
- `dedup ...` and `io-lat-write ...` run the tools above with the given
  arguments. When one finishes, the shell prints `Execution time: <n> ms`.
- Any other command prints `Error executing command: <name>` to standard
  error, and the shell keeps going.

The shell can also be driven from Python with any pair of text streams:

```python
import io
from oslabtools.shell import execute_shell, run_command, split_command

split_command("dedup  in.txt out.txt")   # ['dedup', 'in.txt', 'out.txt']

result = run_command("io-lat-write", ["test_io.txt", "10"])
result.status, result.elapsed_ms

out = io.StringIO()
execute_shell(io.StringIO("info\nexit\n"), out)
print(out.getvalue())
```

`run_command` raises `UnknownCommandError` (a `LookupError`) for a name
other than `dedup` or `io-lat-write`.

## What it does not do

The shell is not a general command runner: it does not start external
programs, and only the two tools bundled here (`dedup` and `io-lat-write`)
can be run from it. They run inside the shell's own process.