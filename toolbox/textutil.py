"""Small string and integer-list helpers, with a command-line front end."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def basename(s: str) -> str:
    """Remove directory components and a trailing .suffix.

    e.g. a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    s = s[s.rfind("/") + 1:]
    dot = s.rfind(".")
    if dot >= 0:
        s = s[:dot]
    return s


def comma(s: str) -> str:
    """Insert commas in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers like a list literal, e.g. "[1, 2, 3]"."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return only the non-empty strings, in their original order."""
    return [s for s in strings if s != ""]


def reverse(values: list) -> None:
    """Reverse a list in place."""
    values.reverse()


def rotate_left(values: list, n: int) -> None:
    """Rotate a list left by n positions in place, using three reversals."""
    head = values[:n]
    tail = values[n:]
    reverse(head)
    reverse(tail)
    values[:] = head + tail
    reverse(values)


def parse_ints(line: str) -> list[int]:
    """Parse whitespace-separated 64-bit decimal integers.

    Raises ValueError naming the first field that is not a valid integer.
    """
    result = []
    for field in line.split():
        if not _INT_RE.fullmatch(field):
            raise ValueError(f'parsing "{field}": invalid syntax')
        value = int(field)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f'parsing "{field}": value out of range')
        result.append(value)
    return result


def sum_ints(*args: int) -> int:
    """Return the sum of any number of integers."""
    total = 0
    for value in args:
        total += value
    return total


def squares() -> Iterator[int]:
    """Yield the square numbers 1, 4, 9, 16, ... one at a time."""
    x = 0
    while True:
        x += 1
        yield x * x


def _input_lines(stream) -> Iterator[str]:
    for line in stream:
        line = line.rstrip("\n")
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def main(argv: list[str] | None = None) -> int:
    """Run one of the basename, comma or rev commands."""
    parser = argparse.ArgumentParser(prog="textutil")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("basename", help="print the base name of each input line")
    comma_parser = sub.add_parser("comma", help="insert thousands separators")
    comma_parser.add_argument("numbers", nargs="*")
    sub.add_parser("rev", help="reverse the integers on each input line")
    args = parser.parse_args(argv)

    if args.command == "basename":
        for line in _input_lines(sys.stdin):
            print(basename(line))
    elif args.command == "comma":
        for number in args.numbers:
            print(f"  {comma(number)}")
    else:
        for line in _input_lines(sys.stdin):
            try:
                values = parse_ints(line)
            except ValueError as err:
                print(err, file=sys.stderr)
                continue
            reverse(values)
            print("[" + " ".join(str(v) for v in values) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())