"""Counting and filtering lines and characters of text input."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

_UTF_MAX = 4

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "'": "\\'",
    "\\": "\\\\",
}


def _chomp(line: str) -> str:
    line = line.rstrip("\n")
    if line.endswith("\r"):
        line = line[:-1]
    return line


def count_lines(stream: Iterable[str]) -> Counter:
    """Count how often each line (without its line ending) occurs."""
    counts: Counter = Counter()
    for line in stream:
        counts[_chomp(line)] += 1
    return counts


def count_files(paths: Iterable[str]) -> Counter:
    """Count lines across the named files, reading each line by line.

    Files that cannot be opened are reported on stderr and skipped.
    """
    counts: Counter = Counter()
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as f:
                counts.update(count_lines(f))
        except OSError as err:
            print(f"dup2: {err}", file=sys.stderr)
    return counts


def count_file_contents(paths: Iterable[str]) -> Counter:
    """Count lines across the named files, reading each file whole.

    Each file's contents are split on newline, so a file ending in a
    newline contributes one empty line. Unreadable files are reported
    on stderr and skipped.
    """
    counts: Counter = Counter()
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
                data = f.read()
        except OSError as err:
            print(f"dup3: {err}", file=sys.stderr)
            continue
        counts.update(data.split("\n"))
    return counts


def duplicates(counts: Mapping[str, int]) -> dict[str, int]:
    """Return the lines that occur more than once, with their counts."""
    return {line: n for line, n in counts.items() if n > 1}


def format_duplicates(counts: Mapping[str, int]) -> str:
    """Format duplicated lines as "count<TAB>line" rows."""
    return "".join(f"{n}\t{line}\n" for line, n in duplicates(counts).items())


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line once, at its first occurrence."""
    seen: set[str] = set()
    for line in lines:
        if line not in seen:
            seen.add(line)
            yield line


def _decode_runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield (character, byte length); invalid bytes give (None, 1)."""
    i = 0
    while i < len(data):
        lead = data[i]
        if lead < 0x80:
            size = 1
        elif 0xC2 <= lead <= 0xDF:
            size = 2
        elif 0xE0 <= lead <= 0xEF:
            size = 3
        elif 0xF0 <= lead <= 0xF4:
            size = 4
        else:
            size = 0
        if size:
            try:
                ch = data[i:i + size].decode("utf-8")
            except UnicodeDecodeError:
                pass
            else:
                yield ch, size
                i += size
                continue
        yield None, 1
        i += 1


def _quote_rune(ch: str) -> str:
    if ch in _ESCAPES:
        body = _ESCAPES[ch]
    elif ch.isprintable():
        body = ch
    else:
        code = ord(ch)
        if code < 0x20 or code == 0x7F:
            body = f"\\x{code:02x}"
        elif code < 0x10000:
            body = f"\\u{code:04x}"
        else:
            body = f"\\U{code:08x}"
    return f"'{body}'"


@dataclass
class CharCounts:
    """Counts of characters, of UTF-8 encoding lengths, and of invalid bytes."""

    counts: Counter = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (_UTF_MAX + 1))
    invalid: int = 0

    def report(self) -> str:
        """Render the counts as a tab-separated text report."""
        parts = ["rune\tcount\n"]
        parts.extend(f"{_quote_rune(c)}\t{n}\n" for c, n in self.counts.items())
        parts.append("\nlen\tcount\n")
        parts.extend(f"{i}\t{n}\n" for i, n in enumerate(self.utflen) if i > 0)
        if self.invalid > 0:
            parts.append(f"\n{self.invalid} invalid UTF-8 characters\n")
        return "".join(parts)


def charcount(data: bytes) -> CharCounts:
    """Count the Unicode characters in UTF-8 encoded data."""
    result = CharCounts()
    for ch, size in _decode_runes(data):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[size] += 1
    return result


def main(argv: list[str] | None = None) -> int:
    """Run one of the dup, dedup or charcount commands."""
    parser = argparse.ArgumentParser(prog="lines")
    sub = parser.add_subparsers(dest="command", required=True)
    dup = sub.add_parser("dup", help="print lines that appear more than once")
    dup.add_argument(
        "--whole",
        action="store_true",
        help="read each named file whole and split it on newlines",
    )
    dup.add_argument("files", nargs="*")
    sub.add_parser("dedup", help="print each distinct input line once")
    sub.add_parser("charcount", help="count Unicode characters in the input")
    args = parser.parse_args(argv)

    if args.command == "dup":
        if args.whole:
            counts = count_file_contents(args.files)
        elif args.files:
            counts = count_files(args.files)
        else:
            counts = count_lines(sys.stdin)
        sys.stdout.write(format_duplicates(counts))
    elif args.command == "dedup":
        try:
            for line in dedup(_chomp(line) for line in sys.stdin):
                print(line)
        except OSError as err:
            print(f"dedup: {err}", file=sys.stderr)
            return 1
    else:
        try:
            data = sys.stdin.buffer.read()
        except OSError as err:
            print(f"charcount: {err}", file=sys.stderr)
            return 1
        sys.stdout.write(charcount(data).report())
    return 0


if __name__ == "__main__":
    sys.exit(main())