"""Print command-line arguments joined by a separator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO


def echo(newline: bool, sep: str, args: Sequence[str], out: TextIO | None = None) -> None:
    """Write args joined by sep to out, followed by a newline if requested."""
    if out is None:
        out = sys.stdout
    out.write(sep.join(args))
    if newline:
        out.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Parse -n and -s options and echo the remaining arguments."""
    parser = argparse.ArgumentParser(prog="echo")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    options = parser.parse_args(argv)
    try:
        echo(not options.n, options.s, options.args)
    except OSError as err:
        print(f"echo: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())