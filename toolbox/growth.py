"""Integer slices with explicit capacity, showing how appending grows storage."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator


class IntSlice:
    """A view of the first len items of a shared backing list.

    Two slices made from the same backing list see each other's writes,
    as long as neither has been reallocated.
    """

    __slots__ = ("_array", "_len")

    def __init__(self, values: Iterable[int] = (), capacity: int | None = None) -> None:
        items = list(values)
        cap = len(items) if capacity is None else capacity
        if cap < len(items):
            raise ValueError(f"capacity {cap} is less than length {len(items)}")
        self._array = items + [0] * (cap - len(items))
        self._len = len(items)

    @classmethod
    def _view(cls, array: list[int], length: int) -> IntSlice:
        s = cls.__new__(cls)
        s._array = array
        s._len = length
        return s

    @property
    def cap(self) -> int:
        """The capacity of the backing storage."""
        return len(self._array)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[int]:
        return iter(self._array[: self._len])

    def _check(self, index: int) -> int:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError(f"index out of range [{index}] with length {self._len}")
        return index

    def __getitem__(self, index: int) -> int:
        return self._array[self._check(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._array[self._check(index)] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntSlice):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + " ".join(str(v) for v in self) + "]"

    def __repr__(self) -> str:
        return f"IntSlice({list(self)!r}, capacity={self.cap})"


def _grow(x: IntSlice, zlen: int) -> IntSlice:
    if zlen <= x.cap:
        return IntSlice._view(x._array, zlen)
    zcap = max(zlen, 2 * len(x))
    array = list(x) + [0] * (zcap - len(x))
    return IntSlice._view(array, zlen)


def append_int(x: IntSlice | None, y: int) -> IntSlice:
    """Return x extended by y, reusing x's storage when it has room."""
    x = IntSlice() if x is None else x
    z = _grow(x, len(x) + 1)
    z[len(x)] = y
    return z


def append_slice(x: IntSlice | None, *args: int) -> IntSlice:
    """Return x extended by args, reusing x's storage when it has room."""
    x = IntSlice() if x is None else x
    z = _grow(x, len(x) + len(args))
    for offset, value in enumerate(args):
        z[len(x) + offset] = value
    return z


def main(argv: list[str] | None = None) -> int:
    """Show how capacity grows while appending ten integers."""
    parser = argparse.ArgumentParser(prog="append")
    parser.parse_args(argv)
    x = IntSlice()
    for i in range(10):
        y = append_int(x, i)
        print(f"{i}  cap={y.cap}\t{y}")
        x = y
    return 0


if __name__ == "__main__":
    sys.exit(main())