"""Bit counting and interface-flag bit-field helpers."""

from __future__ import annotations

import enum

_MASK64 = (1 << 64) - 1


def _build_table() -> tuple[int, ...]:
    table = [0] * 256
    for i in range(256):
        table[i] = table[i // 2] + (i & 1)
    return tuple(table)


# _PC[i] is the population count of i.
_PC = _build_table()


def pop_count(x: int) -> int:
    """Return the number of set bits in the 64-bit value x."""
    x &= _MASK64
    return sum(_PC[(x >> (8 * k)) & 0xFF] for k in range(8))


class Flags(enum.IntFlag):
    """Network interface flags, one bit each."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16


def is_up(v: Flags) -> bool:
    """Report whether the UP flag is set."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return v with the UP flag cleared."""
    return Flags(int(v) & ~int(Flags.UP))


def set_broadcast(v: Flags) -> Flags:
    """Return v with the BROADCAST flag set."""
    return Flags(int(v) | int(Flags.BROADCAST))


def is_cast(v: Flags) -> bool:
    """Report whether either BROADCAST or MULTICAST is set."""
    return int(v) & int(Flags.BROADCAST | Flags.MULTICAST) != 0