"""A set of small non-negative integers backed by a bit vector."""

from __future__ import annotations

from dataclasses import dataclass, field

_WORD_BITS = 64


def _split(x: int) -> tuple[int, int]:
    if x < 0:
        raise ValueError(f"IntSet holds non-negative integers, got {x}")
    return divmod(x, _WORD_BITS)


@dataclass
class IntSet:
    """A set of small non-negative integers; the default value is empty."""

    words: list[int] = field(default_factory=list)

    def has(self, x: int) -> bool:
        """Report whether the set contains the non-negative value x."""
        word, bit = _split(x)
        return word < len(self.words) and (self.words[word] >> bit) & 1 == 1

    def add(self, x: int) -> None:
        """Add the non-negative value x to the set."""
        word, bit = _split(x)
        if word >= len(self.words):
            self.words.extend([0] * (word + 1 - len(self.words)))
        self.words[word] |= 1 << bit

    def union_with(self, t: IntSet) -> None:
        """Set this set to the union of itself and t."""
        for i, tword in enumerate(t.words):
            if i < len(self.words):
                self.words[i] |= tword
            else:
                self.words.append(tword)

    def __contains__(self, x: int) -> bool:
        return self.has(x)

    def __str__(self) -> str:
        members = (
            _WORD_BITS * i + j
            for i, word in enumerate(self.words)
            if word
            for j in range(_WORD_BITS)
            if (word >> j) & 1
        )
        return "{" + " ".join(str(m) for m in members) + "}"