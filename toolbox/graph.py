"""Directed graphs, topological sorting and breadth-first traversal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence


class Graph:
    """A directed graph over string nodes."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, source: str, target: str) -> None:
        """Add an edge from source to target."""
        self._edges.setdefault(source, set()).add(target)

    def has_edge(self, source: str, target: str) -> bool:
        """Report whether there is an edge from source to target."""
        return target in self._edges.get(source, ())


# Computer science courses mapped to their prerequisites.
PREREQS: dict[str, list[str]] = {
    "algorithms": ["data structures"],
    "calculus": ["linear algebra"],
    "compilers": [
        "data structures",
        "formal languages",
        "computer organization",
    ],
    "data structures": ["discrete math"],
    "databases": ["data structures"],
    "discrete math": ["intro to programming"],
    "formal languages": ["discrete math"],
    "networks": ["operating systems"],
    "operating systems": ["data structures", "computer organization"],
    "programming languages": ["data structures", "computer organization"],
}


def topo_sort(m: Mapping[str, Sequence[str]]) -> list[str]:
    """Return the nodes of m so that every prerequisite precedes its dependants."""
    order: list[str] = []
    seen: set[str] = set()

    def visit_all(items: Iterable[str]) -> None:
        for item in items:
            if item not in seen:
                seen.add(item)
                visit_all(m.get(item, ()))
                order.append(item)

    visit_all(sorted(m))
    return order


def breadth_first(
    f: Callable[[str], Iterable[str] | None], worklist: Iterable[str]
) -> list[str]:
    """Call f once for each item reachable from worklist, breadth first.

    Items returned by f are added to the worklist. Returns the items in
    the order f was called on them.
    """
    seen: set[str] = set()
    visited: list[str] = []
    pending = list(worklist)
    while pending:
        items, pending = pending, []
        for item in items:
            if item not in seen:
                seen.add(item)
                visited.append(item)
                pending.extend(f(item) or ())
    return visited


def main(argv: list[str] | None = None) -> int:
    """Print the courses in PREREQS in topological order."""
    parser = argparse.ArgumentParser(prog="toposort")
    parser.parse_args(argv)
    for i, course in enumerate(topo_sort(PREREQS), start=1):
        print(f"{i}:\t{course}")
    return 0


if __name__ == "__main__":
    sys.exit(main())