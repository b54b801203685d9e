"""A deep equivalence relation for arbitrary values."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping

_ATOMS = (bool, int, float, complex, str, bytes)
_FUNCTIONS = (types.FunctionType, types.BuiltinFunctionType)


def equal(x: object, y: object) -> bool:
    """Report whether x and y are deeply equal.

    Values of different types are never equal. Cyclic structures are
    handled. Mapping keys are compared with ==, not deeply.
    """
    return _equal(x, y, set())


def _equal(x: object, y: object, seen: set[tuple[int, int]]) -> bool:
    if x is None or y is None:
        return x is None and y is None
    if type(x) is not type(y):
        return False
    if isinstance(x, _ATOMS):
        return x == y
    if isinstance(x, _FUNCTIONS):
        return x is y

    # cycle check
    if x is y:
        return True
    key = (id(x), id(y))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(x, (list, tuple)):
        return len(x) == len(y) and all(
            _equal(a, b, seen) for a, b in zip(x, y)
        )
    if isinstance(x, Mapping):
        if len(x) != len(y):
            return False
        return all(k in y and _equal(v, y[k], seen) for k, v in x.items())
    if isinstance(x, (set, frozenset)):
        return x == y
    if dataclasses.is_dataclass(x):
        return all(
            _equal(getattr(x, f.name), getattr(y, f.name), seen)
            for f in dataclasses.fields(x)
        )
    if hasattr(x, "__dict__") and not isinstance(x, types.MethodType):
        return _equal(vars(x), vars(y), seen)
    return x == y