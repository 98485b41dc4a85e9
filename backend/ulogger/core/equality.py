"""Structural Equality — recursive comparison of like-shaped mappings.

Invariants:
    - Only the first argument's keys are visited; keys present only in the
      second argument are ignored (is_deep_equal({"a": 1}, {"a": 1, "b": 2}) is True)
    - A key of the first argument missing from the second makes them unequal
    - Lists and tuples are compared by index, the same way as mappings
    - Not cycle-safe: self-referential structures recurse until RecursionError

Design Decisions:
    - Asymmetry kept for callers that compare a partial update against the
      full stored state; use is_deep_equal(a, b) and is_deep_equal(b, a)
      together for a symmetric check
"""

from collections.abc import Mapping
from typing import Any

_ABSENT = object()


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _keys(value: Any):
    if isinstance(value, Mapping):
        return value.keys()
    return range(len(value))


def _lookup(container: Any, key: Any) -> Any:
    if isinstance(container, Mapping):
        return container.get(key, _ABSENT)
    if isinstance(key, int) and 0 <= key < len(container):
        return container[key]
    return _ABSENT


def is_deep_equal(first: Any, second: Any) -> bool:
    """True when every value reachable through first's keys equals second's."""
    for key in _keys(first):
        left = first[key]
        right = _lookup(second, key)
        if _is_container(left) and _is_container(right):
            if not is_deep_equal(left, right):
                return False
        elif right is _ABSENT or left != right:
            return False
    return True
