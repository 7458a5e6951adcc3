"""
Property helpers for validating sorting results.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_bijection(perm, n) -> bool
    assert_same_identities(before, after) -> None

Notes
-----
- `is_permutation` compares multisets of *values* (requires hashable
  elements); `assert_same_identities` compares multisets of *objects*, which
  catches a relocation bug that duplicates one element and drops an equal one.
- Stability is not checked here: equal values are indistinguishable. Tag
  elements with their original position, e.g. (key, id) records ordered by
  key only, to observe it.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable, Sequence


__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_bijection",
    "assert_same_identities",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff no element is less than its predecessor."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> int | None:
    """
    Return the first index i where xs[i+1] < xs[i], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i + 1] < xs[i]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` contain the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_bijection(perm: Iterable[int], n: int) -> bool:
    """Return True iff `perm` lists every index in [0, n) exactly once."""
    seen = [False] * n
    count = 0
    for i in perm:
        if not 0 <= i < n or seen[i]:
            return False
        seen[i] = True
        count += 1
    return count == n


def assert_same_identities(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that `after` holds exactly the objects of `before` (by identity),
    each the same number of times, regardless of order.

    Raises AssertionError naming the first object that was lost or duplicated.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Length changed from {len(before)} to {len(after)}"
        )
    counts = Counter(id(x) for x in before)
    counts.subtract(id(x) for x in after)
    for x in after:
        if counts[id(x)] < 0:
            raise AssertionError(f"Element duplicated by sort: {x!r}")
    for x in before:
        if counts[id(x)] > 0:
            raise AssertionError(f"Element lost by sort: {x!r}")
