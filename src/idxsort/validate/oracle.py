"""
Reference oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth:
- Correct total order for any element type with `<`
- Deterministic and portable
- Stable, so outputs of left-biased merges match it element for element

Public API (stable):
    oracle_sort(a: Sequence[T]) -> list[T]

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- Sorters in this package work in place, so compare the oracle output with
  the sorted copy, not with the return value of `sort`.
"""

from __future__ import annotations

from typing import Any, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort"]


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """
    Return the ground-truth sorted output for `a`.

    Parameters
    ----------
    a : Sequence
        Input elements. The oracle does not mutate `a`.

    Returns
    -------
    list
        A new list with the same elements as `a`, in nondecreasing order.
    """
    return sorted(a)
