"""
Eager merge engine: top-down mergesort over an index buffer.

The elements are only ever read (for `<` comparisons); the thing being sorted
is a NumPy buffer of positions `[0, 1, ..., n-1]`. Each merge writes the
merged run into a scratch slice sized exactly to the run, then copies it
back into the working buffer. One scratch buffer of length n is allocated
per call and reused across levels by slicing.

Public API (stable):
    argsort_indices(seq: Sequence) -> numpy.ndarray
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

__all__ = ["argsort_indices"]


def argsort_indices(seq: Sequence[Any]) -> np.ndarray:
    """
    Return positions of `seq` in sorted order as an `intp` array.

    Ties keep their original relative order (the left run wins when neither
    element is less than the other).
    """
    n = len(seq)
    idx = np.arange(n, dtype=np.intp)
    if n < 2:
        return idx
    ws = np.empty(n, dtype=np.intp)
    _sort_range(seq, idx, ws, 0, n)
    return idx


def _sort_range(seq: Sequence[Any], idx: np.ndarray, ws: np.ndarray, left: int, right: int) -> None:
    if right - left < 2:
        return
    mid = left + (right - left) // 2
    _sort_range(seq, idx, ws, left, mid)
    _sort_range(seq, idx, ws, mid, right)
    _merge(seq, idx[left:mid], idx[mid:right], ws[left:right])
    idx[left:right] = ws[left:right]


def _merge(seq: Sequence[Any], lhs: np.ndarray, rhs: np.ndarray, out: np.ndarray) -> None:
    assert out.size == lhs.size + rhs.size, (
        f"scratch run of length {out.size} cannot hold {lhs.size} + {rhs.size} indices"
    )
    i = j = k = 0
    nl, nr = lhs.size, rhs.size
    while i < nl and j < nr:
        li = int(lhs[i])
        rj = int(rhs[j])
        if seq[rj] < seq[li]:
            out[k] = rj
            j += 1
        else:
            out[k] = li
            i += 1
        k += 1

    # One side is exhausted: the remainder is already ordered.
    if i < nl:
        out[k:] = lhs[i:]
    elif j < nr:
        out[k:] = rhs[j:]
