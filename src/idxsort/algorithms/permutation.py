"""
Index permutations and the routine that commits them onto a sequence.

A `Permutation` is an ordered list of N positions that is a bijection on
[0, N): reading `seq[p[0]], seq[p[1]], ...` yields the elements in sorted
order. Permutations are only created by the merge engines in this package
(see `merge_eager` and `merge_lazy`), so every instance is a valid bijection
by construction and is never re-validated.

Public API (stable):
    Permutation
    apply_permutation(seq: MutableSequence, perm: Permutation) -> None

Conventions:
- `apply_permutation` relocates each element exactly once and never copies
  an element object: after the call, `seq[i] is old_seq[perm[i]]`.
- Applying a permutation whose length differs from the sequence is a
  programming error and fails with AssertionError.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, MutableSequence, Sequence

import numpy as np

__all__ = ["Permutation", "apply_permutation"]

logger = logging.getLogger(__name__)

# Only holders of this key may build a Permutation.
_BUILD_KEY = object()


class Permutation:
    """
    Read-only sequence of positions produced by a merge engine.

    `perm[i]` is an int; `perm[a:b]` is a new list of ints.
    """

    __slots__ = ("_indices",)

    def __init__(self, indices: np.ndarray, *, _key: object = None) -> None:
        if _key is not _BUILD_KEY:
            raise TypeError(
                "Permutation objects are produced by build_permutation(); "
                "they cannot be constructed directly"
            )
        indices.setflags(write=False)
        self._indices = indices

    def __len__(self) -> int:
        return int(self._indices.size)

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices.tolist())

    def __getitem__(self, i: int | slice) -> int | List[int]:
        if isinstance(i, slice):
            return self._indices[i].tolist()
        return int(self._indices[i])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Permutation):
            return bool(np.array_equal(self._indices, other._indices))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._indices.tobytes())

    def __repr__(self) -> str:
        return f"Permutation({self.tolist()!r})"

    def tolist(self) -> List[int]:
        """Return the positions as a new list of Python ints."""
        return self._indices.tolist()


def _from_trusted(indices: Sequence[int] | np.ndarray) -> Permutation:
    """
    Wrap engine output as a Permutation.

    Callers guarantee `indices` is a bijection on [0, len(indices)) and hand
    over ownership: an `intp` array is wrapped as is and frozen, not copied.
    """
    arr = np.asarray(indices, dtype=np.intp)
    return Permutation(arr, _key=_BUILD_KEY)


def apply_permutation(seq: MutableSequence[Any], perm: Permutation) -> None:
    """
    Reorder `seq` in place so that seq[i] holds the element previously at
    seq[perm[i]].

    Parameters
    ----------
    seq : MutableSequence
        Sequence to reorder. Must support len(), integer indexing and item
        assignment.
    perm : Permutation
        Output of a merge engine over `seq`; its length must equal len(seq).
    """
    n = len(seq)
    assert len(perm) == n, (
        f"permutation length {len(perm)} does not match sequence length {n}"
    )
    if n == 0:
        return

    # Move every element out into scratch in one pass. Must not be a slice:
    # slicing a NumPy array yields a view of the buffer being overwritten.
    scratch = list(seq)

    # Each scratch slot is read exactly once because `perm` is a bijection.
    for i, j in enumerate(perm.tolist()):
        seq[i] = scratch[j]

    # Every element now lives in `seq` again; drop the scratch references.
    scratch.clear()
    logger.debug("applied permutation of length %d", n)
