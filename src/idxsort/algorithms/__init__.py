"""
Sorting algorithms.

Each submodule exposes `sort(a, *, config=None)` that sorts `a` in place;
the benchmark runner resolves modules by name (e.g. "index_mergesort").
"""

from .index_mergesort import build_permutation, sort
from .permutation import Permutation, apply_permutation

__all__ = ["sort", "build_permutation", "apply_permutation", "Permutation"]
