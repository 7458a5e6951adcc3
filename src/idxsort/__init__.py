"""
idxsort: mergesort by index permutation.

    from idxsort import sort
    xs = [5, 0, 1]
    sort(xs)            # xs == [0, 1, 5]
"""

from .algorithms import Permutation, apply_permutation, build_permutation, sort

__version__ = "0.1.0"

__all__ = ["sort", "build_permutation", "apply_permutation", "Permutation", "__version__"]
