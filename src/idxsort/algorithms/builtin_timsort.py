"""
Baseline sorter: Python's built-in list.sort (Timsort).

Same interface as every algorithm module in this package, so the benchmark
runner can time it side by side with `index_mergesort`:
    sort(a: MutableSequence, *, config: dict | None = None) -> None

`config` is accepted for interface compatibility and must be empty.
"""

from __future__ import annotations

from typing import Any, Dict, MutableSequence, Optional

__all__ = ["sort"]


def sort(a: MutableSequence[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    """Sort `a` in place with Timsort."""
    if config:
        raise ValueError(f"builtin_timsort takes no config; got keys {sorted(config)}")
    if isinstance(a, list):
        a.sort()
        return
    a[:] = sorted(a)
