"""
Timing harness for in-place sorting algorithms.

We measure exactly one call to an algorithm's `sort(a, config=...)` per sample,
using a monotonic high-resolution clock. Sorters mutate their argument, so
each sample gets a fresh copy of the input; copying, GC, warmup and output
verification all happen outside the timed block.

Public API (stable):
    time_sort_call(... ) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

from idxsort.validate import (
    first_nondecreasing_violation_index,
    oracle_sort,
    permutation_counter_diff,
)

__all__ = ["time_sort_call"]

logger = logging.getLogger(__name__)


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    a: Sequence[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    verify: bool = True,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(copy_of_a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable[..., None]
        Callable implementing sort(a, *, config=None), sorting `a` in place.
    a : Sequence
        Input elements. Never passed to `algo_fn` directly; each call gets a
        new list with the same elements.
    config : dict | None
        Algorithm configuration passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample timeout threshold. If a single call exceeds this threshold,
        we mark status="timeout" and stop further sampling.
    verify : bool
        If True, compare every sorted copy with the oracle (outside the timed
        block) and report a mismatch as status="error".

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],  # type: List[int]
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }
    expected = oracle_sort(a) if verify else None

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup and repeats > 0:
        try:
            algo_fn(list(a), config=config)
        except Exception as e:
            logger.warning("%s: warmup failed: %r", algo_name, e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: run failed at repeat %d: %r", algo_name, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            if expected is not None and arg != expected:
                where = _describe_mismatch(a, arg)
                result["status"] = "error"
                result["error"] = f"output mismatch at repeat {r}: {where}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break

    finally:
        # If GC was previously disabled, leave it disabled (respect caller's global state).
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result


def _describe_mismatch(a: Sequence[Any], out: Sequence[Any]) -> str:
    """Say why `out` differs from the oracle's sorted copy of `a`."""
    i = first_nondecreasing_violation_index(out)
    if i is not None:
        return f"first inversion at i={i}"
    diff = permutation_counter_diff(a, out)
    if diff:
        # Positive counts were lost by the sort, negative ones duplicated
        return f"elements lost (+) or duplicated (-): {diff!r}"
    return "equal keys reordered relative to the oracle"
