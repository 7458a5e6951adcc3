"""Tests for the timing harness."""

from __future__ import annotations

import gc
from typing import Any, List

import pytest

from idxsort.algorithms import builtin_timsort, index_mergesort
from idxsort.bench.measure import time_sort_call


def _run(algo_fn: Any, a: List[Any], **overrides: Any) -> dict:
    kwargs = dict(
        algo_name="algo",
        algo_fn=algo_fn,
        a=a,
        config=None,
        repeats=3,
        warmup=True,
        disable_gc=False,
        timeout_seconds=5.0,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


@pytest.mark.parametrize("algo_fn", [builtin_timsort.sort, index_mergesort.sort])
def test_ok_samples_and_input_untouched(algo_fn: Any) -> None:
    a = [5, 3, 9, 1]
    res = _run(algo_fn, a)
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 3
    assert all(isinstance(t, int) and t >= 0 for t in res["samples_ns"])
    assert a == [5, 3, 9, 1]


def test_config_passed_through() -> None:
    res = _run(index_mergesort.sort, [2, 1], config={"strategy": "lazy"})
    assert res["status"] == "ok"


def test_wrong_output_is_error() -> None:
    def broken(a: List[int], *, config: Any = None) -> None:
        a.reverse()

    res = _run(broken, [1, 3, 2], warmup=False)
    assert res["status"] == "error"
    assert "output mismatch" in res["error"]
    assert res["samples_ns"] == []


def test_wrong_output_ignored_without_verify() -> None:
    def broken(a: List[int], *, config: Any = None) -> None:
        a.reverse()

    assert _run(broken, [1, 3, 2], verify=False)["status"] == "ok"


def test_exception_is_error() -> None:
    res = _run(index_mergesort.sort, [2, 1], config={"strategy": "nope"}, warmup=False)
    assert res["status"] == "error"
    assert "run failed at repeat 0" in res["error"]

    res = _run(index_mergesort.sort, [2, 1], config={"strategy": "nope"})
    assert res["error"].startswith("warmup failed")


def test_timeout() -> None:
    res = _run(builtin_timsort.sort, list(range(1000)), timeout_seconds=1e-12)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_gc_restored() -> None:
    assert gc.isenabled()
    _run(builtin_timsort.sort, [3, 2, 1], disable_gc=True)
    assert gc.isenabled()


@pytest.mark.parametrize("overrides", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_invalid_arguments(overrides: dict) -> None:
    with pytest.raises(ValueError):
        _run(builtin_timsort.sort, [1], **overrides)


def test_lost_element_is_named() -> None:
    def lossy(a: List[int], *, config: Any = None) -> None:
        a.sort()
        a[1] = a[0]

    res = _run(lossy, [3, 1, 2], warmup=False)
    assert res["status"] == "error"
    assert "elements lost (+) or duplicated (-)" in res["error"]
    assert "2: 1" in res["error"] and "1: -1" in res["error"]


class _Key:
    def __init__(self, key: int) -> None:
        self.key = key

    def __lt__(self, other: "_Key") -> bool:
        return self.key < other.key


def test_equal_keys_reordered_is_named() -> None:
    def unstable(a: List[Any], *, config: Any = None) -> None:
        a.sort()
        a[0], a[1] = a[1], a[0]

    res = _run(unstable, [_Key(0), _Key(0), _Key(1)], warmup=False)
    assert res["status"] == "error"
    assert res["error"].endswith("equal keys reordered relative to the oracle")
