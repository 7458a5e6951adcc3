"""Tests for the dataset generators."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from idxsort.datasets import SUPPORTED_DISTS, HeavyRecord, make_dataset


def _rng(seed: int = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


@pytest.mark.parametrize(
    "spec",
    [
        {"dist": "random_u64"},
        {"dist": "random_strings"},
        {"dist": "reversed"},
        {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}},
        {"dist": "few_uniques", "params": {"k": 3}},
        {"dist": "heavy_records", "params": {"payload_bytes": 8}},
    ],
)
@pytest.mark.parametrize("n", [0, 1, 57])
def test_lengths(spec: dict, n: int) -> None:
    assert len(make_dataset(n, spec, _rng())) == n


def test_random_u64_full_range_values() -> None:
    out = make_dataset(500, {"dist": "random_u64"}, _rng())
    assert all(isinstance(x, int) and 0 <= x <= 2**64 - 1 for x in out)
    assert max(out) > 2**63  # the full range is actually used


def test_random_u64_custom_range_is_inclusive() -> None:
    out = make_dataset(200, {"dist": "random_u64", "params": {"range": [3, 4]}}, _rng())
    assert set(out) == {3, 4}


def test_same_seed_same_data() -> None:
    spec = {"dist": "random_strings", "params": {"min_len": 2, "max_len": 4}}
    assert make_dataset(50, spec, _rng(7)) == make_dataset(50, spec, _rng(7))


def test_random_strings_params() -> None:
    out = make_dataset(100, {"dist": "random_strings", "params": {"min_len": 2, "max_len": 3, "alphabet": "ab"}}, _rng())
    assert all(2 <= len(s) <= 3 and set(s) <= {"a", "b"} for s in out)


def test_reversed_and_nearly_sorted() -> None:
    assert make_dataset(4, {"dist": "reversed"}, _rng()) == [3, 2, 1, 0]
    ns = make_dataset(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.02}}, _rng())
    assert sorted(ns) == list(range(100))


def test_few_uniques_bounds_distinct_values() -> None:
    out = make_dataset(300, {"dist": "few_uniques", "params": {"k": 4, "range": [0, 1000]}}, _rng())
    assert len(set(out)) <= 4


def test_heavy_records_order_by_key_only() -> None:
    recs = make_dataset(10, {"dist": "heavy_records", "params": {"payload_bytes": 32, "range": [0, 3]}}, _rng())
    assert all(isinstance(r, HeavyRecord) and len(r.payload) == 32 for r in recs)
    a = HeavyRecord(key=1, payload=b"\xff")
    b = HeavyRecord(key=2, payload=b"\x00")
    assert a < b and not b < a
    assert "payload=<1 bytes>" in repr(a)


def test_bytes_file(tmp_path: Path) -> None:
    path = tmp_path / "some_bytes"
    path.write_bytes(bytes([9, 8, 7, 6, 5]))
    spec = {"dist": "bytes_file", "params": {"path": str(path), "offset": 1}}
    assert make_dataset(3, spec, _rng()) == [8, 7, 6]
    with pytest.raises(ValueError, match="only"):
        make_dataset(10, spec, _rng())


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "reversed"}),
        (3, {"dist": "unknown"}),
        (3, "random_u64"),
        (3, {"dist": "random_u64", "params": {"range": [5, 1]}}),
        (3, {"dist": "random_u64", "params": {"range": [-1, 5]}}),
        (3, {"dist": "random_strings", "params": {"min_len": 5, "max_len": 2}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 2.0}}),
        (3, {"dist": "few_uniques", "params": {}}),
        (3, {"dist": "heavy_records", "params": {"payload_bytes": -1}}),
        (3, {"dist": "bytes_file", "params": {}}),
        (3, {"dist": "bytes_file", "params": {"path": "/nonexistent/some_bytes"}}),
    ],
)
def test_invalid_specs(n: int, spec: dict) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, _rng())


def test_supported_dists_listed() -> None:
    assert "bytes_file" in SUPPORTED_DISTS and "heavy_records" in SUPPORTED_DISTS
