"""End-to-end test of the YAML-driven experiment runner."""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest
import yaml

from idxsort.bench.runner import main, run_experiment
from idxsort.validate import ORACLE_NAME


def _write_config(tmp_path: Path, **overrides: object) -> Path:
    cfg = {
        "experiment_name": "smoke",
        "output_dir": str(tmp_path / "runs"),
        "seed": 1,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30.0,
        "dataset": {"dist": "random_u64", "params": {}},
        "sizes": [0, 10, 50],
        "algorithms": [
            {"name": "builtin_timsort"},
            {"name": "index_mergesort", "label": "eager", "config": {"strategy": "eager"}},
            {"name": "index_mergesort", "label": "lazy", "config": {"strategy": "lazy"}},
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "experiment.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_outputs(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path))

    for name in ("results.jsonl", "summary.csv", "meta.json", "config_resolved.yaml"):
        assert (run_dir / name).exists(), name

    lines = [json.loads(x) for x in (run_dir / "results.jsonl").read_text().splitlines()]
    assert len(lines) == 3 * 3 * 2
    assert all("status" not in x for x in lines)

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["algo"]) == {"builtin_timsort", "eager", "lazy"}
    assert set(summary["n"]) == {0, 10, 50}
    assert (summary["samples_ok"] == 2).all()

    meta = json.loads((run_dir / "meta.json").read_text())
    assert "numpy" in meta and "machine" in meta
    assert meta["oracle"] == ORACLE_NAME


def test_failing_algorithm_is_skipped_for_larger_sizes(tmp_path: Path) -> None:
    cfg = _write_config(
        tmp_path,
        algorithms=[{"name": "index_mergesort", "config": {"strategy": "bogus"}}],
    )
    run_dir = run_experiment(cfg)
    lines = [json.loads(x) for x in (run_dir / "results.jsonl").read_text().splitlines()]
    assert len(lines) == 1
    assert lines[0]["status"] == "error" and lines[0]["n"] == 0

    summary = pd.read_csv(run_dir / "summary.csv")
    assert summary.empty


@pytest.mark.parametrize(
    "overrides, exc",
    [
        ({"sizes": []}, ValueError),
        ({"sizes": 10}, ValueError),
        ({"sizes": [10, -1]}, ValueError),
        ({"dataset": {"dist": "nope"}}, ValueError),
        ({"dataset": {"dist": "random_u64", "params": {"range": [9, 1]}}}, ValueError),
        ({"dataset": "random_u64"}, ValueError),
        ({"algorithms": [{"name": "no_such_sort"}]}, ImportError),
        ({"algorithms": [{"name": "builtin_timsort"}, {"name": "builtin_timsort"}]}, ValueError),
    ],
)
def test_invalid_configs(tmp_path: Path, overrides: dict, exc: type) -> None:
    with pytest.raises(exc):
        run_experiment(_write_config(tmp_path, **overrides))
    assert not (tmp_path / "runs").exists()


def test_missing_keys(tmp_path: Path) -> None:
    path = tmp_path / "partial.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path)


def test_cli_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml")])


def test_meta_records_no_oracle_without_verify(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path, verify=False, sizes=[5]))
    meta = json.loads((run_dir / "meta.json").read_text())
    assert meta["oracle"] is None
