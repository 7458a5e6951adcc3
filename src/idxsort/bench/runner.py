"""
Experiment runner: orchestrates a full benchmarking sweep from a YAML config.

Usage (from repo root):
    idxsort-bench experiments/configs/01_random_u64_scaling.yaml
    python -m idxsort.bench.runner experiments/configs/02_heavy_records.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per successful timing sample
    - summary.csv             # median + IQR per (algo, n)
    - (console) rich table + tqdm progress

Design notes:
- For each size n, we generate ONE dataset and give a copy of it to every algorithm.
- On timeout/error for an algorithm at size n, we skip larger sizes for that algo.
- Algorithms are resolved by module name under `idxsort.algorithms`, so a
  config lists the same algorithm twice only with different `label`s, e.g.
  index_mergesort with strategy "eager" and with strategy "lazy".
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from idxsort.bench.measure import time_sort_call
from idxsort.datasets import make_dataset
from idxsort.validate import ORACLE_NAME

__all__ = ["AlgoSpec", "run_experiment", "main"]

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
]
_SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    label: str
    module: str
    sort_fn: Callable[..., None]
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Experiment config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if not isinstance(entry, dict):
            raise ValueError(f"Each algorithm entry must be a mapping; got {entry!r}")
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        label = entry.get("label", name)
        if label in seen:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        seen.add(label)

        try:
            mod = importlib.import_module(f"idxsort.algorithms.{name}")
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module 'idxsort.algorithms.{name}': {e!r}") from e

        sort_fn = getattr(mod, "sort", None)
        if not callable(sort_fn):
            raise AttributeError(f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`")

        config = entry.get("config", {})
        if config is None:
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(f"Algorithm '{label}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(label=label, module=name, sort_fn=sort_fn, config=config))
    return specs


def _parse_sizes(raw: Any) -> List[int]:
    if not isinstance(raw, (list, tuple)) or not raw:
        raise ValueError(f"Config 'sizes' must be a non-empty list of nonnegative integers; got {raw!r}")
    if not all(isinstance(n, int) and not isinstance(n, bool) and n >= 0 for n in raw):
        raise ValueError(f"Config 'sizes' must contain nonnegative integers only; got {raw!r}")
    return list(raw)


def _parse_dataset_spec(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError(f"Config 'dataset' must be a mapping; got {raw!r}")
    spec = dict(raw)
    # An empty draw runs every param check without generating data
    make_dataset(0, spec, np.random.default_rng(0))
    return spec


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    # Status lines (timeout/error) have no time_ns
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    grouped = df.groupby(["algo", "n"])["time_ns"]
    out = grouped.agg(
        samples_ok="count",
        median_ns="median",
        min_ns="min",
        max_ns="max",
    )
    out["iqr_ns"] = grouped.quantile(0.75) - grouped.quantile(0.25)
    out = out.reset_index()
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
    if median_ns is None:
        return "—"
    median_ms = median_ns / 1e6
    if iqr_ns is None:
        return f"{median_ms:.2f}"
    return f"{median_ms:.2f} ± {iqr_ns / 1e6:.2f}"


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    # First/middle/last n as columns
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [str(algo)]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].values[0]), int(s["iqr_ns"].values[0])))
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    """
    Run the sweep described by the YAML file at `config_path`.

    Returns the run directory holding the outputs listed in the module
    docstring. Raises ValueError on an invalid config.
    """
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name: str = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes = _parse_sizes(cfg["sizes"])
    repeats: int = int(cfg["repeats"])
    warmup: bool = bool(cfg["warmup"])
    disable_gc: bool = bool(cfg["disable_gc"])
    timeout_seconds: float = float(cfg["timeout_seconds"])
    verify: bool = bool(cfg.get("verify", True))
    dataset_spec = _parse_dataset_spec(cfg["dataset"])
    algos_cfg: List[Dict[str, Any]] = list(cfg["algorithms"])

    if not algos_cfg:
        raise ValueError("Config 'algorithms' must be a non-empty list")

    # Validate everything before creating any output so a bad config leaves no run dir behind
    algos = _resolve_algorithms(algos_cfg)

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        meta = _gather_meta()
        meta["oracle"] = ORACLE_NAME if verify else None
        json.dump(meta, f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    per_algo_skip = {a.label: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.label for a in algos)}")
    logger.info("experiment %s: sizes=%s algorithms=%s", experiment_name, sizes, [a.label for a in algos])

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for a_spec in algos:
            if per_algo_skip[a_spec.label]:
                continue

            res = time_sort_call(
                algo_name=a_spec.label,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                config=a_spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                verify=verify,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": a_spec.label,
                        "module": a_spec.module,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "config": a_spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status == "ok":
                continue
            per_algo_skip[a_spec.label] = True
            record: Dict[str, Any] = {
                "algo": a_spec.label,
                "module": a_spec.module,
                "n": n,
                "status": status,
                "config": a_spec.config,
            }
            if status == "timeout":
                record["timed_out_on_repeat"] = res["timed_out_on_repeat"]
            else:
                record["error"] = res["error"]
            _append_jsonl(record, results_path)
            logger.info("%s: %s at n=%d; skipping larger sizes", a_spec.label, status, n)

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_rich_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
