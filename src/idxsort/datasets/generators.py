"""
Dataset generators for sorting tests and benchmarks.

Currently implemented:
- dist == "random_u64":
    Unsigned integers drawn uniformly from an inclusive range
    (default: the full 64-bit range [0, 2**64 - 1]).

- dist == "random_strings":
    Strings over an alphabet (default lowercase ASCII) with lengths drawn
    uniformly from [min_len, max_len].

- dist == "reversed":
    Deterministic reversed order: [n-1, n-2, ..., 0].

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps using the provided RNG.

- dist == "few_uniques":
    Choose up to k distinct integers from an inclusive range, then fill the
    array by sampling among them.

- dist == "heavy_records":
    `HeavyRecord(key, payload)` objects carrying a `payload_bytes`-long
    bytes payload, ordered by key only. These model elements that are
    expensive to move, which is the case index_mergesort is built for.

- dist == "bytes_file":
    The first n bytes of an external file, as ints in [0, 255]. `rng` is
    unused. Mirrors benchmarking on a fixed binary payload.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list
    HeavyRecord

Conventions:
- Integer ranges in params["range"] are **inclusive** on both ends.
- Returns a Python `list` (algorithms stay NumPy-agnostic).
- The caller supplies the RNG (for reproducibility across runs).
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random_u64",
    "random_strings",
    "reversed",
    "nearly_sorted",
    "few_uniques",
    "heavy_records",
    "bytes_file",
}
U64_MAX = 2**64 - 1

__all__ = ["SUPPORTED_DISTS", "HeavyRecord", "make_dataset"]


@dataclass(eq=False)
class HeavyRecord:
    """A sortable record whose payload makes copies expensive."""

    key: int
    payload: bytes

    def __lt__(self, other: "HeavyRecord") -> bool:
        return self.key < other.key

    def __repr__(self) -> str:
        return f"HeavyRecord(key={self.key}, payload=<{len(self.payload)} bytes>)"


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Generate a dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, {"dist": <name>, "params": {...}}.

        Random unsigned ints:
            {"dist": "random_u64", "params": {"range": [0, 1000]}}   # optional range

        Random strings:
            {"dist": "random_strings",
             "params": {"min_len": 1, "max_len": 8, "alphabet": "abc"}}  # all optional

        Nearly-sorted:
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}

        Few-uniques:
            {"dist": "few_uniques", "params": {"k": 100, "range": [lo, hi]}}

        Heavy records:
            {"dist": "heavy_records",
             "params": {"payload_bytes": 4096, "range": [lo, hi]}}   # optional

        Bytes file:
            {"dist": "bytes_file", "params": {"path": "data/some_bytes", "offset": 0}}

        Reversed:
            {"dist": "reversed", "params": {}}

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list
        A list of length `n` consistent with `spec`.

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "random_u64":
        lo, hi = _parse_optional_inclusive_range(params, default=(0, U64_MAX))
        if lo < 0 or hi > U64_MAX:
            raise ValueError(f"random_u64.params.range must lie within [0, {U64_MAX}]")
        if n == 0:
            return []
        arr = rng.integers(lo, hi, size=n, dtype=np.uint64, endpoint=True)
        return arr.tolist()

    if dist == "random_strings":
        min_len, max_len, alphabet = _parse_string_params(params)
        if n == 0:
            return []
        lengths = rng.integers(min_len, max_len, size=n, endpoint=True)
        letters = rng.integers(0, len(alphabet), size=int(lengths.sum()))
        out: List[str] = []
        pos = 0
        for length in lengths.tolist():
            out.append("".join(alphabet[c] for c in letters[pos:pos + length].tolist()))
            pos += length
        return out

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_optional_inclusive_range(params, default=(0, 4294967295))
        if n == 0:
            return []
        actual_k = int(min(k, n, hi - lo + 1))
        chosen: List[int] = []
        chosen_set = set()
        while len(chosen) < actual_k:
            need = actual_k - len(chosen)
            # Oversample so collisions rarely need another round.
            for v in rng.integers(lo, hi, size=need * 2, endpoint=True).tolist():
                if v not in chosen_set:
                    chosen_set.add(v)
                    chosen.append(v)
                    if len(chosen) == actual_k:
                        break
        return [chosen[t] for t in rng.integers(0, actual_k, size=n).tolist()]

    if dist == "heavy_records":
        payload_bytes = params.get("payload_bytes", 4096)
        if not _is_int_like(payload_bytes) or payload_bytes < 0:
            raise ValueError(
                f"heavy_records.params.payload_bytes must be an integer >= 0; got {payload_bytes!r}"
            )
        lo, hi = _parse_optional_inclusive_range(params, default=(0, 4294967295))
        if n == 0:
            return []
        keys = rng.integers(lo, hi, size=n, endpoint=True).tolist()
        return [HeavyRecord(key=key, payload=rng.bytes(int(payload_bytes))) for key in keys]

    if dist == "bytes_file":
        return _load_bytes(n, params)

    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_optional_inclusive_range(
    params: Dict[str, Any], default: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Parse an optional inclusive integer range from params.
    If not present, return `default`.
    """
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_string_params(params: Dict[str, Any]) -> Tuple[int, int, str]:
    min_len = params.get("min_len", 1)
    max_len = params.get("max_len", 8)
    alphabet = params.get("alphabet", string.ascii_lowercase)
    if not _is_int_like(min_len) or not _is_int_like(max_len):
        raise ValueError("random_strings.params.min_len/max_len must be integers")
    if min_len < 0 or min_len > max_len:
        raise ValueError(
            f"random_strings lengths invalid: need 0 <= min_len <= max_len; got {min_len}, {max_len}"
        )
    if not isinstance(alphabet, str) or not alphabet:
        raise ValueError("random_strings.params.alphabet must be a non-empty string")
    return int(min_len), int(max_len), alphabet


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """
    Parse and validate swap_frac in [0.0, 1.0] for nearly_sorted.
    Default to 0.05 if not provided.
    """
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _load_bytes(n: int, params: Dict[str, Any]) -> List[int]:
    """Read n bytes starting at params["offset"] (default 0) from params["path"]."""
    if "path" not in params:
        raise ValueError("bytes_file.params.path must be provided")
    path = Path(params["path"])
    offset = params.get("offset", 0)
    if not _is_int_like(offset) or offset < 0:
        raise ValueError(f"bytes_file.params.offset must be an integer >= 0; got {offset!r}")
    if not path.is_file():
        raise ValueError(f"bytes_file.params.path is not a file: {path}")
    data = path.read_bytes()[int(offset):int(offset) + n]
    if len(data) < n:
        raise ValueError(
            f"bytes_file {path} has only {len(data)} bytes after offset {offset}; need {n}"
        )
    return list(data)


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
