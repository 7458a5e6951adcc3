"""
Index-permutation mergesort.

Sorts a mutable sequence without moving any element until the very end:
1) a merge engine computes the sorted order as a permutation of positions,
   comparing elements but never relocating them;
2) the permutation is applied onto the sequence in one pass, relocating
   every element exactly once.

This pays off when elements are expensive to move. If a comparison raises,
the exception propagates and the sequence is left untouched, because no
element moves before the permutation is complete.

Public API (stable):
    sort(a: MutableSequence, *, config: dict | None = None) -> None
    build_permutation(seq: Sequence, *, strategy: str = "eager") -> Permutation

Config keys (all optional):
    strategy : "eager" | "lazy"   merge engine to use (default "eager")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, MutableSequence, Optional, Sequence

from .merge_eager import argsort_indices
from .merge_lazy import drain, index_producer
from .permutation import Permutation, _from_trusted, apply_permutation

__all__ = ["STRATEGIES", "DEFAULT_STRATEGY", "sort", "build_permutation"]

logger = logging.getLogger(__name__)

STRATEGIES = ("eager", "lazy")
DEFAULT_STRATEGY = "eager"

_CONFIG_KEYS = {"strategy"}


def build_permutation(seq: Sequence[Any], *, strategy: str = DEFAULT_STRATEGY) -> Permutation:
    """
    Compute the permutation that sorts `seq`, without modifying it.

    Parameters
    ----------
    seq : Sequence
        Elements supporting `<`. Only read.
    strategy : str
        "eager" (index buffer + scratch) or "lazy" (producer tree). Both
        return the same permutation for every input.

    Returns
    -------
    Permutation
        p such that [seq[i] for i in p] is nondecreasing.
    """
    if strategy == "eager":
        return _from_trusted(argsort_indices(seq))
    if strategy == "lazy":
        return _from_trusted(drain(index_producer(seq, 0, len(seq))))
    raise ValueError(f"Unknown strategy: {strategy!r}. Supported: {list(STRATEGIES)}")


def sort(a: MutableSequence[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Sort `a` in place (nondecreasing under `<`).

    Parameters
    ----------
    a : MutableSequence
        Sequence to sort.
    config : dict | None
        See module docstring.

    Raises
    ------
    ValueError
        If `config` is not a dict or contains unknown keys or values.
    """
    strategy = _parse_strategy(config)
    n = len(a)
    logger.debug("index_mergesort: n=%d strategy=%s", n, strategy)
    if n < 2:
        return
    perm = build_permutation(a, strategy=strategy)
    apply_permutation(a, perm)


def _parse_strategy(config: Optional[Dict[str, Any]]) -> str:
    if config is None:
        return DEFAULT_STRATEGY
    if not isinstance(config, dict):
        raise ValueError(f"config must be a dict or None; got {type(config).__name__}")
    unknown = set(config) - _CONFIG_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys for index_mergesort: {sorted(unknown)}")
    strategy = config.get("strategy", DEFAULT_STRATEGY)
    if strategy not in STRATEGIES:
        raise ValueError(f"config.strategy must be one of {list(STRATEGIES)}; got {strategy!r}")
    return strategy
