"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        is_bijection
        assert_same_identities
"""

from .oracle import ORACLE_NAME, oracle_sort
from .properties import (
    assert_same_identities,
    first_nondecreasing_violation_index,
    is_bijection,
    is_nondecreasing,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_bijection",
    "assert_same_identities",
]
