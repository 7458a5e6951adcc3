"""
Benchmark harness.

    from idxsort.bench.measure import time_sort_call
    from idxsort.bench.runner import run_experiment
"""
