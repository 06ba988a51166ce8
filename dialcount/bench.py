# dialcount/bench.py
"""
Tiny benchmarking helper for the fine counting rule.

Times the unit-stepping implementation against the closed-form one on the
same input and checks that both report the same count.

Usage:

    from dialcount.bench import benchmark_fine

    stats = benchmark_fine("R1000000\nL999999", repeats=3)
    print(stats)
"""

from __future__ import annotations
import time
from typing import Any, Dict

from .core.dial import START_POSITION
from .rules import count_fine


def _best_of(fn, repeats: int) -> tuple[int, float]:
    best = float("inf")
    result = 0
    for _ in range(repeats):
        t0 = time.perf_counter()
        result = fn()
        best = min(best, time.perf_counter() - t0)
    return result, best


def benchmark_fine(
    text: str,
    repeats: int = 5,
    start: int = START_POSITION,
) -> Dict[str, Any]:
    """
    Returns a small stats dict:
        {
            "repeats": N,
            "count": ...,
            "iterative_s": ...,
            "arithmetic_s": ...,
        }
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    walked, iterative_s = _best_of(lambda: count_fine(text, start=start, arithmetic=False), repeats)
    closed, arithmetic_s = _best_of(lambda: count_fine(text, start=start, arithmetic=True), repeats)
    if walked != closed:
        raise AssertionError(f"fine rule mismatch: iterative={walked} arithmetic={closed}")

    return {
        "repeats": repeats,
        "count": walked,
        "iterative_s": iterative_s,
        "arithmetic_s": arithmetic_s,
    }
