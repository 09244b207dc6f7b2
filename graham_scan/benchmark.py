"""Timing helpers: best-of-N runs of a hull function."""

from __future__ import annotations

import statistics
import time
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

import pandas as pd

from .geometry import Point
from .scan import convex_hull


@dataclass
class BenchmarkResult:
    n: int
    runs: int
    min_s: float
    mean_s: float
    hull: List[int] = field(default_factory=list)
    family: str = ""

    @property
    def hull_size(self) -> int:
        return len(self.hull)


def benchmark(
    points: Sequence[Point],
    fn: Callable[[Sequence[Point]], List[int]] = convex_hull,
    runs: int = 3,
    family: str = "",
) -> BenchmarkResult:
    """Run ``fn`` on a fresh copy of ``points`` ``runs`` times."""
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")
    times = []
    hull: List[int] = []
    for _ in range(runs):
        data = list(points)
        start = time.perf_counter()
        hull = fn(data)
        times.append(time.perf_counter() - start)
    return BenchmarkResult(len(points), runs, min(times), statistics.mean(times), hull, family)


def benchmark_table(results: Sequence[BenchmarkResult]) -> pd.DataFrame:
    """One row per result, times in milliseconds."""
    return pd.DataFrame(
        [
            {
                "family": r.family,
                "n": r.n,
                "runs": r.runs,
                "hull_size": r.hull_size,
                "min_ms": r.min_s * 1000.0,
                "mean_ms": r.mean_s * 1000.0,
            }
            for r in results
        ],
        columns=["family", "n", "runs", "hull_size", "min_ms", "mean_ms"],
    )
