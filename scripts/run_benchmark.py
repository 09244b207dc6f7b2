#!/usr/bin/env python3
"""
Benchmark the Graham scan over the generated point families.

Every hull is checked before its time is recorded.

Usage:
    python3 scripts/run_benchmark.py [--sizes N1 N2 ...] [--runs R]
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

from graham_scan.benchmark import benchmark, benchmark_table
from graham_scan.generators import FAMILIES
from graham_scan.validate import check_hull

ROOT = Path(__file__).resolve().parent.parent
RESULTS_DIR = ROOT / "results"
DEFAULT_SIZES = [100, 1000, 10000, 100000]


def log(msg: str) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--sizes", nargs="+", type=int, default=DEFAULT_SIZES)
    parser.add_argument("--runs", type=int, default=3)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--families", nargs="+", default=list(FAMILIES), choices=list(FAMILIES))
    parser.add_argument("--output", type=Path, default=RESULTS_DIR / "graham_scan.csv")
    parser.add_argument("--no-check", action="store_true", help="skip hull verification (O(n h))")
    args = parser.parse_args()

    results = []
    for family in args.families:
        log(f"=== {family.upper()} ===")
        gen = FAMILIES[family]
        for n in args.sizes:
            pts = gen(n) if family == "circle" else gen(n, seed=args.seed)
            res = benchmark(pts, runs=args.runs, family=family)
            if not args.no_check:
                ok, msg = check_hull(pts, res.hull)
                if not ok:
                    log(f"FAIL [{family} n={n}]: {msg}")
                    return 1
            log(f"  n={n:>8,} h={res.hull_size:>6,}  min={res.min_s * 1000:9.3f}ms  mean={res.mean_s * 1000:9.3f}ms")
            results.append(res)

    df = benchmark_table(results)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    log(f"Results saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
