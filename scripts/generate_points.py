#!/usr/bin/env python3
"""
Generate deterministic point set files for benchmarking.
The format is:
N
x0,y0
x1,y1
...
"""

import argparse
from pathlib import Path

from graham_scan.generators import FAMILIES, rotate_points
from graham_scan.io import write_points

# Fixed rotation (radians) so float families avoid equal-y ties.
ROT_ANGLE = 0.123456789


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="points/generated", type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 100, 1000, 10000, 100000],
    )
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    for n in args.sizes:
        write_points(rotate_points(FAMILIES["random"](n, seed=args.seed), ROT_ANGLE), args.output / f"random_{n}.in")
        write_points(rotate_points(FAMILIES["circle"](n), ROT_ANGLE), args.output / f"circle_{n}.in")
        # integer family stays unrotated to keep exact coordinates
        write_points(FAMILIES["square"](n, seed=args.seed), args.output / f"square_{n}.in")

    print(f"Generated point sets in {args.output}")


if __name__ == "__main__":
    main()
