#!/usr/bin/env python3
"""
Print the convex hull ids of a point file, counter-clockwise from the pivot.

Usage:
    python3 scripts/hull.py points.in [--int]
"""

import argparse
import sys
from pathlib import Path

from graham_scan import GrahamScanError, convex_hull
from graham_scan.io import read_points


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("input", type=Path)
    parser.add_argument("--int", dest="as_int", action="store_true", help="truncate coordinates to integers")
    args = parser.parse_args()

    try:
        points = read_points(args.input, number_type=int if args.as_int else float)
        hull = convex_hull(points)
    except (GrahamScanError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(" ".join(str(i) for i in hull))
    return 0


if __name__ == "__main__":
    sys.exit(main())
