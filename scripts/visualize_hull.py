#!/usr/bin/env python3
"""
Plot a point file and its convex hull.
"""

import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Polygon as MplPolygon

from graham_scan import GrahamScanError, convex_hull
from graham_scan.io import read_points

plt.rcParams['font.size'] = 10
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['figure.figsize'] = (8, 8)


def plot_hull(points, hull, title, ax, color='#377eb8'):
    """Plot points, the hull polygon and the pivot."""
    xy = np.array([(p.x, p.y) for p in points], dtype=float)
    by_id = {p.id: (p.x, p.y) for p in points}
    verts = np.array([by_id[i] for i in hull], dtype=float)

    ax.add_patch(MplPolygon(verts, closed=True, alpha=0.25, facecolor=color, edgecolor='#333333', linewidth=1.5))
    ax.scatter(xy[:, 0], xy[:, 1], c='black', s=8, zorder=4)
    ax.scatter(verts[:, 0], verts[:, 1], c=color, s=30, zorder=5)
    ax.scatter(verts[0, 0], verts[0, 1], c='#e41a1c', s=60, zorder=6, label='pivot')

    if len(points) <= 50:
        for p in points:
            ax.annotate(str(p.id), (p.x, p.y), textcoords='offset points', xytext=(4, 4), fontsize=8)

    ax.set_aspect('equal')
    ax.set_title(title)
    ax.legend(loc='upper right')


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("input", type=Path)
    parser.add_argument("--output", type=Path, default=None)
    args = parser.parse_args()

    try:
        points = read_points(args.input)
        hull = convex_hull(points)
    except GrahamScanError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    fig, ax = plt.subplots()
    plot_hull(points, hull, f"{args.input.name}: n={len(points)}, h={len(hull)}", ax)
    out = args.output or args.input.with_suffix(".png")
    fig.savefig(out, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"Saved {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
