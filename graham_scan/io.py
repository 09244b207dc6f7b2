"""
Point file reading and writing.

The format is:
N
x0,y0
x1,y1
...

Ids are assigned in file order. Whitespace-separated ``x y`` lines are also
accepted, matching the project's polygon files.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Callable, Iterable, List, Tuple, Union

import numpy as np

from .errors import PointFileError
from .geometry import Point
from .prepare import MIN_POINTS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _parse_number(text: str, number_type: Callable):
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite coordinate {text!r}")
    if number_type is int:
        # truncate toward zero, as a cast from double would
        return int(value)
    return number_type(value)


def _split_coords(line: str) -> Tuple[str, str]:
    if "," in line:
        first, second = line.split(",", 1)
    else:
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"expected 'x,y', got {line!r}")
        first, second = parts
    return first.strip(), second.strip()


def read_points(path: PathLike, number_type: Callable = float) -> List[Point]:
    """Read a point file and validate its declared count."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        lines = [(no, l.strip()) for no, l in enumerate(f, start=1) if l.strip()]

    if not lines:
        raise PointFileError(path, "empty file")

    count_line, count_text = lines[0]
    try:
        declared = int(count_text)
    except ValueError:
        raise PointFileError(path, f"invalid point count {count_text!r}", count_line) from None
    if declared < MIN_POINTS:
        raise PointFileError(path, f"less than {MIN_POINTS} points in input file", count_line)

    points = []
    for idx, (line_no, text) in enumerate(lines[1:]):
        try:
            xs, ys = _split_coords(text)
            x = _parse_number(xs, number_type)
            y = _parse_number(ys, number_type)
        except (ValueError, OverflowError) as e:
            raise PointFileError(path, str(e), line_no) from None
        points.append(Point(x, y, idx))

    if len(points) != declared:
        raise PointFileError(
            path, f"incorrect number of points: declared {declared}, found {len(points)}"
        )
    logger.debug("read %d points from %s", len(points), path)
    return points


def write_points(points: Iterable[Point], path: PathLike) -> None:
    path = Path(path)
    points = list(points)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(points)}\n")
        for p in points:
            # High precision so floats survive the round trip.
            f.write(f"{p.x:.17g},{p.y:.17g}\n")


def points_from_xy(coords) -> List[Point]:
    """Build Points (ids 0..N-1) from (x, y) pairs or an (N, 2) array."""
    if isinstance(coords, np.ndarray):
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"expected an (N, 2) array, got shape {coords.shape}")
        coords = coords.tolist()
    return [Point(x, y, i) for i, (x, y) in enumerate(coords)]
