"""
Convex hull of a planar point set via the Graham scan.

Pivot selection, orientation-only angular sort, and a single stack pass.
"""

from .errors import (
    EmptyInputError,
    GrahamScanError,
    HullDegenerateError,
    InsufficientPointsError,
    PointFileError,
)
from .geometry import Orientation, Point, cross_product, orientation
from .prepare import PreparedPoints, center_on_pivot, prepare_and_sort, select_pivot, sort_by_angle
from .scan import convex_hull, scan_hull

__all__ = [
    "EmptyInputError",
    "GrahamScanError",
    "HullDegenerateError",
    "InsufficientPointsError",
    "PointFileError",
    "Orientation",
    "Point",
    "cross_product",
    "orientation",
    "PreparedPoints",
    "center_on_pivot",
    "prepare_and_sort",
    "select_pivot",
    "sort_by_angle",
    "convex_hull",
    "scan_hull",
]

__version__ = "0.1.0"
