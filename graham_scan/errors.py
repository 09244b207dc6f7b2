"""Exceptions raised while building a hull."""

from __future__ import annotations


class GrahamScanError(Exception):
    """Base class; a failed hull computation returns nothing."""


class EmptyInputError(GrahamScanError, ValueError):
    """No points were supplied."""


class InsufficientPointsError(GrahamScanError, ValueError):
    """Fewer points than the scan needs to seed its stack."""

    def __init__(self, count: int, minimum: int):
        super().__init__(f"Need at least {minimum} points, got {count}")
        self.count = count
        self.minimum = minimum


class HullDegenerateError(GrahamScanError):
    """No non-degenerate convex polygon exists, or the scan stack underflowed."""


class PointFileError(GrahamScanError, ValueError):
    """A point file is malformed or its declared count is wrong."""

    def __init__(self, path, message: str, line: int | None = None):
        where = f"{path}:{line}" if line is not None else f"{path}"
        super().__init__(f"{where}: {message}")
        self.path = path
        self.line = line
