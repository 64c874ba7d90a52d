"""Tolerance-based point comparison utilities."""
import math
from typing import List, Optional, Sequence

from paf_geometry.models import Point

# Per-axis tolerance for treating two coordinates as the same
POINT_TOLERANCE = 1e-6


def is_finite_point(point: Optional[Point]) -> bool:
    """Check that a point exists and both coordinates are finite."""
    if point is None:
        return False
    return math.isfinite(point.x) and math.isfinite(point.y)


def is_approximately_equal(a: float, b: float, tolerance: float = POINT_TOLERANCE) -> bool:
    return abs(a - b) < tolerance


def points_match(p1: Point, p2: Point, tolerance: float = POINT_TOLERANCE) -> bool:
    """Check if two points coincide on both axes (not combined distance)."""
    return (
        is_approximately_equal(p1.x, p2.x, tolerance) and
        is_approximately_equal(p1.y, p2.y, tolerance)
    )


def dedupe_points(points: Sequence[Point], tolerance: float = POINT_TOLERANCE) -> List[Point]:
    """
    Drop consecutive near-coincident points.

    Each point is compared against the last point that was kept. Points with
    non-finite coordinates are dropped as well.

    Args:
        points: Ordered points
        tolerance: Per-axis tolerance

    Returns:
        New list with duplicates removed
    """
    result: List[Point] = []
    for point in points or []:
        if not is_finite_point(point):
            continue
        if result and points_match(result[-1], point, tolerance):
            continue
        result.append(Point(point.x, point.y))
    return result


def is_closed_loop(points: Sequence[Point], tolerance: float = POINT_TOLERANCE) -> bool:
    """
    Check if a point sequence closes on itself (first == last).

    Args:
        points: Ordered points
        tolerance: Per-axis tolerance

    Returns:
        True if there are at least 2 points and the first and last coincide
    """
    if not points or len(points) < 2:
        return False
    return points_match(points[0], points[-1], tolerance)
