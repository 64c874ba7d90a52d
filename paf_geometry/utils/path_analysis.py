"""Measurements over reconstructed paths: bounds, winding, length, closure."""
import math
from typing import List, Optional, Sequence, Tuple

from paf_geometry.models import ArcSegment, LineSegment, PathSegment, Point
from paf_geometry.utils.point_utils import POINT_TOLERANCE, is_finite_point, points_match


def calculate_path_bounds(points: Sequence[Point]) -> Optional[Tuple[float, float, float, float]]:
    """
    Calculate the axis-aligned bounds of a point list.

    Non-finite points are ignored.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y), or None if there are no points
    """
    finite = [p for p in points or [] if is_finite_point(p)]
    if not finite:
        return None

    xs = [p.x for p in finite]
    ys = [p.y for p in finite]
    return (min(xs), min(ys), max(xs), max(ys))


def calculate_path_winding(points: Sequence[Point]) -> float:
    """
    Calculate the signed area of a closed point loop.

    Positive = counter-clockwise, Negative = clockwise.

    Args:
        points: Loop vertices (closing vertex optional)

    Returns:
        Signed area, 0.0 for fewer than 3 points
    """
    if len(points) < 3:
        return 0.0

    area = 0.0
    n = len(points)

    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def calculate_segment_length(segment: PathSegment) -> float:
    if isinstance(segment, ArcSegment):
        return segment.radius * segment.sweep
    if isinstance(segment, LineSegment):
        return math.hypot(segment.end.x - segment.start.x, segment.end.y - segment.start.y)
    raise TypeError(f"Unknown path segment type: {type(segment).__name__}")


def calculate_path_length(path_segments: Sequence[PathSegment]) -> float:
    """Total travel length of a segment chain (arcs measured along the curve)."""
    return sum(calculate_segment_length(segment) for segment in path_segments or [])


def path_segments_close_loop(
    path_segments: Sequence[PathSegment],
    tolerance: float = POINT_TOLERANCE
) -> bool:
    """
    Check if a segment chain ends where it starts.

    Args:
        path_segments: Ordered segments
        tolerance: Per-axis tolerance

    Returns:
        True if the first segment's start matches the last segment's end
    """
    if not path_segments:
        return False
    return points_match(path_segments[0].start, path_segments[-1].end, tolerance)


def find_chain_gaps(
    path_segments: Sequence[PathSegment],
    tolerance: float = POINT_TOLERANCE
) -> List[int]:
    """
    Find breaks in a segment chain.

    Returns:
        Indices i where segment i's end does not match segment i+1's start
    """
    gaps = []
    for i in range(len(path_segments) - 1):
        if not points_match(path_segments[i].end, path_segments[i + 1].start, tolerance):
            gaps.append(i)
    return gaps
