"""Shape a sampled point list into the stored polygon/polyline form.

Polygons store their loop without repeating the closing vertex:
    [(0,0), (4,0), (4,4), (0,4)]        stored as-is, closure implied
    [(0,0), (4,0), (4,4), (0,4), (0,0)] stored without the last point
Polylines store the deduplicated points unchanged.
"""
from typing import List, Sequence, Tuple

from paf_geometry.models import Point
from paf_geometry.utils.point_utils import dedupe_points, is_closed_loop

POLYGON_KIND = 'polygon'


def finalize_points(points: Sequence[Point], kind: str) -> Tuple[List[Point], bool]:
    """
    Deduplicate points and apply polygon closing rules.

    Args:
        points: Raw sampled points from the path builder
        kind: Segment kind; 'polygon' closes the loop, anything else is open

    Returns:
        Tuple of (stored points, closed). Stored points are new objects.
    """
    deduped = dedupe_points(points)
    closed = is_closed_loop(deduped)

    if kind != POLYGON_KIND:
        return deduped, closed

    loop_points = deduped
    if not closed and len(deduped) >= 3:
        loop_points = deduped + [deduped[0]]
        closed = True

    if len(loop_points) <= 1:
        return [], closed

    return [Point(p.x, p.y) for p in loop_points[:-1]], closed
