"""Arc tessellation: convert a solved arc into a polyline."""
import math
from typing import List

from paf_geometry.models import ArcSegment, Point

# Roughly 7.5 degrees of sweep per polyline step
ARC_STEP_ANGLE = math.pi / 24
MIN_ARC_STEPS = 4
MAX_ARC_STEPS = 160

# Below this sweep the arc is drawn as its chord
MIN_SAMPLE_SWEEP = 1e-6


def calculate_arc_step_count(sweep: float) -> int:
    """
    Number of polyline steps for an arc of the given sweep.

    Args:
        sweep: Arc sweep in radians (sign ignored)

    Returns:
        Step count clamped to [MIN_ARC_STEPS, MAX_ARC_STEPS]
    """
    steps = math.ceil(abs(sweep) / ARC_STEP_ANGLE)
    return min(max(steps, MIN_ARC_STEPS), MAX_ARC_STEPS)


def sample_arc_points(arc: ArcSegment) -> List[Point]:
    """
    Sample points along an arc, from its start to its end.

    The first and last samples are replaced by the arc's exact endpoints so
    trigonometric round-off never moves the path's vertices.

    Args:
        arc: Solved arc segment

    Returns:
        step_count + 1 points, or [start, end] for a degenerate arc
    """
    signed_sweep = arc.signed_sweep if math.isfinite(arc.signed_sweep) else 0.0
    radius = arc.radius if math.isfinite(arc.radius) else 0.0
    if abs(signed_sweep) < MIN_SAMPLE_SWEEP or radius <= 0:
        return [Point(arc.start.x, arc.start.y), Point(arc.end.x, arc.end.y)]

    steps = calculate_arc_step_count(signed_sweep)
    delta = signed_sweep / steps

    points = []
    for i in range(steps + 1):
        angle = arc.start_angle + delta * i
        points.append(Point(
            arc.center.x + radius * math.cos(angle),
            arc.center.y + radius * math.sin(angle)
        ))

    points[0] = Point(arc.start.x, arc.start.y)
    points[-1] = Point(arc.end.x, arc.end.y)
    return points
