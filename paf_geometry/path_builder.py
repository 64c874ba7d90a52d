"""Walk drafting commands and emit path segments and sampled points."""
import logging
from typing import List, Optional, Sequence, Tuple

from paf_geometry.models import DraftCommand, LineSegment, PathSegment, Point
from paf_geometry.utils.arc_sampler import sample_arc_points
from paf_geometry.utils.arc_solver import solve_arc
from paf_geometry.utils.point_utils import is_finite_point

logger = logging.getLogger(__name__)


def build_path(commands: Sequence[DraftCommand]) -> Tuple[List[Point], List[PathSegment]]:
    """
    Build the point list and segment chain for a command sequence.

    - move: sets the current point, no segment
    - any command before a current point exists: treated as a move
    - line: straight segment to the command point
    - arc: solved arc plus its sampled points; a straight fallback
      segment when the arc cannot be solved

    Args:
        commands: Decoded drafting commands

    Returns:
        Tuple of (points, path_segments)
    """
    points: List[Point] = []
    path_segments: List[PathSegment] = []
    current: Optional[Point] = None

    for command in commands or []:
        if command is None or not is_finite_point(command.point):
            continue
        target = command.point

        if command.kind == 'move' or current is None:
            current = target
            points.append(Point(target.x, target.y))
            continue

        if command.kind == 'line':
            path_segments.append(LineSegment(
                start=Point(current.x, current.y),
                end=Point(target.x, target.y)
            ))
            points.append(Point(target.x, target.y))
            current = target

        elif command.kind == 'arc':
            arc = solve_arc(
                current, target, command.radius,
                direction=command.direction,
                large_arc=command.large_arc,
                raw_type=command.raw_type
            )
            if arc is not None:
                path_segments.append(arc)
                # First sample is the current point, already in the list
                points.extend(sample_arc_points(arc)[1:])
            else:
                logger.debug(
                    "Arc from (%.6f, %.6f) to (%.6f, %.6f) with radius %s is infeasible, using a line",
                    current.x, current.y, target.x, target.y, command.radius
                )
                path_segments.append(LineSegment(
                    start=Point(current.x, current.y),
                    end=Point(target.x, target.y),
                    fallback=True
                ))
                points.append(Point(target.x, target.y))
            current = target

    return points, path_segments
