"""Source record and arc geometry validation utilities.

These produce human-readable reports only. Reconstruction never depends on
them: it skips bad records and degrades bad arcs on its own.
"""
import math
from typing import Iterable, List, Mapping, Sequence, Union

from paf_geometry.command_decoder import (
    POINT_COMMAND,
    RADIUS_POINT_COMMAND,
    record_field,
    read_record_numbers
)
from paf_geometry.models import ArcSegment, LineSegment, PathSegment, SourceRecord


def validate_source_records(records: Iterable[Union[SourceRecord, Mapping]]) -> List[str]:
    """
    Report records the command decoder will skip.

    Args:
        records: Ordered PP/KB source records

    Returns:
        List of error messages (empty if every record is usable)
    """
    errors = []
    for i, record in enumerate(records or []):
        if record is None:
            errors.append(f"Record {i} is empty")
            continue

        command = record_field(record, 'command')
        if command == POINT_COMMAND:
            if read_record_numbers(record, 2) is None:
                errors.append(f"PP record {i} needs finite x and y values")
        elif command == RADIUS_POINT_COMMAND:
            if read_record_numbers(record, 3) is None:
                errors.append(f"KB record {i} needs finite x, y and radius values")
        else:
            errors.append(f"Record {i} has unsupported command {command!r}")

    return errors


def validate_arc_geometry(
    path_segments: Sequence[PathSegment],
    tolerance: float = 1e-5
) -> List[str]:
    """
    Validate solved arcs in a path.

    Checks that arc endpoints are equidistant from the arc center and that
    the sweep sign agrees with the arc direction. Fallback lines (arcs that
    could not be solved) are reported too.

    Args:
        path_segments: Reconstructed segments
        tolerance: Maximum allowed difference between radius and endpoint distance

    Returns:
        List of warning messages (empty if all valid)
    """
    warnings = []

    for i, segment in enumerate(path_segments or []):
        if isinstance(segment, LineSegment):
            if segment.fallback:
                warnings.append(
                    f"Segment {i}: arc to ({segment.end.x:.4f}, {segment.end.y:.4f}) "
                    f"could not be solved and was replaced by a line"
                )
            continue

        if not isinstance(segment, ArcSegment):
            warnings.append(f"Segment {i} has unknown type {type(segment).__name__}")
            continue

        start_radius = math.hypot(segment.start.x - segment.center.x, segment.start.y - segment.center.y)
        end_radius = math.hypot(segment.end.x - segment.center.x, segment.end.y - segment.center.y)

        if abs(start_radius - segment.radius) > tolerance or abs(end_radius - segment.radius) > tolerance:
            warnings.append(
                f"Segment {i}: arc endpoints are not on its circle "
                f"(radius {segment.radius:.4f}, start {start_radius:.4f}, end {end_radius:.4f})"
            )

        if (segment.signed_sweep < 0) != segment.clockwise:
            warnings.append(f"Segment {i}: sweep sign does not match arc direction")

    return warnings
