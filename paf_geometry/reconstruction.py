"""Rebuild PAF segment geometry from its source records.

Pipeline: decode_commands -> build_path (solve_arc, sample_arc_points)
-> finalize_points.

reconstruct_path is pure and returns a new ReconstructedPath.
rebuild_segment_geometry writes that result onto a PafSegment record.
"""
import logging
from typing import Iterable, Mapping, Optional, Union

from paf_geometry.command_decoder import decode_commands
from paf_geometry.finalizer import finalize_points
from paf_geometry.models import PafSegment, ReconstructedPath, SourceRecord
from paf_geometry.path_builder import build_path

logger = logging.getLogger(__name__)


def reconstruct_path(
    source: Optional[Iterable[Union[SourceRecord, Mapping]]],
    kind: str
) -> Optional[ReconstructedPath]:
    """
    Reconstruct points and path segments from source records.

    Args:
        source: Ordered PP/KB records
        kind: 'polygon' (closed loop) or any other kind (open path)

    Returns:
        ReconstructedPath, or None when nothing usable remains
    """
    if not source:
        return None

    commands = decode_commands(source)
    if not commands:
        logger.debug("No usable records in %s source", kind)
        return None

    sampled, path_segments = build_path(commands)
    points, closed = finalize_points(sampled, kind)
    if not points:
        logger.debug("No points left after finalizing %s source", kind)
        return None

    return ReconstructedPath(
        points=points,
        path_segments=list(path_segments),
        closed=closed
    )


def rebuild_segment_geometry(segment: PafSegment) -> bool:
    """
    Recompute a segment's points and path segments from its source records.

    The segment's points and path_segments are replaced on every call; on
    failure both are cleared.

    Args:
        segment: Segment record with kind and source

    Returns:
        True if geometry was rebuilt
    """
    if segment is None:
        return False

    result = reconstruct_path(segment.source, segment.kind)
    if result is None:
        segment.points = []
        segment.path_segments = []
        return False

    segment.points = list(result.points)
    segment.path_segments = list(result.path_segments)
    return True
