"""PAF segment geometry reconstruction from PP/KB drafting records."""

from .models import (
    Point,
    SourceRecord,
    DraftCommand,
    LineSegment,
    ArcSegment,
    PathSegment,
    ReconstructedPath,
    PafSegment
)
from .command_decoder import decode_commands, infer_arc_direction, is_large_arc
from .path_builder import build_path
from .finalizer import finalize_points
from .reconstruction import reconstruct_path, rebuild_segment_geometry
from .utils.arc_solver import solve_arc
from .utils.arc_sampler import sample_arc_points

__all__ = [
    # Models
    'Point',
    'SourceRecord',
    'DraftCommand',
    'LineSegment',
    'ArcSegment',
    'PathSegment',
    'ReconstructedPath',
    'PafSegment',
    # Pipeline
    'decode_commands',
    'infer_arc_direction',
    'is_large_arc',
    'build_path',
    'finalize_points',
    'reconstruct_path',
    'rebuild_segment_geometry',
    # Arc geometry
    'solve_arc',
    'sample_arc_points',
]
