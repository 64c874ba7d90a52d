"""Shared utility modules for path reconstruction."""

from .point_utils import (
    POINT_TOLERANCE,
    is_finite_point,
    is_approximately_equal,
    points_match,
    dedupe_points,
    is_closed_loop
)
from .arc_solver import (
    calculate_unsigned_sweep,
    calculate_signed_sweep,
    calculate_candidate_centers,
    solve_arc
)
from .arc_sampler import calculate_arc_step_count, sample_arc_points
from .path_analysis import (
    calculate_path_bounds,
    calculate_path_winding,
    calculate_segment_length,
    calculate_path_length,
    path_segments_close_loop,
    find_chain_gaps
)
from .validators import validate_source_records, validate_arc_geometry

__all__ = [
    # point_utils
    'POINT_TOLERANCE',
    'is_finite_point',
    'is_approximately_equal',
    'points_match',
    'dedupe_points',
    'is_closed_loop',
    # arc_solver
    'calculate_unsigned_sweep',
    'calculate_signed_sweep',
    'calculate_candidate_centers',
    'solve_arc',
    # arc_sampler
    'calculate_arc_step_count',
    'sample_arc_points',
    # path_analysis
    'calculate_path_bounds',
    'calculate_path_winding',
    'calculate_segment_length',
    'calculate_path_length',
    'path_segments_close_loop',
    'find_chain_gaps',
    # validators
    'validate_source_records',
    'validate_arc_geometry',
]
