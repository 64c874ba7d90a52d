"""
Arc Solver Module

Recovers a circular arc from the implicit form used by KB records.

KB Arc Definition (what the drafting data stores):
    - Start point (current point of the path)
    - End point (x, y of the record)
    - Radius
    - Direction: CW or CCW (from the type token)
    - Large/small arc preference (from the type token's casing)

The center is NOT stored, so it has to be derived. For a chord of length c
and radius r there are (generically) two circles through both endpoints.
Their centers lie on the chord's perpendicular bisector, at a distance
h = sqrt(r^2 - (c/2)^2) on either side of the chord midpoint.

Candidate ordering:
    The "+offset" center (chord direction rotated +90 degrees) is always
    tried before the "-offset" center. Existing drawings depend on this
    order, so it must not change.

Selection:
    1. First candidate whose sweep is non-degenerate and whose major/minor
       classification matches the large-arc flag. A sweep within tolerance
       of exactly pi (a semicircle) matches either flag.
    2. Otherwise, first candidate with any non-degenerate sweep, ignoring
       the flag.
    3. Otherwise, no arc.

Angles are standard math angles (Y-up, CCW positive, radians).
"""

import math
from typing import List, Optional, Tuple

from paf_geometry.models import ArcSegment, Point
from paf_geometry.utils.point_utils import is_finite_point

TWO_PI = 2 * math.pi

# Chord/radius tolerance for feasibility checks
CHORD_EPSILON = 1e-6
# Smallest usable radius
MIN_RADIUS = 1e-6
# Sweep tolerance used for candidate selection
SWEEP_TOLERANCE = 1e-5


def calculate_unsigned_sweep(start_angle: float, end_angle: float, direction: int) -> float:
    """
    Calculate the angular travel from start to end in the given direction.

    Args:
        start_angle: Start angle in radians
        end_angle: End angle in radians
        direction: +1 for CCW (increasing angle), -1 for CW (decreasing angle)

    Returns:
        Sweep in radians, normalized into [0, 2pi)
    """
    if direction >= 0:
        sweep = end_angle - start_angle
    else:
        sweep = start_angle - end_angle

    sweep = math.fmod(sweep, TWO_PI)
    if sweep < 0:
        sweep += TWO_PI
    # A tiny negative remainder plus 2pi can round up to exactly 2pi
    if sweep >= TWO_PI:
        sweep = 0.0
    return sweep


def calculate_signed_sweep(start_angle: float, end_angle: float, direction: int) -> float:
    """
    Calculate the signed sweep of an arc.

    The magnitude is the unsigned sweep, except that coincident angles mean a
    full turn. The sign is negative for clockwise travel.
    """
    sweep = calculate_unsigned_sweep(start_angle, end_angle, direction)
    if sweep == 0:
        sweep = TWO_PI
    return sweep if direction >= 0 else -sweep


def calculate_candidate_centers(start: Point, end: Point, radius: float) -> List[Point]:
    """
    Calculate both circle centers through two points for a given radius.

    Args:
        start: Chord start point
        end: Chord end point
        radius: Circle radius (must span the chord)

    Returns:
        [+offset center, -offset center]
    """
    dx = end.x - start.x
    dy = end.y - start.y
    half_chord = math.hypot(dx, dy) / 2

    mid_x = (start.x + end.x) / 2
    mid_y = (start.y + end.y) / 2

    # Perpendicular to the chord, rotated +90 degrees
    perp_angle = math.atan2(dy, dx) + math.pi / 2
    height = math.sqrt(max(radius * radius - half_chord * half_chord, 0.0))
    offset_x = height * math.cos(perp_angle)
    offset_y = height * math.sin(perp_angle)

    return [
        Point(mid_x + offset_x, mid_y + offset_y),
        Point(mid_x - offset_x, mid_y - offset_y),
    ]


def _candidate_angles(start: Point, end: Point, center: Point) -> Tuple[float, float]:
    start_angle = math.atan2(start.y - center.y, start.x - center.x)
    end_angle = math.atan2(end.y - center.y, end.x - center.x)
    return start_angle, end_angle


def _matches_large_arc_flag(sweep: float, large_arc: bool) -> bool:
    # Semicircles satisfy either flag
    if abs(sweep - math.pi) <= SWEEP_TOLERANCE:
        return True
    is_large = sweep > math.pi + SWEEP_TOLERANCE
    return is_large == large_arc


def solve_arc(
    start: Point,
    end: Point,
    radius: float,
    direction: int = 1,
    large_arc: bool = False,
    raw_type: Optional[str] = None
) -> Optional[ArcSegment]:
    """
    Solve the center and sweep of an arc given by endpoints and radius.

    Args:
        start: Arc start point
        end: Arc end point
        radius: Arc radius (sign ignored)
        direction: +1 for CCW, -1 for CW
        large_arc: Prefer the major (>180 degree) solution
        raw_type: Type token carried through for diagnostics

    Returns:
        ArcSegment, or None if no arc can join the points with this radius
    """
    if not is_finite_point(start) or not is_finite_point(end):
        return None
    if radius is None or not math.isfinite(radius):
        return None
    radius = abs(radius)
    if radius < MIN_RADIUS:
        return None

    direction = 1 if direction >= 0 else -1

    chord = math.hypot(end.x - start.x, end.y - start.y)
    if chord < CHORD_EPSILON:
        return None
    if radius < chord / 2 - CHORD_EPSILON:
        return None

    candidates = []
    for center in calculate_candidate_centers(start, end, radius):
        start_angle, end_angle = _candidate_angles(start, end, center)
        sweep = calculate_unsigned_sweep(start_angle, end_angle, direction)
        if not math.isfinite(sweep) or sweep < SWEEP_TOLERANCE:
            continue
        candidates.append((center, start_angle, end_angle, sweep))

    if not candidates:
        return None

    chosen = next(
        (c for c in candidates if _matches_large_arc_flag(c[3], large_arc)),
        candidates[0]
    )
    center, start_angle, end_angle, _ = chosen

    signed_sweep = calculate_signed_sweep(start_angle, end_angle, direction)

    return ArcSegment(
        start=Point(start.x, start.y),
        end=Point(end.x, end.y),
        center=Point(center.x, center.y),
        radius=radius,
        start_angle=start_angle,
        end_angle=end_angle,
        clockwise=direction < 0,
        sweep=abs(signed_sweep),
        signed_sweep=signed_sweep,
        large_arc=bool(large_arc),
        raw_type=raw_type
    )
