"""Shared dataclasses for PAF path reconstruction."""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union, Any


@dataclass(frozen=True)
class Point:
    """A 2D coordinate point."""
    x: float
    y: float

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}


@dataclass
class SourceRecord:
    """A decoded drafting record ('PP' point or 'KB' radius-point)."""
    command: str
    numbers: Sequence[Any]
    type: Optional[str] = None  # direction/size token, KB only


@dataclass(frozen=True)
class DraftCommand:
    """A typed drafting command produced by the command decoder."""
    kind: str  # 'move', 'line', 'arc'
    point: Point
    radius: Optional[float] = None
    direction: int = 1     # +1 CCW, -1 CW
    large_arc: bool = False
    raw_type: Optional[str] = None


@dataclass(frozen=True)
class LineSegment:
    """A straight segment. fallback marks an arc that could not be solved."""
    start: Point
    end: Point
    fallback: bool = False
    type: str = field(default='line', init=False)

    def to_dict(self) -> dict:
        return {
            'type': self.type,
            'from': self.start.to_dict(),
            'to': self.end.to_dict(),
            'fallback': self.fallback,
        }


@dataclass(frozen=True)
class ArcSegment:
    """A circular segment with its solved center and sweep."""
    start: Point
    end: Point
    center: Point
    radius: float
    start_angle: float     # radians
    end_angle: float       # radians
    clockwise: bool
    sweep: float           # unsigned, [0, 2pi)
    signed_sweep: float    # negative when clockwise
    large_arc: bool
    raw_type: Optional[str] = None
    type: str = field(default='arc', init=False)

    def to_dict(self) -> dict:
        return {
            'type': self.type,
            'from': self.start.to_dict(),
            'to': self.end.to_dict(),
            'center': self.center.to_dict(),
            'radius': self.radius,
            'start_angle': self.start_angle,
            'end_angle': self.end_angle,
            'clockwise': self.clockwise,
            'sweep': self.sweep,
            'signed_sweep': self.signed_sweep,
            'large_arc': self.large_arc,
            'raw_type': self.raw_type,
        }


PathSegment = Union[LineSegment, ArcSegment]


@dataclass(frozen=True)
class ReconstructedPath:
    """Result of rebuilding a segment's geometry from its source records."""
    points: List[Point]
    path_segments: List[PathSegment]
    closed: bool = False

    def to_dict(self) -> dict:
        return {
            'points': [p.to_dict() for p in self.points],
            'path_segments': [s.to_dict() for s in self.path_segments],
            'closed': self.closed,
        }


@dataclass
class PafSegment:
    """A routing segment record owning its source records and rebuilt geometry."""
    kind: str  # 'polygon' or 'polyline'
    source: List[Union[SourceRecord, dict]] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)
    path_segments: List[PathSegment] = field(default_factory=list)
