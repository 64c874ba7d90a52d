"""
End-to-end tests for segment reconstruction.

Scenarios mirror real PAF drafts: straight polygons, single arcs and
arcs whose radius is too small for their chord.
"""

import math

from paf_geometry.models import ArcSegment, LineSegment, PafSegment, Point
from paf_geometry.reconstruction import rebuild_segment_geometry, reconstruct_path


def PP(x, y):
    return {'command': 'PP', 'numbers': [x, y]}


def KB(x, y, r, type_token=None):
    return {'command': 'KB', 'numbers': [x, y, r], 'type': type_token}


SQUARE_SOURCE = [PP(0, 0), PP(4, 0), PP(4, 4), PP(0, 4)]


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_square_polygon(self):
        """Four PP records as a polygon: 4 stored points, 3 line segments."""
        result = reconstruct_path(SQUARE_SOURCE, 'polygon')

        assert result is not None
        assert result.points == [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
        assert len(result.path_segments) == 3
        assert all(isinstance(s, LineSegment) for s in result.path_segments)
        assert result.closed is True

    def test_semicircle_polyline(self):
        """PP(0,0) then KB(4,0,r=2) with no token: one CCW semicircle."""
        result = reconstruct_path([PP(0, 0), KB(4, 0, 2)], 'polyline')

        assert len(result.path_segments) == 1
        arc = result.path_segments[0]
        assert isinstance(arc, ArcSegment)
        assert abs(arc.center.x - 2.0) < 1e-9
        assert abs(arc.center.y) < 1e-9
        assert abs(arc.sweep - math.pi) < 1e-9
        assert arc.clockwise is False

        assert result.points[0] == Point(0, 0)
        assert result.points[-1] == Point(4, 0)
        assert len(result.points) > 2

    def test_infeasible_arc_falls_back(self):
        """KB radius 1 over a chord of 10: a fallback line, polyline keeps 2 points."""
        result = reconstruct_path([PP(0, 0), KB(10, 0, 1, 'cw')], 'polyline')

        assert result.path_segments == [LineSegment(Point(0, 0), Point(10, 0), fallback=True)]
        assert result.points == [Point(0, 0), Point(10, 0)]

    def test_ccw_token_decodes_clockwise(self):
        """A 'ccw' token holds 'cw': quarter arc (1,0) -> (0,1) turns clockwise around (1,1)."""
        result = reconstruct_path([PP(1, 0), KB(0, 1, 1, 'ccw')], 'polyline')

        arc = result.path_segments[0]
        assert arc.clockwise is True
        assert abs(arc.center.x - 1.0) < 1e-9
        assert abs(arc.center.y - 1.0) < 1e-9
        assert abs(arc.signed_sweep + math.pi / 2) < 1e-9

    def test_rounded_rectangle_polygon(self):
        source = [
            PP(2, 0), PP(8, 0), KB(10, 2, 2),
            PP(10, 6), KB(8, 8, 2),
            PP(2, 8), KB(0, 6, 2),
            PP(0, 2), KB(2, 0, 2),
        ]
        result = reconstruct_path(source, 'polygon')

        arcs = [s for s in result.path_segments if isinstance(s, ArcSegment)]
        assert len(arcs) == 4
        for arc in arcs:
            assert abs(arc.sweep - math.pi / 2) < 1e-9
            assert arc.clockwise is False

        # Explicit closing point was dropped
        assert result.points[0] == Point(2, 0)
        assert result.points[-1] != Point(2, 0)
        assert result.closed is True

    def test_polyline_keeps_closing_point(self):
        result = reconstruct_path(SQUARE_SOURCE + [PP(0, 0)], 'polyline')
        assert len(result.points) == 5
        assert result.closed is True

    def test_deterministic(self):
        source = [PP(0, 0), KB(4, 0, 3, 'CW'), PP(4, 4), KB(0, 0, 10, 'ccw')]
        first = reconstruct_path(source, 'polygon')
        second = reconstruct_path(source, 'polygon')
        assert first == second

    def test_source_not_mutated(self):
        source = [PP(0, 0), KB(4, 0, 2, 'cw')]
        snapshot = [dict(r, numbers=list(r['numbers'])) for r in source]
        reconstruct_path(source, 'polyline')
        assert source == snapshot

    def test_empty_source(self):
        assert reconstruct_path([], 'polygon') is None
        assert reconstruct_path(None, 'polyline') is None

    def test_all_records_invalid(self):
        source = [PP(float('nan'), 0), {'command': 'KB', 'numbers': [1]}]
        assert reconstruct_path(source, 'polyline') is None

    def test_polygon_with_single_point_fails(self):
        assert reconstruct_path([PP(1, 1)], 'polygon') is None

    def test_polyline_with_single_point(self):
        result = reconstruct_path([PP(1, 1)], 'polyline')
        assert result.points == [Point(1, 1)]
        assert result.path_segments == []

    def test_to_dict_uses_from_to(self):
        data = reconstruct_path([PP(0, 0), PP(1, 0)], 'polyline').to_dict()

        assert data['points'] == [{'x': 0, 'y': 0}, {'x': 1, 'y': 0}]
        assert data['path_segments'][0]['from'] == {'x': 0, 'y': 0}
        assert data['path_segments'][0]['to'] == {'x': 1, 'y': 0}
        assert data['path_segments'][0]['type'] == 'line'


class TestRebuildSegmentGeometry:
    """Tests for rebuild_segment_geometry."""

    def test_writes_geometry_on_success(self):
        segment = PafSegment(kind='polygon', source=list(SQUARE_SOURCE))

        assert rebuild_segment_geometry(segment) is True
        assert len(segment.points) == 4
        assert len(segment.path_segments) == 3

    def test_clears_geometry_on_failure(self):
        segment = PafSegment(
            kind='polygon',
            source=[],
            points=[Point(9, 9)],
            path_segments=[LineSegment(Point(0, 0), Point(9, 9))]
        )

        assert rebuild_segment_geometry(segment) is False
        assert segment.points == []
        assert segment.path_segments == []

    def test_invalid_records_clear_geometry(self):
        segment = PafSegment(kind='polyline', source=[PP(None, None)], points=[Point(1, 1)])
        assert rebuild_segment_geometry(segment) is False
        assert segment.points == []

    def test_idempotent(self):
        segment = PafSegment(kind='polygon', source=[PP(0, 0), KB(4, 0, 2, 'cw'), PP(4, 4)])

        assert rebuild_segment_geometry(segment) is True
        points, path_segments = list(segment.points), list(segment.path_segments)

        assert rebuild_segment_geometry(segment) is True
        assert segment.points == points
        assert segment.path_segments == path_segments

    def test_none_segment(self):
        assert rebuild_segment_geometry(None) is False
