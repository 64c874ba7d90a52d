"""Path reconstruction service for the JSON API."""
import math
from typing import Dict, List, Optional

from flask import current_app

from paf_geometry.command_decoder import infer_arc_direction, is_large_arc
from paf_geometry.models import Point, SourceRecord
from paf_geometry.reconstruction import reconstruct_path
from paf_geometry.utils.arc_sampler import sample_arc_points
from paf_geometry.utils.arc_solver import solve_arc
from paf_geometry.utils.path_analysis import (
    calculate_path_bounds,
    calculate_path_length,
    calculate_path_winding,
    find_chain_gaps,
    path_segments_close_loop
)
from paf_geometry.utils.validators import validate_source_records, validate_arc_geometry


class RequestValidationError(ValueError):
    """Raised when an API payload is malformed."""
    pass


class ReconstructionService:
    """Service for rebuilding path geometry from request payloads."""

    @staticmethod
    def parse_source(data: Dict) -> List[SourceRecord]:
        """
        Convert the 'source' list of a payload into SourceRecords.

        Individual records are not checked here; the decoder skips bad
        records on its own. Only the payload shape is validated.

        Raises:
            RequestValidationError: If source is missing, not a list, or too long
        """
        source = data.get('source')
        if not isinstance(source, list):
            raise RequestValidationError("'source' must be a list of records")

        max_records = current_app.config.get('MAX_SOURCE_RECORDS', 10000)
        if len(source) > max_records:
            raise RequestValidationError(f"'source' has {len(source)} records, limit is {max_records}")

        records = []
        for i, entry in enumerate(source):
            if not isinstance(entry, dict):
                raise RequestValidationError(f"Record {i} must be an object")
            numbers = entry.get('numbers')
            records.append(SourceRecord(
                command=entry.get('command'),
                numbers=numbers if isinstance(numbers, list) else [],
                type=entry.get('type')
            ))
        return records

    @staticmethod
    def parse_kind(data: Dict) -> str:
        kind = data.get('kind', 'polyline')
        if not isinstance(kind, str):
            raise RequestValidationError("'kind' must be a string")
        return kind

    @staticmethod
    def reconstruct(data: Dict) -> Optional[Dict]:
        """
        Reconstruct a path from a payload with 'kind' and 'source'.

        Returns:
            Dict with points, path_segments, closed, bounds, length and
            winding, or None if nothing could be reconstructed
        """
        kind = ReconstructionService.parse_kind(data)
        records = ReconstructionService.parse_source(data)

        result = reconstruct_path(records, kind)
        if result is None:
            return None

        response = result.to_dict()
        response['kind'] = kind
        response['bounds'] = calculate_path_bounds(result.points)
        response['length'] = calculate_path_length(result.path_segments)
        response['winding'] = calculate_path_winding(result.points) if result.closed else 0.0
        response['fallback_count'] = sum(
            1 for segment in result.path_segments if getattr(segment, 'fallback', False)
        )
        response['chain_closed'] = path_segments_close_loop(result.path_segments)
        return response

    @staticmethod
    def parse_point(data: Dict, key: str) -> Point:
        value = data.get(key)
        if not isinstance(value, dict):
            raise RequestValidationError(f"'{key}' must be an object with x and y")
        try:
            x = float(value['x'])
            y = float(value['y'])
        except (KeyError, TypeError, ValueError):
            raise RequestValidationError(f"'{key}' must have numeric x and y")
        if not math.isfinite(x) or not math.isfinite(y):
            raise RequestValidationError(f"'{key}' must have finite x and y")
        return Point(x, y)

    @staticmethod
    def solve_single_arc(data: Dict) -> Optional[Dict]:
        """
        Solve a single arc from start, end, radius and direction.

        Direction comes from 'direction' (a type token such as 'cw', or -1
        or 1) or, when absent, from a KB 'type' token, which also sets the
        large-arc flag.

        Returns:
            Dict with the arc and its sampled points, or None if infeasible
        """
        start = ReconstructionService.parse_point(data, 'start')
        end = ReconstructionService.parse_point(data, 'end')

        try:
            radius = float(data.get('radius'))
        except (TypeError, ValueError):
            raise RequestValidationError("'radius' must be a number")

        type_token = data.get('type')
        direction_value = data.get('direction')
        if direction_value is None:
            direction = infer_arc_direction(type_token)
        elif isinstance(direction_value, str):
            direction = infer_arc_direction(direction_value)
        elif isinstance(direction_value, (int, float)):
            direction = 1 if direction_value >= 0 else -1
        else:
            raise RequestValidationError("'direction' must be a type token, 1 or -1")

        large_arc = data.get('large_arc')
        if large_arc is None:
            large_arc = is_large_arc(type_token)

        arc = solve_arc(start, end, radius, direction, bool(large_arc), type_token)
        if arc is None:
            return None

        response = arc.to_dict()
        response['points'] = [p.to_dict() for p in sample_arc_points(arc)]
        return response

    @staticmethod
    def validate(data: Dict) -> List[str]:
        """
        Validate a payload's source records and the arcs they produce.

        Returns list of messages (empty if valid).
        """
        kind = ReconstructionService.parse_kind(data)
        records = ReconstructionService.parse_source(data)

        errors = validate_source_records(records)

        result = reconstruct_path(records, kind)
        if result is None:
            errors.append("Source records do not produce any geometry")
        else:
            errors.extend(
                f"Segment {i} does not end where segment {i + 1} starts"
                for i in find_chain_gaps(result.path_segments)
            )
            errors.extend(validate_arc_geometry(result.path_segments))

        return errors
