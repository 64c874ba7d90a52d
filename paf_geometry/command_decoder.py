"""Decode PAF source records into typed drafting commands.

Only two record commands carry geometry:
    PP  x, y, ...              point (move for the first record, line after)
    KB  x, y, radius, ... type radius-point (arc after a start point exists)

Direction and arc size are read from the KB type token:
    - 'cw' anywhere (so 'ccw' too) -> clockwise
    - 'cc' anywhere                -> counter-clockwise
    - otherwise trailing 'w'       -> clockwise, else counter-clockwise
    - all upper-case token         -> large arc (> 180 degrees)
"""
import logging
import math
from collections.abc import Sequence
from typing import Any, Iterable, List, Mapping, Optional, Union

from paf_geometry.models import DraftCommand, Point, SourceRecord

logger = logging.getLogger(__name__)

POINT_COMMAND = 'PP'
RADIUS_POINT_COMMAND = 'KB'


def infer_arc_direction(type_token: Optional[str]) -> int:
    """
    Infer the rotation direction from a KB type token.

    Args:
        type_token: Raw type token (may be None)

    Returns:
        +1 for counter-clockwise (default), -1 for clockwise
    """
    if not isinstance(type_token, str):
        return 1
    normalized = type_token.strip().lower()
    if not normalized:
        return 1
    if 'cw' in normalized:  # also matches 'ccw'
        return -1
    if 'cc' in normalized:
        return 1
    return -1 if normalized.endswith('w') else 1


def is_large_arc(type_token: Optional[str]) -> bool:
    """Check if a KB type token requests the major arc (all upper-case)."""
    if not isinstance(type_token, str):
        return False
    trimmed = type_token.strip()
    if not trimmed:
        return False
    return trimmed == trimmed.upper()


def record_field(record: Union[SourceRecord, Mapping], name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _to_finite(value: Any) -> Optional[float]:
    """Coerce a numeric field to a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def read_record_numbers(record: Union[SourceRecord, Mapping], count: int) -> Optional[List[float]]:
    """
    Read the first `count` numeric fields of a record.

    Returns:
        List of finite floats, or None if any field is missing or not finite
    """
    numbers = record_field(record, 'numbers')
    if not isinstance(numbers, Sequence) or isinstance(numbers, (str, bytes)):
        return None
    if len(numbers) < count:
        return None
    values = [_to_finite(n) for n in numbers[:count]]
    if any(v is None for v in values):
        return None
    return values


def decode_commands(records: Optional[Iterable[Union[SourceRecord, Mapping]]]) -> List[DraftCommand]:
    """
    Decode source records into drafting commands.

    The first usable record always fixes the start point. A leading KB record
    becomes a line command, which the path builder treats as a move.
    Unusable records are skipped individually.

    Args:
        records: Ordered PP/KB source records (SourceRecord or dict)

    Returns:
        Commands in record order, minus dropped records
    """
    commands: List[DraftCommand] = []
    first = True

    for index, record in enumerate(records or []):
        if record is None:
            continue
        command = record_field(record, 'command')

        if command == POINT_COMMAND:
            values = read_record_numbers(record, 2)
            if values is None:
                logger.debug("Dropping PP record %d: missing or non-finite coordinates", index)
                continue
            commands.append(DraftCommand(
                kind='move' if first else 'line',
                point=Point(values[0], values[1])
            ))
            first = False

        elif command == RADIUS_POINT_COMMAND:
            values = read_record_numbers(record, 3)
            if values is None:
                logger.debug("Dropping KB record %d: missing or non-finite coordinates/radius", index)
                continue
            type_token = record_field(record, 'type')
            commands.append(DraftCommand(
                kind='line' if first else 'arc',
                point=Point(values[0], values[1]),
                radius=abs(values[2]),
                direction=infer_arc_direction(type_token),
                large_arc=is_large_arc(type_token),
                raw_type=type_token
            ))
            first = False

    return commands
