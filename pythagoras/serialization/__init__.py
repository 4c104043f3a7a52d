"""Text interchange for right angle records."""

from .json_bridge import (
    parse_input,
    load_right_angle,
    dump_input,
    dump_right_angle,
    parse_and_complete,
)

__all__ = [
    'parse_input',
    'load_right_angle',
    'dump_input',
    'dump_right_angle',
    'parse_and_complete',
]
