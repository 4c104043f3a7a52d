"""Core right angle calculations."""

from .trig import (
    diagonal_from_rise_run,
    rise_from_run_diagonal,
    run_from_rise_diagonal,
    radians_from_rise_diagonal,
    radians_from_rise_run,
    radians_from_run_diagonal,
    run_from_radians_rise,
    diagonal_from_radians_rise,
    rise_from_radians_run,
    diagonal_from_radians_run,
    rise_from_radians_diagonal,
    run_from_radians_diagonal,
    run_diagonal_from_radians_rise,
    rise_diagonal_from_radians_run,
    rise_run_from_radians_diagonal,
)
from .resolver import (
    NoSides,
    OneSide,
    TwoSides,
    ThreeSides,
    KnownSides,
    classify,
    complete,
    complete_from_angle,
    complete_from_sides,
)
from .validation import (
    find_non_finite_fields,
    validate_domain,
    is_consistent,
)
from .tolerances import (
    CONSISTENCY_REL,
    CONSISTENCY_ABS,
)

__all__ = [
    # Sides from sides
    'diagonal_from_rise_run',
    'rise_from_run_diagonal',
    'run_from_rise_diagonal',
    # Angle from sides
    'radians_from_rise_diagonal',
    'radians_from_rise_run',
    'radians_from_run_diagonal',
    # Sides from angle and side
    'run_from_radians_rise',
    'diagonal_from_radians_rise',
    'rise_from_radians_run',
    'diagonal_from_radians_run',
    'rise_from_radians_diagonal',
    'run_from_radians_diagonal',
    # Two sides from angle and side
    'run_diagonal_from_radians_rise',
    'rise_diagonal_from_radians_run',
    'rise_run_from_radians_diagonal',
    # Resolver
    'NoSides',
    'OneSide',
    'TwoSides',
    'ThreeSides',
    'KnownSides',
    'classify',
    'complete',
    'complete_from_angle',
    'complete_from_sides',
    # Validation
    'find_non_finite_fields',
    'validate_domain',
    'is_consistent',
    # Tolerances
    'CONSISTENCY_REL',
    'CONSISTENCY_ABS',
]
