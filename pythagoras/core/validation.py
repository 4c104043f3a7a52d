"""Opt-in checks for completed right angles.

The resolver never calls these on its own. ``validate_domain`` backs the
resolver's strict mode; ``is_consistent`` is available to callers that
want to cross-check over-specified input themselves.
"""

from __future__ import annotations

import math

from ..models import DomainError, RightAngle
from .tolerances import CONSISTENCY_ABS, CONSISTENCY_REL


def find_non_finite_fields(triangle: RightAngle) -> list[str]:
    """
    List the fields of a right angle holding NaN or infinity.

    Args:
        triangle: Completed right angle

    Returns:
        Field names in radians, rise, run, diagonal order
    """
    return [
        name for name, value in triangle.to_dict().items()
        if math.isnan(value) or math.isinf(value)
    ]


def validate_domain(triangle: RightAngle) -> None:
    """
    Ensure every field of a completed right angle is a finite number.

    Args:
        triangle: Completed right angle

    Raises:
        DomainError: If any field is NaN or infinite
    """
    bad_fields = find_non_finite_fields(triangle)
    if bad_fields:
        raise DomainError(
            f"Non-finite value for {', '.join(bad_fields)}: {triangle!r}"
        )


def is_consistent(
    triangle: RightAngle,
    rel_tol: float = CONSISTENCY_REL,
    abs_tol: float = CONSISTENCY_ABS,
) -> bool:
    """
    Check that the sides and angle describe the same right triangle.

    Args:
        triangle: Completed right angle
        rel_tol: Relative tolerance for both comparisons
        abs_tol: Absolute tolerance floor for both comparisons

    Returns:
        True if rise² + run² matches diagonal² and the angle matches
        atan2(rise, run). False otherwise, including for any NaN field.
    """
    if find_non_finite_fields(triangle):
        return False

    sides_match = math.isclose(
        triangle.rise * triangle.rise + triangle.run * triangle.run,
        triangle.diagonal * triangle.diagonal,
        rel_tol=rel_tol,
        abs_tol=abs_tol,
    )
    angle_match = math.isclose(
        triangle.radians,
        math.atan2(triangle.rise, triangle.run),
        rel_tol=rel_tol,
        abs_tol=abs_tol,
    )
    return sides_match and angle_match
