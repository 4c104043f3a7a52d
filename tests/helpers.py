"""
Shared test helpers for pythagoras tests.

Constants for the 3-4-5 triangle and a comparison helper used across
multiple test files.
"""
from __future__ import annotations

import math

import pytest

from pythagoras.models import RightAngle

RISE_345: float = 3.0
RUN_345: float = 4.0
DIAGONAL_345: float = 5.0
RADIANS_345: float = math.atan2(RISE_345, RUN_345)

# Rounded angle as commonly quoted for the 3-4-5 triangle
RADIANS_345_ROUNDED: float = 0.6435011

RIGHT_ANGLE_345 = RightAngle(
    radians=RADIANS_345,
    rise=RISE_345,
    run=RUN_345,
    diagonal=DIAGONAL_345,
)

REL_TOL: float = 1e-5


def assert_right_angle_close(
    actual: RightAngle,
    expected: RightAngle,
    rel: float = REL_TOL,
) -> None:
    """Assert every field of two right angles matches within a relative tolerance."""
    assert actual.rise == pytest.approx(expected.rise, rel=rel)
    assert actual.run == pytest.approx(expected.run, rel=rel)
    assert actual.diagonal == pytest.approx(expected.diagonal, rel=rel)
    assert actual.radians == pytest.approx(expected.radians, rel=rel)
