"""Right triangle primitives.

Each function takes two known quantities and returns a third, using a
single closed-form expression. Names read as ``<result>_from_<inputs>``.

Inputs are not validated. Values outside a function's natural domain
(asin of a ratio above 1, division by zero) produce NaN or infinity
following IEEE-754 rules instead of raising. An infinite angle gives NaN.

If you have an angle in degrees, pass ``math.radians(angle)``.
"""

from __future__ import annotations

import math
from collections.abc import Callable


def _ratio(numerator: float, denominator: float) -> float:
    """Divide, letting a zero denominator yield infinity or NaN like IEEE-754."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _nan_outside_unit(value: float) -> float:
    """Map ratios outside [-1, 1] to NaN so asin/acos return NaN instead of raising."""
    if -1.0 <= value <= 1.0:
        return value
    return math.nan


def _sqrt(value: float) -> float:
    """Square root that returns NaN for negative input instead of raising."""
    if value < 0:
        return math.nan
    return math.sqrt(value)


def _trig(fn: Callable[[float], float], radians: float) -> float:
    """Apply sin, cos or tan, returning NaN for an infinite angle instead of raising."""
    if math.isinf(radians):
        return math.nan
    return fn(radians)


# Sides from sides

def diagonal_from_rise_run(rise: float, run: float) -> float:
    """Return the hypotenuse given the rise and run."""
    return _sqrt(rise * rise + run * run)


def rise_from_run_diagonal(run: float, diagonal: float) -> float:
    """Return the opposite side given the adjacent side and hypotenuse."""
    return _sqrt(diagonal * diagonal - run * run)


def run_from_rise_diagonal(rise: float, diagonal: float) -> float:
    """Return the adjacent side given the opposite side and hypotenuse."""
    return _sqrt(diagonal * diagonal - rise * rise)


# Angle from sides

def radians_from_rise_diagonal(rise: float, diagonal: float) -> float:
    """Return the angle given the opposite side and hypotenuse."""
    return math.asin(_nan_outside_unit(_ratio(rise, diagonal)))


def radians_from_rise_run(rise: float, run: float) -> float:
    """Return the angle given the opposite and adjacent sides."""
    return math.atan(_ratio(rise, run))


def radians_from_run_diagonal(run: float, diagonal: float) -> float:
    """Return the angle given the adjacent side and hypotenuse."""
    return math.acos(_nan_outside_unit(_ratio(run, diagonal)))


# Sides from the angle and one side

def run_from_radians_rise(radians: float, rise: float) -> float:
    """Return the adjacent side given the angle and opposite side."""
    return _ratio(rise, _trig(math.tan, radians))


def diagonal_from_radians_rise(radians: float, rise: float) -> float:
    """Return the hypotenuse given the angle and opposite side."""
    return _ratio(rise, _trig(math.sin, radians))


def rise_from_radians_run(radians: float, run: float) -> float:
    """Return the opposite side given the angle and adjacent side."""
    return _trig(math.tan, radians) * run


def diagonal_from_radians_run(radians: float, run: float) -> float:
    """Return the hypotenuse given the angle and adjacent side."""
    return _ratio(run, _trig(math.cos, radians))


def rise_from_radians_diagonal(radians: float, diagonal: float) -> float:
    """Return the opposite side given the angle and hypotenuse."""
    return diagonal * _trig(math.sin, radians)


def run_from_radians_diagonal(radians: float, diagonal: float) -> float:
    """Return the adjacent side given the angle and hypotenuse."""
    return diagonal * _trig(math.cos, radians)


# Two sides from the angle and one side

def run_diagonal_from_radians_rise(radians: float, rise: float) -> tuple[float, float]:
    """
    Calculate the adjacent side and hypotenuse from the angle and opposite side.

    Args:
        radians: Angle between run and diagonal
        rise: Opposite side

    Returns:
        Tuple of (run, diagonal)
    """
    run = run_from_radians_rise(radians, rise)
    diagonal = diagonal_from_rise_run(rise, run)
    return run, diagonal


def rise_diagonal_from_radians_run(radians: float, run: float) -> tuple[float, float]:
    """
    Calculate the opposite side and hypotenuse from the angle and adjacent side.

    Args:
        radians: Angle between run and diagonal
        run: Adjacent side

    Returns:
        Tuple of (rise, diagonal)
    """
    rise = rise_from_radians_run(radians, run)
    diagonal = diagonal_from_rise_run(rise, run)
    return rise, diagonal


def rise_run_from_radians_diagonal(radians: float, diagonal: float) -> tuple[float, float]:
    """
    Calculate the opposite and adjacent sides from the angle and hypotenuse.

    Args:
        radians: Angle between run and diagonal
        diagonal: Hypotenuse

    Returns:
        Tuple of (rise, run)
    """
    rise = rise_from_radians_diagonal(radians, diagonal)
    run = run_from_radians_diagonal(radians, diagonal)
    return rise, run
