"""Pythagoras - complete right triangles from partial measurements.

Sides and the angle are consistently referred to as:
    rise: the opposite side (a)
    run: the adjacent side (b)
    diagonal: the hypotenuse (c)
    radians: the angle between run and diagonal (r)

Fill in whatever you know in a RightAngleInput and ``complete`` derives
the rest.

Note: Angles are always in radians. Convert degrees with ``math.radians``.
"""

from . import core
from . import models
from . import serialization
from .core import complete, complete_from_angle, complete_from_sides
from .models import RightAngle, RightAngleInput
from .serialization import parse_and_complete

__all__ = [
    'core',
    'models',
    'serialization',
    'complete',
    'complete_from_angle',
    'complete_from_sides',
    'RightAngle',
    'RightAngleInput',
    'parse_and_complete',
]
