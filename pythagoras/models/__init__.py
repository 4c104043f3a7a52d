"""Data models for right angle completion."""

from .errors import (
    RightAngleError,
    TooFewSidesError,
    TooManySidesError,
    AngleRequiredError,
    InvalidInputError,
    DomainError,
    RightAngleParseError,
)
from .right_angle import (
    SIDE_NAMES,
    SideName,
    RightAngle,
    RightAngleDict,
    RightAngleInput,
    RightAngleInputDict,
)

__all__ = [
    # Errors
    'RightAngleError',
    'TooFewSidesError',
    'TooManySidesError',
    'AngleRequiredError',
    'InvalidInputError',
    'DomainError',
    'RightAngleParseError',
    # Records
    'SIDE_NAMES',
    'SideName',
    'RightAngle',
    'RightAngleDict',
    'RightAngleInput',
    'RightAngleInputDict',
]
