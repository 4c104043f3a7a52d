"""Error types raised while completing a right angle.

Every error here signals malformed caller input. Nothing is retried and
nothing is recovered from; the error is surfaced to the caller unchanged.
"""

from __future__ import annotations


class RightAngleError(ValueError):
    """Base class for errors raised by the resolver."""

    message: str = "Invalid right angle input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class TooFewSidesError(RightAngleError):
    """Raised when no side (or not enough sides) was supplied."""

    message = "There must be at least one side"


class TooManySidesError(RightAngleError):
    """Raised when the angle strategy receives more than one side."""

    message = "Too many sides were provided for this method"


class AngleRequiredError(RightAngleError):
    """Raised when exactly one side was supplied without the angle."""

    message = "Angle is required when only one side is provided"


class InvalidInputError(RightAngleError):
    """Raised for input that cannot be classified at all."""

    message = "Invalid input"


class DomainError(RightAngleError):
    """Raised in strict mode when a completed field is NaN or infinite."""

    message = "Result is outside the numeric domain"


class RightAngleParseError(ValueError):
    """Raised when text cannot be parsed into a right angle record.

    Kept apart from RightAngleError so parse failures and resolver
    failures can be told apart by the caller.
    """

    pass
